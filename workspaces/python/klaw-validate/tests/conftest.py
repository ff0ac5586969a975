"""Pytest configuration and shared fixtures for klaw-validate tests."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import pytest

if TYPE_CHECKING:
    from collections.abc import Callable, Generator


@pytest.fixture
def package_logger() -> Generator[logging.Logger]:
    """The klaw_validate stdlib logger, restored after the test."""
    import structlog

    logger = logging.getLogger('klaw_validate')
    saved = (list(logger.handlers), logger.level, logger.propagate)
    yield logger
    logger.handlers[:] = saved[0]
    logger.setLevel(saved[1])
    logger.propagate = saved[2]
    structlog.reset_defaults()


@pytest.fixture
def log_events(caplog: pytest.LogCaptureFixture) -> Callable[[], list[dict[str, Any]]]:
    """Return a reader for structured events emitted by klaw_validate loggers."""
    caplog.set_level(logging.DEBUG, logger='klaw_validate')

    def events() -> list[dict[str, Any]]:
        return [record.msg for record in caplog.records if isinstance(record.msg, dict)]

    return events
