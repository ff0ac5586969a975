"""Assertion helpers shared by the processor tests."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from klaw_validate import Err, Issue, Ok, Processor


def expect_issue(processor: Processor[Any], value: Any, reason: str, path: Sequence[str | int] = ()) -> Issue:
    """Assert that processing ``value`` yields exactly one issue with ``reason`` at ``path``."""
    result = processor.process(value)
    assert isinstance(result, Err), f'expected {reason!r} issue for {value!r}, got {result!r}'
    assert len(result.issues) == 1, f'expected one issue, got {result.issues!r}'
    issue = result.issues[0]
    assert issue.reason == reason
    assert issue.path == tuple(path)
    return issue


def expect_value(processor: Processor[Any], value: Any, expected: Any) -> Any:
    """Assert that processing ``value`` succeeds with ``expected``."""
    result = processor.process(value)
    assert isinstance(result, Ok), f'expected success for {value!r}, got {result!r}'
    assert result.value == expected
    return result.value


def expect_success(processor: Processor[Any], value: Any) -> Any:
    """Assert that ``value`` is accepted unchanged."""
    return expect_value(processor, value, value)
