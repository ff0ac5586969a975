"""Library configuration: ValidateConfig and initialization.

Configuration here covers ambient concerns only (logging). Processor
behaviour is fixed by the options given at construction and never reads
this module.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from klaw_validate._logging import configure_logging

__all__ = [
    'ValidateConfig',
    'get_config',
    'init',
]

_TRUTHY = frozenset({'1', 'true', 'yes', 'on'})
_FALSY = frozenset({'0', 'false', 'no', 'off'})


@dataclass(frozen=True)
class ValidateConfig:
    """Configuration for klaw-validate.

    Attributes:
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = silent.
        json_output: Emit JSON logs (True) or console logs (False).
    """

    log_level: str | None = None
    json_output: bool = True


# Global configuration (set by init())
_config: ValidateConfig | None = None


def _detect_log_level() -> str | None:
    """Read the log level from KLAW_VALIDATE_LOG_LEVEL, if set."""
    level = os.environ.get('KLAW_VALIDATE_LOG_LEVEL', '').strip().upper()
    if not level:
        return None
    if level not in logging.getLevelNamesMapping():
        logging.warning("Unknown KLAW_VALIDATE_LOG_LEVEL value '%s', ignoring", level)
        return None
    return level


def _detect_json_output() -> bool:
    """Read the output format from KLAW_VALIDATE_LOG_JSON (default: JSON)."""
    raw = os.environ.get('KLAW_VALIDATE_LOG_JSON', '').strip().lower()
    if raw in _FALSY:
        return False
    if raw and raw not in _TRUTHY:
        logging.warning("Unknown KLAW_VALIDATE_LOG_JSON value '%s', defaulting to JSON", raw)
    return True


def init(
    log_level: str | None = None,
    json_output: bool | None = None,
) -> ValidateConfig:
    """Initialize klaw-validate with the specified configuration.

    Explicit arguments win over the environment, which wins over defaults.

    Args:
        log_level: Logging level ("DEBUG", "INFO", etc.). None = use env or stay silent.
        json_output: JSON (True) or console (False) output. None = use env.

    Returns:
        The ValidateConfig that was set.

    Example:
        ```python
        from klaw_validate import init

        init(log_level='DEBUG', json_output=False)
        ```
    """
    global _config  # noqa: PLW0603

    resolved_level = log_level.upper() if log_level is not None else _detect_log_level()
    resolved_json = json_output if json_output is not None else _detect_json_output()

    _config = ValidateConfig(log_level=resolved_level, json_output=resolved_json)

    if resolved_level is not None:
        configure_logging(resolved_level, json_output=resolved_json)

    return _config


def get_config() -> ValidateConfig:
    """Get the current configuration.

    Raises:
        RuntimeError: If init() has not been called.
    """
    if _config is None:
        msg = 'klaw_validate not initialized. Call klaw_validate.init() first.'
        raise RuntimeError(msg)
    return _config
