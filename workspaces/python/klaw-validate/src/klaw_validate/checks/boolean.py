"""Boolean processors: ``is_boolean``, ``maybe_boolean``, ``as_boolean``, ``maybe_as_boolean``."""

from __future__ import annotations

from typing import Any

from klaw_validate.convert import converter
from klaw_validate.factory import create_as_check, create_is_check, create_maybe_as_check, create_maybe_check
from klaw_validate.options import Options
from klaw_validate.pipeline import Passthrough
from klaw_validate.result import Err

__all__ = [
    'as_boolean',
    'is_boolean',
    'maybe_as_boolean',
    'maybe_boolean',
    'to_boolean',
]

_TRUE_WORDS = frozenset({'true', 'yes', 'on', '1'})
_FALSE_WORDS = frozenset({'false', 'no', 'off', '0'})


def check_boolean(value: Any) -> bool:
    return isinstance(value, bool)


@converter
def to_boolean(value: Any) -> bool | None:
    """Convert flags, 1/0 and yes/no style words to bool."""
    return None


@to_boolean.instance(bool)
def _bool_to_boolean(value: bool) -> bool:
    return value


@to_boolean.instance(int, float)
def _number_to_boolean(value: int | float) -> bool | None:
    if value == 1:
        return True
    if value == 0:
        return False
    return None


@to_boolean.instance(str)
def _str_to_boolean(value: str) -> bool | None:
    word = value.strip().lower()
    if word in _TRUE_WORDS:
        return True
    if word in _FALSE_WORDS:
        return False
    return None


def coerce_boolean(options: Options) -> Passthrough:
    return Passthrough()


def validate_boolean(value: bool, options: Options) -> Err | None:
    return None


is_boolean = create_is_check('boolean', check_boolean, coerce_boolean, validate_boolean)
maybe_boolean = create_maybe_check('boolean', check_boolean, coerce_boolean, validate_boolean)
as_boolean = create_as_check('boolean', to_boolean, coerce_boolean, validate_boolean)
maybe_as_boolean = create_maybe_as_check('boolean', check_boolean, to_boolean, coerce_boolean, validate_boolean)
