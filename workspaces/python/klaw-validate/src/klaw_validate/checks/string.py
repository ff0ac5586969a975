"""String processors: ``is_string``, ``maybe_string``, ``as_string``, ``maybe_as_string``.

The optional processors treat the empty string as absent, like None.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date
from typing import Any, Literal

from klaw_validate.convert import converter
from klaw_validate.factory import create_as_check, create_is_check, create_maybe_as_check, create_maybe_check
from klaw_validate.issue import Reason
from klaw_validate.options import NonNegativeInt, Options
from klaw_validate.pipeline import Next
from klaw_validate.result import Err, Result

__all__ = [
    'StringOptions',
    'as_string',
    'is_string',
    'maybe_as_string',
    'maybe_string',
    'to_string',
]


class StringOptions(Options):
    """Coercion (``trim``, ``case``) and validation (lengths, ``pattern``) options."""

    trim: bool = False
    case: Literal['lower', 'upper'] | None = None
    min_length: NonNegativeInt | None = None
    max_length: NonNegativeInt | None = None
    pattern: str | None = None

    def __post_init__(self) -> None:
        if self.min_length is not None and self.max_length is not None and self.min_length > self.max_length:
            msg = f'min_length ({self.min_length}) cannot be greater than max_length ({self.max_length})'
            raise ValueError(msg)
        if self.pattern is not None:
            try:
                re.compile(self.pattern)
            except re.error as e:
                msg = f'pattern {self.pattern!r} does not compile: {e}'
                raise ValueError(msg) from e


def check_string(value: Any) -> bool:
    return isinstance(value, str)


def none_or_empty_string(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value)


@converter
def to_string(value: Any) -> str | None:
    """Convert scalar input to its textual form."""
    return None


@to_string.instance(str)
def _str_to_string(value: str) -> str:
    return value


@to_string.instance(int, float)
def _number_to_string(value: int | float) -> str:
    return str(value)


@to_string.instance(bool)
def _bool_to_string(value: bool) -> str:
    return 'true' if value else 'false'


@to_string.instance(date)
def _date_to_string(value: date) -> str:
    return value.isoformat()


@dataclass(frozen=True, slots=True)
class Normalize:
    """Coercion stage: optional whitespace trimming and case folding."""

    trim: bool = False
    case: Literal['lower', 'upper'] | None = None

    def apply(self, value: str, next_: Next) -> Result[Any]:
        if self.trim:
            value = value.strip()
        if self.case == 'lower':
            value = value.lower()
        elif self.case == 'upper':
            value = value.upper()
        return next_(value)


def coerce_string(options: StringOptions) -> Normalize:
    return Normalize(options.trim, options.case)


def validate_string(value: str, options: StringOptions) -> Err | None:
    if options.min_length is not None and len(value) < options.min_length:
        return Err.of(value, Reason.MIN_LENGTH, {'min_length': options.min_length, 'length': len(value)})
    if options.max_length is not None and len(value) > options.max_length:
        return Err.of(value, Reason.MAX_LENGTH, {'max_length': options.max_length, 'length': len(value)})
    if options.pattern is not None and re.search(options.pattern, value) is None:
        return Err.of(value, Reason.PATTERN, {'pattern': options.pattern})
    return None


is_string = create_is_check('string', check_string, coerce_string, validate_string, StringOptions)
maybe_string = create_maybe_check(
    'string', check_string, coerce_string, validate_string, StringOptions, none_or_empty_string
)
as_string = create_as_check('string', to_string, coerce_string, validate_string, StringOptions)
maybe_as_string = create_maybe_as_check(
    'string', check_string, to_string, coerce_string, validate_string, StringOptions, none_or_empty_string
)
