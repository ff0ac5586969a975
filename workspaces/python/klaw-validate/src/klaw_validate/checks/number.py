"""Number processors: ``is_number``, ``maybe_number``, ``as_number``, ``maybe_as_number``.

Options:
    coerce_min / coerce_max: Clamp the value into these bounds.
    min / max: Reject values outside these bounds (reasons ``min``/``max``).

Clamping runs before validation, so ``coerce_max=500, max=400`` rejects
everything above 400 while ``coerce_max=500`` alone turns 543 into 500.

Numeric text must not contain ``_`` digit separators. Integer text longer
than the interpreter's int string limit has no conversion.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

from klaw_validate.convert import converter
from klaw_validate.factory import create_as_check, create_is_check, create_maybe_as_check, create_maybe_check
from klaw_validate.issue import Reason
from klaw_validate.options import Options
from klaw_validate.pipeline import Next
from klaw_validate.result import Err, Result

__all__ = [
    'NumberOptions',
    'as_number',
    'is_number',
    'maybe_as_number',
    'maybe_number',
    'to_number',
]

type Number = int | float


class NumberOptions(Options):
    coerce_min: int | float | None = None
    coerce_max: int | float | None = None
    min: int | float | None = None
    max: int | float | None = None

    def __post_init__(self) -> None:
        _ordered('coerce_min', self.coerce_min, 'coerce_max', self.coerce_max)
        _ordered('min', self.min, 'max', self.max)


def _ordered(low_name: str, low: Number | None, high_name: str, high: Number | None) -> None:
    if low is not None and high is not None and low > high:
        msg = f'{low_name} ({low}) cannot be greater than {high_name} ({high})'
        raise ValueError(msg)


def check_number(value: Any) -> bool:
    """Guard: an int or a non-NaN float. bool is not a number."""
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, float) and not math.isnan(value)


@converter
def to_number(value: Any) -> Number | None:
    """Convert numeric input to int or float."""
    return None


@to_number.instance(int, float)
def _number_to_number(value: Number) -> Number | None:
    return value if check_number(value) else None


@to_number.instance(bool)
def _bool_to_number(value: bool) -> Number | None:
    return None


@to_number.instance(str)
def _str_to_number(value: str) -> Number | None:
    text = value.strip()
    if not text or '_' in text:
        return None
    try:
        return int(text)
    except ValueError:
        number = float(text)
    return number if math.isfinite(number) else None


@dataclass(frozen=True, slots=True)
class Clamp:
    """Coercion stage clamping a number into ``[low, high]``."""

    low: Number | None = None
    high: Number | None = None

    def apply(self, value: Number, next_: Next) -> Result[Any]:
        if self.low is not None and value < self.low:
            value = self.low
        if self.high is not None and value > self.high:
            value = self.high
        return next_(value)


def coerce_number(options: NumberOptions) -> Clamp:
    return Clamp(options.coerce_min, options.coerce_max)


def validate_number(value: Number, options: NumberOptions) -> Err | None:
    if options.min is not None and value < options.min:
        return Err.of(value, Reason.MIN, {'min': options.min})
    if options.max is not None and value > options.max:
        return Err.of(value, Reason.MAX, {'max': options.max})
    return None


is_number = create_is_check('number', check_number, coerce_number, validate_number, NumberOptions)
maybe_number = create_maybe_check('number', check_number, coerce_number, validate_number, NumberOptions)
as_number = create_as_check('number', to_number, coerce_number, validate_number, NumberOptions)
maybe_as_number = create_maybe_as_check(
    'number', check_number, to_number, coerce_number, validate_number, NumberOptions
)
