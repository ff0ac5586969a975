"""Date processors: ``is_date``, ``maybe_date``, ``as_date``, ``maybe_as_date``.

Values are ``datetime.datetime`` instances. Conversion accepts dates
(midnight), ISO-8601 strings and epoch seconds (UTC). Bounds comparisons
treat naive datetimes as UTC, so naive and aware values never fail to compare.
"""

from __future__ import annotations

from datetime import UTC, date, datetime
from typing import Any

from klaw_validate.convert import converter
from klaw_validate.factory import create_as_check, create_is_check, create_maybe_as_check, create_maybe_check
from klaw_validate.issue import Reason
from klaw_validate.options import Options
from klaw_validate.pipeline import Passthrough
from klaw_validate.result import Err

__all__ = [
    'DateOptions',
    'as_date',
    'is_date',
    'maybe_as_date',
    'maybe_date',
    'to_date',
]


class DateOptions(Options):
    min: datetime | None = None
    max: datetime | None = None

    def __post_init__(self) -> None:
        if self.min is not None and self.max is not None and _as_aware(self.min) > _as_aware(self.max):
            msg = f'min ({self.min.isoformat()}) cannot be later than max ({self.max.isoformat()})'
            raise ValueError(msg)


def _as_aware(value: datetime) -> datetime:
    return value if value.tzinfo is not None else value.replace(tzinfo=UTC)


def check_date(value: Any) -> bool:
    return isinstance(value, datetime)


@converter
def to_date(value: Any) -> datetime | None:
    """Convert date-like input to datetime."""
    return None


@to_date.instance(datetime)
def _datetime_to_date(value: datetime) -> datetime:
    return value


@to_date.instance(date)
def _date_to_date(value: date) -> datetime:
    return datetime(value.year, value.month, value.day)


@to_date.instance(str)
def _str_to_date(value: str) -> datetime | None:
    text = value.strip()
    if not text:
        return None
    return datetime.fromisoformat(text)


@to_date.instance(int, float)
def _epoch_to_date(value: int | float) -> datetime | None:
    try:
        return datetime.fromtimestamp(value, tz=UTC)
    except OSError:
        return None


@to_date.instance(bool)
def _bool_to_date(value: bool) -> None:
    return None


def coerce_date(options: DateOptions) -> Passthrough:
    return Passthrough()


def validate_date(value: datetime, options: DateOptions) -> Err | None:
    if options.min is not None and _as_aware(value) < _as_aware(options.min):
        return Err.of(value, Reason.MIN, {'min': options.min})
    if options.max is not None and _as_aware(value) > _as_aware(options.max):
        return Err.of(value, Reason.MAX, {'max': options.max})
    return None


is_date = create_is_check('date', check_date, coerce_date, validate_date, DateOptions)
maybe_date = create_maybe_check('date', check_date, coerce_date, validate_date, DateOptions)
as_date = create_as_check('date', to_date, coerce_date, validate_date, DateOptions)
maybe_as_date = create_maybe_as_check('date', check_date, to_date, coerce_date, validate_date, DateOptions)
