"""Concrete processors: scalar types and structural (array/object) processors."""

from klaw_validate.checks.array import ArrayOptions, is_array, maybe_array
from klaw_validate.checks.boolean import as_boolean, is_boolean, maybe_as_boolean, maybe_boolean, to_boolean
from klaw_validate.checks.date import DateOptions, as_date, is_date, maybe_as_date, maybe_date, to_date
from klaw_validate.checks.number import (
    NumberOptions,
    as_number,
    is_number,
    maybe_as_number,
    maybe_number,
    to_number,
)
from klaw_validate.checks.object_ import is_object, maybe_object
from klaw_validate.checks.string import (
    StringOptions,
    as_string,
    is_string,
    maybe_as_string,
    maybe_string,
    to_string,
)

__all__ = [
    'ArrayOptions',
    'DateOptions',
    'NumberOptions',
    'StringOptions',
    'as_boolean',
    'as_date',
    'as_number',
    'as_string',
    'is_array',
    'is_boolean',
    'is_date',
    'is_number',
    'is_object',
    'is_string',
    'maybe_array',
    'maybe_as_boolean',
    'maybe_as_date',
    'maybe_as_number',
    'maybe_as_string',
    'maybe_boolean',
    'maybe_date',
    'maybe_number',
    'maybe_object',
    'maybe_string',
    'to_boolean',
    'to_date',
    'to_number',
    'to_string',
]
