"""Gate stages: presence, optional, type and conversion gates.

These are the stages every processor is assembled from:

- ``Definitely``: a required value must not be None.
- ``Maybe``: None is a legitimate "absent" outcome, with optional masking of
  wrong-typed and unconvertible input.
- ``Is``: a hard type guard, no conversion.
- ``As``: best-effort conversion into the target type.

``Definitely`` and ``As`` accept a fallback producer, used for default-value
substitution (see ``with_default``).
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from klaw_validate.issue import Reason
from klaw_validate.options import DefaultOptions, MaybeOptions
from klaw_validate.pipeline import Next
from klaw_validate.result import Err, Ok, Result

__all__ = [
    'As',
    'Check',
    'Convert',
    'Definitely',
    'Empty',
    'Fallback',
    'Is',
    'Maybe',
    'is_absent',
    'with_default',
]

type Fallback = Callable[[], Result[Any] | None]
type Empty = Callable[[Any], bool]
type Check = Callable[[Any], bool]
type Convert[T] = Callable[[Any], T | None]


def is_absent(value: Any) -> bool:
    """Default emptiness predicate: only None is absent."""
    return value is None


def with_default(options: DefaultOptions) -> Fallback:
    """Build a fallback producing ``Ok(default)`` when a default is configured."""

    def fallback() -> Result[Any] | None:
        if options.has_default:
            return Ok(options.default)
        return None

    return fallback


def _fallback_result(fallback: Fallback | None) -> Result[Any] | None:
    return fallback() if fallback is not None else None


@dataclass(frozen=True, slots=True)
class Definitely:
    """Presence gate for required values."""

    fallback: Fallback | None = None

    def apply(self, value: Any, next_: Next) -> Result[Any]:
        if value is None:
            substituted = _fallback_result(self.fallback)
            if substituted is not None:
                return substituted
            return Err.of(value, Reason.NOT_DEFINED)
        return next_(value)


@dataclass(frozen=True, slots=True)
class Maybe:
    """Optional gate.

    The order is fixed: emptiness, wrong-type masking, delegation, then
    masking of a lone ``no-conversion`` issue unless ``strict_parsing`` is set.
    The lone-issue match is by reason code only, whichever stage produced it.
    """

    check: Check
    options: MaybeOptions = field(default_factory=MaybeOptions)
    empty: Empty = is_absent
    fallback: Fallback | None = None

    def apply(self, value: Any, next_: Next) -> Result[Any]:
        if self.empty(value):
            substituted = _fallback_result(self.fallback)
            if substituted is not None:
                return substituted
            return Ok(None)

        if self.options.incorrect_type_to_undefined and not self.check(value):
            return Ok(None)

        result = next_(value)
        if isinstance(result, Err) and len(result.issues) == 1 and result.issues[0].reason == Reason.NO_CONVERSION:
            if self.options.strict_parsing:
                return result
            return Ok(None)
        return result


@dataclass(frozen=True, slots=True)
class Is:
    """Strict type gate."""

    check: Check
    type_name: str

    def apply(self, value: Any, next_: Next) -> Result[Any]:
        if not self.check(value):
            return Err.of(value, Reason.INCORRECT_TYPE, {'expected_type': self.type_name})
        return next_(value)


@dataclass(frozen=True, slots=True)
class As[T]:
    """Conversion gate: the only place values change representation."""

    convert: Convert[T]
    type_name: str
    fallback: Fallback | None = None

    def apply(self, value: Any, next_: Next) -> Result[Any]:
        converted = self.convert(value)
        if converted is None:
            substituted = _fallback_result(self.fallback)
            if substituted is not None:
                return substituted
            return Err.of(value, Reason.NO_CONVERSION, {'to_type': self.type_name})
        return next_(converted)
