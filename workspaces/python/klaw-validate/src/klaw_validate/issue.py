"""Issue: a single structured validation failure.

Issues are plain data. They carry a machine-readable reason code, the
offending input value, optional reason-specific context and the structural
path of the failure within a composite input.

Example:
    ```python
    from klaw_validate import Issue, Reason

    issue = Issue.from_value('abc', Reason.INCORRECT_TYPE, {'expected_type': 'number'})
    issue.path
    # ()
    issue.nested(1).nested('scores').path
    # ('scores', 1)
    ```
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

import msgspec

__all__ = ['Issue', 'PathSegment', 'Reason']

type PathSegment = str | int


class Reason(StrEnum):
    """Reason codes emitted by the core gates and the bundled type modules.

    Issue reasons are typed ``str``, so type modules outside this package may
    contribute codes of their own.
    """

    NOT_DEFINED = 'not-defined'
    """A required value was None."""

    INCORRECT_TYPE = 'incorrect-type'
    """The value failed a type guard."""

    NO_CONVERSION = 'no-conversion'
    """The value could not be converted to the target type."""

    MIN_LENGTH = 'min-length'
    MAX_LENGTH = 'max-length'
    MIN = 'min'
    MAX = 'max'
    PATTERN = 'pattern'


class Issue(msgspec.Struct, frozen=True, kw_only=True):
    """A validation failure at a position inside the input.

    Attributes:
        reason: Machine-readable reason code (see ``Reason``).
        value: The input value that was rejected.
        path: Position of the failure from the composite root. Empty for a
            top-level scalar, index-qualified for array elements and
            key-qualified for object fields.
        context: Reason-specific detail, e.g. ``{'expected_type': 'number'}``.
    """

    reason: str
    value: Any = None
    path: tuple[PathSegment, ...] = ()
    context: dict[str, Any] | None = None

    @classmethod
    def from_value(cls, value: Any, reason: str, context: dict[str, Any] | None = None) -> Issue:
        """Create an issue for ``value`` with an empty path.

        Path qualification is left to the structural processor that invoked
        the failing processor.
        """
        return cls(reason=reason, value=value, context=context)

    def nested(self, segment: PathSegment) -> Issue:
        """Return a copy of this issue with ``segment`` prepended to its path."""
        return msgspec.structs.replace(self, path=(segment, *self.path))
