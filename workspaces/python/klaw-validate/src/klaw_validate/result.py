"""Result type: Ok[T] | Err for validation outcomes.

A processor returns exactly one of two variants. ``Ok`` carries the validated
(and possibly coerced) value, which may itself be None for an absent optional
value. ``Err`` carries a non-empty tuple of issues.

Examples:
    >>> Ok(42).unwrap()
    42
    >>> err = Err((Issue.from_value(None, Reason.NOT_DEFINED),))
    >>> is_issue(err)
    True
    >>> err.unwrap_or(0)
    0
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any, NoReturn, TypeIs

import msgspec

from klaw_validate.errors import ValidationError
from klaw_validate.issue import Issue, PathSegment

__all__ = ['Err', 'Ok', 'Result', 'collect', 'is_issue', 'is_ok']


class Ok[T](msgspec.Struct, frozen=True, gc=False):
    """Success variant of Result containing a value of type T.

    Examples:
        >>> Ok(42).map(lambda x: x * 2)
        Ok(value=84)
    """

    value: T

    def is_ok(self) -> bool:
        """Return True since this is Ok."""
        return True

    def is_err(self) -> bool:
        """Return False since this is Ok."""
        return False

    def unwrap(self) -> T:
        """Return the contained value."""
        return self.value

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        """Return the contained value, ignoring the default."""
        return self.value

    def map[U](self, f: Callable[[T], U]) -> Ok[U]:
        """Apply a function to the contained value.

        Args:
            f: Function to apply to the Ok value.

        Returns:
            Ok containing the result of applying f to the value.
        """
        return Ok(f(self.value))

    def and_then[U](self, f: Callable[[T], Ok[U] | Err]) -> Ok[U] | Err:
        """Apply a function that returns a Result to the contained value."""
        return f(self.value)


class Err(msgspec.Struct, frozen=True, gc=False):
    """Failure variant of Result containing one or more issues.

    Examples:
        >>> err = Err((Issue.from_value('x', Reason.INCORRECT_TYPE),))
        >>> err.is_err()
        True
        >>> err.nested(3).issues[0].path
        (3,)
    """

    issues: tuple[Issue, ...]

    def __post_init__(self) -> None:
        if not self.issues:
            msg = 'Err requires at least one issue'
            raise ValueError(msg)

    @classmethod
    def of(cls, value: Any, reason: str, context: dict[str, Any] | None = None) -> Err:
        """Create an Err holding a single issue for ``value``."""
        return cls((Issue.from_value(value, reason, context),))

    def is_ok(self) -> bool:
        """Return False since this is Err."""
        return False

    def is_err(self) -> bool:
        """Return True since this is Err."""
        return True

    def unwrap(self) -> NoReturn:
        """Raise since this is Err.

        Raises:
            ValidationError: Always, carrying the issues.
        """
        raise self.to_exception()

    def unwrap_or[T](self, default: T) -> T:
        """Return the default value since this is Err."""
        return default

    def map(self, _f: Callable[[Any], Any]) -> Err:
        """Return self unchanged since this is Err."""
        return self

    def and_then(self, _f: Callable[[Any], Any]) -> Err:
        """Return self unchanged since this is Err."""
        return self

    def nested(self, segment: PathSegment) -> Err:
        """Return a new Err whose issues are qualified by ``segment``."""
        return Err(tuple(issue.nested(segment) for issue in self.issues))

    def to_exception(self) -> ValidationError:
        """Convert to exception for raise-based code."""
        return ValidationError(self.issues)


type Result[T] = Ok[T] | Err


def is_issue(result: Result[Any]) -> TypeIs[Err]:
    """Return True if ``result`` is the issue variant."""
    return isinstance(result, Err)


def is_ok[T](result: Result[T]) -> TypeIs[Ok[T]]:
    """Return True if ``result`` is the success variant."""
    return isinstance(result, Ok)


def collect[T](results: Iterable[tuple[PathSegment, Result[T]]]) -> Ok[list[T]] | Err:
    """Collect positioned Results into a Result of list.

    Unlike a short-circuiting collect, every Err is kept: its issues are
    nested under the position they were produced at and concatenated in
    iteration order.

    Args:
        results: Pairs of (index or key, Result).

    Returns:
        Ok(list[T]) if every result is Ok, otherwise one Err holding all issues.

    Examples:
        >>> collect([(0, Ok(1)), (1, Ok(2))])
        Ok(value=[1, 2])
        >>> collect([(0, Ok(1)), (1, Err.of('x', 'min'))]).issues[0].path
        (1,)
    """
    values: list[T] = []
    issues: list[Issue] = []
    for segment, result in results:
        if isinstance(result, Err):
            issues.extend(issue.nested(segment) for issue in result.issues)
        elif not issues:
            values.append(result.value)
    if issues:
        return Err(tuple(issues))
    return Ok(values)
