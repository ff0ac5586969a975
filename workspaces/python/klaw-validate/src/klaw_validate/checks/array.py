"""Array processors: ``is_array`` and ``maybe_array``.

An array processor gates presence and type like any scalar, enforces its
container length, then runs an optional element processor over every
element in index order. Every failing element contributes its issues,
path-qualified by its index; a success yields a new list.

Example:
    ```python
    scores = is_array(is_number(coerce_max=500, min=25), min_length=1)
    scores.process([87, 223, 543, 56])
    # Ok(value=[87, 223, 500, 56])
    scores.process([87, 2, 45]).issues[0].path
    # (1,)
    ```
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from klaw_validate.errors import OptionsError
from klaw_validate.factory import build_processor
from klaw_validate.gates import Definitely, Is, Maybe
from klaw_validate.issue import Reason
from klaw_validate.options import NonNegativeInt, Options, resolve_options
from klaw_validate.pipeline import Next, Processor, ValueProcessor
from klaw_validate.result import Err, Ok, Result, collect

__all__ = [
    'ArrayOptions',
    'ContainerLength',
    'Elements',
    'is_array',
    'maybe_array',
]


class ArrayOptions(Options):
    min_length: NonNegativeInt | None = None
    max_length: NonNegativeInt | None = None

    def __post_init__(self) -> None:
        if self.min_length is not None and self.max_length is not None and self.min_length > self.max_length:
            msg = f'min_length ({self.min_length}) cannot be greater than max_length ({self.max_length})'
            raise ValueError(msg)


def check_array(value: Any) -> bool:
    return isinstance(value, (list, tuple))


@dataclass(frozen=True, slots=True)
class ContainerLength:
    """Stage enforcing container size before any element is processed."""

    min_length: int | None = None
    max_length: int | None = None

    def apply(self, value: Sequence[Any], next_: Next) -> Result[Any]:
        length = len(value)
        if self.min_length is not None and length < self.min_length:
            return Err.of(value, Reason.MIN_LENGTH, {'min_length': self.min_length, 'length': length})
        if self.max_length is not None and length > self.max_length:
            return Err.of(value, Reason.MAX_LENGTH, {'max_length': self.max_length, 'length': length})
        return next_(value)


@dataclass(frozen=True, slots=True)
class Elements:
    """Stage running the element processor over every element."""

    item: Processor[Any] | None = None

    def apply(self, value: Sequence[Any], next_: Next) -> Result[Any]:
        if self.item is None:
            return next_(list(value))
        processed = collect((index, self.item.process(element)) for index, element in enumerate(value))
        if isinstance(processed, Ok):
            return next_(processed.value)
        return processed


def _check_item(item: Processor[Any] | None) -> None:
    if item is not None and not isinstance(item, Processor):
        raise OptionsError('array', f'element processor must expose process(), got {type(item).__name__}')


def is_array(item: Processor[Any] | None = None, **options: Any) -> ValueProcessor[list[Any]]:
    """Build a required array processor.

    Args:
        item: Processor applied to every element. None keeps elements as-is.
        **options: ``min_length`` and ``max_length``.
    """
    _check_item(item)
    resolved = resolve_options('array', ArrayOptions, options)
    return build_processor(
        'array',
        'is',
        Definitely(),
        Is(check_array, 'array'),
        ContainerLength(resolved.type_options.min_length, resolved.type_options.max_length),
        Elements(item),
    )


def maybe_array(item: Processor[Any] | None = None, **options: Any) -> ValueProcessor[list[Any] | None]:
    """Build an optional array processor.

    Args:
        item: Processor applied to every element. None keeps elements as-is.
        **options: ``min_length``, ``max_length`` and the optional-mode flags.
    """
    _check_item(item)
    resolved = resolve_options('array', ArrayOptions, options, maybe=True)
    return build_processor(
        'array',
        'maybe',
        Maybe(check_array, resolved.maybe),
        Is(check_array, 'array'),
        ContainerLength(resolved.type_options.min_length, resolved.type_options.max_length),
        Elements(item),
    )
