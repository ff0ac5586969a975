"""Pipeline: an ordered list of stages threading one value to a Result.

Each stage receives the current value and a continuation (``Next``) that runs
the remaining stages. A stage either short-circuits by returning a Result, or
delegates by calling the continuation, possibly with a new value. The
continuation after the last stage returns ``Ok(value)``.

Example:
    ```python
    pipeline = Pipeline((Definitely(), Is(is_text, 'string'), Passthrough(), Validation(check_length, options)))
    pipeline.process('abc')
    # Ok(value='abc')
    ```
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from functools import partial
from typing import Any, Protocol, runtime_checkable

from klaw_validate.result import Err, Ok, Result

__all__ = [
    'Next',
    'Passthrough',
    'Pipeline',
    'Processor',
    'Stage',
    'Validate',
    'Validation',
    'ValueProcessor',
]

type Next = Callable[[Any], Result[Any]]
type Validate[T, O] = Callable[[T, O], Err | None]


class Stage(Protocol):
    """One step of a pipeline."""

    def apply(self, value: Any, next_: Next) -> Result[Any]:
        """Return a Result, or delegate by returning ``next_(value)``."""
        ...


@runtime_checkable
class Processor[T](Protocol):
    """Anything that turns an arbitrary input into a Result.

    Structural processors depend on this capability only.
    """

    def process(self, value: Any) -> Result[T]: ...


@dataclass(frozen=True, slots=True)
class Pipeline:
    """A fixed, ordered composition of stages."""

    stages: tuple[Stage, ...]

    def process(self, value: Any) -> Result[Any]:
        return self._run(0, value)

    def _run(self, index: int, value: Any) -> Result[Any]:
        if index == len(self.stages):
            return Ok(value)
        return self.stages[index].apply(value, partial(self._run, index + 1))


@dataclass(frozen=True, slots=True)
class Passthrough:
    """Identity coercion stage for types that adjust nothing."""

    def apply(self, value: Any, next_: Next) -> Result[Any]:
        return next_(value)


@dataclass(frozen=True, slots=True)
class Validation[T, O]:
    """Domain-validation stage.

    Runs the type's ``validate`` hook on the fully type-checked and coerced
    value. A returned Err rejects the value; None accepts it unchanged.
    """

    validate: Validate[T, O]
    options: O

    def apply(self, value: T, next_: Next) -> Result[Any]:
        rejected = self.validate(value, self.options)
        if rejected is not None:
            return rejected
        return next_(value)


@dataclass(frozen=True, slots=True)
class ValueProcessor[T]:
    """A built, immutable processor.

    Attributes:
        type_name: Name of the processed type.
        mode: Access mode label (``is``, ``maybe``, ``as``, ``maybe_as``).
        pipeline: The composed stages.
    """

    type_name: str
    mode: str
    pipeline: Pipeline

    def process(self, value: Any) -> Result[T]:
        """Validate ``value``; never raises for malformed input."""
        return self.pipeline.process(value)

    def __repr__(self) -> str:
        return f'<processor {self.mode}_{self.type_name} with {len(self.pipeline.stages)} stages>'
