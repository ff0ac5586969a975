"""@converter decorator: type-dispatched, best-effort conversion functions.

A converter dispatches on the runtime type of its argument to a registered
instance implementation, falling back to the decorated function. Conversion
never raises: a ``ValueError``, ``TypeError``, ``ArithmeticError`` raised by an
implementation is logged and reported as "no conversion" (None), which the
``As`` gate turns into a ``no-conversion`` issue.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import wrapt

from klaw_validate._logging import get_logger

__all__ = ['Converter', 'converter']

logger = get_logger(__name__)

_CONVERSION_ERRORS = (ValueError, TypeError, ArithmeticError)


class Converter[T](wrapt.ObjectProxy):
    """A conversion function with registered per-type instances.

    Attributes:
        _self_name: The name of the converter function.
        _self_instances: Dictionary mapping input types to implementations.

    Example:
        ```python
        @converter
        def to_int(value: object) -> int | None:
            '''Convert to int.'''
            return None

        @to_int.instance(str)
        def _(value: str) -> int | None:
            return int(value.strip())

        to_int(' 12 ')
        # 12
        to_int('twelve')
        # None
        to_int([])
        # None
        ```
    """

    def __init__(self, default_fn: Callable[[Any], T | None]) -> None:
        super().__init__(default_fn)
        self._self_name = default_fn.__name__
        self._self_instances: dict[type, Callable[[Any], T | None]] = {}

    def instance(self, *types: type) -> Callable[[Callable[[Any], T | None]], Callable[[Any], T | None]]:
        """Register an implementation for one or more input types."""

        def decorator(fn: Callable[[Any], T | None]) -> Callable[[Any], T | None]:
            for type_ in types:
                self._self_instances[type_] = fn
            return fn

        return decorator

    def _find_instance(self, value: Any) -> Callable[[Any], T | None]:
        """Find the best matching implementation: exact type, then MRO."""
        for base in type(value).__mro__:
            if base in self._self_instances:
                return self._self_instances[base]
        return self.__wrapped__

    def __call__(self, value: Any) -> T | None:
        fn = self._find_instance(value)
        try:
            return fn(value)
        except _CONVERSION_ERRORS as e:
            logger.debug(
                'converter.failed',
                converter=self._self_name,
                input_type=type(value).__name__,
                error=repr(e),
            )
            return None

    def __repr__(self) -> str:
        return f'<converter {self._self_name} with {len(self._self_instances)} instances>'


def converter[T](fn: Callable[[Any], T | None]) -> Converter[T]:
    """Decorator to create a converter from its fallback implementation.

    The decorated function handles every input type without a registered
    instance; it usually returns None.
    """
    return Converter(fn)
