"""Check factories: assemble complete processors from a type's hooks.

A type module supplies a type name, a guard and/or converter, a coercion
stage factory and a validation function. Each factory returns a builder that
takes keyword options and returns a ``ValueProcessor``. Stages compose
outermost to innermost as:

    presence gate -> type/conversion gate -> coercion -> validation

Example:
    ```python
    is_even = create_is_check('even', lambda v: isinstance(v, int), lambda o: Passthrough(), check_even)
    is_even().process(4)
    # Ok(value=4)
    is_even().process(None)
    # Err(issues=(Issue(reason='not-defined', ...),))
    ```
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from klaw_validate._logging import get_logger
from klaw_validate.gates import As, Check, Convert, Definitely, Empty, Is, Maybe, is_absent, with_default
from klaw_validate.options import Options, resolve_options
from klaw_validate.pipeline import Pipeline, Stage, Validate, Validation, ValueProcessor

__all__ = [
    'Coerce',
    'build_processor',
    'create_as_check',
    'create_is_check',
    'create_maybe_as_check',
    'create_maybe_check',
]

logger = get_logger(__name__)

type Coerce[O] = Callable[[O], Stage]


def build_processor[T](type_name: str, mode: str, *stages: Stage) -> ValueProcessor[T]:
    """Wrap stages, outermost first, into a named processor."""
    logger.debug('processor.built', type_name=type_name, mode=mode)
    return ValueProcessor(type_name=type_name, mode=mode, pipeline=Pipeline(stages))


def create_is_check[T, O: Options](
    type_name: str,
    check: Check,
    coerce: Coerce[O],
    validate: Validate[T, O],
    options_type: type[O] = Options,
) -> Callable[..., ValueProcessor[T]]:
    """Factory for required processors without conversion.

    Input must already be of the target type; None fails with ``not-defined``.
    """

    def build(**options: Any) -> ValueProcessor[T]:
        resolved = resolve_options(type_name, options_type, options)
        return build_processor(
            type_name,
            'is',
            Definitely(),
            Is(check, type_name),
            coerce(resolved.type_options),
            Validation(validate, resolved.type_options),
        )

    return build


def create_maybe_check[T, O: Options](
    type_name: str,
    check: Check,
    coerce: Coerce[O],
    validate: Validate[T, O],
    options_type: type[O] = Options,
    empty: Empty = is_absent,
) -> Callable[..., ValueProcessor[T | None]]:
    """Factory for optional processors without conversion."""

    def build(**options: Any) -> ValueProcessor[T | None]:
        resolved = resolve_options(type_name, options_type, options, maybe=True)
        return build_processor(
            type_name,
            'maybe',
            Maybe(check, resolved.maybe, empty),
            Is(check, type_name),
            coerce(resolved.type_options),
            Validation(validate, resolved.type_options),
        )

    return build


def create_as_check[T, O: Options](
    type_name: str,
    convert: Convert[T],
    coerce: Coerce[O],
    validate: Validate[T, O],
    options_type: type[O] = Options,
) -> Callable[..., ValueProcessor[T]]:
    """Factory for required processors with conversion.

    A configured ``default`` is substituted both for None and for input that
    cannot be converted. The substituted default skips coercion and validation.
    """

    def build(**options: Any) -> ValueProcessor[T]:
        resolved = resolve_options(type_name, options_type, options, default=True)
        fallback = with_default(resolved.defaults)
        return build_processor(
            type_name,
            'as',
            Definitely(fallback),
            As(convert, type_name, fallback),
            coerce(resolved.type_options),
            Validation(validate, resolved.type_options),
        )

    return build


def create_maybe_as_check[T, O: Options](
    type_name: str,
    check: Check,
    convert: Convert[T],
    coerce: Coerce[O],
    validate: Validate[T, O],
    options_type: type[O] = Options,
    empty: Empty = is_absent,
) -> Callable[..., ValueProcessor[T | None]]:
    """Factory for optional processors with conversion, default and masking."""

    def build(**options: Any) -> ValueProcessor[T | None]:
        resolved = resolve_options(type_name, options_type, options, maybe=True, default=True)
        fallback = with_default(resolved.defaults)
        return build_processor(
            type_name,
            'maybe_as',
            Maybe(check, resolved.maybe, empty, fallback),
            As(convert, type_name, fallback),
            coerce(resolved.type_options),
            Validation(validate, resolved.type_options),
        )

    return build
