"""Options records: per-processor configuration, validated once at construction.

Every processor is configured by keyword options. They are split into the
access-mode records (``MaybeOptions``, ``DefaultOptions``) and the
type-specific record (a subclass of ``Options``), each validated and
defaulted through ``msgspec.convert``. The resulting records are frozen and
shared by every call of the processor.

Example:
    ```python
    class NumberOptions(Options):
        min: int | float | None = None

    resolved = resolve_options('number', NumberOptions, {'min': 3, 'strict_parsing': True}, maybe=True)
    resolved.type_options.min
    # 3
    resolved.maybe.strict_parsing
    # True
    ```
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Annotated, Any, NoReturn

import msgspec

from klaw_validate._logging import get_logger
from klaw_validate.errors import OptionsError

__all__ = [
    'DefaultOptions',
    'MaybeOptions',
    'NonNegativeInt',
    'Options',
    'ResolvedOptions',
    'resolve_options',
]

logger = get_logger(__name__)

NonNegativeInt = Annotated[int, msgspec.Meta(ge=0)]


class Options(msgspec.Struct, frozen=True, kw_only=True, forbid_unknown_fields=True):
    """Base for type-specific coercion and validation options.

    Subclasses declare their bounds as fields and may check consistency
    between fields in ``__post_init__`` by raising ``ValueError``.
    """


class MaybeOptions(msgspec.Struct, frozen=True, kw_only=True, forbid_unknown_fields=True):
    """Options of the optional access modes.

    Attributes:
        incorrect_type_to_undefined: Treat a value failing the type guard as absent.
        strict_parsing: Surface a ``no-conversion`` issue instead of treating the
            unconvertible value as absent.
    """

    incorrect_type_to_undefined: bool = False
    strict_parsing: bool = False


class DefaultOptions(msgspec.Struct, frozen=True, kw_only=True, forbid_unknown_fields=True):
    """Options of the converting access modes.

    Attributes:
        default: Value substituted when input is absent or unconvertible.
            ``msgspec.UNSET`` means no default; None is a valid default.
    """

    default: Any | msgspec.UnsetType = msgspec.UNSET

    @property
    def has_default(self) -> bool:
        return self.default is not msgspec.UNSET


@dataclass(frozen=True, slots=True)
class ResolvedOptions[O: Options]:
    """The frozen option records of one processor."""

    type_options: O
    maybe: MaybeOptions
    defaults: DefaultOptions


_MAYBE_KEYS = frozenset(MaybeOptions.__struct_fields__)
_DEFAULT_KEYS = frozenset(DefaultOptions.__struct_fields__)


def resolve_options[O: Options](
    type_name: str,
    options_type: type[O],
    raw: Mapping[str, Any],
    *,
    maybe: bool = False,
    default: bool = False,
) -> ResolvedOptions[O]:
    """Split and validate raw keyword options for a processor.

    Args:
        type_name: Name of the processed type, used in error messages.
        options_type: The type-specific options record.
        raw: Keyword options as given to the processor builder.
        maybe: Whether the access mode accepts ``MaybeOptions`` keys.
        default: Whether the access mode accepts the ``default`` key.

    Returns:
        The resolved option records.

    Raises:
        OptionsError: If a key is unknown, not allowed in this access mode,
            wrongly typed, or the bounds are inconsistent.
    """
    maybe_raw = {k: v for k, v in raw.items() if k in _MAYBE_KEYS}
    default_raw = {k: v for k, v in raw.items() if k in _DEFAULT_KEYS}
    type_raw = {k: v for k, v in raw.items() if k not in _MAYBE_KEYS and k not in _DEFAULT_KEYS}

    if maybe_raw and not maybe:
        _reject(type_name, f'{", ".join(sorted(maybe_raw))} only apply to optional processors')
    if default_raw and not default:
        _reject(type_name, "'default' only applies to converting processors")

    try:
        return ResolvedOptions(
            type_options=msgspec.convert(type_raw, options_type),
            maybe=msgspec.convert(maybe_raw, MaybeOptions),
            defaults=DefaultOptions(**default_raw),
        )
    except (msgspec.ValidationError, ValueError) as e:
        _reject(type_name, str(e), cause=e)


def _reject(type_name: str, detail: str, cause: Exception | None = None) -> NoReturn:
    logger.warning('options.invalid', type_name=type_name, detail=detail)
    raise OptionsError(type_name, detail) from cause
