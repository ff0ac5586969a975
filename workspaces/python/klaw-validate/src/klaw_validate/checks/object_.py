"""Object processors: ``is_object`` and ``maybe_object``.

An object processor checks a fixed set of declared fields, in declaration
order. A missing key reaches its field processor as None, so required and
optional fields behave the same way they do at the top level. Issues are
path-qualified by field key and collected across all fields. The result is a
new dict holding exactly the declared fields; undeclared keys are dropped.

Example:
    ```python
    person = is_object({'name': is_string(min_length=1), 'age': maybe_as_number(min=0)})
    person.process({'name': 'Ada', 'age': '36', 'extra': True})
    # Ok(value={'name': 'Ada', 'age': 36})
    person.process({'age': -1}).issues
    # (Issue(reason='not-defined', path=('name',)), Issue(reason='min', path=('age',), ...))
    ```
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from klaw_validate.errors import OptionsError
from klaw_validate.factory import build_processor
from klaw_validate.gates import Definitely, Is, Maybe
from klaw_validate.options import Options, resolve_options
from klaw_validate.pipeline import Next, Processor, ValueProcessor
from klaw_validate.result import Ok, Result, collect

__all__ = [
    'Fields',
    'is_object',
    'maybe_object',
]


def check_object(value: Any) -> bool:
    return isinstance(value, Mapping)


@dataclass(frozen=True, slots=True)
class Fields:
    """Stage running each declared field's processor."""

    fields: tuple[tuple[str, Processor[Any]], ...]

    def apply(self, value: Mapping[str, Any], next_: Next) -> Result[Any]:
        processed = collect((key, processor.process(value.get(key))) for key, processor in self.fields)
        if isinstance(processed, Ok):
            return next_(dict(zip((key for key, _ in self.fields), processed.value, strict=True)))
        return processed


def _freeze_fields(fields: Mapping[str, Processor[Any]]) -> tuple[tuple[str, Processor[Any]], ...]:
    for key, processor in fields.items():
        if not isinstance(key, str):
            raise OptionsError('object', f'field names must be str, got {key!r}')
        if not isinstance(processor, Processor):
            raise OptionsError('object', f"field '{key}' must map to a processor, got {type(processor).__name__}")
    return tuple(fields.items())


def is_object(fields: Mapping[str, Processor[Any]], **options: Any) -> ValueProcessor[dict[str, Any]]:
    """Build a required object processor from declared field processors."""
    frozen = _freeze_fields(fields)
    resolve_options('object', Options, options)
    return build_processor('object', 'is', Definitely(), Is(check_object, 'object'), Fields(frozen))


def maybe_object(fields: Mapping[str, Processor[Any]], **options: Any) -> ValueProcessor[dict[str, Any] | None]:
    """Build an optional object processor from declared field processors."""
    frozen = _freeze_fields(fields)
    resolved = resolve_options('object', Options, options, maybe=True)
    return build_processor(
        'object',
        'maybe',
        Maybe(check_object, resolved.maybe),
        Is(check_object, 'object'),
        Fields(frozen),
    )
