"""klaw-validate: value validation and coercion on top of Result types.

Processors turn an arbitrary, untyped value into ``Ok(value)`` or
``Err(issues)``, never raising on bad input. They are built once from
keyword options and reused for any number of values.

Flat imports (preferred):
    from klaw_validate import Ok, Err, Issue, Reason, is_issue
    from klaw_validate import is_number, maybe_as_string, is_array, is_object
    from klaw_validate import create_is_check, create_maybe_as_check

Submodule imports (for organization):
    from klaw_validate.result import Ok, Err, Result
    from klaw_validate.gates import Definitely, Maybe, Is, As
    from klaw_validate.checks.number import NumberOptions

Example:
    ```python
    from klaw_validate import is_array, is_number

    scores = is_array(is_number(coerce_max=500, min=25))
    scores.process([87, 223, 543, 56])
    # Ok(value=[87, 223, 500, 56])
    ```
"""

# Config
from klaw_validate._config import ValidateConfig, get_config, init

# Logging
from klaw_validate._logging import configure_logging, get_logger

# Concrete processors
from klaw_validate.checks import (
    ArrayOptions,
    DateOptions,
    NumberOptions,
    StringOptions,
    as_boolean,
    as_date,
    as_number,
    as_string,
    is_array,
    is_boolean,
    is_date,
    is_number,
    is_object,
    is_string,
    maybe_array,
    maybe_as_boolean,
    maybe_as_date,
    maybe_as_number,
    maybe_as_string,
    maybe_boolean,
    maybe_date,
    maybe_number,
    maybe_object,
    maybe_string,
)

# Conversion
from klaw_validate.convert import Converter, converter

# Errors
from klaw_validate.errors import OptionsError, ValidationError

# Factories
from klaw_validate.factory import (
    build_processor,
    create_as_check,
    create_is_check,
    create_maybe_as_check,
    create_maybe_check,
)

# Gates
from klaw_validate.gates import As, Definitely, Is, Maybe, is_absent, with_default

# Issues
from klaw_validate.issue import Issue, Reason

# Options
from klaw_validate.options import DefaultOptions, MaybeOptions, Options

# Pipeline
from klaw_validate.pipeline import Passthrough, Pipeline, Processor, Stage, Validation, ValueProcessor

# Result types
from klaw_validate.result import Err, Ok, Result, collect, is_issue, is_ok

__all__ = [
    'ArrayOptions',
    'As',
    'Converter',
    'DateOptions',
    'DefaultOptions',
    'Definitely',
    'Err',
    'Is',
    'Issue',
    'Maybe',
    'MaybeOptions',
    'NumberOptions',
    'Ok',
    'Options',
    'OptionsError',
    'Passthrough',
    'Pipeline',
    'Processor',
    'Reason',
    'Result',
    'Stage',
    'StringOptions',
    'Validation',
    'ValidateConfig',
    'ValidationError',
    'ValueProcessor',
    'as_boolean',
    'as_date',
    'as_number',
    'as_string',
    'build_processor',
    'collect',
    'configure_logging',
    'converter',
    'create_as_check',
    'create_is_check',
    'create_maybe_as_check',
    'create_maybe_check',
    'get_config',
    'get_logger',
    'init',
    'is_absent',
    'is_array',
    'is_boolean',
    'is_date',
    'is_issue',
    'is_number',
    'is_object',
    'is_ok',
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
    'with_default',
]
