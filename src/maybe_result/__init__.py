"""maybe-result: immutable Maybe and Result values with a JSON wire form.

Flat imports (preferred):
    from maybe_result import Maybe, Some, Nothing, Result, Ok, Err
    from maybe_result import wrap, wrap_async, wrap_promise

Namespace helpers live on the submodules:
    from maybe_result import maybe, result
    maybe.parse(None), maybe.eq(a, b), maybe.falsy(x), maybe.nullish(x)
    result.parse(wire), result.all_(results), result.throw_err(r)
"""

import logging

from maybe_result import codec, maybe, result
from maybe_result._config import Config, get_config, init
from maybe_result._logging import configure_logging, get_logger
from maybe_result.errors import (
    ContractViolationError,
    ErrPayloadError,
    FlattenError,
    MaybeResultError,
    UnwrapError,
    WireFormatError,
)
from maybe_result.maybe import (
    Maybe,
    Nothing,
    NothingType,
    SerializedMaybe,
    Some,
)
from maybe_result.result import (
    Err,
    Ok,
    Result,
    SerializedResult,
    wrap,
    wrap_async,
    wrap_promise,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    'Config',
    'ContractViolationError',
    'Err',
    'ErrPayloadError',
    'FlattenError',
    'Maybe',
    'MaybeResultError',
    'Nothing',
    'NothingType',
    'Ok',
    'Result',
    'SerializedMaybe',
    'SerializedResult',
    'Some',
    'UnwrapError',
    'WireFormatError',
    'codec',
    'configure_logging',
    'get_config',
    'get_logger',
    'init',
    'maybe',
    'result',
    'wrap',
    'wrap_async',
    'wrap_promise',
]
