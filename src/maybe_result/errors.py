"""Exceptions raised by maybe-result.

Modeled failures travel as ``Err``/``Nothing`` values and never appear here.
These types cover the two cases where the library raises:

- contract violations (``unwrap`` on the wrong variant, ``flatten`` on a
  payload that is not nested), which are programmer errors;
- the explicit bridges back into exception-based control flow
  (``unwrap_or_throw``/``throw_err``) when the error payload is not itself an
  exception and has to be carried by one.
"""

from __future__ import annotations

from typing import Any

__all__ = [
    'ContractViolationError',
    'ErrPayloadError',
    'FlattenError',
    'MaybeResultError',
    'UnwrapError',
    'WireFormatError',
]


class MaybeResultError(Exception):
    """Base class for every exception defined by maybe-result."""


class ContractViolationError(MaybeResultError, RuntimeError):
    """The API was used against one of its documented preconditions.

    Never converted back into an ``Err`` by the library.
    """


class UnwrapError(ContractViolationError):
    """``unwrap``/``unwrap_err`` was called on the variant without that payload."""


class FlattenError(ContractViolationError, TypeError):
    """``flatten`` was called on a container whose payload is not a container of the same kind."""

    def __init__(self, container: str, payload: Any) -> None:
        self.payload = payload
        super().__init__(f'Called flatten() on non-{container}[{container}[_]]: payload is {type(payload).__name__}')


class WireFormatError(MaybeResultError, ValueError):
    """A value handed to ``parse`` or the codec is not a valid wire form."""

    def __init__(self, expected: str, wire: Any) -> None:
        self.wire = wire
        super().__init__(f'Not a serialized {expected}: {wire!r}')


class ErrPayloadError(MaybeResultError):
    """Carries a non-exception ``Err`` payload raised by ``unwrap_or_throw``/``throw_err``.

    Attributes:
        error: The original error payload.
    """

    def __init__(self, error: Any) -> None:
        self.error = error
        super().__init__(f'Err({error!r})')
