"""Result type: Ok[T] | Err[E] for explicit error handling.

The module doubles as the namespace for helpers that work on any Result:
``parse``, ``all_``, ``throw_err`` and the ``wrap`` family, which adapt
exception-raising code into Result-returning code.

Example:
    ```python
    from maybe_result import result

    @result.wrap
    def divide(a: float, b: float) -> float:
        return a / b

    divide(10, 2)
    # Ok(value=5.0)
    divide(10, 0)
    # Err(error=ZeroDivisionError('division by zero'))

    result.all_([Ok(1), Err('a'), Err('b')])
    # Err(error=['a', 'b'])
    ```
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Iterable, Mapping
from typing import Any, Final, NoReturn, TypeIs, overload

import msgspec
import wrapt

from maybe_result._config import get_config
from maybe_result._logging import get_logger
from maybe_result.errors import ErrPayloadError, FlattenError, UnwrapError, WireFormatError

__all__ = [
    'ERR_TAG',
    'OK_TAG',
    'Err',
    'Ok',
    'Result',
    'SerializedResult',
    'all_',
    'is_result',
    'parse',
    'throw_err',
    'wrap',
    'wrap_async',
    'wrap_promise',
]

OK_TAG: Final = '#ok'
ERR_TAG: Final = '#err'

_logger = get_logger(__name__)


def _raise_payload(error: object) -> NoReturn:
    """Raise an Err payload, wrapping it when it is not an exception."""
    if isinstance(error, BaseException):
        raise error
    raise ErrPayloadError(error)


class Ok[T](msgspec.Struct, frozen=True, gc=False, rename={'value': OK_TAG}):
    """Success variant of Result containing a value of type T.

    Ok represents the successful outcome of an operation. Its single field is
    encoded under the ``#ok`` wire tag.

    Examples:
        >>> ok = Ok(42)
        >>> ok.unwrap()
        42
        >>> ok.map(lambda x: x * 2)
        Ok(value=84)
        >>> ok.json()
        {'#ok': 42}
    """

    value: T

    def is_ok(self) -> TypeIs[Ok[T]]:
        """Return True since this is Ok.

        This method provides type narrowing - after checking is_ok(),
        the type checker knows the result is Ok[T].
        """
        return True

    def is_err(self) -> TypeIs[Err[Any]]:
        """Return False since this is Ok."""
        return False

    def map[U](self, f: Callable[[T], U]) -> Ok[U]:
        """Apply a function to the contained value.

        Args:
            f: Function to apply to the Ok value.

        Returns:
            Ok containing the result of applying f to the value.
        """
        return Ok(f(self.value))

    def map_err(self, _f: Callable[[Any], object]) -> Ok[T]:
        """Return self unchanged since this is Ok."""
        return self

    def match[U, V](self, *, ok: Callable[[T], U], err: Callable[[Any], V]) -> U | V:  # noqa: ARG002
        """Fold the result: call ``ok`` with the value and return what it returns."""
        return ok(self.value)

    def unwrap(self) -> T:
        """Return the contained Ok value."""
        return self.value

    def unwrap_err(self) -> NoReturn:
        """Raise since Ok has no error to unwrap.

        Raises:
            UnwrapError: Always.
        """
        raise UnwrapError('Tried to unwrapErr Ok')

    def unwrap_or[A](self, _default: A) -> T:
        """Return the contained Ok value, ignoring the default."""
        return self.value

    def unwrap_or_else[A](self, _f: Callable[[Any], A]) -> T:
        """Return the contained Ok value, ignoring the fallback function."""
        return self.value

    def unwrap_or_throw(self) -> T:
        """Return the contained Ok value."""
        return self.value

    def flatten[U, E](self: Ok[Ok[U] | Err[E]]) -> Ok[U] | Err[E]:
        """Flatten a nested Result.

        Converts Ok(Ok(v)) into Ok(v) and Ok(Err(e)) into Err(e).

        Raises:
            FlattenError: If the contained value is not itself a Result.
        """
        if not is_result(self.value):
            raise FlattenError('Result', self.value)
        return self.value

    def json(self) -> dict[str, T]:
        """Return the wire form ``{"#ok": value}``."""
        return {OK_TAG: self.value}


class Err[E](msgspec.Struct, frozen=True, gc=False, rename={'error': ERR_TAG}):
    """Error variant of Result containing an error of type E.

    Err represents the failure outcome of an operation. It wraps an error
    value that can be transformed, recovered from, or raised at a boundary.

    Examples:
        >>> err = Err('something went wrong')
        >>> err.is_err()
        True
        >>> err.unwrap_or(0)
        0
        >>> err.json()
        {'#err': 'something went wrong'}
    """

    error: E

    def is_ok(self) -> TypeIs[Ok[Any]]:
        """Return False since this is Err."""
        return False

    def is_err(self) -> TypeIs[Err[E]]:
        """Return True since this is Err.

        This method provides type narrowing - after checking is_err(),
        the type checker knows the result is Err[E].
        """
        return True

    def map(self, _f: Callable[[Any], object]) -> Err[E]:
        """Return self unchanged since this is Err."""
        return self

    def map_err[F](self, f: Callable[[E], F]) -> Err[F]:
        """Apply a function to the contained error.

        Args:
            f: Function to apply to the error value.

        Returns:
            Err containing the transformed error.
        """
        return Err(f(self.error))

    def match[U, V](self, *, ok: Callable[[Any], U], err: Callable[[E], V]) -> U | V:  # noqa: ARG002
        """Fold the result: call ``err`` with the error and return what it returns."""
        return err(self.error)

    def unwrap(self) -> NoReturn:
        """Raise since Err has no Ok value to unwrap.

        Raises:
            UnwrapError: Always.
        """
        raise UnwrapError('Tried to unwrap Err')

    def unwrap_err(self) -> E:
        """Return the contained error."""
        return self.error

    def unwrap_or[A](self, default: A) -> A:
        """Return the default value since this is Err."""
        return default

    def unwrap_or_else[A](self, f: Callable[[E], A]) -> A:
        """Compute a fallback from the error since this is Err."""
        return f(self.error)

    def unwrap_or_throw(self) -> NoReturn:
        """Raise the contained error.

        An exception payload is raised as-is; any other payload is raised
        inside an ErrPayloadError.
        """
        _raise_payload(self.error)

    def flatten(self) -> Err[E]:
        """Return self since this is Err (nothing to flatten)."""
        return self

    def json(self) -> dict[str, E]:
        """Return the wire form ``{"#err": error}``."""
        return {ERR_TAG: self.error}


type Result[T, E] = Ok[T] | Err[E]

type SerializedResult[T, E] = dict[str, T] | dict[str, E]


def is_result(obj: object) -> TypeIs[Ok[Any] | Err[Any]]:
    """Return True if obj is one of the two Result variants."""
    return isinstance(obj, Ok | Err)


def parse[T, E](wire: SerializedResult[T, E]) -> Result[T, E]:
    """Rebuild a Result from its wire form.

    Dispatches on the presence of ``#ok``, so ``#ok`` wins over ``#err`` and
    other keys are ignored. Only the top level is decoded.

    Raises:
        WireFormatError: If wire is not a mapping holding ``#ok`` or ``#err``.
    """
    if isinstance(wire, Mapping):
        if OK_TAG in wire:
            return Ok(wire[OK_TAG])
        if ERR_TAG in wire:
            return Err(wire[ERR_TAG])
    raise WireFormatError('Result', wire)


def all_[T, E](results: Iterable[Result[T, E]]) -> Result[list[T], list[E]]:
    """Combine Results into one, collecting every error.

    Unlike a short-circuiting collect, all results are visited.

    Args:
        results: An iterable of Result values.

    Returns:
        Ok(list[T]) if all results are Ok, otherwise Err(list[E]) holding all
        error payloads in input order.

    Raises:
        TypeError: If an element is neither Ok nor Err.

    Examples:
        >>> all_([Ok(1), Ok(2)])
        Ok(value=[1, 2])
        >>> all_([Ok(1), Err('a'), Err('b')])
        Err(error=['a', 'b'])
    """
    values: list[T] = []
    errors: list[E] = []
    for item in results:
        match item:
            case Ok(value):
                values.append(value)
            case Err(error):
                errors.append(error)
            case _:
                raise TypeError(f'all_() expects Ok or Err, got {type(item).__name__}')
    if errors:
        return Err(errors)
    return Ok(values)


def throw_err[T, E](result: Result[T, E]) -> Ok[T]:
    """Raise the error of an Err, pass an Ok through.

    Used at trust boundaries where a failure should continue as an exception.
    Non-exception payloads are raised inside an ErrPayloadError.
    """
    if isinstance(result, Err):
        _raise_payload(result.error)
    return result


def _catch(exceptions: tuple[type[BaseException], ...] | None) -> tuple[type[BaseException], ...]:
    return exceptions if exceptions is not None else get_config().wrap_exceptions


def _captured(wrapped: object, exc: BaseException) -> Err[BaseException]:
    _logger.debug(
        'exception captured',
        function=getattr(wrapped, '__qualname__', repr(wrapped)),
        exc_type=type(exc).__name__,
    )
    return Err(exc)


@overload
def wrap[**P, T](
    fn: Callable[P, T],
    /,
) -> Callable[P, Ok[T] | Err[Exception]]: ...


@overload
def wrap(
    fn: None = None,
    /,
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> Callable[[Callable[..., Any]], Callable[..., Ok[Any] | Err[Any]]]: ...


def wrap(
    fn: Callable[..., Any] | None = None,
    /,
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> Any:
    """Adapt a function that may raise into one that returns a Result.

    Can be used as a call or as a decorator, with or without arguments:
        safe_int = wrap(int)

        @wrap
        def risky(): ...

        @wrap(exceptions=(ValueError, TypeError))
        def specific(): ...

    Args:
        fn: The function to wrap (when used without parentheses).
        exceptions: Exception types to capture. Defaults to
            ``get_config().wrap_exceptions``, which is ``(Exception,)``.

    Returns:
        A wrapped function that returns Ok(return value) or Err(exception).
    """

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[..., Any],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Ok[Any] | Err[Any]:
        try:
            value = wrapped(*args, **kwargs)
        except _catch(exceptions) as e:
            return _captured(wrapped, e)
        return Ok(value)

    if fn is not None:
        return wrapper(fn)
    return wrapper


@overload
def wrap_async[**P, T](
    fn: Callable[P, Awaitable[T]],
    /,
) -> Callable[P, Awaitable[Ok[T] | Err[Exception]]]: ...


@overload
def wrap_async(
    fn: None = None,
    /,
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> Callable[[Callable[..., Awaitable[Any]]], Callable[..., Awaitable[Ok[Any] | Err[Any]]]]: ...


def wrap_async(
    fn: Callable[..., Awaitable[Any]] | None = None,
    /,
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> Any:
    """Adapt a function returning an awaitable into one whose awaitable resolves to a Result.

    The call to the wrapped function happens inside the capture, so an
    exception raised before its first suspension point, or by a plain
    function before it hands back an awaitable, also becomes Err.

    Args:
        fn: The function to wrap (when used without parentheses).
        exceptions: Exception types to capture. Defaults to
            ``get_config().wrap_exceptions``, which is ``(Exception,)``.

    Returns:
        A wrapped async function that resolves to Ok(value) or Err(exception).

    Example:
        ```python
        @wrap_async
        async def fetch(url: str) -> bytes:
            return await http_get(url)

        await fetch('https://example.invalid')
        # Err(error=ConnectionError(...))
        ```
    """

    @wrapt.decorator
    async def wrapper(
        wrapped: Callable[..., Awaitable[Any]],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Ok[Any] | Err[Any]:
        try:
            value = await wrapped(*args, **kwargs)
        except _catch(exceptions) as e:
            return _captured(wrapped, e)
        return Ok(value)

    if fn is not None:
        return wrapper(fn)
    return wrapper


async def wrap_promise[T](
    awaitable: Awaitable[T],
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> Ok[T] | Err[Any]:
    """Await an awaitable and turn its outcome into a Result.

    There is no cancellation or timeout: the awaitable runs to completion and
    only its terminal outcome is observed. Exceptions outside ``exceptions``
    (such as ``asyncio.CancelledError``) propagate.

    Args:
        awaitable: A coroutine, task or future.
        exceptions: Exception types to capture. Defaults to
            ``get_config().wrap_exceptions``.

    Returns:
        Ok(result) on completion, Err(exception) on failure.
    """
    try:
        value = await awaitable
    except _catch(exceptions) as e:
        return _captured(awaitable, e)
    return Ok(value)
