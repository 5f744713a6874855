"""Maybe type: Some[T] | Nothing for optional values.

The module doubles as the namespace for helpers that work on any Maybe:
``parse``, ``eq``, ``falsy`` and ``nullish``.

Examples:
    >>> from maybe_result import maybe
    >>> maybe.nullish(0)
    Some(value=0)
    >>> maybe.falsy(0)
    Nothing
    >>> maybe.parse(Some([1, 2]).json())
    Some(value=[1, 2])
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any, Final, NoReturn, TypeIs, final, overload

import msgspec

from maybe_result.errors import FlattenError, UnwrapError, WireFormatError

__all__ = [
    'SOME_TAG',
    'Maybe',
    'Nothing',
    'NothingType',
    'SerializedMaybe',
    'Some',
    'eq',
    'falsy',
    'is_maybe',
    'nullish',
    'parse',
]

SOME_TAG: Final = '#some'


class Some[T](msgspec.Struct, frozen=True, gc=False, rename={'value': SOME_TAG}):
    """Some variant of Maybe containing a value of type T.

    Some represents the presence of a value. Its single field is encoded under
    the ``#some`` wire tag, so msgspec writes it in wire form directly.

    Examples:
        >>> some = Some(42)
        >>> some.unwrap()
        42
        >>> some.map(lambda x: x * 2)
        Some(value=84)
        >>> some.filter(lambda x: x > 100)
        Nothing
    """

    value: T

    def is_some(self) -> TypeIs[Some[T]]:
        """Return True since this is Some."""
        return True

    def is_none(self) -> TypeIs[NothingType]:
        """Return False since this is Some."""
        return False

    def is_some_and(self, f: Callable[[T], object]) -> bool:
        """Return True if the predicate holds for the contained value."""
        return bool(f(self.value))

    def map[U](self, f: Callable[[T], U]) -> Some[U]:
        """Apply a function to the contained value.

        Args:
            f: Function to apply to the Some value.

        Returns:
            Some containing the result of applying f to the value.
        """
        return Some(f(self.value))

    @overload
    def filter[U](self, predicate: Callable[[T], TypeIs[U]]) -> Some[U] | NothingType: ...

    @overload
    def filter(self, predicate: Callable[[T], object]) -> Some[T] | NothingType: ...

    def filter(self, predicate: Callable[[T], object]) -> Some[Any] | NothingType:
        """Return self if the predicate is satisfied, else Nothing.

        A ``TypeIs`` predicate narrows the payload type of the result.

        Args:
            predicate: Function that returns True to keep the value.

        Returns:
            Some(value) if predicate(value) is true, else Nothing.
        """
        if predicate(self.value):
            return self
        return Nothing

    def inspect(self, f: Callable[[T], object]) -> Some[T]:
        """Call f with the contained value for its side effect and return self."""
        f(self.value)
        return self

    def or_[U](self, _alt: Some[U] | NothingType) -> Some[T]:
        """Return self since this is Some."""
        return self

    def unwrap(self) -> T:
        """Return the contained value.

        Since this is Some, this always succeeds.
        """
        return self.value

    def unwrap_or[U](self, _default: U) -> T:
        """Return the contained value, ignoring the default."""
        return self.value

    def unwrap_or_else[U](self, _f: Callable[[], U]) -> T:
        """Return the contained value, ignoring the fallback function."""
        return self.value

    def flatten[U](self: Some[Some[U] | NothingType]) -> Some[U] | NothingType:
        """Flatten a nested Maybe.

        Converts Some(Some(x)) into Some(x) and Some(Nothing) into Nothing.

        Raises:
            FlattenError: If the contained value is not itself a Maybe.
        """
        if not is_maybe(self.value):
            raise FlattenError('Maybe', self.value)
        return self.value

    def json(self) -> dict[str, T]:
        """Return the wire form ``{"#some": value}``."""
        return {SOME_TAG: self.value}


@final
class NothingType:
    """Nothing variant of Maybe representing absence of a value.

    This is a singleton: ``NothingType()`` always returns the shared
    ``Nothing`` instance, and copies or unpickled values are that instance too.

    Examples:
        >>> Nothing.is_none()
        True
        >>> Nothing.unwrap_or(0)
        0
        >>> Nothing.json() is None
        True
    """

    __slots__ = ()
    __match_args__ = ()

    _instance: NothingType | None = None

    def __new__(cls) -> NothingType:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return 'Nothing'

    def __reduce__(self) -> str:
        return 'Nothing'

    def __copy__(self) -> NothingType:
        return self

    def __deepcopy__(self, _memo: dict[int, Any]) -> NothingType:
        return self

    def is_some(self) -> TypeIs[Some[Any]]:
        """Return False since this is Nothing."""
        return False

    def is_none(self) -> TypeIs[NothingType]:
        """Return True since this is Nothing."""
        return True

    def is_some_and(self, _f: Callable[[Any], object]) -> bool:
        """Return False since there is no value to test."""
        return False

    def map(self, _f: Callable[[Any], object]) -> NothingType:
        """Return Nothing since there's no value to map."""
        return self

    def filter(self, _predicate: Callable[[Any], object]) -> NothingType:
        """Return Nothing since there's no value to filter."""
        return self

    def inspect(self, _f: Callable[[Any], object]) -> NothingType:
        """Return Nothing without calling f."""
        return self

    def or_[U](self, alt: Some[U] | NothingType) -> Some[U] | NothingType:
        """Return the alternative since this is Nothing."""
        return alt

    def unwrap(self) -> NoReturn:
        """Raise since Nothing has no value to unwrap.

        Only call ``unwrap`` once presence has been established.

        Raises:
            UnwrapError: Always.
        """
        raise UnwrapError('Tried to unwrap Nothing')

    def unwrap_or[U](self, default: U) -> U:
        """Return the default value since this is Nothing."""
        return default

    def unwrap_or_else[U](self, f: Callable[[], U]) -> U:
        """Compute and return a default value since this is Nothing."""
        return f()

    def flatten(self) -> NothingType:
        """Return Nothing since there's nothing to flatten."""
        return self

    def json(self) -> None:
        """Return the wire form for absence, which is None (JSON null)."""
        return None


Nothing: Final[NothingType] = NothingType()
"""Singleton instance representing the absence of a value."""

type Maybe[T] = Some[T] | NothingType

type SerializedMaybe[T] = dict[str, T] | None


def is_maybe(obj: object) -> TypeIs[Some[Any] | NothingType]:
    """Return True if obj is one of the two Maybe variants."""
    return isinstance(obj, Some | NothingType)


def parse[T](wire: SerializedMaybe[T]) -> Maybe[T]:
    """Rebuild a Maybe from its wire form.

    Only the top level is decoded; a payload that is itself a wire form is
    returned as the plain mapping it is.

    Args:
        wire: ``None`` or a mapping holding the ``#some`` key. Other keys are
            ignored.

    Returns:
        Nothing for None, otherwise Some of the tagged payload.

    Raises:
        WireFormatError: If wire is neither None nor a ``#some`` mapping.
    """
    if wire is None:
        return Nothing
    if isinstance(wire, Mapping) and SOME_TAG in wire:
        return Some(wire[SOME_TAG])
    raise WireFormatError('Maybe', wire)


def eq[T](a: Maybe[T], b: Maybe[T], custom_eq: Callable[[T, T], bool] | None = None) -> bool:
    """Compare two Maybes.

    Two Nothings are equal, Some and Nothing never are, and two Somes are
    compared on their values with ``custom_eq`` or ``==``.
    """
    match a, b:
        case NothingType(), NothingType():
            return True
        case Some(left), Some(right):
            if custom_eq is None:
                return bool(left == right)
            return bool(custom_eq(left, right))
        case _:
            return False


def falsy[T](value: T | None) -> Maybe[T]:
    """Nothing for a falsy value (None, 0, "", False, empty containers), else Some(value).

    Falsiness is Python truthiness, so NaN is truthy and objects may define
    their own ``__bool__`` or ``__len__``.
    """
    if not value:
        return Nothing
    return Some(value)


def nullish[T](value: T | None) -> Maybe[T]:
    """Nothing for None, Some(value) for anything else, falsy values included."""
    if value is None:
        return Nothing
    return Some(value)
