"""JSON encoding and decoding of Maybe and Result values.

Wire forms:
    - Some(v)  -> {"#some": v}
    - Nothing  -> null
    - Ok(v)    -> {"#ok": v}
    - Err(e)   -> {"#err": e}

``Some``, ``Ok`` and ``Err`` are msgspec Structs whose field is renamed to the
wire tag, so they encode natively at any depth; ``Nothing`` is handled by the
encoder's ``enc_hook``.

Thread Safety:
    - Encoders are NOT thread-safe -> use thread-local instances
    - Decoders ARE thread-safe (reentrant) -> can share
    - JsonCodec handles this automatically

Usage:
    >>> from maybe_result.codec import encode, decode_maybe, decode_result
    >>> encode({'a': Some(1), 'b': Nothing})
    b'{"a":{"#some":1},"b":null}'
    >>> decode_result(b'{"#ok":[1,2]}', ok_type=list[int])
    Ok(value=[1, 2])
"""

from __future__ import annotations

import threading
from typing import Any

import msgspec

from maybe_result.errors import WireFormatError
from maybe_result.maybe import SOME_TAG, Maybe, Nothing, NothingType, Some
from maybe_result.result import ERR_TAG, OK_TAG, Err, Ok, Result

__all__ = [
    'JsonCodec',
    'decode_maybe',
    'decode_result',
    'encode',
    'get_codec',
]

type _Tagged = dict[str, msgspec.Raw] | None


def _enc_hook(obj: Any) -> Any:
    """Encode the values msgspec has no native support for."""
    if isinstance(obj, NothingType):
        return None
    msg = f'Objects of type {type(obj).__name__} are not supported'
    raise NotImplementedError(msg)


class JsonCodec:
    """Thread-safe JSON codec for Maybe and Result values.

    Uses thread-local storage for encoders (not thread-safe) and a shared
    decoder for the tagged envelope. Payloads are decoded in a second step
    against the requested payload type, so type mismatches surface as
    ``msgspec.ValidationError``.

    Example:
        >>> codec = JsonCodec()
        >>> data = codec.encode(Err('boom'))
        >>> codec.decode_result(data)
        Err(error='boom')
    """

    __slots__ = ('_local', '_tagged_decoder')

    def __init__(self) -> None:
        """Initialize the codec with thread-local encoder storage."""
        self._local = threading.local()
        self._tagged_decoder: msgspec.json.Decoder[_Tagged] = msgspec.json.Decoder(dict[str, msgspec.Raw] | None)

    @property
    def _encoder(self) -> msgspec.json.Encoder:
        """Get or create the thread-local encoder."""
        encoder = getattr(self._local, 'encoder', None)
        if encoder is None:
            encoder = msgspec.json.Encoder(enc_hook=_enc_hook)
            self._local.encoder = encoder
        return encoder

    def encode(self, obj: Any) -> bytes:
        """Encode a value, containers included at any depth, to JSON bytes.

        Raises:
            TypeError: If a payload has a type msgspec cannot encode.
        """
        return self._encoder.encode(obj)

    def _decode_tagged(self, buf: bytes | bytearray | memoryview | str, expected: str) -> _Tagged:
        """Decode the envelope, leaving payloads as raw JSON."""
        try:
            return self._tagged_decoder.decode(buf)
        except msgspec.ValidationError as e:
            raise WireFormatError(expected, msgspec.json.decode(buf)) from e

    def decode_maybe[T](self, buf: bytes | bytearray | memoryview | str, value_type: type[T] | Any = Any) -> Maybe[T]:
        """Decode JSON bytes holding a serialized Maybe.

        Args:
            buf: JSON document: ``null`` or an object holding ``#some``. Other
                keys are ignored, as in ``maybe.parse``.
            value_type: Expected payload type, validated by msgspec.

        Returns:
            Nothing or Some of the decoded payload.

        Raises:
            msgspec.DecodeError: If the buffer is not JSON.
            msgspec.ValidationError: If the payload does not match value_type.
            WireFormatError: If the document is not a serialized Maybe.
        """
        tagged = self._decode_tagged(buf, 'Maybe')
        if tagged is None:
            return Nothing
        if SOME_TAG not in tagged:
            raise WireFormatError('Maybe', msgspec.json.decode(buf))
        return Some(msgspec.json.decode(tagged[SOME_TAG], type=value_type))

    def decode_result[T, E](
        self,
        buf: bytes | bytearray | memoryview | str,
        ok_type: type[T] | Any = Any,
        err_type: type[E] | Any = Any,
    ) -> Result[T, E]:
        """Decode JSON bytes holding a serialized Result.

        Args:
            buf: JSON document: an object holding ``#ok`` or ``#err``. ``#ok``
                wins when both are present and other keys are ignored, as in
                ``result.parse``.
            ok_type: Expected success payload type.
            err_type: Expected error payload type.

        Returns:
            Ok or Err of the decoded payload.

        Raises:
            msgspec.DecodeError: If the buffer is not JSON.
            msgspec.ValidationError: If the payload does not match its type.
            WireFormatError: If the document is not a serialized Result.
        """
        tagged = self._decode_tagged(buf, 'Result')
        if tagged is not None:
            if OK_TAG in tagged:
                return Ok(msgspec.json.decode(tagged[OK_TAG], type=ok_type))
            if ERR_TAG in tagged:
                return Err(msgspec.json.decode(tagged[ERR_TAG], type=err_type))
        raise WireFormatError('Result', msgspec.json.decode(buf))


# Module-level singleton
_codec: JsonCodec | None = None
_codec_lock = threading.Lock()


def get_codec() -> JsonCodec:
    """Get the shared JsonCodec instance, creating it on first use."""
    global _codec  # noqa: PLW0603
    if _codec is None:
        with _codec_lock:
            if _codec is None:
                _codec = JsonCodec()
    return _codec


def encode(obj: Any) -> bytes:
    """Encode a value to JSON bytes using the shared codec."""
    return get_codec().encode(obj)


def decode_maybe[T](buf: bytes | bytearray | memoryview | str, value_type: type[T] | Any = Any) -> Maybe[T]:
    """Decode a serialized Maybe using the shared codec."""
    return get_codec().decode_maybe(buf, value_type)


def decode_result[T, E](
    buf: bytes | bytearray | memoryview | str,
    ok_type: type[T] | Any = Any,
    err_type: type[E] | Any = Any,
) -> Result[T, E]:
    """Decode a serialized Result using the shared codec."""
    return get_codec().decode_result(buf, ok_type, err_type)
