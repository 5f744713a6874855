"""Tests for verifying import styles work correctly."""


class TestFlatImports:
    """Verify flat imports from maybe_result work."""

    def test_result_types(self) -> None:
        """Test importing Result types from root."""
        from maybe_result import Err, Ok, Result

        assert Ok(42).unwrap() == 42
        assert Err('error').is_err()
        outcome: Result[int, str] = Ok(1)
        assert outcome.is_ok()

    def test_maybe_types(self) -> None:
        """Test importing Maybe types from root."""
        from maybe_result import Maybe, Nothing, NothingType, Some

        assert Some(42).unwrap() == 42
        assert Nothing.is_none()
        value: Maybe[int] = Some(1)
        assert value.is_some()
        assert isinstance(Nothing, NothingType)

    def test_adapters(self) -> None:
        """Test importing the boundary adapters from root."""
        from maybe_result import wrap, wrap_async, wrap_promise

        assert callable(wrap)
        assert callable(wrap_async)
        assert callable(wrap_promise)

    def test_errors(self) -> None:
        """Every library exception derives from MaybeResultError."""
        from maybe_result import (
            ContractViolationError,
            ErrPayloadError,
            FlattenError,
            MaybeResultError,
            UnwrapError,
            WireFormatError,
        )

        for exc_type in (ContractViolationError, ErrPayloadError, FlattenError, UnwrapError, WireFormatError):
            assert issubclass(exc_type, MaybeResultError)
        assert issubclass(UnwrapError, ContractViolationError)
        assert issubclass(FlattenError, TypeError)


class TestNamespaceImports:
    """Verify the namespace modules expose their helpers."""

    def test_maybe_namespace(self) -> None:
        """Test the maybe namespace."""
        from maybe_result import maybe

        for name in ('parse', 'eq', 'falsy', 'nullish'):
            assert callable(getattr(maybe, name))

    def test_result_namespace(self) -> None:
        """Test the result namespace."""
        from maybe_result import result

        for name in ('parse', 'all_', 'throw_err', 'wrap', 'wrap_async', 'wrap_promise'):
            assert callable(getattr(result, name))

    def test_codec_namespace(self) -> None:
        """Test the codec namespace."""
        from maybe_result import codec

        for name in ('encode', 'decode_maybe', 'decode_result', 'get_codec'):
            assert callable(getattr(codec, name))

    def test_all_exports_resolve(self) -> None:
        """Every name in __all__ is importable."""
        import maybe_result

        for name in maybe_result.__all__:
            assert hasattr(maybe_result, name), name
