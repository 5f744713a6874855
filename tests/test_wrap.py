"""Tests for the boundary adapters: wrap, wrap_async and wrap_promise."""

import asyncio

import pytest
from maybe_result import Err, Ok, init, result, wrap, wrap_async, wrap_promise


class TestWrap:
    """Tests for wrap()."""

    def test_returns_ok_on_success(self):
        """A normal return becomes Ok."""
        assert wrap(lambda: 5)() == Ok(5)

    def test_returns_err_on_exception(self):
        """A raised exception becomes Err holding it."""

        def boom():
            raise ValueError('boom')

        outcome = wrap(boom)()
        assert isinstance(outcome, Err)
        assert isinstance(outcome.error, ValueError)
        assert str(outcome.error) == 'boom'

    def test_decorator_forms(self):
        """wrap works as a bare decorator and with arguments."""

        @wrap
        def divide(a: int, b: int) -> float:
            return a / b

        @wrap(exceptions=(ZeroDivisionError,))
        def divide_only(a: int, b: int) -> float:
            return a / b

        assert divide(10, 2) == Ok(5.0)
        assert isinstance(divide(1, 0).error, ZeroDivisionError)
        assert isinstance(divide_only(1, 0).error, ZeroDivisionError)

    def test_uncaught_types_propagate(self):
        """Exceptions outside the configured types are not captured."""

        @wrap(exceptions=(ValueError,))
        def fail():
            raise TypeError('not mine')

        with pytest.raises(TypeError):
            fail()

    def test_base_exceptions_propagate(self):
        """KeyboardInterrupt is never turned into Err by default."""

        @wrap
        def interrupt():
            raise KeyboardInterrupt

        with pytest.raises(KeyboardInterrupt):
            interrupt()

    def test_preserves_metadata(self):
        """The wrapper keeps the wrapped function's name."""

        @wrap
        def my_function():
            pass

        assert my_function.__name__ == 'my_function'

    def test_passes_arguments(self):
        """Positional and keyword arguments reach the wrapped function."""

        @wrap
        def greet(name: str, greeting: str = 'Hello') -> str:
            return f'{greeting}, {name}!'

        assert greet('World') == Ok('Hello, World!')
        assert greet(name='Python', greeting='Hi') == Ok('Hi, Python!')

    def test_wraps_methods(self):
        """wrap works on methods."""

        class Parser:
            @wrap
            def parse(self, text: str) -> int:
                return int(text)

        assert Parser().parse('12') == Ok(12)
        assert isinstance(Parser().parse('x').error, ValueError)

    def test_namespace_alias(self):
        """The result namespace exposes the same adapter."""
        assert result.wrap is wrap

    def test_configured_default_exceptions(self):
        """Without an explicit argument, the configured types are captured."""
        init(wrap_exceptions=(KeyError,))

        @wrap
        def lookup(key: str) -> int:
            return {'a': 1}[key]

        @wrap
        def convert(text: str) -> int:
            return int(text)

        assert isinstance(lookup('b').error, KeyError)
        with pytest.raises(ValueError):
            convert('x')


class TestWrapAsync:
    """Tests for wrap_async()."""

    @pytest.mark.asyncio
    async def test_returns_ok_on_success(self):
        """A normal completion becomes Ok."""

        @wrap_async
        async def fetch(x: int) -> int:
            await asyncio.sleep(0)
            return x * 2

        assert await fetch(5) == Ok(10)

    @pytest.mark.asyncio
    async def test_returns_err_after_suspension(self):
        """A failure after the first await becomes Err."""

        @wrap_async
        async def fail() -> int:
            await asyncio.sleep(0)
            raise ValueError('late')

        outcome = await fail()
        assert isinstance(outcome, Err)
        assert str(outcome.error) == 'late'

    @pytest.mark.asyncio
    async def test_captures_failure_before_first_await(self):
        """A failure before any suspension point is captured too."""

        @wrap_async
        async def fail_early() -> int:
            raise ValueError('early')

        outcome = await fail_early()
        assert isinstance(outcome.error, ValueError)

    @pytest.mark.asyncio
    async def test_captures_sync_failure_before_awaitable(self):
        """A plain function raising before it returns an awaitable gives Err."""

        def make_request(url: str):
            if not url:
                raise ValueError('empty url')
            return asyncio.sleep(0, result=url)

        wrapped = wrap_async(make_request)
        assert await wrapped('x') == Ok('x')
        outcome = await wrapped('')
        assert isinstance(outcome.error, ValueError)

    @pytest.mark.asyncio
    async def test_call_never_raises_synchronously(self):
        """Calling the wrapper only builds an awaitable."""

        def explode():
            raise RuntimeError('sync')

        pending = wrap_async(explode)()
        outcome = await pending
        assert isinstance(outcome.error, RuntimeError)

    @pytest.mark.asyncio
    async def test_with_exceptions_param(self):
        """wrap_async(exceptions=...) captures only the listed types."""

        @wrap_async(exceptions=(ValueError,))
        async def risky(x: int) -> int:
            if x < 0:
                raise ValueError('negative')
            if x == 0:
                raise TypeError('zero')
            return x

        assert await risky(5) == Ok(5)
        assert isinstance((await risky(-1)).error, ValueError)
        with pytest.raises(TypeError):
            await risky(0)


class TestWrapPromise:
    """Tests for wrap_promise()."""

    @pytest.mark.asyncio
    async def test_resolved(self):
        """A resolved awaitable becomes Ok."""

        async def produce():
            return 'y'

        assert await wrap_promise(produce()) == Ok('y')

    @pytest.mark.asyncio
    async def test_rejected(self):
        """A rejected awaitable becomes Err holding the exception."""

        async def reject():
            raise LookupError('x')

        outcome = await wrap_promise(reject())
        assert isinstance(outcome.error, LookupError)
        assert outcome.error.args == ('x',)

    @pytest.mark.asyncio
    async def test_future(self):
        """Futures settled elsewhere are observed."""
        loop = asyncio.get_running_loop()
        future = loop.create_future()
        loop.call_soon(future.set_exception, ValueError('later'))
        outcome = await wrap_promise(future)
        assert isinstance(outcome.error, ValueError)

    @pytest.mark.asyncio
    async def test_task(self):
        """Tasks can be wrapped after they were started."""
        task = asyncio.create_task(asyncio.sleep(0, result=3))
        assert await wrap_promise(task) == Ok(3)

    @pytest.mark.asyncio
    async def test_cancellation_propagates(self):
        """Cancellation is not turned into Err."""
        task = asyncio.create_task(asyncio.sleep(10))
        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await wrap_promise(task)
