"""Pytest configuration and shared fixtures for maybe-result tests."""

import pytest
from maybe_result import _config


@pytest.fixture(autouse=True)
def reset_config():
    """Start and finish every test with the default configuration."""
    _config.reset()
    yield
    _config.reset()


@pytest.fixture
def sample_ok():
    """Sample Ok value for testing."""
    from maybe_result import Ok

    return Ok(42)


@pytest.fixture
def sample_err():
    """Sample Err value for testing."""
    from maybe_result import Err

    return Err(ValueError('test error'))


@pytest.fixture
def sample_some():
    """Sample Some value for testing."""
    from maybe_result import Some

    return Some('hello')


@pytest.fixture
def sample_nothing():
    """Sample Nothing value for testing."""
    from maybe_result import Nothing

    return Nothing
