"""Process-wide configuration: Config, init, and get_config."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from maybe_result._logging import configure_logging

__all__ = [
    'Config',
    'get_config',
    'init',
    'reset',
]

LOG_LEVEL_ENV = 'MAYBE_RESULT_LOG_LEVEL'
LOG_JSON_ENV = 'MAYBE_RESULT_LOG_JSON'

_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


@dataclass(frozen=True)
class Config:
    """Configuration for maybe-result.

    Attributes:
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = leave logging alone.
        json_logs: Render log records as JSON (True) or for the console (False).
        wrap_exceptions: Exception types the ``wrap*`` adapters turn into ``Err``
            when no explicit ``exceptions`` argument is given.
    """

    log_level: str | None = None
    json_logs: bool = True
    wrap_exceptions: tuple[type[BaseException], ...] = (Exception,)


_DEFAULT = Config()

# Global configuration (set by init())
_config: Config | None = None


def _detect_log_level() -> str | None:
    """Read the log level from ``MAYBE_RESULT_LOG_LEVEL``; unknown values are ignored."""
    env_level = os.environ.get(LOG_LEVEL_ENV, '').strip().upper()
    if not env_level:
        return None
    if env_level not in _LEVELS:
        logging.getLogger(__name__).warning("Unknown %s value '%s', logging left unconfigured", LOG_LEVEL_ENV, env_level)
        return None
    return env_level


def _detect_json_logs() -> bool:
    """Read the JSON rendering switch from ``MAYBE_RESULT_LOG_JSON`` (defaults to True)."""
    env_json = os.environ.get(LOG_JSON_ENV, '').strip().lower()
    return env_json not in ('0', 'false', 'no', 'off')


def init(
    log_level: str | None = None,
    *,
    json_logs: bool | None = None,
    wrap_exceptions: tuple[type[BaseException], ...] | None = None,
) -> Config:
    """Initialize maybe-result with the given configuration.

    Args:
        log_level: Logging level ("DEBUG", "INFO", etc.). Falls back to
            ``MAYBE_RESULT_LOG_LEVEL``; None leaves logging unconfigured.
        json_logs: JSON (True) or console (False) rendering. Falls back to
            ``MAYBE_RESULT_LOG_JSON``.
        wrap_exceptions: Default exception types captured by ``wrap``,
            ``wrap_async`` and ``wrap_promise``.

    Returns:
        The Config that was set.

    Raises:
        TypeError: If ``wrap_exceptions`` holds something other than exception types.

    Example:
        ```python
        from maybe_result import init

        init('DEBUG', json_logs=False, wrap_exceptions=(ValueError, OSError))
        ```
    """
    global _config  # noqa: PLW0603

    if wrap_exceptions is None:
        resolved_exceptions = _DEFAULT.wrap_exceptions
    else:
        resolved_exceptions = tuple(wrap_exceptions)
        for exc_type in resolved_exceptions:
            if not (isinstance(exc_type, type) and issubclass(exc_type, BaseException)):
                msg = f'wrap_exceptions must contain exception types, got {exc_type!r}'
                raise TypeError(msg)

    resolved_level = log_level.upper() if log_level is not None else _detect_log_level()
    resolved_json = json_logs if json_logs is not None else _detect_json_logs()

    _config = Config(
        log_level=resolved_level,
        json_logs=resolved_json,
        wrap_exceptions=resolved_exceptions,
    )

    if resolved_level is not None:
        configure_logging(resolved_level, json_output=resolved_json)

    return _config


def get_config() -> Config:
    """Get the current configuration, or the defaults if init() has not been called."""
    if _config is None:
        return _DEFAULT
    return _config


def reset() -> None:
    """Forget any configuration set by init()."""
    global _config  # noqa: PLW0603
    _config = None
