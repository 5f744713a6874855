"""Structured logging for maybe-result.

The only events the library emits are the DEBUG ``exception captured`` records
from the ``wrap*`` adapters. Loggers are structlog loggers bound to stdlib
loggers under ``maybe_result``; that logger carries a ``NullHandler``, so
nothing is printed until the application configures logging, either its own
way or through ``configure_logging``.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

__all__ = [
    'configure_logging',
    'get_logger',
]

LOGGER_NAMESPACE = 'maybe_result'

# Handler installed by configure_logging(), replaced on reconfiguration
_handler: logging.Handler | None = None


def _pre_chain() -> list[Any]:
    """Processors run on structlog events and foreign stdlib records alike."""
    return [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt='iso'),
    ]


def configure_logging(
    level: str = 'INFO',
    *,
    json_output: bool = True,
) -> None:
    """Route structlog and stdlib records through one stderr handler.

    Handlers the application put on the root logger are left in place; calling
    this again swaps out the handler from the previous call.

    Args:
        level: Root logging level ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL").
        json_output: If True, emit JSON lines. If False, use console output.
    """
    global _handler  # noqa: PLW0603

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *_pre_chain(),
            structlog.processors.StackInfoRenderer(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    renderer: Any = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
    )
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_pre_chain(),
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )

    root_logger = logging.getLogger()
    if _handler is not None:
        root_logger.removeHandler(_handler)
    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    _handler = handler


def get_logger(name: str | None = None) -> Any:
    """Get a structlog logger backed by a stdlib logger.

    Args:
        name: Logger name, relative names are placed under ``maybe_result``.

    Returns:
        A lazily bound structlog ``BoundLogger``.
    """
    if name is None:
        name = LOGGER_NAMESPACE
    elif not name.startswith(LOGGER_NAMESPACE):
        name = f'{LOGGER_NAMESPACE}.{name}'
    return structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
    )
