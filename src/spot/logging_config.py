"""structlog configuration.

stdout belongs to command output and the JSON-RPC channel, so every log
line is written to stderr. Set SPOT_DEBUG=1 for debug output.
"""

from __future__ import annotations

import logging
import os
import sys

import structlog

ENV_DEBUG = "SPOT_DEBUG"

_configured = False


class _Stderr:
    """File-like view of the current `sys.stderr`, looked up per write."""

    def write(self, message: str) -> int:
        return sys.stderr.write(message)

    def flush(self) -> None:
        sys.stderr.flush()


def _debug_enabled() -> bool:
    return os.environ.get(ENV_DEBUG, "").lower() in ("1", "true", "yes")


def configure_logging(debug: bool | None = None) -> None:
    """Configure structlog for the process.

    Args:
        debug: Force debug logging on or off (default: from SPOT_DEBUG)
    """
    global _configured

    if debug is None:
        debug = _debug_enabled()
    level = logging.DEBUG if debug else logging.WARNING

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="%H:%M:%S"),
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=_Stderr()),
        cache_logger_on_first_use=False,
    )
    _configured = True


def get_logger(name: str) -> structlog.typing.FilteringBoundLogger:
    """Get a named logger, configuring defaults on first use."""
    if not _configured:
        configure_logging()
    return structlog.get_logger(name)
