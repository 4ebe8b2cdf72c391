"""Shared helpers for CLI commands."""

from __future__ import annotations

import os

from spot.gateway import SearchGateway
from spot.logging_config import ENV_DEBUG, configure_logging


def get_gateway() -> SearchGateway:
    """Gateway used by CLI commands (patched in tests)."""
    return SearchGateway()


def enable_debug() -> None:
    os.environ[ENV_DEBUG] = "1"
    configure_logging(debug=True)
