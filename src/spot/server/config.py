"""Server configuration constants and tool enablement."""

from __future__ import annotations

import os
from collections.abc import Iterable
from dataclasses import dataclass

from spot.tools import ALL_TOOL_NAMES, resolve_enabled_tools

SERVER_NAME = "spot"
SERVER_VERSION = "1.0.0"
PROTOCOL_VERSION = "2024-11-05"

# ---------------------------------------------------------------------------
# Environment
# ---------------------------------------------------------------------------
# SPOT_TOOLS=search,meta selects tools when `spot mcp` gets no tool names.
# Empty or "all" enables everything.

ENV_TOOLS = "SPOT_TOOLS"


@dataclass(frozen=True)
class ServerConfig:
    """Startup configuration for the MCP server. Fixed for the process."""

    enabled_tools: frozenset[str] = ALL_TOOL_NAMES

    @classmethod
    def from_names(cls, names: Iterable[str] = ()) -> ServerConfig:
        """Build a config from tool names (empty: all tools).

        Raises:
            ConfigurationError: If a name is not a known tool
        """
        return cls(enabled_tools=resolve_enabled_tools(names))

    @classmethod
    def from_env(cls) -> ServerConfig:
        env = os.environ.get(ENV_TOOLS, "").strip()
        if env.lower() == "all":
            return cls()
        return cls.from_names(env.split(","))
