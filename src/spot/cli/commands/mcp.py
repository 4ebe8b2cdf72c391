"""MCP commands - run the stdio server or print client setup."""

from __future__ import annotations

import os
import shutil
import sys
from dataclasses import dataclass, field

import tyro

from spot.query import QUERY_SHORTHAND
from spot.server.config import ServerConfig
from spot.server.mcp_server import run_server
from spot.tools import ALL_TOOL_NAMES


@dataclass
class Mcp:
    """Run as MCP server (JSON-RPC over stdio).

    All tools are enabled by default. Name tools to enable only those:
    `spot mcp search`, `spot mcp meta`.
    """

    tools: tyro.conf.Positional[tuple[str, ...]] = field(
        default=(),
        metadata={
            "help": (
                "Tools to enable (default: all, or SPOT_TOOLS). Valid: "
                + ", ".join(sorted(ALL_TOOL_NAMES))
            )
        },
    )

    def run(self) -> int:
        """Execute the mcp command."""
        if self.tools:
            config = ServerConfig.from_names(self.tools)
        else:
            config = ServerConfig.from_env()
        run_server(config)
        return 0


def resolve_executable(argv0: str) -> str:
    """Absolute path of the running executable, for config snippets."""
    if os.path.isabs(argv0):
        return argv0
    if os.sep in argv0:
        return os.path.abspath(argv0)
    return shutil.which(argv0) or argv0


def setup_instructions(executable: str) -> str:
    shorthand = "\n".join(
        f"  {key:<16}- {desc}" for key, desc in QUERY_SHORTHAND.items()
    )
    tools = "\n".join(f"  - {name}" for name in sorted(ALL_TOOL_NAMES))
    return f"""\
spot - Spotlight search for AI

MCP tools:
{tools}

=== Claude Code ===

All tools:

  claude mcp add spot -- {executable} mcp

Specific tools only:

  claude mcp add spot -- {executable} mcp search
  claude mcp add spot -- {executable} mcp meta

=== Claude Desktop ===

Add to ~/Library/Application Support/Claude/claude_desktop_config.json:

{{
  "mcpServers": {{
    "spot": {{
      "command": "{executable}",
      "args": ["mcp"]
    }}
  }}
}}

For specific tools only, add tool names to args:
  "args": ["mcp", "search"]

=== Query syntax ===

{shorthand}

Plain text is treated as a filename glob pattern."""


@dataclass
class McpHelp:
    """Show MCP client configuration instructions."""

    def run(self) -> int:
        """Execute the mcp:help command."""
        print(setup_instructions(resolve_executable(sys.argv[0])))
        return 0
