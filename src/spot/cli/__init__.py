"""spot CLI - Spotlight search for AI, as commands or an MCP server.

Uses tyro for type-driven CLI generation from dataclasses.
"""

from __future__ import annotations

import sys
from typing import Annotated

import tyro

from spot.cli.commands.count import Count
from spot.cli.commands.mcp import Mcp, McpHelp
from spot.cli.commands.meta import Meta
from spot.cli.commands.schema import Schema
from spot.cli.commands.search import Search

# Type aliases for subcommand annotations
_Search = Annotated[Search, tyro.conf.subcommand("search")]
_Count = Annotated[Count, tyro.conf.subcommand("count")]
_Meta = Annotated[Meta, tyro.conf.subcommand("meta")]
_Schema = Annotated[Schema, tyro.conf.subcommand("schema")]
_Mcp = Annotated[Mcp, tyro.conf.subcommand("mcp")]
_McpHelp = Annotated[McpHelp, tyro.conf.subcommand("mcp:help")]

Command = _Search | _Count | _Meta | _Schema | _Mcp | _McpHelp

SUBCOMMANDS = ("search", "count", "meta", "schema", "mcp", "mcp:help")
DEFAULT_SUBCOMMAND = "search"


def with_default_subcommand(argv: list[str]) -> list[str]:
    """`spot "*.swift"` is shorthand for `spot search "*.swift"`."""
    if argv and argv[0] not in SUBCOMMANDS and not argv[0].startswith("-"):
        return [DEFAULT_SUBCOMMAND, *argv]
    return argv


def main(args: list[str] | None = None) -> int:
    """Entry point for the CLI."""
    from spot.logging_config import configure_logging

    configure_logging()
    argv = with_default_subcommand(
        list(sys.argv[1:] if args is None else args)
    )

    try:
        cmd = tyro.cli(
            Command,
            prog="spot",
            description=(
                "Spotlight search for AI - CLI and MCP server. "
                "Wraps macOS Spotlight (MDQuery) for efficient file discovery."
            ),
            args=argv,
        )
        return cmd.run()
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else 1
    except KeyboardInterrupt:
        return 130
    except Exception as e:
        from spot import console

        console.error(str(e))
        return 1
