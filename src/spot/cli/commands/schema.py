"""Schema command - tool schema for AI consumption."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

from spot import __version__
from spot.query import COMMON_CONTENT_TYPES, QUERY_SHORTHAND
from spot.tools import TOOL_TYPES


def build_schema() -> dict[str, Any]:
    """CLI-oriented schema: tools, query shorthand and common UTIs."""
    return {
        "version": __version__,
        "description": "Spotlight search for AI",
        "tools": {
            name: tool.cli_schema() for name, tool in TOOL_TYPES.items()
        },
        "queryShorthand": QUERY_SHORTHAND,
        "commonTypes": COMMON_CONTENT_TYPES,
    }


def build_mcp_schema() -> dict[str, Any]:
    """Same payload as an MCP tools/list result with every tool enabled."""
    return {
        "tools": [
            TOOL_TYPES[name]
            .definition()
            .model_dump(by_alias=True, exclude_none=True)
            for name in sorted(TOOL_TYPES)
        ]
    }


@dataclass
class Schema:
    """Output tool schema for AI consumption."""

    pretty: bool = field(
        default=False,
        metadata={"help": "Pretty-print JSON"},
    )
    mcp: bool = field(
        default=False,
        metadata={"help": "Output MCP tools/list format"},
    )

    def run(self) -> int:
        """Execute the schema command."""
        schema = build_mcp_schema() if self.mcp else build_schema()
        if self.pretty:
            print(json.dumps(schema, indent=2, sort_keys=True))
        else:
            print(json.dumps(schema, sort_keys=True, separators=(",", ":")))
        return 0
