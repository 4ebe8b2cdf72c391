"""MCP tool registry.

Each tool is a `Tool` subclass; adding a tool means adding its class to
TOOL_TYPES.
"""

from __future__ import annotations

from collections.abc import Iterable

from spot.exceptions import ConfigurationError
from spot.tools.base import ParamSpec, Tool
from spot.tools.meta import MetaTool
from spot.tools.search import SearchTool

TOOL_TYPES: dict[str, type[Tool]] = {
    tool.name: tool for tool in (SearchTool, MetaTool)
}

ALL_TOOL_NAMES: frozenset[str] = frozenset(TOOL_TYPES)


def resolve_enabled_tools(names: Iterable[str] = ()) -> frozenset[str]:
    """Validate a tool selection.

    Args:
        names: Tool names to enable; empty enables every tool

    Returns:
        The enabled tool names

    Raises:
        ConfigurationError: If any name is not a known tool
    """
    requested = {n.strip().lower() for n in names if n.strip()}
    if not requested:
        return ALL_TOOL_NAMES

    unknown = requested - ALL_TOOL_NAMES
    if unknown:
        raise ConfigurationError(
            f"Unknown tools: {', '.join(sorted(unknown))}. "
            f"Valid: {', '.join(sorted(ALL_TOOL_NAMES))}"
        )
    return frozenset(requested)


__all__ = [
    "ALL_TOOL_NAMES",
    "TOOL_TYPES",
    "MetaTool",
    "ParamSpec",
    "SearchTool",
    "Tool",
    "resolve_enabled_tools",
]
