"""Spotlight search tool."""

from __future__ import annotations

from typing import Any

from spot.formatting import format_results
from spot.query import compile_query, parse_sort_spec
from spot.tools.base import ParamSpec, Tool, arg_int, arg_str

DEFAULT_RESULT_LIMIT = 100

QUERY_HELP = (
    "Query: glob or @name:*.ext @content:text @kind:folder @type:UTI "
    "@mod:days @size:>1M"
)


def split_scopes(value: str | None) -> list[str] | None:
    """Split a comma-separated scope list, dropping empty entries."""
    if value is None:
        return None
    return [s.strip() for s in value.split(",") if s.strip()]


class SearchTool(Tool):
    name = "search"
    description = (
        "Spotlight search. Query: @name:*.swift @content:TODO @kind:folder "
        "@type:public.swift-source @mod:7 @size:>1M (or raw MDQuery). "
        "fmt: compact|full|paths|count."
    )
    cli_description = "Search files via Spotlight"
    returns = "Lines: path[|size|date]"
    params = {
        "q": ParamSpec("string", QUERY_HELP, required=True, label="query"),
        "in": ParamSpec("string", "Scope path(s), comma-separated"),
        "n": ParamSpec(
            "integer", f"Max results (default: {DEFAULT_RESULT_LIMIT})"
        ),
        "sort": ParamSpec(
            "string", "Sort: name|date|size|created (-prefix for desc)"
        ),
        "fmt": ParamSpec(
            "string", "Output format: compact|full|paths|count"
        ),
    }

    async def run(self, args: dict[str, Any]) -> str:
        query = compile_query(self.require_str(args, "q"))
        scopes = split_scopes(arg_str(args, "in"))
        fmt = arg_str(args, "fmt") or "compact"

        if fmt == "count":
            return str(self.gateway.count(query, scopes))

        limit = arg_int(args, "n")
        if limit is None:
            limit = DEFAULT_RESULT_LIMIT
        sort_by, descending = parse_sort_spec(arg_str(args, "sort"))

        results = self.gateway.execute(
            query,
            scopes=scopes,
            limit=limit,
            sort_by=sort_by,
            descending=descending,
        )
        return format_results(results, fmt)
