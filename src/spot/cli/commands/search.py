"""Search command - run a shorthand or raw query through Spotlight."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Annotated, Literal

import tyro

from spot import console
from spot.cli._common import enable_debug, get_gateway
from spot.formatting import format_results
from spot.query import compile_query, parse_sort_spec
from spot.tools.search import DEFAULT_RESULT_LIMIT, split_scopes


@dataclass
class Search:
    """Search files via Spotlight."""

    query: tyro.conf.Positional[str] = field(
        metadata={
            "help": (
                "Query: glob pattern, @name:*.swift, @content:TODO, "
                "@kind:folder, @type:UTI, @mod:7 (days), @size:>1M"
            )
        },
    )
    scope: Annotated[
        str | None,
        tyro.conf.arg(name="in", aliases=("-i", "--scope")),
    ] = field(
        default=None,
        metadata={"help": "Search scope path(s), comma-separated"},
    )
    limit: Annotated[int, tyro.conf.arg(aliases=("-n",))] = field(
        default=DEFAULT_RESULT_LIMIT,
        metadata={"help": "Max results (0 = unlimited)"},
    )
    sort: str | None = field(
        default=None,
        metadata={"help": "Sort: name|date|size|created (prefix - for desc)"},
    )
    fmt: Annotated[
        Literal["compact", "full", "paths", "json"],
        tyro.conf.arg(aliases=("--format",)),
    ] = field(
        default="compact",
        metadata={"help": "Output format"},
    )
    debug: bool = field(
        default=False,
        metadata={"help": "Enable debug logging"},
    )

    def run(self) -> int:
        """Execute the search command."""
        if self.debug:
            enable_debug()

        sort_by, descending = parse_sort_spec(self.sort)
        results = get_gateway().execute(
            compile_query(self.query),
            scopes=split_scopes(self.scope),
            limit=self.limit,
            sort_by=sort_by,
            descending=descending,
        )

        if not results and self.fmt != "json":
            console.dim("no matches")
            return 0

        print(format_results(results, self.fmt))
        return 0
