"""Count command - number of files matching a query."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Annotated

import tyro

from spot.cli._common import get_gateway
from spot.query import compile_query
from spot.tools.search import split_scopes


@dataclass
class Count:
    """Count matching files."""

    query: tyro.conf.Positional[str] = field(
        metadata={"help": "Query (same format as search)"},
    )
    scope: Annotated[str | None, tyro.conf.arg(aliases=("-s",))] = field(
        default=None,
        metadata={"help": "Search scope path(s), comma-separated"},
    )

    def run(self) -> int:
        """Execute the count command."""
        print(
            get_gateway().count(
                compile_query(self.query), scopes=split_scopes(self.scope)
            )
        )
        return 0
