"""Search gateway: runs compiled queries against Spotlight."""

from __future__ import annotations

import os
from collections.abc import Sequence
from datetime import datetime
from typing import Any

from spot import attributes as attr
from spot.engine import MDQueryEngine, SearchEngine
from spot.exceptions import InvalidScope
from spot.logging_config import get_logger
from spot.models import SearchResult, isoformat_utc

logger = get_logger("gateway")

NO_METADATA = "No metadata available"


def _as_int(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return int(value)
    return None


def _as_str(value: Any) -> str | None:
    return value if isinstance(value, str) else None


def _as_datetime(value: Any) -> datetime | None:
    return value if isinstance(value, datetime) else None


def format_value(value: Any) -> str:
    """Render an attribute value for `Key: value` metadata lines."""
    if isinstance(value, datetime):
        return isoformat_utc(value)
    if isinstance(value, (list, tuple)):
        return ", ".join(format_value(v) for v in value)
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def resolve_scopes(scopes: Sequence[str] | None) -> list[str] | None:
    """Absolute scope paths, relative ones taken from the working directory.

    Empty or missing scopes mean system-wide (None).
    """
    if not scopes:
        return None
    return [os.path.abspath(os.path.expanduser(s)) for s in scopes]


def short_attribute_name(name: str) -> str:
    """kMDItemFSName -> FSName, _kMDItemOwnerUserID -> _OwnerUserID."""
    return name.replace("_kMDItem", "_").replace("kMDItem", "")


class SearchGateway:
    """Executes compiled queries and single-item lookups.

    Holds no per-call state, so one instance can be shared between tool
    handlers.
    """

    def __init__(self, engine: SearchEngine | None = None):
        self._engine = engine

    @property
    def engine(self) -> SearchEngine:
        # created lazily so `spot schema` works without Spotlight bindings
        if self._engine is None:
            self._engine = MDQueryEngine()
        return self._engine

    def execute(
        self,
        query: str,
        scopes: Sequence[str] | None = None,
        limit: int = 0,
        sort_by: str | None = None,
        descending: bool = True,
    ) -> list[SearchResult]:
        """Run `query` and return matched items in engine order.

        Args:
            query: Compiled MDQuery string
            scopes: Directories to search within (empty: system-wide)
            limit: Maximum results, enforced by the engine (<= 0: unlimited)
            sort_by: Attribute to sort by (default: engine order)
            descending: Reverse the sort order

        Raises:
            QueryCreationFailed: Spotlight rejected the query string
            ExecutionFailed: Spotlight could not run the query
        """
        scopes = resolve_scopes(scopes)
        limit = max(limit, 0)
        logger.debug(
            "execute query=%s scopes=%s limit=%s sort=%s desc=%s",
            query,
            scopes,
            limit,
            sort_by,
            descending,
        )

        rows = self.engine.run(query, scopes, limit, sort_by, descending)

        results = []
        for row in rows:
            result = self._to_result(row)
            if result is not None:
                results.append(result)
        return results

    def count(self, query: str, scopes: Sequence[str] | None = None) -> int:
        """Count matches for `query` without fetching attributes."""
        scopes = resolve_scopes(scopes)
        logger.debug("count query=%s scopes=%s", query, scopes)
        return self.engine.count(query, scopes)

    def metadata(self, path: str) -> str:
        """All Spotlight attributes of `path` as sorted `Key: value` lines.

        Raises:
            InvalidScope: Spotlight cannot resolve the path
        """
        values = self.engine.item_attributes(path)
        if values is None:
            raise InvalidScope(path)
        if not values:
            return NO_METADATA

        return "\n".join(
            f"{short_attribute_name(name)}: {format_value(values[name])}"
            for name in sorted(values)
        )

    @staticmethod
    def _to_result(row: dict[str, Any]) -> SearchResult | None:
        path = _as_str(row.get(attr.PATH))
        if not path:
            return None

        return SearchResult(
            path=path,
            name=_as_str(row.get(attr.FS_NAME)) or os.path.basename(path),
            kind=_as_str(row.get(attr.KIND)),
            size=_as_int(row.get(attr.FS_SIZE)),
            modified=_as_datetime(row.get(attr.CONTENT_MODIFICATION_DATE)),
            created=_as_datetime(row.get(attr.FS_CREATION_DATE)),
            content_type=_as_str(row.get(attr.CONTENT_TYPE)),
        )
