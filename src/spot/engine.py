"""Spotlight engine boundary.

The gateway talks to Spotlight only through `SearchEngine`. The production
implementation drives the Metadata framework (MDQuery / MDItem) through
PyObjC; tests plug in an in-memory engine.
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime, timezone
from typing import Any, Protocol

from spot import attributes as attr
from spot.exceptions import (
    EngineUnavailable,
    ExecutionFailed,
    QueryCreationFailed,
)
from spot.logging_config import get_logger

logger = get_logger("engine")


class SearchEngine(Protocol):
    """What the gateway needs from a metadata search engine."""

    def run(
        self,
        query: str,
        scopes: Sequence[str] | None,
        limit: int,
        sort_by: str | None,
        descending: bool,
    ) -> list[dict[str, Any]]:
        """Run `query` and return one attribute mapping per matched item.

        `limit` > 0 caps the number of items collected by the engine.
        """
        ...

    def count(self, query: str, scopes: Sequence[str] | None) -> int: ...

    def item_attributes(self, path: str) -> dict[str, Any] | None:
        """All attributes Spotlight holds for `path`, None if unresolvable."""
        ...


def to_python(value: Any) -> Any:
    """Normalize a value bridged from Objective-C into plain Python types."""
    if value is None or isinstance(value, (bool, int, float)):
        return value
    if isinstance(value, str):
        return str(value)
    if hasattr(value, "timeIntervalSince1970"):
        return datetime.fromtimestamp(
            value.timeIntervalSince1970(), tz=timezone.utc
        )
    if isinstance(value, (list, tuple)) or hasattr(value, "objectAtIndex_"):
        return [to_python(v) for v in value]
    return value


class MDQueryEngine:
    """SearchEngine backed by the macOS Metadata framework.

    Queries run with kMDQuerySynchronous, so every call blocks until
    Spotlight has gathered all results.
    """

    def __init__(self) -> None:
        try:
            import CoreServices
        except ImportError as e:
            raise EngineUnavailable(
                "Spotlight is not available (requires macOS with "
                "pyobjc-framework-CoreServices)"
            ) from e
        self._cs = CoreServices

    def _create(
        self,
        query: str,
        scopes: Sequence[str] | None,
        value_attrs: Sequence[str] | None = None,
        sort_attrs: Sequence[str] | None = None,
    ) -> Any:
        cs = self._cs
        md_query = cs.MDQueryCreate(
            None,
            query,
            list(value_attrs) if value_attrs else None,
            list(sort_attrs) if sort_attrs else None,
        )
        if md_query is None:
            raise QueryCreationFailed()
        if scopes:
            cs.MDQuerySetSearchScope(md_query, list(scopes), 0)
        return md_query

    def _execute(self, md_query: Any) -> None:
        cs = self._cs
        if not cs.MDQueryExecute(md_query, cs.kMDQuerySynchronous):
            raise ExecutionFailed()

    def run(
        self,
        query: str,
        scopes: Sequence[str] | None,
        limit: int,
        sort_by: str | None,
        descending: bool,
    ) -> list[dict[str, Any]]:
        cs = self._cs
        sort_attrs = [sort_by] if sort_by else None
        md_query = self._create(
            query, scopes, attr.RESULT_ATTRIBUTES, sort_attrs
        )

        if sort_by:
            cs.MDQuerySetSortOrder(md_query, [sort_by])
            if descending:
                cs.MDQuerySetSortOptionFlagsForAttribute(
                    md_query, sort_by, cs.kMDQueryReverseSortOrderFlag
                )
        if limit > 0:
            cs.MDQuerySetMaxCount(md_query, limit)

        self._execute(md_query)

        rows: list[dict[str, Any]] = []
        for i in range(cs.MDQueryGetResultCount(md_query)):
            row = {}
            for name in attr.RESULT_ATTRIBUTES:
                value = cs.MDQueryGetAttributeValueOfResultAtIndex(
                    md_query, name, i
                )
                if value is not None:
                    row[name] = to_python(value)
            rows.append(row)

        logger.debug("mdquery returned %s rows", len(rows))
        return rows

    def count(self, query: str, scopes: Sequence[str] | None) -> int:
        md_query = self._create(query, scopes)
        self._execute(md_query)
        return int(self._cs.MDQueryGetResultCount(md_query))

    def item_attributes(self, path: str) -> dict[str, Any] | None:
        cs = self._cs
        item = cs.MDItemCreate(None, path)
        if item is None:
            return None

        names = cs.MDItemCopyAttributeNames(item)
        if names is None:
            return {}

        values: dict[str, Any] = {}
        for name in names:
            value = cs.MDItemCopyAttribute(item, name)
            if value is not None:
                values[str(name)] = to_python(value)
        return values
