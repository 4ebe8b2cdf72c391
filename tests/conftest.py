from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

import pytest

from spot import attributes as attr
from spot.exceptions import ExecutionFailed
from spot.gateway import SearchGateway
from spot.logging_config import configure_logging


def make_row(
    path: str,
    size: int | None = 2048,
    modified: datetime | None = None,
    **extra: Any,
) -> dict[str, Any]:
    row: dict[str, Any] = {attr.PATH: path}
    if size is not None:
        row[attr.FS_SIZE] = size
    if modified is not None:
        row[attr.CONTENT_MODIFICATION_DATE] = modified
    row.update(extra)
    return row


class FakeEngine:
    """In-memory SearchEngine that records every call."""

    def __init__(
        self,
        rows: list[dict[str, Any]] | None = None,
        items: dict[str, dict[str, Any]] | None = None,
        fail: Exception | None = None,
    ):
        self.rows = rows or []
        self.items = items or {}
        self.fail = fail
        self.run_calls: list[dict[str, Any]] = []
        self.count_calls: list[dict[str, Any]] = []

    def run(self, query, scopes, limit, sort_by, descending):
        self.run_calls.append(
            {
                "query": query,
                "scopes": scopes,
                "limit": limit,
                "sort_by": sort_by,
                "descending": descending,
            }
        )
        if self.fail:
            raise self.fail
        rows = list(self.rows)
        if limit > 0:
            rows = rows[:limit]
        return rows

    def count(self, query, scopes):
        self.count_calls.append({"query": query, "scopes": scopes})
        if self.fail:
            raise self.fail
        return len(self.rows)

    def item_attributes(self, path):
        if self.fail:
            raise self.fail
        return self.items.get(path)


MODIFIED = datetime(2024, 5, 1, 12, 30, 0, tzinfo=timezone.utc)


@pytest.fixture(autouse=True)
def quiet_logging():
    yield
    configure_logging(debug=False)


@pytest.fixture
def rows() -> list[dict[str, Any]]:
    return [
        make_row(f"/Users/me/notes/note{i}.md", size=100 * i, modified=MODIFIED)
        for i in range(1, 13)
    ]


@pytest.fixture
def engine(rows) -> FakeEngine:
    return FakeEngine(
        rows=rows,
        items={
            "/Users/me/report.pdf": {
                "kMDItemFSName": "report.pdf",
                "kMDItemFSSize": 4096,
                "kMDItemAuthors": ["Ada", "Grace"],
                "kMDItemContentModificationDate": MODIFIED,
                "_kMDItemOwnerUserID": 501,
            },
            "/Users/me/empty": {},
        },
    )


@pytest.fixture
def gateway(engine) -> SearchGateway:
    return SearchGateway(engine)


@pytest.fixture
def failing_gateway() -> SearchGateway:
    return SearchGateway(FakeEngine(fail=ExecutionFailed()))
