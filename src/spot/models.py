"""Pydantic models for search results."""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field, field_serializer


def isoformat_utc(value: datetime) -> str:
    """Format a timestamp as ISO 8601 in UTC, e.g. 2024-05-01T12:00:00Z."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


class SearchResult(BaseModel):
    """A single file matched by a Spotlight query."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    path: str = Field(min_length=1)
    name: str
    kind: str | None = Field(default=None, description="Localized file kind")
    size: int | None = Field(default=None, description="Size in bytes")
    modified: datetime | None = Field(
        default=None, description="Content modification date"
    )
    created: datetime | None = Field(
        default=None, description="Filesystem creation date"
    )
    content_type: str | None = Field(
        default=None,
        alias="contentType",
        description="Uniform type identifier",
    )

    @field_serializer("modified", "created")
    def _serialize_date(self, value: datetime | None) -> str | None:
        if value is None:
            return None
        return isoformat_utc(value)
