"""Text projections of search results."""

from __future__ import annotations

import json
from collections.abc import Callable, Sequence

from spot.models import SearchResult, isoformat_utc


def format_size(size: int) -> str:
    """Human size with integer division: 2048 -> 2K."""
    if size < 1024:
        return f"{size}B"
    if size < 1024 * 1024:
        return f"{size // 1024}K"
    if size < 1024 * 1024 * 1024:
        return f"{size // (1024 * 1024)}M"
    return f"{size // (1024 * 1024 * 1024)}G"


def compact_line(result: SearchResult) -> str:
    """path|size|modified - minimal tokens for AI callers."""
    parts = [result.path]
    if result.size is not None:
        parts.append(format_size(result.size))
    if result.modified is not None:
        parts.append(isoformat_utc(result.modified))
    return "|".join(parts)


def full_line(result: SearchResult) -> str:
    parts = [result.path]
    if result.kind is not None:
        parts.append(f"kind:{result.kind}")
    if result.size is not None:
        parts.append(f"size:{result.size}")
    if result.modified is not None:
        parts.append(f"mod:{isoformat_utc(result.modified)}")
    if result.content_type is not None:
        parts.append(f"type:{result.content_type}")
    return " | ".join(parts)


def format_compact(results: Sequence[SearchResult]) -> str:
    return "\n".join(compact_line(r) for r in results)


def format_full(results: Sequence[SearchResult]) -> str:
    return "\n".join(full_line(r) for r in results)


def format_paths(results: Sequence[SearchResult]) -> str:
    return "\n".join(r.path for r in results)


def format_json(results: Sequence[SearchResult]) -> str:
    """JSON array with sorted keys; absent fields are omitted."""
    payload = [
        r.model_dump(mode="json", by_alias=True, exclude_none=True)
        for r in results
    ]
    return json.dumps(payload, sort_keys=True, separators=(",", ":"))


_FORMATTERS: dict[str, Callable[[Sequence[SearchResult]], str]] = {
    "compact": format_compact,
    "full": format_full,
    "paths": format_paths,
    "json": format_json,
}


def format_results(results: Sequence[SearchResult], fmt: str) -> str:
    """Render results in `fmt`; unknown formats fall back to compact."""
    return _FORMATTERS.get(fmt, format_compact)(results)
