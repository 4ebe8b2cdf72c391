"""Query shorthand compiler.

Translates the compact `@prefix:value` syntax into Spotlight's native
MDQuery language:

    @name:*.swift @mod:7  ->  (kMDItemFSName == "*.swift"wc &&
                               kMDItemContentModificationDate > $time.today(-7))

Compilation never fails. Values that cannot be interpreted degrade to a
permissive predicate instead of raising, so an imperfect query from an
agent still returns something.
"""

from __future__ import annotations

import re
from collections.abc import Callable

from spot import attributes as attr

# queries starting with this are raw MDQuery strings
RAW_QUERY_PREFIX = "kMD"

MATCH_ALL = f'{attr.FS_NAME} == "*"'

_INT_RE = re.compile(r"[+-]?[0-9]+")

KB = 1024
MB = 1024 * 1024
GB = 1024 * 1024 * 1024

QUERY_SHORTHAND: dict[str, str] = {
    "@name:*.ext": "Filename glob",
    "@name=Name": "Exact filename (case/diacritic-insensitive)",
    "@content:text": "Content search",
    "@kind:folder": "File kind",
    "@type:UTI": "Content type (public.swift-source)",
    "@tree:UTI": "Content type tree (includes subtypes)",
    "@mod:N": "Modified within N days",
    "@created:N": "Created within N days",
    "@size:>1M": "Size filter (K/M/G, </> prefix)",
}

COMMON_CONTENT_TYPES: dict[str, str] = {
    "public.source-code": "Any source code",
    "public.swift-source": "Swift",
    "public.objective-c-source": "Objective-C",
    "public.python-script": "Python",
    "com.netscape.javascript-source": "JavaScript",
    "public.json": "JSON",
    "public.xml": "XML",
    "public.html": "HTML",
    "net.daringfireball.markdown": "Markdown",
    "public.plain-text": "Plain text",
    "com.adobe.pdf": "PDF",
    "public.image": "Images",
    "public.audio": "Audio",
    "public.movie": "Video",
    "public.folder": "Directories",
    "com.apple.application-bundle": "Applications",
}


def escape(value: str) -> str:
    """Escape backslashes and double quotes for a quoted MDQuery value."""
    return value.replace("\\", "\\\\").replace('"', '\\"')


# ---------------------------------------------------------------------------
# Predicate builders
# ---------------------------------------------------------------------------


def filename(pattern: str) -> str:
    """Glob match on the filename: *.swift -> kMDItemFSName == "*.swift"wc.

    The pattern is embedded as-is so MDQuery wildcard escapes still work.
    """
    return f'{attr.FS_NAME} == "{pattern}"wc'


def exact_filename(name: str) -> str:
    """Exact, case- and diacritic-insensitive filename match."""
    return f'{attr.FS_NAME} == "{escape(name)}"cd'


def content(text: str) -> str:
    return f'{attr.TEXT_CONTENT} == "*{escape(text)}*"cd'


def kind(value: str) -> str:
    return f'{attr.KIND} == "{escape(value)}"cd'


def content_type(uti: str) -> str:
    return f'{attr.CONTENT_TYPE} == "{escape(uti)}"'


def content_type_tree(uti: str) -> str:
    """Content type match that includes subtypes of `uti`."""
    return f'{attr.CONTENT_TYPE_TREE} == "{escape(uti)}"'


def modified_within_days(days: int) -> str:
    return f"{attr.CONTENT_MODIFICATION_DATE} > $time.today(-{days})"


def created_within_days(days: int) -> str:
    return f"{attr.FS_CREATION_DATE} > $time.today(-{days})"


def larger_than(size: int) -> str:
    return f"{attr.FS_SIZE} > {size}"


def smaller_than(size: int) -> str:
    return f"{attr.FS_SIZE} < {size}"


def and_(*queries: str) -> str:
    return "(" + " && ".join(queries) + ")"


def or_(*queries: str) -> str:
    return "(" + " || ".join(queries) + ")"


def not_(query: str) -> str:
    return f"!({query})"


# ---------------------------------------------------------------------------
# Value parsers
# ---------------------------------------------------------------------------


def _parse_int(value: str) -> int | None:
    if _INT_RE.fullmatch(value):
        return int(value)
    return None


def parse_size(value: str) -> int:
    """Parse a size like 500, 500B, 10K, 3MB -> bytes (1024-based).

    The magnitude must be an integer; anything else (1.5M, big) yields 0.
    """
    text = value.strip().upper()
    multiplier = 1
    number = text

    if text.endswith("K") or text.endswith("KB"):
        multiplier = KB
        number = text.replace("KB", "").replace("K", "")
    elif text.endswith("M") or text.endswith("MB"):
        multiplier = MB
        number = text.replace("MB", "").replace("M", "")
    elif text.endswith("G") or text.endswith("GB"):
        multiplier = GB
        number = text.replace("GB", "").replace("G", "")
    elif text.endswith("B"):
        number = text[:-1]

    parsed = _parse_int(number)
    return (parsed or 0) * multiplier


def _date_predicate(value: str, modified: bool) -> str:
    # a typo'd day count matches everything rather than failing the query
    days = _parse_int(value)
    if days is None:
        return MATCH_ALL
    if modified:
        return modified_within_days(days)
    return created_within_days(days)


def _size_predicate(value: str) -> str:
    text = value.strip()
    op = ">"
    if text.startswith(">") or text.startswith("<"):
        op = text[0]
        text = text[1:]
    return f"{attr.FS_SIZE} {op} {parse_size(text)}"


# order matters: @name= must be tried before @name:
SHORTHAND_PREFIXES: tuple[tuple[str, Callable[[str], str]], ...] = (
    ("@name=", exact_filename),
    ("@name:", filename),
    ("@content:", content),
    ("@kind:", kind),
    ("@type:", content_type),
    ("@tree:", content_type_tree),
    ("@mod:", lambda v: _date_predicate(v, modified=True)),
    ("@created:", lambda v: _date_predicate(v, modified=False)),
    ("@size:", _size_predicate),
)


def _extract(remaining: str, prefix: str) -> tuple[str, str]:
    """Cut the first `prefix` occurrence and its value out of `remaining`.

    Returns (value, remaining_without_span). The span includes the single
    space that terminates the value.
    """
    start = remaining.index(prefix)
    value_start = start + len(prefix)
    end = remaining.find(" ", value_start)
    if end == -1:
        return remaining[value_start:], remaining[:start]
    return remaining[value_start:end], remaining[:start] + remaining[end + 1 :]


def compile_query(text: str) -> str:
    """Compile shorthand query syntax into an MDQuery string.

    Args:
        text: Shorthand query, plain filename glob, or raw MDQuery

    Returns:
        MDQuery string. Several predicates are AND-ed inside parentheses;
        an empty query matches every file.
    """
    if text.startswith(RAW_QUERY_PREFIX):
        return text

    predicates: list[str] = []
    remaining = text

    for prefix, build in SHORTHAND_PREFIXES:
        while prefix in remaining:
            value, remaining = _extract(remaining, prefix)
            if value:
                predicates.append(build(value))

    # leftover text is always a filename glob, even next to other predicates
    remaining = remaining.strip()
    if remaining:
        predicates.append(filename(remaining))

    if not predicates:
        return MATCH_ALL
    if len(predicates) == 1:
        return predicates[0]
    return and_(*predicates)


def parse_sort_spec(spec: str | None) -> tuple[str | None, bool]:
    """Parse a sort spec into (attribute, descending).

    `name|date|size|created` map to their attributes; anything else is
    used as a raw attribute name. A leading `-` sorts descending, no
    prefix sorts ascending. No spec at all leaves ordering to Spotlight.
    """
    if spec is None:
        return None, True

    descending = spec.startswith("-")
    key = spec[1:] if descending else spec
    return attr.SORT_KEYS.get(key, key), descending
