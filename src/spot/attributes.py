"""Spotlight metadata attribute names."""

from __future__ import annotations

FS_NAME = "kMDItemFSName"
FS_SIZE = "kMDItemFSSize"
FS_CREATION_DATE = "kMDItemFSCreationDate"
PATH = "kMDItemPath"
KIND = "kMDItemKind"
TEXT_CONTENT = "kMDItemTextContent"
CONTENT_TYPE = "kMDItemContentType"
CONTENT_TYPE_TREE = "kMDItemContentTypeTree"
CONTENT_MODIFICATION_DATE = "kMDItemContentModificationDate"

# fetched for every result row
RESULT_ATTRIBUTES: tuple[str, ...] = (
    PATH,
    FS_NAME,
    KIND,
    FS_SIZE,
    CONTENT_MODIFICATION_DATE,
    FS_CREATION_DATE,
    CONTENT_TYPE,
)

# `--sort` shorthand -> attribute
SORT_KEYS: dict[str, str] = {
    "name": FS_NAME,
    "date": CONTENT_MODIFICATION_DATE,
    "size": FS_SIZE,
    "created": FS_CREATION_DATE,
}
