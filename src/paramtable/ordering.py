"""Child-key ordering for branch nodes.

Three modes are supported:
  source-order -- the order keys appeared in the input text
  ascending    -- lexicographic
  descending   -- reverse lexicographic

json.load keeps object keys in document order, so source-order normally reads
the decoded mapping directly.  A KeyOrderIndex can be supplied instead when
the tree comes from a decoder that does not preserve order; every branch path
must then be present in it, and a miss is fatal for the run.
"""

import json
import logging
from collections.abc import Mapping
from enum import Enum
from pathlib import Path
from typing import Any

from paramtable.classifiers import is_branch
from paramtable.config import ROOT_PATH_NAME
from paramtable.errors import InputDocumentError, KeyOrderError

logger = logging.getLogger(__name__)

KeyPath = tuple[str, ...]


class SortMode(str, Enum):
    """How the children of every branch are ordered for the whole run."""

    SOURCE_ORDER = "source-order"
    ASCENDING = "ascending"
    DESCENDING = "descending"


def format_path(path: KeyPath) -> str:
    """Render a key path dotted, e.g. ``('a', 'b')`` -> ``'a.b'``; the root path is ``'$'``."""
    return ".".join(path) if path else ROOT_PATH_NAME


class KeyOrderIndex:
    """Maps every branch path of a document to its child keys in source order."""

    def __init__(self, entries: dict[KeyPath, list[str]]):
        self._entries = {tuple(path): list(keys) for path, keys in entries.items()}

    @classmethod
    def from_tree(cls, tree: Mapping[str, Any]) -> "KeyOrderIndex":
        """Index an already decoded, order-preserving tree."""
        entries: dict[KeyPath, list[str]] = {}

        def _walk(node: Mapping[str, Any], path: KeyPath) -> None:
            entries[path] = list(node.keys())
            for key, child in node.items():
                if is_branch(child):
                    _walk(child, path + (key,))

        # The root is a branch even when its keys happen to match the leaf signature
        _walk(tree, ())
        return cls(entries)

    @classmethod
    def from_json_text(cls, text: str) -> "KeyOrderIndex":
        """Index the key order of a JSON document given as text."""
        try:
            tree = json.loads(text)
        except json.JSONDecodeError as exc:
            raise InputDocumentError(f"Cannot index key order, invalid JSON: {exc}") from exc
        if not isinstance(tree, Mapping):
            raise InputDocumentError("Cannot index key order, the document root is not an object")
        return cls.from_tree(tree)

    @classmethod
    def from_file(cls, filepath: str | Path) -> "KeyOrderIndex":
        """Index the key order of a JSON file."""
        try:
            with open(filepath, "r", encoding="utf-8") as fopen:
                text = fopen.read()
        except OSError as exc:
            raise InputDocumentError(f"Cannot read {filepath}: {exc}") from exc
        return cls.from_json_text(text)

    def get(self, path: KeyPath) -> list[str]:
        """Return the source-order child keys recorded for ``path``."""
        try:
            return list(self._entries[tuple(path)])
        except KeyError:
            raise KeyOrderError(f"Key path '{format_path(path)}' not found in the key order index") from None

    def __contains__(self, path: object) -> bool:
        return path in self._entries

    def __len__(self) -> int:
        return len(self._entries)


def ordered_keys(
    node: Mapping[str, Any],
    path: KeyPath,
    mode: SortMode,
    index: KeyOrderIndex | None = None,
) -> list[str]:
    """Return the children keys of a branch in the configured order."""
    keys = list(node.keys())
    mode = SortMode(mode)

    if mode is SortMode.ASCENDING:
        return sorted(keys)
    if mode is SortMode.DESCENDING:
        return sorted(keys, reverse=True)

    # Source order: trust the decoder unless an explicit index was supplied
    if index is None:
        return keys
    indexed = index.get(path)
    if len(set(indexed)) != len(indexed) or set(indexed) != set(keys):
        raise KeyOrderError(
            f"Key order index for '{format_path(path)}' lists {indexed}, but the node has keys {keys}"
        )
    logger.debug("Source order for %s: %s", format_path(path), indexed)
    return indexed
