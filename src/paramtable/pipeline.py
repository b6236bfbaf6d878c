"""Load a parameter document, render it as a merged-cell table, and write it out.

Usage:
    python -m paramtable --in info.json --out info.md --sort ascending
"""

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from paramtable.config import default_output_path
from paramtable.errors import InputDocumentError, OutputError
from paramtable.layout import LayoutContext, layout
from paramtable.ordering import KeyOrderIndex, SortMode
from paramtable.render import render_table

logger = logging.getLogger(__name__)


def load_document(filepath: str | Path) -> dict[str, Any]:
    """Read and decode the JSON document; its root must be an object."""
    logger.info("Loading parameter document from %s", filepath)
    try:
        with open(filepath, "r", encoding="utf-8") as fopen:
            tree = json.load(fopen)
    except OSError as exc:
        raise InputDocumentError(f"Cannot open {filepath}: {exc}") from exc
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise InputDocumentError(f"Cannot decode {filepath}: {exc}") from exc

    if not isinstance(tree, Mapping):
        raise InputDocumentError(f"The root of {filepath} must be a JSON object, got {type(tree).__name__}")
    logger.info("Loaded %d top-level parameters", len(tree))
    return tree


def convert(
    tree: Mapping[str, Any],
    mode: SortMode = SortMode.SOURCE_ORDER,
    index: KeyOrderIndex | None = None,
    escape: bool = True,
) -> str:
    """Render a decoded document as the complete table markup."""
    ctx = LayoutContext.for_tree(tree, mode=mode, index=index, escape=escape)
    grid = layout(tree, ctx)
    logger.info("Laid out %d rows x %d columns (%d cells, order=%s)", len(grid.rows), grid.width, grid.cell_count, ctx.mode.value)
    return render_table(grid)


def save_output(markup: str, filepath: str | Path) -> Path:
    """Write the markup to ``filepath``, replacing any existing file."""
    filepath = Path(filepath)
    try:
        with open(filepath, "w", encoding="utf-8") as fopen:
            fopen.write(markup)
    except OSError as exc:
        raise OutputError(f"Cannot write {filepath}: {exc}", markup) from exc
    logger.info("Wrote parameter table to %s", filepath)
    return filepath


def run(
    input_path: str | Path,
    output_path: str | Path | None = None,
    mode: SortMode = SortMode.SOURCE_ORDER,
    index: KeyOrderIndex | None = None,
    escape: bool = True,
) -> Path:
    """Convert ``input_path`` and write the result; returns the output path."""
    if output_path is None:
        output_path = default_output_path(input_path)
    tree = load_document(input_path)
    markup = convert(tree, mode=SortMode(mode), index=index, escape=escape)
    return save_output(markup, output_path)
