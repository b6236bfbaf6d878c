"""Tree-to-grid layout: turns a nested parameter document into table rows.

Every key becomes a label cell.  A branch label spans vertically over all the
leaf rows beneath it; a leaf row ends in a detail cell that stretches to the
right edge of the table.

To avoid rows that hold nothing but a branch label, each branch shares its
first physical row with its first child, and that child with its own first
child, all the way down the first-child chain to a leaf:

    | b (rowspan 3) | x (rowspan 2) | p | detail of p            |
    |               |               | q | detail of q            |
    |               | y             | detail of y (colspan 2)    |

When a branch's remaining children are laid out, its first child is skipped
because it was already emitted as part of the ancestor's row.
"""

import html
import logging
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from paramtable.classifiers import is_branch, is_leaf, leaf_detail
from paramtable.detail import render_detail
from paramtable.errors import StructureError
from paramtable.ordering import KeyOrderIndex, KeyPath, SortMode, format_path, ordered_keys
from paramtable.schema import Cell, Grid

logger = logging.getLogger(__name__)


class LayoutContext(BaseModel):
    """Per-run layout settings threaded through every recursive call."""

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    width: int = Field(ge=1)
    mode: SortMode = SortMode.SOURCE_ORDER
    index: KeyOrderIndex | None = None
    escape: bool = True

    @classmethod
    def for_tree(
        cls,
        root: Mapping[str, Any],
        mode: SortMode = SortMode.SOURCE_ORDER,
        index: KeyOrderIndex | None = None,
        escape: bool = True,
    ) -> "LayoutContext":
        """Build a context whose width is the column count of ``root``."""
        return cls(width=table_width(root), mode=mode, index=index, escape=escape)


# ─── Structural Measures ─────────────────────────────────────────────────────


def _require_children(node: Mapping[str, Any], path: KeyPath) -> None:
    if not node:
        raise StructureError(f"Parameter group '{format_path(path)}' has no children")


def column_count(node: Any, path: KeyPath = ()) -> int:
    """Number of table columns a node needs: its label plus everything to its right."""
    if is_leaf(node):
        return 2
    _require_children(node, path)
    return 1 + max(column_count(child, path + (key,)) for key, child in node.items())


def row_span(node: Any, path: KeyPath = ()) -> int:
    """Number of table rows a node covers, i.e. its count of leaf descendants."""
    if is_leaf(node):
        return 1
    _require_children(node, path)
    return sum(row_span(child, path + (key,)) for key, child in node.items())


def table_width(root: Mapping[str, Any]) -> int:
    """Total column count of the table.

    The root is laid out as a branch whatever its keys, but it has no label of
    its own: its children's labels occupy the first column.
    """
    _require_children(root, ())
    return max(column_count(child, (key,)) for key, child in root.items())


# ─── Cell Emission ───────────────────────────────────────────────────────────


def _label_cell(key: str, ctx: LayoutContext, rowspan: int = 1) -> Cell:
    content = html.escape(key) if ctx.escape else key
    return Cell(content=content, rowspan=rowspan)


def _children(node: Mapping[str, Any], path: KeyPath, ctx: LayoutContext) -> list[str]:
    _require_children(node, path)
    return ordered_keys(node, path, ctx.mode, ctx.index)


def _leaf_cells(key: str, node: Any, path: KeyPath, column: int, ctx: LayoutContext) -> list[Cell]:
    """Label and detail cells for a leaf whose label sits in ``column``."""
    colspan = ctx.width - column - 1
    if colspan < 1:
        raise StructureError(f"No room left for the detail of '{format_path(path)}' (column {column} of {ctx.width})")
    detail = render_detail(leaf_detail(key, node), escape=ctx.escape)
    return [_label_cell(key, ctx), Cell(content=detail, colspan=colspan)]


def _first_column_cells(node: Mapping[str, Any], path: KeyPath, column: int, ctx: LayoutContext) -> list[Cell]:
    """Cells for the whole first-child chain of ``node``, starting in ``column``."""
    first = _children(node, path, ctx)[0]
    child = node[first]
    child_path = path + (first,)
    if is_leaf(child):
        return _leaf_cells(first, child, child_path, column, ctx)
    cells = [_label_cell(first, ctx, rowspan=row_span(child, child_path))]
    cells.extend(_first_column_cells(child, child_path, column + 1, ctx))
    return cells


def _emit_rows(
    node: Mapping[str, Any],
    path: KeyPath,
    column: int,
    ctx: LayoutContext,
    folded: bool,
) -> list[list[Cell]]:
    """Rows for the children of ``node``, whose labels sit in ``column``.

    When ``folded`` is set the first child was already emitted in an ancestor's
    row, so only its own remaining descendants are laid out here.
    """
    keys = _children(node, path, ctx)
    rows: list[list[Cell]] = []

    if folded:
        first = keys[0]
        if is_branch(node[first]):
            rows.extend(_emit_rows(node[first], path + (first,), column + 1, ctx, folded=True))
        keys = keys[1:]

    for key in keys:
        child = node[key]
        child_path = path + (key,)
        if is_leaf(child):
            rows.append(_leaf_cells(key, child, child_path, column, ctx))
            continue

        # Branch label, then its first-child chain in the same physical row
        row = [_label_cell(key, ctx, rowspan=row_span(child, child_path))]
        row.extend(_first_column_cells(child, child_path, column + 1, ctx))
        rows.append(row)
        rows.extend(_emit_rows(child, child_path, column + 1, ctx, folded=True))

    return rows


def layout(root: Mapping[str, Any], ctx: LayoutContext) -> Grid:
    """Lay out the whole document as a grid of ``ctx.width`` columns."""
    if ctx.width != table_width(root):
        raise StructureError(f"Layout width {ctx.width} does not match the document's column count {table_width(root)}")

    rows = _emit_rows(root, (), 0, ctx, folded=False)
    logger.debug("Emitted %d rows across %d columns", len(rows), ctx.width)

    try:
        return Grid(width=ctx.width, rows=rows)
    except ValidationError as exc:
        raise StructureError(f"Computed grid is inconsistent: {exc}") from exc
