"""Unit tests for the Cell and Grid models, in particular span validation."""

# pylint: disable=missing-class-docstring,missing-function-docstring

import pytest
from pydantic import ValidationError

from paramtable.schema import Cell, Grid, LeafDetail


class TestCell:

    def test_defaults(self):
        cell = Cell(content="x")
        assert cell.colspan == 1
        assert cell.rowspan == 1

    def test_zero_colspan_rejected(self):
        with pytest.raises(ValidationError):
            Cell(content="x", colspan=0)

    def test_negative_rowspan_rejected(self):
        with pytest.raises(ValidationError):
            Cell(content="x", rowspan=-1)


class TestLeafDetailModel:

    def test_alias_and_field_name(self):
        assert LeafDetail(defaultValue="1") == LeafDetail(default_value="1")


class TestGridValidation:

    def test_flat_grid(self):
        grid = Grid(width=2, rows=[[Cell(content="a"), Cell(content="A")], [Cell(content="b"), Cell(content="B")]])
        assert grid.cell_count == 4

    def test_rowspan_fills_later_rows(self):
        rows = [
            [Cell(content="b", rowspan=2), Cell(content="x"), Cell(content="X")],
            [Cell(content="y"), Cell(content="Y")],
        ]
        assert len(Grid(width=3, rows=rows).rows) == 2

    def test_colspan_fills_row(self):
        rows = [[Cell(content="a"), Cell(content="A", colspan=2)]]
        assert Grid(width=3, rows=rows).width == 3

    def test_row_too_wide(self):
        with pytest.raises(ValidationError, match="overflows"):
            Grid(width=2, rows=[[Cell(content="a"), Cell(content="A", colspan=2)]])

    def test_row_too_narrow(self):
        with pytest.raises(ValidationError, match="empty"):
            Grid(width=3, rows=[[Cell(content="a"), Cell(content="A")]])

    def test_inherited_rowspan_counts_toward_width(self):
        rows = [
            [Cell(content="b", rowspan=2), Cell(content="x"), Cell(content="X")],
            [Cell(content="y"), Cell(content="Y"), Cell(content="extra")],
        ]
        with pytest.raises(ValidationError, match="overflows"):
            Grid(width=3, rows=rows)

    def test_rowspan_past_last_row(self):
        rows = [[Cell(content="b", rowspan=3), Cell(content="x"), Cell(content="X")]]
        with pytest.raises(ValidationError, match="past the last row"):
            Grid(width=3, rows=rows)

    def test_empty_grid(self):
        assert Grid(width=2, rows=[]).cell_count == 0
