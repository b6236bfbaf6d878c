"""Unit tests for HTML table assembly."""

# pylint: disable=missing-class-docstring,missing-function-docstring

from paramtable.config import TABLE_CSS
from paramtable.render import header_labels, render_body, render_cell, render_header, render_table
from paramtable.schema import Cell, Grid


class TestHeader:

    def test_two_columns(self):
        assert header_labels(2) == ["Parameter", "Description"]

    def test_interior_columns(self):
        assert header_labels(4) == ["Parameter", "Sub-parameter", "Sub-parameter", "Description"]

    def test_render_header(self):
        expected = "<thead>\n\t<tr>\n\t\t<th>Parameter</th>\n\t\t<th>Sub-parameter</th>\n\t\t<th>Description</th>\n\t</tr>\n</thead>\n"
        assert render_header(3) == expected


class TestRenderCell:

    def test_plain_cell_has_no_span_attributes(self):
        assert render_cell(Cell(content="port")) == "<td>port</td>"

    def test_colspan(self):
        assert render_cell(Cell(content="x", colspan=3)) == '<td colspan="3">x</td>'

    def test_rowspan(self):
        assert render_cell(Cell(content="x", rowspan=2)) == '<td rowspan="2">x</td>'

    def test_both_spans(self):
        assert render_cell(Cell(content="x", colspan=2, rowspan=4)) == '<td colspan="2" rowspan="4">x</td>'


class TestRenderTable:

    GRID = Grid(
        width=3,
        rows=[
            [Cell(content="b", rowspan=2), Cell(content="x"), Cell(content="X")],
            [Cell(content="y"), Cell(content="Y")],
        ],
    )

    def test_body(self):
        expected = (
            "<tbody>\n"
            '\t<tr align="left">\n'
            '\t\t<td rowspan="2">b</td>\n'
            "\t\t<td>x</td>\n"
            "\t\t<td>X</td>\n"
            "\t</tr>\n"
            '\t<tr align="left">\n'
            "\t\t<td>y</td>\n"
            "\t\t<td>Y</td>\n"
            "\t</tr>\n"
            "</tbody>\n"
        )
        assert render_body(self.GRID) == expected

    def test_table_layout(self):
        result = render_table(self.GRID)
        assert result.startswith(TABLE_CSS + '<table style="width:100%">\n<thead>')
        assert result.endswith("</tbody>\n</table>\n")
        assert result.count("<th>") == 3
        assert result.count("<tr align=\"left\">") == 2
