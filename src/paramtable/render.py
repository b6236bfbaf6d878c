"""HTML rendering of a computed Grid: header row, body rows and CSS."""

from paramtable.config import HEADER_LABELS, TABLE_CSS
from paramtable.schema import Cell, Grid


def header_labels(width: int) -> list[str]:
    """Column titles: Parameter, then Sub-parameter for interior columns, then Description."""
    labels = []
    for i in range(width):
        if i == 0:
            labels.append(HEADER_LABELS["first"])
        elif i == width - 1:
            labels.append(HEADER_LABELS["last"])
        else:
            labels.append(HEADER_LABELS["middle"])
    return labels


def render_header(width: int) -> str:
    """Render the ``<thead>`` block for a table of ``width`` columns."""
    cells = "".join(f"\t\t<th>{label}</th>\n" for label in header_labels(width))
    return f"<thead>\n\t<tr>\n{cells}\t</tr>\n</thead>\n"


def render_cell(cell: Cell) -> str:
    """Render one ``<td>``; span attributes appear only when greater than 1."""
    attrs = ""
    if cell.colspan > 1:
        attrs += f' colspan="{cell.colspan}"'
    if cell.rowspan > 1:
        attrs += f' rowspan="{cell.rowspan}"'
    return f"<td{attrs}>{cell.content}</td>"


def render_body(grid: Grid) -> str:
    """Render the ``<tbody>`` block, one ``<tr>`` per grid row."""
    lines = ["<tbody>"]
    for row in grid.rows:
        lines.append('\t<tr align="left">')
        lines.extend(f"\t\t{render_cell(cell)}" for cell in row)
        lines.append("\t</tr>")
    lines.append("</tbody>")
    return "\n".join(lines) + "\n"


def render_table(grid: Grid) -> str:
    """Render the complete document: CSS block followed by the table."""
    return f'{TABLE_CSS}<table style="width:100%">\n{render_header(grid.width)}{render_body(grid)}</table>\n'
