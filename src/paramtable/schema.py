"""Pydantic models for leaf payloads and the emitted table grid.

The Grid model_validator guarantees that the cells of every row, together
with the cells still hanging down from rows above via rowspan, tile exactly
``width`` columns, and that no rowspan reaches past the last row.  A grid
with misaligned spans can therefore never be constructed.
"""

from pydantic import BaseModel, ConfigDict, Field, model_validator


class LeafDetail(BaseModel):
    """The semantic fields of a terminal entry, already stringified."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    header: str = ""
    description: str = ""
    default_value: str = Field("", alias="defaultValue")
    options: list[str] | None = None


class Cell(BaseModel):
    """One ``<td>`` of the body: rendered content plus its merge extents."""

    model_config = ConfigDict(frozen=True)

    content: str
    colspan: int = Field(1, ge=1)
    rowspan: int = Field(1, ge=1)


class Grid(BaseModel):
    """The full table body, in emission order."""

    width: int = Field(ge=1)
    rows: list[list[Cell]]

    @model_validator(mode="after")
    def validate_spans(self) -> "Grid":
        """Ensure each row covers exactly ``width`` columns once inherited rowspans are counted."""
        # Number of further rows each column is still occupied by a cell from above
        pending = [0] * self.width
        for i, row in enumerate(self.rows):
            col = 0
            for cell in row:
                # Skip the columns held by rowspans from earlier rows
                while col < self.width and pending[col] > 0:
                    col += 1
                end = col + cell.colspan
                if end > self.width or any(pending[c] > 0 for c in range(col, end)):
                    raise ValueError(f"Row {i} overflows the table width {self.width}")
                for c in range(col, end):
                    pending[c] = cell.rowspan
                col = end

            uncovered = [c for c in range(self.width) if pending[c] == 0]
            if uncovered:
                raise ValueError(f"Row {i} leaves columns {uncovered} empty (expected width {self.width})")
            pending = [n - 1 for n in pending]

        if any(pending):
            raise ValueError(f"Rowspans extend past the last row ({len(self.rows)} rows)")
        return self

    @property
    def cell_count(self) -> int:
        """Total number of cells emitted across all rows."""
        return sum(len(row) for row in self.rows)
