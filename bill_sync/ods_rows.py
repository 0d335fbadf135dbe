"""
ODS row operations
"""

from typing import Any

from odf import table
from odf.namespaces import TABLENS

from .ods_cells import get_cell_value, set_cell_value


def create_value_row(
    values: list[Any], cell_style: str | None = None
) -> table.TableRow:
    """
    Create a new row holding one cell per value.

    Args:
        values: Cell values, in column order
        cell_style: Optional style applied to every cell

    Returns:
        New table row
    """
    new_row = table.TableRow()

    for value in values:
        new_cell = table.TableCell()

        if cell_style:
            new_cell.setAttrNS(TABLENS, "style-name", cell_style)

        set_cell_value(new_cell, value)
        new_row.appendChild(new_cell)

    return new_row


def read_row_values(row: table.TableRow) -> list[str]:
    """
    Read all cell values of a row.

    Args:
        row: Table row to read

    Returns:
        Cell values as strings, in column order
    """
    return [get_cell_value(cell) for cell in row.getElementsByType(table.TableCell)]
