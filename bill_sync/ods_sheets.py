"""
ODS sheet operations
"""

from __future__ import annotations

from typing import Any

from odf import table
from odf.namespaces import TABLENS

from .ods_rows import create_value_row
from .ods_styles import ensure_header_style_exists


def find_sheet_by_name(doc: Any, sheet_name: str) -> table.Table | None:
    """
    Find a sheet in an ODS document by name.

    Args:
        doc: ODS document object
        sheet_name: Name of the sheet to find

    Returns:
        Sheet object if found, None otherwise
    """
    sheets = doc.spreadsheet.getElementsByType(table.Table)
    for sheet in sheets:
        if sheet.getAttrNS(TABLENS, "name") == sheet_name:
            return sheet
    return None


def replace_sheet(doc: Any, sheet_name: str, rows: list[list[Any]]) -> table.Table:
    """
    Write rows into a fresh sheet, replacing any sheet with the same name.

    The first row is treated as the header and styled bold. A replaced
    sheet keeps its position among the other sheets.

    Args:
        doc: ODS document object
        sheet_name: Name of the sheet to (re)create
        rows: Header row followed by data rows

    Returns:
        The new sheet
    """
    new_sheet = table.Table(name=sheet_name)

    if rows:
        width = max(len(row) for row in rows)
        new_sheet.addElement(table.TableColumn(numbercolumnsrepeated=width))

        header_style = ensure_header_style_exists(doc)
        new_sheet.addElement(create_value_row(rows[0], header_style))
        for values in rows[1:]:
            new_sheet.addElement(create_value_row(values))

    old_sheet = find_sheet_by_name(doc, sheet_name)
    if old_sheet is None:
        doc.spreadsheet.addElement(new_sheet)
    else:
        doc.spreadsheet.insertBefore(new_sheet, old_sheet)
        try:
            doc.spreadsheet.removeChild(old_sheet)
        except ValueError:
            # Element is not in the document's internal cache
            if old_sheet in doc.spreadsheet.childNodes:
                doc.spreadsheet.childNodes.remove(old_sheet)

    return new_sheet
