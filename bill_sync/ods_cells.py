"""
ODS cell operations
"""

# pyright: reportGeneralTypeIssues=false

from typing import Any

from odf import table, text
from odf.namespaces import OFFICENS


def get_cell_value(cell: table.TableCell) -> str:
    """Read type-independant cell value"""
    value_type: str = cell.getAttrNS(OFFICENS, "value-type")

    match value_type:
        case "float" | "currency" | "percentage":
            value: str = cell.getAttrNS(OFFICENS, "value")
            return value
        case "string" | "text" | None:
            paragraphs: list[text.P] = cell.getElementsByType(text.P)
            if paragraphs:
                text_val: str = str(paragraphs[0])
                return text_val

    return ""


def _set_numeric_value(cell: table.TableCell, value: int | float) -> None:
    """Set a numeric value in a cell.

    :param cell: ODS table cell
    :type cell: table.TableCell
    :param value: Numeric value to set
    :type value: int | float
    """
    p: text.P = text.P(text=str(value))
    cell.appendChild(p)

    cell.setAttrNS(OFFICENS, "value-type", "float")
    cell.setAttrNS(OFFICENS, "value", str(value))


def _set_string_value(cell: table.TableCell, value: str) -> None:
    """Set a string value in a cell.

    Numeric-looking strings stay strings, bill ids and invoice numbers
    must keep their leading zeros.

    :param cell: ODS table cell
    :type cell: table.TableCell
    :param value: String value to set
    :type value: str
    """
    p: text.P = text.P(text=value)
    cell.appendChild(p)

    cell.setAttrNS(OFFICENS, "value-type", "string")


def set_cell_value(cell: table.TableCell, value: Any) -> None:
    """Set value in an ODS cell while preserving its style.

    :param cell: ODS table cell
    :type cell: table.TableCell
    :param value: Value to set (string or number)
    :type value: Any
    """
    # Clear existing content
    for child in list(cell.childNodes):
        try:
            cell.removeChild(child)
        except ValueError:
            # Element is not in the document's internal cache
            pass

    # Note: bool is an int subclass, write it as text
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        _set_numeric_value(cell, value)
    else:
        _set_string_value(cell, str(value))
