"""
ODS style management functions
"""

from typing import Any

from odf import style


def ensure_header_style_exists(doc: Any) -> str:
    """
    Ensure a bold header cell style exists in the document and return its name.

    Args:
        doc: ODS document object

    Returns:
        Name of the header style to use
    """
    style_name = "bill-header-style"

    # Check if style already exists
    if hasattr(doc, "styles"):
        for existing_style in doc.styles.getElementsByType(style.Style):
            if existing_style.getAttribute("name") == style_name:
                return style_name

    header_style = style.Style(name=style_name, family="table-cell")
    header_style.addElement(style.TextProperties(fontweight="bold"))

    doc.styles.addElement(header_style)

    return style_name
