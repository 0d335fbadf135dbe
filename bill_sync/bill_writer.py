"""
Writing transformed bills into the ODS file
"""

# pyright: reportGeneralTypeIssues=false

import os
from typing import Any, Protocol

from odf.opendocument import OpenDocument, OpenDocumentSpreadsheet, load

from . import config
from .file_utils import create_backup, remove_backup, restore_from_backup
from .models import Bill
from .ods_sheets import replace_sheet

__all__ = ["SheetSink", "OdsBillSheet", "build_sheet_rows"]


class SheetSink(Protocol):
    """Anything that accepts a header row followed by data rows."""

    def write(self, rows: list[list[Any]]) -> None: ...


def build_sheet_rows(
    bills: list[Bill], limit: int = config.DISPLAY_LIMIT
) -> list[list[Any]]:
    """Build the header row and one row per bill, up to ``limit`` bills.

    :param bills: Transformed bills in fetch order
    :type bills: list[Bill]
    :param limit: Maximum number of bill rows
    :type limit: int
    :return: Header row followed by bill rows
    :rtype: list[list[Any]]
    """
    rows: list[list[Any]] = [list(config.SHEET_HEADER)]
    rows.extend(bill.to_row() for bill in bills[:limit])
    return rows


class OdsBillSheet:
    """Sheet of an ODS workbook that receives the bill rows."""

    def __init__(
        self,
        file_path: str = config.BILL_ODS_FILE,
        sheet_name: str = config.BILL_SHEET_NAME,
    ) -> None:
        self.file_path: str = file_path
        self.sheet_name: str = sheet_name

    def _open(self) -> OpenDocument:
        if os.path.exists(self.file_path):
            print("Loading ODS file...")
            return load(self.file_path)

        print(f"Creating new ODS file: {self.file_path}")
        parent: str = os.path.dirname(self.file_path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        return OpenDocumentSpreadsheet()

    def write(self, rows: list[list[Any]]) -> None:
        """Replace the bill sheet with the given rows in a single save.

        This function:
        1. Creates a backup of the ODS file if it exists
        2. Loads the document (or starts a new one)
        3. Replaces the bill sheet
        4. Saves the document
        5. Removes backup on success

        :param rows: Header row followed by bill rows
        :type rows: list[list[Any]]
        :raises Exception: If any step fails (backup is automatically restored)
        """
        backup_path: str | None = create_backup(self.file_path)

        try:
            doc: OpenDocument = self._open()
            replace_sheet(doc, self.sheet_name, rows)

            print("Saving all changes to document...")
            doc.save(self.file_path)
            print(f"✓ Successfully saved {len(rows) - 1} bill(s) to {self.file_path}")

            remove_backup(backup_path)

        except Exception as e:
            print(f"✗ Error: {e}")
            restore_from_backup(backup_path, self.file_path)
            raise
