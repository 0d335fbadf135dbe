"""
Bill Sync - Fetch bills from the Bill.com API into an ODS spreadsheet

Credentials are read from the environment (``BILL_SESSION_ID`` and
``BILL_DEV_KEY``, optionally from ``.env.bill_sync``). When they are not
configured, the user is asked for them.
"""

import sys

from .bill_writer import OdsBillSheet
from .config import BILL_DEV_KEY, BILL_SESSION_ID
from .logging_setup import configure_logging
from .sync import SyncResult, run_sync


def main() -> None:
    """Run the bill sync."""
    configure_logging()
    print("=== BILL SYNC ===\n")

    session_id: str | None = BILL_SESSION_ID
    dev_key: str | None = BILL_DEV_KEY
    if not (session_id and dev_key):
        # Deferred import, tkinter is only needed for the dialog
        from .ui import ask_credentials

        session_id, dev_key = ask_credentials()

    result: SyncResult = run_sync(session_id, dev_key, OdsBillSheet())

    if result.truncated:
        print("⚠ Page limit reached, not all bills were fetched.")

    if not result.ok:
        sys.exit(1)


if __name__ == "__main__":
    main()
