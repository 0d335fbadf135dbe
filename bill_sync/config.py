"""
Configuration constants for Bill Sync
"""

import os
from pathlib import Path
from typing import Final

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv(".env.bill_sync")

# ==============================================================================
# BILL API CONFIGURATION
# ==============================================================================

BILL_API_BASE: Final[str] = os.environ.get(
    "BILL_API_BASE", "https://gateway.stage.bill.com/connect/v3"
).rstrip("/")

# Credentials (from environment, optional; the user is prompted otherwise)
BILL_SESSION_ID: Final[str | None] = os.environ.get("BILL_SESSION_ID")
BILL_DEV_KEY: Final[str | None] = os.environ.get("BILL_DEV_KEY")

# Page size requested for continuation pages
PAGE_SIZE: Final[int] = 20

# Safety limit to prevent endless pagination (first request included)
MAX_PAGES: Final[int] = 10

# Seconds before a request is abandoned
REQUEST_TIMEOUT: Final[float] = 30.0


# ==============================================================================
# TRANSFORMATION
# ==============================================================================

# Bills above this amount are marked as high value
HIGH_VALUE_THRESHOLD: Final[float] = 1000.0

# Locale-appropriate date representation for due dates
DUE_DATE_FORMAT: Final[str] = "%x"


# ==============================================================================
# ODS OUTPUT
# ==============================================================================

BILL_ODS_FILE: Final[str] = os.environ.get(
    "BILL_ODS_FILE", str(Path.home() / "Documents" / "bills.ods")
)
BILL_SHEET_NAME: Final[str] = "Bills"

SHEET_HEADER: Final[list[str]] = [
    "Bill ID",
    "Vendor Name",
    "Amount",
    "Due Amount",
    "Due Date",
    "Invoice Number",
]

# Only the first rows are written to the sheet
DISPLAY_LIMIT: Final[int] = 100


# ==============================================================================
# STATUS MESSAGES
# ==============================================================================

MESSAGE_DISMISS_SECONDS: Final[float] = 5.0
