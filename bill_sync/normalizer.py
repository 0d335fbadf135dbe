"""
Conversion of raw API records into canonical bills
"""

import math
from collections.abc import Mapping
from typing import Any

from .models import Bill


def text_field(record: Any, key: str) -> str:
    """Read a string field, returning an empty string when absent or not a string."""
    if not isinstance(record, Mapping):
        return ""

    value: Any = record.get(key)
    if isinstance(value, str):
        return value
    return ""


def number_field(record: Any, key: str) -> float:
    """Read a numeric field, returning 0 when absent, not a number or not finite."""
    if not isinstance(record, Mapping):
        return 0.0

    value: Any = record.get(key)
    # bool is a subclass of int but never a valid amount
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0.0
    try:
        number: float = float(value)
    except OverflowError:
        # JSON integers are unbounded, floats are not
        return 0.0
    if not math.isfinite(number):
        return 0.0
    return number


def normalize(raw: Any) -> Bill:
    """Build a fully populated bill from a raw record of unknown shape.

    Never raises: missing or wrong-typed fields fall back to their defaults.
    Invoice number and date are read from the nested ``invoice`` object.

    :param raw: Record as returned by the bill API
    :type raw: Any
    :return: Canonical bill with every field set
    :rtype: Bill
    """
    invoice: Any = raw.get("invoice") if isinstance(raw, Mapping) else None

    return Bill(
        id=text_field(raw, "id"),
        vendor_name=text_field(raw, "vendorName"),
        amount=number_field(raw, "amount"),
        due_amount=number_field(raw, "dueAmount"),
        due_date=text_field(raw, "dueDate"),
        invoice_number=text_field(invoice, "invoiceNumber"),
        invoice_date=text_field(invoice, "invoiceDate"),
    )
