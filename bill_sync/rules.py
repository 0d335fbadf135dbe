"""
Ordered transformation rules applied to every fetched bill

Each rule receives the original raw record and the bill accumulated so far.
Rules run in declaration order; a later rule's patch overwrites fields set by
an earlier one.
"""

import dataclasses
import math
from dataclasses import dataclass
from datetime import date
from typing import Any, Callable

import dateutil.parser as dparser

from .config import DUE_DATE_FORMAT, HIGH_VALUE_THRESHOLD
from .errors import TransformError
from .logging_setup import get_logger
from .models import Bill, RawRecord
from .normalizer import normalize, number_field, text_field

logger = get_logger(__name__)

Patch = dict[str, Any]
Condition = Callable[[RawRecord, Bill], bool]
Transform = Callable[[RawRecord, Bill], Patch]


@dataclass(frozen=True)
class TransformationRule:
    """A named (condition, transform) pair."""

    name: str
    condition: Condition
    transform: Transform


def round_currency(value: float) -> float:
    """Round to 2 decimal places as ``round(value * 100) / 100``.

    Exact halves of the scaled value round to even, so
    ``round_currency(1500.005) == 1500.0`` and ``round_currency(0.125) == 0.12``.
    """
    scaled: float = value * 100
    if not math.isfinite(scaled):
        return value
    return round(scaled) / 100


def parse_due_date(value: str) -> date | None:
    """Parse a due date string, returning None if it is not a date."""
    try:
        return dparser.parse(value).date()
    except (ValueError, OverflowError):
        return None


def format_vendor_name(raw: RawRecord) -> str:
    return text_field(raw, "vendorName").upper() or "UNKNOWN VENDOR"


# ------------------------------------------------------------------------------
# Rule definitions
# ------------------------------------------------------------------------------


def _always(raw: RawRecord, bill: Bill) -> bool:
    return True


def _vendor_patch(raw: RawRecord, bill: Bill) -> Patch:
    return {"vendor_name": format_vendor_name(raw)}


def _currency_patch(raw: RawRecord, bill: Bill) -> Patch:
    return {
        "amount": round_currency(bill.amount),
        "due_amount": round_currency(bill.due_amount),
    }


def _has_due_date(raw: RawRecord, bill: Bill) -> bool:
    return bool(text_field(raw, "dueDate"))


def _due_date_patch(raw: RawRecord, bill: Bill) -> Patch:
    due_date: str = text_field(raw, "dueDate")
    parsed: date | None = parse_due_date(due_date)
    if parsed is None:
        # Unparsable dates are kept as delivered
        return {"due_date": due_date}
    return {"due_date": parsed.strftime(DUE_DATE_FORMAT)}


def _is_high_value(raw: RawRecord, bill: Bill) -> bool:
    return number_field(raw, "amount") > HIGH_VALUE_THRESHOLD


def _high_value_patch(raw: RawRecord, bill: Bill) -> Patch:
    return {"vendor_name": f"🚨 {format_vendor_name(raw)} (HIGH VALUE)"}


def _is_overdue(raw: RawRecord, bill: Bill) -> bool:
    due_date: str = text_field(raw, "dueDate")
    if not due_date:
        return False

    parsed: date | None = parse_due_date(due_date)
    if parsed is None:
        return False
    return parsed < date.today()


def _overdue_patch(raw: RawRecord, bill: Bill) -> Patch:
    return {"vendor_name": f"⚠️ {format_vendor_name(raw)} (OVERDUE)"}


RULES: tuple[TransformationRule, ...] = (
    TransformationRule("Format Vendor Names", _always, _vendor_patch),
    TransformationRule("Format Currency", _always, _currency_patch),
    TransformationRule("Format Dates", _has_due_date, _due_date_patch),
    TransformationRule("High Value Bills Alert", _is_high_value, _high_value_patch),
    TransformationRule("Overdue Bills Alert", _is_overdue, _overdue_patch),
)


# ------------------------------------------------------------------------------
# Engine
# ------------------------------------------------------------------------------


def apply_rules(
    raw: RawRecord, rules: tuple[TransformationRule, ...] = RULES
) -> Bill:
    """Normalize a raw record and apply every matching rule in order.

    Conditions are evaluated against the original raw record. Patches are
    merged into the accumulated bill, overwriting earlier values.

    :param raw: Record as returned by the bill API
    :type raw: RawRecord
    :param rules: Rules in the order they are applied
    :type rules: tuple[TransformationRule, ...]
    :return: Transformed bill
    :rtype: Bill
    :raises TransformError: If a rule's condition or transform raises
    """
    bill: Bill = normalize(raw)

    for rule in rules:
        try:
            if not rule.condition(raw, bill):
                continue
            patch: Patch = rule.transform(raw, bill)
            bill = dataclasses.replace(bill, **patch)
        except Exception as e:
            raise TransformError(rule.name, str(e)) from e

    return bill


def transform_bills(raw_bills: list[RawRecord]) -> list[Bill]:
    """Apply the transformation rules to all bills, keeping their order."""
    logger.info("Applying transformation rules to %d bill(s)", len(raw_bills))
    bills: list[Bill] = [apply_rules(raw) for raw in raw_bills]
    if bills:
        logger.debug("Sample transformed bill: %s", bills[0])
    return bills
