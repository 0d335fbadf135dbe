"""
Data types shared across the sync pipeline
"""

from dataclasses import dataclass, field
from typing import Any, Literal, Mapping

from .config import MESSAGE_DISMISS_SECONDS

RawRecord = Mapping[str, Any]

MessageKind = Literal["success", "error", "info"]


@dataclass(frozen=True)
class Bill:
    """A normalized bill. Every field is always populated."""

    id: str = ""
    vendor_name: str = ""
    amount: float = 0.0
    due_amount: float = 0.0
    due_date: str = ""
    invoice_number: str = ""
    invoice_date: str = ""

    def to_row(self) -> list[str | float]:
        """Return the bill as a sheet row (invoice date is not exported)."""
        return [
            self.id,
            self.vendor_name,
            self.amount,
            self.due_amount,
            self.due_date,
            self.invoice_number,
        ]


@dataclass(frozen=True)
class Credentials:
    """Session id and developer key sent with every API request."""

    session_id: str
    dev_key: str

    def headers(self) -> dict[str, str]:
        return {
            "Accept": "application/json",
            "Content-Type": "application/json",
            "sessionId": self.session_id,
            "devKey": self.dev_key,
        }


@dataclass
class FetchResult:
    """All raw records of one pagination run."""

    records: list[RawRecord] = field(default_factory=list)
    truncated: bool = False
    pages_fetched: int = 0


@dataclass(frozen=True)
class Message:
    """A user-visible status message."""

    text: str
    kind: MessageKind = "info"

    @property
    def dismiss_after(self) -> float | None:
        """Seconds until the message hides itself, None if it persists."""
        if self.kind == "error":
            return None
        return MESSAGE_DISMISS_SECONDS
