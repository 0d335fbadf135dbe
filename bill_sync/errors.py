"""
Errors raised while syncing bills
"""


class BillSyncError(Exception):
    """Base error for this package."""


class ValidationError(BillSyncError):
    """Raised when the run cannot start because of missing input."""


class FetchError(BillSyncError):
    """Raised when the bill API answers with a non-success status."""

    def __init__(self, status: int) -> None:
        super().__init__(f"HTTP error! status: {status}")
        self.status: int = status


class TransformError(BillSyncError):
    """Raised when a transformation rule fails on a record."""

    def __init__(self, rule_name: str, reason: str) -> None:
        super().__init__(f"Rule '{rule_name}' failed: {reason}")
        self.rule_name: str = rule_name
