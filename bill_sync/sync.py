"""
One run of the sync pipeline: validate, fetch, transform, write, report
"""

from dataclasses import dataclass, field

import requests

from . import config
from .bill_writer import SheetSink, build_sheet_rows
from .credentials import read_credentials
from .errors import BillSyncError, ValidationError
from .logging_setup import get_logger
from .messages import Notifier, show_message
from .models import Bill, Credentials, FetchResult, Message
from .paginator import fetch_all_pages
from .rules import transform_bills

logger = get_logger(__name__)


@dataclass
class SyncResult:
    """Outcome of a run, as reported to the user."""

    message: Message
    bills: list[Bill] = field(default_factory=list)
    truncated: bool = False

    @property
    def ok(self) -> bool:
        return self.message.kind != "error"


def _report(notify: Notifier, result: SyncResult) -> SyncResult:
    notify(result.message)
    return result


def run_sync(
    session_id: str | None,
    dev_key: str | None,
    sink: SheetSink,
    *,
    notify: Notifier = show_message,
    endpoint_base: str = config.BILL_API_BASE,
    page_size: int = config.PAGE_SIZE,
    max_pages: int = config.MAX_PAGES,
    session: requests.Session | None = None,
) -> SyncResult:
    """Fetch all bills, transform them and write them to the sink.

    Every failure ends the run with a single error message; the sink is only
    written once all pages were fetched and all bills transformed.

    :param session_id: Session id as entered
    :type session_id: str | None
    :param dev_key: Developer key as entered
    :type dev_key: str | None
    :param sink: Receiver of the header and bill rows
    :type sink: SheetSink
    :param notify: Receiver of the final status message
    :type notify: Notifier
    :return: Final message, transformed bills and truncation flag
    :rtype: SyncResult
    """
    try:
        credentials: Credentials = read_credentials(session_id, dev_key)
    except ValidationError as e:
        return _report(notify, SyncResult(Message(str(e), "error")))

    try:
        fetched: FetchResult = fetch_all_pages(
            endpoint_base,
            credentials,
            page_size=page_size,
            max_pages=max_pages,
            session=session,
        )

        if not fetched.records:
            return _report(notify, SyncResult(Message("No bills found.", "info")))

        bills: list[Bill] = transform_bills(fetched.records)
        sink.write(build_sheet_rows(bills))

    except (BillSyncError, requests.RequestException, OSError) as e:
        logger.error("API call failed: %s", e)
        return _report(notify, SyncResult(Message(f"API call failed: {e}", "error")))
    except Exception as e:
        # Spreadsheet and parsing errors end the run the same way
        logger.exception("API call failed unexpectedly")
        return _report(notify, SyncResult(Message(f"API call failed: {e}", "error")))

    text: str = (
        f"Successfully fetched {len(fetched.records)} bills, "
        "applied transformations, and wrote to the spreadsheet!"
    )
    return _report(
        notify,
        SyncResult(Message(text, "success"), bills=bills, truncated=fetched.truncated),
    )
