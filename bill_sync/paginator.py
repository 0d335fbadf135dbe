"""
Paged retrieval of bills from the Bill.com API
"""

from dataclasses import dataclass, field
from typing import Any

import requests

from .config import REQUEST_TIMEOUT
from .errors import FetchError
from .logging_setup import get_logger
from .models import Credentials, FetchResult, RawRecord

logger = get_logger(__name__)


@dataclass
class _PageState:
    """Accumulator and cursor of a single pagination run."""

    records: list[RawRecord] = field(default_factory=list)
    cursor: Any = None
    pages_fetched: int = 0


def _get_page(
    session: requests.Session,
    url: str,
    credentials: Credentials,
    params: dict[str, Any] | None = None,
) -> tuple[list[RawRecord], Any]:
    """Fetch one page and return its results and the next page cursor.

    :raises FetchError: If the API answers with a non-success status
    :raises requests.RequestException: If the request or JSON decoding fails
    """
    response: requests.Response = session.get(
        url, headers=credentials.headers(), params=params, timeout=REQUEST_TIMEOUT
    )

    if not 200 <= response.status_code < 300:
        raise FetchError(response.status_code)

    body: Any = response.json()
    if not isinstance(body, dict):
        return [], None

    results: Any = body.get("results")
    if not isinstance(results, list):
        results = []

    return results, body.get("nextPage") or None


def fetch_all_pages(
    endpoint_base: str,
    credentials: Credentials,
    page_size: int,
    max_pages: int,
    session: requests.Session | None = None,
) -> FetchResult:
    """Fetch every page of bills, up to ``max_pages`` requests in total.

    The first request has no paging parameters. Continuation requests ask for
    ``page_size`` records at the cursor returned by the previous page. If the
    ceiling is reached while a cursor remains, the result is marked truncated.
    A failing page aborts the whole run; earlier pages are discarded.

    :param endpoint_base: API base URL, without the ``/bills`` path
    :type endpoint_base: str
    :param credentials: Session id and developer key
    :type credentials: Credentials
    :param page_size: Records per continuation page
    :type page_size: int
    :param max_pages: Maximum number of requests, the first one included
    :type max_pages: int
    :param session: Optional requests session to reuse
    :type session: requests.Session | None
    :return: Accumulated raw records in API order
    :rtype: FetchResult
    :raises ValueError: If ``page_size`` or ``max_pages`` is below 1
    :raises FetchError: If any page answers with a non-success status
    """
    if page_size < 1:
        raise ValueError(f"page_size must be at least 1, got {page_size}")
    if max_pages < 1:
        raise ValueError(f"max_pages must be at least 1, got {max_pages}")

    bills_url: str = f"{endpoint_base.rstrip('/')}/bills"

    if session is not None:
        return _collect_pages(session, bills_url, credentials, page_size, max_pages)

    with requests.Session() as http:
        return _collect_pages(http, bills_url, credentials, page_size, max_pages)


def _collect_pages(
    http: requests.Session,
    bills_url: str,
    credentials: Credentials,
    page_size: int,
    max_pages: int,
) -> FetchResult:
    state: _PageState = _PageState()

    logger.info("Fetching bills from %s", bills_url)
    results, state.cursor = _get_page(http, bills_url, credentials)
    state.pages_fetched = 1

    if not results:
        logger.info("No results found in the initial API request")
        return FetchResult(records=[], truncated=False, pages_fetched=1)

    logger.info("Results found: %d", len(results))
    state.records.extend(results)

    while state.cursor and state.pages_fetched < max_pages:
        logger.info("Fetching page %d...", state.pages_fetched + 1)
        results, state.cursor = _get_page(
            http,
            bills_url,
            credentials,
            params={"max": page_size, "page": state.cursor},
        )
        state.records.extend(results)
        state.pages_fetched += 1

    truncated: bool = bool(state.cursor)
    if truncated:
        logger.warning(
            "Reached maximum page limit (%d). Stopping pagination.", max_pages
        )

    logger.info("Total bills fetched: %d", len(state.records))
    return FetchResult(
        records=state.records,
        truncated=truncated,
        pages_fetched=state.pages_fetched,
    )
