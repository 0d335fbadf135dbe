from pathlib import Path

import pytest

import bill_sync.sync as sync_mod
from bill_sync.bill_writer import OdsBillSheet
from bill_sync.credentials import MISSING_CREDENTIALS_MESSAGE
from bill_sync.errors import TransformError
from bill_sync.sync import run_sync
from tests.helpers.fakes import (
    FakeResponse,
    FakeSession,
    RecordingNotifier,
    RecordingSink,
    bill,
    chained_pages,
)

BASE = "https://api.example.test/connect/v3"


def _run(session, sink, notifier, *, session_id="sess", dev_key="key", max_pages=10):
    return run_sync(
        session_id,
        dev_key,
        sink,
        notify=notifier,
        endpoint_base=BASE,
        page_size=20,
        max_pages=max_pages,
        session=session,
    )


def test_successful_run_writes_transformed_bills():
    session = FakeSession(
        [
            FakeResponse(200, {"results": [bill(1, vendorName="acme", amount=1200)], "nextPage": "p2"}),
            FakeResponse(200, {"results": [bill(2, amount=3.14159)]}),
        ]
    )
    sink, notifier = RecordingSink(), RecordingNotifier()

    result = _run(session, sink, notifier)

    assert result.ok
    assert len(sink.writes) == 1
    header, first, second = sink.writes[0]
    assert header[0] == "Bill ID"
    assert first[:4] == ["bill-1", "🚨 ACME (HIGH VALUE)", 1200.0, 5.0]
    assert second[0] == "bill-2"
    assert second[2] == 3.14
    assert [m.kind for m in notifier.messages] == ["success"]
    assert notifier.messages[0].text.startswith("Successfully fetched 2 bills")
    assert [b.id for b in result.bills] == ["bill-1", "bill-2"]


def test_no_bills_is_informational():
    session = FakeSession([FakeResponse(200, {"results": [], "nextPage": "more"})])
    sink, notifier = RecordingSink(), RecordingNotifier()

    result = _run(session, sink, notifier)

    assert result.ok
    assert len(session.calls) == 1
    assert sink.writes == []
    assert notifier.messages[0].kind == "info"
    assert notifier.messages[0].text == "No bills found."


def test_failing_third_page_writes_nothing():
    pages = chained_pages(5)
    pages[2] = FakeResponse(500, {})
    session = FakeSession(pages)
    sink, notifier = RecordingSink(), RecordingNotifier()

    result = _run(session, sink, notifier)

    assert not result.ok
    assert sink.writes == []
    assert len(notifier.messages) == 1
    assert notifier.messages[0].kind == "error"
    assert notifier.messages[0].text == "API call failed: HTTP error! status: 500"
    assert result.bills == []


@pytest.mark.parametrize("session_id,dev_key", [("", "key"), ("sess", "   "), (None, None)])
def test_missing_credentials_stop_before_any_request(session_id, dev_key):
    session = FakeSession([])
    sink, notifier = RecordingSink(), RecordingNotifier()

    result = _run(session, sink, notifier, session_id=session_id, dev_key=dev_key)

    assert not result.ok
    assert session.calls == []
    assert sink.writes == []
    assert notifier.messages[0].text == MISSING_CREDENTIALS_MESSAGE


def test_credentials_are_trimmed_before_sending():
    session = FakeSession([FakeResponse(200, {"results": []})])

    _run(session, RecordingSink(), RecordingNotifier(), session_id=" sess ", dev_key=" key ")

    headers = session.calls[0]["headers"]
    assert headers["sessionId"] == "sess"
    assert headers["devKey"] == "key"


def test_truncation_is_reported_in_result():
    session = FakeSession(chained_pages(15))
    sink, notifier = RecordingSink(), RecordingNotifier()

    result = _run(session, sink, notifier, max_pages=10)

    assert result.ok
    assert result.truncated is True
    assert len(session.calls) == 10
    assert len(result.bills) == 20


def test_sheet_rows_are_capped_but_all_bills_are_counted():
    session = FakeSession(chained_pages(3, per_page=60))
    sink, notifier = RecordingSink(), RecordingNotifier()

    result = _run(session, sink, notifier)

    assert len(result.bills) == 180
    assert len(sink.writes[0]) == 101
    assert "180 bills" in notifier.messages[0].text


def test_transform_error_aborts_run(monkeypatch: pytest.MonkeyPatch):
    def fail(raw_bills):
        raise TransformError("Format Dates", "boom")

    monkeypatch.setattr(sync_mod, "transform_bills", fail)
    session = FakeSession(chained_pages(1))
    sink, notifier = RecordingSink(), RecordingNotifier()

    result = _run(session, sink, notifier)

    assert not result.ok
    assert sink.writes == []
    assert notifier.messages[0].text == "API call failed: Rule 'Format Dates' failed: boom"


def test_invalid_json_is_reported():
    session = FakeSession([FakeResponse(200, raw_text="<html>")])
    notifier = RecordingNotifier()

    result = _run(session, RecordingSink(), notifier)

    assert not result.ok
    assert notifier.messages[0].text.startswith("API call failed:")


def test_sink_failure_is_reported():
    class BrokenSink:
        def write(self, rows):
            raise PermissionError("read-only workbook")

    notifier = RecordingNotifier()

    result = _run(FakeSession(chained_pages(1)), BrokenSink(), notifier)

    assert not result.ok
    assert notifier.messages[0].text == "API call failed: read-only workbook"


def test_run_into_ods_file(ods_path: Path):
    session = FakeSession(chained_pages(2))
    notifier = RecordingNotifier()

    result = _run(session, OdsBillSheet(str(ods_path)), notifier)

    assert result.ok
    assert ods_path.exists()


def test_unexpected_sink_error_is_reported():
    class CorruptSink:
        def write(self, rows):
            raise ValueError("not a spreadsheet")

    notifier = RecordingNotifier()

    result = _run(FakeSession(chained_pages(1)), CorruptSink(), notifier)

    assert not result.ok
    assert len(notifier.messages) == 1
    assert notifier.messages[0].text == "API call failed: not a spreadsheet"


def test_invalid_page_ceiling_is_reported():
    session = FakeSession([])
    notifier = RecordingNotifier()

    result = _run(session, RecordingSink(), notifier, max_pages=0)

    assert not result.ok
    assert session.calls == []
    assert notifier.messages[0].text.startswith("API call failed: max_pages")


def test_huge_amount_in_response_does_not_abort_run():
    session = FakeSession([FakeResponse(200, {"results": [bill(1, amount=10**400)]})])
    sink, notifier = RecordingSink(), RecordingNotifier()

    result = _run(session, sink, notifier)

    assert result.ok
    assert sink.writes[0][1][2] == 0.0
