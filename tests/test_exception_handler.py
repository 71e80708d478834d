from src.errors import DraftValidationError, ServerRejectionError, TransportError
from src.exception_handler import ErrorHandler


def test_collect_submission_error_records_status():
    handler = ErrorHandler()

    info = handler.collect_submission_error(
        ServerRejectionError(502), "http://snippets.test/api/snippets", "Binary Search"
    )

    assert info["type"] == "ServerRejectionError"
    assert info["message"] == "HTTP error! status: 502"
    assert info["context"]["status_code"] == 502


def test_should_retry():
    handler = ErrorHandler()

    assert handler.should_retry(TransportError("http://snippets.test", OSError("down")))
    assert handler.should_retry(ServerRejectionError(503))
    assert handler.should_retry(DraftValidationError(["title"]))
    assert not handler.should_retry(ServerRejectionError(400))
    assert not handler.should_retry(ValueError("nope"))


def test_error_report():
    handler = ErrorHandler()
    assert handler.format_error_report() == ""

    handler.collect_submission_error(ServerRejectionError(500), "http://snippets.test", "")

    report = handler.format_error_report()
    assert "1 errors occurred" in report
    assert "ServerRejectionError: 1" in report
    assert "untitled: HTTP error! status: 500" in report

