import httpx
import pytest

from main import fill_draft, run_form
from src.exception_handler import ErrorHandler
from src.form import FormSettings, RecordingNavigator, RecordingNotifier, SnippetFormController


def _scripted(lines):
    remaining = iter(lines)

    def read_line(_prompt):
        return next(remaining)

    return read_line


ANSWERS = [
    "Binary Search",
    "python",
    "def bs(items, target):",
    "    return -1",
    ".",
    ".",
    "search, algorithm",
    "1",
    "Intermediate",
    "educational",
]


def _make_controller(handler):
    return SnippetFormController(
        RecordingNotifier(),
        RecordingNavigator(),
        FormSettings(api_base_url="http://snippets.test", navigation_delay=0),
        client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
        error_handler=ErrorHandler(),
    )


def test_fill_draft_reads_every_field():
    controller = _make_controller(lambda request: httpx.Response(201))

    fill_draft(controller, _scripted(ANSWERS))

    draft = controller.draft
    assert draft.title == "Binary Search"
    assert draft.language == "Python"
    assert draft.code == "def bs(items, target):\n    return -1"
    assert draft.description == ""
    assert draft.tags == "search, algorithm"
    assert draft.category == "Algorithm"
    assert draft.difficulty == "Intermediate"
    assert draft.usage == "Educational"


def test_fill_draft_asks_again_for_unknown_option():
    controller = _make_controller(lambda request: httpx.Response(201))
    answers = list(ANSWERS)
    answers[1:2] = ["Cobol", "Go"]

    fill_draft(controller, _scripted(answers))

    assert controller.draft.language == "Go"


@pytest.mark.asyncio
async def test_run_form_retries_with_kept_draft():
    statuses = iter([503, 201])
    controller = _make_controller(lambda request: httpx.Response(next(statuses)))
    blank_pass = ["", "", ".", ".", "", "", "", ""]

    submitted = await run_form(controller, _scripted(ANSWERS + ["y"] + blank_pass))

    assert submitted is True
    assert controller.navigator.visited == ["/"]
    assert controller.draft.title == "Binary Search"


@pytest.mark.asyncio
async def test_run_form_stops_when_rejection_is_not_retryable():
    requests = []

    def handler(request):
        requests.append(request)
        return httpx.Response(400)

    controller = _make_controller(handler)

    submitted = await run_form(controller, _scripted(ANSWERS))

    assert submitted is False
    assert len(requests) == 1
    assert controller.navigator.visited == []


@pytest.mark.asyncio
async def test_run_form_offers_retry_after_missing_field():
    controller = _make_controller(lambda request: httpx.Response(201))
    first_pass = [""] + ANSWERS[1:]
    second_pass = ["Binary Search", "", ".", ".", "", "", "", ""]

    submitted = await run_form(controller, _scripted(first_pass + ["y"] + second_pass))

    assert submitted is True
    assert controller.notifier.messages[0] == "Title cannot be empty"
    assert controller.draft.title == "Binary Search"
