import argparse
import asyncio
import logging
import sys
from typing import Callable

from tqdm import tqdm

from src.exception_handler import ErrorHandler
from src.form import (
    FORM_FIELDS,
    ConsoleNavigator,
    ConsoleNotifier,
    EnumSelect,
    FormSettings,
    SnippetFormController,
    TextArea,
)


logger = logging.getLogger("snippet_share")

END_OF_TEXT = "."


def _read_text_area(read_line: Callable[[str], str]) -> str:
    lines = []
    while True:
        line = read_line("")
        if line == END_OF_TEXT:
            break
        lines.append(line)
    return "\n".join(lines)


def fill_draft(controller: SnippetFormController, read_line: Callable[[str], str] = input) -> None:
    """Prompt for every form field, keeping current values when input is blank."""
    for form_field in FORM_FIELDS:
        current = getattr(controller.draft, form_field.name)
        tqdm.write(form_field.render(current))

        while True:
            if isinstance(form_field, TextArea):
                tqdm.write(f"(finish with a line containing only '{END_OF_TEXT}')")
                raw = _read_text_area(read_line)
            elif isinstance(form_field, EnumSelect):
                raw = read_line(f"{form_field.placeholder} > ")
            else:
                raw = read_line("> ")

            if not raw.strip() and current:
                break
            try:
                change = form_field.change(raw)
            except ValueError as exc:
                tqdm.write(f"⚠️ {exc}")
                continue
            controller.apply(change)
            break


async def run_form(controller: SnippetFormController, read_line: Callable[[str], str] = input) -> bool:
    while True:
        fill_draft(controller, read_line)
        tqdm.write(f"[{controller.submit_label}]")
        if await controller.submit():
            if controller.pending_navigation is not None:
                await controller.pending_navigation
            return True

        error = controller.last_error
        if error is not None and not controller.error_handler.should_retry(error):
            tqdm.write(f"⚠️ Not retrying: {error}")
            return False

        answer = read_line("Edit and retry? [y/N] ").strip().lower()
        if answer not in ("y", "yes"):
            return False


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Submit a new code snippet for review"
    )
    parser.add_argument(
        "--api-url",
        dest="api_url",
        default=None,
        help="Base URL of the snippet API (defaults to SNIPPETS_API_URL env variable)",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Request timeout in seconds (default: 10)",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (default: WARNING)",
    )

    args = parser.parse_args()

    error_handler = ErrorHandler(args.log_level)

    settings = FormSettings.from_env()
    if args.api_url:
        settings.api_base_url = args.api_url
    if args.timeout is not None:
        settings.request_timeout = args.timeout

    controller = SnippetFormController(
        ConsoleNotifier(),
        ConsoleNavigator(),
        settings,
        error_handler=error_handler,
    )

    try:
        submitted = asyncio.run(run_form(controller))
    except (KeyboardInterrupt, EOFError):
        print("\n⚠️ Submission cancelled", file=sys.stderr)
        sys.exit(1)

    report = error_handler.format_error_report()
    if report:
        tqdm.write(report)

    sys.exit(0 if submitted else 1)


if __name__ == "__main__":
    main()
