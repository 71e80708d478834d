"""Submission flow for a single snippet draft.

The controller holds the draft, validates it when the user submits, posts the
JSON payload to the snippet endpoint and reports the outcome through a
:class:`~src.form.feedback.Notifier`. Only one submission can be in flight per
controller; further ``submit`` calls are ignored until it settles.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Tuple

import httpx

from ..errors import (
    DraftValidationError,
    ServerRejectionError,
    SnippetShareError,
    SubmissionError,
    TransportError,
)
from ..exception_handler import ErrorHandler
from ..snippet.model import SnippetDraft, SnippetPayload
from ..snippet.options import REQUIRED_FIELDS
from .config import FormSettings
from .feedback import Navigator, Notifier
from .fields import FieldChange

logger = logging.getLogger("snippet_share")

SUCCESS_MESSAGE = "Snippet requested for review"
FAILURE_MESSAGE = "Failed to add snippet. Please try again."
SUBMIT_LABEL = "Add Snippet"
SUBMITTING_LABEL = "Adding..."

JSON_HEADERS = {"Content-Type": "application/json"}


class FormState(str, Enum):
    EDITING = "editing"
    VALIDATING = "validating"
    SUBMITTING = "submitting"
    SUCCEEDED = "succeeded"
    NAVIGATED = "navigated"
    FAILED = "failed"


@dataclass(frozen=True, slots=True)
class ValidationResult:
    valid: bool
    missing: Tuple[str, ...] = ()


def parse_tags(raw: str) -> List[str]:
    """Split comma separated tags, trimming each and dropping empty entries."""

    return [tag.strip() for tag in raw.split(",") if tag.strip()]


def missing_fields(draft: SnippetDraft) -> Tuple[str, ...]:
    return tuple(name for name in REQUIRED_FIELDS if not getattr(draft, name))


def empty_field_message(name: str) -> str:
    return f"{name[:1].upper()}{name[1:]} cannot be empty"


def build_payload(draft: SnippetDraft) -> SnippetPayload:
    fields = draft.model_dump(exclude={"tags"})
    return SnippetPayload(**fields, tags=parse_tags(draft.tags))


class SnippetFormController:
    """Owns one snippet draft from first keystroke to submission."""

    def __init__(
        self,
        notifier: Notifier,
        navigator: Navigator,
        settings: FormSettings | None = None,
        *,
        error_handler: ErrorHandler,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.notifier = notifier
        self.navigator = navigator
        self.settings = settings or FormSettings()
        self.error_handler = error_handler
        self.state = FormState.EDITING
        self.last_error: SnippetShareError | None = None
        self.pending_navigation: asyncio.Task | None = None
        self._client = client
        self._draft = SnippetDraft()
        self._is_submitting = False
        self._listeners: List[Callable[[FieldChange], None]] = []

    @property
    def draft(self) -> SnippetDraft:
        return self._draft

    @property
    def is_submitting(self) -> bool:
        return self._is_submitting

    @property
    def submit_label(self) -> str:
        return SUBMITTING_LABEL if self._is_submitting else SUBMIT_LABEL

    def subscribe(self, listener: Callable[[FieldChange], None]) -> Callable[[], None]:
        """Call ``listener`` after every field update; returns an unsubscribe callback."""

        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def update_field(self, name: str, value: str) -> SnippetDraft:
        if name not in SnippetDraft.model_fields:
            raise KeyError(f"Unknown form field: {name}")
        self._draft = self._draft.model_copy(update={name: value})
        change = FieldChange(name, value)
        for listener in list(self._listeners):
            listener(change)
        return self._draft

    def apply(self, change: FieldChange) -> SnippetDraft:
        return self.update_field(change.name, change.value)

    def validate(self, draft: SnippetDraft | None = None) -> ValidationResult:
        """Check every required field, raising one error notification per empty field."""

        if draft is None:
            draft = self._draft
        missing = missing_fields(draft)
        for name in missing:
            self.notifier.error(empty_field_message(name))
        return ValidationResult(valid=not missing, missing=missing)

    async def submit(self) -> bool:
        """Validate and post the current draft; returns True when the server accepted it."""

        if self._is_submitting:
            logger.debug("Submission already in flight; ignoring submit")
            return False

        self.state = FormState.VALIDATING
        result = self.validate()
        if not result.valid:
            self.last_error = DraftValidationError(result.missing)
            self.state = FormState.EDITING
            return False

        self._is_submitting = True
        self.state = FormState.SUBMITTING
        draft = self._draft
        try:
            await self._post(build_payload(draft))
        except SubmissionError as exc:
            self.state = FormState.FAILED
            self.last_error = exc
            self.error_handler.collect_submission_error(exc, self.settings.endpoint_url, draft.title)
            self.notifier.error(FAILURE_MESSAGE)
            self.state = FormState.EDITING
            return False
        finally:
            self._is_submitting = False

        self.last_error = None
        self.state = FormState.SUCCEEDED
        self.notifier.success(SUCCESS_MESSAGE)
        self.pending_navigation = asyncio.create_task(self._navigate_home())
        return True

    async def _post(self, payload: SnippetPayload) -> httpx.Response:
        url = self.settings.endpoint_url
        body = payload.model_dump()
        timeout = httpx.Timeout(self.settings.request_timeout)
        try:
            if self._client is not None:
                response = await self._client.post(url, json=body, headers=JSON_HEADERS, timeout=timeout)
            else:
                async with httpx.AsyncClient(timeout=timeout) as client:
                    response = await client.post(url, json=body, headers=JSON_HEADERS)
        except (httpx.RequestError, httpx.InvalidURL) as exc:
            raise TransportError(url, exc) from exc

        if not response.is_success:
            raise ServerRejectionError(response.status_code)
        logger.info("Snippet %r accepted with status %d", payload.title, response.status_code)
        return response

    async def _navigate_home(self) -> None:
        await asyncio.sleep(self.settings.navigation_delay)
        self.navigator.push(self.settings.home_path)
        self.state = FormState.NAVIGATED


__all__ = [
    "FAILURE_MESSAGE",
    "FormState",
    "SUCCESS_MESSAGE",
    "SnippetFormController",
    "ValidationResult",
    "build_payload",
    "empty_field_message",
    "missing_fields",
    "parse_tags",
]
