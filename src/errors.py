"""Exception types shared by the snippet form, schema and API layers."""

from __future__ import annotations

from typing import Sequence


class SnippetShareError(Exception):
    """Base class for all snippet sharing errors."""


class DraftValidationError(SnippetShareError):
    """Raised when required draft fields are empty at submit time."""

    def __init__(self, missing: Sequence[str]) -> None:
        self.missing = tuple(missing)
        super().__init__(f"Missing required fields: {', '.join(self.missing)}")


class SubmissionError(SnippetShareError):
    """A submission that did not reach a successful response."""


class TransportError(SubmissionError):
    """The request never completed (connection refused, timeout, ...)."""

    def __init__(self, endpoint: str, cause: BaseException | None = None) -> None:
        self.endpoint = endpoint
        self.cause = cause
        reason = (str(cause) or cause.__class__.__name__) if cause else "unknown error"
        super().__init__(f"Request to {endpoint} failed: {reason}")


class ServerRejectionError(SubmissionError):
    """The server answered with a non-2xx status."""

    def __init__(self, status_code: int) -> None:
        self.status_code = status_code
        super().__init__(f"HTTP error! status: {status_code}")


class SchemaViolationError(SnippetShareError):
    """A document write was rejected by the record schema."""

    def __init__(self, missing: Sequence[str] = (), invalid: Sequence[str] = ()) -> None:
        self.missing = tuple(missing)
        self.invalid = tuple(invalid)
        parts = []
        if self.missing:
            parts.append(f"missing required fields: {', '.join(self.missing)}")
        if self.invalid:
            parts.append(f"invalid fields: {', '.join(self.invalid)}")
        super().__init__("; ".join(parts) or "document rejected")


class RegistryError(SnippetShareError):
    """The document model registry was used before startup or misconfigured."""


__all__ = [
    "DraftValidationError",
    "RegistryError",
    "SchemaViolationError",
    "ServerRejectionError",
    "SnippetShareError",
    "SubmissionError",
    "TransportError",
]
