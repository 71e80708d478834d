"""Write-time validation for snippet documents and the process-wide model registry.

The schema is the source of truth for what may be persisted: it enforces the
required ``title``/``language``/``code`` strings, applies defaults and drops
fields that are not part of the record shape. Membership of ``language`` in the
form's option list is deliberately *not* checked here; other clients may write
any language name.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping

from pydantic import ValidationError

from ..errors import RegistryError, SchemaViolationError
from .model import SnippetRecord

logger = logging.getLogger("snippet_share")

SNIPPET_MODEL = "Snippet"


class SnippetSchema:
    """Validate and normalise documents before they are written."""

    REQUIRED_FIELDS = ("title", "language", "code")
    ALLOWED_FIELDS = (
        "title",
        "language",
        "code",
        "description",
        "tags",
        "createdAt",
        "bookmarkedBy",
    )

    def validate_for_write(self, document: Mapping[str, Any]) -> SnippetRecord:
        missing = []
        invalid = []
        for name in self.REQUIRED_FIELDS:
            value = document.get(name)
            if value is None or value == "":
                missing.append(name)
            elif not isinstance(value, str):
                invalid.append(name)

        if missing or invalid:
            raise SchemaViolationError(missing=missing, invalid=invalid)

        cleaned = {
            name: document[name]
            for name in self.ALLOWED_FIELDS
            if name in document and document[name] is not None
        }
        dropped = sorted(set(document) - set(self.ALLOWED_FIELDS) - {"id", "_id"})
        if dropped:
            logger.debug("Dropping fields outside the snippet schema: %s", ", ".join(dropped))

        try:
            return SnippetRecord.model_validate(cleaned)
        except ValidationError as exc:
            names = sorted({str(error["loc"][0]) for error in exc.errors() if error.get("loc")})
            raise SchemaViolationError(invalid=names) from exc


@dataclass(frozen=True, slots=True)
class DocumentModel:
    """A named document type with its schema and storage key prefix."""

    name: str
    schema: SnippetSchema
    key_prefix: str


@dataclass(slots=True)
class ModelRegistry:
    """Named document models available to the storage layer."""

    models: Dict[str, DocumentModel] = field(default_factory=dict)

    def register(self, model: DocumentModel) -> DocumentModel:
        if model.name in self.models:
            raise RegistryError(f"Model {model.name!r} is already registered")
        self.models[model.name] = model
        return model

    def get(self, name: str) -> DocumentModel:
        try:
            return self.models[name]
        except KeyError:
            raise RegistryError(f"Unknown model {name!r}") from None


_registry: ModelRegistry | None = None
_registry_lock = threading.Lock()


def init_registry() -> ModelRegistry:
    """Build the process-wide registry; call once during startup.

    Later calls return the registry created by the first one.
    """

    global _registry
    with _registry_lock:
        if _registry is None:
            registry = ModelRegistry()
            registry.register(
                DocumentModel(
                    name=SNIPPET_MODEL,
                    schema=SnippetSchema(),
                    key_prefix="snippet:record:",
                )
            )
            _registry = registry
            logger.debug("Model registry initialised with %s", ", ".join(registry.models))
        return _registry


def get_registry() -> ModelRegistry:
    if _registry is None:
        raise RegistryError("Model registry has not been initialised")
    return _registry


__all__ = [
    "DocumentModel",
    "ModelRegistry",
    "SNIPPET_MODEL",
    "SnippetSchema",
    "get_registry",
    "init_registry",
]
