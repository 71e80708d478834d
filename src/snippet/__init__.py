"""Snippet documents, their write schema and storage."""

from .model import SnippetDraft, SnippetPayload, SnippetRecord
from .options import CATEGORIES, DIFFICULTY_LEVELS, LANGUAGES, REQUIRED_FIELDS, USAGE_TYPES
from .schema import ModelRegistry, SnippetSchema, get_registry, init_registry
from .store import SnippetRecordStore

__all__ = [
    "CATEGORIES",
    "DIFFICULTY_LEVELS",
    "LANGUAGES",
    "REQUIRED_FIELDS",
    "USAGE_TYPES",
    "ModelRegistry",
    "SnippetDraft",
    "SnippetPayload",
    "SnippetRecord",
    "SnippetRecordStore",
    "SnippetSchema",
    "get_registry",
    "init_registry",
]
