"""Core package for the snippet sharing service and submission form."""

from .form import FormSettings, SnippetFormController
from .snippet import SnippetDraft, SnippetRecord, SnippetRecordStore, init_registry

__all__ = [
    "FormSettings",
    "SnippetDraft",
    "SnippetFormController",
    "SnippetRecord",
    "SnippetRecordStore",
    "init_registry",
]
