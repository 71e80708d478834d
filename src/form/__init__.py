"""Snippet submission form: fields, feedback and the submission controller."""

from .config import FormSettings
from .controller import FormState, SnippetFormController, ValidationResult, build_payload, parse_tags
from .feedback import ConsoleNavigator, ConsoleNotifier, RecordingNavigator, RecordingNotifier
from .fields import FORM_FIELDS, EnumSelect, FieldChange, TextArea, TextInput

__all__ = [
    "ConsoleNavigator",
    "ConsoleNotifier",
    "EnumSelect",
    "FORM_FIELDS",
    "FieldChange",
    "FormSettings",
    "FormState",
    "RecordingNavigator",
    "RecordingNotifier",
    "SnippetFormController",
    "TextArea",
    "TextInput",
    "ValidationResult",
    "build_payload",
    "parse_tags",
]
