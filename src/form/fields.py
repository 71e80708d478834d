"""Form field variants used to render and edit a snippet draft.

Every field is one of three kinds: :class:`TextInput` for a single line,
:class:`TextArea` for multi-line text and :class:`EnumSelect` for a closed
option list. ``render`` produces the terminal representation of the field and
``change`` turns raw user input into a :class:`FieldChange` for the controller.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple, Union

from ..snippet.options import CATEGORIES, DIFFICULTY_LEVELS, LANGUAGES, USAGE_TYPES


@dataclass(frozen=True, slots=True)
class FieldChange:
    """A single field update emitted by a form field."""

    name: str
    value: str


@dataclass(frozen=True, slots=True)
class TextInput:
    label: str
    name: str

    def render(self, value: str) -> str:
        return f"{self.label}: {value}"

    def change(self, raw: str) -> FieldChange:
        return FieldChange(self.name, raw.rstrip("\r\n"))


@dataclass(frozen=True, slots=True)
class TextArea:
    label: str
    name: str

    def render(self, value: str) -> str:
        if not value:
            return f"{self.label}:"
        body = "\n".join(f"  | {line}" for line in value.splitlines())
        return f"{self.label}:\n{body}"

    def change(self, raw: str) -> FieldChange:
        return FieldChange(self.name, raw)


@dataclass(frozen=True, slots=True)
class EnumSelect:
    label: str
    name: str
    options: Tuple[str, ...]

    @property
    def placeholder(self) -> str:
        return f"Select {self.label.lower()}"

    def render(self, value: str) -> str:
        lines = [f"{self.label}: {value or self.placeholder}"]
        for index, option in enumerate(self.options, start=1):
            marker = "*" if option == value else " "
            lines.append(f" {marker}{index:>3}. {option}")
        return "\n".join(lines)

    def change(self, raw: str) -> FieldChange:
        """Resolve ``raw`` to an option by name (any case) or 1-based index.

        Blank input clears the selection.
        """

        choice = raw.strip()
        if not choice:
            return FieldChange(self.name, "")
        if choice.isdigit():
            index = int(choice)
            if 1 <= index <= len(self.options):
                return FieldChange(self.name, self.options[index - 1])
        for option in self.options:
            if option.lower() == choice.lower():
                return FieldChange(self.name, option)
        raise ValueError(f"{choice!r} is not a valid {self.label.lower()}")


FormField = Union[TextInput, TextArea, EnumSelect]

FORM_FIELDS: Tuple[FormField, ...] = (
    TextInput("Title", "title"),
    EnumSelect("Language", "language", LANGUAGES),
    TextArea("Code", "code"),
    TextArea("Description", "description"),
    TextInput("Tags (comma-separated)", "tags"),
    EnumSelect("Category", "category", CATEGORIES),
    EnumSelect("Difficulty", "difficulty", DIFFICULTY_LEVELS),
    EnumSelect("Usage", "usage", USAGE_TYPES),
)


def field_by_name(name: str) -> FormField:
    for form_field in FORM_FIELDS:
        if form_field.name == name:
            return form_field
    raise KeyError(name)


__all__ = [
    "EnumSelect",
    "FORM_FIELDS",
    "FieldChange",
    "FormField",
    "TextArea",
    "TextInput",
    "field_by_name",
]
