import pytest

from src.form.fields import (
    FORM_FIELDS,
    EnumSelect,
    FieldChange,
    TextArea,
    TextInput,
    field_by_name,
)
from src.snippet.options import DIFFICULTY_LEVELS, LANGUAGES


def test_form_fields_follow_layout_order():
    assert [form_field.name for form_field in FORM_FIELDS] == [
        "title",
        "language",
        "code",
        "description",
        "tags",
        "category",
        "difficulty",
        "usage",
    ]
    assert field_by_name("tags").label == "Tags (comma-separated)"


def test_field_kinds():
    assert isinstance(field_by_name("title"), TextInput)
    assert isinstance(field_by_name("code"), TextArea)
    assert isinstance(field_by_name("description"), TextArea)
    for name in ("language", "category", "difficulty", "usage"):
        assert isinstance(field_by_name(name), EnumSelect)
    assert field_by_name("language").options == LANGUAGES


def test_field_by_name_unknown():
    with pytest.raises(KeyError):
        field_by_name("author")


def test_text_input_change_drops_line_ending():
    assert TextInput("Title", "title").change("Binary Search\n") == FieldChange("title", "Binary Search")


def test_text_area_keeps_all_lines():
    area = TextArea("Code", "code")
    code = "def bs(items, target):\n    return -1"

    assert area.change(code) == FieldChange("code", code)
    assert area.render(code) == "Code:\n  | def bs(items, target):\n  |     return -1"
    assert area.render("") == "Code:"


def test_enum_select_accepts_name_or_index():
    select = EnumSelect("Difficulty", "difficulty", DIFFICULTY_LEVELS)

    assert select.change("2") == FieldChange("difficulty", "Intermediate")
    assert select.change(" advanced ") == FieldChange("difficulty", "Advanced")
    assert select.change("") == FieldChange("difficulty", "")


@pytest.mark.parametrize("raw", ["0", "4", "Expert"])
def test_enum_select_rejects_values_outside_options(raw):
    select = EnumSelect("Difficulty", "difficulty", DIFFICULTY_LEVELS)

    with pytest.raises(ValueError):
        select.change(raw)


def test_enum_select_render_marks_selection():
    select = EnumSelect("Difficulty", "difficulty", DIFFICULTY_LEVELS)

    assert select.placeholder == "Select difficulty"
    assert select.render("").splitlines()[0] == "Difficulty: Select difficulty"
    rendered = select.render("Advanced").splitlines()
    assert rendered[0] == "Difficulty: Advanced"
    assert rendered[3] == " *  3. Advanced"
    assert rendered[1] == "    1. Beginner"
