"""Closed option sets offered by the submission form."""

from __future__ import annotations

LANGUAGES: tuple[str, ...] = (
    "Java",
    "Python",
    "JavaScript",
    "C++",
    "C#",
    "Go",
    "Kotlin",
    "Ruby",
    "Swift",
    "PHP",
    "TypeScript",
    "Rust",
    "Dart",
    "Scala",
    "Perl",
    "R",
    "Elixir",
    "Haskell",
    "Lua",
    "C",
    "MATLAB",
    "Shell",
)

CATEGORIES: tuple[str, ...] = (
    "Algorithm",
    "Data Structure",
    "Web Development",
    "Mobile Development",
    "Other",
)

DIFFICULTY_LEVELS: tuple[str, ...] = ("Beginner", "Intermediate", "Advanced")

USAGE_TYPES: tuple[str, ...] = ("Educational", "Utility", "Template", "Other")

# Validation order; one error notification is raised per entry that is empty.
REQUIRED_FIELDS: tuple[str, ...] = (
    "title",
    "language",
    "code",
    "category",
    "difficulty",
    "usage",
)


__all__ = [
    "CATEGORIES",
    "DIFFICULTY_LEVELS",
    "LANGUAGES",
    "REQUIRED_FIELDS",
    "USAGE_TYPES",
]
