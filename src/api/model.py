"""Pydantic models for the public API surface."""

from __future__ import annotations

from datetime import datetime
from typing import List

from pydantic import BaseModel, ConfigDict, Field

from ..snippet import SnippetRecord


class SnippetCreateRequest(BaseModel):
    """Body of ``POST /api/snippets``.

    Everything is optional here: required-field enforcement happens at the
    record schema so that every writer goes through the same rules.
    """

    title: str | None = None
    language: str | None = None
    code: str | None = None
    description: str | None = None
    tags: List[str] | None = None
    category: str | None = None
    difficulty: str | None = None
    usage: str | None = None

    model_config = ConfigDict(extra="allow")


class SnippetResponse(BaseModel):
    id: str
    title: str
    language: str
    code: str
    description: str | None = None
    tags: List[str] = Field(default_factory=list)
    created_at: datetime = Field(..., alias="createdAt")
    bookmarked_by: List[str] = Field(default_factory=list, alias="bookmarkedBy")

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def from_record(cls, record: SnippetRecord) -> "SnippetResponse":
        return cls(
            id=record.id or "",
            title=record.title,
            language=record.language,
            code=record.code,
            description=record.description,
            tags=list(record.tags),
            created_at=record.created_at,
            bookmarked_by=list(record.bookmarked_by),
        )


class SnippetListResponse(BaseModel):
    count: int
    results: List[SnippetResponse]


__all__ = [
    "SnippetCreateRequest",
    "SnippetListResponse",
    "SnippetResponse",
]
