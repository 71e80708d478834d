from __future__ import annotations

from datetime import datetime, timezone
from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class SnippetDraft(BaseModel):
    """Unsaved snippet data as typed into the submission form."""

    title: str = ""
    language: str = ""
    code: str = ""
    description: str = ""
    tags: str = ""
    category: str = ""
    difficulty: str = ""
    usage: str = ""

    model_config = ConfigDict(extra="forbid")


class SnippetPayload(BaseModel):
    """JSON body sent to the snippet creation endpoint."""

    title: str
    language: str
    code: str
    description: str = ""
    tags: List[str] = Field(default_factory=list)
    category: str
    difficulty: str
    usage: str


class SnippetRecord(BaseModel):
    """Persisted snippet document."""

    id: str | None = None
    title: str
    language: str
    code: str
    description: str | None = None
    tags: List[str] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=_utcnow, alias="createdAt")
    bookmarked_by: List[str] = Field(default_factory=list, alias="bookmarkedBy")

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @field_validator("bookmarked_by")
    @classmethod
    def _unique_user_ids(cls, value: List[str]) -> List[str]:
        seen: set[str] = set()
        unique: List[str] = []
        for user_id in value:
            if user_id not in seen:
                seen.add(user_id)
                unique.append(user_id)
        return unique

    @field_validator("created_at")
    @classmethod
    def _as_utc(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)

    def to_document(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)


__all__ = ["SnippetDraft", "SnippetPayload", "SnippetRecord"]
