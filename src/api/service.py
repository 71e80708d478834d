"""Service-layer helpers for snippet creation, lookup and bookmarking."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

import redis
from fastapi import HTTPException

from ..errors import SchemaViolationError
from ..snippet import SnippetRecordStore
from .model import SnippetCreateRequest, SnippetListResponse, SnippetResponse

logger = logging.getLogger("snippet_share")


@dataclass(slots=True)
class ApiSettings:
    """Runtime configuration for the API server."""

    redis_url: str
    list_limit: int
    log_level: str

    @classmethod
    def from_env(cls) -> "ApiSettings":
        def _int_env(name: str, default: int) -> int:
            raw = os.getenv(name)
            if not raw:
                return default
            try:
                return int(raw)
            except ValueError:
                logger.warning("Invalid integer for %s: %s", name, raw)
                return default

        return cls(
            redis_url=os.getenv("REDIS_URL", "redis://127.0.0.1:6379/0"),
            list_limit=_int_env("SNIPPETS_LIST_LIMIT", 50),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )


def create_snippet_service(
    payload: SnippetCreateRequest,
    store: SnippetRecordStore,
) -> SnippetResponse:
    document = payload.model_dump(exclude_none=True)
    try:
        record = store.create(document)
    except SchemaViolationError as exc:
        logger.info("Rejected snippet write: %s", exc)
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except redis.RedisError as exc:
        logger.exception("Failed to store snippet %r", payload.title)
        raise HTTPException(status_code=500, detail="Failed to store snippet") from exc
    return SnippetResponse.from_record(record)


def list_snippets_service(
    store: SnippetRecordStore,
    limit: int,
) -> SnippetListResponse:
    try:
        records = store.list_records(limit=limit)
    except redis.RedisError as exc:
        logger.exception("Failed to list snippets")
        raise HTTPException(status_code=500, detail="Failed to list snippets") from exc
    results = [SnippetResponse.from_record(record) for record in records]
    return SnippetListResponse(count=len(results), results=results)


def get_snippet_service(snippet_id: str, store: SnippetRecordStore) -> SnippetResponse:
    record = store.get(snippet_id)
    if record is None:
        raise HTTPException(status_code=404, detail="Snippet not found")
    return SnippetResponse.from_record(record)


def bookmark_snippet_service(
    snippet_id: str,
    user_id: str,
    store: SnippetRecordStore,
    *,
    bookmarked: bool,
) -> SnippetResponse:
    try:
        if bookmarked:
            store.add_bookmark(snippet_id, user_id)
        else:
            store.remove_bookmark(snippet_id, user_id)
    except KeyError as exc:
        raise HTTPException(status_code=404, detail="Snippet not found") from exc
    return get_snippet_service(snippet_id, store)


__all__ = [
    "ApiSettings",
    "bookmark_snippet_service",
    "create_snippet_service",
    "get_snippet_service",
    "list_snippets_service",
]
