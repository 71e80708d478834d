"""FastAPI routes for snippet submission and bookmarking."""

from __future__ import annotations

import redis
from fastapi import APIRouter, Depends, Query, Request, status

from ..snippet import SnippetRecordStore
from .model import SnippetCreateRequest, SnippetListResponse, SnippetResponse
from .service import (
    ApiSettings,
    bookmark_snippet_service,
    create_snippet_service,
    get_snippet_service,
    list_snippets_service,
)


def get_settings(request: Request) -> ApiSettings:
    settings = getattr(request.app.state, "settings", None)
    if not isinstance(settings, ApiSettings):
        raise RuntimeError("API settings have not been initialised")
    return settings


def _get_redis_client(request: Request, settings: ApiSettings) -> redis.Redis:
    redis_client = getattr(request.app.state, "redis_client", None)
    if redis_client is None:
        redis_client = redis.Redis.from_url(settings.redis_url)
        request.app.state.redis_client = redis_client
    return redis_client


def get_snippet_store(
    request: Request,
    settings: ApiSettings = Depends(get_settings),
) -> SnippetRecordStore:
    redis_client = _get_redis_client(request, settings)
    return SnippetRecordStore(redis_client)


router = APIRouter(prefix="/api")


@router.post("/snippets", response_model=SnippetResponse, status_code=status.HTTP_201_CREATED)
async def create_snippet(
    payload: SnippetCreateRequest,
    store: SnippetRecordStore = Depends(get_snippet_store),
) -> SnippetResponse:
    return create_snippet_service(payload, store)


@router.get("/snippets", response_model=SnippetListResponse)
async def list_snippets(
    limit: int | None = Query(None, ge=1, le=500, description="Maximum number of snippets to return"),
    store: SnippetRecordStore = Depends(get_snippet_store),
    settings: ApiSettings = Depends(get_settings),
) -> SnippetListResponse:
    return list_snippets_service(store, limit or settings.list_limit)


@router.get("/snippets/{snippet_id}", response_model=SnippetResponse)
async def get_snippet(
    snippet_id: str,
    store: SnippetRecordStore = Depends(get_snippet_store),
) -> SnippetResponse:
    return get_snippet_service(snippet_id, store)


@router.put("/snippets/{snippet_id}/bookmarks/{user_id}", response_model=SnippetResponse)
async def bookmark_snippet(
    snippet_id: str,
    user_id: str,
    store: SnippetRecordStore = Depends(get_snippet_store),
) -> SnippetResponse:
    return bookmark_snippet_service(snippet_id, user_id, store, bookmarked=True)


@router.delete("/snippets/{snippet_id}/bookmarks/{user_id}", response_model=SnippetResponse)
async def remove_bookmark(
    snippet_id: str,
    user_id: str,
    store: SnippetRecordStore = Depends(get_snippet_store),
) -> SnippetResponse:
    """Remove ``user_id`` from the snippet's bookmarks."""

    return bookmark_snippet_service(snippet_id, user_id, store, bookmarked=False)


__all__ = ["router", "get_settings", "get_snippet_store"]
