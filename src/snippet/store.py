"""Redis-backed snippet document storage."""

from __future__ import annotations

import json
import logging
import uuid
from typing import Any, List, Mapping

import redis

from .model import SnippetRecord
from .schema import SNIPPET_MODEL, DocumentModel, get_registry

logger = logging.getLogger("snippet_share")


class SnippetRecordStore:
    """Store and retrieve snippet records from Redis.

    Each record is a JSON document under ``<prefix><id>``; bookmarks live in a
    Redis set next to it so a user id can only appear once per snippet.
    """

    INDEX_KEY = "snippets:index"
    BOOKMARKS_SUFFIX = ":bookmarks"

    def __init__(self, redis_client: redis.Redis, *, model: DocumentModel | None = None) -> None:
        self.redis = redis_client
        self.model = model or get_registry().get(SNIPPET_MODEL)

    def create(self, document: Mapping[str, Any]) -> SnippetRecord:
        record = self.model.schema.validate_for_write(document)
        record.id = uuid.uuid4().hex

        stored = record.to_document()
        stored.pop("bookmarkedBy", None)
        payload = json.dumps(stored, separators=(",", ":"))

        pipe = self.redis.pipeline(transaction=True)
        pipe.set(self._record_key(record.id), payload)
        pipe.zadd(self.INDEX_KEY, {record.id: record.created_at.timestamp()})
        if record.bookmarked_by:
            pipe.sadd(self._bookmarks_key(record.id), *record.bookmarked_by)
        pipe.execute()

        logger.info("Stored snippet %s (%s)", record.id, record.title)
        return record

    def get(self, snippet_id: str) -> SnippetRecord | None:
        raw = self.redis.get(self._record_key(snippet_id))
        if raw is None:
            return None
        if isinstance(raw, bytes):
            raw = raw.decode("utf-8")
        try:
            data = json.loads(raw)
        except (TypeError, json.JSONDecodeError):
            logger.warning("Discarding unreadable snippet document %s", snippet_id)
            return None

        data["bookmarkedBy"] = self._bookmarks(snippet_id)
        return SnippetRecord.model_validate(data)

    def list_records(self, limit: int | None = None) -> List[SnippetRecord]:
        end = -1 if limit is None else max(limit, 1) - 1
        ids = self.redis.zrevrange(self.INDEX_KEY, 0, end)
        records: List[SnippetRecord] = []
        for raw_id in ids:
            snippet_id = raw_id.decode("utf-8") if isinstance(raw_id, bytes) else str(raw_id)
            record = self.get(snippet_id)
            if record is not None:
                records.append(record)
        return records

    def add_bookmark(self, snippet_id: str, user_id: str) -> bool:
        """Bookmark a snippet for ``user_id``; returns False if already bookmarked."""

        self._require_exists(snippet_id)
        added = bool(self.redis.sadd(self._bookmarks_key(snippet_id), user_id))
        if added:
            logger.info("[%s] bookmarked by %s", snippet_id, user_id)
        return added

    def remove_bookmark(self, snippet_id: str, user_id: str) -> bool:
        self._require_exists(snippet_id)
        removed = bool(self.redis.srem(self._bookmarks_key(snippet_id), user_id))
        if removed:
            logger.info("[%s] bookmark removed for %s", snippet_id, user_id)
        return removed

    def _bookmarks(self, snippet_id: str) -> List[str]:
        members = self.redis.smembers(self._bookmarks_key(snippet_id)) or set()
        return sorted(
            member.decode("utf-8") if isinstance(member, bytes) else str(member)
            for member in members
        )

    def _require_exists(self, snippet_id: str) -> None:
        if not self.redis.exists(self._record_key(snippet_id)):
            raise KeyError(f"Unknown snippet id: {snippet_id}")

    def _record_key(self, snippet_id: str) -> str:
        return f"{self.model.key_prefix}{snippet_id}"

    def _bookmarks_key(self, snippet_id: str) -> str:
        return f"{self._record_key(snippet_id)}{self.BOOKMARKS_SUFFIX}"


__all__ = ["SnippetRecordStore"]
