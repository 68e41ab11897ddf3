"""Repository for conversation persistence operations.

One document per ``sessionId`` in the ``conversations`` collection.
"""
from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from infra.document_store import DocumentStore

COLLECTION = "conversations"
KEY_FIELD = "sessionId"


class ConversationRepository:
    def __init__(self, store: DocumentStore):
        self.store = store

    async def upsert_messages(
        self, session_id: str, messages: Any, *, now: datetime
    ) -> bool:
        """Replace messages and bump updatedAt; createdAt is written on insert only."""
        return await self.store.upsert(
            COLLECTION,
            {KEY_FIELD: session_id},
            set_fields={"messages": messages, "updatedAt": now},
            set_on_insert={"createdAt": now},
        )

    async def get(self, session_id: str) -> Optional[dict]:
        return await self.store.find_one(COLLECTION, {KEY_FIELD: session_id})

    async def delete(self, session_id: str) -> int:
        return await self.store.delete_one(COLLECTION, {KEY_FIELD: session_id})
