"""Repository for user profile persistence, keyed by ``key`` in ``users``."""
from __future__ import annotations

from datetime import datetime
from typing import Any, Dict

from infra.document_store import DocumentStore

COLLECTION = "users"
KEY_FIELD = "key"


class UserRepository:
    def __init__(self, store: DocumentStore):
        self.store = store

    async def upsert_profile(
        self, key: str, attributes: Dict[str, Any], *, now: datetime
    ) -> bool:
        set_fields = {KEY_FIELD: key, **attributes, "lastLoginAt": now}
        return await self.store.upsert(
            COLLECTION,
            {KEY_FIELD: key},
            set_fields=set_fields,
            set_on_insert={"createdAt": now},
        )
