"""Conversation service: validated save, load and remove keyed by session id.

Per session: Absent -> Present on the first save, Present -> Present on later
saves (messages replaced, createdAt kept), Present -> Absent on remove. Loading
or removing an absent session is not an error.
"""
from __future__ import annotations

from typing import Any, Optional

import structlog

from api.features.conversation.repository import ConversationRepository
from api.features.conversation.validators import (
    validate_conversation_payload,
    validate_session_id,
)
from api.shared.utils import Clock, utc_now

logger = structlog.get_logger("graphify.conversation.service")


class ConversationService:
    def __init__(self, repository: ConversationRepository, clock: Clock = utc_now):
        self.repository = repository
        self.clock = clock

    async def save(self, session_id: Any, messages: Any) -> bool:
        """Upsert a conversation. Returns True when it was newly created."""
        payload = validate_conversation_payload(session_id, messages)
        inserted = await self.repository.upsert_messages(
            payload.session_id, payload.messages, now=self.clock()
        )
        logger.info(
            "conversation.saved", session_id=payload.session_id, inserted=inserted
        )
        return inserted

    async def load(self, session_id: Any) -> Optional[Any]:
        """Stored messages, or None when no conversation exists for the id."""
        session_id = validate_session_id(session_id)
        document = await self.repository.get(session_id)
        if document is None:
            return None
        return document.get("messages")

    async def remove(self, session_id: Any) -> int:
        session_id = validate_session_id(session_id)
        deleted = await self.repository.delete(session_id)
        logger.info("conversation.deleted", session_id=session_id, deleted=deleted)
        return deleted
