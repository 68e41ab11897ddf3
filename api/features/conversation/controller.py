"""Controller for the Conversation feature."""
from api.features.conversation.dtos import (
    DeleteConversationResponse,
    LoadConversationResponse,
    SaveConversationRequest,
    SaveConversationResponse,
)
from api.features.conversation.service import ConversationService


class ConversationController:
    """Controller translating conversation service results into response DTOs."""

    def __init__(self, conversation_service: ConversationService):
        self.conversation_service = conversation_service

    async def save_conversation(
        self, request: SaveConversationRequest
    ) -> SaveConversationResponse:
        await self.conversation_service.save(request.session_id, request.messages)
        return SaveConversationResponse()

    async def load_conversation(self, session_id: str) -> LoadConversationResponse:
        messages = await self.conversation_service.load(session_id)
        return LoadConversationResponse(messages=messages)

    async def delete_conversation(self, session_id: str) -> DeleteConversationResponse:
        deleted = await self.conversation_service.remove(session_id)
        return DeleteConversationResponse(deleted=deleted)
