"""Controller for the Chat feature."""
from api.features.chat.dtos import ChatCompletionRequest, ChatCompletionResponse
from api.features.chat.service import ChatCompletionService


class ChatController:
    def __init__(self, chat_service: ChatCompletionService):
        self.chat_service = chat_service

    async def complete(self, request: ChatCompletionRequest) -> ChatCompletionResponse:
        content = await self.chat_service.complete(
            request.messages,
            response_format=request.response_format,
            max_tokens=request.max_tokens,
            temperature=request.temperature,
        )
        return ChatCompletionResponse(content=content)
