"""Router for the Chat feature."""
from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends

from api.di.container import ApplicationContainer as DependencyContainer
from api.features.chat.controller import ChatController
from api.features.chat.dtos import ChatCompletionRequest, ChatCompletionResponse

router = APIRouter()


@router.post("/chat", response_model=ChatCompletionResponse)
@inject
async def groq_chat(
    request: ChatCompletionRequest,
    controller: ChatController = Depends(
        Provide[DependencyContainer.controllers.chat_controller]
    ),
):
    """Proxy a chat completion to Groq so the API key never reaches the browser."""
    return await controller.complete(request)
