"""Router for the Conversation feature."""
from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends

from api.di.container import ApplicationContainer as DependencyContainer
from api.features.conversation.controller import ConversationController
from api.features.conversation.dtos import (
    DeleteConversationResponse,
    LoadConversationResponse,
    SaveConversationRequest,
    SaveConversationResponse,
)

router = APIRouter()


@router.post("", response_model=SaveConversationResponse)
@inject
async def save_conversation(
    request: SaveConversationRequest,
    controller: ConversationController = Depends(
        Provide[DependencyContainer.controllers.conversation_controller]
    ),
):
    """Create or replace the conversation stored under ``sessionId``."""
    return await controller.save_conversation(request)


@router.get("/{session_id}", response_model=LoadConversationResponse)
@inject
async def load_conversation(
    session_id: str,
    controller: ConversationController = Depends(
        Provide[DependencyContainer.controllers.conversation_controller]
    ),
):
    """Load stored messages; ``messages`` is null when nothing was saved."""
    return await controller.load_conversation(session_id)


@router.delete("/{session_id}", response_model=DeleteConversationResponse)
@inject
async def delete_conversation(
    session_id: str,
    controller: ConversationController = Depends(
        Provide[DependencyContainer.controllers.conversation_controller]
    ),
):
    return await controller.delete_conversation(session_id)
