"""DTOs for the Conversation feature."""
from typing import Any, Optional

from pydantic import Field

from api.shared.dtos import RequestDTO, SuccessResponse


class SaveConversationRequest(RequestDTO):
    """Save (create or replace) a conversation.

    Fields are loosely typed here; the validators decide what is acceptable so
    that every rejection is reported as a 400 with per-field errors.
    """

    session_id: Optional[Any] = Field(default=None, description="Caller-chosen session id")
    messages: Optional[Any] = Field(default=None, description="Opaque message records")


class SaveConversationResponse(SuccessResponse):
    message: str = Field(default="Conversation saved")


class LoadConversationResponse(SuccessResponse):
    messages: Optional[Any] = Field(
        default=None, description="Stored messages, null when no conversation exists"
    )


class DeleteConversationResponse(SuccessResponse):
    message: str = Field(default="Conversation deleted")
    deleted: int = Field(description="Number of documents deleted (0 or 1)")
