"""DTOs for the Chat feature."""
from typing import Any, Optional

from pydantic import Field

from api.shared.dtos import RequestDTO, SuccessResponse


class ChatCompletionRequest(RequestDTO):
    messages: Optional[Any] = Field(default=None, description="Chat messages, in order")
    response_format: Optional[str] = Field(
        default=None, description="Upstream response format type, e.g. json_object"
    )
    max_tokens: Optional[int] = Field(default=None, description="Token limit")
    temperature: Optional[float] = Field(default=None, description="Sampling temperature")


class ChatCompletionResponse(SuccessResponse):
    content: str = Field(description="Text of the first completion choice")
