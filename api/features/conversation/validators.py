"""Validators for conversation payloads."""
from typing import Any

from pydantic import BaseModel, ConfigDict, StrictStr, ValidationError, field_validator

from api.shared.dtos import field_errors_from_pydantic
from api.shared.exceptions import InvalidPayloadError


class ConversationPayload(BaseModel):
    """Schema for a conversation save. Message contents are not inspected."""

    model_config = ConfigDict(populate_by_name=True)

    session_id: StrictStr
    messages: Any

    @field_validator("session_id")
    @classmethod
    def _session_id_not_empty(cls, value: str) -> str:
        if not value:
            raise ValueError("sessionId must be a non-empty string")
        return value

    @field_validator("messages", mode="before")
    @classmethod
    def _messages_present(cls, value: Any) -> Any:
        if value is None:
            raise ValueError("messages is required")
        return value


_WIRE_NAMES = {"session_id": "sessionId"}


def validate_conversation_payload(session_id: Any, messages: Any) -> ConversationPayload:
    """Return the typed payload or raise InvalidPayloadError listing failing fields."""
    try:
        return ConversationPayload(session_id=session_id, messages=messages)
    except ValidationError as e:
        errors = field_errors_from_pydantic(e.errors())
        for err in errors:
            err["field"] = _WIRE_NAMES.get(err["field"], err["field"])
        raise InvalidPayloadError("sessionId and messages are required", errors) from e


def validate_session_id(session_id: Any) -> str:
    if not isinstance(session_id, str) or not session_id:
        raise InvalidPayloadError(
            "sessionId is required",
            [{"field": "sessionId", "message": "sessionId must be a non-empty string"}],
        )
    return session_id
