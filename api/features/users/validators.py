"""Validators for user profile payloads.

Fields are read by their camelCase wire names only. Unknown fields, snake_case
spellings included, are accepted and dropped: only the attributes declared on
:class:`UserProfilePayload` ever reach the store.
"""
from typing import Any, Dict, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    StrictBool,
    StrictStr,
    ValidationError,
    field_validator,
)
from pydantic.alias_generators import to_camel

from api.shared.dtos import field_errors_from_pydantic
from api.shared.exceptions import InvalidPayloadError

OPTIONAL_STRING_FIELDS = ("sub", "picture", "hd", "locale", "phone")


class UserProfilePayload(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, extra="ignore")

    email: StrictStr
    name: StrictStr
    sub: Any = None
    picture: Any = None
    email_verified: Optional[StrictBool] = None
    hd: Any = None
    locale: Any = None
    phone: Any = None

    @field_validator("email", "name")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must be a non-empty string")
        return value

    @field_validator(*OPTIONAL_STRING_FIELDS)
    @classmethod
    def _string_when_set(cls, value: Any) -> Any:
        # empty/falsy values are stored as given; anything else must be a string
        if value and not isinstance(value, str):
            raise ValueError("must be a string")
        return value

    @field_validator("email_verified", mode="before")
    @classmethod
    def _explicit_null_rejected(cls, value: Any) -> Any:
        if value is None:
            raise ValueError("emailVerified must be a boolean when present")
        return value

    @property
    def key(self) -> str:
        """Identity key: ``sub`` when non-empty, otherwise ``email``."""
        return self.sub or self.email

    def to_document(self) -> Dict[str, Any]:
        """Known attributes in wire naming, omitted optionals as None."""
        return self.model_dump(by_alias=True)


def validate_user_payload(user: Any) -> UserProfilePayload:
    """Return the typed profile or raise InvalidPayloadError listing failing fields."""
    if not isinstance(user, dict):
        raise InvalidPayloadError(
            "Invalid user payload",
            [{"field": "user", "message": "user must be an object"}],
        )
    try:
        return UserProfilePayload.model_validate(user)
    except ValidationError as e:
        # error locations already use the camelCase wire names
        errors = field_errors_from_pydantic(e.errors())
        raise InvalidPayloadError("Invalid user payload", errors) from e
