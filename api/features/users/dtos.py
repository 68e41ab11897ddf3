"""DTOs for the Users feature."""
from typing import Any, Optional

from pydantic import Field

from api.shared.dtos import RequestDTO, SuccessResponse


class SaveUserRequest(RequestDTO):
    user: Optional[Any] = Field(default=None, description="Profile from the identity provider")


class SaveUserResponse(SuccessResponse):
    pass
