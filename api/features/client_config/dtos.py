from pydantic import Field

from api.shared.dtos import SuccessResponse


class GoogleClientIdResponse(SuccessResponse):
    client_id: str = Field(description="Google OAuth client id")
