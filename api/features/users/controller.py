"""Controller for the Users feature."""
from api.features.users.dtos import SaveUserRequest, SaveUserResponse
from api.features.users.service import UserProfileService


class UserController:
    def __init__(self, user_service: UserProfileService):
        self.user_service = user_service

    async def save_user(self, request: SaveUserRequest) -> SaveUserResponse:
        await self.user_service.save(request.user)
        return SaveUserResponse()
