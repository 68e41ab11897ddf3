"""Router for the Users feature."""
from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends

from api.di.container import ApplicationContainer as DependencyContainer
from api.features.users.controller import UserController
from api.features.users.dtos import SaveUserRequest, SaveUserResponse

router = APIRouter()


@router.post("", response_model=SaveUserResponse)
@inject
async def save_user(
    request: SaveUserRequest,
    controller: UserController = Depends(
        Provide[DependencyContainer.controllers.user_controller]
    ),
):
    """Create or refresh a user profile after sign-in."""
    return await controller.save_user(request)
