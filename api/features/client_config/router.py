"""Router exposing public client configuration."""
from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends

from api.di.container import ApplicationContainer as DependencyContainer
from api.features.client_config.dtos import GoogleClientIdResponse
from api.shared.exceptions import ClientConfigMissingError
from core.settings import Settings

router = APIRouter()


@router.get("/google-client-id", response_model=GoogleClientIdResponse)
@inject
async def google_client_id(
    settings: Settings = Depends(Provide[DependencyContainer.infrastructure.settings]),
):
    """Google OAuth client id used by the frontend sign-in button."""
    client_id = settings.GOOGLE.GOOGLE_CLIENT_ID
    if not client_id:
        raise ClientConfigMissingError(
            "GOOGLE_CLIENT_ID", "Google client ID not configured"
        )
    return GoogleClientIdResponse(client_id=client_id)
