"""User profile service. Only upsert is exposed; there is no read or delete."""
from __future__ import annotations

from typing import Any

import structlog

from api.features.users.repository import UserRepository
from api.features.users.validators import validate_user_payload
from api.shared.utils import Clock, utc_now

logger = structlog.get_logger("graphify.users.service")


class UserProfileService:
    def __init__(self, repository: UserRepository, clock: Clock = utc_now):
        self.repository = repository
        self.clock = clock

    async def save(self, user: Any) -> bool:
        """Validate and upsert a profile; returns True when the user is new."""
        profile = validate_user_payload(user)
        inserted = await self.repository.upsert_profile(
            profile.key, profile.to_document(), now=self.clock()
        )
        logger.info("user.saved", key=profile.key, inserted=inserted)
        return inserted
