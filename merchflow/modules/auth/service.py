"""Profile lookups backing the role guard and admin statistics."""

import uuid

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from merchflow.models.enums import UserRole
from merchflow.models.profile import Profile


class ProfileService:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_profile(self, profile_id: uuid.UUID) -> Profile | None:
        """Return the profile for an identity, or None if it was never provisioned."""
        result = await self.db.execute(select(Profile).where(Profile.id == profile_id))
        return result.scalar_one_or_none()

    async def count_by_role(self, role: UserRole) -> int:
        result = await self.db.execute(
            select(func.count()).select_from(Profile).where(Profile.role == role)
        )
        return result.scalar() or 0
