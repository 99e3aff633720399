from typing import Any, Sequence

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.user import User
from app.repositories.users import UserRepository

logger = structlog.get_logger(__name__)


class UserService:
    def __init__(self, db: AsyncSession, users: UserRepository | None = None):
        self.users = users or UserRepository(db)

    async def list_users(self) -> Sequence[User]:
        return await self.users.get_all()

    async def get_user(self, user_id: int) -> User | None:
        return await self.users.get_by_id(user_id)

    async def create_user(self, name: str, email: str) -> User:
        user = await self.users.create(name=name, email=email)
        logger.info("user_created", user_id=user.id)
        return user

    async def update_user(self, user_id: int, changes: dict[str, Any]) -> User | None:
        user = await self.users.update(user_id, changes)
        if user is not None:
            logger.info("user_updated", user_id=user_id)
        return user

    async def delete_user(self, user_id: int) -> None:
        # Posts are left untouched; the visibility policy hides them instead
        await self.users.soft_delete(user_id)
        logger.info("user_soft_deleted", user_id=user_id)
