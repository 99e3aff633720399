from typing import Any

from sqlalchemy.future import select

from app.exceptions import ConflictError
from app.models.user import User
from app.repositories.base import EntityStore


class UserRepository(EntityStore[User]):
    model = User

    async def get_by_email(self, email: str) -> User | None:
        # Soft-deleted users still own their email
        result = await self.db.execute(select(User).filter(User.email == email))
        return result.scalars().first()

    async def create(self, **fields: Any) -> User:
        await self._ensure_email_free(fields.get("email"))
        return await super().create(**fields)

    async def update(self, entity_id: int, partial: dict[str, Any]) -> User | None:
        user = await self.get_by_id(entity_id)
        if user is None:
            return None
        email = partial.get("email")
        if email is not None and email != user.email:
            await self._ensure_email_free(email, exclude_id=entity_id)
        return await self._merge(user, partial)

    async def _ensure_email_free(self, email: str | None, exclude_id: int | None = None):
        if email is None:
            return
        holder = await self.get_by_email(email)
        if holder is not None and holder.id != exclude_id:
            raise ConflictError(f"Email '{email}' is already registered")
