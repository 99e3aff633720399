import structlog

from app.exceptions import NotFoundError
from app.models.user import User
from app.repositories.users import UserRepository

logger = structlog.get_logger(__name__)


class OwnerIntegrityChecker:
    """Guards post creation: the owning user must exist (deleted or not)."""

    def __init__(self, users: UserRepository):
        self.users = users

    async def verify_owner(self, owner_id: int) -> User:
        owner = await self.users.get_by_id(owner_id)
        if owner is None:
            logger.warning("owner_missing", user_id=owner_id)
            raise NotFoundError(f"User {owner_id} not found")
        return owner
