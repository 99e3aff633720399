from typing import Sequence

from sqlalchemy.future import select
from sqlalchemy.orm import joinedload

from app.models.post import Post
from app.repositories.base import EntityStore


class PostRepository(EntityStore[Post]):
    model = Post
    immutable_fields = EntityStore.immutable_fields | {"user_id"}

    def _select(self):
        # Posts are always served with their owner attached
        return select(Post).options(joinedload(Post.user))

    async def list_by_owner(self, user_id: int) -> Sequence[Post]:
        result = await self.db.execute(
            self._select().filter(Post.user_id == user_id).order_by(Post.id)
        )
        return result.scalars().all()
