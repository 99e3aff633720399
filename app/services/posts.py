from typing import Any, Sequence

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.post import Post
from app.repositories.posts import PostRepository
from app.repositories.users import UserRepository
from app.services.integrity import OwnerIntegrityChecker
from app.services.visibility import PostVisibilityPolicy

logger = structlog.get_logger(__name__)


class PostService:
    """
    Post operations plus the user -> posts relation queries.

    ``user_id`` is fixed at creation; update payloads cannot move a post to
    another owner.
    """

    def __init__(
        self,
        db: AsyncSession,
        posts: PostRepository | None = None,
        users: UserRepository | None = None,
    ):
        self.posts = posts or PostRepository(db)
        self.users = users or UserRepository(db)
        self.integrity = OwnerIntegrityChecker(self.users)
        self.visibility = PostVisibilityPolicy(self.users, self.posts)

    async def list_posts(self) -> Sequence[Post]:
        return await self.posts.get_all()

    async def get_post(self, post_id: int) -> Post | None:
        return await self.posts.get_by_id(post_id)

    async def create_post(self, title: str, content: str, user_id: int) -> Post:
        owner = await self.integrity.verify_owner(user_id)
        post = await self.posts.create(title=title, content=content, user_id=owner.id, user=owner)
        logger.info("post_created", post_id=post.id, user_id=owner.id)
        return post

    async def update_post(self, post_id: int, changes: dict[str, Any]) -> Post | None:
        changes = {k: v for k, v in changes.items() if k not in ("id", "user_id")}
        post = await self.posts.update(post_id, changes)
        if post is not None:
            logger.info("post_updated", post_id=post_id)
        return post

    async def delete_post(self, post_id: int) -> None:
        await self.posts.soft_delete(post_id)
        logger.info("post_soft_deleted", post_id=post_id)

    async def list_posts_of_user(self, user_id: int) -> Sequence[Post]:
        return await self.visibility.list_visible_posts(user_id)

    async def get_post_of_user(self, user_id: int, post_id: int) -> Post | None:
        return await self.visibility.get_visible_post(user_id, post_id)
