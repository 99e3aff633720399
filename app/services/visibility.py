from typing import Sequence

from app.exceptions import NotFoundError
from app.models.post import Post
from app.models.user import User
from app.repositories.posts import PostRepository
from app.repositories.users import UserRepository


class PostVisibilityPolicy:
    """
    Decides what the user -> posts relation exposes.

    Only the owner's deletion state matters here. A soft-deleted owner hides
    all of its posts; a post's own ``deleted_at`` never hides it.
    """

    def __init__(self, users: UserRepository, posts: PostRepository):
        self.users = users
        self.posts = posts

    async def _require_owner(self, user_id: int) -> User:
        owner = await self.users.get_by_id(user_id)
        if owner is None:
            raise NotFoundError(f"User {user_id} not found")
        return owner

    async def list_visible_posts(self, user_id: int) -> Sequence[Post]:
        owner = await self._require_owner(user_id)
        if owner.deleted_at is not None:
            return []
        return await self.posts.list_by_owner(user_id)

    async def get_visible_post(self, user_id: int, post_id: int) -> Post | None:
        owner = await self._require_owner(user_id)
        if owner.deleted_at is not None:
            return None

        post = await self.posts.get_by_id(post_id)
        if post is None or post.user_id != user_id:
            return None
        return post
