"""Service orchestration with the repositories mocked out."""

from __future__ import annotations

from types import SimpleNamespace
from unittest.mock import AsyncMock

import pytest

from app.exceptions import ConflictError, NotFoundError
from app.repositories.posts import PostRepository
from app.repositories.users import UserRepository
from app.services.posts import PostService
from app.services.users import UserService


@pytest.fixture
def user_repo() -> AsyncMock:
    return AsyncMock(spec=UserRepository)


@pytest.fixture
def post_repo() -> AsyncMock:
    return AsyncMock(spec=PostRepository)


class TestUserService:
    async def test_list_users_delegates(self, user_repo: AsyncMock) -> None:
        rows = [SimpleNamespace(id=1, name="John", email="john@example.com")]
        user_repo.get_all.return_value = rows

        service = UserService(None, users=user_repo)

        assert await service.list_users() == rows
        user_repo.get_all.assert_awaited_once()

    async def test_get_user_missing(self, user_repo: AsyncMock) -> None:
        user_repo.get_by_id.return_value = None

        assert await UserService(None, users=user_repo).get_user(99) is None
        user_repo.get_by_id.assert_awaited_once_with(99)

    async def test_create_user(self, user_repo: AsyncMock) -> None:
        created = SimpleNamespace(id=1, name="Jane", email="jane@example.com")
        user_repo.create.return_value = created

        user = await UserService(None, users=user_repo).create_user(name="Jane", email="jane@example.com")

        assert user is created
        user_repo.create.assert_awaited_once_with(name="Jane", email="jane@example.com")

    async def test_create_user_propagates_conflict(self, user_repo: AsyncMock) -> None:
        user_repo.create.side_effect = ConflictError("taken")

        with pytest.raises(ConflictError):
            await UserService(None, users=user_repo).create_user(name="Jane", email="jane@example.com")

    async def test_update_user_missing(self, user_repo: AsyncMock) -> None:
        user_repo.update.return_value = None

        assert await UserService(None, users=user_repo).update_user(99, {"name": "Ghost"}) is None
        user_repo.update.assert_awaited_once_with(99, {"name": "Ghost"})

    async def test_delete_user_soft_deletes(self, user_repo: AsyncMock) -> None:
        await UserService(None, users=user_repo).delete_user(1)

        user_repo.soft_delete.assert_awaited_once_with(1)


class TestPostService:
    def _service(self, post_repo: AsyncMock, user_repo: AsyncMock) -> PostService:
        return PostService(None, posts=post_repo, users=user_repo)

    async def test_create_post_attaches_resolved_owner(self, post_repo: AsyncMock, user_repo: AsyncMock) -> None:
        owner = SimpleNamespace(id=1, name="Test User", deleted_at=None)
        created = SimpleNamespace(id=7, title="New Post", content="Body", user_id=1, user=owner)
        user_repo.get_by_id.return_value = owner
        post_repo.create.return_value = created

        post = await self._service(post_repo, user_repo).create_post("New Post", "Body", 1)

        assert post is created
        user_repo.get_by_id.assert_awaited_once_with(1)
        post_repo.create.assert_awaited_once_with(title="New Post", content="Body", user_id=1, user=owner)

    async def test_create_post_missing_owner_creates_nothing(
        self, post_repo: AsyncMock, user_repo: AsyncMock
    ) -> None:
        user_repo.get_by_id.return_value = None

        with pytest.raises(NotFoundError):
            await self._service(post_repo, user_repo).create_post("Orphan", "", 999)

        post_repo.create.assert_not_awaited()

    async def test_update_post_drops_owner_and_id(self, post_repo: AsyncMock, user_repo: AsyncMock) -> None:
        post_repo.update.return_value = SimpleNamespace(id=1, title="C", content="B", user_id=1)

        await self._service(post_repo, user_repo).update_post(1, {"title": "C", "user_id": 9, "id": 3})

        post_repo.update.assert_awaited_once_with(1, {"title": "C"})

    async def test_delete_post_soft_deletes(self, post_repo: AsyncMock, user_repo: AsyncMock) -> None:
        await self._service(post_repo, user_repo).delete_post(1)

        post_repo.soft_delete.assert_awaited_once_with(1)

    async def test_list_posts_of_deleted_user_skips_scan(self, post_repo: AsyncMock, user_repo: AsyncMock) -> None:
        user_repo.get_by_id.return_value = SimpleNamespace(id=1, deleted_at="2024-01-01T00:00:00Z")

        assert await self._service(post_repo, user_repo).list_posts_of_user(1) == []
        post_repo.list_by_owner.assert_not_awaited()

    async def test_list_posts_of_active_user(self, post_repo: AsyncMock, user_repo: AsyncMock) -> None:
        rows = [SimpleNamespace(id=1, user_id=1)]
        user_repo.get_by_id.return_value = SimpleNamespace(id=1, deleted_at=None)
        post_repo.list_by_owner.return_value = rows

        assert await self._service(post_repo, user_repo).list_posts_of_user(1) == rows
        post_repo.list_by_owner.assert_awaited_once_with(1)
