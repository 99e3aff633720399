"""The development seed script goes through the services end to end."""

from __future__ import annotations

from app.database import Database
from app.repositories.posts import PostRepository
from app.repositories.users import UserRepository
from app.scripts import inspect_db
from app.scripts.seed_data import seed
from app.services.visibility import PostVisibilityPolicy


async def test_seed_creates_rows_and_deletes_last_user(database: Database) -> None:
    users, posts = await seed(database, user_count=3, posts_per_user=2, faker_seed=1234)

    assert len(users) == 3
    assert len(posts) == 6

    async with database.session_factory() as db:
        user_repo = UserRepository(db)
        post_repo = PostRepository(db)
        stored_users = await user_repo.get_all()
        assert len(stored_users) == 3
        assert len(await post_repo.get_all()) == 6
        assert stored_users[-1].deleted_at is not None

        policy = PostVisibilityPolicy(user_repo, post_repo)
        assert await policy.list_visible_posts(stored_users[-1].id) == []
        assert len(await policy.list_visible_posts(stored_users[0].id)) == 2


async def test_inspect_db_prints_deleted_rows(database: Database, database_url: str, monkeypatch, capsys) -> None:
    await seed(database, user_count=2, posts_per_user=1, faker_seed=99)
    monkeypatch.setattr(inspect_db.settings, "database_url", database_url)

    await inspect_db.inspect_rows()

    out = capsys.readouterr().out
    assert "Found 2 users:" in out
    assert "Found 2 posts:" in out
    assert "deleted" in out
