"""
Shared pytest fixtures.

Every test gets its own SQLite file under tmp_path, so state never leaks
between tests. Async tests run through pytest-asyncio (auto mode).
"""

from __future__ import annotations

from pathlib import Path
from typing import AsyncGenerator, Iterator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import Settings
from app.database import Database
from app.main import create_app


@pytest.fixture
def database_url(tmp_path: Path) -> str:
    return f"sqlite+aiosqlite:///{tmp_path / 'test.sqlite'}"


@pytest.fixture
async def database(database_url: str) -> AsyncGenerator[Database, None]:
    db = Database(database_url)
    await db.create_all()
    yield db
    await db.dispose()


@pytest.fixture
async def db_session(database: Database) -> AsyncGenerator[AsyncSession, None]:
    async with database.session_factory() as session:
        yield session


@pytest.fixture
def client(database_url: str) -> Iterator[TestClient]:
    app = create_app(Settings(database_url=database_url, log_level="WARNING"))
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def author(client: TestClient) -> dict:
    res = client.post("/users/", json={"name": "Author", "email": "author@example.com"})
    assert res.status_code == 201
    return res.json()
