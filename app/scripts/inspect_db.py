import asyncio

from app.config import settings
from app.database import Database
from app.repositories.posts import PostRepository
from app.repositories.users import UserRepository


async def inspect_rows():
    database = Database(settings.database_url)
    try:
        async with database.session_factory() as db:
            users = await UserRepository(db).get_all()
            posts = await PostRepository(db).get_all()

            print(f"Found {len(users)} users:")
            for u in users:
                state = f"deleted {u.deleted_at}" if u.deleted_at else "active"
                print(f"  ID: {u.id}, Email: '{u.email}', Name: '{u.name}' ({state})")

            print(f"Found {len(posts)} posts:")
            for p in posts:
                state = f"deleted {p.deleted_at}" if p.deleted_at else "active"
                print(f"  ID: {p.id}, Owner: {p.user_id}, Title: '{p.title}' ({state})")

            if not users:
                print("No users found! Run `python -m app.scripts.seed_data` first.")
    finally:
        await database.dispose()


if __name__ == "__main__":
    asyncio.run(inspect_rows())
