"""
Sample data for local development.

Creates users and posts through the services (so email uniqueness and the
owner check apply) and soft-deletes the last user, whose posts then
disappear from /posts/user/{id}/posts while staying in /posts/.

    python -m app.scripts.seed_data
"""
import asyncio

from faker import Faker

from app.config import settings
from app.database import Database
from app.services.posts import PostService
from app.services.users import UserService


async def seed(database: Database, user_count: int = 5, posts_per_user: int = 3, faker_seed: int | None = None):
    fake = Faker()
    if faker_seed is not None:
        Faker.seed(faker_seed)

    await database.create_all()

    async with database.session_factory() as db:
        users = UserService(db)
        posts = PostService(db)

        created_users = []
        for _ in range(user_count):
            # unique proxy avoids colliding with emails we already generated
            user = await users.create_user(name=fake.name(), email=fake.unique.email())
            created_users.append(user)

        created_posts = []
        for user in created_users:
            for _ in range(posts_per_user):
                post = await posts.create_post(
                    title=fake.sentence(nb_words=6).rstrip("."),
                    content=fake.paragraph(nb_sentences=4),
                    user_id=user.id,
                )
                created_posts.append(post)

        if created_users:
            await users.delete_user(created_users[-1].id)

        await db.commit()

    return created_users, created_posts


async def main():
    database = Database(settings.database_url)
    try:
        users, posts = await seed(database)
        print(f"Seeded {len(users)} users and {len(posts)} posts into {settings.database_url}")
        print(f"User {users[-1].id} was soft-deleted; its posts are hidden from the relation endpoint.")
    finally:
        await database.dispose()


if __name__ == "__main__":
    asyncio.run(main())
