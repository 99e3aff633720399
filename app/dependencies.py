from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession
from app.database import get_db as db_session
from app.services.posts import PostService
from app.services.users import UserService


def get_db(db: AsyncSession = Depends(db_session)):
    return db


def get_user_service(db: AsyncSession = Depends(get_db)) -> UserService:
    return UserService(db)


def get_post_service(db: AsyncSession = Depends(get_db)) -> PostService:
    return PostService(db)
