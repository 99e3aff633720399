from datetime import datetime
from pydantic import BaseModel, Field, field_validator
from app.utils.sanitization import sanitize_string
from app.schemas.user import UserResponse


class PostBase(BaseModel):
    title: str = Field(..., min_length=1, max_length=200)
    content: str = ""

    @field_validator("title", "content", mode="before")
    @classmethod
    def sanitize(cls, v):
        return sanitize_string(v)


class PostCreate(PostBase):
    user_id: int


class PostUpdate(BaseModel):
    # No user_id: the owner is fixed at creation
    title: str | None = Field(None, min_length=1, max_length=200)
    content: str | None = None

    @field_validator("title", "content", mode="before")
    @classmethod
    def sanitize(cls, v):
        return sanitize_string(v)


class PostResponse(PostBase):
    id: int
    user_id: int
    created_at: datetime | None = None
    deleted_at: datetime | None = None
    user: UserResponse | None = None

    class Config:
        from_attributes = True
