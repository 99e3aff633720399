from datetime import datetime
from pydantic import BaseModel, EmailStr, Field, field_validator
from app.utils.sanitization import sanitize_string


class UserBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr

    @field_validator("name", mode="before")
    @classmethod
    def sanitize(cls, v):
        return sanitize_string(v)


class UserCreate(UserBase):
    pass


class UserUpdate(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=100)
    email: EmailStr | None = None

    @field_validator("name", mode="before")
    @classmethod
    def sanitize(cls, v):
        return sanitize_string(v)


class UserResponse(UserBase):
    id: int
    # Plain str so stored rows are always serialisable
    email: str
    created_at: datetime | None = None
    deleted_at: datetime | None = None

    class Config:
        from_attributes = True
