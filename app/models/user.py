from datetime import datetime, timezone
from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.orm import relationship
from app.database import Base


def utcnow():
    return datetime.now(timezone.utc)


class User(Base):
    __tablename__ = "users"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False)
    # Unique across every row, soft-deleted ones included
    email = Column(String(255), unique=True, index=True, nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    deleted_at = Column(DateTime(timezone=True), nullable=True)

    # Back-reference only; the user row never stores post ids
    posts = relationship("Post", back_populates="user", viewonly=True)

    def __repr__(self):
        return f"<User id={self.id} email={self.email!r} deleted_at={self.deleted_at}>"


# Register Post so the string relationship above resolves whichever model is imported first
import app.models.post  # noqa: E402,F401
