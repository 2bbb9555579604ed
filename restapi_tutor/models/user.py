"""User model: one registered identity."""
from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship

from restapi_tutor.db.session import Base

USERNAME_MAX_LENGTH = 64
EMAIL_MAX_LENGTH = 255


class User(Base):
    __tablename__ = "users"
    # ids are never reused, so a deleted user's token cannot match a new account
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(USERNAME_MAX_LENGTH), unique=True, nullable=False, index=True)  # case-sensitive
    email = Column(String(EMAIL_MAX_LENGTH), unique=True, nullable=False, index=True)  # stored lower-cased
    hashed_password = Column(String(255), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    progress = relationship("Progress", back_populates="user", uselist=False, passive_deletes=True)
