"""Progress model: exactly one per user. Current level, completed levels, points."""
from sqlalchemy import JSON, BigInteger, CheckConstraint, Column, DateTime, ForeignKey, Integer
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship

from restapi_tutor.db.session import Base

DEFAULT_LEVEL = 1
DEFAULT_POINTS = 0
# largest value a BIGINT column holds (SQLite INTEGER, PostgreSQL BIGINT)
MAX_STORED_INT = 2**63 - 1


class Progress(Base):
    __tablename__ = "progress"
    __table_args__ = (
        CheckConstraint("current_level >= 1", name="ck_progress_current_level"),
        CheckConstraint("points >= 0", name="ck_progress_points"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        unique=True,
        nullable=False,
        index=True,
    )

    current_level = Column(BigInteger, nullable=False, default=DEFAULT_LEVEL)
    # JSON array of level ids; unique and sorted on write, read back as a set
    completed_levels = Column(JSON, nullable=False, default=list)
    points = Column(BigInteger, nullable=False, default=DEFAULT_POINTS)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    user = relationship("User", back_populates="progress")
