from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from sqlalchemy.sql import func
from jobly.db.base import Base


class Application(Base):
    """
    One row per (username, job_id) pair.

    The composite primary key is what makes a repeated apply a no-op.
    """
    __tablename__ = "applications"

    username = Column(
        String(25),
        ForeignKey("users.username", ondelete="CASCADE"),
        primary_key=True,
    )
    job_id = Column(
        Integer,
        ForeignKey("jobs.id", ondelete="CASCADE"),
        primary_key=True,
    )
    applied_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
