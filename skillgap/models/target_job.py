from __future__ import annotations

from sqlalchemy import JSON, Column, DateTime, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from skillgap.database import Base


class UserTargetJob(Base):
    __tablename__ = "user_target_jobs"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)

    title = Column(String(255), nullable=False)
    industry = Column(String(255), nullable=False, default="")
    # Stored and echoed back only; analysis uses the built-in job catalog.
    required_skills = Column(JSON, nullable=False, default=list)

    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    user = relationship("User", back_populates="target_job")

    __table_args__ = (
        UniqueConstraint("user_id", name="uq_user_target_jobs_user_id"),
    )
