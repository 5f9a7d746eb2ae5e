from __future__ import annotations

from sqlalchemy import Column, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import relationship

from skillgap.database import Base


class UserSkill(Base):
    __tablename__ = "user_skills"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)

    # Display name as last entered; name_key is the lowercased identity.
    name = Column(String(255), nullable=False)
    name_key = Column(String(255), nullable=False)
    level = Column(Integer, nullable=False, default=1)
    category = Column(String(32), nullable=False, default="technical")

    user = relationship("User", back_populates="skills")

    __table_args__ = (
        UniqueConstraint("user_id", "name_key", name="uq_user_skills_user_id_name_key"),
    )
