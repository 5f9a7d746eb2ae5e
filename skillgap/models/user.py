# user.py
from sqlalchemy import Column, DateTime, Integer, String
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from skillgap.database import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(255), unique=True, index=True, nullable=False)
    password = Column(String(255), nullable=False)
    name = Column(String(255), nullable=False)
    role = Column(String(32), nullable=False, default="job_seeker")
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    skills = relationship(
        "UserSkill",
        back_populates="user",
        cascade="all, delete-orphan",
        order_by="UserSkill.id",
    )
    target_job = relationship("UserTargetJob", back_populates="user", uselist=False, cascade="all, delete-orphan")
