# skills.py
from typing import Literal

from pydantic import BaseModel, Field, field_validator

from skillgap.schemas.base import CamelModel


SkillCategory = Literal["technical", "soft", "tool", "domain"]


class SkillRead(CamelModel):
    name: str
    level: int = Field(ge=1, le=5)
    category: SkillCategory


class SkillUpsertRequest(CamelModel):
    name: str
    # Omitted fields keep their stored value on update (or the defaults on add).
    level: int | None = Field(default=None, ge=1, le=5)
    category: SkillCategory | None = None

    @field_validator("name")
    @classmethod
    def _require_name(cls, v: str) -> str:
        value = (v or "").strip()
        if not value:
            raise ValueError("Skill name is required")
        return value


class SkillListResponse(BaseModel):
    success: bool = True
    skills: list[SkillRead] = Field(default_factory=list)


class SkillMutationResponse(BaseModel):
    success: bool = True
    message: str
    skills: list[SkillRead] = Field(default_factory=list)
