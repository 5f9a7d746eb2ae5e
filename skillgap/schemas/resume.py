from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from skillgap.schemas.base import CamelModel
from skillgap.schemas.skills import SkillCategory


class ExtractedSkill(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    confidence: int = Field(ge=0, le=100)
    category: SkillCategory
    action: Literal["add"] = "add"


class ResumeUploadResponse(CamelModel):
    success: bool = True
    message: str
    filename: str
    extracted_skills: list[ExtractedSkill] = Field(default_factory=list)
    total_skills: int
    extraction_method: str
    demo: bool = True
