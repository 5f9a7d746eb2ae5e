from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from skillgap.data.resources import LearningResource
from skillgap.schemas.base import CamelModel


Priority = Literal["high", "medium", "low"]


class GapEntry(CamelModel):
    skill: str
    current_level: int = Field(ge=0, le=5)
    required_level: int = Field(ge=1, le=5)
    gap: int = Field(ge=0)
    priority: Priority
    resources: list[LearningResource] = Field(default_factory=list)


class AnalysisReport(CamelModel):
    job_title: str
    total_skills_required: int
    skills_with_gaps: int
    critical_gaps: int
    total_gap_score: int
    readiness_percentage: int = Field(ge=0, le=100)
    readiness_level: str
    gaps: list[GapEntry] = Field(default_factory=list)
    recommendations: list[str] = Field(default_factory=list)


class GapAnalysisResponse(BaseModel):
    success: bool = True
    analysis: AnalysisReport


class GapHistoryResponse(BaseModel):
    success: bool = True
    message: str
    history: list[AnalysisReport] = Field(default_factory=list)
    note: str | None = None


class RequiredSkillRead(CamelModel):
    name: str
    level: int


class JobProfileRead(CamelModel):
    title: str
    total_skills_required: int
    required_skills: list[RequiredSkillRead] = Field(default_factory=list)


class JobProfileListResponse(CamelModel):
    success: bool = True
    default_job_title: str
    jobs: list[JobProfileRead] = Field(default_factory=list)
