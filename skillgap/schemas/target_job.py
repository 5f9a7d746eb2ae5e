from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from skillgap.schemas.base import CamelModel


class TargetJobRequest(CamelModel):
    title: str
    industry: str | None = None
    required_skills: list[str] | None = None

    @field_validator("title")
    @classmethod
    def _require_title(cls, v: str) -> str:
        value = (v or "").strip()
        if not value:
            raise ValueError("Job title is required")
        return value


class TargetJobRead(CamelModel):
    title: str
    industry: str = ""
    required_skills: list[str] = Field(default_factory=list)


class TargetJobResponse(CamelModel):
    success: bool = True
    message: str | None = None
    target_job: TargetJobRead | None = None
