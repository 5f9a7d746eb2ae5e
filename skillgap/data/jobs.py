from types import MappingProxyType
from typing import Mapping
from pydantic import BaseModel, ConfigDict, Field

from skillgap.utils.normalize import normalize_name


class RequiredSkill(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    level: int = Field(ge=1, le=5)


class JobProfile(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    required_skills: tuple[RequiredSkill, ...]


DEFAULT_JOB_TITLE = "full stack developer"


def _profile(title: str, *skills: tuple[str, int]) -> JobProfile:
    return JobProfile(
        title=title,
        required_skills=tuple(RequiredSkill(name=name, level=level) for name, level in skills),
    )


_JOB_PROFILES: Mapping[str, JobProfile] = MappingProxyType(
    {
        profile.title: profile
        for profile in (
            _profile(
                "frontend developer",
                ("HTML", 4),
                ("CSS", 4),
                ("JavaScript", 4),
                ("React", 3),
                ("Git", 3),
                ("Problem Solving", 4),
                ("Communication", 3),
            ),
            _profile(
                "backend developer",
                ("Node.js", 4),
                ("Express", 4),
                ("MongoDB", 3),
                ("REST API", 4),
                ("Git", 3),
                ("Problem Solving", 4),
                ("Database Design", 3),
            ),
            _profile(
                "full stack developer",
                ("HTML", 4),
                ("CSS", 4),
                ("JavaScript", 4),
                ("React", 3),
                ("Node.js", 4),
                ("Express", 4),
                ("MongoDB", 3),
                ("Git", 4),
                ("Problem Solving", 4),
            ),
            _profile(
                "data analyst",
                ("Python", 4),
                ("SQL", 4),
                ("Excel", 4),
                ("Data Visualization", 3),
                ("Statistics", 3),
                ("Critical Thinking", 4),
            ),
        )
    }
)


def lookup_job_profile(job_title: str | None) -> JobProfile:
    """Resolve a job title to its requirements.

    Unknown or empty titles resolve to the full stack developer profile rather than
    failing, so every user with a target job gets an analysis.
    """
    return _JOB_PROFILES.get(normalize_name(job_title)) or _JOB_PROFILES[DEFAULT_JOB_TITLE]


def is_known_job_title(job_title: str | None) -> bool:
    return normalize_name(job_title) in _JOB_PROFILES


def list_job_profiles() -> list[JobProfile]:
    return list(_JOB_PROFILES.values())
