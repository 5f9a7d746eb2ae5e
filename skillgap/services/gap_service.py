# gap_service.py
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Iterable, Mapping

from skillgap.data.jobs import JobProfile, is_known_job_title, lookup_job_profile
from skillgap.data.resources import resources_for
from skillgap.schemas.gap import AnalysisReport, GapEntry, Priority
from skillgap.utils.normalize import normalize_name


logger = logging.getLogger(__name__)

CRITICAL_GAP = 2

# Inclusive lower bounds, checked from the top.
READINESS_LEVELS: tuple[tuple[int, str], ...] = (
    (80, "Ready"),
    (60, "Almost Ready"),
    (40, "Getting There"),
    (20, "Needs Work"),
)
BEGINNER_LEVEL = "Beginner"


class MissingTargetJobError(ValueError):
    """Raised when an analysis is requested for a user without a target job."""


@dataclass(frozen=True)
class GapScore:
    gaps: list[GapEntry] = field(default_factory=list)
    total_gap_score: int = 0
    critical_gaps: int = 0
    readiness_percentage: int = 0


def build_user_skill_map(skills: Iterable[Any]) -> dict[str, int]:
    """Map normalized skill name -> level from ORM rows, schemas or plain dicts."""
    result: dict[str, int] = {}
    for skill in skills:
        if isinstance(skill, Mapping):
            name, level = skill.get("name"), skill.get("level")
        else:
            name, level = getattr(skill, "name", None), getattr(skill, "level", None)
        key = normalize_name(name)
        if not key:
            continue
        result[key] = int(level or 0)
    return result


def classify_priority(gap: int) -> Priority:
    # Only called for gap > 0, so "low" never comes out of an analysis.
    if gap >= CRITICAL_GAP:
        return "high"
    if gap == 1:
        return "medium"
    return "low"


def _round_percentage(numerator: int, denominator: int) -> int:
    if denominator <= 0:
        return 100
    value = Decimal(100 * numerator) / Decimal(denominator)
    return int(value.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def score_gaps(user_skills: Mapping[str, int], profile: JobProfile) -> GapScore:
    gaps: list[GapEntry] = []
    total_gap_score = 0
    critical_gaps = 0
    earned_points = 0
    required_points = 0

    for required in profile.required_skills:
        user_level = int(user_skills.get(normalize_name(required.name), 0) or 0)
        gap = max(0, required.level - user_level)
        earned_points += min(user_level, required.level)
        required_points += required.level

        if gap > 0:
            if gap >= CRITICAL_GAP:
                critical_gaps += 1
            total_gap_score += gap
            gaps.append(
                GapEntry(
                    skill=required.name,
                    current_level=user_level,
                    required_level=required.level,
                    gap=gap,
                    priority=classify_priority(gap),
                    resources=resources_for(required.name),
                )
            )

    return GapScore(
        gaps=gaps,
        total_gap_score=total_gap_score,
        critical_gaps=critical_gaps,
        readiness_percentage=_round_percentage(earned_points, required_points),
    )


def readiness_level(percentage: int) -> str:
    for threshold, label in READINESS_LEVELS:
        if percentage >= threshold:
            return label
    return BEGINNER_LEVEL


def build_recommendations(gaps: list[GapEntry], readiness_percentage: int) -> list[str]:
    if not gaps:
        return [
            "Excellent! You have all required skills.",
            "Consider adding advanced skills to stand out.",
        ]

    recommendations: list[str] = []
    high = sum(1 for gap in gaps if gap.priority == "high")
    medium = sum(1 for gap in gaps if gap.priority == "medium")
    if high:
        recommendations.append(f"Focus on {high} high-priority skills first.")
    if medium:
        recommendations.append(f"Work on {medium} medium-priority skills.")

    if readiness_percentage < 50:
        recommendations.append("Consider taking online courses for foundational skills.")
    elif readiness_percentage < 75:
        recommendations.append("Build projects to practice your skills.")
    else:
        recommendations.append("Prepare for interviews and update your portfolio.")
    return recommendations


def assemble_report(job_title: str, profile: JobProfile, score: GapScore) -> AnalysisReport:
    return AnalysisReport(
        job_title=job_title,
        total_skills_required=len(profile.required_skills),
        skills_with_gaps=len(score.gaps),
        critical_gaps=score.critical_gaps,
        total_gap_score=score.total_gap_score,
        readiness_percentage=score.readiness_percentage,
        readiness_level=readiness_level(score.readiness_percentage),
        gaps=list(score.gaps),
        recommendations=build_recommendations(score.gaps, score.readiness_percentage),
    )


def analyze(skills: Iterable[Any], target_job_title: str | None) -> AnalysisReport:
    """Compare a user's skills with the requirements of their target job."""
    if not (target_job_title or "").strip():
        raise MissingTargetJobError("Please set a target job first")

    profile = lookup_job_profile(target_job_title)
    if not is_known_job_title(target_job_title):
        logger.info("gap.analyze unknown job title=%r, using profile=%r", target_job_title, profile.title)

    score = score_gaps(build_user_skill_map(skills), profile)
    return assemble_report(target_job_title, profile, score)
