from __future__ import annotations

import itertools
import logging

import pytest

from skillgap.data.jobs import JobProfile, RequiredSkill, list_job_profiles, lookup_job_profile
from skillgap.services.gap_service import (
    MissingTargetJobError,
    analyze,
    assemble_report,
    build_recommendations,
    build_user_skill_map,
    classify_priority,
    readiness_level,
    score_gaps,
)


def test_frontend_example_from_partial_skills() -> None:
    profile = lookup_job_profile("frontend developer")
    score = score_gaps({"javascript": 3, "react": 2}, profile)

    assert [(g.skill, g.gap) for g in score.gaps] == [
        ("HTML", 4),
        ("CSS", 4),
        ("JavaScript", 1),
        ("React", 1),
        ("Git", 3),
        ("Problem Solving", 4),
        ("Communication", 3),
    ]
    assert score.total_gap_score == 20
    assert score.critical_gaps == 5
    assert score.readiness_percentage == 20

    report = assemble_report("Frontend Developer", profile, score)
    assert report.job_title == "Frontend Developer"
    assert report.total_skills_required == 7
    assert report.skills_with_gaps == 7
    assert report.readiness_level == "Needs Work"
    assert report.recommendations == [
        "Focus on 5 high-priority skills first.",
        "Work on 2 medium-priority skills.",
        "Consider taking online courses for foundational skills.",
    ]


def test_gap_entry_details() -> None:
    score = score_gaps({"javascript": 3}, lookup_job_profile("frontend developer"))
    js = next(g for g in score.gaps if g.skill == "JavaScript")
    assert js.current_level == 3
    assert js.required_level == 4
    assert js.priority == "medium"
    assert [r.title for r in js.resources] == ["JavaScript.info", "MDN JavaScript"]

    html = score.gaps[0]
    assert html.current_level == 0
    assert html.priority == "high"

    communication = score.gaps[-1]
    assert communication.skill == "Communication"
    assert [r.type for r in communication.resources] == ["search"]


def test_user_skill_names_match_case_insensitively() -> None:
    skills = build_user_skill_map([{"name": " JavaScript ", "level": 4}])
    assert skills == {"javascript": 4}
    score = score_gaps(skills, lookup_job_profile("frontend developer"))
    assert "JavaScript" not in {g.skill for g in score.gaps}


def test_build_user_skill_map_accepts_objects_and_skips_blank_names() -> None:
    class Row:
        def __init__(self, name, level):
            self.name = name
            self.level = level

    result = build_user_skill_map([Row("SQL", 2), {"name": "", "level": 5}, Row(None, 3), Row("sql", 4)])
    assert result == {"sql": 4}


def test_no_skills_gives_zero_readiness_and_maximal_gaps() -> None:
    profile = lookup_job_profile("data analyst")
    score = score_gaps({}, profile)
    assert score.readiness_percentage == 0
    assert len(score.gaps) == len(profile.required_skills)
    assert score.total_gap_score == sum(s.level for s in profile.required_skills)
    assert score.critical_gaps == len(profile.required_skills)

    report = assemble_report("data analyst", profile, score)
    assert report.readiness_level == "Beginner"


def test_meeting_every_requirement_is_fully_ready() -> None:
    profile = lookup_job_profile("backend developer")
    # Levels above the requirement earn no extra credit.
    skills = {s.name.lower(): 5 for s in profile.required_skills}
    score = score_gaps(skills, profile)
    assert score.gaps == []
    assert score.total_gap_score == 0
    assert score.critical_gaps == 0
    assert score.readiness_percentage == 100

    report = assemble_report("backend developer", profile, score)
    assert report.readiness_level == "Ready"
    assert report.recommendations == [
        "Excellent! You have all required skills.",
        "Consider adding advanced skills to stand out.",
    ]


def test_exceeding_one_skill_does_not_compensate_for_another() -> None:
    profile = JobProfile(
        title="pair",
        required_skills=(RequiredSkill(name="A", level=2), RequiredSkill(name="B", level=2)),
    )
    score = score_gaps({"a": 5, "b": 0}, profile)
    assert score.readiness_percentage == 50
    assert score.total_gap_score == 2


def test_readiness_rounds_half_up() -> None:
    profile = JobProfile(
        title="eight",
        required_skills=(RequiredSkill(name="A", level=4), RequiredSkill(name="B", level=4)),
    )
    # 1 / 8 = 12.5 %
    assert score_gaps({"a": 1}, profile).readiness_percentage == 13
    # 3 / 8 = 37.5 %
    assert score_gaps({"a": 3}, profile).readiness_percentage == 38


def test_empty_requirements_are_fully_ready() -> None:
    score = score_gaps({"a": 1}, JobProfile(title="none", required_skills=()))
    assert score.readiness_percentage == 100
    assert score.gaps == []


@pytest.mark.parametrize("profile", list_job_profiles(), ids=lambda p: p.title)
def test_invariants_hold_over_level_grid(profile: JobProfile) -> None:
    names = [s.name.lower() for s in profile.required_skills]
    # Same level for every skill, plus a staggered assignment.
    assignments = [{n: level for n in names} for level in range(0, 6)]
    assignments.append({n: level for n, level in zip(names, itertools.cycle(range(0, 6)))})

    for user_skills in assignments:
        score = score_gaps(user_skills, profile)
        assert score.total_gap_score == sum(g.gap for g in score.gaps)
        assert all(g.gap >= 1 for g in score.gaps)
        assert score.critical_gaps == sum(1 for g in score.gaps if g.gap >= 2)
        assert 0 <= score.readiness_percentage <= 100
        all_met = all(user_skills.get(s.name.lower(), 0) >= s.level for s in profile.required_skills)
        assert (score.readiness_percentage == 100) == all_met
        assert [g.skill for g in score.gaps] == [
            s.name for s in profile.required_skills if user_skills.get(s.name.lower(), 0) < s.level
        ]


@pytest.mark.parametrize(
    ("percentage", "label"),
    [
        (100, "Ready"),
        (80, "Ready"),
        (79, "Almost Ready"),
        (60, "Almost Ready"),
        (59, "Getting There"),
        (40, "Getting There"),
        (39, "Needs Work"),
        (20, "Needs Work"),
        (19, "Beginner"),
        (0, "Beginner"),
    ],
)
def test_readiness_level_buckets(percentage: int, label: str) -> None:
    assert readiness_level(percentage) == label


def test_priority_classification() -> None:
    assert classify_priority(4) == "high"
    assert classify_priority(2) == "high"
    assert classify_priority(1) == "medium"
    # Never produced by an analysis, since only positive gaps are classified.
    assert classify_priority(0) == "low"


@pytest.mark.parametrize(
    ("percentage", "closing"),
    [
        (49, "Consider taking online courses for foundational skills."),
        (50, "Build projects to practice your skills."),
        (74, "Build projects to practice your skills."),
        (75, "Prepare for interviews and update your portfolio."),
    ],
)
def test_recommendation_bands(percentage: int, closing: str) -> None:
    gaps = score_gaps({"html": 3}, lookup_job_profile("frontend developer")).gaps[:1]
    assert gaps[0].priority == "medium"
    assert build_recommendations(gaps, percentage) == ["Work on 1 medium-priority skills.", closing]


def test_recommendations_only_high_priority() -> None:
    gaps = score_gaps({}, lookup_job_profile("data analyst")).gaps
    recommendations = build_recommendations(gaps, 0)
    assert recommendations == [
        "Focus on 6 high-priority skills first.",
        "Consider taking online courses for foundational skills.",
    ]


def test_analyze_requires_target_job() -> None:
    with pytest.raises(MissingTargetJobError):
        analyze([{"name": "Python", "level": 3}], None)
    with pytest.raises(MissingTargetJobError):
        analyze([], "   ")


def test_analyze_unknown_job_uses_full_stack_requirements() -> None:
    report = analyze([{"name": "Git", "level": 4}], "Astronaut")
    assert report.job_title == "Astronaut"
    assert report.total_skills_required == 9
    assert "Git" not in {g.skill for g in report.gaps}
    assert report.skills_with_gaps == 8


def test_report_serializes_with_camel_case_keys() -> None:
    report = analyze([{"name": "javascript", "level": 3}, {"name": "react", "level": 2}], "frontend developer")
    payload = report.model_dump(by_alias=True)
    assert set(payload) == {
        "jobTitle",
        "totalSkillsRequired",
        "skillsWithGaps",
        "criticalGaps",
        "totalGapScore",
        "readinessPercentage",
        "readinessLevel",
        "gaps",
        "recommendations",
    }
    assert set(payload["gaps"][0]) == {"skill", "currentLevel", "requiredLevel", "gap", "priority", "resources"}
    assert set(payload["gaps"][0]["resources"][0]) == {"title", "url", "type"}


def test_analyze_logs_only_unknown_job_titles(caplog) -> None:
    with caplog.at_level(logging.INFO, logger="skillgap.services.gap_service"):
        analyze([], "Data Analyst")
    assert not [r for r in caplog.records if "unknown job title" in r.getMessage()]

    with caplog.at_level(logging.INFO, logger="skillgap.services.gap_service"):
        analyze([], "Astronaut")
    assert any("unknown job title='Astronaut'" in r.getMessage() for r in caplog.records)
