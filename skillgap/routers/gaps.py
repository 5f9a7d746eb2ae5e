# gaps.py
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from skillgap.data.jobs import DEFAULT_JOB_TITLE, list_job_profiles
from skillgap.database import get_db
from skillgap.models.user import User
from skillgap.routers.dependencies import get_current_user
from skillgap.schemas.gap import (
    GapAnalysisResponse,
    GapHistoryResponse,
    JobProfileListResponse,
    JobProfileRead,
    RequiredSkillRead,
)
from skillgap.services.gap_service import MissingTargetJobError, analyze
from skillgap.services.skills_service import get_target_job, list_skills


router = APIRouter(prefix="/gaps", tags=["gaps"])


@router.get("/jobs", response_model=JobProfileListResponse)
def read_job_profiles() -> JobProfileListResponse:
    jobs = [
        JobProfileRead(
            title=profile.title,
            total_skills_required=len(profile.required_skills),
            required_skills=[RequiredSkillRead(name=s.name, level=s.level) for s in profile.required_skills],
        )
        for profile in list_job_profiles()
    ]
    return JobProfileListResponse(default_job_title=DEFAULT_JOB_TITLE, jobs=jobs)


@router.get("/analyze", response_model=GapAnalysisResponse)
def analyze_gaps(db: Session = Depends(get_db), current_user: User = Depends(get_current_user)) -> GapAnalysisResponse:
    target_job = get_target_job(db, current_user.id)
    try:
        report = analyze(list_skills(db, current_user.id), target_job.title if target_job else None)
    except MissingTargetJobError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return GapAnalysisResponse(analysis=report)


@router.get("/history", response_model=GapHistoryResponse)
def read_gap_history(current_user: User = Depends(get_current_user)) -> GapHistoryResponse:
    # Reports are recomputed on every request and never stored.
    return GapHistoryResponse(
        message="Gap analysis history endpoint",
        note="Analyses are not stored; call /gaps/analyze for the current report.",
    )
