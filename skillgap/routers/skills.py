# skills.py
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from skillgap.database import get_db
from skillgap.models.user import User
from skillgap.routers.dependencies import get_current_user
from skillgap.schemas.skills import SkillListResponse, SkillMutationResponse, SkillUpsertRequest
from skillgap.schemas.target_job import TargetJobRequest, TargetJobResponse
from skillgap.services.skills_service import get_target_job, list_skills, remove_skill, set_target_job, upsert_skill


router = APIRouter(prefix="/skills", tags=["skills"])


@router.get("", response_model=SkillListResponse)
def read_skills(db: Session = Depends(get_db), current_user: User = Depends(get_current_user)) -> SkillListResponse:
    return SkillListResponse(skills=list_skills(db, current_user.id))


@router.post("", response_model=SkillMutationResponse)
def add_or_update_skill(
    payload: SkillUpsertRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> SkillMutationResponse:
    updated, skills = upsert_skill(db, current_user, payload)
    return SkillMutationResponse(message="Skill updated" if updated else "Skill added", skills=skills)


@router.get("/target-job", response_model=TargetJobResponse)
def read_target_job(db: Session = Depends(get_db), current_user: User = Depends(get_current_user)) -> TargetJobResponse:
    return TargetJobResponse(target_job=get_target_job(db, current_user.id))


@router.post("/target-job", response_model=TargetJobResponse)
def update_target_job(
    payload: TargetJobRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> TargetJobResponse:
    target_job = set_target_job(db, current_user, payload)
    return TargetJobResponse(message="Target job set successfully", target_job=target_job)


@router.delete("/{skill_name:path}", response_model=SkillMutationResponse)
def delete_skill(
    skill_name: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> SkillMutationResponse:
    skills = remove_skill(db, current_user, skill_name)
    if skills is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Skill not found")
    return SkillMutationResponse(message="Skill removed", skills=skills)
