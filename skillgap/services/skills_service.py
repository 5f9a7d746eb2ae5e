# skills_service.py
import logging

from sqlalchemy.orm import Session

from skillgap.models.target_job import UserTargetJob
from skillgap.models.user import User
from skillgap.models.user_skill import UserSkill
from skillgap.schemas.skills import SkillRead, SkillUpsertRequest
from skillgap.schemas.target_job import TargetJobRead, TargetJobRequest
from skillgap.utils.normalize import normalize_name


logger = logging.getLogger(__name__)

DEFAULT_LEVEL = 1
DEFAULT_CATEGORY = "technical"


def list_skills(db: Session, user_id: int) -> list[SkillRead]:
    rows = db.query(UserSkill).filter(UserSkill.user_id == user_id).order_by(UserSkill.id).all()
    return [SkillRead.model_validate(row) for row in rows]


def _find_skill(db: Session, user_id: int, name: str) -> UserSkill | None:
    return (
        db.query(UserSkill)
        .filter(UserSkill.user_id == user_id)
        .filter(UserSkill.name_key == normalize_name(name))
        .one_or_none()
    )


def upsert_skill(db: Session, user: User, payload: SkillUpsertRequest) -> tuple[bool, list[SkillRead]]:
    """Add a skill, or update the one with the same case-insensitive name.

    Returns ``(updated, skills)`` where ``updated`` is False for a new skill.
    """
    existing = _find_skill(db, user.id, payload.name)
    if existing is not None:
        existing.name = payload.name
        existing.level = payload.level or existing.level
        existing.category = payload.category or existing.category
        updated = True
    else:
        db.add(
            UserSkill(
                user_id=user.id,
                name=payload.name,
                name_key=normalize_name(payload.name),
                level=payload.level or DEFAULT_LEVEL,
                category=payload.category or DEFAULT_CATEGORY,
            )
        )
        updated = False
    db.commit()
    logger.info("skills.upsert user_id=%s skill=%r updated=%s", user.id, payload.name, updated)
    return updated, list_skills(db, user.id)


def remove_skill(db: Session, user: User, skill_name: str) -> list[SkillRead] | None:
    """Delete a skill by case-insensitive name; None when the user has no such skill."""
    existing = _find_skill(db, user.id, skill_name)
    if existing is None:
        return None
    db.delete(existing)
    db.commit()
    logger.info("skills.remove user_id=%s skill=%r", user.id, skill_name)
    return list_skills(db, user.id)


def get_target_job(db: Session, user_id: int) -> TargetJobRead | None:
    record = db.query(UserTargetJob).filter(UserTargetJob.user_id == user_id).one_or_none()
    if record is None:
        return None
    return TargetJobRead.model_validate(record)


def set_target_job(db: Session, user: User, payload: TargetJobRequest) -> TargetJobRead:
    record = db.query(UserTargetJob).filter(UserTargetJob.user_id == user.id).one_or_none()
    industry = payload.industry or ""
    required = [s.strip() for s in (payload.required_skills or []) if s and s.strip()]
    if record is None:
        record = UserTargetJob(user_id=user.id, title=payload.title, industry=industry, required_skills=required)
        db.add(record)
    else:
        record.title = payload.title
        record.industry = industry
        record.required_skills = required
    db.commit()
    db.refresh(record)
    logger.info("skills.target_job user_id=%s title=%r", user.id, payload.title)
    return TargetJobRead.model_validate(record)
