# __init__.py
from skillgap.models.target_job import UserTargetJob
from skillgap.models.user import User
from skillgap.models.user_skill import UserSkill

__all__ = [
	"User",
	"UserSkill",
	"UserTargetJob",
]
