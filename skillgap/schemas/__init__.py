# __init__.py
from skillgap.schemas.gap import AnalysisReport, GapAnalysisResponse, GapEntry, GapHistoryResponse
from skillgap.schemas.resume import ExtractedSkill, ResumeUploadResponse
from skillgap.schemas.skills import SkillListResponse, SkillMutationResponse, SkillRead, SkillUpsertRequest
from skillgap.schemas.target_job import TargetJobRead, TargetJobRequest, TargetJobResponse
from skillgap.schemas.user import Token, TokenData, UserCreate, UserLogin, UserProfileResponse, UserRead

__all__ = [
	"AnalysisReport",
	"GapAnalysisResponse",
	"GapEntry",
	"GapHistoryResponse",
	"ExtractedSkill",
	"ResumeUploadResponse",
	"SkillListResponse",
	"SkillMutationResponse",
	"SkillRead",
	"SkillUpsertRequest",
	"TargetJobRead",
	"TargetJobRequest",
	"TargetJobResponse",
	"Token",
	"TokenData",
	"UserCreate",
	"UserLogin",
	"UserProfileResponse",
	"UserRead",
]
