from __future__ import annotations

from fastapi import APIRouter, Depends, File, UploadFile

from skillgap.models.user import User
from skillgap.routers.dependencies import get_current_user
from skillgap.schemas.resume import ResumeUploadResponse
from skillgap.services.resume_scanner import scan_resume, store_upload


router = APIRouter(prefix="/resume", tags=["resume"])


@router.post("/upload", response_model=ResumeUploadResponse)
async def upload_resume(
    resume: UploadFile | None = File(default=None),
    current_user: User = Depends(get_current_user),
) -> ResumeUploadResponse:
    filename = await store_upload(resume) if resume is not None else None
    return scan_resume(filename)
