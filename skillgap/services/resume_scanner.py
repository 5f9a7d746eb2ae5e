"""Resume upload handling.

Skill extraction is a stub: every upload, whatever its content, yields the same
demo skill list. The uploaded file is still stored so a real extractor can be
plugged in behind ``scan_resume`` without changing the endpoint.
"""

from __future__ import annotations

import logging
import time
from pathlib import Path

from fastapi import HTTPException, UploadFile, status
from starlette.concurrency import run_in_threadpool

from skillgap.config import settings
from skillgap.schemas.resume import ExtractedSkill, ResumeUploadResponse

logger = logging.getLogger(__name__)

DEMO_FILENAME = "demo.pdf"
EXTRACTION_METHOD = "static-demo"

DEMO_SKILLS: tuple[ExtractedSkill, ...] = (
    ExtractedSkill(name="JavaScript", confidence=85, category="technical"),
    ExtractedSkill(name="React", confidence=78, category="technical"),
    ExtractedSkill(name="Node.js", confidence=65, category="technical"),
    ExtractedSkill(name="HTML/CSS", confidence=90, category="technical"),
    ExtractedSkill(name="Git", confidence=70, category="tool"),
    ExtractedSkill(name="Communication", confidence=72, category="soft"),
    ExtractedSkill(name="Problem Solving", confidence=75, category="soft"),
)


def _upload_dir() -> Path:
    path = Path(settings.upload_dir)
    path.mkdir(parents=True, exist_ok=True)
    return path


async def store_upload(upload: UploadFile) -> str:
    """Write the upload to the upload dir as ``<epoch-ms><ext>`` and return that name."""
    content = await upload.read()
    max_bytes = settings.max_upload_size_mb * 1024 * 1024
    if len(content) > max_bytes:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=f"File too large. Max {settings.max_upload_size_mb} MB.",
        )

    suffix = Path(upload.filename or "").suffix
    filename = f"{int(time.time() * 1000)}{suffix}"
    await run_in_threadpool((_upload_dir() / filename).write_bytes, content)
    logger.info("resume.stored filename=%s bytes=%d", filename, len(content))
    return filename


def scan_resume(filename: str | None) -> ResumeUploadResponse:
    skills = list(DEMO_SKILLS)
    return ResumeUploadResponse(
        message="Resume uploaded successfully. Skills extracted.",
        filename=filename or DEMO_FILENAME,
        extracted_skills=skills,
        total_skills=len(skills),
        extraction_method=EXTRACTION_METHOD,
    )
