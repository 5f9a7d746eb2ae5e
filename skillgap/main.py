# main.py
import logging
from pathlib import Path

from dotenv import load_dotenv

# Ensure repo-root .env is loaded for the running server process.
load_dotenv(dotenv_path=Path(__file__).resolve().parents[1] / ".env")

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from skillgap.config import settings
from skillgap.config import build_sqlalchemy_db_url
from skillgap.database import Base, engine
from skillgap.logging_config import setup_logging
from skillgap.models import User, UserSkill, UserTargetJob  # noqa: F401  # register ORM tables
from skillgap.api.routes.health import router as health_router
from skillgap.routers import auth, gaps, resume, skills


logger = logging.getLogger(__name__)


def _endpoint_map(prefix: str) -> dict:
    return {
        "auth": {
            "register": f"POST {prefix}/auth/register",
            "login": f"POST {prefix}/auth/login",
            "profile": f"GET {prefix}/auth/profile",
        },
        "skills": {
            "get": f"GET {prefix}/skills",
            "add": f"POST {prefix}/skills",
            "delete": f"DELETE {prefix}/skills/{{skill_name}}",
            "targetJob": {
                "get": f"GET {prefix}/skills/target-job",
                "set": f"POST {prefix}/skills/target-job",
            },
        },
        "gaps": {
            "jobs": f"GET {prefix}/gaps/jobs",
            "analyze": f"GET {prefix}/gaps/analyze",
            "history": f"GET {prefix}/gaps/history",
        },
        "resume": {
            "upload": f"POST {prefix}/resume/upload",
        },
    }


async def _unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"success": False, "message": "Server error"})


def create_app() -> FastAPI:
    setup_logging(settings.log_level)

    application = FastAPI(
        title=settings.app_name,
        version=settings.version,
        debug=settings.debug,
    )
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials="*" not in settings.cors_origins,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )
    application.add_exception_handler(Exception, _unhandled_exception_handler)

    # Health endpoints (do not depend on API_PREFIX)
    application.include_router(health_router)

    application.include_router(auth.router, prefix=f"{settings.api_prefix}/auth", tags=["auth"])
    application.include_router(skills.router, prefix=settings.api_prefix)
    application.include_router(gaps.router, prefix=settings.api_prefix)
    application.include_router(resume.router, prefix=settings.api_prefix)

    @application.get("/", tags=["meta"])
    def index() -> dict:
        return {
            "message": f"{settings.app_name} is running",
            "status": "OK",
            "endpoints": _endpoint_map(settings.api_prefix),
        }

    # Auto-create ORM tables only for local sqlite; other databases are migrated explicitly.
    db_url = build_sqlalchemy_db_url(settings)
    if db_url.startswith("sqlite"):
        Base.metadata.create_all(bind=engine)
    logger.info("app.created name=%s prefix=%s", settings.app_name, settings.api_prefix)
    return application


app = create_app()
