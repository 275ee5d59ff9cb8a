from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import APIRouter, Depends, FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.api import dashboard, health, projects, tasks, team
from app.core.auth import require_local_auth
from app.core.config import settings
from app.core.errors import TrackerError
from app.core.logging import configure_logging, get_logger
from app.db.session import init_db

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncIterator[None]:
    configure_logging(settings.log_level)
    if settings.db_auto_create:
        init_db()
    logger.info("app.started environment=%s", settings.environment)
    yield
    logger.info("app.stopped")


def _format_validation_errors(exc: RequestValidationError) -> str:
    parts: list[str] = []
    for error in exc.errors():
        location = ".".join(
            str(p) for p in error.get("loc", ()) if p not in ("body", "path", "query")
        )
        message = error.get("msg", "Invalid value")
        parts.append(f"{location}: {message}" if location else message)
    return "; ".join(parts) or "Invalid request"


async def _tracker_error_handler(_: Request, exc: TrackerError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


async def _validation_error_handler(_: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": _format_validation_errors(exc)},
    )


def create_app() -> FastAPI:
    app = FastAPI(title="Tracker API", lifespan=lifespan)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(TrackerError, _tracker_error_handler)
    app.add_exception_handler(RequestValidationError, _validation_error_handler)

    api_router = APIRouter(prefix=settings.api_prefix, dependencies=[Depends(require_local_auth)])
    api_router.include_router(projects.router)
    api_router.include_router(tasks.router)
    api_router.include_router(team.router)
    api_router.include_router(dashboard.router)

    app.include_router(health.router)
    app.include_router(api_router)
    return app


app = create_app()
