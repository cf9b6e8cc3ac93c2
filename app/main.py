import logging
import os
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.config import Settings
from app.infrastructure.shell.command_runner import CommandRunner
from app.middleware import (
    ErrorHandlingMiddleware,
    LoggingMiddleware,
    http_exception_handler,
    request_validation_exception_handler,
)
from app.routes import branches_router, deployments_router, health_router, proxy_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    logger.info(f"🚀 Deployment API started (port {settings.PORT})")
    logger.info(f"📁 Scripts directory: {settings.SCRIPTS_DIR}")
    yield
    logger.info("👋 Deployment API shutting down")


def create_app(
    settings: Optional[Settings] = None,
    command_runner: Optional[CommandRunner] = None,
) -> FastAPI:
    settings = settings or Settings()

    app = FastAPI(
        title="Deployment API",
        description="Lists, deploys and cleans up branch deployments",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.command_runner = command_runner or CommandRunner(
        default_cwd=settings.SCRIPTS_DIR,
        max_output_bytes=settings.MAX_OUTPUT_BYTES,
        max_concurrent=settings.MAX_CONCURRENT_COMMANDS,
    )

    # Middleware order matters - last added is first executed
    app.add_middleware(
        LoggingMiddleware,
        enable_detailed_logging=settings.LOG_LEVEL.upper() == "DEBUG",
    )
    app.add_middleware(ErrorHandlingMiddleware, enable_error_logging=True)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RequestValidationError, request_validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)

    app.include_router(health_router)
    app.include_router(deployments_router)
    app.include_router(branches_router)
    app.include_router(proxy_router)

    # Mounted last so the API routes take precedence
    if os.path.isdir(settings.STATIC_DIR):
        app.mount("/", StaticFiles(directory=settings.STATIC_DIR, html=True), name="static")

    return app
