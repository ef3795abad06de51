import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from lesson_planner.api.v1 import api_router
from lesson_planner.core import logs
from lesson_planner.core.config import settings
from lesson_planner.core.exceptions import register_exception_handlers
from lesson_planner.core.logging import setup_logging
from lesson_planner.core.middleware import ResponseWrapperMiddleware
from lesson_planner.db.session import engine

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup and shutdown events.

    The engine pool is disposed on shutdown.
    """
    logger.info(logs.START, settings.app_name, settings.app_env)

    yield

    await engine.dispose()
    logger.info(logs.STOP, settings.app_name)


def create_app() -> FastAPI:
    """Application factory pattern for creating the FastAPI app."""
    setup_logging()

    app = FastAPI(
        title=settings.app_name,
        debug=settings.debug,
        openapi_url=f"{settings.api_v1_prefix}/openapi.json",
        docs_url=f"{settings.api_v1_prefix}/docs",
        redoc_url=f"{settings.api_v1_prefix}/redoc",
        lifespan=lifespan,
    )

    # Register exception handlers
    register_exception_handlers(app)

    # Response wrapper middleware (add first so it runs last)
    app.add_middleware(ResponseWrapperMiddleware)

    # CORS middleware - configure for your frontend
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # Configure appropriately for production
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include API router
    app.include_router(api_router, prefix=settings.api_v1_prefix)

    return app


app = create_app()


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())
