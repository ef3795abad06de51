import logging

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from lesson_planner.core import logs

logger = logging.getLogger(__name__)


def error_content(code: str, message: str, details: list | None = None) -> dict:
    """Build the error envelope shared by all handlers."""
    error = {"code": code, "message": message}
    if details is not None:
        error["details"] = details
    return {"success": False, "error": error}


def register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers."""

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content=error_content(f"HTTP_{exc.status_code}", exc.detail),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        # Convert errors to JSON-serializable format
        errors = []
        for error in exc.errors():
            errors.append({key: str(value) for key, value in error.items()})

        return JSONResponse(
            status_code=422,
            content=error_content("VALIDATION_ERROR", "Request validation failed", errors),
        )

    @app.exception_handler(SQLAlchemyError)
    async def storage_exception_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
        logger.exception(logs.STORAGE_ERROR, request.method, request.url.path)
        return JSONResponse(
            status_code=500,
            content=error_content("STORAGE_ERROR", "The lesson plan store is unavailable"),
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception(logs.UNHANDLED_ERROR, request.method, request.url.path)
        return JSONResponse(
            status_code=500,
            content=error_content("INTERNAL_ERROR", "An unexpected error occurred"),
        )
