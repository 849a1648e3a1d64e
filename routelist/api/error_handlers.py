"""Error Handlers: global exception handlers for the table API.

Invariants:
    - TableError → its own to_response() body and http_status
    - RequestValidationError → TableValidationError (400) with field-level details
    - HTTPException raised by the framework → same {error, message} shape
    - Exception (catch-all) → 500; class name, message and stack only in development

Design Decisions:
    - Extracted from main.py: register_error_handlers(app) called by create_app()
"""

import logging
import traceback
from http import HTTPStatus

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from routelist.core.errors import FieldError, TableError, TableValidationError

logger = logging.getLogger(__name__)

# Request-part prefixes FastAPI puts at the head of every error location
_LOCATION_ROOTS = frozenset({"body", "path", "query", "header", "cookie"})


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_table_error_handler(app)
    _register_validation_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def _register_table_error_handler(app: FastAPI) -> None:

    @app.exception_handler(TableError)
    async def table_error_handler(request: Request, exc: TableError):
        """Handle all table domain errors."""
        logger.warning(
            f"{exc.name}: {exc.message}",
            extra={"error_name": exc.name, "path": request.url.path},
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Convert Pydantic validation errors into a TableValidationError."""
        error = TableValidationError(collect_field_errors(exc.errors()))
        logger.warning(
            f"Validation error on {request.url.path}: {error.message}",
            extra={"error_name": error.name, "path": request.url.path},
        )
        return JSONResponse(
            status_code=error.http_status, content=error.to_response(),
        )


def _register_http_error_handler(app: FastAPI) -> None:

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(
        request: Request, exc: StarletteHTTPException,
    ):
        try:
            phrase = HTTPStatus(exc.status_code).phrase
        except ValueError:
            phrase = "Error"
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": phrase, "message": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: diagnostic detail only in development."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        status_code = getattr(
            exc, "status", status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
        if not isinstance(status_code, int) or not 400 <= status_code < 600:
            status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
        settings = getattr(request.app.state, "settings", None)
        if settings is not None and settings.is_development:
            content = {
                "error": type(exc).__name__,
                "message": str(exc) or "Something went wrong",
                "stack": "".join(traceback.format_exception(exc)),
            }
        else:
            content = {
                "error": "Internal Server Error",
                "message": "An unexpected error occurred",
            }
        return JSONResponse(status_code=status_code, content=content)


def collect_field_errors(errors: list[dict]) -> list[FieldError]:
    """Flatten Pydantic error dicts into FieldError entries."""
    return [
        FieldError(
            field=_field_path(e.get("loc", ())),
            message=e.get("msg", ""),
            type=e.get("type", ""),
        )
        for e in errors
    ]


def _field_path(loc) -> str:
    parts = list(loc)
    if parts and parts[0] in _LOCATION_ROOTS:
        parts = parts[1:]
    return ".".join(str(p) for p in parts)
