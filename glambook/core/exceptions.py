"""
Error taxonomy and FastAPI exception handlers

Every error leaves the API as ``{"error": "<message>"}`` with the status
code of its category.
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
import structlog

logger = structlog.get_logger(__name__)


class GlamBookError(Exception):
    """Base exception for all application errors."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Internal server error"

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_dict(self):
        return {"error": self.message}


class ValidationError(GlamBookError):
    """Missing or malformed input."""
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid request"


class AuthenticationError(GlamBookError):
    """Missing, invalid or revoked credentials."""
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Unauthorized access"


class NotFoundError(GlamBookError):
    """Operation on an unknown record."""
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Resource not found"


class ConflictError(GlamBookError):
    """Uniqueness violation, e.g. an email that is already registered."""
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Resource already exists"


class UnexpectedError(GlamBookError):
    """Store failure or any other error the caller cannot act on."""


def describe_errors(errors) -> str:
    """One-line summary of pydantic error dicts"""
    parts = []
    for error in errors:
        location = [str(item) for item in error.get("loc", ()) if item != "body"]
        field = ".".join(location)
        parts.append(f"{field}: {error.get('msg')}" if field else error.get("msg", ""))
    return "Invalid request: " + "; ".join(parts) if parts else "Invalid request"


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the error handlers to the application"""

    @app.exception_handler(GlamBookError)
    async def glambook_error_handler(request: Request, exc: GlamBookError):
        if exc.status_code >= 500:
            logger.error("Request failed", path=request.url.path, error=exc.message)
            return JSONResponse(status_code=exc.status_code, content={"error": GlamBookError.default_message})
        logger.info("Request rejected", path=request.url.path, status_code=exc.status_code, error=exc.message)
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        message = describe_errors(exc.errors())
        logger.info("Validation error", path=request.url.path, error=message)
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": message})

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error", path=request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": GlamBookError.default_message},
        )
