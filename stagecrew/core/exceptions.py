"""
Global exception handling for the application.
Every error leaves the service as a small JSON object with an ``error`` field.
"""

from contextlib import contextmanager
from typing import Any, Iterator, Optional

import structlog
from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = structlog.get_logger(__name__)


class AppError(Exception):
    """Base class for all application exceptions."""
    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: Optional[Any] = None,
    ):
        self.message = message
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)


class EntityNotFoundException(AppError):
    """Resource not found error."""
    def __init__(self, message: str = "Not found"):
        super().__init__(message, status.HTTP_404_NOT_FOUND)


class BadRequestException(AppError):
    """Missing or invalid required input."""
    def __init__(self, message: str = "Bad request"):
        super().__init__(message, status.HTTP_400_BAD_REQUEST)


class UnauthorizedException(AppError):
    """Authentication failure error."""
    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message, status.HTTP_401_UNAUTHORIZED)


class ForbiddenException(AppError):
    """Authorization failure error."""
    def __init__(self, message: str = "Forbidden"):
        super().__init__(message, status.HTTP_403_FORBIDDEN)


class ServerErrorException(AppError):
    """Unexpected store or dependency failure. The only error that carries details."""
    def __init__(self, message: str = "Server error", details: Optional[Any] = None):
        super().__init__(message, status.HTTP_500_INTERNAL_SERVER_ERROR, details)


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    content: dict[str, Any] = {"error": exc.message}
    if isinstance(exc, ServerErrorException) and exc.details is not None:
        content["details"] = exc.details
    return JSONResponse(status_code=exc.status_code, content=content)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    first = exc.errors()[0] if exc.errors() else {}
    field = ".".join(str(part) for part in first.get("loc", ()) if part not in ("body", "query", "path"))
    message = f"Invalid {field}" if field else "Invalid request"
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": message})


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Last resort for anything a router did not convert itself."""
    logger.exception("Unhandled error", path=request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Server error", "details": str(exc)},
    )


def register_exception_handlers(app) -> None:
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, global_exception_handler)


@contextmanager
def server_errors(message: str) -> Iterator[None]:
    """Turn unexpected failures inside a handler into ServerErrorException."""
    try:
        yield
    except AppError:
        raise
    except Exception as e:
        logger.exception(message)
        raise ServerErrorException(message, details=str(e)) from e
