import datetime
import traceback
from typing import Any

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from credit_market.core.exceptions import MarketError
from credit_market.core.models.base import ErrorKind
from credit_market.logging_config import logger
from credit_market.settings import settings

MARKET_ERROR_STATUS_CODES: dict[ErrorKind, int] = {
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.UNAUTHORIZED: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.ALREADY_PAID: status.HTTP_409_CONFLICT,
    ErrorKind.INVALID_REQUEST: status.HTTP_400_BAD_REQUEST,
}


class ErrorResponse(Exception):
    """Standardised error body returned by every handler in this module."""

    def __init__(
        self,
        status_code: int,
        message: str,
        *,
        request: Request | None = None,
        details: dict[str, Any] | None = None,
        error_type: str = "error",
        exc: Exception | None = None,
        include_stack: bool = False,
    ) -> None:
        self.timestamp = datetime.datetime.now(datetime.timezone.utc)
        self.status_code = status_code
        self.message = message
        self.error_type = error_type
        self.details = details or {}

        if request:
            self.details.update({"method": request.method, "path": request.url.path})

        if include_stack and exc and exc.__traceback__:
            self.details["stack"] = traceback.format_exception(exc)

    def to_dict(self) -> dict[str, Any]:
        return {
            "status_code": self.status_code,
            "error_message": self.message,
            "details": self.details,
            "error_type": self.error_type,
        }

    def to_response(self) -> JSONResponse:
        return JSONResponse(status_code=self.status_code, content=self.to_dict())


async def market_exception_handler(request: Request, exc: MarketError) -> JSONResponse:
    """Render a typed market error, using its kind as the error type."""
    error_response = ErrorResponse(
        status_code=MARKET_ERROR_STATUS_CODES[exc.kind],
        message=exc.message,
        request=request,
        details={"exception_type": type(exc).__name__},
        error_type=exc.kind.value,
    )
    logger.warning(f"Market error: {error_response.to_dict()}")
    return error_response.to_response()


def format_validation_error(
    exc: RequestValidationError, request: Request
) -> ErrorResponse:
    errors = [
        {
            "location": " -> ".join(str(part) for part in err["loc"]),
            "field": err["loc"][-1] if len(err["loc"]) > 1 else None,
            "message": err["msg"],
            "type": err["type"],
        }
        for err in exc.errors()
    ]

    return ErrorResponse(
        status_code=422,
        message="Validation error",
        request=request,
        details={"errors": errors},
        error_type="validation_error",
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    error_response = format_validation_error(exc, request)
    logger.warning(f"Validation error on {request.url.path}")
    return error_response.to_response()


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    error_response = ErrorResponse(
        status_code=exc.status_code, message=str(exc.detail), error_type="http_error"
    )
    logger.warning(f"HTTP error: {error_response.to_dict()}")
    return error_response.to_response()


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    # Only expose the stack trace outside PROD
    show_stack = settings.ENVIRONMENT != "PROD"
    error_response = ErrorResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        message=str(exc) if show_stack else "An unexpected error occurred.",
        request=request,
        details={"exception_type": type(exc).__name__},
        error_type="server_error",
        exc=exc,
        include_stack=show_stack,
    )
    logger.error(f"Unhandled exception on {request.url.path}", exc_info=exc)
    return error_response.to_response()
