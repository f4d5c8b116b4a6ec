"""API error mapping

Every error response has the shape {"error": "<message>"}.
Storage failures surface a generic message; the underlying reason is
logged server side only.
"""

import logging
from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from libs.result import Error

logger = logging.getLogger(__name__)

# Use case error code -> HTTP status. Codes ending in _FAILED are storage failures.
ERROR_STATUS = {
    "INVALID_AMOUNT": status.HTTP_400_BAD_REQUEST,
    "INVALID_FUEL_PRICE": status.HTTP_400_BAD_REQUEST,
    "INVALID_CARD": status.HTTP_400_BAD_REQUEST,
    "INVALID_DATE_RANGE": status.HTTP_400_BAD_REQUEST,
    "INSUFFICIENT_BALANCE": status.HTTP_400_BAD_REQUEST,
    "CARD_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "FUEL_PRICE_NOT_FOUND": status.HTTP_404_NOT_FOUND,
}


def status_for(error: Error) -> int:
    return ERROR_STATUS.get(error.code, status.HTTP_500_INTERNAL_SERVER_ERROR)


class ClientError(Exception):
    """Raised by routes to turn a failed Result into an HTTP error response"""

    def __init__(self, error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        super().__init__(error.message)
        self.error = error
        self.status_code = status_code


async def handle_client_error(request: Request, exc: ClientError) -> JSONResponse:
    extra = {"error_code": exc.error.code, "path": request.url.path, "method": request.method}

    if exc.status_code >= 500:
        logger.error(f"{exc.error.code}: {exc.error.reason}", extra=extra)
        message = "Database error"
    else:
        logger.info(f"{exc.error.code}: {exc.error.message}", extra=extra)
        message = exc.error.message

    return JSONResponse(status_code=exc.status_code, content={"error": message})


async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    Map request validation failures to 400

    A malformed card id in the path gets the fixed "Invalid card ID" message.
    """
    errors = exc.errors()

    if any(tuple(err.get("loc", ()))[:2] == ("path", "card_id") for err in errors):
        message = "Invalid card ID"
    else:
        message = " | ".join(
            f"{'.'.join(str(x) for x in err.get('loc', []))}: {err.get('msg', 'Invalid value')}"
            for err in errors
        )

    logger.warning(
        f"Validation error on {request.url.path}: {message}",
        extra={"path": request.url.path, "method": request.method},
    )

    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": message})


async def handle_database_error(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.error(
        f"Database error on {request.url.path}: {exc}",
        extra={"error_type": type(exc).__name__, "path": request.url.path, "method": request.method},
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Database error"},
    )


async def handle_generic_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(
        f"Unexpected error on {request.url.path}",
        extra={"error_type": type(exc).__name__, "path": request.url.path, "method": request.method},
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Internal server error"},
    )
