"""Mapping from the error taxonomy to HTTP responses."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from media_relay.domain.errors import (
    ConflictError,
    InternalError,
    InvalidCredentials,
    MediaRelayError,
    NotFound,
    UpstreamTimeout,
    ValidationError,
)

logger = logging.getLogger(__name__)

_STATUS_CODES: dict[type[MediaRelayError], int] = {
    ValidationError: status.HTTP_400_BAD_REQUEST,
    ConflictError: status.HTTP_400_BAD_REQUEST,
    InvalidCredentials: status.HTTP_401_UNAUTHORIZED,
    NotFound: status.HTTP_404_NOT_FOUND,
    UpstreamTimeout: status.HTTP_504_GATEWAY_TIMEOUT,
}


def status_code_for(exc: MediaRelayError) -> int:
    """Return the HTTP status for an error, walking its class hierarchy."""
    for klass in type(exc).__mro__:
        if klass in _STATUS_CODES:
            return _STATUS_CODES[klass]
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def register_error_handlers(app: FastAPI) -> None:
    """Install exception handlers that return ``{"message": ...}`` bodies."""

    @app.exception_handler(MediaRelayError)
    async def handle_media_relay_error(
        request: Request, exc: MediaRelayError
    ) -> JSONResponse:
        status_code = status_code_for(exc)
        if status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
            logger.error(
                "Request failed",
                exc_info=exc,
                extra={"path": request.url.path, "error": type(exc).__name__},
            )
        return JSONResponse(status_code=status_code, content={"message": exc.message})

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": "Invalid request body"},
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error", extra={"path": request.url.path})
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": InternalError().message},
        )
