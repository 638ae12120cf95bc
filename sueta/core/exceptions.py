"""
Exception handling for the HTTP layer.
Every non-success response carries the same envelope:
``{"message": ..., "developerMessage": ..., "code": <status>}``.
"""

from typing import Any, Dict, Optional

import structlog
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse as FastAPIJSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from sueta.domain.errors import (
    DomainError,
    EmailTaken,
    Internal,
    InvalidId,
    NotFound,
    PasswordsMismatch,
    ValidationFailed,
    WrongPassword,
)

logger = structlog.get_logger(__name__)

NOT_FOUND_HINT = "please, double check your request"
INTERNAL_HINT = "something went wrong on the server side"


class JSONResponse(FastAPIJSONResponse):
    media_type = "application/json; charset=utf-8"


class AppError(Exception):
    """An error that is rendered as-is in the response envelope."""

    def __init__(
        self,
        message: str,
        developer_message: str = "",
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
    ):
        self.message = message
        self.developer_message = developer_message
        self.status_code = status_code
        super().__init__(message)

    def envelope(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {}
        if self.message:
            body["message"] = self.message
        if self.developer_message:
            body["developerMessage"] = self.developer_message
        body["code"] = self.status_code
        return body

    def response(self) -> JSONResponse:
        return JSONResponse(status_code=self.status_code, content=self.envelope())

    @classmethod
    def from_domain(cls, exc: DomainError, developer_message: Optional[str] = None) -> "AppError":
        """Map a domain error onto its HTTP status.

        ``developer_message`` replaces the default hint for that error.
        """
        status_code, default_hint = DOMAIN_ERRORS.get(
            type(exc), (status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_HINT)
        )
        hint = default_hint if developer_message is None else developer_message
        message = exc.message if status_code < 500 else Internal.message
        return cls(message, hint, status_code)


class BadRequestError(AppError):
    def __init__(self, message: str, developer_message: str = ""):
        super().__init__(message, developer_message, status.HTTP_400_BAD_REQUEST)


class DecodeFailed(BadRequestError):
    """Request body is not exactly one JSON object of the expected shape."""


# Domain error -> (status, default developer message)
DOMAIN_ERRORS = {
    ValidationFailed: (status.HTTP_400_BAD_REQUEST, ""),
    PasswordsMismatch: (status.HTTP_400_BAD_REQUEST, "provided passwords must to match"),
    EmailTaken: (status.HTTP_400_BAD_REQUEST, ""),
    WrongPassword: (status.HTTP_400_BAD_REQUEST, ""),
    InvalidId: (status.HTTP_400_BAD_REQUEST, ""),
    NotFound: (status.HTTP_404_NOT_FOUND, NOT_FOUND_HINT),
    Internal: (status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_HINT),
}


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    return exc.response()


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    error = AppError.from_domain(exc)
    if error.status_code >= 500:
        # The wrapped cause is logged here and never sent to the client.
        logger.error("Internal error", path=request.url.path, error=str(exc))
    return error.response()


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render routing errors (unknown path, wrong method) in the envelope."""
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        error = AppError(NotFound.message, NOT_FOUND_HINT, exc.status_code)
    else:
        error = AppError(str(exc.detail).lower(), "", exc.status_code)
    response = error.response()
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle all uncaught exceptions globally."""
    logger.exception("Unexpected error occurred", path=request.url.path)
    return AppError(Internal.message, INTERNAL_HINT).response()


def setup_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(DomainError, domain_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, global_exception_handler)
