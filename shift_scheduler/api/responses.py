# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Response envelopes and error mapping for the HTTP API.

Every successful response is wrapped as ``{"data": ...}`` and every error
as ``{"error": {"code": ..., "message": ...}}``. Handlers raise APIError;
the exception handlers registered by register_exception_handlers() render
the envelope.

Example:
    >>> try:
    ...     tenant = await service.get_tenant(tenant_id)
    ... except DomainError as e:
    ...     raise from_domain_error(e) from e
    >>> return DataResponse(data=TenantResponse.from_entity(tenant))
"""

import logging
from typing import Any, Generic, TypeVar

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from starlette.exceptions import HTTPException as StarletteHTTPException

from shift_scheduler.domains.common import (
    ERR_CONFLICT,
    ERR_INVALID_INPUT,
    ERR_INVARIANT_VIOLATION,
    ERR_NOT_FOUND,
    ERR_UNAUTHORIZED,
    DomainError,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

# HTTP error codes
ERR_CODE_INVALID_REQUEST = "ERR_INVALID_REQUEST"
ERR_CODE_UNAUTHORIZED = "ERR_UNAUTHORIZED"
ERR_CODE_FORBIDDEN = "ERR_FORBIDDEN"
ERR_CODE_NOT_FOUND = "ERR_NOT_FOUND"
ERR_CODE_CONFLICT = "ERR_CONFLICT"
ERR_CODE_METHOD_NOT_ALLOWED = "ERR_METHOD_NOT_ALLOWED"
ERR_CODE_RATE_LIMITED = "ERR_RATE_LIMITED"
ERR_CODE_INTERNAL = "ERR_INTERNAL"

# User-facing messages
MSG_INTERNAL_ERROR = "Internal server error"
MSG_ADMIN_NOT_FOUND = "指定された管理者が見つかりません"
MSG_PASSWORD_RESET_ALLOWED = "パスワードリセットを許可しました（24時間有効）"
MSG_OWNER_ONLY = "この操作はオーナーのみ実行可能です"

_DOMAIN_ERROR_MAP: dict[str, tuple[int, str]] = {
    ERR_NOT_FOUND: (status.HTTP_404_NOT_FOUND, ERR_CODE_NOT_FOUND),
    ERR_INVALID_INPUT: (status.HTTP_400_BAD_REQUEST, ERR_CODE_INVALID_REQUEST),
    ERR_INVARIANT_VIOLATION: (status.HTTP_400_BAD_REQUEST, ERR_CODE_INVALID_REQUEST),
    ERR_CONFLICT: (status.HTTP_409_CONFLICT, ERR_CODE_CONFLICT),
    ERR_UNAUTHORIZED: (status.HTTP_403_FORBIDDEN, ERR_CODE_FORBIDDEN),
}

_HTTP_STATUS_CODES: dict[int, str] = {
    status.HTTP_401_UNAUTHORIZED: ERR_CODE_UNAUTHORIZED,
    status.HTTP_403_FORBIDDEN: ERR_CODE_FORBIDDEN,
    status.HTTP_404_NOT_FOUND: ERR_CODE_NOT_FOUND,
    status.HTTP_405_METHOD_NOT_ALLOWED: ERR_CODE_METHOD_NOT_ALLOWED,
    status.HTTP_409_CONFLICT: ERR_CODE_CONFLICT,
}


class DataResponse(BaseModel, Generic[T]):
    """Success envelope."""

    data: T


class ErrorDetail(BaseModel):
    code: str
    message: str


class ErrorResponse(BaseModel):
    """Error envelope."""

    error: ErrorDetail


class APIError(Exception):
    """Error rendered as an error envelope.

    Attributes:
        status_code: HTTP status of the response.
        code: Machine-readable error code (``ERR_*``).
        message: Human-readable message.
        headers: Extra response headers.
    """

    def __init__(
        self,
        status_code: int,
        code: str,
        message: str,
        headers: dict[str, str] | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.code = code
        self.message = message
        self.headers = headers


def bad_request(message: str) -> APIError:
    return APIError(status.HTTP_400_BAD_REQUEST, ERR_CODE_INVALID_REQUEST, message)


def unauthorized(message: str = "Not authenticated") -> APIError:
    return APIError(
        status.HTTP_401_UNAUTHORIZED,
        ERR_CODE_UNAUTHORIZED,
        message,
        headers={"WWW-Authenticate": "Bearer"},
    )


def forbidden(message: str) -> APIError:
    return APIError(status.HTTP_403_FORBIDDEN, ERR_CODE_FORBIDDEN, message)


def not_found(message: str) -> APIError:
    return APIError(status.HTTP_404_NOT_FOUND, ERR_CODE_NOT_FOUND, message)


def internal_error() -> APIError:
    return APIError(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        ERR_CODE_INTERNAL,
        MSG_INTERNAL_ERROR,
    )


def from_domain_error(error: DomainError) -> APIError:
    """Map a domain error to its HTTP counterpart.

    Domain codes without a mapping become a generic 500 so internal
    details never leak to the client.

    Args:
        error: Error raised by a domain service or entity.

    Returns:
        APIError carrying the mapped status and code.
    """
    mapped = _DOMAIN_ERROR_MAP.get(error.code)
    if mapped is None:
        logger.error("Unmapped domain error: %s", error)
        return internal_error()

    status_code, code = mapped
    return APIError(status_code, code, error.message)


def error_body(code: str, message: str) -> dict[str, Any]:
    return ErrorResponse(error=ErrorDetail(code=code, message=message)).model_dump()


def error_response(
    status_code: int,
    code: str,
    message: str,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=error_body(code, message),
        headers=headers,
    )


async def api_error_handler(request: Request, exc: APIError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return error_response(exc.status_code, exc.code, exc.message, exc.headers)


async def http_exception_handler(
    request: Request,
    exc: StarletteHTTPException,
) -> JSONResponse:
    code = _HTTP_STATUS_CODES.get(exc.status_code)
    if code is None:
        code = ERR_CODE_INTERNAL if exc.status_code >= 500 else ERR_CODE_INVALID_REQUEST
    message = exc.detail if isinstance(exc.detail, str) else str(exc.detail)
    return error_response(exc.status_code, code, message, getattr(exc, "headers", None))


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError,
) -> JSONResponse:
    """Render FastAPI request validation failures as 400 errors."""
    logger.debug("Request validation failed: %s", exc.errors())
    return error_response(
        status.HTTP_400_BAD_REQUEST,
        ERR_CODE_INVALID_REQUEST,
        "Invalid request",
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        ERR_CODE_INTERNAL,
        MSG_INTERNAL_ERROR,
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the envelope-rendering exception handlers on an app."""
    app.add_exception_handler(APIError, api_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
