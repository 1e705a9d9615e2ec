# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Rate limiting using slowapi.

Limits are applied per client: the authenticated user ID when present,
otherwise the remote IP address. Endpoints opt in with the decorator and
must accept a ``request: Request`` parameter.

The limiter is built from the settings at import time, so
``clear_settings_cache()`` does not change its ``enabled`` switch or its
storage backend. Only the limit strings, read through
``password_reset_limit`` on every request, follow reloaded settings.

Example:
    @router.post("/{admin_id}/allow-password-reset")
    @limiter.limit(password_reset_limit)
    async def allow_password_reset(request: Request, ...):
        ...
"""

import logging

from fastapi import Request
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address

from shift_scheduler.api.responses import ERR_CODE_RATE_LIMITED, error_response
from shift_scheduler.core.config import get_settings

logger = logging.getLogger(__name__)


def get_client_identifier(request: Request) -> str:
    """Get a unique identifier for the client.

    Uses user ID if authenticated, otherwise uses IP address.
    For tenant admins, the tenant ID is included for isolation.
    """
    user = getattr(request.state, "user", None)

    parts = []
    if user is not None:
        if user.tenant_id:
            parts.append(f"tenant:{user.tenant_id}")
        parts.append(f"user:{user.id}")
    else:
        parts.append(f"ip:{get_remote_address(request)}")

    return ":".join(parts)


def password_reset_limit() -> str:
    """Limit for password reset authorization endpoints."""
    return get_settings().rate_limit.password_reset


# Create the limiter instance
settings = get_settings()
limiter = Limiter(
    key_func=get_client_identifier,
    storage_uri=settings.rate_limit.storage_uri,
    enabled=settings.rate_limit.enabled,
)


async def rate_limit_exceeded_handler(
    request: Request,
    exc: RateLimitExceeded,
) -> JSONResponse:
    """Handle rate limit exceeded errors with a 429 error envelope."""
    logger.warning(
        "Rate limit exceeded: %s for %s",
        exc.detail,
        get_client_identifier(request),
    )

    return error_response(
        429,
        ERR_CODE_RATE_LIMITED,
        "Too many requests. Please try again later.",
        headers={"Retry-After": "60"},
    )
