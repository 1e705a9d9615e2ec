# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Tenant resolution middleware.

This middleware resolves the tenant context from:
1. JWT token claims (if authenticated)
2. X-Tenant-ID header

The resolved tenant ID is stored in request.state.tenant_id for use by
dependencies. It is None when neither source yields a valid tenant ID.

Example:
    # Request with header
    GET /api/v1/tenants/me
    X-Tenant-ID: 6f1c2d9e-3b7a-4c55-9a0e-1f2b3c4d5e6f
"""

import logging
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from shift_scheduler.domains.common import TenantID, ValidationError, parse_tenant_id

logger = logging.getLogger(__name__)

# Header name for tenant ID
TENANT_HEADER = "X-Tenant-ID"

# Path prefixes that don't carry tenant context
PUBLIC_PATH_PREFIXES = (
    "/health",
    "/api/v1/admin/",  # System admin endpoints
)


class TenantMiddleware(BaseHTTPMiddleware):
    """Middleware for resolving the tenant of a request.

    Must run after AuthMiddleware so that request.state.user is set.
    """

    async def dispatch(
        self,
        request: Request,
        call_next: Callable[[Request], Response],
    ) -> Response:
        request.state.tenant_id = None

        if not request.url.path.startswith(PUBLIC_PATH_PREFIXES):
            request.state.tenant_id = self._resolve_tenant_id(request)

        return await call_next(request)

    def _resolve_tenant_id(self, request: Request) -> TenantID | None:
        user = getattr(request.state, "user", None)
        if user is not None and user.tenant_id:
            try:
                return parse_tenant_id(user.tenant_id)
            except ValidationError:
                logger.warning("Token carries malformed tenant_id: %s", user.tenant_id)

        header_value = request.headers.get(TENANT_HEADER)
        if header_value:
            try:
                return parse_tenant_id(header_value)
            except ValidationError:
                logger.debug("Ignoring malformed %s header", TENANT_HEADER)

        return None


def get_tenant_id_from_request(request: Request) -> TenantID | None:
    """Get the resolved tenant ID from request state."""
    return getattr(request.state, "tenant_id", None)
