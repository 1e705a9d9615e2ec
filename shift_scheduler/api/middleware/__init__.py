# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""API middleware components.

This package provides middleware for request processing:
- RequestLoggingMiddleware: Binds a request ID and logs each request.
- AuthMiddleware: JWT authentication.
- TenantMiddleware: Resolves the tenant from the token or X-Tenant-ID header.
- limiter: slowapi rate limiter used by sensitive endpoints.
"""

from shift_scheduler.api.middleware.auth import AuthMiddleware, CurrentUser, get_current_user
from shift_scheduler.api.middleware.rate_limit import limiter, rate_limit_exceeded_handler
from shift_scheduler.api.middleware.request_logging import RequestLoggingMiddleware
from shift_scheduler.api.middleware.tenant import TenantMiddleware, get_tenant_id_from_request

__all__ = [
    "AuthMiddleware",
    "CurrentUser",
    "get_current_user",
    "TenantMiddleware",
    "get_tenant_id_from_request",
    "RequestLoggingMiddleware",
    "limiter",
    "rate_limit_exceeded_handler",
]
