# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""System admin operations on tenant admins.

This module provides endpoints for platform operators:
- POST /{admin_id}/allow-password-reset - Open a password reset window
  for any tenant admin
"""

import logging

from fastapi import APIRouter, Request
from pydantic import BaseModel, Field

from shift_scheduler.api.dependencies import (
    PasswordResetServiceDep,
    SystemAdminUser,
    parse_path_admin_id,
)
from shift_scheduler.api.middleware.rate_limit import limiter, password_reset_limit
from shift_scheduler.api.responses import (
    MSG_ADMIN_NOT_FOUND,
    MSG_PASSWORD_RESET_ALLOWED,
    DataResponse,
    ErrorResponse,
    from_domain_error,
    not_found,
)
from shift_scheduler.domains.auth.password_reset_service import AdminNotFoundError
from shift_scheduler.domains.common import DomainError
from shift_scheduler.utils.datetime import format_rfc3339

logger = logging.getLogger(__name__)

router = APIRouter()


class AdminAllowPasswordResetResponse(BaseModel):
    """Password reset window opened by a system admin."""

    target_admin_id: str = Field(..., description="Admin allowed to reset")
    target_email: str = Field(..., description="Email of that admin")
    tenant_id: str = Field(..., description="Tenant of that admin")
    allowed_at: str = Field(..., description="Authorization time (RFC3339)")
    expires_at: str = Field(..., description="End of the reset window (RFC3339)")
    message: str = Field(..., description="Confirmation message")


# The path converter lets an empty segment reach the handler so it can be
# reported as a missing admin_id rather than an unknown route.
@router.post(
    "/{admin_id:path}/allow-password-reset",
    response_model=DataResponse[AdminAllowPasswordResetResponse],
    responses={
        400: {"model": ErrorResponse, "description": "Missing or malformed admin_id"},
        401: {"model": ErrorResponse, "description": "Not authenticated"},
        403: {"model": ErrorResponse, "description": "Not a system admin"},
        404: {"model": ErrorResponse, "description": "Admin not found"},
    },
    summary="Allow password reset (system admin)",
)
@limiter.limit(password_reset_limit)
async def allow_password_reset(
    request: Request,
    admin_id: str,
    current_user: SystemAdminUser,
    service: PasswordResetServiceDep,
) -> DataResponse[AdminAllowPasswordResetResponse]:
    """Allow any tenant admin to reset their password within 24 hours."""
    target_admin_id = parse_path_admin_id(admin_id)

    try:
        grant = await service.allow_by_system(target_admin_id, current_user.id)
    except AdminNotFoundError as e:
        logger.warning("Allow password reset failed: %s", e)
        raise not_found(MSG_ADMIN_NOT_FOUND) from e
    except DomainError as e:
        logger.error("Allow password reset failed: %s", e)
        raise from_domain_error(e) from e

    return DataResponse(
        data=AdminAllowPasswordResetResponse(
            target_admin_id=grant.target_admin_id,
            target_email=grant.target_email,
            tenant_id=grant.tenant_id,
            allowed_at=format_rfc3339(grant.allowed_at),
            expires_at=format_rfc3339(grant.expires_at),
            message=MSG_PASSWORD_RESET_ALLOWED,
        )
    )
