# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Tenant admin management endpoints.

This module provides endpoints for the owner of a tenant:
- POST /{admin_id}/allow-password-reset - Let another admin of the tenant
  reset their password
"""

import logging

from fastapi import APIRouter, Request
from pydantic import BaseModel, Field

from shift_scheduler.api.dependencies import (
    AuthenticatedUser,
    CurrentTenantID,
    PasswordResetServiceDep,
    parse_path_admin_id,
)
from shift_scheduler.api.middleware.rate_limit import limiter, password_reset_limit
from shift_scheduler.api.responses import (
    MSG_ADMIN_NOT_FOUND,
    MSG_OWNER_ONLY,
    MSG_PASSWORD_RESET_ALLOWED,
    DataResponse,
    ErrorResponse,
    bad_request,
    forbidden,
    from_domain_error,
    not_found,
)
from shift_scheduler.domains.auth.admin import Role
from shift_scheduler.domains.auth.password_reset_service import (
    AdminNotFoundError,
    OwnerRequiredError,
)
from shift_scheduler.domains.common import DomainError, ValidationError, parse_admin_id
from shift_scheduler.utils.datetime import format_rfc3339

logger = logging.getLogger(__name__)

router = APIRouter()


class AllowPasswordResetResponse(BaseModel):
    """Password reset window opened by the tenant owner."""

    target_admin_id: str = Field(..., description="Admin allowed to reset")
    target_email: str = Field(..., description="Email of that admin")
    allowed_at: str = Field(..., description="Authorization time (RFC3339)")
    expires_at: str = Field(..., description="End of the reset window (RFC3339)")
    allowed_by_name: str = Field(..., description="Display name of the owner")
    message: str = Field(..., description="Confirmation message")


@router.post(
    "/{admin_id:path}/allow-password-reset",
    response_model=DataResponse[AllowPasswordResetResponse],
    responses={
        400: {"model": ErrorResponse, "description": "Bad admin_id or self-authorization"},
        401: {"model": ErrorResponse, "description": "Not authenticated"},
        403: {"model": ErrorResponse, "description": "Caller is not the owner"},
        404: {"model": ErrorResponse, "description": "Admin not found in tenant"},
    },
    summary="Allow password reset (owner)",
)
@limiter.limit(password_reset_limit)
async def allow_password_reset(
    request: Request,
    admin_id: str,
    current_user: AuthenticatedUser,
    tenant_id: CurrentTenantID,
    service: PasswordResetServiceDep,
) -> DataResponse[AllowPasswordResetResponse]:
    """Allow another admin of the caller's tenant to reset their password.

    Only owners may do this, and never for themselves.
    """
    try:
        caller_admin_id = parse_admin_id(current_user.id)
    except ValidationError as e:
        raise bad_request("admin_id is required") from e

    if not current_user.role:
        raise bad_request("role is required")
    try:
        caller_role = Role.parse(current_user.role)
    except ValidationError as e:
        raise bad_request("invalid role") from e

    target_admin_id = parse_path_admin_id(admin_id)

    try:
        grant = await service.allow_by_owner(
            tenant_id=tenant_id,
            caller_admin_id=caller_admin_id,
            caller_role=caller_role,
            target_admin_id=target_admin_id,
        )
    except OwnerRequiredError as e:
        raise forbidden(MSG_OWNER_ONLY) from e
    except AdminNotFoundError as e:
        raise not_found(MSG_ADMIN_NOT_FOUND) from e
    except DomainError as e:
        logger.warning("Allow password reset failed: %s", e)
        raise from_domain_error(e) from e

    return DataResponse(
        data=AllowPasswordResetResponse(
            target_admin_id=grant.target_admin_id,
            target_email=grant.target_email,
            allowed_at=format_rfc3339(grant.allowed_at),
            expires_at=format_rfc3339(grant.expires_at),
            allowed_by_name=grant.allowed_by_name,
            message=MSG_PASSWORD_RESET_ALLOWED,
        )
    )
