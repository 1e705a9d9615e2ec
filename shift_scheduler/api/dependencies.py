# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""FastAPI dependency injection definitions.

This module provides dependency functions for FastAPI endpoints.
Dependencies are used to:
- Get database sessions
- Get authenticated users
- Get tenant context
- Get service instances

Example:
    @router.get("/me")
    async def get_current_tenant(
        tenant_id: CurrentTenantID,
        service: TenantServiceDep,
    ):
        ...
"""

import logging
from typing import Annotated, AsyncGenerator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from shift_scheduler.api.middleware.auth import CurrentUser, get_current_user
from shift_scheduler.api.middleware.tenant import get_tenant_id_from_request
from shift_scheduler.api.responses import bad_request, forbidden, unauthorized
from shift_scheduler.core.config import get_settings
from shift_scheduler.domains.auth.password_reset_service import AdminPasswordResetService
from shift_scheduler.domains.common import AdminID, TenantID, ValidationError, parse_admin_id
from shift_scheduler.domains.tenant.service import TenantService
from shift_scheduler.infrastructure.database.connection import get_session
from shift_scheduler.infrastructure.database.repositories import (
    SQLAlchemyAdminRepository,
    SQLAlchemyTenantRepository,
)

logger = logging.getLogger(__name__)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Get a database session.

    The session commits when the request handler returns normally.

    Yields:
        AsyncSession bound to the application database.
    """
    async with get_session() as session:
        yield session


# =========================================================================
# Authentication Dependencies
# =========================================================================


def require_auth(request: Request) -> CurrentUser:
    """Require authenticated user.

    Raises:
        APIError: 401 if not authenticated.
    """
    user = get_current_user(request)
    if not user:
        raise unauthorized()
    return user


def require_system_admin(request: Request) -> CurrentUser:
    """Require a platform operator.

    Raises:
        APIError: 401 if not authenticated, 403 if not a system admin.
    """
    user = require_auth(request)
    if not user.is_system_admin:
        raise forbidden("System admin access required")
    return user


# =========================================================================
# Context Dependencies
# =========================================================================


def require_tenant_id(request: Request) -> TenantID:
    """Require a tenant ID in the request context.

    Raises:
        APIError: 400 if no tenant could be resolved.
    """
    tenant_id = get_tenant_id_from_request(request)
    if not tenant_id:
        raise bad_request("tenant_id is required")
    return tenant_id


def parse_path_admin_id(raw: str) -> AdminID:
    """Parse the ``admin_id`` path segment.

    Raises:
        APIError: 400 if the segment is empty or not an admin ID.
    """
    if not raw:
        raise bad_request("admin_id is required in path")
    try:
        return parse_admin_id(raw)
    except ValidationError as e:
        raise bad_request("invalid admin_id format") from e


# =========================================================================
# Service Dependencies
# =========================================================================


async def get_tenant_service(
    db: AsyncSession = Depends(get_db),
) -> TenantService:
    return TenantService(SQLAlchemyTenantRepository(db))


async def get_admin_password_reset_service(
    db: AsyncSession = Depends(get_db),
) -> AdminPasswordResetService:
    """Get AdminPasswordResetService with the configured reset window."""
    settings = get_settings()
    return AdminPasswordResetService(
        SQLAlchemyAdminRepository(db),
        grant_ttl=settings.password_reset.grant_ttl,
    )


# Type aliases for cleaner endpoint signatures
AuthenticatedUser = Annotated[CurrentUser, Depends(require_auth)]
SystemAdminUser = Annotated[CurrentUser, Depends(require_system_admin)]
CurrentTenantID = Annotated[TenantID, Depends(require_tenant_id)]
TenantServiceDep = Annotated[TenantService, Depends(get_tenant_service)]
PasswordResetServiceDep = Annotated[
    AdminPasswordResetService,
    Depends(get_admin_password_reset_service),
]
