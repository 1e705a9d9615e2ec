# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Password reset authorization use cases.

Two actors may open a password reset window for a tenant admin:

- a system admin (platform operator), for any admin of any tenant;
- the tenant owner, for another admin of their own tenant.

Example:
    >>> service = AdminPasswordResetService(SQLAlchemyAdminRepository(db))
    >>> grant = await service.allow_by_system(target_admin_id, system_admin_id)
    >>> grant.expires_at - grant.allowed_at
    datetime.timedelta(days=1)
"""

import logging
from datetime import datetime, timedelta
from typing import NamedTuple

from shift_scheduler.domains.auth.admin import DEFAULT_PASSWORD_RESET_TTL, Role
from shift_scheduler.domains.auth.repository import AdminRepository
from shift_scheduler.domains.common import AdminID, NotFoundError, TenantID, UnauthorizedError
from shift_scheduler.utils.datetime import Clock, utc_now

logger = logging.getLogger(__name__)


class AdminNotFoundError(NotFoundError):
    """Raised when the target or caller admin does not exist."""

    def __init__(self, admin_id: str) -> None:
        super().__init__("admin", admin_id)


class OwnerRequiredError(UnauthorizedError):
    """Raised when a non-owner tries to authorize a password reset."""

    def __init__(self) -> None:
        super().__init__("only the tenant owner can allow password resets")


class AdminPasswordResetGrant(NamedTuple):
    """Password reset window opened by a system admin."""

    target_admin_id: str
    target_email: str
    tenant_id: str
    allowed_at: datetime
    expires_at: datetime


class OwnerPasswordResetGrant(NamedTuple):
    """Password reset window opened by the tenant owner."""

    target_admin_id: str
    target_email: str
    allowed_at: datetime
    expires_at: datetime
    allowed_by_name: str


class AdminPasswordResetService:
    """Opens password reset windows for tenant admins.

    Attributes:
        _repository: Admin persistence.
        _clock: Source of the current time.
        _grant_ttl: Length of the reset window.
    """

    def __init__(
        self,
        repository: AdminRepository,
        clock: Clock = utc_now,
        grant_ttl: timedelta = DEFAULT_PASSWORD_RESET_TTL,
    ) -> None:
        self._repository = repository
        self._clock = clock
        self._grant_ttl = grant_ttl

    async def allow_by_system(
        self,
        target_admin_id: AdminID,
        system_admin_id: str,
    ) -> AdminPasswordResetGrant:
        """Allow a password reset for any tenant admin.

        The owner-role check does not apply: system admins act across
        tenants. The system admin ID is only recorded in the audit log.

        Args:
            target_admin_id: Admin whose password may be reset.
            system_admin_id: Acting platform operator.

        Returns:
            AdminPasswordResetGrant describing the opened window.

        Raises:
            AdminNotFoundError: If the target admin does not exist.
        """
        target = await self._repository.find_by_id(target_admin_id)
        if target is None:
            raise AdminNotFoundError(target_admin_id)

        now = self._clock()
        target.allow_password_reset_by_system(now, self._grant_ttl)
        await self._repository.save(target)

        logger.info(
            "Password reset allowed by system admin %s for admin %s (tenant %s)",
            system_admin_id,
            target.admin_id,
            target.tenant_id,
        )

        return AdminPasswordResetGrant(
            target_admin_id=target.admin_id,
            target_email=target.email,
            tenant_id=target.tenant_id,
            allowed_at=now,
            expires_at=target.password_reset_expires_at,
        )

    async def allow_by_owner(
        self,
        tenant_id: TenantID,
        caller_admin_id: AdminID,
        caller_role: Role,
        target_admin_id: AdminID,
    ) -> OwnerPasswordResetGrant:
        """Allow a password reset for another admin of the caller's tenant.

        Raises:
            OwnerRequiredError: If the caller is not an owner.
            AdminNotFoundError: If the target or caller is not in the tenant.
            ValidationError: If the caller targets themselves.
        """
        if caller_role != Role.OWNER:
            raise OwnerRequiredError()

        target = await self._repository.find_by_id_with_tenant(tenant_id, target_admin_id)
        if target is None:
            raise AdminNotFoundError(target_admin_id)

        caller = await self._repository.find_by_id_with_tenant(tenant_id, caller_admin_id)
        if caller is None:
            raise AdminNotFoundError(caller_admin_id)

        now = self._clock()
        target.allow_password_reset(now, caller.admin_id, self._grant_ttl)
        await self._repository.save(target)

        logger.info(
            "Password reset allowed by owner %s for admin %s",
            caller.admin_id,
            target.admin_id,
        )

        return OwnerPasswordResetGrant(
            target_admin_id=target.admin_id,
            target_email=target.email,
            allowed_at=now,
            expires_at=target.password_reset_expires_at,
            allowed_by_name=caller.display_name,
        )
