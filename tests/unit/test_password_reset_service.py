# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Unit tests for password reset authorization."""

from datetime import datetime, timedelta

import pytest

from shift_scheduler.domains.auth.admin import Admin, Role
from shift_scheduler.domains.auth.password_reset_service import (
    AdminNotFoundError,
    AdminPasswordResetService,
    OwnerRequiredError,
)
from shift_scheduler.domains.common import ValidationError
from shift_scheduler.utils.datetime import Clock

UNKNOWN_ADMIN_ID = "44444444-4444-4444-8444-444444444444"


@pytest.fixture
def reset_service(admin_repository, clock: Clock) -> AdminPasswordResetService:
    return AdminPasswordResetService(admin_repository, clock=clock)


@pytest.mark.unit
class TestAllowBySystem:
    """Tests for AdminPasswordResetService.allow_by_system."""

    @pytest.mark.asyncio
    async def test_grant_fields(
        self,
        reset_service: AdminPasswordResetService,
        manager: Admin,
        system_admin_id: str,
        now: datetime,
    ) -> None:
        grant = await reset_service.allow_by_system(manager.admin_id, system_admin_id)

        assert grant.target_admin_id == manager.admin_id
        assert grant.target_email == "manager@example.com"
        assert grant.tenant_id == manager.tenant_id
        assert grant.allowed_at == now
        assert grant.expires_at == now + timedelta(hours=24)

    @pytest.mark.asyncio
    async def test_persists_allowance(
        self,
        reset_service: AdminPasswordResetService,
        admin_repository,
        manager: Admin,
        system_admin_id: str,
        now: datetime,
    ) -> None:
        await reset_service.allow_by_system(manager.admin_id, system_admin_id)

        saved = admin_repository.saved[-1]
        assert saved.admin_id == manager.admin_id
        assert saved.is_password_reset_allowed(now)
        assert saved.password_reset_allowed_by is None

    @pytest.mark.asyncio
    async def test_works_across_tenants(
        self,
        reset_service: AdminPasswordResetService,
        foreign_manager: Admin,
        system_admin_id: str,
    ) -> None:
        grant = await reset_service.allow_by_system(foreign_manager.admin_id, system_admin_id)

        assert grant.tenant_id == foreign_manager.tenant_id

    @pytest.mark.asyncio
    async def test_works_for_owner(
        self,
        reset_service: AdminPasswordResetService,
        owner: Admin,
        system_admin_id: str,
    ) -> None:
        grant = await reset_service.allow_by_system(owner.admin_id, system_admin_id)

        assert grant.target_admin_id == owner.admin_id

    @pytest.mark.asyncio
    async def test_unknown_admin(
        self,
        reset_service: AdminPasswordResetService,
        admin_repository,
        system_admin_id: str,
    ) -> None:
        with pytest.raises(AdminNotFoundError):
            await reset_service.allow_by_system(UNKNOWN_ADMIN_ID, system_admin_id)

        assert admin_repository.saved == []

    @pytest.mark.asyncio
    async def test_configured_ttl(
        self,
        admin_repository,
        clock: Clock,
        manager: Admin,
        system_admin_id: str,
        now: datetime,
    ) -> None:
        service = AdminPasswordResetService(
            admin_repository, clock=clock, grant_ttl=timedelta(hours=6)
        )

        grant = await service.allow_by_system(manager.admin_id, system_admin_id)

        assert grant.expires_at == now + timedelta(hours=6)


@pytest.mark.unit
class TestAllowByOwner:
    """Tests for AdminPasswordResetService.allow_by_owner."""

    @pytest.mark.asyncio
    async def test_owner_allows_manager(
        self,
        reset_service: AdminPasswordResetService,
        owner: Admin,
        manager: Admin,
        now: datetime,
    ) -> None:
        grant = await reset_service.allow_by_owner(
            tenant_id=owner.tenant_id,
            caller_admin_id=owner.admin_id,
            caller_role=Role.OWNER,
            target_admin_id=manager.admin_id,
        )

        assert grant.target_admin_id == manager.admin_id
        assert grant.allowed_by_name == "Owner Yamada"
        assert grant.expires_at - grant.allowed_at == timedelta(hours=24)
        assert manager.password_reset_allowed_by == owner.admin_id

    @pytest.mark.asyncio
    async def test_manager_cannot_allow(
        self,
        reset_service: AdminPasswordResetService,
        admin_repository,
        owner: Admin,
        manager: Admin,
    ) -> None:
        with pytest.raises(OwnerRequiredError):
            await reset_service.allow_by_owner(
                tenant_id=manager.tenant_id,
                caller_admin_id=manager.admin_id,
                caller_role=Role.MANAGER,
                target_admin_id=owner.admin_id,
            )

        assert admin_repository.saved == []

    @pytest.mark.asyncio
    async def test_target_in_other_tenant_is_not_found(
        self,
        reset_service: AdminPasswordResetService,
        owner: Admin,
        foreign_manager: Admin,
    ) -> None:
        with pytest.raises(AdminNotFoundError):
            await reset_service.allow_by_owner(
                tenant_id=owner.tenant_id,
                caller_admin_id=owner.admin_id,
                caller_role=Role.OWNER,
                target_admin_id=foreign_manager.admin_id,
            )

    @pytest.mark.asyncio
    async def test_unknown_caller_is_not_found(
        self,
        reset_service: AdminPasswordResetService,
        manager: Admin,
    ) -> None:
        with pytest.raises(AdminNotFoundError):
            await reset_service.allow_by_owner(
                tenant_id=manager.tenant_id,
                caller_admin_id=UNKNOWN_ADMIN_ID,
                caller_role=Role.OWNER,
                target_admin_id=manager.admin_id,
            )

    @pytest.mark.asyncio
    async def test_owner_cannot_allow_self(
        self,
        reset_service: AdminPasswordResetService,
        owner: Admin,
    ) -> None:
        with pytest.raises(ValidationError):
            await reset_service.allow_by_owner(
                tenant_id=owner.tenant_id,
                caller_admin_id=owner.admin_id,
                caller_role=Role.OWNER,
                target_admin_id=owner.admin_id,
            )
