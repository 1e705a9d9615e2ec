# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""SQLAlchemy implementations of the domain repositories.

Repositories translate between ORM rows and domain entities. They flush
but never commit; the request-scoped session owns the transaction.
"""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from shift_scheduler.domains.auth.admin import Admin
from shift_scheduler.domains.auth.repository import AdminRepository
from shift_scheduler.domains.common import AdminID, TenantID
from shift_scheduler.domains.tenant.entity import Tenant
from shift_scheduler.domains.tenant.repository import TenantRepository
from shift_scheduler.infrastructure.database.models import AdminModel, TenantModel
from shift_scheduler.utils.datetime import ensure_utc

logger = logging.getLogger(__name__)


def _tenant_from_row(row: TenantModel) -> Tenant:
    return Tenant(
        tenant_id=row.tenant_id,
        tenant_name=row.tenant_name,
        timezone=row.timezone,
        is_active=row.is_active,
        status=row.status,
        grace_until=ensure_utc(row.grace_until),
        pending_expires_at=ensure_utc(row.pending_expires_at),
        created_at=ensure_utc(row.created_at),
        updated_at=ensure_utc(row.updated_at),
        deleted_at=ensure_utc(row.deleted_at),
    )


def _admin_from_row(row: AdminModel) -> Admin:
    return Admin(
        admin_id=row.admin_id,
        tenant_id=row.tenant_id,
        email=row.email,
        password_hash=row.password_hash,
        display_name=row.display_name,
        role=row.role,
        is_active=row.is_active,
        created_at=ensure_utc(row.created_at),
        updated_at=ensure_utc(row.updated_at),
        deleted_at=ensure_utc(row.deleted_at),
        password_reset_allowed_at=ensure_utc(row.password_reset_allowed_at),
        password_reset_expires_at=ensure_utc(row.password_reset_expires_at),
        password_reset_allowed_by=row.password_reset_allowed_by,
    )


class SQLAlchemyTenantRepository(TenantRepository):
    """Tenant repository backed by the ``tenants`` table."""

    def __init__(self, db: AsyncSession) -> None:
        self._db = db

    async def find_by_id(self, tenant_id: TenantID) -> Tenant | None:
        stmt = select(TenantModel).where(
            TenantModel.tenant_id == tenant_id,
            TenantModel.deleted_at.is_(None),
        )
        result = await self._db.execute(stmt)
        row = result.scalar_one_or_none()
        return _tenant_from_row(row) if row else None

    async def save(self, tenant: Tenant) -> None:
        row = await self._db.get(TenantModel, tenant.tenant_id)
        if row is None:
            row = TenantModel(tenant_id=tenant.tenant_id)
            self._db.add(row)

        row.tenant_name = tenant.tenant_name
        row.timezone = tenant.timezone
        row.is_active = tenant.is_active
        row.status = tenant.status.value
        row.grace_until = tenant.grace_until
        row.pending_expires_at = tenant.pending_expires_at
        row.created_at = tenant.created_at
        row.updated_at = tenant.updated_at
        row.deleted_at = tenant.deleted_at

        await self._db.flush()
        logger.debug("Tenant saved: %s", tenant.tenant_id)


class SQLAlchemyAdminRepository(AdminRepository):
    """Admin repository backed by the ``admins`` table."""

    def __init__(self, db: AsyncSession) -> None:
        self._db = db

    async def find_by_id(self, admin_id: AdminID) -> Admin | None:
        stmt = select(AdminModel).where(
            AdminModel.admin_id == admin_id,
            AdminModel.deleted_at.is_(None),
        )
        result = await self._db.execute(stmt)
        row = result.scalar_one_or_none()
        return _admin_from_row(row) if row else None

    async def find_by_id_with_tenant(
        self, tenant_id: TenantID, admin_id: AdminID
    ) -> Admin | None:
        stmt = select(AdminModel).where(
            AdminModel.tenant_id == tenant_id,
            AdminModel.admin_id == admin_id,
            AdminModel.deleted_at.is_(None),
        )
        result = await self._db.execute(stmt)
        row = result.scalar_one_or_none()
        return _admin_from_row(row) if row else None

    async def save(self, admin: Admin) -> None:
        row = await self._db.get(AdminModel, admin.admin_id)
        if row is None:
            row = AdminModel(admin_id=admin.admin_id)
            self._db.add(row)

        row.tenant_id = admin.tenant_id
        row.email = admin.email
        row.password_hash = admin.password_hash
        row.display_name = admin.display_name
        row.role = admin.role.value
        row.is_active = admin.is_active
        row.created_at = admin.created_at
        row.updated_at = admin.updated_at
        row.deleted_at = admin.deleted_at
        row.password_reset_allowed_at = admin.password_reset_allowed_at
        row.password_reset_expires_at = admin.password_reset_expires_at
        row.password_reset_allowed_by = admin.password_reset_allowed_by

        await self._db.flush()
        logger.debug("Admin saved: %s", admin.admin_id)
