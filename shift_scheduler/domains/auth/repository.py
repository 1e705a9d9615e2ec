# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Admin repository interface."""

from abc import ABC, abstractmethod

from shift_scheduler.domains.auth.admin import Admin
from shift_scheduler.domains.common import AdminID, TenantID


class AdminRepository(ABC):
    """Persistence port for admins.

    Finders return ``None`` for unknown or soft-deleted admins.
    """

    @abstractmethod
    async def find_by_id(self, admin_id: AdminID) -> Admin | None:
        """Look an admin up across all tenants."""

    @abstractmethod
    async def find_by_id_with_tenant(
        self, tenant_id: TenantID, admin_id: AdminID
    ) -> Admin | None:
        """Look an admin up within a single tenant."""

    @abstractmethod
    async def save(self, admin: Admin) -> None:
        """Insert or update an admin."""
