# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Tenant repository interface."""

from abc import ABC, abstractmethod

from shift_scheduler.domains.common import TenantID
from shift_scheduler.domains.tenant.entity import Tenant


class TenantRepository(ABC):
    """Persistence port for tenants.

    Implementations return ``None`` for unknown or soft-deleted tenants.
    """

    @abstractmethod
    async def find_by_id(self, tenant_id: TenantID) -> Tenant | None:
        """Load a live tenant by ID."""

    @abstractmethod
    async def save(self, tenant: Tenant) -> None:
        """Insert or update a tenant."""
