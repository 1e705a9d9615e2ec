# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Tenant profile use cases.

Example:
    >>> service = TenantService(SQLAlchemyTenantRepository(db))
    >>> tenant = await service.update_tenant(tenant_id, "Night Shift Club")
"""

import logging

from shift_scheduler.domains.common import NotFoundError, TenantID
from shift_scheduler.domains.tenant.entity import Tenant
from shift_scheduler.domains.tenant.repository import TenantRepository
from shift_scheduler.utils.datetime import Clock, utc_now

logger = logging.getLogger(__name__)


class TenantService:
    """Reads and updates the profile of a single tenant.

    Attributes:
        _repository: Tenant persistence.
        _clock: Source of the current time.
    """

    def __init__(self, repository: TenantRepository, clock: Clock = utc_now) -> None:
        self._repository = repository
        self._clock = clock

    async def get_tenant(self, tenant_id: TenantID) -> Tenant:
        """Get a tenant by ID.

        Raises:
            NotFoundError: If the tenant does not exist.
        """
        tenant = await self._repository.find_by_id(tenant_id)
        if tenant is None:
            raise NotFoundError("tenant", tenant_id)
        return tenant

    async def update_tenant(self, tenant_id: TenantID, tenant_name: str) -> Tenant:
        """Rename a tenant.

        Args:
            tenant_id: Tenant to update.
            tenant_name: New display name.

        Returns:
            The updated tenant.

        Raises:
            NotFoundError: If the tenant does not exist.
            ValidationError: If the new name is invalid.
        """
        tenant = await self.get_tenant(tenant_id)
        tenant.update_tenant_name(self._clock(), tenant_name)
        await self._repository.save(tenant)

        logger.info("Tenant renamed: %s", tenant_id)
        return tenant
