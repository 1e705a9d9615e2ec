# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Tenant domain: the tenant aggregate and its profile use cases."""

from shift_scheduler.domains.tenant.entity import (
    DEFAULT_GRACE_PERIOD_DAYS,
    Tenant,
    TenantStatus,
    calculate_grace_until,
)
from shift_scheduler.domains.tenant.repository import TenantRepository
from shift_scheduler.domains.tenant.service import TenantService

__all__ = [
    "Tenant",
    "TenantStatus",
    "TenantRepository",
    "TenantService",
    "DEFAULT_GRACE_PERIOD_DAYS",
    "calculate_grace_until",
]
