# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""API v1 routes package.

This package contains all v1 API endpoint definitions.
Each module provides a FastAPI router for a specific domain.

Modules:
    tenants: Current tenant profile endpoints.
    admins: Tenant admin management endpoints (owner only).
    admin: System administration endpoints.
"""

from fastapi import APIRouter

from shift_scheduler.api.v1 import admins, tenants
from shift_scheduler.api.v1.admin import router as admin_router

# Create the main v1 router
router = APIRouter(prefix="/api/v1")

# Include domain routers
router.include_router(tenants.router, prefix="/tenants", tags=["Tenants"])
router.include_router(admins.router, prefix="/admins", tags=["Admins"])

# System administration routes (no tenant context)
router.include_router(admin_router)

__all__ = ["router"]
