# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""System administration API endpoints.

This module provides API routes for platform operators:
- /admin/admins - Operations on tenant admins (password reset authorization)

These routes carry no tenant context.
"""

from fastapi import APIRouter

from shift_scheduler.api.v1.admin.admins import router as admins_router

router = APIRouter(prefix="/admin", tags=["System Administration"])

router.include_router(admins_router, prefix="/admins", tags=["System Admin Operations"])

__all__ = ["router"]
