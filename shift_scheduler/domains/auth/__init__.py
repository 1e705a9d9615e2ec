# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Auth domain.

This module provides:
- Admin aggregate and roles
- Password reset authorization (system admin and tenant owner)
- JWT access token decoding
"""

from shift_scheduler.domains.auth.admin import DEFAULT_PASSWORD_RESET_TTL, Admin, Role
from shift_scheduler.domains.auth.jwt import (
    USER_TYPE_ADMIN,
    USER_TYPE_SYSTEM_ADMIN,
    InvalidTokenError,
    JWTError,
    JWTManager,
    TokenExpiredError,
    TokenPayload,
)
from shift_scheduler.domains.auth.password_reset_service import (
    AdminNotFoundError,
    AdminPasswordResetGrant,
    AdminPasswordResetService,
    OwnerPasswordResetGrant,
    OwnerRequiredError,
)
from shift_scheduler.domains.auth.repository import AdminRepository

__all__ = [
    "Admin",
    "Role",
    "DEFAULT_PASSWORD_RESET_TTL",
    "AdminRepository",
    "AdminPasswordResetService",
    "AdminPasswordResetGrant",
    "OwnerPasswordResetGrant",
    "AdminNotFoundError",
    "OwnerRequiredError",
    "JWTManager",
    "TokenPayload",
    "JWTError",
    "TokenExpiredError",
    "InvalidTokenError",
    "USER_TYPE_ADMIN",
    "USER_TYPE_SYSTEM_ADMIN",
]
