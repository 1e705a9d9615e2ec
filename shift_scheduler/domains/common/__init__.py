# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Shared domain building blocks: identifiers and the error hierarchy."""

from shift_scheduler.domains.common.errors import (
    ERR_CONFLICT,
    ERR_INVALID_INPUT,
    ERR_INVARIANT_VIOLATION,
    ERR_NOT_FOUND,
    ERR_UNAUTHORIZED,
    ConflictError,
    DomainError,
    InvariantViolationError,
    NotFoundError,
    UnauthorizedError,
    ValidationError,
)
from shift_scheduler.domains.common.ids import (
    AdminID,
    TenantID,
    new_admin_id,
    new_tenant_id,
    parse_admin_id,
    parse_tenant_id,
)

__all__ = [
    "DomainError",
    "NotFoundError",
    "ValidationError",
    "ConflictError",
    "UnauthorizedError",
    "InvariantViolationError",
    "ERR_NOT_FOUND",
    "ERR_INVALID_INPUT",
    "ERR_CONFLICT",
    "ERR_UNAUTHORIZED",
    "ERR_INVARIANT_VIOLATION",
    "TenantID",
    "AdminID",
    "parse_tenant_id",
    "parse_admin_id",
    "new_tenant_id",
    "new_admin_id",
]
