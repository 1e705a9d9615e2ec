# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Identifier helpers.

Tenant and admin identifiers are canonical lowercase UUID strings.
Parsing accepts any form ``uuid.UUID`` accepts and normalizes it.
"""

from typing import NewType
from uuid import UUID, uuid4

from shift_scheduler.domains.common.errors import ValidationError

TenantID = NewType("TenantID", str)
AdminID = NewType("AdminID", str)


def _parse_uuid(value: str | UUID | None, field: str) -> str:
    if isinstance(value, UUID):
        return str(value)
    if not value or not value.strip():
        raise ValidationError(f"{field} is required")
    try:
        return str(UUID(value.strip()))
    except ValueError as e:
        raise ValidationError(f"invalid {field} format", e) from e


def parse_tenant_id(value: str | UUID | None) -> TenantID:
    """Parse and normalize a tenant identifier.

    Raises:
        ValidationError: If the value is blank or not a UUID.
    """
    return TenantID(_parse_uuid(value, "tenant_id"))


def parse_admin_id(value: str | UUID | None) -> AdminID:
    """Parse and normalize an admin identifier.

    Raises:
        ValidationError: If the value is blank or not a UUID.
    """
    return AdminID(_parse_uuid(value, "admin_id"))


def new_tenant_id() -> TenantID:
    return TenantID(str(uuid4()))


def new_admin_id() -> AdminID:
    return AdminID(str(uuid4()))
