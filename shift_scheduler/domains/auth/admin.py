# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Tenant admin aggregate.

Admins (owners and managers) operate a single tenant. Password hashing is
not a domain concern: the entity only holds the hash it was given.

A password reset must be authorized before the admin can reset their
password without the old one. The authorization opens a window of
``DEFAULT_PASSWORD_RESET_TTL`` starting at the moment it was granted.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum

from shift_scheduler.domains.common import (
    AdminID,
    TenantID,
    ValidationError,
    new_admin_id,
    parse_admin_id,
    parse_tenant_id,
)

DEFAULT_PASSWORD_RESET_TTL = timedelta(hours=24)
MAX_EMAIL_LENGTH = 255
MAX_DISPLAY_NAME_LENGTH = 255


class Role(str, Enum):
    """Admin role within a tenant."""

    OWNER = "owner"
    MANAGER = "manager"

    @classmethod
    def parse(cls, value: str) -> "Role":
        try:
            return cls(value)
        except ValueError as e:
            raise ValidationError(f"invalid role: {value}", e) from e


@dataclass
class Admin:
    """Admin aggregate root.

    Attributes:
        password_reset_allowed_by: Admin who authorized the current reset
            window, or None when a system admin authorized it.
    """

    admin_id: AdminID
    tenant_id: TenantID
    email: str
    password_hash: str
    display_name: str
    role: Role
    created_at: datetime
    updated_at: datetime
    is_active: bool = True
    deleted_at: datetime | None = None
    password_reset_allowed_at: datetime | None = None
    password_reset_expires_at: datetime | None = None
    password_reset_allowed_by: AdminID | None = None

    def __post_init__(self) -> None:
        self.admin_id = parse_admin_id(self.admin_id)
        self.tenant_id = parse_tenant_id(self.tenant_id)
        self.role = Role.parse(self.role) if not isinstance(self.role, Role) else self.role
        self._validate()

    def _validate(self) -> None:
        if not self.email:
            raise ValidationError("email is required")
        if len(self.email) > MAX_EMAIL_LENGTH:
            raise ValidationError("email must be less than 255 characters")
        if not self.password_hash:
            raise ValidationError("password_hash is required")
        if not self.display_name:
            raise ValidationError("display_name is required")
        if len(self.display_name) > MAX_DISPLAY_NAME_LENGTH:
            raise ValidationError("display_name must be less than 255 characters")

    @classmethod
    def create(
        cls,
        now: datetime,
        tenant_id: TenantID,
        email: str,
        password_hash: str,
        display_name: str,
        role: Role,
    ) -> "Admin":
        return cls(
            admin_id=new_admin_id(),
            tenant_id=tenant_id,
            email=email,
            password_hash=password_hash,
            display_name=display_name,
            role=role,
            created_at=now,
            updated_at=now,
        )

    # =========================================================================
    # Password reset allowance
    # =========================================================================

    def allow_password_reset(
        self,
        now: datetime,
        allowed_by: AdminID,
        ttl: timedelta = DEFAULT_PASSWORD_RESET_TTL,
    ) -> None:
        """Authorize a password reset on behalf of another admin.

        Raises:
            ValidationError: If the admin tries to authorize their own reset.
        """
        if allowed_by == self.admin_id:
            raise ValidationError("cannot allow password reset for yourself")
        self._open_reset_window(now, ttl)
        self.password_reset_allowed_by = allowed_by

    def allow_password_reset_by_system(
        self,
        now: datetime,
        ttl: timedelta = DEFAULT_PASSWORD_RESET_TTL,
    ) -> None:
        """Authorize a password reset on behalf of a system admin.

        System admins are not admin rows, so no authorizer is recorded.
        """
        self._open_reset_window(now, ttl)
        self.password_reset_allowed_by = None

    def _open_reset_window(self, now: datetime, ttl: timedelta) -> None:
        self.password_reset_allowed_at = now
        self.password_reset_expires_at = now + ttl
        self.updated_at = now

    def is_password_reset_allowed(self, now: datetime) -> bool:
        if self.password_reset_expires_at is None:
            return False
        return now < self.password_reset_expires_at
