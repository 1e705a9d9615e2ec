# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Tenant aggregate.

A tenant is the organization unit that owns members, events and shifts.
Besides its profile (name, timezone) it carries a billing status with a
fixed lifecycle:

    pending_payment -> active | suspended
    active          -> grace | suspended
    grace           -> active | suspended
    suspended       -> pending_payment | active

Same-status transitions are accepted (e.g. a renewal that keeps the tenant
active). Only an active tenant is flagged ``is_active``.
"""

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from enum import Enum
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from shift_scheduler.domains.common import TenantID, ValidationError, new_tenant_id, parse_tenant_id

MAX_TENANT_NAME_LENGTH = 255
MAX_TIMEZONE_LENGTH = 50
DEFAULT_GRACE_PERIOD_DAYS = 14


class TenantStatus(str, Enum):
    """Billing status of a tenant."""

    ACTIVE = "active"
    GRACE = "grace"
    SUSPENDED = "suspended"
    PENDING_PAYMENT = "pending_payment"

    def can_transition_to(self, new_status: "TenantStatus") -> bool:
        if self == new_status:
            return True
        return new_status in _VALID_TRANSITIONS.get(self, ())


_VALID_TRANSITIONS: dict[TenantStatus, tuple[TenantStatus, ...]] = {
    TenantStatus.PENDING_PAYMENT: (TenantStatus.ACTIVE, TenantStatus.SUSPENDED),
    TenantStatus.ACTIVE: (TenantStatus.GRACE, TenantStatus.SUSPENDED),
    TenantStatus.GRACE: (TenantStatus.ACTIVE, TenantStatus.SUSPENDED),
    TenantStatus.SUSPENDED: (TenantStatus.PENDING_PAYMENT, TenantStatus.ACTIVE),
}


def calculate_grace_until(period_end: datetime) -> datetime:
    """Grace period end for a subscription that ended at ``period_end``."""
    return period_end + timedelta(days=DEFAULT_GRACE_PERIOD_DAYS)


def _validate_tenant_name(tenant_name: str) -> None:
    if not tenant_name:
        raise ValidationError("tenant_name is required")
    if len(tenant_name) > MAX_TENANT_NAME_LENGTH:
        raise ValidationError(
            f"tenant_name must be less than {MAX_TENANT_NAME_LENGTH} characters"
        )


def _validate_timezone(timezone_name: str) -> None:
    if not timezone_name:
        raise ValidationError("timezone is required")
    if len(timezone_name) > MAX_TIMEZONE_LENGTH:
        raise ValidationError(
            f"timezone must be less than {MAX_TIMEZONE_LENGTH} characters"
        )
    try:
        ZoneInfo(timezone_name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise ValidationError("invalid timezone format", e) from e


@dataclass
class Tenant:
    """Tenant aggregate root.

    Use ``Tenant.create`` for new tenants; the plain constructor rebuilds a
    tenant from persistence. Both paths validate the profile fields.
    """

    tenant_id: TenantID
    tenant_name: str
    timezone: str
    created_at: datetime
    updated_at: datetime
    is_active: bool = True
    status: TenantStatus = TenantStatus.ACTIVE
    grace_until: datetime | None = None
    pending_expires_at: datetime | None = None
    deleted_at: datetime | None = field(default=None)

    def __post_init__(self) -> None:
        self.tenant_id = parse_tenant_id(self.tenant_id)
        self.status = TenantStatus(self.status)
        _validate_tenant_name(self.tenant_name)
        _validate_timezone(self.timezone)

    @classmethod
    def create(cls, now: datetime, tenant_name: str, timezone: str) -> "Tenant":
        """Create a new active tenant."""
        return cls(
            tenant_id=new_tenant_id(),
            tenant_name=tenant_name,
            timezone=timezone,
            created_at=now,
            updated_at=now,
        )

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None

    def can_write(self) -> bool:
        """Write operations are allowed only for active, live tenants."""
        return self.status == TenantStatus.ACTIVE and not self.is_deleted

    def can_read(self) -> bool:
        return self.status != TenantStatus.PENDING_PAYMENT and not self.is_deleted

    def update_tenant_name(self, now: datetime, tenant_name: str) -> None:
        """Rename the tenant.

        Raises:
            ValidationError: If the name is empty or too long.
        """
        _validate_tenant_name(tenant_name)
        self.tenant_name = tenant_name
        self.updated_at = now

    def update_timezone(self, now: datetime, timezone: str) -> None:
        _validate_timezone(timezone)
        self.timezone = timezone
        self.updated_at = now

    def delete(self, now: datetime) -> None:
        """Soft-delete the tenant."""
        self.deleted_at = now
        self.updated_at = now

    # =========================================================================
    # Status lifecycle
    # =========================================================================

    def _transition(self, now: datetime, new_status: TenantStatus) -> None:
        if not self.status.can_transition_to(new_status):
            raise ValidationError(
                f"invalid status transition from {self.status.value} to {new_status.value}"
            )
        self.status = new_status
        self.is_active = new_status == TenantStatus.ACTIVE
        self.updated_at = now

    def set_status_active(self, now: datetime) -> None:
        self._transition(now, TenantStatus.ACTIVE)
        self.grace_until = None
        self.pending_expires_at = None

    def set_status_grace(self, now: datetime, grace_until: datetime) -> None:
        self._transition(now, TenantStatus.GRACE)
        self.grace_until = grace_until

    def transition_to_grace_after_subscription_end(
        self, now: datetime, period_end: datetime
    ) -> None:
        """Enter the grace period after a subscription ended at ``period_end``."""
        self.set_status_grace(now, calculate_grace_until(period_end))

    def set_status_suspended(self, now: datetime) -> None:
        self._transition(now, TenantStatus.SUSPENDED)
        self.grace_until = None
        self.pending_expires_at = None

    def set_status_pending_payment(self, now: datetime, expires_at: datetime) -> None:
        self._transition(now, TenantStatus.PENDING_PAYMENT)
        self.grace_until = None
        self.pending_expires_at = expires_at
