# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Unit tests for the Tenant aggregate."""

from datetime import datetime, timedelta, timezone

import pytest

from shift_scheduler.domains.common import ValidationError
from shift_scheduler.domains.tenant.entity import (
    DEFAULT_GRACE_PERIOD_DAYS,
    Tenant,
    TenantStatus,
    calculate_grace_until,
)


@pytest.mark.unit
class TestTenantCreation:
    """Tests for constructing tenants."""

    def test_create_sets_defaults(self, now: datetime) -> None:
        tenant = Tenant.create(now, "Night Shift Crew", "Asia/Tokyo")

        assert tenant.tenant_name == "Night Shift Crew"
        assert tenant.timezone == "Asia/Tokyo"
        assert tenant.is_active is True
        assert tenant.status == TenantStatus.ACTIVE
        assert tenant.created_at == now
        assert tenant.updated_at == now
        assert tenant.deleted_at is None

    def test_create_generates_distinct_ids(self, now: datetime) -> None:
        first = Tenant.create(now, "A", "UTC")
        second = Tenant.create(now, "B", "UTC")

        assert first.tenant_id != second.tenant_id

    def test_empty_name_rejected(self, now: datetime) -> None:
        with pytest.raises(ValidationError, match="tenant_name is required"):
            Tenant.create(now, "", "Asia/Tokyo")

    def test_name_over_255_chars_rejected(self, now: datetime) -> None:
        with pytest.raises(ValidationError):
            Tenant.create(now, "x" * 256, "Asia/Tokyo")

    def test_name_of_255_chars_accepted(self, now: datetime) -> None:
        tenant = Tenant.create(now, "x" * 255, "Asia/Tokyo")

        assert len(tenant.tenant_name) == 255

    def test_unknown_timezone_rejected(self, now: datetime) -> None:
        with pytest.raises(ValidationError, match="invalid timezone format"):
            Tenant.create(now, "Crew", "Mars/Olympus_Mons")

    def test_malformed_tenant_id_rejected(self, now: datetime) -> None:
        with pytest.raises(ValidationError, match="invalid tenant_id format"):
            Tenant(
                tenant_id="not-a-uuid",
                tenant_name="Crew",
                timezone="UTC",
                created_at=now,
                updated_at=now,
            )

    def test_status_string_is_coerced(self, now: datetime, sample_tenant_id: str) -> None:
        tenant = Tenant(
            tenant_id=sample_tenant_id,
            tenant_name="Crew",
            timezone="UTC",
            created_at=now,
            updated_at=now,
            status="grace",
            is_active=False,
        )

        assert tenant.status is TenantStatus.GRACE


@pytest.mark.unit
class TestTenantRename:
    """Tests for update_tenant_name."""

    def test_rename_bumps_updated_at_only(self, sample_tenant: Tenant, now: datetime) -> None:
        created_at = sample_tenant.created_at
        timezone_name = sample_tenant.timezone

        sample_tenant.update_tenant_name(now, "Renamed Crew")

        assert sample_tenant.tenant_name == "Renamed Crew"
        assert sample_tenant.updated_at == now
        assert sample_tenant.created_at == created_at
        assert sample_tenant.timezone == timezone_name
        assert sample_tenant.is_active is True

    def test_rename_to_empty_keeps_old_name(self, sample_tenant: Tenant, now: datetime) -> None:
        with pytest.raises(ValidationError):
            sample_tenant.update_tenant_name(now, "")

        assert sample_tenant.tenant_name == "VRC Event Team"
        assert sample_tenant.updated_at != now

    def test_rename_too_long_rejected(self, sample_tenant: Tenant, now: datetime) -> None:
        with pytest.raises(ValidationError):
            sample_tenant.update_tenant_name(now, "x" * 256)

    def test_update_timezone(self, sample_tenant: Tenant, now: datetime) -> None:
        sample_tenant.update_timezone(now, "Europe/Berlin")

        assert sample_tenant.timezone == "Europe/Berlin"
        assert sample_tenant.updated_at == now


@pytest.mark.unit
class TestTenantStatus:
    """Tests for the billing status lifecycle."""

    @pytest.mark.parametrize(
        ("current", "target", "allowed"),
        [
            (TenantStatus.PENDING_PAYMENT, TenantStatus.ACTIVE, True),
            (TenantStatus.PENDING_PAYMENT, TenantStatus.SUSPENDED, True),
            (TenantStatus.PENDING_PAYMENT, TenantStatus.GRACE, False),
            (TenantStatus.ACTIVE, TenantStatus.GRACE, True),
            (TenantStatus.ACTIVE, TenantStatus.SUSPENDED, True),
            (TenantStatus.ACTIVE, TenantStatus.PENDING_PAYMENT, False),
            (TenantStatus.GRACE, TenantStatus.ACTIVE, True),
            (TenantStatus.GRACE, TenantStatus.SUSPENDED, True),
            (TenantStatus.GRACE, TenantStatus.PENDING_PAYMENT, False),
            (TenantStatus.SUSPENDED, TenantStatus.PENDING_PAYMENT, True),
            (TenantStatus.SUSPENDED, TenantStatus.ACTIVE, True),
            (TenantStatus.SUSPENDED, TenantStatus.GRACE, False),
            (TenantStatus.GRACE, TenantStatus.GRACE, True),
        ],
    )
    def test_transition_table(
        self,
        current: TenantStatus,
        target: TenantStatus,
        allowed: bool,
    ) -> None:
        assert current.can_transition_to(target) is allowed

    def test_grace_after_subscription_end(self, sample_tenant: Tenant, now: datetime) -> None:
        period_end = datetime(2025, 1, 10, tzinfo=timezone.utc)

        sample_tenant.transition_to_grace_after_subscription_end(now, period_end)

        assert sample_tenant.status == TenantStatus.GRACE
        assert sample_tenant.grace_until == period_end + timedelta(days=14)
        assert sample_tenant.is_active is False
        assert sample_tenant.can_write() is False
        assert sample_tenant.can_read() is True

    def test_calculate_grace_until(self) -> None:
        period_end = datetime(2025, 3, 1, tzinfo=timezone.utc)

        assert calculate_grace_until(period_end) == period_end + timedelta(
            days=DEFAULT_GRACE_PERIOD_DAYS
        )

    def test_reactivation_clears_grace(self, sample_tenant: Tenant, now: datetime) -> None:
        sample_tenant.set_status_grace(now, now + timedelta(days=14))

        sample_tenant.set_status_active(now)

        assert sample_tenant.status == TenantStatus.ACTIVE
        assert sample_tenant.is_active is True
        assert sample_tenant.grace_until is None

    def test_invalid_transition_rejected(self, sample_tenant: Tenant, now: datetime) -> None:
        with pytest.raises(ValidationError, match="invalid status transition"):
            sample_tenant.set_status_pending_payment(now, now + timedelta(days=3))

        assert sample_tenant.status == TenantStatus.ACTIVE

    def test_pending_payment_cannot_read(self, sample_tenant: Tenant, now: datetime) -> None:
        sample_tenant.set_status_suspended(now)
        sample_tenant.set_status_pending_payment(now, now + timedelta(days=3))

        assert sample_tenant.pending_expires_at == now + timedelta(days=3)
        assert sample_tenant.can_read() is False
        assert sample_tenant.can_write() is False

    def test_deleted_tenant_cannot_read_or_write(
        self, sample_tenant: Tenant, now: datetime
    ) -> None:
        sample_tenant.delete(now)

        assert sample_tenant.is_deleted
        assert sample_tenant.can_read() is False
        assert sample_tenant.can_write() is False
