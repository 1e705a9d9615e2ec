# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Pytest configuration and shared fixtures.

This module provides fixtures used across all test types:
- Unit tests (entities, services, JWT, settings)
- Integration tests (HTTP API through FastAPI's TestClient)

Repositories are replaced by in-memory implementations so that the API
tests exercise the real domain services without a database.
"""

from collections.abc import Generator
from datetime import datetime, timezone

import pytest

from shift_scheduler.api.middleware.rate_limit import limiter
from shift_scheduler.core.config import clear_settings_cache, get_settings
from shift_scheduler.domains.auth.admin import Admin, Role
from shift_scheduler.domains.auth.jwt import JWTManager
from shift_scheduler.domains.auth.repository import AdminRepository
from shift_scheduler.domains.common import AdminID, TenantID
from shift_scheduler.domains.tenant.entity import Tenant
from shift_scheduler.domains.tenant.repository import TenantRepository
from shift_scheduler.utils.datetime import Clock, fixed_clock

FIXED_NOW = datetime(2025, 1, 15, 9, 30, 0, tzinfo=timezone.utc)


# =============================================================================
# In-memory repositories
# =============================================================================


class InMemoryTenantRepository(TenantRepository):
    def __init__(self, *tenants: Tenant) -> None:
        self.tenants: dict[str, Tenant] = {t.tenant_id: t for t in tenants}
        self.saved: list[Tenant] = []

    async def find_by_id(self, tenant_id: TenantID) -> Tenant | None:
        tenant = self.tenants.get(tenant_id)
        if tenant is None or tenant.is_deleted:
            return None
        return tenant

    async def save(self, tenant: Tenant) -> None:
        self.tenants[tenant.tenant_id] = tenant
        self.saved.append(tenant)


class InMemoryAdminRepository(AdminRepository):
    def __init__(self, *admins: Admin) -> None:
        self.admins: dict[str, Admin] = {a.admin_id: a for a in admins}
        self.saved: list[Admin] = []

    async def find_by_id(self, admin_id: AdminID) -> Admin | None:
        admin = self.admins.get(admin_id)
        if admin is None or admin.deleted_at is not None:
            return None
        return admin

    async def find_by_id_with_tenant(
        self, tenant_id: TenantID, admin_id: AdminID
    ) -> Admin | None:
        admin = await self.find_by_id(admin_id)
        if admin is None or admin.tenant_id != tenant_id:
            return None
        return admin

    async def save(self, admin: Admin) -> None:
        self.admins[admin.admin_id] = admin
        self.saved.append(admin)


# =============================================================================
# Environment Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def reset_rate_limiter() -> Generator[None, None, None]:
    """Start every test with empty rate limit counters."""
    limiter.reset()
    yield
    limiter.reset()


@pytest.fixture
def clean_settings() -> Generator[None, None, None]:
    """Reload settings from the environment around a test."""
    clear_settings_cache()
    yield
    clear_settings_cache()


# =============================================================================
# Marker Configuration
# =============================================================================


def pytest_configure(config: pytest.Config) -> None:
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test (HTTP API)"
    )


# =============================================================================
# Helper Fixtures
# =============================================================================


@pytest.fixture
def now() -> datetime:
    return FIXED_NOW


@pytest.fixture
def clock() -> Clock:
    """Provide a clock frozen at FIXED_NOW."""
    return fixed_clock(FIXED_NOW)


@pytest.fixture
def sample_tenant_id() -> str:
    """Provide a sample tenant ID for testing."""
    return "550e8400-e29b-41d4-a716-446655440000"


@pytest.fixture
def other_tenant_id() -> str:
    return "550e8400-e29b-41d4-a716-4466554400ff"


@pytest.fixture
def sample_tenant(sample_tenant_id: str) -> Tenant:
    created = datetime(2024, 12, 1, 0, 0, 0, tzinfo=timezone.utc)
    return Tenant(
        tenant_id=sample_tenant_id,
        tenant_name="VRC Event Team",
        timezone="Asia/Tokyo",
        created_at=created,
        updated_at=created,
    )


def make_admin(
    admin_id: str,
    tenant_id: str,
    role: Role,
    display_name: str,
    email: str,
) -> Admin:
    created = datetime(2024, 12, 1, 0, 0, 0, tzinfo=timezone.utc)
    return Admin(
        admin_id=admin_id,
        tenant_id=tenant_id,
        email=email,
        password_hash="$2a$10$hashed",
        display_name=display_name,
        role=role,
        created_at=created,
        updated_at=created,
    )


@pytest.fixture
def owner(sample_tenant_id: str) -> Admin:
    return make_admin(
        "11111111-1111-4111-8111-111111111111",
        sample_tenant_id,
        Role.OWNER,
        "Owner Yamada",
        "owner@example.com",
    )


@pytest.fixture
def manager(sample_tenant_id: str) -> Admin:
    return make_admin(
        "22222222-2222-4222-8222-222222222222",
        sample_tenant_id,
        Role.MANAGER,
        "Manager Sato",
        "manager@example.com",
    )


@pytest.fixture
def foreign_manager(other_tenant_id: str) -> Admin:
    """An admin belonging to a different tenant."""
    return make_admin(
        "33333333-3333-4333-8333-333333333333",
        other_tenant_id,
        Role.MANAGER,
        "Manager Suzuki",
        "suzuki@example.com",
    )


@pytest.fixture
def system_admin_id() -> str:
    return "99999999-9999-4999-8999-999999999999"


@pytest.fixture
def jwt_manager() -> JWTManager:
    """JWT manager using the same settings as the application."""
    return JWTManager(get_settings().jwt)


@pytest.fixture
def tenant_repository(sample_tenant: Tenant) -> InMemoryTenantRepository:
    return InMemoryTenantRepository(sample_tenant)


@pytest.fixture
def admin_repository(
    owner: Admin,
    manager: Admin,
    foreign_manager: Admin,
) -> InMemoryAdminRepository:
    return InMemoryAdminRepository(owner, manager, foreign_manager)
