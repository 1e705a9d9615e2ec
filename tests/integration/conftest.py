# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Fixtures for HTTP API tests.

The application is built with create_app() and its service dependencies
are overridden with services over in-memory repositories and a frozen
clock. The lifespan is not entered, so no database is needed.
"""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from shift_scheduler.api.app import create_app
from shift_scheduler.api.dependencies import (
    get_admin_password_reset_service,
    get_tenant_service,
)
from shift_scheduler.domains.auth.admin import Admin
from shift_scheduler.domains.auth.jwt import USER_TYPE_ADMIN, USER_TYPE_SYSTEM_ADMIN, JWTManager
from shift_scheduler.domains.auth.password_reset_service import AdminPasswordResetService
from shift_scheduler.domains.tenant.service import TenantService
from shift_scheduler.utils.datetime import Clock


@pytest.fixture
def app(tenant_repository, admin_repository, clock: Clock) -> FastAPI:
    """Create the application with in-memory services."""
    application = create_app()
    application.dependency_overrides[get_tenant_service] = lambda: TenantService(
        tenant_repository, clock=clock
    )
    application.dependency_overrides[get_admin_password_reset_service] = (
        lambda: AdminPasswordResetService(admin_repository, clock=clock)
    )
    return application


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app, raise_server_exceptions=False)


def bearer(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def system_admin_headers(jwt_manager: JWTManager, system_admin_id: str) -> dict[str, str]:
    token = jwt_manager.create_access_token(
        user_id=system_admin_id,
        user_type=USER_TYPE_SYSTEM_ADMIN,
    )
    return bearer(token)


@pytest.fixture
def owner_headers(jwt_manager: JWTManager, owner: Admin) -> dict[str, str]:
    token = jwt_manager.create_access_token(
        user_id=owner.admin_id,
        tenant_id=owner.tenant_id,
        user_type=USER_TYPE_ADMIN,
        role=owner.role.value,
    )
    return bearer(token)


@pytest.fixture
def manager_headers(jwt_manager: JWTManager, manager: Admin) -> dict[str, str]:
    token = jwt_manager.create_access_token(
        user_id=manager.admin_id,
        tenant_id=manager.tenant_id,
        user_type=USER_TYPE_ADMIN,
        role=manager.role.value,
    )
    return bearer(token)
