# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Database infrastructure: async engine, ORM models and repositories."""

from shift_scheduler.infrastructure.database.connection import (
    DatabaseError,
    check_database_connection,
    close_database,
    get_session,
    get_sessionmaker,
    init_database,
)
from shift_scheduler.infrastructure.database.models import AdminModel, Base, TenantModel
from shift_scheduler.infrastructure.database.repositories import (
    SQLAlchemyAdminRepository,
    SQLAlchemyTenantRepository,
)

__all__ = [
    "DatabaseError",
    "init_database",
    "close_database",
    "get_session",
    "get_sessionmaker",
    "check_database_connection",
    "Base",
    "TenantModel",
    "AdminModel",
    "SQLAlchemyTenantRepository",
    "SQLAlchemyAdminRepository",
]
