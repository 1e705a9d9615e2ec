# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""SQLAlchemy ORM models for tenants and admins."""

from datetime import datetime

from sqlalchemy import Boolean, DateTime, ForeignKey, String, Uuid
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from shift_scheduler.utils.datetime import utc_now


class Base(DeclarativeBase):
    """Declarative base for all models."""

    pass


class TimestampMixin:
    """created_at / updated_at columns stored as TIMESTAMPTZ."""

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utc_now
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utc_now
    )


class TenantModel(TimestampMixin, Base):
    """Tenant row."""

    __tablename__ = "tenants"

    tenant_id: Mapped[str] = mapped_column(Uuid(as_uuid=False), primary_key=True)
    tenant_name: Mapped[str] = mapped_column(String(255), nullable=False)
    timezone: Mapped[str] = mapped_column(String(50), nullable=False, default="Asia/Tokyo")
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="active")
    grace_until: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    pending_expires_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    deleted_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))


class AdminModel(TimestampMixin, Base):
    """Tenant admin row."""

    __tablename__ = "admins"

    admin_id: Mapped[str] = mapped_column(Uuid(as_uuid=False), primary_key=True)
    tenant_id: Mapped[str] = mapped_column(
        Uuid(as_uuid=False),
        ForeignKey("tenants.tenant_id"),
        nullable=False,
        index=True,
    )
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    display_name: Mapped[str] = mapped_column(String(255), nullable=False)
    role: Mapped[str] = mapped_column(String(20), nullable=False)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    deleted_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    password_reset_allowed_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    password_reset_expires_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    # NULL when a system admin authorized the reset
    password_reset_allowed_by: Mapped[str | None] = mapped_column(
        Uuid(as_uuid=False), ForeignKey("admins.admin_id")
    )
