# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Tenant profile endpoints.

This module provides endpoints for the caller's own tenant:
- GET /me - Get the current tenant
- PUT /me - Rename the current tenant

The tenant comes from the request context (token claim or X-Tenant-ID
header), never from the path.
"""

import logging

import pydantic
from fastapi import APIRouter, Request
from pydantic import BaseModel, Field

from shift_scheduler.api.dependencies import (
    AuthenticatedUser,
    CurrentTenantID,
    TenantServiceDep,
)
from shift_scheduler.api.responses import (
    DataResponse,
    ErrorResponse,
    bad_request,
    from_domain_error,
)
from shift_scheduler.domains.common import DomainError
from shift_scheduler.domains.tenant.entity import Tenant
from shift_scheduler.utils.datetime import format_rfc3339

logger = logging.getLogger(__name__)

router = APIRouter()


class TenantResponse(BaseModel):
    """Tenant profile response."""

    tenant_id: str = Field(..., description="Tenant ID")
    tenant_name: str = Field(..., description="Display name")
    timezone: str = Field(..., description="IANA timezone name")
    is_active: bool = Field(..., description="Whether the tenant is active")
    created_at: str = Field(..., description="Creation timestamp (RFC3339)")
    updated_at: str = Field(..., description="Last update timestamp (RFC3339)")

    @classmethod
    def from_entity(cls, tenant: Tenant) -> "TenantResponse":
        return cls(
            tenant_id=tenant.tenant_id,
            tenant_name=tenant.tenant_name,
            timezone=tenant.timezone,
            is_active=tenant.is_active,
            created_at=format_rfc3339(tenant.created_at),
            updated_at=format_rfc3339(tenant.updated_at),
        )


class UpdateTenantRequest(BaseModel):
    """Tenant update request."""

    tenant_name: str = Field(default="", description="New display name")


# A JSON null body decodes to an empty request
_update_body = pydantic.TypeAdapter(UpdateTenantRequest | None)


_ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Missing tenant context or bad input"},
    401: {"model": ErrorResponse, "description": "Not authenticated"},
    404: {"model": ErrorResponse, "description": "Tenant not found"},
}


@router.get(
    "/me",
    response_model=DataResponse[TenantResponse],
    responses=_ERROR_RESPONSES,
    summary="Get current tenant",
)
async def get_current_tenant(
    current_user: AuthenticatedUser,
    tenant_id: CurrentTenantID,
    service: TenantServiceDep,
) -> DataResponse[TenantResponse]:
    try:
        tenant = await service.get_tenant(tenant_id)
    except DomainError as e:
        raise from_domain_error(e) from e

    return DataResponse(data=TenantResponse.from_entity(tenant))


@router.put(
    "/me",
    response_model=DataResponse[TenantResponse],
    responses=_ERROR_RESPONSES,
    summary="Update current tenant",
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {
                "application/json": {"schema": UpdateTenantRequest.model_json_schema()},
            },
        },
    },
)
async def update_current_tenant(
    request: Request,
    current_user: AuthenticatedUser,
    tenant_id: CurrentTenantID,
    service: TenantServiceDep,
) -> DataResponse[TenantResponse]:
    """Rename the current tenant.

    The body is parsed by hand so that malformed JSON is reported as a
    400 ``Invalid request body`` rather than a validation error list.
    Only ``tenant_name`` changes; ``updated_at`` is bumped.
    """
    try:
        data = _update_body.validate_json(await request.body()) or UpdateTenantRequest()
    except pydantic.ValidationError as e:
        raise bad_request("Invalid request body") from e

    if not data.tenant_name:
        raise bad_request("tenant_name is required")

    try:
        tenant = await service.update_tenant(tenant_id, data.tenant_name)
    except DomainError as e:
        raise from_domain_error(e) from e

    logger.info("Tenant %s renamed by %s", tenant_id, current_user.id)
    return DataResponse(data=TenantResponse.from_entity(tenant))
