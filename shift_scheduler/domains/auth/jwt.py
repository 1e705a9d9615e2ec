# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""JWT access token handling using python-jose.

Tokens identify either a tenant admin (``user_type="admin"`` with
``tenant_id`` and ``role`` claims) or a platform operator
(``user_type="system_admin"``, no tenant).

Example:
    >>> from shift_scheduler.core.config import get_settings
    >>> jwt_manager = JWTManager(get_settings().jwt)
    >>> token = jwt_manager.create_access_token(user_id=admin_id, tenant_id=tenant_id,
    ...                                         user_type="admin", role="owner")
    >>> jwt_manager.decode_token(token).role
    'owner'
"""

import logging
import secrets
from datetime import datetime, timedelta, timezone
from typing import Literal
from uuid import UUID

from jose import ExpiredSignatureError, jwt
from pydantic import BaseModel

from shift_scheduler.core.config.settings import JWTSettings

logger = logging.getLogger(__name__)

USER_TYPE_ADMIN = "admin"
USER_TYPE_SYSTEM_ADMIN = "system_admin"


class TokenPayload(BaseModel):
    """JWT token payload structure.

    Attributes:
        sub: Subject (admin or system admin ID).
        type: Token type.
        tenant_id: Tenant of a tenant admin; None for system admins.
        user_type: ``admin`` or ``system_admin``.
        role: Tenant role of an admin (owner, manager).
        exp: Expiration timestamp.
        iat: Issued at timestamp.
        jti: JWT ID for token tracking.
    """

    sub: str
    type: Literal["access"] = "access"
    tenant_id: str | None = None
    user_type: str | None = None
    role: str | None = None
    exp: int
    iat: int
    jti: str


class JWTError(Exception):
    """Base exception for JWT operations."""

    pass


class TokenExpiredError(JWTError):
    """Raised when a token has expired."""

    pass


class InvalidTokenError(JWTError):
    """Raised when a token is invalid."""

    pass


class JWTManager:
    """JWT token creation and validation manager.

    Attributes:
        _settings: JWT configuration settings.
    """

    def __init__(self, settings: JWTSettings) -> None:
        self._settings = settings

    def create_access_token(
        self,
        user_id: str | UUID,
        tenant_id: str | UUID | None = None,
        user_type: str | None = None,
        role: str | None = None,
    ) -> str:
        """Create an access token.

        Args:
            user_id: Admin or system admin identifier.
            tenant_id: Tenant identifier for tenant admins.
            user_type: Type of user.
            role: Tenant role for tenant admins.

        Returns:
            JWT access token string.
        """
        now = datetime.now(timezone.utc)
        exp = now + timedelta(minutes=self._settings.access_token_expire_minutes)

        payload = {
            "sub": str(user_id),
            "type": "access",
            "tenant_id": str(tenant_id) if tenant_id else None,
            "user_type": user_type,
            "role": role,
            "exp": int(exp.timestamp()),
            "iat": int(now.timestamp()),
            "jti": secrets.token_urlsafe(16),
        }

        return jwt.encode(
            payload,
            self._settings.secret_key.get_secret_value(),
            algorithm=self._settings.algorithm,
        )

    def decode_token(self, token: str) -> TokenPayload:
        """Decode and validate an access token.

        Raises:
            TokenExpiredError: If the token has expired.
            InvalidTokenError: If the token is invalid or not an access token.
        """
        try:
            payload = jwt.decode(
                token,
                self._settings.secret_key.get_secret_value(),
                algorithms=[self._settings.algorithm],
            )
        except ExpiredSignatureError:
            raise TokenExpiredError("Token has expired")
        except Exception as e:
            logger.warning("Token decode failed: %s", str(e))
            raise InvalidTokenError(f"Invalid token: {str(e)}")

        if payload.get("type") != "access":
            raise InvalidTokenError(f"Expected access token, got {payload.get('type')}")

        try:
            return TokenPayload.model_validate(payload)
        except ValueError as e:
            raise InvalidTokenError(f"Invalid token claims: {str(e)}")
