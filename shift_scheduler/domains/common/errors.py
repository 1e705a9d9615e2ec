# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Domain error hierarchy.

Every error raised by entities and services carries a machine-readable
code. The API layer maps codes to HTTP statuses (see
``shift_scheduler.api.responses.from_domain_error``); anything that is
not a DomainError is reported as an internal error.
"""

from typing import Optional

ERR_NOT_FOUND = "NOT_FOUND"
ERR_INVALID_INPUT = "INVALID_INPUT"
ERR_CONFLICT = "CONFLICT"
ERR_UNAUTHORIZED = "UNAUTHORIZED"
ERR_INVARIANT_VIOLATION = "INVARIANT_VIOLATION"


class DomainError(Exception):
    """Base exception for domain rule failures.

    Attributes:
        code: Machine-readable error code.
        message: Human-readable error description.
        cause: The underlying exception, if any.
    """

    code: str = ERR_INVARIANT_VIOLATION

    def __init__(self, message: str, cause: Optional[Exception] = None) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message


class NotFoundError(DomainError):
    """Raised when a requested entity does not exist."""

    code = ERR_NOT_FOUND

    def __init__(self, entity: str, entity_id: str) -> None:
        super().__init__(f"{entity} not found: {entity_id}")
        self.entity = entity
        self.entity_id = entity_id


class ValidationError(DomainError):
    """Raised when input violates an entity rule."""

    code = ERR_INVALID_INPUT


class ConflictError(DomainError):
    """Raised when a change conflicts with existing state."""

    code = ERR_CONFLICT


class UnauthorizedError(DomainError):
    """Raised when the caller may not perform the operation."""

    code = ERR_UNAUTHORIZED


class InvariantViolationError(DomainError):
    """Raised when an aggregate would enter an invalid state."""

    code = ERR_INVARIANT_VIOLATION
