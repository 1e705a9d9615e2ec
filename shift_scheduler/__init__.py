"""Shift Scheduler Backend.

Tenant profile and admin password-reset authorization API of a
multi-tenant shift-scheduling service.

Copyright (C) 2025 Global Digital Labs (gdlabs.io)
SPDX-License-Identifier: LGPL-3.0-or-later
"""

__version__ = "1.0.0"
