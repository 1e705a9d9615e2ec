# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Domain layer: entities, repository ports and use-case services.

Subpackages:
    common: Identifiers and the domain error hierarchy.
    tenant: Tenant aggregate and profile use cases.
    auth: Admin aggregate, password reset authorization, JWT handling.
"""
