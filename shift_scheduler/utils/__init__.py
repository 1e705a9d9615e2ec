# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Utility functions and helpers.

This package contains cross-cutting utilities:
- logging: Structured logging with structlog
- datetime: Timezone-aware datetime operations and injectable clocks
"""

from shift_scheduler.utils.datetime import (
    Clock,
    ensure_utc,
    fixed_clock,
    format_rfc3339,
    utc_now,
)
from shift_scheduler.utils.logging import bind_context, clear_context, get_logger, setup_logging

__all__ = [
    # Logging
    "setup_logging",
    "get_logger",
    "bind_context",
    "clear_context",
    # Datetime
    "Clock",
    "utc_now",
    "fixed_clock",
    "ensure_utc",
    "format_rfc3339",
]
