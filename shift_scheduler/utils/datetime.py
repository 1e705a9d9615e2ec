# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""DateTime utilities for the shift scheduler.

All timestamps are stored in UTC (PostgreSQL TIMESTAMPTZ) and every Python
datetime handled by the application is timezone-aware.

Services never read the wall clock directly. They receive a ``Clock``
(any zero-argument callable returning an aware datetime), which defaults
to ``utc_now`` and is replaced by a fixed clock in tests.

Usage:
------
    from shift_scheduler.utils.datetime import utc_now, format_rfc3339

    now = utc_now()
    format_rfc3339(now)  # '2025-01-15T09:30:00Z'
"""

from datetime import datetime, timezone
from typing import Callable

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    """Get current UTC time as timezone-aware datetime.

    Returns:
        Timezone-aware datetime representing current UTC time.
    """
    return datetime.now(timezone.utc)


def fixed_clock(moment: datetime) -> Clock:
    """Build a clock that always returns the same instant."""
    moment = ensure_utc(moment)
    return lambda: moment


def ensure_utc(dt: datetime | None) -> datetime | None:
    """Ensure a datetime is timezone-aware UTC.

    Args:
        dt: A datetime object (naive or aware) or None.

    Returns:
        Timezone-aware UTC datetime or None.

    Note:
        - If dt is None, returns None
        - If dt is naive, assumes UTC and adds tzinfo
        - If dt is aware, converts to UTC
    """
    if dt is None:
        return None

    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)

    return dt.astimezone(timezone.utc)


def format_rfc3339(dt: datetime | None) -> str | None:
    """Format a datetime as an RFC 3339 string with second precision.

    UTC is rendered with the ``Z`` designator, e.g. ``2025-01-15T09:30:00Z``.

    Args:
        dt: Datetime to format.

    Returns:
        RFC 3339 formatted string or None.
    """
    if dt is None:
        return None

    text = ensure_utc(dt).isoformat(timespec="seconds")
    return text.replace("+00:00", "Z")
