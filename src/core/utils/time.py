"""
Time-related utilities for the application.

All timestamps are generated and compared in UTC. Creation windows are
resolved relative to the request time, never cached between requests.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from typing import Any

from core.utils.constants import DEFAULT_PERIOD_DAYS, PERIOD_WINDOW_DAYS


@dataclass(frozen=True)
class DateWindow:
    """Inclusive ``[from_date, to_date]`` time range."""

    from_date: datetime
    to_date: datetime

    def contains(self, moment: datetime) -> bool:
        return self.from_date <= moment <= self.to_date


def utc_now() -> datetime:
    """Return the current timezone-aware UTC time."""
    return datetime.now(timezone.utc)


def resolve_window(token: str | None, now: datetime) -> DateWindow:
    """Map a relative period token to an absolute window ending at ``now``.

    Recognized tokens are ``3d``, ``7d`` and ``30d``. Any other token,
    including an empty one, falls back to the 30-day window.
    """
    days = PERIOD_WINDOW_DAYS.get(token or "", DEFAULT_PERIOD_DAYS)
    return DateWindow(from_date=now - timedelta(days=days), to_date=now)


def parse_timestamp(value: Any) -> datetime | None:
    """Parse a stored creation timestamp into an aware UTC datetime.

    Accepts ISO-8601 strings (a trailing ``Z`` is allowed, values without an
    offset are taken as UTC) and epoch milliseconds. Returns ``None`` for
    anything that cannot be read as a point in time.
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, (int, float, Decimal)):
        try:
            return datetime.fromtimestamp(float(value) / 1000, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            return None

    if not isinstance(value, str) or not value.strip():
        return None

    text = value.strip()
    if text.endswith(("Z", "z")):
        text = f"{text[:-1]}+00:00"

    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None

    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)
