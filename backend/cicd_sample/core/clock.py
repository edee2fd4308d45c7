"""Clock — wall-clock timestamps and monotonic process uptime.

Invariants:
    - Timestamps are UTC, millisecond precision, "Z" suffix (2024-01-01T12:00:00.000Z)
    - Uptime never goes negative (monotonic clock, clamped at zero)
"""

import time
from datetime import datetime, timezone


def utc_timestamp(now: datetime | None = None) -> str:
    """Format *now* (default: current time) as an ISO-8601 UTC string."""
    now = (now or datetime.now(timezone.utc)).astimezone(timezone.utc)
    return now.strftime("%Y-%m-%dT%H:%M:%S.") + f"{now.microsecond // 1000:03d}Z"


class Uptime:
    """Seconds elapsed since construction."""

    def __init__(self, started_at: float | None = None):
        self.started_at = time.monotonic() if started_at is None else started_at

    def seconds(self) -> float:
        return max(0.0, time.monotonic() - self.started_at)
