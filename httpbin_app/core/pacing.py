"""Pacing: timing math for /delay, /stream and /drip.

Invariants:
    - Delays have millisecond resolution (truncated, never rounded up)
    - A delay never exceeds the configured ceiling
    - Drip intervals are duration / numbytes; numbytes <= 0 means no interval
"""

from datetime import datetime, timezone


def clamp_delay(seconds: float, ceiling: float) -> float:
    """Truncate to whole milliseconds, then cap at `ceiling`."""
    millis = int(seconds * 1000)
    return min(max(millis, 0) / 1000, ceiling)


def drip_interval(duration: float, numbytes: int) -> float:
    if numbytes <= 0:
        return 0.0
    return max(duration, 0.0) / numbytes


def stream_line(n: int, now: datetime | None = None) -> dict:
    """One /stream object: {"n": n, "time": RFC3339 UTC}."""
    now = now or datetime.now(timezone.utc)
    return {"n": n, "time": now.isoformat().replace("+00:00", "Z")}
