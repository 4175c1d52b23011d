"""Timezone helpers."""

from __future__ import annotations

from datetime import datetime, timezone


class Time:
    """Static helpers for datetime normalization."""

    @staticmethod
    def ensure_utc(dt: datetime) -> datetime:
        """Ensure a datetime is UTC-aware, converting aware values to UTC."""
        if dt.tzinfo is None:
            return dt.replace(tzinfo=timezone.utc)
        return dt.astimezone(timezone.utc)

    @staticmethod
    def iso_timestamp(dt: datetime | None = None) -> str:
        """Render ``dt`` (default: now) as ``YYYY-MM-DDTHH:MM:SS.mmmZ``."""
        if dt is None:
            dt = datetime.now(timezone.utc)
        dt = Time.ensure_utc(dt)
        return dt.strftime("%Y-%m-%dT%H:%M:%S.") + f"{dt.microsecond // 1000:03d}Z"
