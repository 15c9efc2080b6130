"""Timezone lookup and offset helpers."""

from __future__ import annotations

from datetime import datetime, timedelta
from functools import lru_cache
from zoneinfo import ZoneInfo


@lru_cache(maxsize=512)
def get_zone(tz_name: str) -> ZoneInfo:
    """Return the IANA zone for ``tz_name``.

    Raises ZoneInfoNotFoundError for unknown names and ValueError for
    malformed keys (absolute paths, ``..`` segments).
    """
    return ZoneInfo(tz_name)


def offset_string(dt: datetime) -> str:
    """Format the UTC offset of an aware datetime as ``+HH:MM``."""
    offset = dt.utcoffset() or timedelta(0)
    total_minutes = int(offset.total_seconds()) // 60
    sign = "-" if total_minutes < 0 else "+"
    hours, minutes = divmod(abs(total_minutes), 60)
    return f"{sign}{hours:02d}:{minutes:02d}"


def whole_hours(offset: str) -> int:
    """Signed hour part of a ``+HH:MM`` offset string, minutes discarded.

    ``+05:30`` -> 5, ``-03:30`` -> -3, ``-00:30`` -> 0.
    """
    sign = -1 if offset.startswith("-") else 1
    hours = offset.lstrip("+-").split(":", 1)[0]
    return sign * int(hours)
