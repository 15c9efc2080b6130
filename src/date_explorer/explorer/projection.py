"""Re-projection of a resolved instant into display representations.

Nothing here parses input. Every function takes an already resolved instant
and derives fields for a zone, so switching the remote zone is just another
call to ``build_view`` with the same ``ResolvedInstant``.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import datetime, timedelta, timezone

from date_explorer.explorer.formatting import (
    MONTH_NAMES,
    WEEKDAY_NAMES,
    hour12,
    meridiem,
    relative_phrase,
)
from date_explorer.explorer.resolver import ResolvedInstant
from date_explorer.timezone_utils import get_zone, offset_string, whole_hours

UTC_ZONE = "UTC"


@dataclass(frozen=True)
class ZonedFields:
    zone: str
    abbreviation: str
    year: int
    month: int
    month_name: str
    weekday: str
    day: int
    hour24: int
    hour12: int
    meridiem: str
    minute: int
    second: int
    millisecond: int
    offset: str


@dataclass(frozen=True)
class OffsetDifference:
    hours: int  # whole-hour offset(remote) - offset(source)

    @property
    def magnitude(self) -> int:
        return abs(self.hours)

    @property
    def direction(self) -> str:
        if self.hours > 0:
            return "ahead"
        if self.hours < 0:
            return "behind"
        return "same"


@dataclass(frozen=True)
class ExplorerView:
    local: ZonedFields
    utc: ZonedFields
    remote: ZonedFields
    difference: OffsetDifference
    iso8601: str
    unix: int
    relative: str

    def to_dict(self) -> dict:
        data = asdict(self)
        data["difference"] = {
            "hours": self.difference.hours,
            "magnitude": self.difference.magnitude,
            "direction": self.difference.direction,
        }
        return data


def zoned_fields(instant: datetime, zone_name: str) -> ZonedFields:
    dt = instant.astimezone(get_zone(zone_name))
    return ZonedFields(
        zone=zone_name,
        abbreviation=dt.tzname() or "",
        year=dt.year,
        month=dt.month,
        month_name=MONTH_NAMES[dt.month - 1],
        weekday=WEEKDAY_NAMES[dt.weekday()],
        day=dt.day,
        hour24=dt.hour,
        hour12=hour12(dt.hour),
        meridiem=meridiem(dt.hour),
        minute=dt.minute,
        second=dt.second,
        millisecond=dt.microsecond // 1000,
        offset=offset_string(dt),
    )


def offset_difference(instant: datetime, source_zone: str, remote_zone: str) -> OffsetDifference:
    """Whole-hour difference between the two zones' offsets at ``instant``.

    Each offset is truncated to its hour part before subtracting, so half-hour
    zones lose their minutes (UTC vs +05:30 gives 5).
    """
    source = offset_string(instant.astimezone(get_zone(source_zone)))
    remote = offset_string(instant.astimezone(get_zone(remote_zone)))
    return OffsetDifference(hours=whole_hours(remote) - whole_hours(source))


def iso8601(instant: datetime) -> str:
    utc = instant.astimezone(timezone.utc)
    return utc.replace(tzinfo=None).isoformat(timespec="milliseconds") + "Z"


def unix_seconds(instant: datetime) -> int:
    return (instant - datetime(1970, 1, 1, tzinfo=timezone.utc)) // timedelta(seconds=1)


def build_view(resolved: ResolvedInstant, remote_zone: str, now: datetime) -> ExplorerView:
    """Derive every display representation of ``resolved``."""
    instant = resolved.instant
    return ExplorerView(
        local=zoned_fields(instant, resolved.source_zone),
        utc=zoned_fields(instant, UTC_ZONE),
        remote=zoned_fields(instant, remote_zone),
        difference=offset_difference(instant, resolved.source_zone, remote_zone),
        iso8601=iso8601(instant),
        unix=unix_seconds(instant),
        relative=relative_phrase(instant, now),
    )
