"""Human readable renderings: the long form and relative-time phrases."""

from __future__ import annotations

from datetime import datetime

MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)
WEEKDAY_NAMES = (
    "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday",
)


def hour12(hour: int) -> int:
    return hour % 12 or 12


def meridiem(hour: int) -> str:
    return "AM" if hour < 12 else "PM"


def format_long(dt: datetime) -> str:
    """Long form such as ``Monday, October 19, 2026 8:30 PM``.

    Names are English regardless of the process locale so the output can
    always be read back by the parser.
    """
    return (
        f"{WEEKDAY_NAMES[dt.weekday()]}, {MONTH_NAMES[dt.month - 1]} {dt.day}, {dt.year} "
        f"{hour12(dt.hour)}:{dt.minute:02d} {meridiem(dt.hour)}"
    )


def _describe(seconds: float) -> str:
    """Describe an absolute duration with moment.js style thresholds."""
    minutes = seconds / 60
    hours = minutes / 60
    days = hours / 24
    months = days / 30.4375
    years = days / 365.25

    if seconds < 45:
        return "a few seconds"
    if seconds < 90:
        return "a minute"
    if minutes < 45:
        return f"{round(minutes)} minutes"
    if minutes < 90:
        return "an hour"
    if hours < 22:
        return f"{round(hours)} hours"
    if hours < 36:
        return "a day"
    if days < 26:
        return f"{round(days)} days"
    if days < 46:
        return "a month"
    if days < 320:
        return f"{max(2, round(months))} months"
    if days < 548:
        return "a year"
    return f"{max(2, round(years))} years"


def relative_phrase(instant: datetime, now: datetime) -> str:
    """``in 3 hours`` for future instants, ``3 hours ago`` for past ones."""
    delta = (instant - now).total_seconds()
    text = _describe(abs(delta))
    return f"in {text}" if delta > 0 else f"{text} ago"
