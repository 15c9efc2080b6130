"""Instant resolution: turn a raw input string into a zoned instant.

Classification is ordered. A trimmed input made only of digits (optionally
with a decimal fraction) is always an epoch literal in seconds; anything else
is a free-form expression handed to ``dateutil``'s parser and read as wall
clock time in the source zone.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from dateutil import parser as dateutil_parser

from date_explorer.explorer.formatting import format_long
from date_explorer.timezone_utils import get_zone

logger = logging.getLogger(__name__)

INVALID_MESSAGE = "Invalid date or time string."

EPOCH_PATTERN = re.compile(r"^\d+(\.\d+)?$", re.ASCII)
UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
# Instants this close to the datetime limits cannot be shown in every zone.
# Historic local mean time offsets reach almost 16 hours.
PROJECTION_MARGIN = timedelta(days=1)
EARLIEST_INSTANT = datetime.min.replace(tzinfo=timezone.utc) + PROJECTION_MARGIN
LATEST_INSTANT = datetime.max.replace(tzinfo=timezone.utc) - PROJECTION_MARGIN


@dataclass(frozen=True)
class EpochLiteral:
    text: str
    seconds: float


@dataclass(frozen=True)
class FreeFormExpression:
    text: str


InputKind = EpochLiteral | FreeFormExpression


@dataclass(frozen=True)
class ResolvedInstant:
    """An instant plus the zone used to interpret zone-naive input."""

    instant: datetime  # aware, UTC
    source_zone: str

    @property
    def zoned(self) -> datetime:
        return self.instant.astimezone(get_zone(self.source_zone))


@dataclass(frozen=True)
class ParseError:
    message: str


@dataclass(frozen=True)
class Resolution:
    """Outcome of one resolution attempt.

    ``raw_input`` is the input after normalization (blank input replaced by
    the long form of "now"). Exactly one of ``instant``/``error`` is set.
    """

    raw_input: str
    instant: ResolvedInstant | None = None
    error: ParseError | None = None

    @property
    def ok(self) -> bool:
        return self.instant is not None


class _InvalidInstant(Exception):
    """Input parsed to nothing usable; reported with the generic message."""


def classify(text: str) -> InputKind:
    """Classify trimmed input. Epoch literals take precedence."""
    if EPOCH_PATTERN.match(text):
        return EpochLiteral(text=text, seconds=float(text))
    return FreeFormExpression(text=text)


def _from_epoch(literal: EpochLiteral) -> datetime:
    try:
        return UNIX_EPOCH + timedelta(seconds=literal.seconds)
    except OverflowError as exc:
        raise _InvalidInstant(literal.text) from exc


def _from_free_form(expr: FreeFormExpression, source_zone: str, now: datetime) -> datetime:
    zone = get_zone(source_zone)
    # Fields missing from the input default to today (midnight) in the source zone.
    default = now.astimezone(zone).replace(
        hour=0, minute=0, second=0, microsecond=0, tzinfo=None
    )
    try:
        parsed = dateutil_parser.parse(expr.text, default=default)
    except (dateutil_parser.ParserError, OverflowError) as exc:
        raise _InvalidInstant(expr.text) from exc

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=zone)
    try:
        return parsed.astimezone(timezone.utc)
    except OverflowError as exc:
        raise _InvalidInstant(expr.text) from exc


def _check_projectable(instant: datetime, text: str) -> datetime:
    if not EARLIEST_INSTANT <= instant <= LATEST_INSTANT:
        raise _InvalidInstant(text)
    return instant


def _exception_message(exc: Exception) -> str:
    if exc.args and isinstance(exc.args[0], str):
        return exc.args[0]
    return str(exc) or exc.__class__.__name__


def resolve(raw_input: str, source_zone: str, now: datetime | None = None) -> Resolution:
    """Resolve ``raw_input`` against ``source_zone``.

    Never raises: parser failures come back as a ``ParseError``.
    """
    if now is None:
        now = datetime.now(timezone.utc)

    text = raw_input.strip()
    if not text:
        try:
            text = format_long(now.astimezone(get_zone(source_zone)))
        except Exception as exc:
            logger.info("Cannot build default input for zone %r: %s", source_zone, exc)
            return Resolution(raw_input=raw_input, error=ParseError(_exception_message(exc)))

    kind = classify(text)
    try:
        if isinstance(kind, EpochLiteral):
            instant = _from_epoch(kind)
        else:
            instant = _from_free_form(kind, source_zone, now)
        instant = _check_projectable(instant, text)
    except _InvalidInstant:
        logger.info("Rejected input %r (%s)", text, type(kind).__name__)
        return Resolution(raw_input=text, error=ParseError(INVALID_MESSAGE))
    except Exception as exc:
        logger.info("Parser raised on input %r: %s", text, exc)
        return Resolution(raw_input=text, error=ParseError(_exception_message(exc)))

    logger.debug("Resolved %r in %s to %s", text, source_zone, instant.isoformat())
    return Resolution(
        raw_input=text,
        instant=ResolvedInstant(instant=instant, source_zone=source_zone),
    )
