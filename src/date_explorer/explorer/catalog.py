"""Timezone catalog: IANA zone names, display labels and the local zone."""

from __future__ import annotations

import logging
from zoneinfo import available_timezones

import tzlocal

logger = logging.getLogger(__name__)

FALLBACK_ZONE = "UTC"


def zone_label(zone_name: str) -> str:
    """``America/Argentina/Buenos_Aires`` -> ``Argentina/Buenos Aires``."""
    _, sep, rest = zone_name.partition("/")
    return (rest if sep else zone_name).replace("_", " ")


class TimezoneCatalog:
    """Lists IANA zones and resolves the host's local zone name."""

    def __init__(self, local_zone_override: str = "") -> None:
        self._local_zone_override = local_zone_override
        self._names: frozenset[str] | None = None
        self._zones: list[tuple[str, str]] | None = None
        self._local_zone: str | None = None

    def _known(self) -> frozenset[str]:
        if self._names is None:
            self._names = frozenset(available_timezones()) | {FALLBACK_ZONE}
        return self._names

    def list_zone_names(self) -> list[tuple[str, str]]:
        """Return ``(zone_name, label)`` pairs sorted by label."""
        if self._zones is None:
            self._zones = sorted(
                ((name, zone_label(name)) for name in self._known()),
                key=lambda pair: (pair[1].casefold(), pair[0]),
            )
        return list(self._zones)

    def is_known(self, zone_name: str) -> bool:
        return zone_name in self._known()

    def resolve_local_zone_name(self) -> str:
        if self._local_zone is None:
            self._local_zone = self._detect_local_zone()
        return self._local_zone

    def _detect_local_zone(self) -> str:
        if self._local_zone_override:
            if self.is_known(self._local_zone_override):
                return self._local_zone_override
            logger.warning(
                "Configured local timezone %r is unknown, detecting host zone",
                self._local_zone_override,
            )

        try:
            name = tzlocal.get_localzone_name()
        except Exception as exc:
            logger.warning("Local timezone detection failed: %s", exc)
            name = None

        if name and self.is_known(name):
            return name
        logger.warning("Host timezone %r not in catalog, using %s", name, FALLBACK_ZONE)
        return FALLBACK_ZONE

    def coerce(self, zone_name: str | None) -> str:
        """Return ``zone_name`` when known, else the local zone."""
        if zone_name and self.is_known(zone_name):
            return zone_name
        if zone_name:
            logger.info("Unknown timezone %r, using local zone", zone_name)
        return self.resolve_local_zone_name()
