"""Explorer form state: raw input, the two zone selections and the last result.

The persisted state (the page's URL fragment) is reached through a
``FragmentStore`` so the state machine runs the same way in the web handler
and in tests.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Callable, Protocol
from urllib.parse import quote, unquote

from date_explorer.explorer.catalog import TimezoneCatalog
from date_explorer.explorer.formatting import format_long
from date_explorer.explorer.projection import ExplorerView, build_view
from date_explorer.explorer.resolver import ParseError, Resolution, ResolvedInstant, resolve
from date_explorer.timezone_utils import get_zone

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class FragmentStore(Protocol):
    def get(self) -> str: ...

    def set(self, value: str) -> None: ...


class InMemoryFragment:
    """Single writable slot holding the URI-encoded input text."""

    def __init__(self, value: str = "") -> None:
        self.encoded = quote(value, safe="")

    def get(self) -> str:
        return unquote(self.encoded)

    def set(self, value: str) -> None:
        self.encoded = quote(value, safe="")


class ExplorerSession:
    def __init__(
        self,
        catalog: TimezoneCatalog,
        fragment: FragmentStore,
        clock: Clock = utc_now,
        source_zone: str | None = None,
        remote_zone: str | None = None,
    ) -> None:
        self._catalog = catalog
        self._fragment = fragment
        self._clock = clock
        local = catalog.resolve_local_zone_name()
        self.source_zone = catalog.coerce(source_zone) if source_zone else local
        self.remote_zone = catalog.coerce(remote_zone) if remote_zone else local
        self.raw_input = ""
        self._resolution: Resolution | None = None

    @property
    def resolved(self) -> ResolvedInstant | None:
        return self._resolution.instant if self._resolution else None

    @property
    def error(self) -> ParseError | None:
        return self._resolution.error if self._resolution else None

    @property
    def view(self) -> ExplorerView | None:
        resolved = self.resolved
        if resolved is None:
            return None
        return build_view(resolved, self.remote_zone, self._clock())

    def load(self) -> None:
        """Seed the input from the fragment (resolving once) or from "now"."""
        seeded = self._fragment.get()
        if seeded:
            self.raw_input = seeded
            self.submit()
        else:
            self.raw_input = format_long(self._clock().astimezone(get_zone(self.source_zone)))

    def set_input(self, text: str) -> None:
        self.raw_input = text

    def submit(self) -> Resolution:
        self._resolution = None
        resolution = resolve(self.raw_input, self.source_zone, now=self._clock())
        self._resolution = resolution
        self.raw_input = resolution.raw_input
        self._fragment.set(resolution.raw_input)
        return resolution

    def select_source_zone(self, zone_name: str) -> None:
        """Change the source zone; a resolved input is parsed again under it."""
        self.source_zone = self._catalog.coerce(zone_name)
        if self.resolved is not None:
            logger.debug("Source zone changed to %s, resolving again", self.source_zone)
            self.submit()

    def select_remote_zone(self, zone_name: str) -> None:
        self.remote_zone = self._catalog.coerce(zone_name)
