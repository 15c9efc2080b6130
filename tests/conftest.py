"""Shared test fixtures for Date & Time Explorer."""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

import pytest

from date_explorer.config.manager import ConfigManager
from date_explorer.config.schema import AppConfig
from date_explorer.explorer.catalog import TimezoneCatalog

# Saturday, 08:00 in New York
FIXED_NOW = datetime(2024, 6, 15, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def config() -> AppConfig:
    """Provide a default test configuration."""
    return AppConfig()


@pytest.fixture
def config_manager(tmp_path: Path) -> ConfigManager:
    """Provide a config manager with test paths."""
    defaults = tmp_path / "config.defaults.yaml"
    defaults.write_text("explorer:\n  local_timezone: America/New_York\n")
    user = tmp_path / "config.yaml"
    mgr = ConfigManager(defaults_path=defaults, user_path=user)
    mgr.load()
    return mgr


@pytest.fixture
def catalog() -> TimezoneCatalog:
    """Catalog pinned to New York so tests do not depend on the host zone."""
    return TimezoneCatalog(local_zone_override="America/New_York")


@pytest.fixture
def now() -> datetime:
    return FIXED_NOW


@pytest.fixture
def clock(now: datetime):
    return lambda: now
