"""Pydantic configuration models for all application settings."""

from __future__ import annotations

from pydantic import BaseModel, Field


class DashboardConfig(BaseModel):
    host: str = "127.0.0.1"
    port: int = Field(8080, ge=1, le=65535)


class LoggingConfig(BaseModel):
    level: str = "INFO"
    format: str = "json"
    file: str = ""


class ExplorerConfig(BaseModel):
    """Defaults for the explorer form.

    Empty zone names mean "use the host's local zone".
    """
    local_timezone: str = ""  # IANA override for the detected local zone
    default_remote_timezone: str = ""
    title: str = "Date & Time Explorer"
    tagline: str = "Timezones are basically rocket science."


class AppConfig(BaseModel):
    """Root configuration model containing all application settings."""

    dashboard: DashboardConfig = DashboardConfig()
    logging: LoggingConfig = LoggingConfig()
    explorer: ExplorerConfig = ExplorerConfig()
