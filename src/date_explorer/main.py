"""Date & Time Explorer entry point."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from date_explorer import __version__
from date_explorer.config.manager import ConfigManager
from date_explorer.dashboard.app import create_app
from date_explorer.logging.structured import setup_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Serve the Date & Time Explorer page")
    parser.add_argument("--defaults", type=Path, default=Path("config.defaults.yaml"),
                        help="Default configuration file")
    parser.add_argument("--config", type=Path, default=Path("config.yaml"),
                        help="User overrides, merged over the defaults")
    parser.add_argument("--host", help="Override dashboard.host")
    parser.add_argument("--port", type=int, help="Override dashboard.port")
    return parser


def main(argv: list[str] | None = None) -> None:
    """Entry point for the application."""
    args = build_parser().parse_args(argv)

    config_manager = ConfigManager(args.defaults, args.config)
    config = config_manager.load()

    setup_logging(
        level=config.logging.level,
        fmt=config.logging.format,
        log_file=config.logging.file,
    )

    host = args.host or config.dashboard.host
    port = args.port or config.dashboard.port
    app = create_app(config)
    logger.info(
        "Starting Date & Time Explorer v%s (local zone %s)",
        __version__,
        app.state.catalog.resolve_local_zone_name(),
    )
    logger.info("Dashboard available at http://%s:%d", host, port)

    import uvicorn

    uvicorn.run(app, host=host, port=port, log_level="warning")


if __name__ == "__main__":
    main()
