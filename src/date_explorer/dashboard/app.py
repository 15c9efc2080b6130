"""FastAPI application factory for the explorer page."""

from __future__ import annotations

from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from date_explorer import __version__
from date_explorer.config.schema import AppConfig
from date_explorer.explorer.catalog import TimezoneCatalog
from date_explorer.explorer.session import Clock, utc_now
from date_explorer.logging.context import bind_context, clear_context

TEMPLATES_DIR = Path(__file__).parent / "templates"
STATIC_DIR = Path(__file__).parent / "static"


def create_app(
    config: AppConfig,
    catalog: TimezoneCatalog | None = None,
    clock: Clock | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title=config.explorer.title,
        description="Parse a date/time string and view it across timezones",
        version=__version__,
    )

    @app.middleware("http")
    async def disable_browser_cache(request: Request, call_next):
        response = await call_next(request)
        if request.method in {"GET", "HEAD"}:
            # Results depend on "now", never serve them from cache.
            response.headers["Cache-Control"] = "no-store, no-cache, must-revalidate, max-age=0"
            response.headers["Pragma"] = "no-cache"
            response.headers["Expires"] = "0"
        return response

    @app.middleware("http")
    async def request_log_context(request: Request, call_next):
        clear_context()
        bind_context(path=request.url.path)
        try:
            return await call_next(request)
        finally:
            clear_context()

    app.state.config = config
    app.state.catalog = catalog or TimezoneCatalog(config.explorer.local_timezone)
    app.state.clock = clock or utc_now

    templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
    templates.env.globals["app_title"] = config.explorer.title
    templates.env.globals["app_tagline"] = config.explorer.tagline
    app.state.templates = templates

    app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")

    from date_explorer.dashboard.routes.api import router as api_router
    from date_explorer.dashboard.routes.explorer import router as explorer_router

    app.include_router(explorer_router)
    app.include_router(api_router)

    return app
