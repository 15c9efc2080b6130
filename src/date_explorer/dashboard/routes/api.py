"""JSON endpoints mirroring the explorer page."""

from __future__ import annotations

from fastapi import APIRouter, Query, Request

from date_explorer import __version__
from date_explorer.dashboard.routes.explorer import build_session

router = APIRouter()


@router.get("/health")
async def health() -> dict:
    return {"status": "ok", "version": __version__}


@router.get("/api/resolve")
async def resolve_input(
    request: Request,
    raw: str = Query("", alias="input"),
    source: str | None = None,
    remote: str | None = None,
) -> dict:
    """Resolve ``input`` and return every representation of the instant."""
    session = build_session(request, raw, source, remote)
    view = session.view
    return {
        "input": session.raw_input,
        "source": session.source_zone,
        "remote": session.remote_zone,
        "ok": view is not None,
        "error": session.error.message if session.error else None,
        "result": view.to_dict() if view else None,
    }


@router.get("/api/timezones")
async def list_timezones(request: Request) -> dict:
    catalog = request.app.state.catalog
    return {
        "local": catalog.resolve_local_zone_name(),
        "zones": [{"name": name, "label": label} for name, label in catalog.list_zone_names()],
    }
