"""The explorer form page."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Query, Request
from fastapi.responses import HTMLResponse, RedirectResponse, Response

from date_explorer.explorer.session import ExplorerSession, InMemoryFragment
from date_explorer.logging.context import bind_context

router = APIRouter()
logger = logging.getLogger(__name__)

HELP_EXAMPLES = [
    ("1704128400", "UNIX epoch seconds"),
    ("1704128400.250", "Epoch seconds with a fractional part"),
    ("2024-01-01T12:00:00Z", "ISO 8601 with an explicit offset"),
    ("January 1, 2024 12:00:00", "Wall clock time in the source timezone"),
    ("Mon, 01 Jan 2024 09:30 PM", "Long or abbreviated names"),
    ("14:45", "A time of day, today in the source timezone"),
]


def build_session(
    request: Request,
    raw: str | None,
    source: str | None,
    remote: str | None,
) -> ExplorerSession:
    """Rebuild the form state from the query string and resolve it."""
    state = request.app.state
    remote = remote or state.config.explorer.default_remote_timezone or None
    session = ExplorerSession(
        catalog=state.catalog,
        fragment=InMemoryFragment(raw or ""),
        clock=state.clock,
        source_zone=source,
        remote_zone=remote,
    )
    bind_context(source_zone=session.source_zone, remote_zone=session.remote_zone)
    session.load()
    if raw is not None and not raw.strip():
        session.set_input(raw)
        session.submit()
    return session


def page_url(request: Request, session: ExplorerSession) -> str:
    return str(
        request.url.include_query_params(
            input=session.raw_input,
            source=session.source_zone,
            remote=session.remote_zone,
        )
    )


@router.get("/", response_class=HTMLResponse)
async def explorer_page(
    request: Request,
    raw: str | None = Query(None, alias="input"),
    source: str | None = None,
    remote: str | None = None,
) -> Response:
    """Render the form, plus results or the parse error when input was given."""
    session = build_session(request, raw, source, remote)

    if raw is not None and not raw.strip():
        # Blank input was replaced by "now"; put it in the address bar.
        logger.debug("Blank input normalized to %r", session.raw_input)
        return RedirectResponse(page_url(request, session), status_code=303)

    catalog = request.app.state.catalog
    templates = request.app.state.templates
    return templates.TemplateResponse(
        request,
        "explorer.html",
        {
            "raw_input": session.raw_input,
            "source_zone": session.source_zone,
            "remote_zone": session.remote_zone,
            "zones": catalog.list_zone_names(),
            "view": session.view,
            "error": session.error.message if session.error else "",
            "help_examples": HELP_EXAMPLES,
        },
    )
