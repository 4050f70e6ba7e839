"""Mini README: FastAPI-powered statements visualizer.

Structure:
    * create_application - application factory wiring routes and templates.
    * build_state_payload - JSON view of the session for the dashboard.

The page lists the three statements, lets the user pick an action and an
amount, and polls ``/api/state`` so changed values flash with their delta
until the dwell time runs out. One ``VisualizerSession`` backs the
application and is closed when the application shuts down, cancelling any
highlight timers still pending.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any, AsyncIterator, Dict, List, Optional

from fastapi import FastAPI, Form, HTTPException, Request
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from ..configuration import FinstatementsSettings, get_settings
from ..logging_utils import get_logger
from ..presentation import format_currency, format_delta
from ..session import VisualizerSession
from ..statements import ACTION_CATALOGUE, STATEMENTS

LOGGER = get_logger(__name__)


def build_state_payload(
    session: VisualizerSession, settings: FinstatementsSettings
) -> Dict[str, Any]:
    """Describe values, pending input and active highlights for rendering."""

    symbol = settings.currency_symbol
    separator = settings.thousands_separator
    changes = session.changes()
    statements: List[Dict[str, Any]] = []
    for statement in STATEMENTS:
        sections = []
        for section in statement.sections:
            items = []
            for item in section.items:
                value = session.value(item.path)
                change = changes.get(item.path)
                delta = change.delta if change else None
                items.append(
                    {
                        "label": item.label,
                        "path": item.path,
                        "value": value,
                        "formatted": format_currency(value, symbol, separator),
                        "delta": delta,
                        "formatted_delta": (
                            format_delta(delta, symbol, separator) if delta is not None else None
                        ),
                        "tone": change.tone.value if change else "neutral",
                    }
                )
            sections.append({"title": section.title, "items": items})
        statements.append({"title": statement.title, "sections": sections})

    return {
        "pending": {
            "action": session.pending_action,
            "amount": session.pending_amount,
            "can_execute": session.can_execute(),
        },
        "statements": statements,
        "raw": session.state.as_dict(),
    }


def create_application(session: Optional[VisualizerSession] = None) -> FastAPI:
    """Create the FastAPI application with routes and the session it serves."""

    settings = get_settings()
    active_session = session or VisualizerSession(dwell_seconds=settings.flash_duration_seconds)

    @asynccontextmanager
    async def lifespan(_: FastAPI) -> AsyncIterator[None]:
        LOGGER.info("Visualizer ready")
        yield
        active_session.close()
        LOGGER.info("Visualizer stopped")

    app = FastAPI(title="Financial Statements Visualizer", version="0.1.0", lifespan=lifespan)
    templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))
    static_directory = Path(__file__).parent / "static"
    app.mount("/static", StaticFiles(directory=str(static_directory)), name="static")
    app.state.session = active_session

    @app.get("/", response_class=HTMLResponse)
    async def dashboard(request: Request) -> HTMLResponse:
        """Render the visualizer page with the current statements."""

        LOGGER.debug("Rendering dashboard")
        return templates.TemplateResponse(
            request,
            "dashboard.html",
            {
                "actions": ACTION_CATALOGUE,
                "payload": build_state_payload(active_session, settings),
                "poll_interval_ms": settings.poll_interval_ms,
            },
        )

    @app.get("/api/state")
    async def current_state() -> JSONResponse:
        return JSONResponse(build_state_payload(active_session, settings))

    @app.get("/api/actions")
    async def list_actions() -> JSONResponse:
        return JSONResponse(
            {"actions": [{"id": action_id, "label": label} for action_id, label in ACTION_CATALOGUE]}
        )

    @app.get("/api/fields/{path}")
    async def field_value(path: str) -> JSONResponse:
        """Return one displayed field with its active delta."""

        try:
            tracker = active_session.board.tracker(path)
        except KeyError as error:
            raise HTTPException(status_code=404, detail=str(error)) from error
        return JSONResponse({"path": path, "value": tracker.value, "delta": tracker.delta})

    @app.post("/api/pending")
    async def update_pending(
        action: str = Form(""),
        amount: str = Form(""),
    ) -> JSONResponse:
        """Record the user's selection and report whether execute is allowed."""

        active_session.select_action(action)
        active_session.set_amount(amount)
        return JSONResponse({"can_execute": active_session.can_execute()})

    @app.post("/api/execute")
    async def execute(
        action: str = Form(""),
        amount: str = Form(""),
    ) -> JSONResponse:
        """Apply the submitted action and return the refreshed statements."""

        active_session.select_action(action)
        active_session.set_amount(amount)
        executed = active_session.execute()
        if executed:
            LOGGER.debug("Executed %s with amount %s via web form", action, amount)
        payload = build_state_payload(active_session, settings)
        payload["executed"] = executed
        return JSONResponse(payload)

    return app
