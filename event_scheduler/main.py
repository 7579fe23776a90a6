"""FastAPI application: HTTP adapter around per-session schedulers."""

from __future__ import annotations

import uuid

from fastapi import FastAPI, HTTPException, Response

from event_scheduler.core.config import SchedulerSettings
from event_scheduler.core.logging import configure_logging, log
from event_scheduler.domain.models import (
    AddEventResponse,
    Conflict,
    CreateSessionRequest,
    Event,
    EventRequest,
    SessionInfo,
    Suggestion,
)
from event_scheduler.repos.memory import SessionRepository
from event_scheduler.services.scheduler import Scheduler


def create_app(settings: SchedulerSettings | None = None) -> FastAPI:
    """Build the application. Each call owns its own session store."""
    base_settings = settings or SchedulerSettings()
    configure_logging(base_settings.log_level, json=base_settings.log_json)

    app = FastAPI(title="Event Scheduler")
    sessions = SessionRepository()
    app.state.settings = base_settings
    app.state.sessions = sessions

    def _get_scheduler(session_id: str) -> Scheduler:
        scheduler = sessions.get(session_id)
        if scheduler is None:
            raise HTTPException(status_code=404, detail="Session not found")
        return scheduler

    # ── Routes ────────────────────────────────────────────────────────

    @app.post("/sessions", response_model=SessionInfo, status_code=201)
    def create_session(body: CreateSessionRequest | None = None) -> SessionInfo:
        """Start a new, empty schedule with optional working-hour overrides."""
        overrides = body.model_dump(exclude_none=True) if body else {}
        try:
            session_settings = SchedulerSettings(
                **{**base_settings.model_dump(), **overrides}
            )
        except ValueError as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc

        session_id = str(uuid.uuid4())
        sessions.add(session_id, Scheduler(settings=session_settings))
        log.info(
            "session_created",
            session_id=session_id,
            working_hour_start=session_settings.working_hour_start,
            working_hour_end=session_settings.working_hour_end,
        )
        return _session_info(session_id, session_settings)

    @app.get("/sessions/{session_id}", response_model=SessionInfo)
    def get_session(session_id: str) -> SessionInfo:
        return _session_info(session_id, _get_scheduler(session_id).settings)

    @app.delete("/sessions/{session_id}", status_code=204)
    def delete_session(session_id: str) -> Response:
        """Discard a session and everything scheduled in it."""
        if sessions.remove(session_id) is None:
            raise HTTPException(status_code=404, detail="Session not found")
        log.info("session_deleted", session_id=session_id)
        return Response(status_code=204)

    @app.post("/sessions/{session_id}/events", response_model=AddEventResponse)
    def add_event(session_id: str, payload: EventRequest) -> AddEventResponse:
        """Add an event and return the full schedule plus all detected conflicts."""
        scheduler = _get_scheduler(session_id)
        events, conflicts = scheduler.add_event_snapshot(payload.to_event())
        return AddEventResponse(events=events, conflicts=conflicts)

    @app.get("/sessions/{session_id}/events", response_model=list[Event])
    def list_events(session_id: str) -> list[Event]:
        """Return the schedule sorted by start time."""
        return _get_scheduler(session_id).events

    @app.get("/sessions/{session_id}/conflicts", response_model=list[Conflict])
    def list_conflicts(session_id: str) -> list[Conflict]:
        return _get_scheduler(session_id).find_conflicts()

    @app.post("/sessions/{session_id}/suggestions", response_model=list[Suggestion])
    def suggest_slots(session_id: str, payload: EventRequest) -> list[Suggestion]:
        """Preview free slots for an event without adding it.

        The candidate's own interval counts as busy, matching what
        ``add_event`` would suggest once it is inserted.
        """
        scheduler = _get_scheduler(session_id)
        candidate = payload.to_event()
        return scheduler.find_alternative_slots(
            candidate, [*scheduler.events, candidate]
        )

    return app


def _session_info(session_id: str, settings: SchedulerSettings) -> SessionInfo:
    return SessionInfo(
        id=session_id,
        working_hour_start=settings.working_hour_start,
        working_hour_end=settings.working_hour_end,
        slot_step_minutes=settings.slot_step_minutes,
        max_suggestions=settings.max_suggestions,
    )


app = create_app()
