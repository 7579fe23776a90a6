"""In-memory repositories for events and scheduler sessions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from event_scheduler.domain.models import Event

if TYPE_CHECKING:
    from event_scheduler.services.scheduler import Scheduler


class EventRepository:
    """List-backed store for Event instances, kept sorted by start time.

    Sorting is stable, so events sharing a start time stay in insertion
    order. Duplicates are retained.
    """

    def __init__(self) -> None:
        self._events: list[Event] = []

    def add(self, event: Event) -> None:
        # readers always see a fully sorted list
        self._events = sorted([*self._events, event], key=lambda e: e.start_time)

    def list_all(self) -> list[Event]:
        return list(self._events)

    def __len__(self) -> int:
        return len(self._events)


class SessionRepository:
    """Dict-backed store for Scheduler instances, keyed by session id."""

    def __init__(self) -> None:
        self._store: dict[str, Scheduler] = {}

    def add(self, session_id: str, scheduler: Scheduler) -> None:
        self._store[session_id] = scheduler

    def get(self, session_id: str) -> Scheduler | None:
        return self._store.get(session_id)

    def remove(self, session_id: str) -> Scheduler | None:
        return self._store.pop(session_id, None)
