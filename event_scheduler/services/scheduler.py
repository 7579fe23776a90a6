"""The scheduler: inserts events, detects conflicts and suggests new slots."""

from __future__ import annotations

import threading

from event_scheduler.core.config import SchedulerSettings
from event_scheduler.core.logging import log
from event_scheduler.domain.models import Conflict, Event, Suggestion
from event_scheduler.repos.memory import EventRepository
from event_scheduler.services.conflicts import find_adjacent_conflicts
from event_scheduler.services.slots import find_alternative_slots


class Scheduler:
    """Owns one sorted collection of events for a single caller.

    Working hours and search options are fixed at construction. Every call
    to ``add_event`` recomputes conflicts over the whole collection; nothing
    is cached between calls.
    """

    def __init__(
        self,
        settings: SchedulerSettings | None = None,
        repo: EventRepository | None = None,
    ) -> None:
        self.settings = settings or SchedulerSettings()
        self.repo = repo or EventRepository()
        # append + sort + scan must not interleave
        self._lock = threading.Lock()

    @property
    def events(self) -> list[Event]:
        with self._lock:
            return self.repo.list_all()

    @property
    def working_hour_start(self) -> int:
        return self.settings.working_hour_start

    @property
    def working_hour_end(self) -> int:
        return self.settings.working_hour_end

    def add_event(self, event: Event) -> list[Conflict]:
        """Insert *event*, re-sort, and return every conflict in the schedule."""
        _, conflicts = self.add_event_snapshot(event)
        return conflicts

    def add_event_snapshot(self, event: Event) -> tuple[list[Event], list[Conflict]]:
        """Like ``add_event``, but also return the sorted events the scan ran over."""
        with self._lock:
            self.repo.add(event)
            events = self.repo.list_all()
            conflicts = self._scan(events)

        log.info(
            "event_added",
            event_id=event.id,
            name=event.name,
            start_time=event.start_time,
            end_time=event.end_time,
            total_events=len(events),
            conflicts=len(conflicts),
        )
        for conflict in conflicts:
            log.info(
                "conflict_detected",
                event1_id=conflict.event1.id,
                event2_id=conflict.event2.id,
                suggestions=len(conflict.suggestions),
            )
        return events, conflicts

    def find_conflicts(self) -> list[Conflict]:
        """Return the conflicts in the current schedule without modifying it."""
        with self._lock:
            return self._scan(self.repo.list_all())

    def find_alternative_slots(
        self, event: Event, events: list[Event] | None = None
    ) -> list[Suggestion]:
        """Return free slots matching *event*'s duration.

        Slots are checked against *events*, defaulting to the current
        schedule.
        """
        return find_alternative_slots(
            event,
            self.events if events is None else events,
            working_hour_start=self.working_hour_start,
            working_hour_end=self.working_hour_end,
            step_minutes=self.settings.slot_step_minutes,
            limit=self.settings.max_suggestions,
        )

    def _scan(self, events: list[Event]) -> list[Conflict]:
        return [
            Conflict(
                event1=first,
                event2=second,
                suggestions=self.find_alternative_slots(second, events),
            )
            for first, second in find_adjacent_conflicts(events)
        ]
