"""Service for proposing alternative, non-conflicting slots for an event."""

from __future__ import annotations

from event_scheduler.domain.models import Event, Suggestion
from event_scheduler.services.conflicts import find_overlapping

DEFAULT_STEP_MINUTES = 30
DEFAULT_LIMIT = 3


def find_alternative_slots(
    event: Event,
    events: list[Event],
    *,
    working_hour_start: int,
    working_hour_end: int,
    step_minutes: int = DEFAULT_STEP_MINUTES,
    limit: int = DEFAULT_LIMIT,
) -> list[Suggestion]:
    """Return up to *limit* free slots with the same duration as *event*.

    Candidates start at ``working_hour_start`` and advance by *step_minutes*
    while the start is before ``working_hour_end``. A candidate is kept only
    if it ends within working hours and overlaps none of *events*.
    """
    suggestions: list[Suggestion] = []
    if limit <= 0:
        return suggestions

    for start in range(working_hour_start, working_hour_end, step_minutes):
        end = start + event.duration
        if end > working_hour_end:
            continue
        if find_overlapping(start, end, events):
            continue

        suggestions.append(Suggestion(start=start, end=end))
        if len(suggestions) >= limit:
            break

    return suggestions
