"""Service for detecting scheduling conflicts between events."""

from __future__ import annotations

from event_scheduler.domain.models import Event


def find_overlapping(start: int, end: int, events: list[Event]) -> list[Event]:
    """Return events that overlap the half-open range ``[start, end)``.

    Overlap rule: conflict if start < event.end_time AND event.start_time < end.
    Exact boundary touches (end == start) are NOT considered conflicts.
    """
    return [event for event in events if start < event.end_time and event.start_time < end]


def find_adjacent_conflicts(events: list[Event]) -> list[tuple[Event, Event]]:
    """Return neighbouring pairs of a start-sorted list whose intervals overlap.

    Only ``(events[i], events[i + 1])`` pairs are compared, so an overlap
    between two events separated by a third one in sorted order is not
    reported.
    """
    return [
        (current, following)
        for current, following in zip(events, events[1:])
        if current.end_time > following.start_time
    ]
