"""Error taxonomy for the scheduler."""

from __future__ import annotations


class SchedulerError(Exception):
    """Base class for all scheduler errors."""


class InvalidInput(SchedulerError, ValueError):
    """A malformed time string, or an end time that is not after the start.

    Subclasses ``ValueError`` so pydantic validators report it as a
    ``ValidationError`` at the request boundary.
    """


class InvalidRange(SchedulerError):
    """An Event was constructed with a non-positive duration."""

    def __init__(self, start_time: int, end_time: int) -> None:
        self.start_time = start_time
        self.end_time = end_time
        super().__init__("end_time must be after start_time")

