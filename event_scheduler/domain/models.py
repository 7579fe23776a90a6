"""Domain models for the event scheduler."""

from __future__ import annotations

import uuid

from pydantic import BaseModel, ConfigDict, Field, computed_field, model_validator

from event_scheduler.domain.errors import InvalidInput, InvalidRange
from event_scheduler.domain.timeofday import TimeOfDay, minutes_between


def _new_id() -> str:
    return str(uuid.uuid4())


# ---------------------------------------------------------------------------
# Core domain models
# ---------------------------------------------------------------------------


class Event(BaseModel):
    """One scheduled interval on the shared reference day.

    Immutable once constructed. ``end_time <= start_time`` raises
    ``InvalidRange`` rather than producing a non-positive duration.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=_new_id)
    name: str = Field(min_length=1)
    start_time: TimeOfDay
    end_time: TimeOfDay

    @model_validator(mode="after")
    def _end_after_start(self) -> Event:
        if self.end_time <= self.start_time:
            raise InvalidRange(self.start_time, self.end_time)
        return self

    @computed_field
    @property
    def duration(self) -> int:
        """Length of the event in minutes."""
        return minutes_between(self.start_time, self.end_time)


class Suggestion(BaseModel):
    model_config = ConfigDict(frozen=True)

    start: TimeOfDay
    end: TimeOfDay


class Conflict(BaseModel):
    """Two adjacent events (in start-time order) whose intervals overlap.

    ``suggestions`` are alternative slots for ``event2``, the later one.
    """

    model_config = ConfigDict(frozen=True)

    event1: Event
    event2: Event
    suggestions: list[Suggestion] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Request / Response DTOs
# ---------------------------------------------------------------------------


class EventRequest(BaseModel):
    name: str = Field(min_length=1)
    start_time: TimeOfDay
    end_time: TimeOfDay

    @model_validator(mode="after")
    def _end_after_start(self) -> EventRequest:
        if self.end_time <= self.start_time:
            raise InvalidInput("end_time must be after start_time")
        return self

    def to_event(self) -> Event:
        return Event(
            name=self.name, start_time=self.start_time, end_time=self.end_time
        )


class AddEventResponse(BaseModel):
    events: list[Event]
    conflicts: list[Conflict]


class CreateSessionRequest(BaseModel):
    working_hour_start: TimeOfDay | None = None
    working_hour_end: TimeOfDay | None = None
    slot_step_minutes: int | None = Field(default=None, gt=0)
    max_suggestions: int | None = Field(default=None, ge=0)


class SessionInfo(BaseModel):
    id: str
    working_hour_start: TimeOfDay
    working_hour_end: TimeOfDay
    slot_step_minutes: int
    max_suggestions: int
