from __future__ import annotations

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from event_scheduler.domain.timeofday import TimeOfDay


class SchedulerSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="SCHEDULER_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    # Window that bounds every suggested slot
    working_hour_start: TimeOfDay = "08:00"
    working_hour_end: TimeOfDay = "18:00"

    # Suggestion search
    slot_step_minutes: int = Field(default=30, gt=0)
    max_suggestions: int = Field(default=3, ge=0)

    # Logging
    log_level: str = "INFO"
    log_json: bool = False

    @model_validator(mode="after")
    def _working_hours_ordered(self) -> SchedulerSettings:
        if self.working_hour_end <= self.working_hour_start:
            raise ValueError("working_hour_end must be after working_hour_start")
        return self
