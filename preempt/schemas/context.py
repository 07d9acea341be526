from __future__ import annotations

from datetime import date, datetime, time
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, model_validator

from preempt.scheduler.entities import Weekday


class _WindowModel(BaseModel):
    start_time: time
    end_time: time
    transition_minutes: int = Field(default=0, ge=0)

    @model_validator(mode="after")
    def _check_window(self):
        if self.end_time <= self.start_time:
            raise ValueError("end_time must be after start_time")
        return self


class ContextExceptionCreate(_WindowModel):
    day: date


class ContextExceptionRead(ContextExceptionCreate):
    model_config = ConfigDict(from_attributes=True)


class ContextCreate(_WindowModel):
    name: str = Field(min_length=1, max_length=255)
    days: list[Weekday]


class ContextRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    days: list[Weekday]
    start_time: time
    end_time: time
    transition_minutes: int
    exceptions: list[ContextExceptionRead]
    created_at: datetime
    updated_at: datetime


class ContextCollection(BaseModel):
    items: list[ContextRead]
