from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class TaskBase(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    description: str | None = None
    priority: int = 1
    duration_minutes: int = Field(default=25, ge=0)
    context_name: str | None = None


class TaskCreate(TaskBase):
    pass


class TaskUpdate(BaseModel):
    description: str | None = None
    priority: int | None = None
    duration_minutes: int | None = Field(default=None, ge=0)
    context_name: str | None = None
    done: bool | None = None


class TaskRead(TaskBase):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    description: str
    done: bool
    created_at: datetime
    updated_at: datetime


class TaskCollection(BaseModel):
    items: list[TaskRead]
