from __future__ import annotations

import datetime as dt

from pydantic import BaseModel

from preempt.scheduler.entities import BlockKind


class TimelineRequest(BaseModel):
    date: dt.date | None = None
    start_time: dt.time | None = None
    end_time: dt.time | None = None


class TimeBlockRead(BaseModel):
    label: str | None
    kind: BlockKind | None
    start_date: dt.date
    start_time: dt.time
    end_date: dt.date
    end_time: dt.time


class ContextTimelineRead(BaseModel):
    context: str
    blocks: list[TimeBlockRead]
    unfinished_tasks: list[str]


class TimelineResponse(BaseModel):
    date: dt.date
    blocks: list[TimeBlockRead]
    contexts: list[ContextTimelineRead]
    metrics: dict
    runtime_ms: float | None = None
