from __future__ import annotations

import time
from dataclasses import asdict

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from preempt.db.session import get_session
from preempt.schemas import ContextTimelineRead, TimeBlockRead, TimelineRequest, TimelineResponse
from preempt.services.scheduling import SchedulingService, today_utc

router = APIRouter()

_scheduling_service = SchedulingService()


@router.post("/timeline", response_model=TimelineResponse, status_code=status.HTTP_202_ACCEPTED)
def build_timeline(payload: TimelineRequest, session: Session = Depends(get_session)) -> TimelineResponse:
    if (
        payload.start_time is not None
        and payload.end_time is not None
        and payload.end_time <= payload.start_time
    ):
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="end_time must be after start_time",
        )
    day = payload.date or today_utc()

    start_time = time.perf_counter()
    plan, metrics = _scheduling_service.build_timeline(
        session,
        day=day,
        start_time=payload.start_time,
        end_time=payload.end_time,
    )
    runtime_ms = (time.perf_counter() - start_time) * 1000

    response = TimelineResponse(
        date=day,
        blocks=[TimeBlockRead(**asdict(block)) for block in plan.blocks],
        contexts=[
            ContextTimelineRead(
                context=context_plan.context,
                blocks=[TimeBlockRead(**asdict(block)) for block in context_plan.blocks],
                unfinished_tasks=context_plan.unfinished_tasks,
            )
            for context_plan in plan.contexts
        ],
        metrics=metrics.to_dict(),
        runtime_ms=runtime_ms,
    )
    return response
