from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime, time, timezone

from sqlalchemy.orm import Session

from preempt.repositories import contexts as contexts_repo
from preempt.repositories import tasks as tasks_repo
from preempt.scheduler.entities import BlockKind, TimeBlock
from preempt.scheduler.planner import DayPlan, DaySchedulePlanner
from preempt.services.catalog import to_context, to_task

logger = logging.getLogger(__name__)

DAY_START = time(0, 0, 0)
DAY_END = time(23, 59, 59)


@dataclass(slots=True)
class SchedulingMetrics:
    work_blocks: int
    rest_minutes: int
    contexts_scheduled: int
    unfinished_tasks: list[str]

    def to_dict(self) -> dict[str, int | list[str]]:
        return {
            "work_blocks": self.work_blocks,
            "rest_minutes": self.rest_minutes,
            "contexts_scheduled": self.contexts_scheduled,
            "unfinished_tasks": self.unfinished_tasks,
        }


class SchedulingService:
    """Loads the task catalogue and plans one day with it."""

    def __init__(self, planner: DaySchedulePlanner | None = None) -> None:
        self.planner = planner or DaySchedulePlanner()

    def build_timeline(
        self,
        session: Session,
        *,
        day: date,
        start_time: time | None = None,
        end_time: time | None = None,
    ) -> tuple[DayPlan, SchedulingMetrics]:
        schedule_block = TimeBlock(
            start_time=DAY_START if start_time is None else start_time,
            end_time=DAY_END if end_time is None else end_time,
            start_date=day,
            end_date=day,
        )
        contexts = [to_context(record) for record in contexts_repo.list_contexts(session)]
        tasks = [to_task(record) for record in tasks_repo.list_tasks(session)]

        plan = self.planner.plan(contexts, tasks, schedule_block)
        metrics = _build_metrics(plan)
        logger.info(
            "Planned %s: %d work blocks across %d contexts, %d tasks unfinished",
            day.isoformat(),
            metrics.work_blocks,
            metrics.contexts_scheduled,
            len(metrics.unfinished_tasks),
        )
        return plan, metrics


def today_utc() -> date:
    return datetime.now(tz=timezone.utc).date()


def _build_metrics(plan: DayPlan) -> SchedulingMetrics:
    blocks = plan.blocks
    work_blocks = sum(1 for block in blocks if block.kind is BlockKind.WORK)
    rest_minutes = sum(
        int(block.duration.total_seconds() // 60) for block in blocks if block.kind is BlockKind.REST
    )
    return SchedulingMetrics(
        work_blocks=work_blocks,
        rest_minutes=rest_minutes,
        contexts_scheduled=len(plan.contexts),
        unfinished_tasks=plan.unfinished_tasks,
    )
