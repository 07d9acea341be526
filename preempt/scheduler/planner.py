from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Sequence

from .entities import Context, Task, TimeBlock
from .window import WindowScheduler

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ContextPlan:
    context: str
    window: TimeBlock
    blocks: list[TimeBlock]
    unfinished_tasks: list[str]


@dataclass(slots=True)
class DayPlan:
    contexts: list[ContextPlan] = field(default_factory=list)

    @property
    def blocks(self) -> list[TimeBlock]:
        return [block for plan in self.contexts for block in plan.blocks]

    @property
    def unfinished_tasks(self) -> list[str]:
        return [name for plan in self.contexts for name in plan.unfinished_tasks]


def filter_context_tasks(context: Context, tasks: Iterable[Task]) -> list[Task]:
    """Owned copies of the open tasks attached to ``context``."""

    return [task.copy() for task in tasks if not task.done and task.belongs_to(context.name)]


def clip_window(window: TimeBlock, schedule_block: TimeBlock) -> TimeBlock | None:
    start = max(window.start, schedule_block.start)
    end = min(window.end, schedule_block.end)
    if start >= end:
        return None
    return TimeBlock.spanning(start, end)


class DaySchedulePlanner:
    """Builds the schedule of a single day across every active context."""

    def plan(self, contexts: Sequence[Context], tasks: Sequence[Task], schedule_block: TimeBlock) -> DayPlan:
        day_plan = DayPlan()
        for context in contexts:
            timeblock = context.get_timeblock(schedule_block.start_date)
            if timeblock is None:
                continue
            window = clip_window(timeblock, schedule_block)
            if window is None:
                logger.debug("Context %s has no time left inside %s", context.name, schedule_block)
                continue

            scheduler = WindowScheduler(filter_context_tasks(context, tasks), window)
            blocks = scheduler.run()
            unfinished = [task.name for task in scheduler.pending_tasks()]
            logger.debug("Context %s produced %d blocks", context.name, len(blocks))
            day_plan.contexts.append(
                ContextPlan(context=context.name, window=window, blocks=blocks, unfinished_tasks=unfinished)
            )
        return day_plan


def build_schedule(
    contexts: Sequence[Context],
    tasks: Sequence[Task],
    schedule_block: TimeBlock,
) -> list[TimeBlock]:
    """Schedule for the day of ``schedule_block``, one context after another."""

    return DaySchedulePlanner().plan(contexts, tasks, schedule_block).blocks


__all__ = [
    "ContextPlan",
    "DayPlan",
    "DaySchedulePlanner",
    "build_schedule",
    "clip_window",
    "filter_context_tasks",
]
