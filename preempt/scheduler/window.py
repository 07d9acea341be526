from __future__ import annotations

import logging
from collections import deque
from datetime import datetime, timedelta
from typing import Iterable

from .entities import BlockKind, Task, TimeBlock
from .queues import POMODORO_DURATION, PriorityClass, allocate_pomodoro, build_priority_queue

logger = logging.getLogger(__name__)

FORCED_LOW_PRIORITY_INTERVAL = 4
LONG_BREAK_INTERVAL = 4
SHORT_BREAK = timedelta(minutes=5)
LONG_BREAK = timedelta(minutes=20)


def create_pomodoro_rest(start: datetime, duration: timedelta) -> TimeBlock:
    minutes = int(duration.total_seconds() // 60)
    return TimeBlock.spanning(start, start + duration, label=f"Break ({minutes} minutes)", kind=BlockKind.REST)


class WindowScheduler:
    """Fills one time window using multilevel queue scheduling.

    Tasks are split into high, medium and low priority queues.

    1. High priority tasks are served first. Every slice is one 25 minute
       pomodoro, so shortest job first degenerates to round robin within the
       queue, with ties broken by input order.
    2. Medium priority tasks are served once the high queue is empty.
    3. Low priority tasks are served once both other queues are empty. To avoid
       starvation, one low priority slice is forced in after every 4 high or
       medium slices.

    A short break follows every slice and every 4th iteration gets a long
    break instead. Scheduling stops when the window is full or no work is left.
    The scheduler mutates the tasks it is given; callers pass copies.
    """

    def __init__(self, tasks: Iterable[Task], window: TimeBlock) -> None:
        tasks = [task for task in tasks if task.has_work_remaining()]
        self.window = window
        self.high_queue = build_priority_queue(tasks, PriorityClass.HIGH)
        self.medium_queue = build_priority_queue(tasks, PriorityClass.MEDIUM)
        self.low_queue = build_priority_queue(tasks, PriorityClass.LOW)
        self.current_time = window.start
        self.high_med_count = 0
        self.total_count = 0
        self.forced_low_just_ran = False
        self.finished = False
        self.blocks: list[TimeBlock] = []

    def step(self) -> bool:
        """Run one iteration. Returns ``False`` once the window is finished."""

        if self.finished:
            return False

        if self.high_queue or self.medium_queue:
            if self._low_priority_due():
                self._allocate(self.low_queue)
                self.forced_low_just_ran = True
            else:
                self._allocate(self.high_queue if self.high_queue else self.medium_queue)
                self.high_med_count += 1
                self.forced_low_just_ran = False
            self.current_time += POMODORO_DURATION
        elif self.low_queue:
            self._allocate(self.low_queue)
            self.current_time += POMODORO_DURATION
        else:
            self.finished = True

        self.total_count += 1

        if self.current_time >= self.window.end or not self.has_work():
            self.finished = True
        else:
            rest = LONG_BREAK if self.total_count % LONG_BREAK_INTERVAL == 0 else SHORT_BREAK
            self.blocks.append(create_pomodoro_rest(self.current_time, rest))
            self.current_time += rest

        return not self.finished

    def run(self) -> list[TimeBlock]:
        while self.step():
            pass
        logger.debug(
            "Filled window %s-%s with %d blocks, %d tasks left unfinished",
            self.window.start,
            self.window.end,
            len(self.blocks),
            len(self.pending_tasks()),
        )
        return self.blocks

    def has_work(self) -> bool:
        return bool(self.high_queue or self.medium_queue or self.low_queue)

    def pending_tasks(self) -> list[Task]:
        """Tasks still holding work, highest class first."""

        pending: list[Task] = []
        for queue in (self.high_queue, self.medium_queue, self.low_queue):
            pending.extend(reversed(queue))
        return pending

    def _low_priority_due(self) -> bool:
        return (
            self.high_med_count >= 1
            and self.high_med_count % FORCED_LOW_PRIORITY_INTERVAL == 0
            and not self.forced_low_just_ran
        )

    def _allocate(self, queue: deque[Task]) -> None:
        block = allocate_pomodoro(queue, self.current_time)
        if block is not None:
            self.blocks.append(block)


def populate_time_block(tasks: Iterable[Task], schedule_block: TimeBlock) -> list[TimeBlock]:
    return WindowScheduler(tasks, schedule_block).run()


__all__ = [
    "FORCED_LOW_PRIORITY_INTERVAL",
    "LONG_BREAK",
    "SHORT_BREAK",
    "WindowScheduler",
    "create_pomodoro_rest",
    "populate_time_block",
]
