from __future__ import annotations

from collections import deque
from datetime import datetime, timedelta
from enum import IntEnum
from typing import Iterable

from .entities import BlockKind, Task, TimeBlock

POMODORO_DURATION = timedelta(minutes=25)


class PriorityClass(IntEnum):
    """Levels of the multilevel queue."""

    LOW = 0
    MEDIUM = 1
    HIGH = 2


def classify_priority(priority: int) -> PriorityClass:
    # 7, 8 and 9 fall through to LOW.
    if priority >= 10:
        return PriorityClass.HIGH
    if 3 <= priority <= 6:
        return PriorityClass.MEDIUM
    return PriorityClass.LOW


def build_priority_queue(tasks: Iterable[Task], priority_class: PriorityClass) -> deque[Task]:
    """Collect the tasks of one class, first task at the back of the queue."""

    queue: deque[Task] = deque()
    for task in tasks:
        if classify_priority(task.priority) is priority_class:
            queue.appendleft(task)
    return queue


def create_pomodoro_block(task: Task, start: datetime) -> TimeBlock:
    return TimeBlock.spanning(start, start + POMODORO_DURATION, label=task.name, kind=BlockKind.WORK)


def allocate_pomodoro(queue: deque[Task], current_time: datetime) -> TimeBlock | None:
    """Serve the task at the back of ``queue`` for one pomodoro.

    The task goes back to the front of the queue while it still has work, so
    tasks of the same class take turns. ``current_time`` carries both the day
    and the time of day the block starts on. Returns ``None`` when the queue is
    empty.
    """

    if not queue:
        return None
    task = queue.pop()
    block = create_pomodoro_block(task, current_time)
    task.do_work(POMODORO_DURATION)
    if task.has_work_remaining():
        queue.appendleft(task)
    return block


__all__ = [
    "POMODORO_DURATION",
    "PriorityClass",
    "allocate_pomodoro",
    "build_priority_queue",
    "classify_priority",
    "create_pomodoro_block",
]
