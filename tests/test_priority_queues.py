from __future__ import annotations

from collections import deque
from datetime import datetime, timedelta

import pytest

from preempt.scheduler.entities import BlockKind, Task
from preempt.scheduler.queues import (
    PriorityClass,
    allocate_pomodoro,
    build_priority_queue,
    classify_priority,
)


def _task(name: str, priority: int = 1, minutes: int = 25) -> Task:
    return Task(name=name, priority=priority, duration=timedelta(minutes=minutes))


def _ts(hour: int, minute: int = 0) -> datetime:
    return datetime(2025, 1, 6, hour, minute)


@pytest.mark.parametrize("priority", [10, 11, 42, 1000])
def test_high_priority_threshold(priority: int) -> None:
    assert classify_priority(priority) is PriorityClass.HIGH


@pytest.mark.parametrize("priority", [3, 4, 5, 6])
def test_medium_priority_range(priority: int) -> None:
    assert classify_priority(priority) is PriorityClass.MEDIUM


@pytest.mark.parametrize("priority", [-7, -1, 0, 1, 2, 7, 8, 9])
def test_everything_else_is_low_priority(priority: int) -> None:
    assert classify_priority(priority) is PriorityClass.LOW


def test_priority_queue_reverses_input_order() -> None:
    first, high, second = _task("first", 5), _task("urgent", 10), _task("second", 4)

    queue = build_priority_queue([first, high, second], PriorityClass.MEDIUM)

    assert [task.name for task in queue] == ["second", "first"]
    assert queue[-1] is first


def test_priority_queue_keeps_duplicates() -> None:
    task = _task("repeat", 1)

    queue = build_priority_queue([task, task], PriorityClass.LOW)

    assert len(queue) == 2


def test_allocate_emits_one_pomodoro_and_requeues() -> None:
    task = _task("Write report", 10, minutes=50)
    queue = deque([task])

    block = allocate_pomodoro(queue, _ts(9))

    assert block is not None
    assert block.label == "Write report"
    assert block.kind is BlockKind.WORK
    assert (block.start, block.end) == (_ts(9), _ts(9, 25))
    assert task.duration == timedelta(minutes=25)
    assert list(queue) == [task]


def test_allocate_drops_finished_task() -> None:
    task = _task("Short", minutes=10)
    queue = deque([task])

    assert allocate_pomodoro(queue, _ts(9)) is not None
    assert task.duration == timedelta(0)
    assert not queue


def test_allocate_on_empty_queue_produces_nothing() -> None:
    assert allocate_pomodoro(deque(), _ts(9)) is None


def test_allocate_round_robins_within_a_class() -> None:
    queue = build_priority_queue([_task("a", minutes=50), _task("b", minutes=25)], PriorityClass.LOW)

    labels = []
    while queue:
        labels.append(allocate_pomodoro(queue, _ts(9)).label)

    assert labels == ["a", "b", "a"]


def test_allocated_block_keeps_day_and_time() -> None:
    queue = deque([_task("Gym")])

    block = allocate_pomodoro(queue, _ts(18))

    assert (block.start_date, block.end_date) == (_ts(18).date(), _ts(18).date())
    assert (block.start_time, block.end_time) == (_ts(18).time(), _ts(18, 25).time())


@pytest.mark.parametrize(
    ("minutes", "allocations", "expected"),
    [(50, 1, 25), (50, 2, 0), (30, 2, 0), (100, 3, 25), (0, 4, 0)],
)
def test_remaining_duration_never_goes_negative(minutes: int, allocations: int, expected: int) -> None:
    task = _task("Task", minutes=minutes)

    for _ in range(allocations):
        task.do_work(timedelta(minutes=25))

    assert task.duration == timedelta(minutes=expected)
    assert task.has_work_remaining() is (expected > 0)
