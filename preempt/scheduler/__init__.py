from .entities import BlockKind, Context, ContextException, Task, TimeBlock, Weekday
from .planner import DayPlan, DaySchedulePlanner, build_schedule
from .queues import PriorityClass, allocate_pomodoro, build_priority_queue, classify_priority
from .window import WindowScheduler

__all__ = [
    "BlockKind",
    "Context",
    "ContextException",
    "DayPlan",
    "DaySchedulePlanner",
    "PriorityClass",
    "Task",
    "TimeBlock",
    "Weekday",
    "WindowScheduler",
    "allocate_pomodoro",
    "build_priority_queue",
    "build_schedule",
    "classify_priority",
]
