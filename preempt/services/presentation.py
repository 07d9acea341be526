from __future__ import annotations

from typing import Iterable

from preempt.scheduler.entities import Context, TimeBlock

UNNAMED_ITEM = "Unnamed item"


def format_block(block: TimeBlock) -> str:
    return f"{block.start_time.isoformat()} - {block.end_time.isoformat()} | {block.label or UNNAMED_ITEM}"


def format_schedule(schedule: Iterable[TimeBlock]) -> str:
    return "\n".join(format_block(block) for block in schedule)


def format_transition(minutes: int) -> str:
    if minutes >= 60:
        return f"{minutes / 60:.2f} hours"
    return f"{minutes} minutes"


def describe_context(context: Context) -> str:
    """Multi-line human readable summary of a context."""

    days = ", ".join(day.value for day in context.sorted_days()) if context.days else "None Set"
    lines = [
        f"Context - {context.name}",
        f"- Days: {days}",
        f"- Start Time: {context.start.strftime('%H:%M')}",
        f"- End Time: {context.end.strftime('%H:%M')}",
        f"- Transition Time: {format_transition(int(context.transition.total_seconds() // 60))}",
    ]
    if context.exceptions:
        lines.append("- Exceptions:")
        for exception in context.exceptions:
            lines.append(
                f"  * {exception.day.isoformat()}, "
                f"{exception.start_time.strftime('%H:%M')} to {exception.end_time.strftime('%H:%M')}"
            )
    else:
        lines.append("- Exceptions: None")
    return "\n".join(lines)


__all__ = ["UNNAMED_ITEM", "describe_context", "format_block", "format_schedule", "format_transition"]
