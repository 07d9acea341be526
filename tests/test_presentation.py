from __future__ import annotations

from datetime import date, time, timedelta

from preempt.scheduler.entities import Context, ContextException, TimeBlock, Weekday
from preempt.services.presentation import describe_context, format_schedule

MONDAY = date(2025, 1, 6)


def test_format_schedule_lines() -> None:
    schedule = [
        TimeBlock(start_time=time(9), end_time=time(9, 25), start_date=MONDAY, end_date=MONDAY, label="Report"),
        TimeBlock(start_time=time(9, 25), end_time=time(9, 30), start_date=MONDAY, end_date=MONDAY),
    ]

    assert format_schedule(schedule) == "09:00:00 - 09:25:00 | Report\n09:25:00 - 09:30:00 | Unnamed item"


def test_describe_context_without_exceptions() -> None:
    context = Context(
        name="Work",
        days=[Weekday.FRI, Weekday.MON, Weekday.WED],
        start=time(9),
        end=time(17, 30),
        transition=timedelta(minutes=15),
    )

    assert describe_context(context).splitlines() == [
        "Context - Work",
        "- Days: Mon, Wed, Fri",
        "- Start Time: 09:00",
        "- End Time: 17:30",
        "- Transition Time: 15 minutes",
        "- Exceptions: None",
    ]


def test_describe_context_with_exceptions_and_long_transition() -> None:
    context = Context(
        name="Gym",
        days=[],
        start=time(18),
        end=time(19),
        transition=timedelta(minutes=90),
        exceptions=[ContextException(day=MONDAY, start_time=time(7), end_time=time(8))],
    )

    lines = describe_context(context).splitlines()

    assert lines[1] == "- Days: None Set"
    assert lines[4] == "- Transition Time: 1.50 hours"
    assert lines[5:] == ["- Exceptions:", "  * 2025-01-06, 07:00 to 08:00"]
