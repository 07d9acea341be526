from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import date, datetime, time, timedelta, timezone
from enum import Enum

DEFAULT_TASK_DURATION = timedelta(minutes=25)


class Weekday(str, Enum):
    MON = "Mon"
    TUE = "Tue"
    WED = "Wed"
    THU = "Thu"
    FRI = "Fri"
    SAT = "Sat"
    SUN = "Sun"

    @classmethod
    def from_date(cls, day: date) -> Weekday:
        return _WEEKDAYS_FROM_MONDAY[day.weekday()]

    @classmethod
    def parse(cls, code: str) -> Weekday:
        normalized = code.strip()[:3].capitalize()
        return cls(normalized)

    @property
    def number_from_monday(self) -> int:
        return _WEEKDAYS_FROM_MONDAY.index(self) + 1


_WEEKDAYS_FROM_MONDAY = list(Weekday)


class BlockKind(str, Enum):
    WORK = "work"
    REST = "rest"


@dataclass(frozen=True, slots=True)
class TimeBlock:
    """A concrete block of time.

    Used both as the window a context offers on a given day and as each item of
    a computed schedule. ``end_date`` moves past ``start_date`` only when a
    block runs over midnight.
    """

    start_time: time
    end_time: time
    start_date: date
    end_date: date
    label: str | None = None
    kind: BlockKind | None = None

    @classmethod
    def spanning(
        cls,
        start: datetime,
        end: datetime,
        *,
        label: str | None = None,
        kind: BlockKind | None = None,
    ) -> TimeBlock:
        return cls(
            start_time=start.time(),
            end_time=end.time(),
            start_date=start.date(),
            end_date=end.date(),
            label=label,
            kind=kind,
        )

    @classmethod
    def full_day(cls, day: date) -> TimeBlock:
        return cls(start_time=time(0, 0, 0), end_time=time(23, 59, 59), start_date=day, end_date=day)

    @property
    def start(self) -> datetime:
        return datetime.combine(self.start_date, self.start_time)

    @property
    def end(self) -> datetime:
        return datetime.combine(self.end_date, self.end_time)

    @property
    def duration(self) -> timedelta:
        return self.end - self.start


@dataclass(slots=True)
class Task:
    """A description of a thing to do."""

    name: str
    description: str = ""
    priority: int = 1
    done: bool = False
    duration: timedelta = DEFAULT_TASK_DURATION
    context: str | None = None
    created: datetime = field(default_factory=lambda: datetime.now(tz=timezone.utc))

    def do_work(self, duration: timedelta) -> None:
        if self.duration < duration:
            self.duration = timedelta(0)
        else:
            self.duration -= duration

    def has_work_remaining(self) -> bool:
        return self.duration > timedelta(0)

    def belongs_to(self, context_name: str) -> bool:
        return self.context is not None and self.context.lower() == context_name.lower()

    def copy(self) -> Task:
        return replace(self)


@dataclass(slots=True)
class ContextException:
    day: date
    start_time: time
    end_time: time
    transition: timedelta = timedelta(0)


@dataclass(slots=True)
class Context:
    """A recurring daily window, described like a recurring calendar invite.

    Contexts carry no timezone; every time and date is treated as UTC.
    Exceptions are kept for display and are not consulted when planning.
    """

    name: str
    days: list[Weekday]
    start: time
    end: time
    transition: timedelta = timedelta(0)
    exceptions: list[ContextException] = field(default_factory=list)

    def is_active_on(self, day: date) -> bool:
        return Weekday.from_date(day) in self.days

    def get_timeblock(self, day: date) -> TimeBlock | None:
        if not self.is_active_on(day):
            return None
        return TimeBlock(start_time=self.start, end_time=self.end, start_date=day, end_date=day)

    def sorted_days(self) -> list[Weekday]:
        return sorted(set(self.days), key=lambda weekday: weekday.number_from_monday)


__all__ = [
    "BlockKind",
    "Context",
    "ContextException",
    "DEFAULT_TASK_DURATION",
    "Task",
    "TimeBlock",
    "Weekday",
]
