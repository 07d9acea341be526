from __future__ import annotations

import argparse
import logging
import sys
from datetime import date, time
from typing import Sequence

from sqlalchemy.orm import Session

from preempt.core.config import get_settings
from preempt.db.initializer import create_database_schema
from preempt.db.session import SessionLocal
from preempt.scheduler.entities import Weekday
from preempt.services import catalog
from preempt.services.presentation import describe_context, format_schedule
from preempt.services.scheduling import SchedulingService, today_utc


def _parse_days(value: str) -> list[Weekday]:
    try:
        return [Weekday.parse(code) for code in value.split(",") if code.strip()]
    except ValueError as exc:
        raise argparse.ArgumentTypeError(
            f"unknown day code in {value!r}, expected Sun, Mon, Tue, Wed, Thu, Fri, Sat"
        ) from exc


def _parse_time(value: str) -> time:
    try:
        return time.fromisoformat(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid time {value!r}, expected HH:MM") from exc


def _parse_minutes(value: str) -> int:
    try:
        minutes = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid number of minutes {value!r}") from exc
    if minutes < 0:
        raise argparse.ArgumentTypeError(f"minutes must not be negative, got {minutes}")
    return minutes


def _parse_date(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid date {value!r}, expected YYYY-MM-DD") from exc


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="preempt", description="A scheduler for humans.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    add_task = subparsers.add_parser("add-task", help="Adds a new task")
    add_task.add_argument("--name", required=True, help="The name of the task")
    add_task.add_argument("--duration", type=_parse_minutes, default=25, help="The duration of the task in minutes")
    add_task.add_argument("--context", help="The context of the task")
    add_task.add_argument("--priority", type=int, default=1, help="The priority of the task (0-10)")

    add_context = subparsers.add_parser("add-context", help="Adds a new context")
    add_context.add_argument("--name", required=True, help="The name of the context")
    add_context.add_argument(
        "--days",
        required=True,
        type=_parse_days,
        help="Comma separated days of the week, e.g. Mon,Wed,Fri",
    )
    add_context.add_argument("--start", required=True, type=_parse_time, help="The start time for the context")
    add_context.add_argument("--end", required=True, type=_parse_time, help="The end time for the context")
    add_context.add_argument(
        "--transition", type=_parse_minutes, default=0, help="The transition time between contexts in minutes"
    )

    show_context = subparsers.add_parser("show-context", help="Shows details about a specific context")
    show_context.add_argument("name", help="The name of the context")

    complete_task = subparsers.add_parser("complete-task", help="Marks a task as done")
    complete_task.add_argument("name", help="The name of the task")

    timeline = subparsers.add_parser("timeline", help="Creates and shows a timeline incorporating the current tasks")
    timeline.add_argument("--date", type=_parse_date, help="The day to plan, defaults to today (UTC)")

    return parser


def run_command(session: Session, args: argparse.Namespace) -> str:
    if args.command == "add-task":
        catalog.add_task(
            session,
            name=args.name,
            priority=args.priority,
            duration_minutes=args.duration,
            context=args.context,
        )
        return f"Added task {args.name}"

    if args.command == "add-context":
        if args.end <= args.start:
            raise catalog.CatalogError("The end time must be after the start time")
        catalog.add_context(
            session,
            name=args.name,
            days=args.days,
            start_time=args.start,
            end_time=args.end,
            transition_minutes=args.transition,
        )
        return f"Added context {args.name}"

    if args.command == "show-context":
        return describe_context(catalog.to_context(catalog.require_context(session, args.name)))

    if args.command == "complete-task":
        catalog.update_task(session, args.name, done=True)
        return f"Completed task {args.name}"

    plan, _ = SchedulingService().build_timeline(session, day=args.date or today_utc())
    return format_schedule(plan.blocks)


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=get_settings().log_level)
    create_database_schema()

    with SessionLocal() as session:
        try:
            output = run_command(session, args)
        except catalog.CatalogError as exc:
            session.rollback()
            print(exc, file=sys.stderr)
            return 1
        session.commit()

    if output:
        print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
