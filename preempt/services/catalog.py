from __future__ import annotations

import logging
from datetime import date, time, timedelta

from sqlalchemy.orm import Session

from preempt.db import models
from preempt.repositories import contexts as contexts_repo
from preempt.repositories import tasks as tasks_repo
from preempt.scheduler.entities import Context, ContextException, Task, Weekday

logger = logging.getLogger(__name__)


class CatalogError(Exception):
    """Base class for task and context bookkeeping failures."""


class DuplicateNameError(CatalogError):
    def __init__(self, kind: str, name: str) -> None:
        super().__init__(f"{kind.capitalize()} already exists: {name}")
        self.kind = kind
        self.name = name


class UnknownContextError(CatalogError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Context doesn't exist: {name}")
        self.name = name


class NotFoundError(CatalogError):
    def __init__(self, kind: str, name: str) -> None:
        super().__init__(f"{kind.capitalize()} not found: {name}")
        self.kind = kind
        self.name = name


def add_task(
    session: Session,
    *,
    name: str,
    description: str | None = None,
    priority: int = 1,
    duration_minutes: int = 25,
    context: str | None = None,
) -> models.Task:
    if tasks_repo.get_task_by_name(session, name) is not None:
        raise DuplicateNameError("task", name)
    context_name = _resolve_context_name(session, context)
    task = tasks_repo.create_task(
        session,
        name=name,
        description=description if description is not None else name,
        priority=priority,
        duration_minutes=duration_minutes,
        context_name=context_name,
    )
    logger.info("Added task %s (priority %d, %d minutes)", name, priority, duration_minutes)
    return task


def update_task(session: Session, name: str, **changes) -> models.Task:
    task = require_task(session, name)
    if "context_name" in changes:
        changes["context_name"] = _resolve_context_name(session, changes["context_name"])
    return tasks_repo.update_task(session, task, **changes)


def require_task(session: Session, name: str) -> models.Task:
    task = tasks_repo.get_task_by_name(session, name)
    if task is None:
        raise NotFoundError("task", name)
    return task


def add_context(
    session: Session,
    *,
    name: str,
    days: list[Weekday],
    start_time: time,
    end_time: time,
    transition_minutes: int = 0,
) -> models.Context:
    if contexts_repo.get_context_by_name(session, name) is not None:
        raise DuplicateNameError("context", name)
    context = contexts_repo.create_context(
        session,
        name=name,
        days=[day.value for day in days],
        start_time=start_time,
        end_time=end_time,
        transition_minutes=transition_minutes,
    )
    logger.info("Added context %s", name)
    return context


def add_context_exception(
    session: Session,
    name: str,
    *,
    day: date,
    start_time: time,
    end_time: time,
    transition_minutes: int = 0,
) -> models.ContextException:
    context = require_context(session, name)
    return contexts_repo.add_exception(
        session,
        context,
        day=day,
        start_time=start_time,
        end_time=end_time,
        transition_minutes=transition_minutes,
    )


def require_context(session: Session, name: str) -> models.Context:
    context = contexts_repo.get_context_by_name(session, name)
    if context is None:
        raise NotFoundError("context", name)
    return context


def to_task(record: models.Task) -> Task:
    return Task(
        name=record.name,
        description=record.description,
        priority=record.priority,
        done=record.done,
        duration=timedelta(minutes=record.duration_minutes),
        context=record.context_name,
        created=record.created_at,
    )


def to_context(record: models.Context) -> Context:
    return Context(
        name=record.name,
        days=[Weekday(day) for day in record.days],
        start=record.start_time,
        end=record.end_time,
        transition=timedelta(minutes=record.transition_minutes),
        exceptions=[
            ContextException(
                day=exception.day,
                start_time=exception.start_time,
                end_time=exception.end_time,
                transition=timedelta(minutes=exception.transition_minutes),
            )
            for exception in record.exceptions
        ],
    )


def _resolve_context_name(session: Session, name: str | None) -> str | None:
    if name is None:
        return None
    context = contexts_repo.get_context_by_name(session, name)
    if context is None:
        raise UnknownContextError(name)
    return context.name


__all__ = [
    "CatalogError",
    "DuplicateNameError",
    "NotFoundError",
    "UnknownContextError",
    "add_context",
    "add_context_exception",
    "add_task",
    "require_context",
    "require_task",
    "to_context",
    "to_task",
    "update_task",
]
