from __future__ import annotations

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from preempt.db import models


def list_tasks(session: Session) -> list[models.Task]:
    statement = select(models.Task).order_by(models.Task.created_at, models.Task.name)
    return list(session.scalars(statement))


def get_task_by_name(session: Session, name: str) -> models.Task | None:
    statement = select(models.Task).where(func.lower(models.Task.name) == name.lower())
    return session.scalars(statement).first()


def create_task(
    session: Session,
    *,
    name: str,
    description: str = "",
    priority: int = 1,
    done: bool = False,
    duration_minutes: int = 25,
    context_name: str | None = None,
) -> models.Task:
    task = models.Task(
        name=name,
        description=description,
        priority=priority,
        done=done,
        duration_minutes=duration_minutes,
        context_name=context_name,
    )
    session.add(task)
    session.flush()
    return task


def update_task(session: Session, task: models.Task, **changes) -> models.Task:
    for attribute, value in changes.items():
        setattr(task, attribute, value)
    session.flush()
    return task


def delete_task(session: Session, name: str) -> None:
    task = get_task_by_name(session, name)
    if task is None:
        return
    session.delete(task)
