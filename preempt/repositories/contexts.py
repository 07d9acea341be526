from __future__ import annotations

from datetime import date, time

from sqlalchemy import func, select
from sqlalchemy.orm import Session, selectinload

from preempt.db import models


def list_contexts(session: Session) -> list[models.Context]:
    statement = (
        select(models.Context)
        .options(selectinload(models.Context.exceptions))
        .order_by(models.Context.created_at, models.Context.name)
    )
    return list(session.scalars(statement))


def get_context_by_name(session: Session, name: str) -> models.Context | None:
    statement = (
        select(models.Context)
        .options(selectinload(models.Context.exceptions))
        .where(func.lower(models.Context.name) == name.lower())
    )
    return session.scalars(statement).first()


def create_context(
    session: Session,
    *,
    name: str,
    days: list[str],
    start_time: time,
    end_time: time,
    transition_minutes: int = 0,
) -> models.Context:
    context = models.Context(
        name=name,
        days=days,
        start_time=start_time,
        end_time=end_time,
        transition_minutes=transition_minutes,
    )
    session.add(context)
    session.flush()
    return context


def add_exception(
    session: Session,
    context: models.Context,
    *,
    day: date,
    start_time: time,
    end_time: time,
    transition_minutes: int = 0,
) -> models.ContextException:
    exception = models.ContextException(
        day=day,
        start_time=start_time,
        end_time=end_time,
        transition_minutes=transition_minutes,
    )
    context.exceptions.append(exception)
    session.flush()
    return exception


def delete_context(session: Session, name: str) -> None:
    context = get_context_by_name(session, name)
    if context is None:
        return
    session.delete(context)
