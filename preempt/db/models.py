from __future__ import annotations

import uuid
from datetime import date, time

from sqlalchemy import JSON, Boolean, Date, ForeignKey, String, Time
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, TimestampMixin


class Task(Base, TimestampMixin):
    """Work item waiting to be placed into a context."""

    __tablename__ = "tasks"

    id: Mapped[uuid.UUID] = mapped_column(primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    description: Mapped[str] = mapped_column(String, nullable=False, default="")
    priority: Mapped[int] = mapped_column(nullable=False, default=1)
    done: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    duration_minutes: Mapped[int] = mapped_column(nullable=False, default=25)
    context_name: Mapped[str | None] = mapped_column(String(255), nullable=True, index=True)


class Context(Base, TimestampMixin):
    """Recurring daily window tasks can be attached to."""

    __tablename__ = "contexts"

    id: Mapped[uuid.UUID] = mapped_column(primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    days: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    start_time: Mapped[time] = mapped_column(Time, nullable=False)
    end_time: Mapped[time] = mapped_column(Time, nullable=False)
    transition_minutes: Mapped[int] = mapped_column(nullable=False, default=0)

    exceptions: Mapped[list[ContextException]] = relationship(
        back_populates="context",
        cascade="all, delete-orphan",
        order_by="ContextException.day",
    )


class ContextException(Base, TimestampMixin):
    """Date specific override of a context window."""

    __tablename__ = "context_exceptions"

    id: Mapped[uuid.UUID] = mapped_column(primary_key=True, default=uuid.uuid4)
    context_id: Mapped[uuid.UUID] = mapped_column(ForeignKey("contexts.id", ondelete="CASCADE"), nullable=False)
    day: Mapped[date] = mapped_column(Date, nullable=False)
    start_time: Mapped[time] = mapped_column(Time, nullable=False)
    end_time: Mapped[time] = mapped_column(Time, nullable=False)
    transition_minutes: Mapped[int] = mapped_column(nullable=False, default=0)

    context: Mapped[Context] = relationship(back_populates="exceptions")
