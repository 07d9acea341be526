"""Data access layer repositories."""

from . import contexts, tasks

__all__ = [
    "contexts",
    "tasks",
]
