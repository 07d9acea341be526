from __future__ import annotations

import logging

from preempt.db import models  # noqa: F401
from preempt.db.base import Base
from preempt.db.session import engine

logger = logging.getLogger(__name__)


def create_database_schema() -> None:
    """Create the task and context tables if they do not exist."""

    logger.debug("Creating tables on %s", engine.url.render_as_string(hide_password=True))
    Base.metadata.create_all(bind=engine)


__all__ = ["create_database_schema"]
