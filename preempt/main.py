from __future__ import annotations

import logging

from fastapi import FastAPI

from preempt.api.v1.router import api_router
from preempt.core.config import get_settings
from preempt.db.initializer import create_database_schema


logger = logging.getLogger(__name__)

settings = get_settings()


def create_app() -> FastAPI:
    """Construct the FastAPI application and configure routes."""

    logging.getLogger("preempt").setLevel(settings.log_level)

    app = FastAPI(title="Preempt Day Planner", version="0.1.0")
    app.include_router(api_router, prefix="/api/v1")

    @app.on_event("startup")
    def on_startup() -> None:
        logger.info("Initializing database schema")
        create_database_schema()

    return app


app = create_app()
