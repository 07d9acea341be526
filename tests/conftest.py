from __future__ import annotations

import os
import tempfile
from collections.abc import Generator
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

TEST_DB_DIR = Path(tempfile.mkdtemp(prefix="preempt-tests-"))
os.environ["APP_ENV"] = "test"
os.environ["LOG_LEVEL"] = "DEBUG"
os.environ["DATABASE_URL"] = f"sqlite:///{TEST_DB_DIR / 'preempt_test.db'}"

from preempt.db.base import Base  # noqa: E402
from preempt.db.initializer import create_database_schema  # noqa: E402
from preempt.db.session import SessionLocal, engine  # noqa: E402
from preempt.main import create_app  # noqa: E402


@pytest.fixture(scope="session", autouse=True)
def create_test_database() -> Generator[None, None, None]:
    create_database_schema()
    yield
    engine.dispose()


@pytest.fixture()
def session_scope() -> Generator:
    session = SessionLocal()
    try:
        yield session
        session.commit()
    finally:
        session.close()
        with engine.begin() as connection:
            for table in reversed(Base.metadata.sorted_tables):
                connection.execute(table.delete())


@pytest.fixture()
def client() -> Generator[TestClient, None, None]:
    app = create_app()
    with TestClient(app) as test_client:
        yield test_client
