"""Test configuration and fixtures for the SCM inventory API."""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import event
from sqlalchemy.pool import QueuePool
from sqlmodel import SQLModel, create_engine

from app.api.app import create_app
from app.core.config import Settings
from app.db.core import create_db_engine
from app.db import schema  # noqa: F401  registers the tables on SQLModel.metadata


def _enable_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


@pytest.fixture
def settings() -> Settings:
    return Settings(database_url="sqlite://", log_file="", allowed_hosts="*")


@pytest.fixture
def bare_engine(settings):
    """In-memory database without any tables."""
    engine = create_db_engine(settings)
    event.listen(engine, "connect", _enable_foreign_keys)
    yield engine
    engine.dispose()


@pytest.fixture
def engine(bare_engine):
    SQLModel.metadata.create_all(bare_engine)
    return bare_engine


@pytest.fixture(name="client")
def client_fixture(settings, engine):
    """Create a test client backed by a fresh in-memory database."""
    return TestClient(create_app(settings, engine=engine))


@pytest.fixture
def pooled_engine(tmp_path):
    """File-backed database whose pool holds exactly one connection."""
    engine = create_engine(
        f"sqlite:///{tmp_path / 'scm.db'}",
        connect_args={"check_same_thread": False},
        poolclass=QueuePool,
        pool_size=1,
        max_overflow=0,
        pool_timeout=0.2,
    )
    event.listen(engine, "connect", _enable_foreign_keys)
    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def pooled_client(settings, pooled_engine):
    return TestClient(create_app(settings, engine=pooled_engine))
