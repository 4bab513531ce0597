from typing import Iterator

from fastapi import Request
from loguru import logger
from sqlalchemy.engine import Connection, Engine, make_url
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.pool import StaticPool
from sqlmodel import create_engine

from app.core.config import Settings
from app.core.exceptions import StoreConnectionError


MYSQL_DUPLICATE_ENTRY = 1062
POSTGRES_UNIQUE_VIOLATION = "23505"
SQLITE_UNIQUE_VIOLATION = "UNIQUE constraint failed"


def create_db_engine(settings: Settings) -> Engine:
    url = make_url(settings.sqlalchemy_url)

    if url.get_backend_name() != "sqlite":
        # No overflow limit: a request never waits for another to give a connection back
        return create_engine(url, echo=settings.debug, pool_pre_ping=True, max_overflow=-1)

    connect_args = {"check_same_thread": False}

    if url.database in (None, "", ":memory:"):
        # In-memory databases only live as long as their single connection
        return create_engine(
            url, echo=settings.debug, connect_args=connect_args, poolclass=StaticPool
        )

    return create_engine(
        url, echo=settings.debug, connect_args=connect_args, max_overflow=-1
    )


def get_connection(request: Request) -> Iterator[Connection]:
    """
    Checks out one connection for the duration of a request.

    The connection goes back to the engine when the request finishes,
    whether the handler succeeded or raised.
    """
    engine: Engine = request.app.state.engine

    try:
        connection = engine.connect()
    except SQLAlchemyError as e:
        logger.exception("Database connection failed")
        raise StoreConnectionError() from e

    with connection:
        yield connection


def is_duplicate_key(error: IntegrityError) -> bool:
    """Tells a unique/primary key violation apart from other integrity errors."""
    orig = error.orig

    args = getattr(orig, "args", ())
    if args and args[0] == MYSQL_DUPLICATE_ENTRY:
        return True

    if getattr(orig, "sqlstate", None) == POSTGRES_UNIQUE_VIOLATION:
        return True

    return SQLITE_UNIQUE_VIOLATION in str(orig)
