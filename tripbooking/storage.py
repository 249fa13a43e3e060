import logging
import threading
from typing import Any, NamedTuple, Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from sqlalchemy.pool import StaticPool

from . import models
from .config import Settings
from .exceptions import StorageError
from .seed import seed_data

logger = logging.getLogger("storage")

MEMORY_DATABASE_URL = "sqlite://"


class MutationResult(NamedTuple):
    last_insert_id: Optional[int]
    rows_affected: int


def _driver_message(exc: SQLAlchemyError) -> str:
    # Prefer the DBAPI message ("UNIQUE constraint failed: customer.phone")
    # over SQLAlchemy's wrapper text with the SQL and a docs link.
    orig = getattr(exc, "orig", None)
    if orig is not None:
        return str(orig)
    return str(exc)


class StorageGateway:
    """
    Process-wide handle on the relational store.

    Every call runs exactly one statement on its own connection and
    returns plain dicts, so handlers never hold on to ORM objects or
    connections between requests. Calls are serialized by a lock: the
    in-memory database is a single connection shared by every worker thread.
    """

    def __init__(self, engine: Optional[Engine]):
        self.engine = engine
        self.closed = False
        self._lock = threading.Lock()

    def _check_available(self):
        if self.closed:
            raise StorageError("Database is closed")
        if self.engine is None:
            raise StorageError("Database is not available")

    def _fail(self, exc: SQLAlchemyError) -> StorageError:
        message = _driver_message(exc)
        logger.warning(f"Storage call failed: {message}")
        return StorageError(message)

    def query_all(self, statement, params: Optional[dict] = None) -> list[dict[str, Any]]:
        with self._lock:
            self._check_available()
            try:
                with self.engine.connect() as conn:
                    result = conn.execute(statement, params)
                    return [dict(row) for row in result.mappings()]
            except SQLAlchemyError as e:
                raise self._fail(e) from e

    def query_one(self, statement, params: Optional[dict] = None) -> Optional[dict[str, Any]]:
        with self._lock:
            self._check_available()
            try:
                with self.engine.connect() as conn:
                    row = conn.execute(statement, params).mappings().first()
                    return dict(row) if row is not None else None
            except SQLAlchemyError as e:
                raise self._fail(e) from e

    def execute(self, statement, params: Optional[dict] = None) -> MutationResult:
        with self._lock:
            self._check_available()
            try:
                with self.engine.begin() as conn:
                    result = conn.execute(statement, params)
                    last_insert_id = None
                    if result.is_insert and result.inserted_primary_key:
                        last_insert_id = result.inserted_primary_key[0]
                    return MutationResult(last_insert_id=last_insert_id, rows_affected=result.rowcount)
            except SQLAlchemyError as e:
                raise self._fail(e) from e

    def close(self):
        with self._lock:
            if self.engine is not None and not self.closed:
                self.engine.dispose()
                logger.info("Database connection closed.")
            self.closed = True


def _build_engine(settings: Settings) -> Engine:
    if settings.use_memory_db:
        # One shared connection, otherwise each new connection
        # would see its own empty in-memory database.
        return create_engine(
            MEMORY_DATABASE_URL,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )

    url = make_url(settings.DATABASE_URL)
    connect_args = {}
    if url.get_backend_name() == "sqlite":
        connect_args["check_same_thread"] = False
    return create_engine(url, connect_args=connect_args)


def open_storage(settings: Settings) -> StorageGateway:
    """
    Opens the database selected by the settings and provisions its tables.

    The in-memory database is also seeded. A store that cannot be opened is
    logged and still returned, so the service stays up and answers every
    request with a 500 instead of crashing at startup.
    """
    try:
        engine = _build_engine(settings)
    except SQLAlchemyError as e:
        logger.error(f"Failed to open the database: {_driver_message(e)}")
        return StorageGateway(None)
    except ImportError as e:
        # DATABASE_URL names a backend whose DBAPI driver is not installed.
        logger.error(f"Failed to open the database: {e}")
        return StorageGateway(None)

    try:
        models.Base.metadata.create_all(bind=engine)
        if settings.use_memory_db:
            with Session(engine) as db:
                seed_data(db)
            logger.info("Connected to the in-memory tripbooking database.")
        else:
            logger.info(f"Connected to the tripbooking database at {engine.url}.")
    except SQLAlchemyError as e:
        logger.error(f"Failed to open the database: {_driver_message(e)}")

    return StorageGateway(engine)
