"""
Adapter: Database handle.

Owns the SQLAlchemy engine and the table namespace (MetaData). Exposes the
two primitives the model registry builds on:

- resolve(name)          -> Table | None
- create(name, schema)   -> Table, raises ModelAlreadyExistsError when taken

Creation is atomic with respect to other callers of the same handle: the
existence check, the Table construction and the DDL run under one lock, so
two concurrent creators never both succeed. resolve() takes the same lock,
so a table is only visible once its DDL has finished.
"""

import logging
import threading
from typing import Any, Optional, Sequence

from sqlalchemy import MetaData, Table, create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.pool import StaticPool
from sqlalchemy.sql.schema import SchemaItem

from trips_api.core.config import Settings
from trips_api.infrastructure.persistence.errors import (
    ModelAlreadyExistsError,
    ModelCreationError,
)

logger = logging.getLogger(__name__)

_IN_MEMORY_SQLITE_URLS = {"sqlite://", "sqlite:///:memory:"}


def build_engine(database_url: str, echo: bool = False) -> Engine:
    """Build a SQLAlchemy engine for `database_url`.

    SQLite connections are shared with FastAPI's worker threads, and an
    in-memory database must live on a single connection to be visible at all.
    """
    if not database_url.startswith("sqlite"):
        return create_engine(database_url, echo=echo, pool_pre_ping=True)

    kwargs: dict[str, Any] = {"connect_args": {"check_same_thread": False}}
    if database_url in _IN_MEMORY_SQLITE_URLS:
        kwargs["poolclass"] = StaticPool
    return create_engine(database_url, echo=echo, **kwargs)


class Database:
    """Live handle on the data-model namespace.

    Args:
        engine: SQLAlchemy engine tables are created on.
        metadata: Table namespace. A fresh one is used when omitted.
    """

    def __init__(self, engine: Engine, metadata: Optional[MetaData] = None) -> None:
        self._engine = engine
        self._metadata = metadata if metadata is not None else MetaData()
        self._create_lock = threading.Lock()

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        """Build a handle from application settings."""
        return cls(build_engine(settings.database_url, echo=settings.database_echo))

    @property
    def engine(self) -> Engine:
        return self._engine

    def resolve(self, name: str) -> Optional[Table]:
        """Return the table registered under `name`, or None."""
        with self._create_lock:
            return self._metadata.tables.get(name)

    def create(self, name: str, schema: Optional[Sequence[SchemaItem]]) -> Table:
        """Define `name` from `schema` and make sure it exists in the database.

        Args:
            name: Table name.
            schema: Columns and constraints of the table.

        Returns:
            The newly defined table.

        Raises:
            ModelAlreadyExistsError: `name` is already defined.
            ModelCreationError: The schema is missing or malformed, or the DDL failed.
        """
        if not schema:
            raise ModelCreationError(name, "a schema is required on first use")
        if not all(isinstance(item, SchemaItem) for item in schema):
            raise ModelCreationError(name, "schema must contain columns and constraints only")

        with self._create_lock:
            if name in self._metadata.tables:
                raise ModelAlreadyExistsError(name)

            try:
                table = Table(name, self._metadata, *schema)
            except SQLAlchemyError as exc:
                raise ModelCreationError(name, str(exc)) from exc

            try:
                table.create(self._engine, checkfirst=True)
            except SQLAlchemyError as exc:
                self._metadata.remove(table)
                raise ModelCreationError(name, str(exc)) from exc

        logger.info("Created model table '%s'", name)
        return table

    def dispose(self) -> None:
        """Release pooled connections."""
        self._engine.dispose()
