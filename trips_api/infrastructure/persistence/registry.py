"""
Adapter: Model registry.

Implements the ModelRegistry port. Maps an entity name to the single
SqlModelHandle serving it, creating the underlying table on first use.

Resolution order for a name not yet cached:
    1. resolve the table from the database handle;
    2. if absent, create it from the schema descriptor;
    3. if creation reports "already exists", another caller got there
       first: resolve again.

Handles are published with dict.setdefault, so concurrent first callers
all receive whichever handle was stored first.
"""

import logging
from typing import Optional, Sequence

from sqlalchemy import Table
from sqlalchemy.sql.schema import SchemaItem

from trips_api.domain.errors import AppError, HttpStatusCode
from trips_api.domain.ports import ModelRegistry
from trips_api.infrastructure.persistence.database import Database
from trips_api.infrastructure.persistence.errors import (
    ModelAlreadyExistsError,
    ModelCreationError,
    PersistenceError,
)
from trips_api.infrastructure.persistence.model import SqlModelHandle

logger = logging.getLogger(__name__)

REGISTRY_ERROR = "ModelRegistry_Error"


class SqlModelRegistry(ModelRegistry):
    """Lazy, idempotent registry of model handles.

    Args:
        database: Persistence handle the tables live in.
    """

    def __init__(self, database: Database) -> None:
        self._database = database
        self._handles: dict[str, SqlModelHandle] = {}

    def get_or_create_model(
        self, name: str, schema: Optional[Sequence[SchemaItem]] = None
    ) -> SqlModelHandle:
        """Return the canonical handle for `name`, creating it on first use.

        Args:
            name: Entity name (non-empty).
            schema: Columns and constraints; only used by the first caller.

        Returns:
            The handle shared by every caller asking for `name`.

        Raises:
            AppError: Non-operational, when the model can neither be
                resolved nor created.
        """
        if not isinstance(name, str) or not name.strip():
            raise AppError(
                False,
                REGISTRY_ERROR,
                HttpStatusCode.INTERNAL_SERVER_ERROR,
                "Model name must be a non-empty string",
            )

        handle = self._handles.get(name)
        if handle is not None:
            return handle

        try:
            table = self._resolve_or_create(name, schema)
            candidate = SqlModelHandle(table, self._database.engine)
        except PersistenceError as exc:
            logger.error("Model registry failure for '%s': %s", name, exc.message)
            raise AppError(
                False,
                REGISTRY_ERROR,
                HttpStatusCode.INTERNAL_SERVER_ERROR,
                exc.message,
            ) from exc

        handle = self._handles.setdefault(name, candidate)
        if handle is candidate:
            logger.info("Registered model '%s'", name)
        return handle

    def _resolve_or_create(
        self, name: str, schema: Optional[Sequence[SchemaItem]]
    ) -> Table:
        table = self._database.resolve(name)
        if table is not None:
            return table

        try:
            return self._database.create(name, schema)
        except ModelAlreadyExistsError:
            logger.debug("Model '%s' was created concurrently, resolving it", name)

        table = self._database.resolve(name)
        if table is None:
            raise ModelCreationError(name, "model disappeared after concurrent creation")
        return table

    def registered(self) -> list[str]:
        """Return the names of every model handed out so far."""
        return sorted(self._handles)
