"""
Adapter: SQL model handle.

Implements the ModelHandle port over one SQLAlchemy table. Every document
is addressed by a string `id` primary key that the handle generates on
insert when the caller does not supply one.
"""

import logging
from typing import Any, Optional
from uuid import uuid4

from sqlalchemy import Table, delete, insert, select, update
from sqlalchemy.engine import Engine
from sqlalchemy.exc import DataError, IntegrityError

from trips_api.domain.errors import AppError, HttpStatusCode, validation_error
from trips_api.domain.ports import ModelHandle
from trips_api.infrastructure.persistence.errors import ModelCreationError

logger = logging.getLogger(__name__)

ID_FIELD = "id"


class SqlModelHandle(ModelHandle):
    """CRUD access to a single table.

    Args:
        table: Table the handle is bound to. Must have an `id` primary key.
        engine: Engine used to run statements.

    Raises:
        ModelCreationError: The table has no `id` primary key column.
    """

    def __init__(self, table: Table, engine: Engine) -> None:
        if ID_FIELD not in table.c or not table.c[ID_FIELD].primary_key:
            raise ModelCreationError(table.name, "schema must define an 'id' primary key")
        self._table = table
        self._engine = engine

    @property
    def name(self) -> str:
        return self._table.name

    @property
    def table(self) -> Table:
        return self._table

    def _columns_only(self, values: dict[str, Any]) -> dict[str, Any]:
        return {key: value for key, value in values.items() if key in self._table.c}

    def find(
        self, limit: int, offset: int, sort: Optional[str] = None
    ) -> list[dict[str, Any]]:
        stmt = select(self._table)
        if sort:
            field = sort.lstrip("-")
            if field not in self._table.c:
                raise AppError(
                    True,
                    "InvalidSortField",
                    HttpStatusCode.BAD_REQUEST,
                    f"Cannot sort by unknown field: {field}",
                )
            column = self._table.c[field]
            stmt = stmt.order_by(column.desc() if sort.startswith("-") else column.asc())
        stmt = stmt.limit(limit).offset(offset)

        with self._engine.connect() as conn:
            rows = conn.execute(stmt).mappings().all()
        return [dict(row) for row in rows]

    def find_by_id(self, entity_id: str) -> Optional[dict[str, Any]]:
        stmt = select(self._table).where(self._table.c[ID_FIELD] == entity_id)
        with self._engine.connect() as conn:
            row = conn.execute(stmt).mappings().first()
        return dict(row) if row is not None else None

    def insert(self, values: dict[str, Any]) -> str:
        document = self._columns_only(values)
        document[ID_FIELD] = document.get(ID_FIELD) or uuid4().hex
        try:
            with self._engine.begin() as conn:
                conn.execute(insert(self._table).values(**document))
        except (IntegrityError, DataError) as exc:
            logger.warning("Insert into '%s' rejected: %s", self.name, exc.orig)
            raise validation_error(f"Payload violates schema constraints: {exc.orig}") from exc
        return document[ID_FIELD]

    def update_by_id(
        self, entity_id: str, values: dict[str, Any]
    ) -> Optional[dict[str, Any]]:
        changes = self._columns_only(values)
        changes.pop(ID_FIELD, None)
        if not changes:
            return self.find_by_id(entity_id)

        id_column = self._table.c[ID_FIELD]
        try:
            with self._engine.begin() as conn:
                result = conn.execute(
                    update(self._table).where(id_column == entity_id).values(**changes)
                )
                if result.rowcount == 0:
                    return None
                row = conn.execute(
                    select(self._table).where(id_column == entity_id)
                ).mappings().first()
        except (IntegrityError, DataError) as exc:
            logger.warning("Update of '%s' rejected: %s", self.name, exc.orig)
            raise validation_error(f"Payload violates schema constraints: {exc.orig}") from exc
        return dict(row) if row is not None else None

    def delete_by_id(self, entity_id: str) -> int:
        stmt = delete(self._table).where(self._table.c[ID_FIELD] == entity_id)
        with self._engine.begin() as conn:
            result = conn.execute(stmt)
        return result.rowcount
