"""
Port interfaces (ABCs) for data access.

Ports define the contracts the application layer requires from the
persistence side. Infrastructure adapters implement these interfaces.
The application layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional, Sequence


class ModelHandle(ABC):
    """Port for CRUD access to one named, schema-backed collection."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Entity name this handle is bound to."""
        raise NotImplementedError

    @abstractmethod
    def find(
        self, limit: int, offset: int, sort: Optional[str] = None
    ) -> list[dict[str, Any]]:
        """Return up to `limit` documents starting at `offset`.

        Args:
            limit: Maximum number of documents.
            offset: Number of documents to skip.
            sort: Optional field name, prefixed with "-" for descending.
                Storage order is kept when omitted.

        Returns:
            List of documents as plain dicts.
        """
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, entity_id: str) -> Optional[dict[str, Any]]:
        """Return the document with this id, or None."""
        raise NotImplementedError

    @abstractmethod
    def insert(self, values: dict[str, Any]) -> str:
        """Insert a document and return its generated id."""
        raise NotImplementedError

    @abstractmethod
    def update_by_id(
        self, entity_id: str, values: dict[str, Any]
    ) -> Optional[dict[str, Any]]:
        """Apply `values` to a document; return it updated, or None if absent."""
        raise NotImplementedError

    @abstractmethod
    def delete_by_id(self, entity_id: str) -> int:
        """Delete a document; return how many were removed (0 or 1)."""
        raise NotImplementedError


class ModelRegistry(ABC):
    """Port resolving entity names to their shared ModelHandle."""

    @abstractmethod
    def get_or_create_model(
        self, name: str, schema: Optional[Sequence[Any]] = None
    ) -> ModelHandle:
        """Return the canonical handle for `name`, creating it on first use.

        Args:
            name: Entity name (non-empty).
            schema: Schema descriptor, only required on the first call.

        Returns:
            The process-wide handle for `name`.
        """
        raise NotImplementedError
