"""
Persistence adapters backed by SQLAlchemy.

- database: engine lifecycle and the table namespace (resolve / create).
- registry: lazy, idempotent entity name to model handle mapping.
- model: CRUD over a single table.
"""
