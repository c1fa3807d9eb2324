"""
Trips API — a small CRUD backend for bookable trips.

Application package root. This is a modular monolith using
hexagonal architecture (ports & adapters).

Layers:
    - domain: Error taxonomy, entity rules, ports (ABCs).
    - application: Services orchestrating CRUD through a model registry.
    - infrastructure: SQLAlchemy database handle, model registry, model handles.
    - interfaces: FastAPI routers, controllers, Pydantic schemas.
    - shared: Cross-cutting concerns (errors, security, logging).
"""
