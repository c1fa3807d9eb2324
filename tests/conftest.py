"""
Shared fixtures: in-memory SQLite database, registry and API client.
"""

import pytest
from fastapi.testclient import TestClient

from trips_api.core.config import Settings
from trips_api.infrastructure.persistence.database import Database, build_engine
from trips_api.infrastructure.persistence.registry import SqlModelRegistry
from trips_api.main import create_app


@pytest.fixture
def test_settings() -> Settings:
    return Settings(
        database_url="sqlite://",
        rate_limit_enabled=False,
        log_level="WARNING",
        _env_file=None,
    )


@pytest.fixture
def database():
    db = Database(build_engine("sqlite://"))
    yield db
    db.dispose()


@pytest.fixture
def registry(database: Database) -> SqlModelRegistry:
    return SqlModelRegistry(database)


@pytest.fixture
def client(test_settings: Settings):
    app = create_app(test_settings)
    with TestClient(app) as test_client:
        yield test_client

