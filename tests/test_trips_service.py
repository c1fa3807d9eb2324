"""
Tests for the trips application service.

Most tests run the service over a real registry backed by in-memory
SQLite; orchestration checks use a mocked registry.
"""

from datetime import date
from unittest.mock import MagicMock

import pytest
from sqlalchemy import Table
from sqlalchemy.exc import OperationalError

from trips_api.application.trips.service import TripsService
from trips_api.domain.errors import AppError
from trips_api.infrastructure.persistence.registry import SqlModelRegistry
from trips_api.infrastructure.trips.schema import trip_schema


def _payload(**overrides) -> dict:
    payload = {
        "name": "Atlas Mountains Trek",
        "destination": "Morocco",
        "price": 899.0,
        "maxSeats": 12,
        "startDate": "2026-06-01",
        "endDate": "2026-06-05",
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def service(registry: SqlModelRegistry) -> TripsService:
    return TripsService(registry=registry, schema_factory=trip_schema)


class TestModelAcquisition:
    """The service obtains its model handle once."""

    def test_handle_is_resolved_lazily_and_cached(self) -> None:
        registry = MagicMock()
        registry.get_or_create_model.return_value.find.return_value = []
        service = TripsService(registry=registry, schema_factory=lambda: ["schema"])

        registry.get_or_create_model.assert_not_called()
        service.list(10, 0)
        service.list(10, 0)
        registry.get_or_create_model.assert_called_once_with("trips", ["schema"])

    def test_registry_failure_propagates(self) -> None:
        registry = MagicMock()
        registry.get_or_create_model.side_effect = AppError(False, "ModelRegistry_Error", 500, "no")
        service = TripsService(registry=registry, schema_factory=list)
        with pytest.raises(AppError) as exc_info:
            service.read_by_id("x")
        assert exc_info.value.operational is False

    def test_model_is_obtained_after_a_failed_first_attempt(
        self, registry: SqlModelRegistry, monkeypatch
    ) -> None:
        original_create = Table.create
        attempts = []

        def create_fails_once(table, bind, checkfirst=False):
            attempts.append(table.name)
            if len(attempts) == 1:
                raise OperationalError("CREATE TABLE", {}, Exception("unable to open database"))
            return original_create(table, bind, checkfirst=checkfirst)

        monkeypatch.setattr(Table, "create", create_fails_once)
        service = TripsService(registry=registry, schema_factory=trip_schema)

        with pytest.raises(AppError):
            service.list(10, 0)
        assert service.list(10, 0) == []
        assert attempts == ["trips", "trips"]


class TestCreate:
    """Tests for TripsService.create."""

    def test_returns_id_and_derives_fields(self, service: TripsService) -> None:
        trip_id = service.create(_payload())
        trip = service.read_by_id(trip_id)
        assert trip["name"] == "Atlas Mountains Trek"
        assert trip["startDate"] == date(2026, 6, 1)
        assert trip["duration"] == 5
        assert trip["ratings"] == 0.0
        assert trip["bookedSeats"] == 0

    def test_client_values_for_derived_fields_are_ignored(self, service: TripsService) -> None:
        trip_id = service.create(_payload(duration=99, ratings=5, bookedSeats=7))
        trip = service.read_by_id(trip_id)
        assert (trip["duration"], trip["ratings"], trip["bookedSeats"]) == (5, 0.0, 0)

    @pytest.mark.parametrize(
        "overrides",
        [
            {"name": ""},
            {"price": -1},
            {"maxSeats": 0},
            {"endDate": "2026-05-01"},
            {"startDate": "not-a-date"},
        ],
    )
    def test_invalid_payload_is_validation_error(self, service: TripsService, overrides) -> None:
        with pytest.raises(AppError) as exc_info:
            service.create(_payload(**overrides))
        assert exc_info.value.name == "ValidationError"
        assert exc_info.value.operational is True
        assert exc_info.value.http_status == 400

    def test_missing_required_field_is_named(self, service: TripsService) -> None:
        payload = _payload()
        del payload["destination"]
        with pytest.raises(AppError) as exc_info:
            service.create(payload)
        assert "destination" in exc_info.value.message

    def test_non_object_payload_is_validation_error(self, service: TripsService) -> None:
        with pytest.raises(AppError) as exc_info:
            service.create(["not", "an", "object"])
        assert exc_info.value.name == "ValidationError"

    def test_duplicate_name_is_validation_error(self, service: TripsService) -> None:
        service.create(_payload())
        with pytest.raises(AppError) as exc_info:
            service.create(_payload())
        assert exc_info.value.http_status == 400


class TestList:
    """Tests for TripsService.list."""

    def test_empty_store_returns_empty_list(self, service: TripsService) -> None:
        assert service.list(100, 0) == []

    def test_limit_and_offset(self, service: TripsService) -> None:
        for i in range(4):
            service.create(_payload(name=f"Trip {i}"))
        names = [trip["name"] for trip in service.list(2, 1)]
        assert names == ["Trip 1", "Trip 2"]

    def test_sort_by_price(self, service: TripsService) -> None:
        for i, price in enumerate([300, 100, 200]):
            service.create(_payload(name=f"Trip {i}", price=price))
        assert [trip["price"] for trip in service.list(10, 0, sort="price")] == [100, 200, 300]


class TestPatch:
    """Tests for TripsService.patch_by_id."""

    def test_updates_fields(self, service: TripsService) -> None:
        trip_id = service.create(_payload())
        trip = service.patch_by_id(trip_id, {"price": 1000, "description": "New"})
        assert trip["price"] == 1000
        assert trip["description"] == "New"

    def test_unknown_id_returns_none(self, service: TripsService) -> None:
        assert service.patch_by_id("missing", {"price": 10}) is None

    def test_protected_fields_rejected_before_persistence(self) -> None:
        registry = MagicMock()
        service = TripsService(registry=registry, schema_factory=list)
        with pytest.raises(AppError) as exc_info:
            service.patch_by_id("any", {"ratings": 4.5, "bookedSeats": 3})
        assert exc_info.value.operational is True
        assert "ratings, bookedSeats" in exc_info.value.message
        registry.get_or_create_model.assert_not_called()

    def test_unknown_fields_are_ignored(self, service: TripsService) -> None:
        trip_id = service.create(_payload())
        trip = service.patch_by_id(trip_id, {"colour": "blue", "price": 5})
        assert trip["price"] == 5
        assert "colour" not in trip

    def test_date_change_recomputes_duration(self, service: TripsService) -> None:
        trip_id = service.create(_payload())
        trip = service.patch_by_id(trip_id, {"endDate": "2026-06-10"})
        assert trip["duration"] == 10

    def test_dates_out_of_order_rejected(self, service: TripsService) -> None:
        trip_id = service.create(_payload())
        with pytest.raises(AppError) as exc_info:
            service.patch_by_id(trip_id, {"startDate": "2026-07-01"})
        assert exc_info.value.name == "ValidationError"

    def test_invalid_value_rejected(self, service: TripsService) -> None:
        trip_id = service.create(_payload())
        with pytest.raises(AppError):
            service.patch_by_id(trip_id, {"price": -5})

    @pytest.mark.parametrize("field", ["startDate", "endDate", "name", "price", "maxSeats"])
    def test_null_for_required_field_is_rejected(self, service: TripsService, field) -> None:
        trip_id = service.create(_payload())
        with pytest.raises(AppError) as exc_info:
            service.patch_by_id(trip_id, {field: None})
        assert exc_info.value.name == "ValidationError"
        assert field in exc_info.value.message
        assert "NOT NULL" not in exc_info.value.message

    def test_description_can_be_cleared(self, service: TripsService) -> None:
        trip_id = service.create(_payload(description="Old"))
        assert service.patch_by_id(trip_id, {"description": None})["description"] is None

    def test_empty_patch_returns_current_trip(self, service: TripsService) -> None:
        trip_id = service.create(_payload())
        assert service.patch_by_id(trip_id, {})["id"] == trip_id


class TestDelete:
    """Tests for TripsService.delete_by_id."""

    def test_delete_removes_trip(self, service: TripsService) -> None:
        trip_id = service.create(_payload())
        service.delete_by_id(trip_id)
        assert service.read_by_id(trip_id) is None

    def test_delete_unknown_id_is_noop(self, service: TripsService) -> None:
        service.delete_by_id("missing")
        service.delete_by_id("missing")
