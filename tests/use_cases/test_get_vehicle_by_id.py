from __future__ import annotations

from unittest.mock import Mock

import pytest

from vehicle_registry.domain.errors import NotFoundError, ValidationError
from vehicle_registry.domain.vehicle import Vehicle
from vehicle_registry.ports.vehicle_repository import VehicleRepository
from vehicle_registry.use_cases.get_vehicle_by_id import (
    GetVehicleById,
    GetVehicleByIdRequest,
    GetVehicleByIdResponse,
)


@pytest.fixture()
def mock_repository() -> Mock:
    return Mock(spec=VehicleRepository)


def test_returns_vehicle_when_found(mock_repository: Mock) -> None:
    vehicle = Vehicle(id=1, name="Civic", brand="Honda", year=2020)
    mock_repository.get_by_id.return_value = vehicle

    response = GetVehicleById(mock_repository).execute(GetVehicleByIdRequest(vehicle_id=1))

    assert response == GetVehicleByIdResponse(vehicle=vehicle)
    mock_repository.get_by_id.assert_called_once_with(1)


def test_raises_not_found_when_missing(mock_repository: Mock) -> None:
    mock_repository.get_by_id.return_value = None

    with pytest.raises(NotFoundError) as exc_info:
        GetVehicleById(mock_repository).execute(GetVehicleByIdRequest(vehicle_id=999))

    assert exc_info.value.context["identifier"] == "999"


@pytest.mark.parametrize("vehicle_id", [0, -1])
def test_rejects_non_positive_ids(mock_repository: Mock, vehicle_id: int) -> None:
    with pytest.raises(ValidationError) as exc_info:
        GetVehicleById(mock_repository).execute(GetVehicleByIdRequest(vehicle_id=vehicle_id))

    assert exc_info.value.errors is not None
    assert exc_info.value.errors[0]["code"] == "INVALID_ID"
    mock_repository.get_by_id.assert_not_called()
