"""Get vehicle by ID use case."""

from __future__ import annotations

from dataclasses import dataclass

from vehicle_registry.domain.errors import NotFoundError, ValidationError
from vehicle_registry.domain.vehicle import Vehicle
from vehicle_registry.ports.vehicle_repository import VehicleRepository


@dataclass(frozen=True, slots=True)
class GetVehicleByIdRequest:
    vehicle_id: int


@dataclass(frozen=True, slots=True)
class GetVehicleByIdResponse:
    vehicle: Vehicle


class GetVehicleById:
    """
    Use case for retrieving a single vehicle by ID.

    Responsibilities:
    - Validate vehicle_id (identifiers are positive integers assigned by storage)
    - Delegate to repository for data access
    - Raise NotFoundError if the vehicle doesn't exist
    """

    def __init__(self, vehicle_repository: VehicleRepository) -> None:
        self._repository = vehicle_repository

    def execute(self, request: GetVehicleByIdRequest) -> GetVehicleByIdResponse:
        """
        Raises:
            ValidationError: If vehicle_id is not a positive integer
            NotFoundError: If no vehicle has the given ID
        """
        if request.vehicle_id <= 0:
            raise ValidationError(
                errors=[
                    {
                        "field": "vehicle_id",
                        "message": "Must be a positive integer",
                        "code": "INVALID_ID",
                    }
                ]
            )

        vehicle = self._repository.get_by_id(request.vehicle_id)

        if vehicle is None:
            raise NotFoundError(resource="Vehicle", identifier=str(request.vehicle_id))

        return GetVehicleByIdResponse(vehicle=vehicle)
