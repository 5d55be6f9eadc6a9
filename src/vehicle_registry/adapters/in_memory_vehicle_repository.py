from __future__ import annotations

from collections.abc import Sequence

from vehicle_registry.domain.vehicle import (
    Vehicle,
    VehicleOrdering,
    VehiclePredicate,
    matches_all,
)
from vehicle_registry.ports.vehicle_repository import VehicleRepository


class InMemoryVehicleRepository(VehicleRepository):
    """
    Canonical contract implementation for tests.

    - Stores vehicles in insertion order
    - Applies AND-semantics filtering
    - Sorts by (key, id) AFTER filtering
    - Applies paging AFTER sorting
    """

    def __init__(self, vehicles: list[Vehicle]) -> None:
        self._vehicles = vehicles

    def count(self, predicates: Sequence[VehiclePredicate]) -> int:
        return len(self._matching(predicates))

    def fetch(
        self,
        predicates: Sequence[VehiclePredicate],
        ordering: VehicleOrdering,
        offset: int,
        limit: int,
    ) -> list[Vehicle]:
        ordered = sorted(
            self._matching(predicates),
            key=ordering.sort_key,
            reverse=not ordering.ascending,
        )
        return ordered[offset : offset + limit]

    def get_by_id(self, vehicle_id: int) -> Vehicle | None:
        for vehicle in self._vehicles:
            if vehicle.id == vehicle_id:
                return vehicle
        return None

    def _matching(self, predicates: Sequence[VehiclePredicate]) -> list[Vehicle]:
        return [vehicle for vehicle in self._vehicles if matches_all(vehicle, predicates)]
