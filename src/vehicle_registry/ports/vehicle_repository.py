from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence

from vehicle_registry.domain.vehicle import Vehicle, VehicleOrdering, VehiclePredicate


class VehicleRepository(ABC):
    """
    Port for vehicle data access.

    Predicates are AND-combined. Callers pass the same predicate set to
    count() and fetch() so that totals and pages describe the same result set.

    Contract (Preconditions):
        - offset >= 0 and limit >= 1
        - limit never exceeds the matching rows left after offset, so it fits
          a database integer even when page_size does not
        - Implementations trust inputs are valid and do not re-validate
    """

    @abstractmethod
    def count(self, predicates: Sequence[VehiclePredicate]) -> int:
        """Count vehicles matching every predicate."""
        ...

    @abstractmethod
    def fetch(
        self,
        predicates: Sequence[VehiclePredicate],
        ordering: VehicleOrdering,
        offset: int,
        limit: int,
    ) -> list[Vehicle]:
        """
        Fetch one window of matching vehicles.

        Args:
            predicates: Filter conditions (AND semantics)
            ordering: Primary sort key and direction; id is the tie-breaker
            offset: Number of matching vehicles to skip
            limit: Maximum number of vehicles to return

        Returns:
            Vehicles in the requested order
        """
        ...

    @abstractmethod
    def get_by_id(self, vehicle_id: int) -> Vehicle | None: ...
