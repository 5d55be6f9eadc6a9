"""Vehicle statistics use case."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timezone

from vehicle_registry.domain.errors import DomainError, QueryFailedError
from vehicle_registry.ports.vehicle_repository import VehicleRepository

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True, slots=True)
class VehicleStatistics:
    total_count: int
    generated_at: datetime


class GetVehicleStatistics:
    """
    Use case for registry-wide vehicle statistics.

    Counts every stored vehicle (no predicates). Storage failures surface as
    QueryFailedError, same as for the list query.
    """

    def __init__(
        self,
        vehicle_repository: VehicleRepository,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        self._repository = vehicle_repository
        self._clock = clock

    def execute(self) -> VehicleStatistics:
        try:
            total_count = self._repository.count(())
        except DomainError:
            raise
        except Exception as exc:
            logger.error(
                "Vehicle statistics query failed",
                exc_info=exc,
                extra={"error_type": type(exc).__name__},
            )
            raise QueryFailedError("Vehicle statistics query failed", cause=exc) from exc

        return VehicleStatistics(total_count=total_count, generated_at=self._clock())
