from __future__ import annotations

import logging

from vehicle_registry.domain.errors import DomainError, QueryFailedError
from vehicle_registry.domain.vehicle import (
    PaginatedResult,
    PaginationMetadata,
    Vehicle,
    VehicleFilter,
    build_predicates,
)
from vehicle_registry.ports.vehicle_repository import VehicleRepository

logger = logging.getLogger(__name__)


class QueryVehicles:
    """
    Filtered, sorted, paginated vehicle query.

    Flow: build predicates -> count -> derive total pages -> fetch the page
    window in order -> assemble data + metadata.

    The same predicate tuple is used for count and fetch, so total_count and
    total_pages always describe the result set the page was cut from.
    Stateless: one instance can serve concurrent requests.
    """

    def __init__(self, vehicle_repository: VehicleRepository) -> None:
        self._repository = vehicle_repository

    def execute(self, filters: VehicleFilter) -> PaginatedResult[Vehicle]:
        """
        Execute the query.

        Args:
            filters: Normalized filter (page, page_size and sort_by already coerced)

        Returns:
            PaginatedResult with the current page and its metadata. A page past
            the last one yields empty data with accurate totals.

        Raises:
            QueryFailedError: If the repository fails to count or fetch
        """
        predicates = build_predicates(filters)

        try:
            total_count = self._repository.count(predicates)
            metadata = PaginationMetadata.build(
                current_page=filters.page,
                page_size=filters.page_size,
                total_count=total_count,
            )

            if metadata.is_out_of_range:
                vehicles: list[Vehicle] = []
            else:
                # Never ask storage for more rows than remain after the offset
                vehicles = self._repository.fetch(
                    predicates,
                    ordering=filters.ordering,
                    offset=filters.offset,
                    limit=min(filters.page_size, total_count - filters.offset),
                )
        except DomainError:
            raise
        except Exception as exc:
            logger.error(
                "Vehicle query failed",
                exc_info=exc,
                extra={
                    "error_type": type(exc).__name__,
                    "page": filters.page,
                    "page_size": filters.page_size,
                    "sort_by": filters.sort_by.value,
                },
            )
            raise QueryFailedError(cause=exc) from exc

        logger.debug(
            "Vehicle query executed",
            extra={
                "predicates": len(predicates),
                "total_count": metadata.total_count,
                "page": metadata.current_page,
                "returned": len(vehicles),
            },
        )

        return PaginatedResult(data=vehicles, metadata=metadata)
