from __future__ import annotations

from vehicle_registry.domain.vehicle import (
    PaginatedResult,
    PaginationMetadata,
    Vehicle,
    VehicleFilter,
    normalize_filter,
)
from vehicle_registry.entrypoints.http.dtos.vehicle_query import (
    PaginationMetadataDTO,
    VehicleQueryResponseDTO,
    VehicleResponseDTO,
    VehiclesQueryDTO,
)


class VehicleQueryMapper:
    """Maps between REST DTOs and domain models for vehicle queries."""

    @staticmethod
    def to_domain_filter(dto: VehiclesQueryDTO) -> VehicleFilter:
        """
        Converts query params to a normalized domain filter.

        Args:
            dto: Query parameters as received

        Returns:
            VehicleFilter: Filter with paging and sort coerced to valid values
        """
        return normalize_filter(
            name=dto.name,
            brand=dto.brand,
            year_min=dto.year_min,
            year_max=dto.year_max,
            page=dto.page,
            page_size=dto.page_size,
            sort_by=dto.sort_by,
            sort_ascending=dto.sort_ascending,
        )

    @staticmethod
    def to_vehicle_response(vehicle: Vehicle) -> VehicleResponseDTO:
        return VehicleResponseDTO(
            id=vehicle.id,
            name=vehicle.name,
            brand=vehicle.brand,
            year=vehicle.year,
        )

    @staticmethod
    def to_metadata_response(metadata: PaginationMetadata) -> PaginationMetadataDTO:
        return PaginationMetadataDTO(
            current_page=metadata.current_page,
            page_size=metadata.page_size,
            total_count=metadata.total_count,
            total_pages=metadata.total_pages,
            has_previous=metadata.has_previous,
            has_next=metadata.has_next,
            first_item_on_page=metadata.first_item_on_page,
            last_item_on_page=metadata.last_item_on_page,
        )

    @staticmethod
    def to_response(result: PaginatedResult[Vehicle]) -> VehicleQueryResponseDTO:
        """
        Converts a domain page to the REST response with pagination metadata.

        Args:
            result: Domain paginated result

        Returns:
            VehicleQueryResponseDTO: Page data and derived metadata
        """
        return VehicleQueryResponseDTO(
            data=[VehicleQueryMapper.to_vehicle_response(vehicle) for vehicle in result.data],
            metadata=VehicleQueryMapper.to_metadata_response(result.metadata),
        )
