from fastapi import APIRouter, Depends, Path

from vehicle_registry.entrypoints.http.dependencies import (
    get_get_vehicle_by_id_use_case,
    get_query_vehicles_use_case,
)
from vehicle_registry.entrypoints.http.dtos.vehicle_query import (
    VehicleQueryResponseDTO,
    VehicleResponseDTO,
    VehiclesQueryDTO,
)
from vehicle_registry.entrypoints.http.error_responses import ErrorResponse
from vehicle_registry.entrypoints.http.mappers.vehicle_query_mapper import VehicleQueryMapper
from vehicle_registry.use_cases.get_vehicle_by_id import GetVehicleById, GetVehicleByIdRequest
from vehicle_registry.use_cases.query_vehicles import QueryVehicles


router = APIRouter(tags=["Vehicles"])


@router.get(
    "/vehicles",
    response_model=VehicleQueryResponseDTO,
    summary="List vehicles",
    description="""
    List vehicles with optional filters, sorting and page-based pagination.

    ## Filters
    - All filters use AND semantics
    - name/brand: case-insensitive substring match
    - year_min/year_max: inclusive range

    ## Sorting
    - sort_by: name (default), brand, year or id; unknown values sort by name
    - Ties are broken by id in the same direction

    ## Pagination
    - page defaults to 1, page_size defaults to 10
    - Non-positive values fall back to the defaults
    - A page past the last one returns no data with accurate totals

    ## Example
    ```
    GET /v1/vehicles?brand=honda&year_min=2000&sort_by=year&page=2
    ```
    """,
    responses={
        200: {
            "description": "Successful response",
            "content": {
                "application/json": {
                    "example": {
                        "data": [{"id": 7, "name": "Civic", "brand": "Honda", "year": 2005}],
                        "metadata": {
                            "current_page": 1,
                            "page_size": 10,
                            "total_count": 1,
                            "total_pages": 1,
                            "has_previous": False,
                            "has_next": False,
                            "first_item_on_page": 1,
                            "last_item_on_page": 1,
                        },
                    }
                }
            },
        },
        503: {"description": "Storage failure", "model": ErrorResponse},
    },
)
def list_vehicles(
    query: VehiclesQueryDTO = Depends(),
    use_case: QueryVehicles = Depends(get_query_vehicles_use_case),
) -> VehicleQueryResponseDTO:
    """List vehicles endpoint following parse → execute → map → return pattern."""
    filters = VehicleQueryMapper.to_domain_filter(query)

    result = use_case.execute(filters)

    return VehicleQueryMapper.to_response(result)


@router.get(
    "/vehicles/{vehicle_id}",
    response_model=VehicleResponseDTO,
    summary="Get vehicle by ID",
    responses={
        404: {"description": "Vehicle not found", "model": ErrorResponse},
        422: {"description": "Invalid vehicle ID", "model": ErrorResponse},
    },
)
def get_vehicle(
    vehicle_id: int = Path(description="Vehicle identifier"),
    use_case: GetVehicleById = Depends(get_get_vehicle_by_id_use_case),
) -> VehicleResponseDTO:
    response = use_case.execute(GetVehicleByIdRequest(vehicle_id=vehicle_id))

    return VehicleQueryMapper.to_vehicle_response(response.vehicle)
