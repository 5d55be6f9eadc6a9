from fastapi import APIRouter, Depends

from vehicle_registry.entrypoints.http.dependencies import get_vehicle_statistics_use_case
from vehicle_registry.entrypoints.http.dtos.vehicle_statistics import VehicleStatisticsDTO
from vehicle_registry.entrypoints.http.error_responses import ErrorResponse
from vehicle_registry.use_cases.get_vehicle_statistics import GetVehicleStatistics


router = APIRouter(tags=["Statistics"])


@router.get(
    "/statistics/vehicles",
    response_model=VehicleStatisticsDTO,
    summary="Vehicle statistics",
    description="Total number of vehicles in the registry, with the time it was counted.",
    responses={
        503: {"description": "Storage failure", "model": ErrorResponse},
    },
)
def get_vehicle_statistics(
    use_case: GetVehicleStatistics = Depends(get_vehicle_statistics_use_case),
) -> VehicleStatisticsDTO:
    statistics = use_case.execute()

    return VehicleStatisticsDTO(
        total_count=statistics.total_count,
        generated_at=statistics.generated_at,
    )
