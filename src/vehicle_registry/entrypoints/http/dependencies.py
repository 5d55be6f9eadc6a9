"""
Dependency injection for FastAPI routes.

Database sessions and repositories are created per request, never cached.
"""

from __future__ import annotations

from typing import Generator

from fastapi import Depends
from sqlalchemy.orm import Session

from vehicle_registry.adapters.postgres_vehicle_repository import PostgresVehicleRepository
from vehicle_registry.infra.db.session import get_session
from vehicle_registry.ports.vehicle_repository import VehicleRepository
from vehicle_registry.use_cases.get_vehicle_by_id import GetVehicleById
from vehicle_registry.use_cases.get_vehicle_statistics import GetVehicleStatistics
from vehicle_registry.use_cases.query_vehicles import QueryVehicles


def get_db() -> Generator[Session, None, None]:
    """
    Provides a database session for a single request.

    get_session() commits on success, rolls back on exception and always
    closes the session once the request finishes.

    Yields:
        Session: SQLAlchemy database session (per-request)
    """
    with get_session() as session:
        yield session


def get_vehicle_repository(db: Session = Depends(get_db)) -> VehicleRepository:
    return PostgresVehicleRepository(session=db)


def get_query_vehicles_use_case(
    repository: VehicleRepository = Depends(get_vehicle_repository),
) -> QueryVehicles:
    return QueryVehicles(vehicle_repository=repository)


def get_get_vehicle_by_id_use_case(
    repository: VehicleRepository = Depends(get_vehicle_repository),
) -> GetVehicleById:
    return GetVehicleById(vehicle_repository=repository)


def get_vehicle_statistics_use_case(
    repository: VehicleRepository = Depends(get_vehicle_repository),
) -> GetVehicleStatistics:
    return GetVehicleStatistics(vehicle_repository=repository)
