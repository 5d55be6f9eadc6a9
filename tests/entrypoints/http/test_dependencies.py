"""
Unit tests for FastAPI dependency functions.

- get_db() yields one session per request from get_session()
- Factories wire Session -> Repository -> UseCase without caching
"""

from __future__ import annotations

from types import GeneratorType
from unittest.mock import MagicMock, Mock, patch

from vehicle_registry.adapters.postgres_vehicle_repository import PostgresVehicleRepository
from vehicle_registry.entrypoints.http.dependencies import (
    get_db,
    get_get_vehicle_by_id_use_case,
    get_query_vehicles_use_case,
    get_vehicle_repository,
    get_vehicle_statistics_use_case,
)
from vehicle_registry.use_cases.get_vehicle_by_id import GetVehicleById
from vehicle_registry.use_cases.get_vehicle_statistics import GetVehicleStatistics
from vehicle_registry.use_cases.query_vehicles import QueryVehicles


def test_get_db_yields_session_from_get_session() -> None:
    mock_session = Mock()
    mock_context_manager = MagicMock()
    mock_context_manager.__enter__.return_value = mock_session
    mock_context_manager.__exit__.return_value = None

    with patch("vehicle_registry.entrypoints.http.dependencies.get_session") as mock_get_session:
        mock_get_session.return_value = mock_context_manager

        generator = get_db()
        assert isinstance(generator, GeneratorType)
        assert next(generator) is mock_session

        try:
            next(generator)
        except StopIteration:
            pass

    mock_get_session.assert_called_once()
    mock_context_manager.__exit__.assert_called_once()


def test_get_db_exits_context_on_exception() -> None:
    mock_context_manager = MagicMock()
    mock_context_manager.__enter__.return_value = Mock()
    mock_context_manager.__exit__.return_value = None

    with patch("vehicle_registry.entrypoints.http.dependencies.get_session") as mock_get_session:
        mock_get_session.return_value = mock_context_manager

        generator = get_db()
        next(generator)

        try:
            generator.throw(RuntimeError("request failed"))
        except RuntimeError:
            pass

    mock_context_manager.__exit__.assert_called_once()


def test_get_vehicle_repository_binds_session() -> None:
    mock_session = Mock()

    repository = get_vehicle_repository(db=mock_session)

    assert isinstance(repository, PostgresVehicleRepository)
    assert repository._session is mock_session


def test_get_query_vehicles_use_case_wires_repository() -> None:
    repository = get_vehicle_repository(db=Mock())

    use_case = get_query_vehicles_use_case(repository=repository)

    assert isinstance(use_case, QueryVehicles)
    assert use_case._repository is repository


def test_get_get_vehicle_by_id_use_case_wires_repository() -> None:
    repository = get_vehicle_repository(db=Mock())

    use_case = get_get_vehicle_by_id_use_case(repository=repository)

    assert isinstance(use_case, GetVehicleById)
    assert use_case._repository is repository


def test_get_vehicle_statistics_use_case_wires_repository() -> None:
    repository = get_vehicle_repository(db=Mock())

    use_case = get_vehicle_statistics_use_case(repository=repository)

    assert isinstance(use_case, GetVehicleStatistics)
    assert use_case._repository is repository


def test_factories_create_fresh_instances() -> None:
    first = get_query_vehicles_use_case(repository=get_vehicle_repository(db=Mock()))
    second = get_query_vehicles_use_case(repository=get_vehicle_repository(db=Mock()))

    assert first is not second
    assert first._repository is not second._repository
