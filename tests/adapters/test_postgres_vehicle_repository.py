"""
Unit test suite for PostgresVehicleRepository.

Uses a mocked Session and inspects the statements handed to it:
- Predicates become WHERE clauses
- count() issues COUNT(*)
- fetch() orders by the sort column plus id and applies OFFSET/LIMIT
- Rows are converted to Vehicle domain entities
"""

from __future__ import annotations

from unittest.mock import Mock

import pytest
from sqlalchemy.orm import Session

from vehicle_registry.adapters.postgres_vehicle_repository import PostgresVehicleRepository
from vehicle_registry.domain.vehicle import (
    PredicateOperator,
    SortField,
    Vehicle,
    VehicleOrdering,
    VehiclePredicate,
    build_predicates,
    normalize_filter,
)
from vehicle_registry.infra.db.models.vehicle import VehicleRow


@pytest.fixture()
def mock_session() -> Mock:
    return Mock(spec=Session)


@pytest.fixture()
def sample_rows() -> list[VehicleRow]:
    return [
        VehicleRow(id=1, name="Civic", brand="Honda", year=2005),
        VehicleRow(id=2, name="Corolla", brand="Toyota", year=2008),
    ]


def _executed_sql(mock_session: Mock) -> str:
    statement = mock_session.execute.call_args.args[0]
    return str(statement)


# ==============================================================================
# count()
# ==============================================================================


def test_count_returns_scalar(mock_session: Mock) -> None:
    mock_session.execute.return_value.scalar.return_value = 7
    repo = PostgresVehicleRepository(mock_session)

    assert repo.count(()) == 7
    sql = _executed_sql(mock_session)
    assert "count(*)" in sql
    assert "WHERE" not in sql


def test_count_handles_null_as_zero(mock_session: Mock) -> None:
    mock_session.execute.return_value.scalar.return_value = None
    repo = PostgresVehicleRepository(mock_session)

    assert repo.count(()) == 0


def test_count_applies_all_predicates(mock_session: Mock) -> None:
    mock_session.execute.return_value.scalar.return_value = 0
    repo = PostgresVehicleRepository(mock_session)
    predicates = build_predicates(
        normalize_filter(name="Civ", brand="hon", year_min=2000, year_max=2010)
    )

    repo.count(predicates)

    statement = mock_session.execute.call_args.args[0]
    sql = str(statement)
    assert "lower(vehicles.name) LIKE" in sql
    assert "lower(vehicles.brand) LIKE" in sql
    assert "vehicles.year >=" in sql
    assert "vehicles.year <=" in sql

    params = statement.compile().params
    assert "civ" in params.values()
    assert "hon" in params.values()
    assert 2000 in params.values()
    assert 2010 in params.values()


@pytest.mark.parametrize(
    ("raw", "escaped"),
    [
        ("a_c", "a/_c"),
        ("50%", "50/%"),
        ("A/B", "a//b"),
    ],
)
def test_like_wildcards_in_input_match_literally(
    mock_session: Mock, raw: str, escaped: str
) -> None:
    mock_session.execute.return_value.scalar.return_value = 0
    repo = PostgresVehicleRepository(mock_session)

    repo.count((VehiclePredicate("name", PredicateOperator.CONTAINS, raw),))

    statement = mock_session.execute.call_args.args[0]
    assert "ESCAPE '/'" in str(statement)
    assert escaped in statement.compile().params.values()


# ==============================================================================
# fetch()
# ==============================================================================


def test_fetch_orders_by_sort_column_then_id(mock_session: Mock) -> None:
    mock_session.execute.return_value.scalars.return_value.all.return_value = []
    repo = PostgresVehicleRepository(mock_session)

    repo.fetch((), VehicleOrdering(field=SortField.BRAND), offset=0, limit=10)

    assert "ORDER BY vehicles.brand ASC, vehicles.id ASC" in _executed_sql(mock_session)


def test_fetch_descending_applies_to_both_keys(mock_session: Mock) -> None:
    mock_session.execute.return_value.scalars.return_value.all.return_value = []
    repo = PostgresVehicleRepository(mock_session)

    repo.fetch((), VehicleOrdering(field=SortField.YEAR, ascending=False), offset=0, limit=10)

    assert "ORDER BY vehicles.year DESC, vehicles.id DESC" in _executed_sql(mock_session)


def test_fetch_by_id_has_single_order_key(mock_session: Mock) -> None:
    mock_session.execute.return_value.scalars.return_value.all.return_value = []
    repo = PostgresVehicleRepository(mock_session)

    repo.fetch((), VehicleOrdering(field=SortField.ID, ascending=False), offset=0, limit=10)

    sql = _executed_sql(mock_session)
    assert "ORDER BY vehicles.id DESC" in sql
    assert "vehicles.id DESC, vehicles.id" not in sql


def test_fetch_applies_offset_and_limit(mock_session: Mock) -> None:
    mock_session.execute.return_value.scalars.return_value.all.return_value = []
    repo = PostgresVehicleRepository(mock_session)

    repo.fetch((), VehicleOrdering(), offset=20, limit=10)

    statement = mock_session.execute.call_args.args[0]
    assert "LIMIT" in str(statement)
    assert "OFFSET" in str(statement)
    params = statement.compile().params
    assert 20 in params.values()
    assert 10 in params.values()


def test_fetch_applies_predicates(mock_session: Mock) -> None:
    mock_session.execute.return_value.scalars.return_value.all.return_value = []
    repo = PostgresVehicleRepository(mock_session)
    predicates = (VehiclePredicate("year", PredicateOperator.GREATER_OR_EQUAL, 2000),)

    repo.fetch(predicates, VehicleOrdering(), offset=0, limit=10)

    assert "WHERE vehicles.year >=" in _executed_sql(mock_session)


def test_fetch_returns_domain_entities(mock_session: Mock, sample_rows: list[VehicleRow]) -> None:
    mock_session.execute.return_value.scalars.return_value.all.return_value = sample_rows
    repo = PostgresVehicleRepository(mock_session)

    result = repo.fetch((), VehicleOrdering(), offset=0, limit=10)

    assert result == [
        Vehicle(id=1, name="Civic", brand="Honda", year=2005),
        Vehicle(id=2, name="Corolla", brand="Toyota", year=2008),
    ]


# ==============================================================================
# get_by_id()
# ==============================================================================


def test_get_by_id_found(mock_session: Mock, sample_rows: list[VehicleRow]) -> None:
    mock_session.execute.return_value.scalar_one_or_none.return_value = sample_rows[0]
    repo = PostgresVehicleRepository(mock_session)

    assert repo.get_by_id(1) == Vehicle(id=1, name="Civic", brand="Honda", year=2005)


def test_get_by_id_missing(mock_session: Mock) -> None:
    mock_session.execute.return_value.scalar_one_or_none.return_value = None
    repo = PostgresVehicleRepository(mock_session)

    assert repo.get_by_id(404) is None
