"""PostgreSQL implementation of VehicleRepository."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from vehicle_registry.domain.vehicle import (
    PredicateOperator,
    SortField,
    Vehicle,
    VehicleOrdering,
    VehiclePredicate,
)
from vehicle_registry.infra.db.models.vehicle import VehicleRow
from vehicle_registry.ports.vehicle_repository import VehicleRepository

if TYPE_CHECKING:
    from sqlalchemy.sql import ColumnElement, Select


_COLUMNS = {
    "id": VehicleRow.id,
    "name": VehicleRow.name,
    "brand": VehicleRow.brand,
    "year": VehicleRow.year,
}

_SORT_COLUMNS = {
    SortField.NAME: VehicleRow.name,
    SortField.BRAND: VehicleRow.brand,
    SortField.YEAR: VehicleRow.year,
    SortField.ID: VehicleRow.id,
}


class PostgresVehicleRepository(VehicleRepository):
    """
    PostgreSQL implementation of VehicleRepository.

    - Translates domain predicates into SQL WHERE clauses
    - count() issues COUNT(*) over the filtered rows
    - fetch() issues SELECT ... ORDER BY key, id OFFSET LIMIT
    - Converts VehicleRow (infrastructure) to Vehicle (domain)
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def count(self, predicates: Sequence[VehiclePredicate]) -> int:
        query = select(func.count()).select_from(VehicleRow).where(*self._clauses(predicates))
        return self._session.execute(query).scalar() or 0

    def fetch(
        self,
        predicates: Sequence[VehiclePredicate],
        ordering: VehicleOrdering,
        offset: int,
        limit: int,
    ) -> list[Vehicle]:
        query = self._build_query(predicates, ordering).offset(offset).limit(limit)
        rows = self._session.execute(query).scalars().all()
        return [self._to_domain(row) for row in rows]

    def get_by_id(self, vehicle_id: int) -> Vehicle | None:
        query = select(VehicleRow).where(VehicleRow.id == vehicle_id)
        row = self._session.execute(query).scalar_one_or_none()
        return self._to_domain(row) if row else None

    def _build_query(
        self, predicates: Sequence[VehiclePredicate], ordering: VehicleOrdering
    ) -> Select[tuple[VehicleRow]]:
        """
        Build the filtered, ordered SELECT.

        The primary key is always the secondary ORDER BY column so rows with
        equal sort values keep the same relative order across pages.
        """
        sort_column = _SORT_COLUMNS[ordering.field]

        if ordering.ascending:
            order_by = [sort_column.asc(), VehicleRow.id.asc()]
        else:
            order_by = [sort_column.desc(), VehicleRow.id.desc()]

        if ordering.field is SortField.ID:
            order_by = order_by[:1]

        return select(VehicleRow).where(*self._clauses(predicates)).order_by(*order_by)

    def _clauses(self, predicates: Sequence[VehiclePredicate]) -> list[ColumnElement[bool]]:
        return [self._to_clause(predicate) for predicate in predicates]

    def _to_clause(self, predicate: VehiclePredicate) -> ColumnElement[bool]:
        column = _COLUMNS[predicate.field]

        # Case-insensitive substring match, LIKE wildcards in the input are literal
        if predicate.operator is PredicateOperator.CONTAINS:
            return func.lower(column).contains(str(predicate.value).lower(), autoescape=True)
        if predicate.operator is PredicateOperator.GREATER_OR_EQUAL:
            return column >= predicate.value
        if predicate.operator is PredicateOperator.LESS_OR_EQUAL:
            return column <= predicate.value

        raise ValueError(f"Unsupported predicate operator: {predicate.operator}")

    def _to_domain(self, row: VehicleRow) -> Vehicle:
        return Vehicle(
            id=row.id,
            name=row.name,
            brand=row.brand,
            year=row.year,
        )
