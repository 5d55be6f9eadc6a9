from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, TypeVar

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 10

T = TypeVar("T")


# ==============================================================================
# Entity
# ==============================================================================


@dataclass(frozen=True, slots=True)
class Vehicle:
    id: int
    name: str
    brand: str
    year: int


# ==============================================================================
# Filter
# ==============================================================================


class SortField(str, Enum):
    NAME = "name"
    BRAND = "brand"
    YEAR = "year"
    ID = "id"

    @classmethod
    def parse(cls, value: str | SortField | None) -> SortField:
        """
        Map a raw sort key onto the closed set of sortable fields.

        Matching is case-insensitive. Anything unrecognized (including None)
        falls back to NAME instead of failing the request.
        """
        if isinstance(value, SortField):
            return value
        if value:
            key = value.strip().lower()
            for member in cls:
                if member.value == key:
                    return member
        return cls.NAME


@dataclass(frozen=True, slots=True)
class VehicleFilter:
    """
    Immutable, normalized description of a vehicle query.

    Coercions are applied on construction, so every instance satisfies:
    - page >= 1 (absent or non-positive becomes 1)
    - page_size >= 1 (absent or non-positive becomes 10, no upper bound)
    - sort_by is a SortField (unknown keys become NAME)
    - empty name/brand strings are treated as absent
    """

    name: str | None = None
    brand: str | None = None
    year_min: int | None = None
    year_max: int | None = None
    page: int = DEFAULT_PAGE
    page_size: int = DEFAULT_PAGE_SIZE
    sort_by: SortField = SortField.NAME
    sort_ascending: bool = True

    def __post_init__(self) -> None:
        object.__setattr__(self, "name", self.name or None)
        object.__setattr__(self, "brand", self.brand or None)
        if self.page is None or self.page <= 0:
            object.__setattr__(self, "page", DEFAULT_PAGE)
        if self.page_size is None or self.page_size <= 0:
            object.__setattr__(self, "page_size", DEFAULT_PAGE_SIZE)
        object.__setattr__(self, "sort_by", SortField.parse(self.sort_by))
        if self.sort_ascending is None:
            object.__setattr__(self, "sort_ascending", True)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_size

    @property
    def ordering(self) -> VehicleOrdering:
        return VehicleOrdering(field=self.sort_by, ascending=self.sort_ascending)


def normalize_filter(
    name: str | None = None,
    brand: str | None = None,
    year_min: int | None = None,
    year_max: int | None = None,
    page: int | None = None,
    page_size: int | None = None,
    sort_by: str | None = None,
    sort_ascending: bool | None = None,
) -> VehicleFilter:
    """
    Build a VehicleFilter from raw, optional caller input.

    Total function: never raises for out-of-range paging or unknown sort keys,
    those are coerced to their defaults.
    """
    return VehicleFilter(
        name=name,
        brand=brand,
        year_min=year_min,
        year_max=year_max,
        page=page if page is not None else DEFAULT_PAGE,
        page_size=page_size if page_size is not None else DEFAULT_PAGE_SIZE,
        sort_by=SortField.parse(sort_by),
        sort_ascending=True if sort_ascending is None else sort_ascending,
    )


# ==============================================================================
# Predicates
# ==============================================================================


class PredicateOperator(str, Enum):
    CONTAINS = "contains"
    GREATER_OR_EQUAL = "ge"
    LESS_OR_EQUAL = "le"


@dataclass(frozen=True, slots=True)
class VehiclePredicate:
    """
    A single boolean condition over a Vehicle.

    Predicates are plain values so the same set can be evaluated in memory
    (matches) or translated into SQL by a repository adapter.
    """

    field: str
    operator: PredicateOperator
    value: str | int

    def matches(self, vehicle: Vehicle) -> bool:
        actual = getattr(vehicle, self.field)

        if self.operator is PredicateOperator.CONTAINS:
            return str(self.value).lower() in str(actual).lower()
        if self.operator is PredicateOperator.GREATER_OR_EQUAL:
            return actual >= self.value
        if self.operator is PredicateOperator.LESS_OR_EQUAL:
            return actual <= self.value

        raise ValueError(f"Unsupported predicate operator: {self.operator}")


def build_predicates(filters: VehicleFilter) -> tuple[VehiclePredicate, ...]:
    """Build the AND-combined predicates for a filter. Absent filters add nothing."""
    predicates: list[VehiclePredicate] = []

    if filters.name:
        predicates.append(VehiclePredicate("name", PredicateOperator.CONTAINS, filters.name))
    if filters.brand:
        predicates.append(VehiclePredicate("brand", PredicateOperator.CONTAINS, filters.brand))
    if filters.year_min is not None:
        predicates.append(
            VehiclePredicate("year", PredicateOperator.GREATER_OR_EQUAL, filters.year_min)
        )
    if filters.year_max is not None:
        predicates.append(
            VehiclePredicate("year", PredicateOperator.LESS_OR_EQUAL, filters.year_max)
        )

    return tuple(predicates)


def matches_all(vehicle: Vehicle, predicates: Iterable[VehiclePredicate]) -> bool:
    return all(predicate.matches(vehicle) for predicate in predicates)


# ==============================================================================
# Ordering
# ==============================================================================


@dataclass(frozen=True, slots=True)
class VehicleOrdering:
    """
    Sort key and direction for a query.

    The id is always the secondary key, in the same direction as the primary
    key, so ties on name/brand/year produce stable page boundaries.
    """

    field: SortField = SortField.NAME
    ascending: bool = True

    def sort_key(self, vehicle: Vehicle) -> tuple[str | int, int]:
        return (getattr(vehicle, self.field.value), vehicle.id)


# ==============================================================================
# Pagination
# ==============================================================================


@dataclass(frozen=True, slots=True)
class PaginationMetadata:
    current_page: int
    page_size: int
    total_count: int
    total_pages: int

    @classmethod
    def build(cls, current_page: int, page_size: int, total_count: int) -> PaginationMetadata:
        # ceil(total_count / page_size) in integer arithmetic
        total_pages = -(-total_count // page_size)
        return cls(
            current_page=current_page,
            page_size=page_size,
            total_count=total_count,
            total_pages=total_pages,
        )

    @property
    def has_previous(self) -> bool:
        return self.current_page > 1

    @property
    def has_next(self) -> bool:
        return self.current_page < self.total_pages

    @property
    def is_out_of_range(self) -> bool:
        return self.current_page > self.total_pages

    @property
    def first_item_on_page(self) -> int:
        """1-based position of the first record on this page (0 when the page is empty)."""
        if self.is_out_of_range:
            return 0
        return (self.current_page - 1) * self.page_size + 1

    @property
    def last_item_on_page(self) -> int:
        """1-based position of the last record on this page (0 when the page is empty)."""
        if self.is_out_of_range:
            return 0
        return min(self.current_page * self.page_size, self.total_count)


@dataclass(frozen=True, slots=True)
class PaginatedResult(Generic[T]):
    metadata: PaginationMetadata
    data: list[T] = field(default_factory=list)
