from pydantic import BaseModel, ConfigDict, Field


class VehicleResponseDTO(BaseModel):
    id: int
    name: str
    brand: str
    year: int


class VehiclesQueryDTO(BaseModel):
    """Query parameters for listing vehicles.

    Paging and sorting are never rejected: non-positive page/page_size fall
    back to their defaults and an unknown sort_by falls back to "name".
    """

    name: str | None = Field(
        default=None,
        description="Filter by vehicle name (case-insensitive substring)",
        examples=["civ"],
    )
    brand: str | None = Field(
        default=None,
        description="Filter by brand (case-insensitive substring)",
        examples=["honda"],
    )
    year_min: int | None = Field(
        default=None,
        description="Minimum year (inclusive)",
        examples=[2000],
    )
    year_max: int | None = Field(
        default=None,
        description="Maximum year (inclusive)",
        examples=[2010],
    )
    page: int | None = Field(
        default=None,
        description="1-based page number (default 1)",
        examples=[1],
    )
    page_size: int | None = Field(
        default=None,
        description="Records per page (default 10)",
        examples=[10],
    )
    sort_by: str | None = Field(
        default=None,
        description="One of name, brand, year, id (default name)",
        examples=["year"],
    )
    sort_ascending: bool = Field(
        default=True,
        description="Sort direction",
        examples=[True],
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "civ",
                "brand": "honda",
                "year_min": 2000,
                "year_max": 2010,
                "page": 1,
                "page_size": 10,
                "sort_by": "year",
                "sort_ascending": False,
            }
        }
    )


class PaginationMetadataDTO(BaseModel):
    current_page: int
    page_size: int
    total_count: int
    total_pages: int
    has_previous: bool
    has_next: bool
    first_item_on_page: int
    last_item_on_page: int


class VehicleQueryResponseDTO(BaseModel):
    data: list[VehicleResponseDTO]
    metadata: PaginationMetadataDTO
