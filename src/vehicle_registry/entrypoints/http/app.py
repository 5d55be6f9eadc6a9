from fastapi import FastAPI

from vehicle_registry.entrypoints.http.exception_handlers import register_exception_handlers
from vehicle_registry.entrypoints.http.routes.health import router as health_router
from vehicle_registry.entrypoints.http.routes.statistics import router as statistics_router
from vehicle_registry.entrypoints.http.routes.vehicles import router as vehicles_router


def build_app() -> FastAPI:
    app = FastAPI(
        title="Vehicle Registry API",
        description="""
        Vehicle records with filtered, sorted and paginated listing.

        ## Features
        - List vehicles with name/brand/year filters
        - Sort by name, brand, year or id
        - Page-based pagination with navigation metadata
        - Get vehicle details
        - Registry statistics (total vehicle count)

        ## Error Handling
        All errors return structured JSON responses with error codes.
        Storage failures are reported as 503 with code QUERY_FAILED.
        """,
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    register_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(vehicles_router, prefix="/v1")
    app.include_router(statistics_router, prefix="/v1")

    return app


app = build_app()
