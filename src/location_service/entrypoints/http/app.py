from fastapi import FastAPI

from location_service.entrypoints.http.exception_handlers import register_exception_handlers
from location_service.entrypoints.http.routes.health import router as health_router
from location_service.entrypoints.http.routes.locations import router as locations_router


def build_app() -> FastAPI:
    app = FastAPI(
        title="Location Service API",
        description="""
        Venue locations and their seat inventory.

        ## Features
        - Create, replace and delete locations
        - Generate seat layouts (seats, rows, gates) on create and update
        - List and look up locations from a cached read path

        ## Error Handling
        Every location endpoint answers with a tagged reply
        (`succeeded`, `error_message`, `error_code`); the HTTP status
        reflects the error category.
        """,
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    register_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(locations_router, prefix="/v1")

    return app


app = build_app()
