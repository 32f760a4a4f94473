from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from storefront.api import routes_booking, routes_destinations, routes_health
from storefront.core.config import settings
from storefront.core.logging import configure_logging
from storefront.storage.catalog import CatalogStore
from storefront.storage.repository import InMemoryDraftRepository


def create_app() -> FastAPI:
    configure_logging()
    app = FastAPI(title=settings.app_name, version="0.1.0")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(routes_health.router, tags=["health"])
    app.include_router(
        routes_destinations.router, prefix="/destinations", tags=["destinations"]
    )
    app.include_router(routes_booking.router, prefix="/bookings", tags=["booking"])

    # Catalog is read-only for the process lifetime; drafts live in memory only
    app.state.catalog = CatalogStore()
    app.state.repository = InMemoryDraftRepository()
    app.state.settings = settings
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=True)
