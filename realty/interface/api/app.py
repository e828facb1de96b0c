"""FastAPI application."""

from fastapi import FastAPI

from realty.interface.api.routes import content, health, search, similar, tags
from realty.interface.error import register_error_handlers
from realty.util.di.container import container_lifespan, create_container, setup_di
from realty.util.observability import instrument_fastapi


def create_app() -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    """
    app_instance = FastAPI(
        title="Realty Content API",
        description="Tag-based matching of listings and content for real-estate sites",
        version="0.1.0",
        lifespan=container_lifespan,
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    # Settings are loaded from environment automatically
    container = create_container()
    setup_di(app_instance, container)

    register_error_handlers(app_instance)

    app_instance.include_router(health.router)
    app_instance.include_router(search.router)
    app_instance.include_router(similar.router)
    app_instance.include_router(content.router)
    app_instance.include_router(tags.router)

    return app_instance
