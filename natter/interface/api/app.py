"""FastAPI application."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from natter import __version__
from natter.config import Settings
from natter.interface.api.error_handlers import register_error_handlers
from natter.interface.api.routes import admin, comments, health
from natter.util.di.container import create_container, setup_di
from natter.util.observability import (
    instrument_fastapi,
    instrument_httpx,
)


def create_app() -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    In tests, conftest.py does.
    """
    settings = Settings()

    # Instrument httpx for outbound identity provider requests
    instrument_httpx()

    app_instance = FastAPI(
        title="Natter API",
        description="Comment backend for the blog: public comments and moderation",
        version=__version__,
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    # Registered before CORS so error responses pass through it
    register_error_handlers(app_instance)

    # Widget is embedded on every blog page; requests carry no cookies
    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.cors_origins,
        allow_credentials=False,
        allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    # Setup dependency injection
    # Settings are loaded from environment automatically
    container = create_container()
    setup_di(app_instance, container)

    app_instance.include_router(health.router)
    app_instance.include_router(comments.router)
    app_instance.include_router(admin.router)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
app = create_app()
