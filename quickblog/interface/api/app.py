"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI

from quickblog.config import Settings
from quickblog.interface.api.cors import setup_cors
from quickblog.interface.api.routes import health, posts
from quickblog.interface.error import register_error_handlers
from quickblog.util.di.container import create_container, setup_di
from quickblog.util.observability import instrument_fastapi


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Args:
        container: DI container to serve from (defaults to the production one)

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    """
    settings = Settings()

    app_instance = FastAPI(
        title="QuickBlog API",
        description="Post Store for QuickBlog - list, read, create, update and delete blog posts",
        version="0.1.0",
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance, api_prefix=settings.api.prefix)

    setup_cors(app_instance)
    register_error_handlers(app_instance)

    # Settings are loaded from environment automatically
    setup_di(app_instance, container or create_container())

    app_instance.include_router(health.router)
    app_instance.include_router(posts.router, prefix=settings.api.prefix)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
app = create_app()
