"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from contactbook.api.middleware import RequestIdMiddleware
from contactbook.api.routes import api_router, page
from contactbook.infrastructure.store.base import ContactStoreProtocol
from contactbook.infrastructure.store.factory import create_store
from contactbook.logging_config import setup_logging
from contactbook.settings import Settings, settings

# Setup logging
setup_logging()

logger = logging.getLogger(__name__)


def create_app(
    store: ContactStoreProtocol | None = None,
    config: Settings = settings,
) -> FastAPI:
    """Build the application around a contact store.

    Args:
        store: Store to serve; when omitted one is built from ``config``
            at startup and closed at shutdown
        config: Application settings

    Returns:
        Configured FastAPI application
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan manager."""
        owned_store = None
        if app.state.store is None:
            owned_store = await create_store(config)
            app.state.store = owned_store
        logger.info("Contact book started", extra={"store": type(app.state.store).__name__})
        yield
        if owned_store is not None:
            await owned_store.aclose()
            app.state.store = None

    app = FastAPI(
        title=config.project_name,
        description="Contact management web application",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.store = store
    app.state.config = config

    app.add_middleware(RequestIdMiddleware)

    app.include_router(api_router, prefix=config.api_v1_prefix)
    app.include_router(page.router, tags=["page"])

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy"}

    return app


app = create_app()
