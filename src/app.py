"""Brewery notifications FastAPI application.

Sends sale alerts, order-status updates and low-stock alerts. Product, order
and user data are read from the brewery API; mail goes out through the
configured email adapter.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 3005
"""

from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from notifications.api.errors import install_exception_handlers
from notifications.api.routes import router as notifications_router
from notifications.catalog.client import CatalogClient
from notifications.channel import build_email_channel
from notifications.channel.email_port import EmailPort
from notifications.config import Settings, get_settings
from notifications.utils.logging import configure_logging

logger = structlog.get_logger(__name__)


def create_app(settings: Settings | None = None, email_channel: EmailPort | None = None) -> FastAPI:
    """Build the application around one set of settings and one mail adapter.

    Request handlers read both from ``app.state``; neither is replaced after startup.
    """
    settings = settings or get_settings()
    configure_logging()
    if email_channel is None:
        email_channel = build_email_channel(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # One upstream client for the life of the process
        async with CatalogClient(settings.brewery_api_url, timeout=settings.http_timeout_seconds) as client:
            app.state.catalog_client = client
            logger.info(
                "Notifications service started",
                environment=settings.environment,
                brewery_api_url=settings.brewery_api_url,
                email_adapter=settings.email_adapter,
            )
            yield
        logger.info("Notifications service stopped")

    app = FastAPI(
        title="Brewery Notifications",
        description="Sale, order-status and low-stock notifications",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.email_channel = email_channel

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    install_exception_handlers(app)
    app.include_router(notifications_router)

    # -----------------------------------------------------------------------
    # Health
    # -----------------------------------------------------------------------
    @app.get("/healthcheck", response_class=PlainTextResponse)
    async def healthcheck():
        return "Notifications are alive and annoying people already!"

    @app.get("/health")
    async def health():
        return JSONResponse(
            content={
                "status": "ok",
                "environment": settings.environment,
                "email_adapter": settings.email_adapter,
            }
        )

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=get_settings().port)
