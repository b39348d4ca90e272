"""FastAPI dependencies — the collaborators the application was built with."""

from fastapi import Request

from notifications.catalog.client import CatalogClient
from notifications.config import Settings
from notifications.notification.dispatch import Dispatcher


def get_app_settings(request: Request) -> Settings:
    """The Settings passed to ``create_app``."""
    return request.app.state.settings


def get_catalog_client(request: Request) -> CatalogClient:
    """The CatalogClient opened by the application lifespan."""
    return request.app.state.catalog_client


def get_dispatcher(request: Request) -> Dispatcher:
    """A dispatcher over the application email channel."""
    return Dispatcher(
        request.app.state.email_channel,
        send_timeout=request.app.state.settings.send_timeout_seconds,
    )
