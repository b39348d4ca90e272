"""Shared fixtures: an in-memory brewery API and a recording email adapter."""

import httpx
import pytest
from notifications.catalog.client import CatalogClient
from notifications.channel.fake_email import FakeEmailAdapter
from notifications.notification.dispatch import Dispatcher

BREWERY_API_URL = "http://brewery.test"


class FakeBreweryApi:
    """Serves products, orders and users from dicts, shaped like the real API."""

    def __init__(self):
        self.products: dict[int, dict] = {}
        self.orders: list[dict] = []
        self.users: list[dict] = []
        self.failures: dict[str, tuple[int, dict]] = {}
        self.requests: list[str] = []

    def fail(self, path: str, status_code: int, body: dict | None = None):
        """Make GET <path> answer with an error status."""
        self.failures[path] = (status_code, body or {"message": f"Failure for {path}"})

    def handler(self, request: httpx.Request) -> httpx.Response:
        path = request.url.path
        self.requests.append(path)

        if path in self.failures:
            status_code, body = self.failures[path]
            return httpx.Response(status_code, json=body)

        if path.startswith("/inventory/"):
            product = self.products.get(int(path.rsplit("/", 1)[1]))
            if product is None:
                return httpx.Response(404, json={"message": "Product not found"})
            return httpx.Response(200, json=product)
        if path == "/orders":
            return httpx.Response(200, json=self.orders)
        if path == "/users":
            return httpx.Response(200, json=self.users)
        if path.startswith("/api/auth/"):
            user_id = int(path.rsplit("/", 1)[1])
            for user in self.users:
                if user["id"] == user_id:
                    return httpx.Response(200, json=user)
            return httpx.Response(404, json={"message": "User not found"})

        return httpx.Response(404, json={"message": "Not found"})

    def client(self) -> CatalogClient:
        return CatalogClient(BREWERY_API_URL, timeout=1.0, transport=httpx.MockTransport(self.handler))


@pytest.fixture()
def brewery_api():
    return FakeBreweryApi()


@pytest.fixture()
def catalog(brewery_api):
    return brewery_api.client()


@pytest.fixture()
def email_adapter():
    return FakeEmailAdapter(from_address="shop@brewery.test")


@pytest.fixture()
def dispatcher(email_adapter):
    return Dispatcher(email_adapter, send_timeout=1.0)
