"""Async client for the brewery catalog/order/user API.

Pure I/O: each call fetches one resource and parses it into the upstream
models. Any failure (non-2xx, timeout, transport error, unexpected body)
surfaces as UpstreamFetchFailure.
"""

from typing import Any

import httpx
import structlog
from pydantic import TypeAdapter, ValidationError

from notifications.catalog.models import Order, Product, User
from notifications.exceptions import UpstreamFetchFailure

logger = structlog.get_logger(__name__)

_ORDERS = TypeAdapter(list[Order])
_USERS = TypeAdapter(list[User])


class CatalogClient:
    """Typed access to products, orders and users.

    The underlying ``httpx.AsyncClient`` is created once and lives until
    ``aclose()``; every request is bounded by ``timeout`` seconds.
    """

    product_path = "/inventory/{product_id}"
    orders_path = "/orders"
    users_path = "/users"
    user_path = "/api/auth/{user_id}"

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url
        self._client = httpx.AsyncClient(base_url=base_url, timeout=timeout, transport=transport)

    async def __aenter__(self) -> "CatalogClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def get_product(self, product_id: int) -> Product:
        data = await self._get_json(self.product_path.format(product_id=product_id))
        return self._parse(Product.model_validate, data, "product")

    async def list_orders(self) -> list[Order]:
        data = await self._get_json(self.orders_path)
        return self._parse(_ORDERS.validate_python, data, "orders")

    async def list_users(self) -> list[User]:
        data = await self._get_json(self.users_path)
        return self._parse(_USERS.validate_python, data, "users")

    async def get_user(self, user_id: int) -> User:
        data = await self._get_json(self.user_path.format(user_id=user_id))
        return self._parse(User.model_validate, data, "user")

    async def _get_json(self, path: str) -> Any:
        try:
            response = await self._client.get(path)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            message, errors = _error_details(exc.response)
            logger.error(
                "Upstream request rejected",
                path=path,
                status_code=exc.response.status_code,
                upstream_message=message,
            )
            raise UpstreamFetchFailure(message, status_code=exc.response.status_code, errors=errors) from exc
        except httpx.TimeoutException as exc:
            logger.error("Upstream request timed out", path=path)
            raise UpstreamFetchFailure(f"Upstream request timed out: GET {path}") from exc
        except httpx.RequestError as exc:
            logger.error("Upstream request failed", path=path, error=str(exc))
            raise UpstreamFetchFailure(f"Upstream request failed: GET {path}: {exc}") from exc

        try:
            return response.json()
        except ValueError as exc:
            raise UpstreamFetchFailure(f"Upstream returned a non-JSON body for GET {path}") from exc

    @staticmethod
    def _parse(validate, data: Any, resource: str):
        try:
            return validate(data)
        except ValidationError as exc:
            logger.error("Unexpected upstream response shape", resource=resource, errors=exc.error_count())
            raise UpstreamFetchFailure(
                f"Unexpected {resource} response from upstream",
                errors=exc.errors(include_url=False, include_context=False, include_input=False),
            ) from exc


def _error_details(response: httpx.Response) -> tuple[str, Any]:
    """Pull ``message``/``errors`` out of an upstream error body, if it has them."""
    default = f"Upstream responded with {response.status_code}"
    try:
        body = response.json()
    except ValueError:
        return default, None
    if not isinstance(body, dict):
        return default, None
    return body.get("message") or default, body.get("errors")
