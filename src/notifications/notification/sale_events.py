"""Sale event handler — a product went on sale; tell buyers and taste matches.

Upstream data is fetched in full before any recipient is resolved: if the
product, orders or users cannot be fetched the request fails and nothing is
sent.
"""

from dataclasses import dataclass

import structlog

from notifications.catalog.client import CatalogClient
from notifications.notification.dispatch import Dispatcher, DispatchOutcome
from notifications.notification.notification import NotificationType
from notifications.notification.recipients import resolve_sale_recipients
from notifications.templates import message_builder

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class SaleNotificationSummary:
    product_id: int
    product_name: str
    outcome: DispatchOutcome

    @property
    def notified_count(self) -> int:
        return self.outcome.succeeded


async def notify_sale(product_id: int, *, catalog: CatalogClient, dispatcher: Dispatcher) -> SaleNotificationSummary:
    product = await catalog.get_product(product_id)
    orders = await catalog.list_orders()
    users = await catalog.list_users()

    recipients = resolve_sale_recipients(product, orders, users)
    build = message_builder(
        NotificationType.SALE_ALERT.value,
        {"product_name": product.name, "price": f"{product.price:.2f}"},
    )
    outcome = await dispatcher.dispatch(recipients, build)

    logger.info(
        "Sale notifications sent",
        product_id=product.id,
        product_name=product.name,
        notified=outcome.succeeded,
        failed=len(outcome.failures),
    )
    return SaleNotificationSummary(product_id=product.id, product_name=product.name, outcome=outcome)
