"""Low-stock handler — internal alert to the inventory admin."""

from dataclasses import dataclass

import structlog

from notifications.catalog.client import CatalogClient
from notifications.notification.dispatch import Dispatcher, DispatchOutcome
from notifications.notification.notification import NotificationType
from notifications.notification.recipients import RawAddress, RecipientSet
from notifications.templates import message_builder

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class LowStockNotificationSummary:
    product_id: int
    stock_quantity: int | None
    outcome: DispatchOutcome


async def notify_low_stock(
    product_id: int,
    *,
    admin_email: str,
    catalog: CatalogClient,
    dispatcher: Dispatcher,
) -> LowStockNotificationSummary:
    product = await catalog.get_product(product_id)

    build = message_builder(
        NotificationType.LOW_STOCK_ALERT.value,
        {
            "product_id": product.id,
            "product_name": product.name,
            "stock_quantity": product.stock_quantity if product.stock_quantity is not None else "unknown",
        },
    )
    outcome = await dispatcher.dispatch(RecipientSet([RawAddress(admin_email)]), build)

    logger.info(
        "Low stock alert sent",
        product_id=product.id,
        stock_quantity=product.stock_quantity,
        delivered=bool(outcome.succeeded),
    )
    return LowStockNotificationSummary(product_id=product.id, stock_quantity=product.stock_quantity, outcome=outcome)
