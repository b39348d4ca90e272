"""Order-status handler — tell the purchaser their order changed status."""

from dataclasses import dataclass

import structlog

from notifications.catalog.client import CatalogClient
from notifications.notification.dispatch import Dispatcher, DispatchOutcome
from notifications.notification.notification import NotificationType
from notifications.notification.recipients import KnownUser, RecipientSet
from notifications.templates import message_builder

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class OrderStatusNotificationSummary:
    user_id: int
    order_id: int
    status: str
    outcome: DispatchOutcome


async def notify_order_status(
    user_id: int,
    order_id: int,
    status: str,
    *,
    catalog: CatalogClient,
    dispatcher: Dispatcher,
) -> OrderStatusNotificationSummary:
    user = await catalog.get_user(user_id)

    build = message_builder(NotificationType.ORDER_UPDATE.value, {"order_id": order_id, "status": status})
    outcome = await dispatcher.dispatch(RecipientSet([KnownUser(user)]), build)

    logger.info(
        "Order update notification sent",
        user_id=user.id,
        order_id=order_id,
        status=status,
        delivered=bool(outcome.succeeded),
    )
    return OrderStatusNotificationSummary(user_id=user.id, order_id=order_id, status=status, outcome=outcome)
