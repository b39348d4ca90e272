"""FastAPI routes for the Notifications service.

Thin adapters that translate HTTP requests into handler calls.
No business logic — just schema→handler→response translation.
"""

from fastapi import APIRouter, Depends

from notifications.api.dependencies import get_app_settings, get_catalog_client, get_dispatcher
from notifications.api.schemas import (
    DispatchSummary,
    FailedDelivery,
    LowStockNotificationRequest,
    LowStockNotificationResponse,
    OrderStatusNotificationRequest,
    OrderStatusNotificationResponse,
    SaleNotificationRequest,
    SaleNotificationResponse,
)
from notifications.catalog.client import CatalogClient
from notifications.config import Settings
from notifications.notification.dispatch import Dispatcher, DispatchOutcome
from notifications.notification.inventory_events import notify_low_stock
from notifications.notification.ordering_events import notify_order_status
from notifications.notification.sale_events import notify_sale
from notifications.utils.logging import bind_context

router = APIRouter(prefix="/notifications", tags=["notifications"])


def _summary(outcome: DispatchOutcome) -> DispatchSummary:
    return DispatchSummary(
        attempted=outcome.attempted,
        succeeded=outcome.succeeded,
        failed=[FailedDelivery(recipient=key, reason=reason) for key, reason in outcome.failures],
    )


@router.post("/sale", response_model=SaleNotificationResponse)
async def send_sale_notification(
    body: SaleNotificationRequest,
    catalog: CatalogClient = Depends(get_catalog_client),
    dispatcher: Dispatcher = Depends(get_dispatcher),
) -> SaleNotificationResponse:
    """Notify past buyers and taste-profile matches that a product is on sale."""
    bind_context(event="sale", product_id=body.product_id)
    summary = await notify_sale(body.product_id, catalog=catalog, dispatcher=dispatcher)
    return SaleNotificationResponse(
        message=(
            f"Sale notifications sent successfully to {summary.notified_count} users for {summary.product_name}"
        ),
        notified_count=summary.notified_count,
        product_name=summary.product_name,
        dispatch=_summary(summary.outcome),
    )


@router.post("/order-status", response_model=OrderStatusNotificationResponse)
async def send_order_status_notification(
    body: OrderStatusNotificationRequest,
    catalog: CatalogClient = Depends(get_catalog_client),
    dispatcher: Dispatcher = Depends(get_dispatcher),
) -> OrderStatusNotificationResponse:
    """Tell a customer that their order changed status."""
    bind_context(event="order-status", user_id=body.user_id, order_id=body.order_id)
    summary = await notify_order_status(
        body.user_id,
        body.order_id,
        body.status.value,
        catalog=catalog,
        dispatcher=dispatcher,
    )
    return OrderStatusNotificationResponse(
        message=f"Order status notification sent to user {summary.user_id}",
        user_id=summary.user_id,
        order_id=summary.order_id,
        status=summary.status,
        dispatch=_summary(summary.outcome),
    )


@router.post("/low-stock", response_model=LowStockNotificationResponse)
async def send_low_stock_notification(
    body: LowStockNotificationRequest,
    catalog: CatalogClient = Depends(get_catalog_client),
    dispatcher: Dispatcher = Depends(get_dispatcher),
    settings: Settings = Depends(get_app_settings),
) -> LowStockNotificationResponse:
    """Alert the inventory admin that a product is running low."""
    bind_context(event="low-stock", product_id=body.product_id)
    summary = await notify_low_stock(
        body.product_id,
        admin_email=settings.admin_email,
        catalog=catalog,
        dispatcher=dispatcher,
    )
    return LowStockNotificationResponse(
        message=f"Low stock notification sent for product {summary.product_id}",
        product_id=summary.product_id,
        stock_quantity=summary.stock_quantity,
        dispatch=_summary(summary.outcome),
    )
