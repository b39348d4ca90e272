"""Template registry — maps NotificationType to template classes.

Each template renders a subject and body from a context dict with plain
string substitution.
"""

from notifications.notification.notification import Message, NotificationType
from notifications.notification.recipients import Recipient, resolve_address
from notifications.templates.low_stock_alert import LowStockAlertTemplate
from notifications.templates.order_update import OrderUpdateTemplate
from notifications.templates.sale_alert import SaleAlertTemplate

TEMPLATE_REGISTRY: dict[str, type] = {
    NotificationType.SALE_ALERT.value: SaleAlertTemplate,
    NotificationType.ORDER_UPDATE.value: OrderUpdateTemplate,
    NotificationType.LOW_STOCK_ALERT.value: LowStockAlertTemplate,
}


def get_template(notification_type: str):
    """Look up a template class by notification type string."""
    template_cls = TEMPLATE_REGISTRY.get(notification_type)
    if template_cls is None:
        raise ValueError(f"No template registered for notification type: {notification_type}")
    return template_cls


def message_builder(notification_type: str, context: dict):
    """Return a builder that renders the template and addresses it to a recipient."""
    template_cls = get_template(notification_type)

    def build(recipient: Recipient) -> Message:
        rendered = template_cls.render(context)
        return Message(to=resolve_address(recipient), subject=rendered["subject"], body=rendered["body"])

    return build
