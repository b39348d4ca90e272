"""Notification vocabulary shared by templates, dispatch and handlers."""

from dataclasses import dataclass
from enum import Enum


class NotificationType(Enum):
    SALE_ALERT = "SaleAlert"
    ORDER_UPDATE = "OrderUpdate"
    LOW_STOCK_ALERT = "LowStockAlert"


@dataclass(frozen=True)
class Message:
    """A rendered message addressed to one recipient."""

    to: str
    subject: str
    body: str
