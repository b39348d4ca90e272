"""Pydantic request/response models for the Notifications API."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class OrderStatus(Enum):
    PENDING = "Pending"
    PROCESSING = "Processing"
    SHIPPED = "Shipped"
    DELIVERED = "Delivered"
    CANCELLED = "Cancelled"


# ---------------------------------------------------------------------------
# Request Models
# ---------------------------------------------------------------------------
class SaleNotificationRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    product_id: int = Field(..., gt=0, strict=True, alias="productId", examples=[7])


class OrderStatusNotificationRequest(BaseModel):
    user_id: int = Field(..., gt=0, strict=True, examples=[5])
    order_id: int = Field(..., gt=0, strict=True, examples=[17])
    status: OrderStatus = Field(..., examples=["Shipped"])


class LowStockNotificationRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    product_id: int = Field(..., gt=0, strict=True, alias="productId", examples=[7])


# ---------------------------------------------------------------------------
# Response Models
# ---------------------------------------------------------------------------
class FailedDelivery(BaseModel):
    recipient: str
    reason: str


class DispatchSummary(BaseModel):
    attempted: int
    succeeded: int
    failed: list[FailedDelivery] = []


class SaleNotificationResponse(BaseModel):
    message: str
    notified_count: int
    product_name: str
    dispatch: DispatchSummary


class OrderStatusNotificationResponse(BaseModel):
    message: str
    user_id: int
    order_id: int
    status: str
    dispatch: DispatchSummary


class LowStockNotificationResponse(BaseModel):
    message: str
    product_id: int
    stock_quantity: int | None = None
    dispatch: DispatchSummary
