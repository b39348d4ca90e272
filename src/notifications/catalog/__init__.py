"""Access to the brewery catalog/order/user API."""

from notifications.catalog.client import CatalogClient
from notifications.catalog.models import Order, OrderItem, PreferenceProfile, Product, User

__all__ = ["CatalogClient", "Order", "OrderItem", "PreferenceProfile", "Product", "User"]
