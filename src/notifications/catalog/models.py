"""Upstream data shapes — Product, Order and User as served by the brewery API.

These are read-only views built fresh from each response. Field names follow
Python conventions; the camelCase names used on the wire are accepted as aliases.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class UpstreamModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )


class PreferenceProfile(UpstreamModel):
    """Sparse taste profile shared by users and products.

    Every attribute is optional; an absent attribute means "no opinion".
    """

    primary_flavor: str | None = None
    secondary_flavors: list[str] | None = None
    sweetness: str | None = None
    bitterness: str | None = None
    mouthfeel: str | None = None
    body: str | None = None
    acidity: float | None = None
    aftertaste: str | None = None
    aroma: list[str] | None = None


class Product(UpstreamModel):
    id: int
    name: str
    price: float
    taste_profile: PreferenceProfile | None = None
    stock_quantity: int | None = None


class OrderItem(UpstreamModel):
    product: str
    product_id: int | None = None
    quantity: int | None = None
    price_at_order: float | None = None


class Order(UpstreamModel):
    id: int | None = None
    user: str
    items: list[OrderItem] = Field(default_factory=list)

    @field_validator("user", mode="before")
    @classmethod
    def _user_as_string(cls, value):
        # Purchaser ids arrive as either numbers or strings
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value


class User(UpstreamModel):
    id: int
    email: str
    taste_profile: PreferenceProfile | None = None
