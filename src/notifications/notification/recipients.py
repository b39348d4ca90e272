"""Recipients and sale-recipient resolution.

A recipient is either a user we hold a record for (``KnownUser``) or a bare
identifier with no record behind it (``RawAddress``), which is then used as
the delivery address as-is. Recipients are keyed by the stringified user id
or the raw value, and a RecipientSet holds each key at most once.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

import structlog

from notifications.catalog.models import Order, OrderItem, Product, User
from notifications.preference.matcher import matches

logger = structlog.get_logger(__name__)


@dataclass(frozen=True, eq=False)
class KnownUser:
    user: User

    @property
    def key(self) -> str:
        return str(self.user.id)


@dataclass(frozen=True, eq=False)
class RawAddress:
    value: str

    @property
    def key(self) -> str:
        return self.value


Recipient = KnownUser | RawAddress


def resolve_address(recipient: Recipient) -> str:
    """Delivery address for a recipient."""
    if isinstance(recipient, KnownUser):
        return recipient.user.email
    if isinstance(recipient, RawAddress):
        return recipient.value
    raise TypeError(f"Unknown recipient type: {type(recipient).__name__}")


class RecipientSet:
    """Recipients for one event, deduplicated by key.

    The first recipient added under a key wins; later additions under the
    same key are ignored.
    """

    def __init__(self, recipients: Iterable[Recipient] = ()) -> None:
        self._by_key: dict[str, Recipient] = {}
        for recipient in recipients:
            self.add(recipient)

    def add(self, recipient: Recipient) -> bool:
        """Add a recipient; return False if its key was already present."""
        if recipient.key in self._by_key:
            return False
        self._by_key[recipient.key] = recipient
        return True

    def keys(self) -> set[str]:
        return set(self._by_key)

    def __contains__(self, key: object) -> bool:
        return key in self._by_key

    def __iter__(self) -> Iterator[Recipient]:
        return iter(self._by_key.values())

    def __len__(self) -> int:
        return len(self._by_key)

    def __repr__(self) -> str:
        return f"RecipientSet({sorted(self._by_key)!r})"


def _is_line_for(item: OrderItem, product: Product) -> bool:
    # Order lines carry the product name; the id is used when present
    if item.product_id is not None:
        return item.product_id == product.id
    return item.product == product.name


def resolve_sale_recipients(product: Product, orders: Iterable[Order], users: Iterable[User]) -> RecipientSet:
    """Everyone who bought the product or whose taste profile matches it.

    Purchasers without a user record are kept as raw addresses.
    """
    users = list(users)
    users_by_id = {str(user.id): user for user in users}
    recipients = RecipientSet()

    purchasers = 0
    for order in orders:
        if any(_is_line_for(item, product) for item in order.items):
            user = users_by_id.get(order.user)
            if recipients.add(KnownUser(user) if user is not None else RawAddress(order.user)):
                purchasers += 1

    matched = 0
    for user in users:
        if matches(user.taste_profile, product.taste_profile):
            if recipients.add(KnownUser(user)):
                matched += 1

    logger.info(
        "Sale recipients resolved",
        product_id=product.id,
        purchasers=purchasers,
        taste_matches=matched,
        recipients=len(recipients),
    )
    return recipients
