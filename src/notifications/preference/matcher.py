"""Taste-profile matching between a user and a product.

A user matches a product when they share at least one discrete attribute:
primary flavor, sweetness or bitterness. Attributes missing on either side
are skipped, never counted as a mismatch.
"""

from notifications.catalog.models import PreferenceProfile

MATCHED_ATTRIBUTES = ("primary_flavor", "sweetness", "bitterness")

_EMPTY = PreferenceProfile()


def matches(user_profile: PreferenceProfile | None, product_profile: PreferenceProfile | None) -> bool:
    """Return True if the profiles share any matched attribute."""
    user = user_profile or _EMPTY
    product = product_profile or _EMPTY

    for attribute in MATCHED_ATTRIBUTES:
        wanted = getattr(user, attribute)
        if wanted and getattr(product, attribute) == wanted:
            return True
    return False
