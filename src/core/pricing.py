"""
Expiry-based discount pricing.

Discounts are tiered, not interpolated: a product is either on the day
(or past it), one day out, or two days out. Anything else inside the
warning window gets no discount.
"""

from datetime import date

from .models import Product


def days_until_expiration(product: Product, today: date) -> int | None:
    """Whole calendar days from today to the expiration date, or None."""
    if product.expiration_date is None:
        return None
    return (product.expiration_date - today).days


def discount_rate(
    product: Product,
    warning_days: int,
    policy: dict[int, float],
    today: date,
) -> float:
    """
    Discount fraction for a product given the policy table.

    Returns 0 for products without an expiration date, products outside
    the warning window, and buckets missing from the policy.
    """
    days_left = days_until_expiration(product, today)
    if days_left is None or days_left >= warning_days:
        return 0.0

    if days_left <= 0:
        return policy.get(0, 0.0)
    elif days_left == 1:
        return policy.get(1, 0.0)
    elif days_left == 2:
        return policy.get(2, 0.0)
    return 0.0


def discounted_price(
    product: Product,
    warning_days: int,
    policy: dict[int, float],
    today: date,
) -> int:
    """Price after discount, truncated to a whole currency unit."""
    rate = discount_rate(product, warning_days, policy, today)
    return int(product.price * (1 - rate))
