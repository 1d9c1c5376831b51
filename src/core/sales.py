"""Applying a day's sales tally to catalog stock."""

import logging

from .models import Product

logger = logging.getLogger(__name__)


def find_product(catalog: list[Product], name: str) -> Product | None:
    """Return the first catalog product with the given name."""
    return next((p for p in catalog if p.name == name), None)


def apply_sales(catalog: list[Product], sales: dict[str, int]) -> None:
    """
    Decrement stock for every product in the sales record.

    Names not in the catalog are skipped. Not idempotent: applying the
    same record twice subtracts twice.
    """
    for name, quantity in sales.items():
        product = find_product(catalog, name)
        if product is None:
            logger.debug("Skipping sales for unknown product: %s", name)
            continue
        product.stock -= quantity
