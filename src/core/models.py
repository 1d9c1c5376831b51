"""
Catalog data models.

A Product is one line of the store catalog. Stock is the only mutable
field; initial_stock is the day-start baseline used for restock math.
"""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Protocol


class ProductCategory(Enum):
    """Catalog category with its display label."""

    FOOD = "식품류"
    BEVERAGE = "음료류"
    SNACK = "과자류"

    @property
    def label(self) -> str:
        return self.value


class Sellable(Protocol):
    """Anything that can be rung up at the register."""

    name: str
    price: int


@dataclass
class Product:
    """A single catalog product."""

    name: str
    price: int
    category: ProductCategory
    stock: int
    expiration_date: date | None = None  # None = never expires
    initial_stock: int | None = None

    def __post_init__(self):
        # Day-start baseline defaults to the stock we were created with
        if self.initial_stock is None:
            self.initial_stock = self.stock


@dataclass
class PromotionProduct:
    """
    A promotional listing (e.g. "1+1") wrapping a base product.

    Shares the base product's price; the name carries the promotion tag.
    """

    base_product: Product
    promotion_info: str
    name: str = field(init=False)
    price: int = field(init=False)

    def __post_init__(self):
        self.name = f"{self.base_product.name} ({self.promotion_info})"
        self.price = self.base_product.price
