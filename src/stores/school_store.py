"""
Store-specific data for the 24-hour school convenience store.

THIS FILE CONTAINS STORE-SPECIFIC HARDCODED DATA:
- The product catalog (expiration dates relative to the report day)
- Today's closing sales tally
- Restock / expiry thresholds and the discount table
- The display order used in the sales summary

To adapt for another store:
1. Copy this file as a template
2. Replace the catalog, sales and display order
3. Adjust the policy thresholds
4. The core analysis and report code can be reused as-is
"""

from dataclasses import dataclass
from datetime import date, timedelta

from core.models import Product, ProductCategory
from core.policy import ReportPolicy


REPORT_TITLE = "24시간 학교 편의점 스마트 재고 관리 시스템"


@dataclass
class StoreData:
    """Everything needed to produce one day's report."""

    catalog: list[Product]
    sales: dict[str, int]
    policy: ReportPolicy
    sales_display_order: list[str]
    title: str = REPORT_TITLE


class SchoolStoreLoader:
    """Builds the bundled catalog and sales tally for a given day."""

    POLICY = ReportPolicy(
        stock_threshold_rate=0.3,
        expiry_warning_days=3,
        discount_policy={3: 0.0, 2: 0.3, 1: 0.5, 0: 0.7},
    )

    TODAY_SALES = {
        "새우깡": 15,
        "콜라 500ml": 12,
        "참치마요 삼각김밥": 10,
        "초코파이": 8,
        "물 500ml": 7,
        "딸기 샌드위치": 3,
        "김치찌개 도시락": 17,
    }

    # Fixed order for the sales summary breakdown
    SALES_DISPLAY_ORDER = [
        "새우깡",
        "콜라 500ml",
        "참치마요 삼각김밥",
        "초코파이",
        "물 500ml",
        "딸기 샌드위치",
        "김치찌개 도시락",
    ]

    def __init__(self, today: date | None = None):
        self.today = today or date.today()

    def load_catalog(self) -> list[Product]:
        """Fresh catalog; stock is mutable so every call builds new products."""
        today = self.today
        return [
            # name, price, category, stock, expiration date, initial stock
            Product("새우깡", 1500, ProductCategory.SNACK, 20, None, 30),
            Product("콜라 500ml", 1500, ProductCategory.BEVERAGE, 20, None, 20),
            Product("김치찌개 도시락", 5500, ProductCategory.FOOD, 20, today + timedelta(days=2), 20),
            Product("참치마요 삼각김밥", 1500, ProductCategory.FOOD, 22, today + timedelta(days=1), 22),
            Product("딸기 샌드위치", 2800, ProductCategory.FOOD, 5, today, 10),
            Product("물 500ml", 1000, ProductCategory.BEVERAGE, 32, None, 32),
            Product("초코파이", 3000, ProductCategory.SNACK, 23, None, 23),
            Product("즉석라면", 1200, ProductCategory.FOOD, 45, None, 45),
        ]

    def load_all(self) -> StoreData:
        return StoreData(
            catalog=self.load_catalog(),
            sales=dict(self.TODAY_SALES),
            policy=self.POLICY.model_copy(deep=True),
            sales_display_order=list(self.SALES_DISPLAY_ORDER),
        )
