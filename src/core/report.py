"""
Daily inventory report assembly.

Uses Pydantic models so every number shown in the report is computed
once, validated, and handed to the text templates in rendering.py.
"""

import logging
from datetime import date

from pydantic import BaseModel, Field

from .analysis import (
    build_catalog_frame,
    identify_restock_alerts,
    identify_expiring_products,
    rank_best_sellers,
    compute_sales_summary,
    compute_business_analysis,
    compute_overall_status,
)
from .models import Product
from .policy import ReportPolicy

logger = logging.getLogger(__name__)


class RestockAlert(BaseModel):
    """A product that has sold down to the restock threshold."""

    name: str
    category_label: str
    stock: int
    initial_stock: int
    reorder_quantity: int = Field(description="Units needed to get back to day-start stock")
    stock_rate_pct: float = Field(description="Current stock as % of day-start stock")


class ExpiringDiscount(BaseModel):
    """A product inside the expiry warning window."""

    name: str
    days_left: int
    discount_rate: float
    price: int
    discounted_price: int

    @property
    def discount_pct(self) -> int:
        return int(self.discount_rate * 100)


class BestSeller(BaseModel):
    rank: int
    name: str
    quantity: int
    revenue: int


class SalesLine(BaseModel):
    name: str
    quantity: int
    price: int
    revenue: int


class SalesSummary(BaseModel):
    """Today's revenue with a per-product breakdown."""

    total_revenue: int
    unit_counts: list[int] = Field(description="Units per sales entry, in record order")
    total_units: int
    breakdown: list[SalesLine]


class ProductRate(BaseModel):
    """A product singled out by a percentage metric."""

    name: str
    stock: int
    units_sold: int
    rate: int


class StockLevel(BaseModel):
    name: str
    stock: int


class BusinessAnalysis(BaseModel):
    """Turnover, efficiency and reorder figures."""

    turnover_highest: ProductRate | None = None
    turnover_lowest: ProductRate | None = None
    efficiency_leader: ProductRate | None = None
    overstocked: list[StockLevel] = Field(default_factory=list)
    reorder_item_count: int = 0
    reorder_unit_count: int = 0


class OverallStatus(BaseModel):
    product_count: int
    stock_levels: list[StockLevel]
    total_stock: int
    inventory_value: int
    low_stock_count: int
    expiring_count: int
    units_sold: int


class InventoryReport(BaseModel):
    """Complete daily inventory report."""

    title: str
    report_date: date
    threshold_percent: int
    warning_days: int
    best_seller_limit: int
    restock_alerts: list[RestockAlert]
    expiring_discounts: list[ExpiringDiscount]
    best_sellers: list[BestSeller]
    sales_summary: SalesSummary
    business_analysis: BusinessAnalysis
    overall_status: OverallStatus


class ReportGenerator:
    """
    Builds the daily report from the (already sales-adjusted) catalog.

    Each section is an independent read of the catalog and the sales
    record; nothing here mutates stock.
    """

    def __init__(
        self,
        policy: ReportPolicy | None = None,
        title: str = "스마트 재고 관리 시스템",
        sales_display_order: list[str] | None = None,
    ):
        self.policy = policy or ReportPolicy()
        self.title = title
        self.sales_display_order = sales_display_order or []

    def build(
        self,
        catalog: list[Product],
        sales: dict[str, int],
        today: date,
    ) -> InventoryReport:
        """Run every analysis pass and collect the results."""
        policy = self.policy
        catalog_df = build_catalog_frame(catalog, sales)

        restock = identify_restock_alerts(catalog_df, policy.stock_threshold_rate)
        expiring = identify_expiring_products(
            catalog, today, policy.expiry_warning_days, policy.discount_policy
        )
        best = rank_best_sellers(catalog_df, sales, policy.best_seller_limit)
        summary = compute_sales_summary(catalog_df, sales, self.sales_display_order)
        analysis = compute_business_analysis(catalog_df, restock, policy.overstock_rate)
        status = compute_overall_status(catalog_df, restock, expiring)

        logger.info(
            "Built report for %d products: %d restock alerts, %d expiring",
            len(catalog_df),
            len(restock),
            len(expiring),
        )

        return InventoryReport(
            title=self.title,
            report_date=today,
            threshold_percent=policy.threshold_percent,
            warning_days=policy.expiry_warning_days,
            best_seller_limit=policy.best_seller_limit,
            restock_alerts=[
                RestockAlert(
                    name=row.name,
                    category_label=row.category_label,
                    stock=int(row.stock),
                    initial_stock=int(row.initial_stock),
                    reorder_quantity=int(row.reorder_quantity),
                    stock_rate_pct=float(row.stock_rate_pct),
                )
                for row in restock.itertuples(index=False)
            ],
            expiring_discounts=[
                ExpiringDiscount(
                    name=row.name,
                    days_left=int(row.days_left),
                    discount_rate=float(row.discount_rate),
                    price=int(row.price),
                    discounted_price=int(row.discounted_price),
                )
                for row in expiring.itertuples(index=False)
            ],
            best_sellers=[
                BestSeller(
                    rank=int(row.rank),
                    name=row.name,
                    quantity=int(row.quantity),
                    revenue=int(row.revenue),
                )
                for row in best.itertuples(index=False)
            ],
            sales_summary=SalesSummary(**summary),
            business_analysis=BusinessAnalysis(**analysis),
            overall_status=OverallStatus(**status),
        )
