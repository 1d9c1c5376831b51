# Core reusable components for single-store inventory reporting
# Store-specific data (catalog, sales, display order) lives in the stores package

from .models import Product, ProductCategory, PromotionProduct, Sellable
from .policy import ReportPolicy, DEFAULT_DISCOUNT_POLICY
from .pricing import days_until_expiration, discount_rate, discounted_price
from .sales import apply_sales, find_product
from .quality import DataQualityReport, DataQualityChecker, build_catalog_checker, check_sales_record
from .analysis import (
    build_catalog_frame,
    identify_restock_alerts,
    identify_expiring_products,
    rank_best_sellers,
    compute_sales_summary,
    compute_business_analysis,
    compute_overall_status,
)
from .report import ReportGenerator, InventoryReport
from .rendering import render_report

__all__ = [
    "Product",
    "ProductCategory",
    "PromotionProduct",
    "Sellable",
    "ReportPolicy",
    "DEFAULT_DISCOUNT_POLICY",
    "days_until_expiration",
    "discount_rate",
    "discounted_price",
    "apply_sales",
    "find_product",
    "DataQualityReport",
    "DataQualityChecker",
    "build_catalog_checker",
    "check_sales_record",
    "build_catalog_frame",
    "identify_restock_alerts",
    "identify_expiring_products",
    "rank_best_sellers",
    "compute_sales_summary",
    "compute_business_analysis",
    "compute_overall_status",
    "ReportGenerator",
    "InventoryReport",
    "render_report",
]
