"""
Inventory report analysis functions.

Computes the data behind each report section:
- Restock alerts
- Expiring discounts
- Best sellers
- Sales summary
- Business analysis (turnover, efficiency, overstock)
- Overall status

All passes are read-only over the catalog and the sales record.
"""

from datetime import date
import pandas as pd
import numpy as np

from .models import Product
from .pricing import days_until_expiration, discount_rate, discounted_price


CATALOG_COLUMNS = [
    "name",
    "price",
    "category",
    "category_label",
    "stock",
    "initial_stock",
    "units_sold",
]

INT_COLUMNS = ["price", "stock", "initial_stock", "units_sold"]


def build_catalog_frame(catalog: list[Product], sales: dict[str, int]) -> pd.DataFrame:
    """
    Flatten the catalog into a DataFrame, one row per product.

    units_sold comes from the sales record (0 when a product sold nothing).
    Like apply_sales, a name's sales go to its first catalog product only.
    """
    records = []
    seen: set[str] = set()
    for p in catalog:
        records.append(
            {
                "name": p.name,
                "price": p.price,
                "category": p.category.name,
                "category_label": p.category.label,
                "stock": p.stock,
                "initial_stock": p.initial_stock,
                "units_sold": 0 if p.name in seen else sales.get(p.name, 0),
            }
        )
        seen.add(p.name)
    df = pd.DataFrame(records, columns=CATALOG_COLUMNS)
    return df.astype({col: "int64" for col in INT_COLUMNS})


def identify_restock_alerts(
    catalog_df: pd.DataFrame,
    threshold_rate: float = 0.3,
) -> pd.DataFrame:
    """
    Find products whose stock ratio fell to the threshold or below.

    Products with no initial stock are never alerted (no baseline to
    compare against).

    Returns DataFrame sorted by name with:
    - stock_ratio
    - reorder_quantity (initial_stock - stock)
    - stock_rate_pct (ratio as a percentage, half-up to 2 decimals)
    """
    candidates = catalog_df[catalog_df["initial_stock"] > 0].copy()
    candidates["stock_ratio"] = candidates["stock"] / candidates["initial_stock"]

    alerts = candidates[candidates["stock_ratio"] <= threshold_rate].copy()
    alerts["reorder_quantity"] = alerts["initial_stock"] - alerts["stock"]
    alerts["stock_rate_pct"] = np.floor(alerts["stock_ratio"] * 10000 + 0.5) / 100

    return alerts.sort_values("name", kind="stable")


def identify_expiring_products(
    catalog: list[Product],
    today: date,
    warning_days: int = 3,
    discount_policy: dict[int, float] | None = None,
) -> pd.DataFrame:
    """
    Find products expiring inside the warning window, with discounted prices.

    Returns DataFrame sorted by days_left descending (soonest last).
    """
    policy = discount_policy or {}
    rows = []
    for product in catalog:
        days_left = days_until_expiration(product, today)
        if days_left is None or days_left >= warning_days:
            continue
        rows.append(
            {
                "name": product.name,
                "days_left": days_left,
                "price": product.price,
                "discount_rate": discount_rate(product, warning_days, policy, today),
                "discounted_price": discounted_price(product, warning_days, policy, today),
            }
        )

    expiring = pd.DataFrame(
        rows, columns=["name", "days_left", "price", "discount_rate", "discounted_price"]
    )
    return expiring.sort_values("days_left", ascending=False, kind="stable")


def rank_best_sellers(
    catalog_df: pd.DataFrame,
    sales: dict[str, int],
    limit: int = 5,
) -> pd.DataFrame:
    """
    Rank the day's sales by quantity (ties broken by name).

    Ranks are assigned before catalog lookup, so a sales entry for an
    unknown product keeps its slot but is left out of the result.
    """
    sales_df = pd.DataFrame(list(sales.items()), columns=["name", "quantity"])
    top = sales_df.sort_values(
        ["quantity", "name"], ascending=[False, True], kind="stable"
    ).head(limit).copy()
    top["rank"] = range(1, len(top) + 1)

    prices = catalog_df[["name", "price"]].drop_duplicates("name")
    ranked = top.merge(prices, on="name", how="inner").sort_values("rank")
    ranked["revenue"] = ranked["price"] * ranked["quantity"]

    return ranked[["rank", "name", "quantity", "price", "revenue"]]


def compute_sales_summary(
    catalog_df: pd.DataFrame,
    sales: dict[str, int],
    display_order: list[str],
) -> dict:
    """
    Total revenue plus a per-product breakdown in a fixed display order.

    Revenue is summed with Python ints so large totals stay exact.
    Names in display_order that sold nothing today are omitted.
    """
    prices = {
        row.name: int(row.price)
        for row in catalog_df.drop_duplicates("name").itertuples(index=False)
    }

    # Only entries matched to a catalog product count, as in apply_sales
    matched = [(name, qty) for name, qty in sales.items() if name in prices]
    total_revenue = sum(prices[name] * quantity for name, quantity in matched)

    breakdown = [
        {
            "name": name,
            "quantity": sales[name],
            "price": prices[name],
            "revenue": prices[name] * sales[name],
        }
        for name in display_order
        if name in sales and name in prices
    ]

    return {
        "total_revenue": total_revenue,
        "unit_counts": [quantity for _, quantity in matched],
        "total_units": sum(quantity for _, quantity in matched),
        "breakdown": breakdown,
    }


def _leader(metrics: pd.DataFrame, column: str, ascending: bool) -> dict | None:
    """First row after sorting by column, ties broken by name."""
    if len(metrics) == 0:
        return None
    ordered = metrics.sort_values(
        [column, "name"], ascending=[ascending, True], kind="stable"
    )
    row = ordered.iloc[0]
    return {
        "name": row["name"],
        "stock": int(row["stock"]),
        "units_sold": int(row["units_sold"]),
        "rate": int(row[column]),
    }


def compute_business_analysis(
    catalog_df: pd.DataFrame,
    restock_alerts: pd.DataFrame,
    overstock_rate: float = 0.75,
) -> dict:
    """
    Turnover, sales efficiency, overstock and reorder figures.

    - turnover: units_sold / stock * 100 (products with stock on hand)
    - efficiency: units_sold / (stock + units_sold) * 100 (products that sold)
    - overstocked: stock ratio at or above overstock_rate
    - reorder: the restock alerts, counted and summed
    """
    # Turnover (avoid division by zero: skip products with nothing on hand)
    stocked = catalog_df[catalog_df["stock"] > 0].copy()
    stocked["turnover_pct"] = np.trunc(
        stocked["units_sold"] / stocked["stock"] * 100
    )

    # Efficiency against day-start stock (stock + units sold)
    sold = catalog_df[
        (catalog_df["units_sold"] > 0)
        & (catalog_df["stock"] + catalog_df["units_sold"] > 0)
    ].copy()
    sold["efficiency_pct"] = np.trunc(
        sold["units_sold"] / (sold["stock"] + sold["units_sold"]) * 100
    )

    # Overstock, largest piles first
    baseline = catalog_df[catalog_df["initial_stock"] > 0].copy()
    baseline["stock_ratio"] = baseline["stock"] / baseline["initial_stock"]
    overstocked = baseline[baseline["stock_ratio"] >= overstock_rate].sort_values(
        ["stock", "name"], ascending=[False, True], kind="stable"
    )

    return {
        "turnover_highest": _leader(stocked, "turnover_pct", ascending=False),
        "turnover_lowest": _leader(stocked, "turnover_pct", ascending=True),
        "efficiency_leader": _leader(sold, "efficiency_pct", ascending=False),
        "overstocked": [
            {"name": row.name, "stock": int(row.stock)}
            for row in overstocked.itertuples(index=False)
        ],
        "reorder_item_count": len(restock_alerts),
        "reorder_unit_count": int(restock_alerts["reorder_quantity"].sum())
        if len(restock_alerts) > 0
        else 0,
    }


def compute_overall_status(
    catalog_df: pd.DataFrame,
    restock_alerts: pd.DataFrame,
    expiring: pd.DataFrame,
) -> dict:
    """Compute summary figures for the closing section of the report."""
    return {
        "product_count": len(catalog_df),
        "stock_levels": [
            {"name": row.name, "stock": int(row.stock)}
            for row in catalog_df.itertuples(index=False)
        ],
        "total_stock": int(catalog_df["stock"].sum()),
        "inventory_value": int((catalog_df["stock"] * catalog_df["price"]).sum()),
        "low_stock_count": len(restock_alerts),
        "expiring_count": len(expiring),
        "units_sold": int(catalog_df["units_sold"].sum()),
    }
