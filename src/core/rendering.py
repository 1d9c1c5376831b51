"""
Text templates for the daily inventory report.

Every number comes from the InventoryReport model; this module only
decides wording and layout.
"""

from .report import (
    InventoryReport,
    ExpiringDiscount,
    ProductRate,
)


def format_won(amount: int) -> str:
    """Group digits in threes: 188400 -> '188,400'."""
    return f"{amount:,}"


def day_label(item: ExpiringDiscount) -> str:
    if item.days_left <= 0:
        return "당일까지"
    return f"{item.days_left}일 남음"


def render_restock_alerts(report: InventoryReport) -> list[str]:
    lines = [f"긴급 재고 알림 (재고율 {report.threshold_percent}% 이하)"]
    for alert in report.restock_alerts:
        lines.append(
            f"- {alert.name}({alert.category_label}) : 현재 {alert.stock}개 - "
            f"적정재고 {alert.initial_stock}개 ({alert.reorder_quantity}개 발주 필요) "
            f"[재고율: {alert.stock_rate_pct}%]"
        )
    return lines


def render_expiring_discounts(report: InventoryReport) -> list[str]:
    lines = [f"A 유통기한 관리 ({report.warning_days}일 이내 임박 상품)"]
    for item in report.expiring_discounts:
        lines.append(
            f"- {item.name}: {day_label(item)} - 할인률 {item.discount_pct}% 적용 "
            f"(₩{format_won(item.price)} - ₩{format_won(item.discounted_price)})"
        )
    return lines


def render_best_sellers(report: InventoryReport) -> list[str]:
    lines = [f"~ 오늘의 베스트셀러 TOP {report.best_seller_limit}"]
    for seller in report.best_sellers:
        lines.append(
            f"{seller.rank}위: {seller.name} "
            f"({seller.quantity}개 판매, 매출 {format_won(seller.revenue)})"
        )
    return lines


def render_sales_summary(report: InventoryReport) -> list[str]:
    summary = report.sales_summary
    units_expr = "+".join(str(n) for n in summary.unit_counts) or "0"
    lines = [
        "매출 현황",
        f"- 오늘 총 매출: {format_won(summary.total_revenue)} "
        f"({units_expr} = {summary.total_units}개 판매)",
    ]
    for line in summary.breakdown:
        lines.append(
            f"* {line.name}: {format_won(line.revenue)} "
            f"({line.quantity}개 x ₩{format_won(line.price)})"
        )
    return lines


def _turnover_line(label: str, metric: ProductRate) -> str:
    return (
        f"- {label}: {metric.name} (재고 {metric.stock}개, "
        f"판매 {metric.units_sold}개 - {metric.rate}% 회전)"
    )


def render_business_analysis(report: InventoryReport) -> list[str]:
    analysis = report.business_analysis
    lines = ["® 경영 분석 리포트 (입력 데이터 기반 분석)"]

    if analysis.turnover_highest is not None:
        lines.append(_turnover_line("재고 회전율 최고", analysis.turnover_highest))
    if analysis.turnover_lowest is not None:
        lines.append(_turnover_line("재고 회전율 최저", analysis.turnover_lowest))
    if analysis.efficiency_leader is not None:
        leader = analysis.efficiency_leader
        lines.append(
            f"- 판매 효율 1위: {leader.name} (재고 {leader.stock}개로 "
            f"{leader.units_sold}개 판매 - {leader.rate}% 효율)"
        )

    overstocked = ", ".join(f"{s.name} ({s.stock}개)" for s in analysis.overstocked)
    lines.append(f"- 재고 과다 품목: {overstocked or '없음'}")
    lines.append(
        f"- 발주 권장: 총 {analysis.reorder_item_count}개 품목, "
        f"{analysis.reorder_unit_count}개 수량"
    )
    return lines


def render_overall_status(report: InventoryReport) -> list[str]:
    status = report.overall_status
    breakdown = " + ".join(f"{s.name} {s.stock}" for s in status.stock_levels)
    return [
        "그 종합 운영 현황 (시스템 처리 결과)",
        f"- 전체 등록 상품: {status.product_count}종",
        f"- 현재 총 재고: {status.total_stock}개 ({breakdown})",
        f"- 현재 재고가치: {format_won(status.inventory_value)}",
        f"- 재고 부족 상품: {status.low_stock_count}종 ({report.threshold_percent}% 이하)",
        f"- 유통기한 임박: {status.expiring_count}종 ({report.warning_days}일 이내)",
        f"- 오늘 총 판매: {status.units_sold}개",
        "- 시스템 처리 완료: 100%.",
    ]


SECTIONS = [
    render_restock_alerts,
    render_expiring_discounts,
    render_best_sellers,
    render_sales_summary,
    render_business_analysis,
    render_overall_status,
]


def render_report(report: InventoryReport) -> list[str]:
    """Render the full report as output lines, sections separated by a blank line."""
    lines = [f"=== {report.title}==="]
    for index, section in enumerate(SECTIONS):
        if index > 0:
            lines.append("")
        lines.extend(section(report))
    return lines
