"""End-to-end report tests on the bundled school store data."""

from datetime import date

import pytest

from core.models import Product, ProductCategory
from core.policy import ReportPolicy
from core.rendering import format_won, render_report
from core.report import InventoryReport, ReportGenerator
from core.sales import apply_sales
from stores.school_store import SchoolStoreLoader

TODAY = date(2024, 6, 1)


@pytest.fixture
def report() -> InventoryReport:
    data = SchoolStoreLoader(TODAY).load_all()
    apply_sales(data.catalog, data.sales)
    generator = ReportGenerator(
        policy=data.policy,
        title=data.title,
        sales_display_order=data.sales_display_order,
    )
    return generator.build(data.catalog, data.sales, TODAY)


@pytest.fixture
def lines(report) -> list[str]:
    return render_report(report)


def _section(lines: list[str], header_prefix: str) -> list[str]:
    """Lines of one section, from its header up to the next blank line."""
    start = next(i for i, line in enumerate(lines) if line.startswith(header_prefix))
    end = next((i for i in range(start, len(lines)) if lines[i] == ""), len(lines))
    return lines[start:end]


class TestFormatting:
    def test_thousands_separator(self):
        assert format_won(188400) == "188,400"
        assert format_won(840) == "840"
        assert format_won(1234567) == "1,234,567"


class TestReportModel:
    def test_section_counts(self, report):
        assert len(report.restock_alerts) == 3
        assert len(report.expiring_discounts) == 3
        assert len(report.best_sellers) == 5
        assert report.sales_summary.total_revenue == 188400

    def test_build_does_not_mutate_stock(self):
        data = SchoolStoreLoader(TODAY).load_all()
        apply_sales(data.catalog, data.sales)
        before = [p.stock for p in data.catalog]

        ReportGenerator(policy=data.policy).build(data.catalog, data.sales, TODAY)

        assert [p.stock for p in data.catalog] == before


class TestRenderedReport:
    def test_header_and_section_separators(self, lines):
        assert lines[0] == "=== 24시간 학교 편의점 스마트 재고 관리 시스템==="
        assert lines[1] == "긴급 재고 알림 (재고율 30% 이하)"
        assert lines.count("") == 5

    def test_restock_section(self, lines):
        assert _section(lines, "긴급 재고 알림") == [
            "긴급 재고 알림 (재고율 30% 이하)",
            "- 김치찌개 도시락(식품류) : 현재 3개 - 적정재고 20개 (17개 발주 필요) [재고율: 15.0%]",
            "- 딸기 샌드위치(식품류) : 현재 2개 - 적정재고 10개 (8개 발주 필요) [재고율: 20.0%]",
            "- 새우깡(과자류) : 현재 5개 - 적정재고 30개 (25개 발주 필요) [재고율: 16.67%]",
        ]

    def test_expiring_section(self, lines):
        section = _section(lines, "A 유통기한 관리")
        assert section[0] == "A 유통기한 관리 (3일 이내 임박 상품)"
        assert section[1].startswith("- 김치찌개 도시락: 2일 남음 - 할인률 30% 적용 (₩5,500 - ₩")
        assert section[2] == "- 참치마요 삼각김밥: 1일 남음 - 할인률 50% 적용 (₩1,500 - ₩750)"
        assert section[3] == "- 딸기 샌드위치: 당일까지 - 할인률 70% 적용 (₩2,800 - ₩840)"

    def test_best_sellers_section(self, lines):
        assert _section(lines, "~ 오늘의 베스트셀러") == [
            "~ 오늘의 베스트셀러 TOP 5",
            "1위: 김치찌개 도시락 (17개 판매, 매출 93,500)",
            "2위: 새우깡 (15개 판매, 매출 22,500)",
            "3위: 콜라 500ml (12개 판매, 매출 18,000)",
            "4위: 참치마요 삼각김밥 (10개 판매, 매출 15,000)",
            "5위: 초코파이 (8개 판매, 매출 24,000)",
        ]

    def test_sales_summary_section(self, lines):
        assert _section(lines, "매출 현황") == [
            "매출 현황",
            "- 오늘 총 매출: 188,400 (15+12+10+8+7+3+17 = 72개 판매)",
            "* 새우깡: 22,500 (15개 x ₩1,500)",
            "* 콜라 500ml: 18,000 (12개 x ₩1,500)",
            "* 참치마요 삼각김밥: 15,000 (10개 x ₩1,500)",
            "* 초코파이: 24,000 (8개 x ₩3,000)",
            "* 물 500ml: 7,000 (7개 x ₩1,000)",
            "* 딸기 샌드위치: 8,400 (3개 x ₩2,800)",
            "* 김치찌개 도시락: 93,500 (17개 x ₩5,500)",
        ]

    def test_business_analysis_section(self, lines):
        section = _section(lines, "® 경영 분석 리포트")
        assert section[1] == "- 재고 회전율 최고: 김치찌개 도시락 (재고 3개, 판매 17개 - 566% 회전)"
        assert section[2] == "- 재고 회전율 최저: 즉석라면 (재고 45개, 판매 0개 - 0% 회전)"
        assert section[3].startswith("- 판매 효율 1위: 김치찌개 도시락 (재고 3개로 17개 판매 - ")
        assert section[4] == "- 재고 과다 품목: 즉석라면 (45개), 물 500ml (25개)"
        assert section[5] == "- 발주 권장: 총 3개 품목, 50개 수량"

    def test_overall_status_section(self, lines):
        assert _section(lines, "그 종합 운영 현황") == [
            "그 종합 운영 현황 (시스템 처리 결과)",
            "- 전체 등록 상품: 8종",
            "- 현재 총 재고: 115개 (새우깡 5 + 콜라 500ml 8 + 김치찌개 도시락 3 + "
            "참치마요 삼각김밥 12 + 딸기 샌드위치 2 + 물 500ml 25 + 초코파이 15 + 즉석라면 45)",
            "- 현재 재고가치: 183,600",
            "- 재고 부족 상품: 3종 (30% 이하)",
            "- 유통기한 임박: 3종 (3일 이내)",
            "- 오늘 총 판매: 72개",
            "- 시스템 처리 완료: 100%.",
        ]

    def test_unknown_sales_excluded_from_both_unit_totals(self):
        catalog = [Product("A", 100, ProductCategory.SNACK, 50)]
        sales = {"A": 3, "유령": 10}
        apply_sales(catalog, sales)
        lines = render_report(ReportGenerator(title="테스트").build(catalog, sales, TODAY))

        assert "- 오늘 총 매출: 300 (3 = 3개 판매)" in lines
        assert "- 오늘 총 판매: 3개" in lines

    def test_empty_store_renders(self):
        report = ReportGenerator(policy=ReportPolicy(), title="빈 매장").build([], {}, TODAY)
        lines = render_report(report)

        assert lines[0] == "=== 빈 매장==="
        assert "- 재고 과다 품목: 없음" in lines
        assert "- 오늘 총 매출: 0 (0 = 0개 판매)" in lines

    def test_policy_changes_headers(self):
        catalog = [Product("우유", 2000, ProductCategory.BEVERAGE, 5)]
        policy = ReportPolicy(stock_threshold_rate=0.5, expiry_warning_days=5, best_seller_limit=3)
        lines = render_report(ReportGenerator(policy=policy).build(catalog, {}, TODAY))

        assert "긴급 재고 알림 (재고율 50% 이하)" in lines
        assert "A 유통기한 관리 (5일 이내 임박 상품)" in lines
        assert "~ 오늘의 베스트셀러 TOP 3" in lines
