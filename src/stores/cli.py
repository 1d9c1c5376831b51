"""
School store daily report runner.

Run with: python app.py  (or the school-store-report console script)
"""

import logging
from datetime import date

from core.analysis import build_catalog_frame
from core.logging_config import setup_logging
from core.quality import DataQualityReport, build_catalog_checker, check_sales_record
from core.rendering import render_report
from core.report import ReportGenerator
from core.sales import apply_sales
from stores.school_store import SchoolStoreLoader

logger = logging.getLogger(__name__)


def log_quality_report(report: DataQualityReport) -> None:
    for issue in report.issues:
        if issue.severity == "critical":
            level = logging.ERROR
        elif issue.severity == "warning":
            level = logging.WARNING
        else:
            level = logging.INFO
        logger.log(
            level,
            "[%s] %s: %s (samples: %s)",
            report.source_name,
            issue.column,
            issue.description,
            issue.sample_values,
        )


def main(today: date | None = None) -> int:
    setup_logging()

    loader = SchoolStoreLoader(today)
    data = loader.load_all()

    # --- DATA QUALITY CHECKS (report only, never block) ---
    catalog_df = build_catalog_frame(data.catalog, data.sales)
    log_quality_report(build_catalog_checker().run(catalog_df))
    log_quality_report(check_sales_record(data.sales, catalog_df))

    apply_sales(data.catalog, data.sales)

    generator = ReportGenerator(
        policy=data.policy,
        title=data.title,
        sales_display_order=data.sales_display_order,
    )
    report = generator.build(data.catalog, data.sales, loader.today)

    for line in render_report(report):
        print(line)

    return 0
