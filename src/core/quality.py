"""
Data quality checks for the catalog and the daily sales record.

The report itself is fail-open (unknown sales are ignored, missing
discount buckets mean no discount). These checks only surface what was
skipped or looks wrong so it can be logged; they never block a report.
"""

from dataclasses import dataclass, field
from typing import Callable, Any
import pandas as pd

from .models import ProductCategory


@dataclass
class DataQualityIssue:
    """A single data quality issue found in the data."""

    column: str
    issue_type: str  # "missing", "duplicate", "invalid_value", "negative", "unknown_product"
    severity: str  # "critical", "warning", "info"
    count: int
    percentage: float
    sample_values: list[Any] = field(default_factory=list)
    description: str = ""


@dataclass
class DataQualityReport:
    """Summary of quality issues for one data source."""

    source_name: str
    total_rows: int
    issues: list[DataQualityIssue] = field(default_factory=list)

    @property
    def critical_issues(self) -> list[DataQualityIssue]:
        return [i for i in self.issues if i.severity == "critical"]

    @property
    def warning_issues(self) -> list[DataQualityIssue]:
        return [i for i in self.issues if i.severity == "warning"]

    @property
    def has_critical_issues(self) -> bool:
        return len(self.critical_issues) > 0

    def summary(self) -> dict:
        return {
            "source": self.source_name,
            "total_rows": self.total_rows,
            "critical": len(self.critical_issues),
            "warnings": len(self.warning_issues),
            "info": len([i for i in self.issues if i.severity == "info"]),
        }


def _pct(count: int, total: int) -> float:
    return (count / total) * 100 if total > 0 else 0.0


class DataQualityChecker:
    """
    Runs a list of checks over a DataFrame.

    Extend by adding custom checks via add_check() or the builder
    methods, each of which returns self for chaining.
    """

    def __init__(self, source_name: str):
        self.source_name = source_name
        self._checks: list[Callable[[pd.DataFrame], list[DataQualityIssue]]] = []
        self.add_check(self._check_missing_values)

    def add_check(
        self, check_fn: Callable[[pd.DataFrame], list[DataQualityIssue]]
    ) -> "DataQualityChecker":
        self._checks.append(check_fn)
        return self

    def _check_missing_values(self, df: pd.DataFrame) -> list[DataQualityIssue]:
        issues = []
        for col in df.columns:
            missing = int(df[col].isna().sum())
            if missing > 0:
                issues.append(
                    DataQualityIssue(
                        column=col,
                        issue_type="missing",
                        severity="critical",
                        count=missing,
                        percentage=_pct(missing, len(df)),
                        description=f"{missing:,} missing values",
                    )
                )
        return issues

    def check_duplicates(
        self, key_columns: list[str], severity: str = "critical"
    ) -> "DataQualityChecker":
        """Flag rows sharing the same key (e.g. two products with one name)."""

        def check(df: pd.DataFrame) -> list[DataQualityIssue]:
            mask = df.duplicated(subset=key_columns, keep=False)
            dupes = int(mask.sum())
            if dupes == 0:
                return []
            return [
                DataQualityIssue(
                    column=", ".join(key_columns),
                    issue_type="duplicate",
                    severity=severity,
                    count=dupes,
                    percentage=_pct(dupes, len(df)),
                    sample_values=df.loc[mask, key_columns[0]].head(5).tolist(),
                    description=f"{dupes:,} rows share a key; only the first is used",
                )
            ]

        return self.add_check(check)

    def check_invalid_values(
        self, column: str, valid_values: set, severity: str = "warning"
    ) -> "DataQualityChecker":
        """Flag values outside an allowed set."""

        def check(df: pd.DataFrame) -> list[DataQualityIssue]:
            if column not in df.columns:
                return []
            values = df[column].dropna()
            invalid_mask = ~values.isin(list(valid_values))
            invalid = int(invalid_mask.sum())
            if invalid == 0:
                return []
            return [
                DataQualityIssue(
                    column=column,
                    issue_type="invalid_value",
                    severity=severity,
                    count=invalid,
                    percentage=_pct(invalid, len(df)),
                    sample_values=values[invalid_mask].head(5).tolist(),
                    description=f"{invalid:,} invalid values",
                )
            ]

        return self.add_check(check)

    def check_non_negative(
        self, column: str, severity: str = "critical"
    ) -> "DataQualityChecker":
        """Flag negative values (prices, stock counts)."""

        def check(df: pd.DataFrame) -> list[DataQualityIssue]:
            if column not in df.columns:
                return []
            values = pd.to_numeric(df[column], errors="coerce")
            negative_mask = values < 0
            negatives = int(negative_mask.sum())
            if negatives == 0:
                return []
            return [
                DataQualityIssue(
                    column=column,
                    issue_type="negative",
                    severity=severity,
                    count=negatives,
                    percentage=_pct(negatives, len(df)),
                    sample_values=df.loc[negative_mask, "name"].head(5).tolist()
                    if "name" in df.columns
                    else [],
                    description=f"{negatives:,} negative values",
                )
            ]

        return self.add_check(check)

    def run(self, df: pd.DataFrame) -> DataQualityReport:
        """Run all checks and return a quality report."""
        all_issues = []
        for check_fn in self._checks:
            all_issues.extend(check_fn(df))

        return DataQualityReport(
            source_name=self.source_name, total_rows=len(df), issues=all_issues
        )


def build_catalog_checker() -> DataQualityChecker:
    """Standard checks for a catalog frame (see analysis.build_catalog_frame)."""
    return (
        DataQualityChecker("catalog")
        .check_duplicates(["name"])
        .check_non_negative("price")
        .check_non_negative("stock")
        .check_non_negative("initial_stock")
        .check_invalid_values("category", {c.name for c in ProductCategory})
    )


def check_sales_record(
    sales: dict[str, int], catalog_df: pd.DataFrame
) -> DataQualityReport:
    """
    Check a sales record against the catalog.

    Unknown product names are reported as info: they are skipped when
    sales are applied, which is expected behavior.
    """
    sales_df = pd.DataFrame(list(sales.items()), columns=["name", "quantity"])
    known = catalog_df["name"].tolist()

    def check_unknown(df: pd.DataFrame) -> list[DataQualityIssue]:
        unknown_mask = ~df["name"].isin(known)
        unknown = int(unknown_mask.sum())
        if unknown == 0:
            return []
        return [
            DataQualityIssue(
                column="name",
                issue_type="unknown_product",
                severity="info",
                count=unknown,
                percentage=_pct(unknown, len(df)),
                sample_values=df.loc[unknown_mask, "name"].head(5).tolist(),
                description=f"{unknown:,} sales entries for products not in the catalog",
            )
        ]

    checker = (
        DataQualityChecker("sales")
        .add_check(check_unknown)
        .check_non_negative("quantity", severity="warning")
    )
    return checker.run(sales_df)
