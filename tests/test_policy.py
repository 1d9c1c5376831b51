"""Report policy validation tests."""

import pytest
from pydantic import ValidationError

from core.policy import DEFAULT_DISCOUNT_POLICY, ReportPolicy


class TestReportPolicy:
    def test_defaults(self):
        policy = ReportPolicy()
        assert policy.stock_threshold_rate == 0.3
        assert policy.expiry_warning_days == 3
        assert policy.discount_policy == DEFAULT_DISCOUNT_POLICY
        assert policy.best_seller_limit == 5
        assert policy.threshold_percent == 30

    def test_default_table_not_shared(self):
        first = ReportPolicy()
        first.discount_policy[0] = 0.9
        assert ReportPolicy().discount_policy[0] == 0.7

    def test_threshold_above_one_rejected(self):
        with pytest.raises(ValidationError):
            ReportPolicy(stock_threshold_rate=1.5)

    def test_negative_warning_days_rejected(self):
        with pytest.raises(ValidationError):
            ReportPolicy(expiry_warning_days=-1)

    def test_full_discount_rejected(self):
        with pytest.raises(ValidationError):
            ReportPolicy(discount_policy={0: 1.0})

    def test_negative_days_key_rejected(self):
        with pytest.raises(ValidationError):
            ReportPolicy(discount_policy={-1: 0.5})

    def test_zero_best_seller_limit_rejected(self):
        with pytest.raises(ValidationError):
            ReportPolicy(best_seller_limit=0)
