"""
Report policy: thresholds and the expiry discount table.

Values are compiled in by the store module; the model only guards
against nonsensical settings.
"""

from pydantic import BaseModel, Field, field_validator


# Days until expiration -> discount fraction
DEFAULT_DISCOUNT_POLICY: dict[int, float] = {
    3: 0.0,  # 3 days left: no discount
    2: 0.3,
    1: 0.5,
    0: 0.7,  # today or past
}


class ReportPolicy(BaseModel):
    """Thresholds that drive the daily inventory report."""

    stock_threshold_rate: float = Field(
        default=0.3,
        ge=0,
        le=1,
        description="Stock ratio at or below which a restock alert fires",
    )
    expiry_warning_days: int = Field(
        default=3, ge=0, description="Products expiring sooner than this are discounted"
    )
    discount_policy: dict[int, float] = Field(
        default_factory=lambda: dict(DEFAULT_DISCOUNT_POLICY),
        description="Days until expiration -> discount rate",
    )
    overstock_rate: float = Field(
        default=0.75,
        ge=0,
        description="Stock ratio at or above which a product counts as overstocked",
    )
    best_seller_limit: int = Field(default=5, ge=1)

    @field_validator("discount_policy")
    @classmethod
    def _check_discount_policy(cls, policy: dict[int, float]) -> dict[int, float]:
        for days, rate in policy.items():
            if days < 0:
                raise ValueError(f"discount policy days must be non-negative, got {days}")
            if not 0 <= rate < 1:
                raise ValueError(f"discount rate for {days} days must be in [0, 1), got {rate}")
        return policy

    @property
    def threshold_percent(self) -> int:
        return int(self.stock_threshold_rate * 100)
