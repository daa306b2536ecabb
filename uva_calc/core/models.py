"""Value objects passed in and out of the amortization engine."""

from dataclasses import dataclass

from uva_calc import config

SCHEDULE_COLUMNS = [
    "Month", "Payment", "Principal", "Interest", "Balance", "Total Interest"
]
EXTRA_SCHEDULE_COLUMNS = SCHEDULE_COLUMNS + ["Scheduled Payment", "Extra"]


@dataclass(frozen=True)
class LoanParameters:
    """Inputs for one calculation.

    annual_rate_percent and early_payment_penalty_percent are percentages
    (5 means 5%). Negative values are not supported.
    """

    principal: float
    term_months: int
    annual_rate_percent: float
    extra_monthly_payment: float = 0.0
    early_payment_penalty_percent: float = 0.0

    @classmethod
    def default(cls) -> "LoanParameters":
        return cls(
            principal=config.DEFAULT_PRINCIPAL,
            term_months=config.DEFAULT_TERM_MONTHS,
            annual_rate_percent=config.DEFAULT_ANNUAL_RATE_PERCENT,
            extra_monthly_payment=config.DEFAULT_EXTRA_MONTHLY_PAYMENT,
            early_payment_penalty_percent=config.DEFAULT_EARLY_PAYMENT_PENALTY_PERCENT,
        )

    @property
    def monthly_rate(self) -> float:
        return self.annual_rate_percent / 100.0 / 12.0

    @property
    def can_amortize(self) -> bool:
        """False when there is not enough data to build a schedule."""
        return (
            self.principal > 0
            and self.term_months > 0
            and self.annual_rate_percent > 0
        )


@dataclass(frozen=True)
class SummaryMetrics:
    fixed_monthly_payment: float = 0.0
    total_interest_baseline: float = 0.0
    total_interest_with_extra: float = 0.0
    months_saved: int = 0
    early_payment_penalty_amount: float = 0.0

    @property
    def interest_saved(self) -> float:
        return self.total_interest_baseline - self.total_interest_with_extra

    @property
    def net_savings(self) -> float:
        # Negative when the penalty outweighs the interest saved.
        return self.interest_saved - self.early_payment_penalty_amount
