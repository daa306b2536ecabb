import logging

import pandas as pd

from .amort import amort_schedule, amort_schedule_with_extra, fixed_payment
from .models import LoanParameters, SummaryMetrics

logger = logging.getLogger(__name__)


def _last_total_interest(schedule):
    if schedule.empty:
        return 0.0
    return float(schedule.iloc[-1]["Total Interest"])


def compute_summary(params: LoanParameters, baseline, extra_schedule) -> SummaryMetrics:
    """Savings metrics of the extra-payment schedule against the baseline.

    The early payment penalty is charged on every extra payment made, on top
    of the per-period haircut already applied inside the extra schedule.
    """
    if not params.can_amortize:
        return SummaryMetrics()

    months_paid = len(extra_schedule)
    penalty = months_paid * params.extra_monthly_payment * (params.early_payment_penalty_percent / 100.0)

    return SummaryMetrics(
        fixed_monthly_payment=fixed_payment(params.principal, params.monthly_rate, params.term_months),
        total_interest_baseline=_last_total_interest(baseline),
        total_interest_with_extra=_last_total_interest(extra_schedule),
        months_saved=params.term_months - months_paid,
        early_payment_penalty_amount=penalty,
    )


def calculate(params: LoanParameters):
    """Build both schedules and their summary from scratch.

    Returns a dict with keys fixed_monthly_payment, baseline_schedule,
    extra_payment_schedule and summary. Inputs that cannot be amortized give
    empty schedules and a zeroed summary.
    """
    baseline = amort_schedule(params)
    with_extra = amort_schedule_with_extra(params)
    summary = compute_summary(params, baseline, with_extra)

    logger.debug(
        "Calculated %d baseline / %d extra months, %d months saved",
        len(baseline), len(with_extra), summary.months_saved,
    )
    return {
        "fixed_monthly_payment": summary.fixed_monthly_payment,
        "baseline_schedule": baseline,
        "extra_payment_schedule": with_extra,
        "summary": summary,
    }


def compare_schedules(params: LoanParameters) -> pd.DataFrame:
    """Side-by-side table of the baseline and the extra-payment plan."""
    result = calculate(params)
    summary = result["summary"]
    baseline = result["baseline_schedule"]
    with_extra = result["extra_payment_schedule"]

    extra_payment = float(with_extra.iloc[0]["Payment"]) if len(with_extra) else 0.0

    rows = [
        {
            "Option": "Baseline",
            "Monthly Payment": summary.fixed_monthly_payment,
            "Months": len(baseline),
            "Total Interest": summary.total_interest_baseline,
            "Penalty": 0.0,
            "Interest Saved": 0.0,
            "Net Savings": 0.0,
        },
        {
            "Option": "With Extra Payments",
            "Monthly Payment": extra_payment,
            "Months": len(with_extra),
            "Total Interest": summary.total_interest_with_extra,
            "Penalty": summary.early_payment_penalty_amount,
            "Interest Saved": summary.interest_saved,
            "Net Savings": summary.net_savings,
        },
    ]
    return pd.DataFrame(rows)
