import logging

import pandas as pd

from .compare import calculate
from .models import EXTRA_SCHEDULE_COLUMNS, SCHEDULE_COLUMNS, LoanParameters, SummaryMetrics

logger = logging.getLogger(__name__)


def _to_float(value):
    if value is None:
        return 0.0
    try:
        return float(value)
    except (TypeError, ValueError):
        return 0.0


def _to_int(value):
    try:
        return int(_to_float(value))
    except (OverflowError, ValueError):
        return 0


def clean_values(raw) -> LoanParameters:
    """Turn a mapping of possibly-unset inputs into LoanParameters.

    Missing, None or non-numeric entries become 0.
    """
    return LoanParameters(
        principal=_to_float(raw.get("principal")),
        term_months=_to_int(raw.get("term_months")),
        annual_rate_percent=_to_float(raw.get("annual_rate_percent")),
        extra_monthly_payment=_to_float(raw.get("extra_monthly_payment")),
        early_payment_penalty_percent=_to_float(raw.get("early_payment_penalty_percent")),
    )


def validate_inputs(raw):
    """Flag required fields that are missing.

    Principal and term are errors when unset or zero. A zero rate is accepted
    here; only an unset rate is an error.
    """
    return {
        "principal": not _to_float(raw.get("principal")),
        "term_months": not _to_float(raw.get("term_months")),
        "annual_rate_percent": raw.get("annual_rate_percent") is None,
    }


def has_errors(errors):
    return any(errors.values())


def empty_result():
    return {
        "fixed_monthly_payment": 0.0,
        "baseline_schedule": pd.DataFrame(columns=SCHEDULE_COLUMNS),
        "extra_payment_schedule": pd.DataFrame(columns=EXTRA_SCHEDULE_COLUMNS),
        "summary": SummaryMetrics(),
    }


def calculate_from_raw(raw):
    """Validate and clean raw inputs, then run the engine."""
    errors = validate_inputs(raw)
    if has_errors(errors):
        logger.debug("Skipping calculation, missing inputs: %s",
                     [k for k, v in errors.items() if v])
        return empty_result()
    return calculate(clean_values(raw))
