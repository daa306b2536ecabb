import pytest

from uva_calc import config
from uva_calc.core.models import LoanParameters, SummaryMetrics
from uva_calc.core.utils import calculate_from_raw, clean_values, has_errors, validate_inputs


def test_clean_values_defaults_unset_fields_to_zero():
    params = clean_values({"principal": None, "term_months": "120", "annual_rate_percent": "5.5"})
    assert params == LoanParameters(
        principal=0.0,
        term_months=120,
        annual_rate_percent=5.5,
        extra_monthly_payment=0.0,
        early_payment_penalty_percent=0.0,
    )


def test_clean_values_ignores_garbage():
    params = clean_values({"principal": "lots", "term_months": object(), "extra_monthly_payment": "250"})
    assert params.principal == 0.0
    assert params.term_months == 0
    assert params.extra_monthly_payment == 250.0


def test_validate_inputs_flags_missing_required_fields():
    errors = validate_inputs({"principal": 0, "term_months": None})
    assert errors == {"principal": True, "term_months": True, "annual_rate_percent": True}
    assert has_errors(errors)


def test_validate_inputs_accepts_zero_rate():
    errors = validate_inputs({"principal": 1000, "term_months": 12, "annual_rate_percent": 0})
    assert errors == {"principal": False, "term_months": False, "annual_rate_percent": False}
    assert not has_errors(errors)


def test_calculate_from_raw_with_missing_rate_is_empty():
    result = calculate_from_raw({"principal": 1000, "term_months": 12})
    assert result["baseline_schedule"].empty
    assert result["extra_payment_schedule"].empty
    assert result["summary"] == SummaryMetrics()


def test_calculate_from_raw_zero_rate_hits_engine_guard():
    result = calculate_from_raw({"principal": 1000, "term_months": 12, "annual_rate_percent": 0})
    assert result["baseline_schedule"].empty
    assert result["fixed_monthly_payment"] == 0


def test_calculate_from_raw_default_form():
    defaults = LoanParameters.default()
    raw = {
        "principal": str(config.DEFAULT_PRINCIPAL),
        "term_months": config.DEFAULT_TERM_MONTHS,
        "annual_rate_percent": config.DEFAULT_ANNUAL_RATE_PERCENT,
        "extra_monthly_payment": None,
        "early_payment_penalty_percent": config.DEFAULT_EARLY_PAYMENT_PENALTY_PERCENT,
    }
    assert clean_values(raw) == defaults
    result = calculate_from_raw(raw)
    assert len(result["baseline_schedule"]) == config.DEFAULT_TERM_MONTHS
    assert result["summary"].months_saved == 0
    assert result["fixed_monthly_payment"] == pytest.approx(1_060_655.0, rel=1e-5)
