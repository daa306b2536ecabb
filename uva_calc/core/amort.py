import logging

import numpy as np
import pandas as pd

from .models import EXTRA_SCHEDULE_COLUMNS, SCHEDULE_COLUMNS, LoanParameters

logger = logging.getLogger(__name__)


def fixed_payment(principal, monthly_rate, term_months):
    """Constant installment of a French-amortization loan.

    PMT = P * r(1+r)^n / ((1+r)^n - 1). Returns 0.0 when there is nothing to
    amortize (non-positive principal, rate or term).
    """
    if principal <= 0 or term_months <= 0 or monthly_rate <= 0:
        return 0.0
    growth = np.power(1.0 + monthly_rate, term_months)
    return float(principal * (monthly_rate * growth) / (growth - 1.0))


def amort_schedule(params: LoanParameters) -> pd.DataFrame:
    """Generate the baseline amortization DataFrame, without extra payments.

    Always runs exactly term_months periods. The reported Balance is floored
    at zero but the next period keeps working from the true balance.

    Returns columns: Month, Payment, Principal, Interest, Balance, Total Interest
    """
    if not params.can_amortize:
        logger.debug("Not enough data to amortize: %s", params)
        return pd.DataFrame(columns=SCHEDULE_COLUMNS)

    r = params.monthly_rate
    pmt = fixed_payment(params.principal, r, params.term_months)

    bal = float(params.principal)
    total_interest = 0.0
    rows = []

    for t in range(1, params.term_months + 1):
        interest = bal * r
        principal_paid = pmt - interest
        total_interest += interest
        bal -= principal_paid
        rows.append([t, pmt, principal_paid, interest, max(bal, 0.0), total_interest])

    logger.debug("Baseline schedule: payment=%.2f months=%d", pmt, len(rows))
    return pd.DataFrame(rows, columns=SCHEDULE_COLUMNS)


def amort_schedule_with_extra(params: LoanParameters) -> pd.DataFrame:
    """Generate the amortization DataFrame with a recurring extra payment.

    The installment is the same as the baseline one. Each period the extra
    payment is reduced by the early-payment penalty before it is applied to
    principal. Stops once the balance reaches zero, or after term_months
    periods with whatever balance is left.

    Returns columns: Month, Payment, Principal, Interest, Balance,
    Total Interest, Scheduled Payment, Extra
    """
    if not params.can_amortize:
        return pd.DataFrame(columns=EXTRA_SCHEDULE_COLUMNS)

    r = params.monthly_rate
    pmt = fixed_payment(params.principal, r, params.term_months)
    extra = (1.0 - params.early_payment_penalty_percent / 100.0) * params.extra_monthly_payment

    bal = float(params.principal)
    total_interest = 0.0
    rows = []
    t = 1

    while bal > 0 and t <= params.term_months:
        interest = bal * r
        principal_paid = pmt - interest
        actual_principal = principal_paid + extra
        total_interest += interest
        bal -= actual_principal
        if bal < 0:
            bal = 0.0
        rows.append([t, pmt + extra, actual_principal, interest, bal, total_interest, pmt, extra])
        if bal == 0:
            break
        t += 1

    logger.debug("Extra payment schedule: net extra=%.2f months=%d", extra, len(rows))
    return pd.DataFrame(rows, columns=EXTRA_SCHEDULE_COLUMNS)
