# Initial values of the calculator form.
DEFAULT_PRINCIPAL = 100_000_000.0
DEFAULT_TERM_MONTHS = 120
DEFAULT_ANNUAL_RATE_PERCENT = 5.0
DEFAULT_EXTRA_MONTHLY_PAYMENT = 0.0
DEFAULT_EARLY_PAYMENT_PENALTY_PERCENT = 2.0
