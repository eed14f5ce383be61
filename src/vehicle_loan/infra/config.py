from __future__ import annotations

import os
from decimal import Decimal, InvalidOperation

from vehicle_loan.domain.loan import RatePolicy


# Environment variable -> default percentage
RATE_POLICY_DEFAULTS = {
    "LOAN_INTEREST_RATE_CAR": "8",
    "LOAN_INTEREST_RATE_MOTORCYCLE": "9",
    "LOAN_INTEREST_RATE_INCREMENT_ODD_YEAR": "0.1",
    "LOAN_INTEREST_RATE_INCREMENT_EVEN_YEAR": "0.5",
    "LOAN_MINIMUM_DOWN_PAYMENT_PERCENT": "25",
}


def _decimal_setting(name: str) -> Decimal:
    raw = os.getenv(name) or RATE_POLICY_DEFAULTS[name]

    try:
        value = Decimal(raw.strip())
    except InvalidOperation:
        raise RuntimeError(f"{name} must be a decimal percentage, got {raw!r}") from None

    if not value.is_finite():
        raise RuntimeError(f"{name} must be a decimal percentage, got {raw!r}")

    return value


def rate_policy_from_env() -> RatePolicy:
    """Build the interest-rate policy from LOAN_* environment variables."""
    return RatePolicy(
        base_rate_car=_decimal_setting("LOAN_INTEREST_RATE_CAR"),
        base_rate_motorcycle=_decimal_setting("LOAN_INTEREST_RATE_MOTORCYCLE"),
        increment_odd_year=_decimal_setting("LOAN_INTEREST_RATE_INCREMENT_ODD_YEAR"),
        increment_even_year=_decimal_setting("LOAN_INTEREST_RATE_INCREMENT_EVEN_YEAR"),
        minimum_down_payment_percent=_decimal_setting("LOAN_MINIMUM_DOWN_PAYMENT_PERCENT"),
    )
