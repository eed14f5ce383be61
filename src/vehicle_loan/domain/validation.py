"""Loan input predicates.

Each check is pure and independent and returns True when the input is valid.
Callers decide which message to show and whether to stop.
"""

from __future__ import annotations

import re
from datetime import date
from decimal import Decimal

from vehicle_loan.domain.loan import (
    MAX_LOAN_AMOUNT,
    MAX_TENOR_YEARS,
    MIN_TENOR_YEARS,
    VehicleCondition,
    VehicleType,
)


_FOUR_DIGITS = re.compile(r"\d{4}")


def _this_year(current_year: int | None) -> int:
    return date.today().year if current_year is None else current_year


def is_valid_vehicle_type(vehicle_type: str) -> bool:
    return vehicle_type.lower() in {t.value for t in VehicleType}


def is_valid_vehicle_condition(vehicle_condition: str) -> bool:
    return vehicle_condition.lower() in {c.value for c in VehicleCondition}


def is_valid_year_four_digit(year: int) -> bool:
    return _FOUR_DIGITS.fullmatch(str(year)) is not None


def is_valid_year_not_in_future(year: int, current_year: int | None = None) -> bool:
    return year <= _this_year(current_year)


def is_valid_vehicle_if_new_condition(
    vehicle_condition: str, year: int, current_year: int | None = None
) -> bool:
    """A new vehicle must be from this year or last year; old vehicles pass."""
    if vehicle_condition.lower() != VehicleCondition.NEW.value:
        return True
    this_year = _this_year(current_year)
    return year in (this_year, this_year - 1)


def is_valid_loan_amount(loan_amount: Decimal | int) -> bool:
    return 0 < loan_amount <= MAX_LOAN_AMOUNT


def is_valid_loan_tenor(loan_tenor_years: int) -> bool:
    return MIN_TENOR_YEARS <= loan_tenor_years <= MAX_TENOR_YEARS


def is_valid_down_payment(
    down_payment: Decimal | int,
    loan_amount: Decimal | int,
    minimum_down_payment_percent: Decimal | int,
) -> bool:
    minimum = Decimal(loan_amount) * (Decimal(minimum_down_payment_percent) / Decimal("100"))
    return down_payment >= minimum
