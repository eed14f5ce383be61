from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP

from vehicle_loan.domain.loan import (
    MONTHS_PER_YEAR,
    InstallmentEntry,
    LoanRequest,
    RatePolicy,
    VehicleCondition,
    VehicleType,
)

logger = logging.getLogger(__name__)

CENTS = Decimal("0.01")
HUNDRED = Decimal("100")


def compute_schedule(
    vehicle_type: VehicleType | str,
    vehicle_condition: VehicleCondition | str,
    vehicle_year: int,
    loan_amount: Decimal,
    tenor_years: int,
    down_payment: Decimal,
    rate_policy: RatePolicy,
) -> list[InstallmentEntry]:
    """
    Compute the monthly installment and interest rate for every loan year.

    Each year the remaining principal is charged one full year of interest up
    front and spread over the months still left on the loan. The rate starts
    at the vehicle's base rate and grows every year; increments are added to
    the previous year's rate, not to the starting base rate.

    Rounding policy:
    - All intermediate calculations use full precision Decimal
    - Monthly amount is rounded to cents using ROUND_HALF_UP
    - The principal carried into the next year is reduced by the rounded
      amount actually paid (monthly amount * 12)

    Vehicle condition and year only matter to input validation; they are
    accepted here so the schedule can be computed from the raw inputs.

    Raises:
        InvalidVehicleType: If the vehicle type has no base rate
        ValueError: If any year's monthly installment rounds to zero
    """
    rate = rate_policy.base_rate_for(vehicle_type)
    principal = Decimal(loan_amount) - Decimal(down_payment)
    months_remaining = tenor_years * MONTHS_PER_YEAR

    schedule: list[InstallmentEntry] = []
    for year in range(1, tenor_years + 1):
        # Year 1 uses the base rate as is
        if year > 1 and year % 2 == 0:
            rate = rate + rate_policy.increment_odd_year
        elif year > 1:
            rate = rate + rate_policy.increment_even_year

        financed = principal + principal * (rate / HUNDRED)
        monthly_amount = (financed / Decimal(months_remaining)).quantize(
            CENTS, rounding=ROUND_HALF_UP
        )

        # A principal too small to pay one cent a month would never be repaid
        if monthly_amount <= 0:
            raise ValueError("Computed monthly installment is invalid")

        principal = financed - monthly_amount * MONTHS_PER_YEAR
        months_remaining -= MONTHS_PER_YEAR

        logger.debug(
            "Computed installment year",
            extra={
                "year": year,
                "rate": str(rate),
                "monthly_amount": str(monthly_amount),
                "principal_remaining": str(principal),
            },
        )
        schedule.append(InstallmentEntry(monthly_amount=monthly_amount, annual_rate=rate))

    return schedule


@dataclass(frozen=True, slots=True)
class CalculateInstallmentSchedule:
    """Calculate the yearly installment schedule for an already validated request."""

    rate_policy: RatePolicy

    def execute(self, req: LoanRequest) -> list[InstallmentEntry]:
        schedule = compute_schedule(
            vehicle_type=req.vehicle_type,
            vehicle_condition=req.vehicle_condition,
            vehicle_year=req.vehicle_year,
            loan_amount=req.loan_amount,
            tenor_years=req.loan_tenor_years,
            down_payment=req.down_payment,
            rate_policy=self.rate_policy,
        )

        logger.info(
            "Installment schedule calculated",
            extra={
                "vehicle_type": req.vehicle_type.value,
                "principal": str(req.principal),
                "tenor_years": req.loan_tenor_years,
            },
        )
        return schedule
