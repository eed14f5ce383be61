from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from vehicle_loan.domain import validation
from vehicle_loan.domain.errors import ValidationFailure
from vehicle_loan.domain.loan import LoanRequest, RatePolicy, VehicleCondition, VehicleType


INVALID_VEHICLE_TYPE = "Invalid vehicle type. Must be 'car' or 'motorcycle'."
INVALID_VEHICLE_CONDITION = "Invalid vehicle condition. Must be 'new' or 'old'."
INVALID_YEAR_FOUR_DIGIT = "Invalid year. Must be a 4-digit number."
INVALID_YEAR_IN_FUTURE = "Invalid vehicle year. Must be less or equals than current year."
INVALID_YEAR_FOR_NEW_VEHICLE = "Year for 'NEW' vehicle cannot be less than current year - 1"
INVALID_LOAN_AMOUNT = "Invalid amount. Must be a numeric value not exceeding 1 billion."
INVALID_TENOR = "Invalid loan tenor. Must be between 1 and 6 years."
INVALID_DOWN_PAYMENT = "Down payment below allowable minimum."
DOWN_PAYMENT_NOT_BELOW_AMOUNT = "Down payment must be less than loan amount."


def check_vehicle_type(vehicle_type: str) -> VehicleType:
    if not validation.is_valid_vehicle_type(vehicle_type):
        raise ValidationFailure("vehicle_type", INVALID_VEHICLE_TYPE, "INVALID_VEHICLE_TYPE")
    return VehicleType(vehicle_type.lower())


def check_vehicle_condition(vehicle_condition: str) -> VehicleCondition:
    if not validation.is_valid_vehicle_condition(vehicle_condition):
        raise ValidationFailure(
            "vehicle_condition", INVALID_VEHICLE_CONDITION, "INVALID_VEHICLE_CONDITION"
        )
    return VehicleCondition(vehicle_condition.lower())


def check_vehicle_year(
    vehicle_year: int, vehicle_condition: VehicleCondition, current_year: int | None = None
) -> int:
    if not validation.is_valid_year_four_digit(vehicle_year):
        raise ValidationFailure("vehicle_year", INVALID_YEAR_FOUR_DIGIT, "INVALID_YEAR_FORMAT")
    if not validation.is_valid_year_not_in_future(vehicle_year, current_year):
        raise ValidationFailure("vehicle_year", INVALID_YEAR_IN_FUTURE, "YEAR_IN_FUTURE")
    if not validation.is_valid_vehicle_if_new_condition(
        vehicle_condition.value, vehicle_year, current_year
    ):
        raise ValidationFailure(
            "vehicle_year", INVALID_YEAR_FOR_NEW_VEHICLE, "YEAR_TOO_OLD_FOR_NEW_VEHICLE"
        )
    return vehicle_year


def check_loan_amount(loan_amount: Decimal) -> Decimal:
    if not validation.is_valid_loan_amount(loan_amount):
        raise ValidationFailure("loan_amount", INVALID_LOAN_AMOUNT, "INVALID_LOAN_AMOUNT")
    return loan_amount


def check_loan_tenor(loan_tenor_years: int) -> int:
    if not validation.is_valid_loan_tenor(loan_tenor_years):
        raise ValidationFailure("loan_tenor_years", INVALID_TENOR, "INVALID_TENOR")
    return loan_tenor_years


def check_down_payment(down_payment: Decimal, loan_amount: Decimal, rate_policy: RatePolicy) -> Decimal:
    if not validation.is_valid_down_payment(
        down_payment, loan_amount, rate_policy.minimum_down_payment_percent
    ):
        raise ValidationFailure("down_payment", INVALID_DOWN_PAYMENT, "DOWN_PAYMENT_BELOW_MINIMUM")
    # Keeps the financed principal positive
    if down_payment >= loan_amount:
        raise ValidationFailure(
            "down_payment", DOWN_PAYMENT_NOT_BELOW_AMOUNT, "DOWN_PAYMENT_NOT_BELOW_AMOUNT"
        )
    return down_payment


@dataclass(frozen=True, slots=True)
class ValidateLoanInput:
    """
    Run every loan input check in entry order and build a LoanRequest.

    Stops at the first violated rule, the same order a user is prompted in:
    type, condition, year, amount, tenor, down payment.

    Raises:
        ValidationFailure: For the first rule the input violates
    """

    rate_policy: RatePolicy
    current_year: int | None = None

    def execute(
        self,
        vehicle_type: str,
        vehicle_condition: str,
        vehicle_year: int,
        loan_amount: Decimal,
        loan_tenor_years: int,
        down_payment: Decimal,
    ) -> LoanRequest:
        parsed_type = check_vehicle_type(vehicle_type)
        parsed_condition = check_vehicle_condition(vehicle_condition)
        check_vehicle_year(vehicle_year, parsed_condition, self.current_year)
        check_loan_amount(loan_amount)
        check_loan_tenor(loan_tenor_years)
        check_down_payment(down_payment, loan_amount, self.rate_policy)

        return LoanRequest(
            vehicle_type=parsed_type,
            vehicle_condition=parsed_condition,
            vehicle_year=vehicle_year,
            loan_amount=loan_amount,
            loan_tenor_years=loan_tenor_years,
            down_payment=down_payment,
        )
