from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from vehicle_loan.domain.errors import InvalidVehicleType


MONTHS_PER_YEAR = 12
MAX_LOAN_AMOUNT = Decimal("1000000000")
MIN_TENOR_YEARS = 1
MAX_TENOR_YEARS = 6


class VehicleType(str, Enum):
    CAR = "car"
    MOTORCYCLE = "motorcycle"

    @classmethod
    def parse(cls, value: VehicleType | str) -> VehicleType:
        """Resolve a raw (case-insensitive) string to a VehicleType.

        Raises:
            InvalidVehicleType: If the value is not a known vehicle type
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise InvalidVehicleType(value) from None


class VehicleCondition(str, Enum):
    NEW = "new"
    OLD = "old"


@dataclass(frozen=True, slots=True)
class RatePolicy:
    """Interest-rate policy, all values are percentages (8 means 8%).

    The increment names follow the configuration keys: the even-numbered
    loan years add ``increment_odd_year`` and odd years after the first
    add ``increment_even_year``.
    """

    base_rate_car: Decimal
    base_rate_motorcycle: Decimal
    increment_odd_year: Decimal
    increment_even_year: Decimal
    minimum_down_payment_percent: Decimal

    def base_rate_for(self, vehicle_type: VehicleType | str) -> Decimal:
        """
        Select the first-year rate for a vehicle type.

        Raises:
            InvalidVehicleType: If the type has no configured base rate
        """
        if VehicleType.parse(vehicle_type) is VehicleType.CAR:
            return self.base_rate_car
        return self.base_rate_motorcycle


@dataclass(frozen=True, slots=True)
class LoanRequest:
    vehicle_type: VehicleType
    vehicle_condition: VehicleCondition
    vehicle_year: int
    loan_amount: Decimal
    loan_tenor_years: int
    down_payment: Decimal

    @property
    def principal(self) -> Decimal:
        return self.loan_amount - self.down_payment


@dataclass(frozen=True, slots=True)
class InstallmentEntry:
    monthly_amount: Decimal
    annual_rate: Decimal
