from __future__ import annotations

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP

from vehicle_loan.domain.errors import MalformedNumericInput
from vehicle_loan.domain.loan import InstallmentEntry, LoanRequest
from vehicle_loan.entrypoints.http.dtos.installments import (
    InstallmentDTO,
    InstallmentScheduleRequestDTO,
    InstallmentScheduleResponseDTO,
)
from vehicle_loan.use_cases.validate_loan_input import ValidateLoanInput


RATE_PLACES = Decimal("0.1")


class InstallmentMapper:
    """Maps between REST DTOs and domain models for installment schedules."""

    @staticmethod
    def to_domain_request(
        dto: InstallmentScheduleRequestDTO, validator: ValidateLoanInput
    ) -> LoanRequest:
        """
        Converts request DTO to a validated domain LoanRequest.

        Handles string → Decimal conversion at the boundary, then runs the
        loan input rules.

        Args:
            dto: Request DTO with string monetary values
            validator: Loan input validation use case

        Returns:
            LoanRequest with Decimal monetary values

        Raises:
            MalformedNumericInput: If monetary strings are not valid decimals
            ValidationFailure: If the input breaks a loan rule
        """
        errors = []

        try:
            loan_amount = Decimal(dto.loan_amount)
        except (InvalidOperation, ValueError):
            errors.append(
                {
                    "field": "loan_amount",
                    "message": f"Must be a valid decimal: {dto.loan_amount}",
                    "code": "INVALID_DECIMAL",
                }
            )
            loan_amount = Decimal("0")  # Placeholder to continue parsing

        try:
            down_payment = Decimal(dto.down_payment)
        except (InvalidOperation, ValueError):
            errors.append(
                {
                    "field": "down_payment",
                    "message": f"Must be a valid decimal: {dto.down_payment}",
                    "code": "INVALID_DECIMAL",
                }
            )
            down_payment = Decimal("0")  # Placeholder to continue parsing

        if errors:
            raise MalformedNumericInput(errors=errors)

        return validator.execute(
            vehicle_type=dto.vehicle_type,
            vehicle_condition=dto.vehicle_condition,
            vehicle_year=dto.vehicle_year,
            loan_amount=loan_amount,
            loan_tenor_years=dto.loan_tenor_years,
            down_payment=down_payment,
        )

    @staticmethod
    def to_response(schedule: list[InstallmentEntry]) -> InstallmentScheduleResponseDTO:
        """
        Converts the domain schedule to a response DTO.

        Handles Decimal → string conversion at the boundary. Rates are shown
        with one decimal place.
        """
        return InstallmentScheduleResponseDTO(
            installments=[
                InstallmentDTO(
                    year=year,
                    monthly_installment=str(entry.monthly_amount),
                    interest_rate=str(entry.annual_rate.quantize(RATE_PLACES, rounding=ROUND_HALF_UP)),
                )
                for year, entry in enumerate(schedule, start=1)
            ]
        )
