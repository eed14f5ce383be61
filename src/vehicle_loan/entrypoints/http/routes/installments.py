from fastapi import APIRouter, Depends

from vehicle_loan.entrypoints.http.dependencies import (
    get_calculate_installment_schedule_use_case,
    get_validate_loan_input_use_case,
)
from vehicle_loan.entrypoints.http.dtos.installments import (
    InstallmentScheduleRequestDTO,
    InstallmentScheduleResponseDTO,
)
from vehicle_loan.entrypoints.http.mappers.installment_mapper import InstallmentMapper
from vehicle_loan.use_cases.calculate_installment_schedule import CalculateInstallmentSchedule
from vehicle_loan.use_cases.validate_loan_input import ValidateLoanInput


router = APIRouter(tags=["Installments"])


@router.post(
    "/loans/installments",
    response_model=InstallmentScheduleResponseDTO,
    summary="Calculate yearly installment schedule",
    description="""
    Calculate the monthly installment and interest rate for every year of a vehicle loan.

    ## Monetary Values
    - All monetary values are strings (e.g., "100000000")
    - Must be valid decimal format with up to 2 decimal places

    ## Rules
    - Vehicle type: car or motorcycle
    - Vehicle condition: new or old; new vehicles must be from this year or last year
    - Loan amount: greater than 0, at most 1,000,000,000
    - Loan tenor: 1 to 6 years
    - Down payment: at least the configured minimum percentage of the loan amount

    ## Calculation
    - Year 1 uses the vehicle's base rate; later years add the configured increments
    - Each year, one year of interest is added to the remaining principal and
      spread over the months left on the loan

    ## Example
    ```
    POST /v1/loans/installments
    {
        "vehicle_type": "car",
        "vehicle_condition": "new",
        "vehicle_year": 2026,
        "loan_amount": "100000000",
        "loan_tenor_years": 3,
        "down_payment": "25000000"
    }
    ```
    """,
    responses={
        422: {
            "description": "Validation error",
            "content": {
                "application/json": {
                    "examples": {
                        "invalid_tenor": {
                            "summary": "Tenor out of range",
                            "value": {
                                "detail": "Invalid loan tenor. Must be between 1 and 6 years.",
                                "code": "VALIDATION_ERROR",
                                "errors": [
                                    {
                                        "field": "loan_tenor_years",
                                        "message": "Invalid loan tenor. Must be between 1 and 6 years.",
                                        "code": "INVALID_TENOR",
                                    }
                                ],
                            },
                        },
                        "down_payment_too_low": {
                            "summary": "Down payment below minimum",
                            "value": {
                                "detail": "Down payment below allowable minimum.",
                                "code": "VALIDATION_ERROR",
                                "errors": [
                                    {
                                        "field": "down_payment",
                                        "message": "Down payment below allowable minimum.",
                                        "code": "DOWN_PAYMENT_BELOW_MINIMUM",
                                    }
                                ],
                            },
                        },
                    }
                }
            },
        },
    },
)
def calculate_installment_schedule(
    payload: InstallmentScheduleRequestDTO,
    validator: ValidateLoanInput = Depends(get_validate_loan_input_use_case),
    use_case: CalculateInstallmentSchedule = Depends(get_calculate_installment_schedule_use_case),
) -> InstallmentScheduleResponseDTO:
    """Installment schedule endpoint following parse → validate → execute → map → return."""
    # 1. Map to validated domain request (string → Decimal, loan rules)
    request = InstallmentMapper.to_domain_request(payload, validator)

    # 2. Execute use case
    schedule = use_case.execute(request)

    # 3. Map to response (Decimal → string)
    return InstallmentMapper.to_response(schedule)
