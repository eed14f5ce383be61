from pydantic import BaseModel, ConfigDict, Field


class InstallmentScheduleRequestDTO(BaseModel):
    """Request payload for calculating a yearly installment schedule."""

    vehicle_type: str = Field(
        description="Vehicle type: 'car' or 'motorcycle' (case-insensitive)",
        examples=["car"],
    )
    vehicle_condition: str = Field(
        description="Vehicle condition: 'new' or 'old' (case-insensitive)",
        examples=["new"],
    )
    vehicle_year: int = Field(
        description="Vehicle year (4 digits). New vehicles must be from this year or last year",
        examples=[2026],
    )
    loan_amount: str = Field(
        description="Total loan amount as decimal string, up to 1,000,000,000",
        examples=["100000000"],
        pattern=r"^\d+(\.\d{1,2})?$",
    )
    loan_tenor_years: int = Field(
        description="Loan tenor in years, between 1 and 6",
        examples=[3],
    )
    down_payment: str = Field(
        description="Down payment amount as decimal string",
        examples=["25000000"],
        pattern=r"^\d+(\.\d{1,2})?$",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "vehicle_type": "car",
                "vehicle_condition": "new",
                "vehicle_year": 2026,
                "loan_amount": "100000000",
                "loan_tenor_years": 3,
                "down_payment": "25000000",
            }
        }
    )


class InstallmentDTO(BaseModel):
    """Installment for one loan year."""

    year: int = Field(description="Loan year, starting at 1", examples=[1])
    monthly_installment: str = Field(
        description="Monthly installment for this year as decimal string (2 decimal places)",
        examples=["2250000.00"],
    )
    interest_rate: str = Field(
        description="Annual interest rate percentage for this year (1 decimal place)",
        examples=["8.0"],
    )


class InstallmentScheduleResponseDTO(BaseModel):
    """Response with one installment per loan year, in year order."""

    installments: list[InstallmentDTO]

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "installments": [
                    {"year": 1, "monthly_installment": "2250000.00", "interest_rate": "8.0"},
                    {"year": 2, "monthly_installment": "2432250.00", "interest_rate": "8.1"},
                    {"year": 3, "monthly_installment": "2641423.50", "interest_rate": "8.6"},
                ]
            }
        }
    )
