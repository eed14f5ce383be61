"""REST API error response models.

Documents the structured error body returned for every HTTP error.
"""

from pydantic import BaseModel, ConfigDict


class ErrorDetail(BaseModel):
    """Field-level error: which loan input failed and why."""

    field: str
    message: str
    code: str | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "field": "loan_tenor_years",
                "message": "Invalid loan tenor. Must be between 1 and 6 years.",
                "code": "INVALID_TENOR",
            }
        }
    )


class ErrorResponse(BaseModel):
    """Structured error response format.

    Examples:
        Simple error:
            {
                "detail": "An unexpected error occurred",
                "code": "INTERNAL_ERROR"
            }

        Loan rule violation:
            {
                "detail": "Down payment below allowable minimum.",
                "code": "VALIDATION_ERROR",
                "errors": [
                    {
                        "field": "down_payment",
                        "message": "Down payment below allowable minimum.",
                        "code": "DOWN_PAYMENT_BELOW_MINIMUM"
                    }
                ]
            }
    """

    detail: str
    code: str | None = None
    errors: list[ErrorDetail] | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"detail": "An unexpected error occurred", "code": "INTERNAL_ERROR"},
                {
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
            ]
        }
    )
