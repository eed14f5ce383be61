"""Domain error classes.

Protocol-agnostic errors that represent business failures.
These errors are translated to console messages or HTTP responses by the entrypoints.
"""

from typing import Any


class DomainError(Exception):
    """Base class for all domain errors.

    Contains business error information that can be rendered by the CLI
    or translated to an HTTP response.
    """

    # Default error code (can be used as i18n key)
    error_code: str = "DOMAIN_ERROR"

    def __init__(self, message: str, **context: Any) -> None:
        """Create a domain error.

        Args:
            message: Human-readable error message (default locale)
            **context: Additional context for error (e.g., field names, values)
        """
        self.message = message
        self.context = context
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Convert to structured format for protocol translation."""
        return {
            "message": self.message,
            "code": self.error_code,
            **self.context,
        }


class ValidationError(DomainError):
    """Business rule validation error.

    Examples:
        - Loan tenor outside 1..6 years
        - Down payment below the configured minimum
        - 'new' vehicle with a year older than last year

    Protocol mappings:
        - CLI: "Error: <message>", exit status 1
        - REST: 422 Unprocessable Entity
    """

    error_code: str = "VALIDATION_ERROR"

    def __init__(
        self,
        message: str | None = None,
        errors: list[dict[str, str]] | None = None,
        **context: Any,
    ) -> None:
        """Create a validation error.

        Args:
            message: Overall validation error message (optional if errors provided)
            errors: List of field-specific errors, each with 'field' and 'message'
                   Example: [{"field": "loan_tenor_years", "message": "Must be between 1 and 6"}]
            **context: Additional context
        """
        self.errors: list[dict[str, str]] | None
        if errors:
            self.errors = errors
            msg = message or "Validation failed"
        else:
            self.errors = None
            msg = message or "Validation error"

        super().__init__(msg, **context)

    def to_dict(self) -> dict[str, Any]:
        """Convert to structured format."""
        if self.errors:
            return {
                "message": self.message,
                "code": self.error_code,
                "errors": self.errors,
                **self.context,
            }
        return super().to_dict()


class ValidationFailure(ValidationError):
    """A single loan input rule was violated.

    Carries the user-facing message plus the offending field and a rule code,
    so both the console and the HTTP layer can report it.
    """

    def __init__(self, field: str, message: str, code: str = "INVALID_VALUE") -> None:
        self.field = field
        self.code = code
        super().__init__(
            message,
            errors=[{"field": field, "message": message, "code": code}],
        )


class InvalidVehicleType(ValidationError):
    """The vehicle type has no base interest rate.

    Raised by the amortization engine itself when an unmapped type slips
    past input validation.
    """

    def __init__(self, vehicle_type: object) -> None:
        self.vehicle_type = vehicle_type
        super().__init__(
            f"Invalid vehicle type: {vehicle_type!r}",
            errors=[
                {
                    "field": "vehicle_type",
                    "message": "Must be 'car' or 'motorcycle'",
                    "code": "INVALID_VEHICLE_TYPE",
                }
            ],
        )


class MalformedNumericInput(ValidationError):
    """Raw text could not be parsed as a number at the shell boundary."""

    message_text = (
        "Invalid input format. Please enter numbers for year, loan amount, tenor, and down payment."
    )

    def __init__(self, errors: list[dict[str, str]]) -> None:
        super().__init__(self.message_text, errors=errors)


class InputFileError(DomainError):
    """The loan input file could not be read or has the wrong shape.

    Protocol mappings:
        - CLI: "Error: <message>", exit status 1
        - REST: 400 Bad Request
    """

    error_code: str = "INVALID_INPUT_FILE"
