"""Raw text → numbers at the console boundary."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from pathlib import Path

from vehicle_loan.domain.errors import InputFileError, MalformedNumericInput


INPUT_FILE_LINES = 6
INVALID_FILE_FORMAT = "Invalid file format. File must contain 6 lines of input."
COULD_NOT_READ_FILE = "Could not read file: "


def _malformed(field: str, raw: str) -> MalformedNumericInput:
    return MalformedNumericInput(
        errors=[{"field": field, "message": f"Must be a number: {raw}", "code": "INVALID_NUMBER"}]
    )


def parse_int(field: str, raw: str) -> int:
    """
    Parse a whole number.

    Raises:
        MalformedNumericInput: If the text is not an integer
    """
    # int() would also accept digit-group underscores such as "2_026"
    if "_" in raw:
        raise _malformed(field, raw)
    try:
        return int(raw.strip())
    except ValueError:
        raise _malformed(field, raw) from None


def parse_decimal(field: str, raw: str) -> Decimal:
    """
    Parse a monetary amount as an exact Decimal.

    Raises:
        MalformedNumericInput: If the text is not a finite decimal number
    """
    if "_" in raw:
        raise _malformed(field, raw)
    try:
        value = Decimal(raw.strip().replace(",", ""))
    except InvalidOperation:
        raise _malformed(field, raw) from None

    if not value.is_finite():
        raise _malformed(field, raw)
    return value


def read_input_file(path: Path) -> list[str]:
    """
    Read the six loan input lines from a file.

    Lines are trimmed and blank lines are skipped. Order: vehicle type,
    vehicle condition, vehicle year, loan amount, loan tenor, down payment.

    Raises:
        InputFileError: If the file cannot be read or does not hold exactly six lines
    """
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        raise InputFileError(f"{COULD_NOT_READ_FILE}{path}", path=str(path)) from None

    lines = [line.strip() for line in text.splitlines()]
    lines = [line for line in lines if line]

    if len(lines) != INPUT_FILE_LINES:
        raise InputFileError(INVALID_FILE_FORMAT, path=str(path), lines=len(lines))
    return lines
