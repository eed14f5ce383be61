from decimal import Decimal

import pytest

from vehicle_loan.domain.loan import InstallmentEntry
from vehicle_loan.entrypoints.cli.formatter import format_installment, format_schedule, ordinal


@pytest.mark.parametrize(
    "n, expected",
    [(1, "1st"), (2, "2nd"), (3, "3rd"), (4, "4th"), (11, "11th"), (12, "12th"), (13, "13th"), (21, "21st"), (112, "112th")],
)
def test_ordinal(n: int, expected: str) -> None:
    assert ordinal(n) == expected


def test_format_installment_uses_thousands_separators() -> None:
    line = format_installment(1, InstallmentEntry(Decimal("2250000.00"), Decimal("8")))

    assert line == "1st year with Monthly installment: Rp 2,250,000.00, Interest rate: 8.0%"


def test_format_installment_rounds_rate_half_up() -> None:
    line = format_installment(2, InstallmentEntry(Decimal("10.5"), Decimal("8.25")))

    assert line == "2nd year with Monthly installment: Rp 10.50, Interest rate: 8.3%"


def test_format_schedule_numbers_years_from_one() -> None:
    lines = format_schedule(
        [
            InstallmentEntry(Decimal("2250000.00"), Decimal("8")),
            InstallmentEntry(Decimal("2432250.00"), Decimal("8.1")),
            InstallmentEntry(Decimal("2641423.50"), Decimal("8.6")),
        ]
    )

    assert lines == [
        "1st year with Monthly installment: Rp 2,250,000.00, Interest rate: 8.0%",
        "2nd year with Monthly installment: Rp 2,432,250.00, Interest rate: 8.1%",
        "3rd year with Monthly installment: Rp 2,641,423.50, Interest rate: 8.6%",
    ]
