"""Console rendering of an installment schedule."""

from __future__ import annotations

from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable

from vehicle_loan.domain.loan import InstallmentEntry


CURRENCY_PREFIX = "Rp"


def ordinal(n: int) -> str:
    """1 -> '1st', 2 -> '2nd', 11 -> '11th', 23 -> '23rd'."""
    if 11 <= n % 100 <= 13:
        return f"{n}th"
    suffix = {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")
    return f"{n}{suffix}"


def format_installment(year: int, entry: InstallmentEntry) -> str:
    amount = entry.monthly_amount.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    rate = entry.annual_rate.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)
    return (
        f"{ordinal(year)} year with Monthly installment: "
        f"{CURRENCY_PREFIX} {amount:,.2f}, Interest rate: {rate:.1f}%"
    )


def format_schedule(schedule: Iterable[InstallmentEntry]) -> list[str]:
    return [format_installment(year, entry) for year, entry in enumerate(schedule, start=1)]
