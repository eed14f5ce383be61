"""
Dependency injection for FastAPI routes.

The rate policy is immutable process-wide configuration, so it is read once
and cached. Use cases are cheap and built per request.
"""

from __future__ import annotations

from functools import lru_cache

from fastapi import Depends

from vehicle_loan.domain.loan import RatePolicy
from vehicle_loan.infra.config import rate_policy_from_env
from vehicle_loan.use_cases.calculate_installment_schedule import CalculateInstallmentSchedule
from vehicle_loan.use_cases.validate_loan_input import ValidateLoanInput


@lru_cache
def get_rate_policy() -> RatePolicy:
    """
    Provides the interest-rate policy read from the environment.

    Cached for the lifetime of the process; call ``get_rate_policy.cache_clear()``
    after changing the LOAN_* environment variables.
    """
    return rate_policy_from_env()


def get_validate_loan_input_use_case(
    rate_policy: RatePolicy = Depends(get_rate_policy),
) -> ValidateLoanInput:
    """Factory for the loan input validation use case (current year resolved per call)."""
    return ValidateLoanInput(rate_policy=rate_policy)


def get_calculate_installment_schedule_use_case(
    rate_policy: RatePolicy = Depends(get_rate_policy),
) -> CalculateInstallmentSchedule:
    """
    Factory function that returns a configured CalculateInstallmentSchedule use case.

    Args:
        rate_policy: Interest-rate policy (injected by FastAPI via Depends(get_rate_policy))

    Returns:
        CalculateInstallmentSchedule: Configured use case instance
    """
    return CalculateInstallmentSchedule(rate_policy=rate_policy)
