from decimal import Decimal

import pytest

from vehicle_loan.infra.config import RATE_POLICY_DEFAULTS, rate_policy_from_env


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in RATE_POLICY_DEFAULTS:
        monkeypatch.delenv(name, raising=False)


def test_defaults_when_environment_is_empty() -> None:
    policy = rate_policy_from_env()

    assert policy.base_rate_car == Decimal("8")
    assert policy.base_rate_motorcycle == Decimal("9")
    assert policy.increment_odd_year == Decimal("0.1")
    assert policy.increment_even_year == Decimal("0.5")
    assert policy.minimum_down_payment_percent == Decimal("25")


def test_reads_overrides_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOAN_INTEREST_RATE_CAR", "7.5")
    monkeypatch.setenv("LOAN_MINIMUM_DOWN_PAYMENT_PERCENT", " 35 ")

    policy = rate_policy_from_env()

    assert policy.base_rate_car == Decimal("7.5")
    assert policy.minimum_down_payment_percent == Decimal("35")


def test_empty_value_falls_back_to_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOAN_INTEREST_RATE_MOTORCYCLE", "")

    assert rate_policy_from_env().base_rate_motorcycle == Decimal("9")


@pytest.mark.parametrize("raw", ["abc", "NaN", "Infinity"])
def test_rejects_non_decimal_values(monkeypatch: pytest.MonkeyPatch, raw: str) -> None:
    monkeypatch.setenv("LOAN_INTEREST_RATE_INCREMENT_ODD_YEAR", raw)

    with pytest.raises(RuntimeError, match="LOAN_INTEREST_RATE_INCREMENT_ODD_YEAR"):
        rate_policy_from_env()
