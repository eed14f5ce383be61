from __future__ import annotations

from datetime import date
from pathlib import Path

import pytest
from click.testing import CliRunner

from vehicle_loan.entrypoints.cli.main import cli
from vehicle_loan.infra.config import RATE_POLICY_DEFAULTS


CURRENT_YEAR = date.today().year

EXPECTED_LINES = [
    "1st year with Monthly installment: Rp 2,250,000.00, Interest rate: 8.0%",
    "2nd year with Monthly installment: Rp 2,432,250.00, Interest rate: 8.1%",
    "3rd year with Monthly installment: Rp 2,641,423.50, Interest rate: 8.6%",
]


@pytest.fixture(autouse=True)
def default_policy(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in RATE_POLICY_DEFAULTS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


def write_input(tmp_path: Path, *lines: object) -> Path:
    path = tmp_path / "loan.txt"
    path.write_text("\n".join(str(line) for line in lines) + "\n", encoding="utf-8")
    return path


# ============================================================================
# FILE INPUT
# ============================================================================


def test_schedule_from_file(runner: CliRunner, tmp_path: Path) -> None:
    path = write_input(tmp_path, "car", "new", CURRENT_YEAR, "100000000", "3", "25000000")

    result = runner.invoke(cli, ["schedule", "--file", str(path)])

    assert result.exit_code == 0, result.output
    assert result.output.splitlines() == EXPECTED_LINES


def test_file_with_invalid_tenor(runner: CliRunner, tmp_path: Path) -> None:
    path = write_input(tmp_path, "car", "old", "2015", "100000000", "9", "25000000")

    result = runner.invoke(cli, ["schedule", "--file", str(path)])

    assert result.exit_code == 1
    assert "Error: Invalid loan tenor. Must be between 1 and 6 years." in result.output


def test_file_with_non_numeric_year(runner: CliRunner, tmp_path: Path) -> None:
    path = write_input(tmp_path, "car", "old", "twenty", "100000000", "3", "25000000")

    result = runner.invoke(cli, ["schedule", "--file", str(path)])

    assert result.exit_code == 1
    assert "Error: Invalid input format." in result.output


def test_file_with_wrong_line_count(runner: CliRunner, tmp_path: Path) -> None:
    path = write_input(tmp_path, "car", "old", "2015")

    result = runner.invoke(cli, ["schedule", "--file", str(path)])

    assert result.exit_code == 1
    assert "Error: Invalid file format. File must contain 6 lines of input." in result.output


def test_missing_file(runner: CliRunner, tmp_path: Path) -> None:
    path = tmp_path / "nope.txt"

    result = runner.invoke(cli, ["schedule", "--file", str(path)])

    assert result.exit_code == 1
    assert f"Error: Could not read file: {path}" in result.output


def test_rates_come_from_environment(
    runner: CliRunner, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("LOAN_INTEREST_RATE_MOTORCYCLE", "10")
    path = write_input(tmp_path, "motorcycle", "old", "2015", "16000", "1", "4000")

    result = runner.invoke(cli, ["schedule", "--file", str(path)])

    assert result.exit_code == 0, result.output
    assert result.output.splitlines() == [
        "1st year with Monthly installment: Rp 1,100.00, Interest rate: 10.0%"
    ]


# ============================================================================
# INTERACTIVE INPUT
# ============================================================================


def test_schedule_from_prompts(runner: CliRunner) -> None:
    answers = f"Car\nNEW\n{CURRENT_YEAR}\n100000000\n3\n25000000\n"

    result = runner.invoke(cli, ["schedule"], input=answers)

    assert result.exit_code == 0, result.output
    assert "Enter vehicle type (car/motorcycle):" in result.output
    assert "Enter down payment amount:" in result.output
    for line in EXPECTED_LINES:
        assert line in result.output


def test_prompts_stop_at_first_invalid_answer(runner: CliRunner) -> None:
    result = runner.invoke(cli, ["schedule"], input="truck\n")

    assert result.exit_code == 1
    assert "Error: Invalid vehicle type. Must be 'car' or 'motorcycle'." in result.output
    assert "Enter vehicle condition" not in result.output


def test_prompted_new_vehicle_too_old(runner: CliRunner) -> None:
    answers = f"car\nnew\n{CURRENT_YEAR - 3}\n"

    result = runner.invoke(cli, ["schedule"], input=answers)

    assert result.exit_code == 1
    assert "Error: Year for 'NEW' vehicle cannot be less than current year - 1" in result.output


def test_prompted_down_payment_below_minimum(runner: CliRunner) -> None:
    answers = "motorcycle\nold\n2018\n20000000\n2\n1000\n"

    result = runner.invoke(cli, ["schedule"], input=answers)

    assert result.exit_code == 1
    assert "Error: Down payment below allowable minimum." in result.output


def test_log_level_option_is_accepted(runner: CliRunner, tmp_path: Path) -> None:
    path = write_input(tmp_path, "car", "new", CURRENT_YEAR, "100000000", "3", "25000000")

    result = runner.invoke(cli, ["--log-level", "debug", "schedule", "--file", str(path)])

    assert result.exit_code == 0, result.output


def test_loan_too_small_to_schedule(runner: CliRunner, tmp_path: Path) -> None:
    path = write_input(tmp_path, "car", "old", "2015", "0.04", "6", "0.01")

    result = runner.invoke(cli, ["schedule", "--file", str(path)])

    assert result.exit_code == 1
    assert "Error: Computed monthly installment is invalid" in result.output
    assert "year with Monthly installment" not in result.output
