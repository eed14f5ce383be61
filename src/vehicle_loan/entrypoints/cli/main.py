"""Command-line interface for the vehicle loan calculator.

``vehicle-loan schedule --file loan.txt`` reads the six loan inputs from a
file; without ``--file`` each input is prompted for and checked as soon as
it is entered. Either way the yearly installments are printed to the
terminal.
"""

from __future__ import annotations

import logging
from pathlib import Path

import click

from vehicle_loan.domain.errors import DomainError
from vehicle_loan.domain.loan import LoanRequest, RatePolicy
from vehicle_loan.entrypoints.cli.formatter import format_schedule
from vehicle_loan.entrypoints.cli.parsing import parse_decimal, parse_int, read_input_file
from vehicle_loan.infra.config import rate_policy_from_env
from vehicle_loan.use_cases import validate_loan_input as checks
from vehicle_loan.use_cases.calculate_installment_schedule import CalculateInstallmentSchedule

logger = logging.getLogger(__name__)


def request_from_file(path: Path, rate_policy: RatePolicy) -> LoanRequest:
    vehicle_type, vehicle_condition, year, amount, tenor, down_payment = read_input_file(path)

    return checks.ValidateLoanInput(rate_policy=rate_policy).execute(
        vehicle_type=vehicle_type,
        vehicle_condition=vehicle_condition,
        vehicle_year=parse_int("vehicle_year", year),
        loan_amount=parse_decimal("loan_amount", amount),
        loan_tenor_years=parse_int("loan_tenor_years", tenor),
        down_payment=parse_decimal("down_payment", down_payment),
    )


def request_from_prompts(rate_policy: RatePolicy) -> LoanRequest:
    """Prompt for each input in turn; stop at the first invalid answer."""
    vehicle_type = checks.check_vehicle_type(
        click.prompt("Enter vehicle type (car/motorcycle)").strip()
    )
    vehicle_condition = checks.check_vehicle_condition(
        click.prompt("Enter vehicle condition (new/old)").strip()
    )
    vehicle_year = checks.check_vehicle_year(
        parse_int("vehicle_year", click.prompt("Enter vehicle year (4 digits)")),
        vehicle_condition,
    )
    loan_amount = checks.check_loan_amount(
        parse_decimal("loan_amount", click.prompt("Enter total loan amount (up to 1 billion)"))
    )
    loan_tenor_years = checks.check_loan_tenor(
        parse_int("loan_tenor_years", click.prompt("Enter loan tenor (1-6 years)"))
    )
    down_payment = checks.check_down_payment(
        parse_decimal("down_payment", click.prompt("Enter down payment amount")),
        loan_amount,
        rate_policy,
    )

    return LoanRequest(
        vehicle_type=vehicle_type,
        vehicle_condition=vehicle_condition,
        vehicle_year=vehicle_year,
        loan_amount=loan_amount,
        loan_tenor_years=loan_tenor_years,
        down_payment=down_payment,
    )


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    show_default=True,
    help="Logging verbosity.",
)
def cli(log_level: str) -> None:
    """Vehicle loan installment calculator."""
    logging.basicConfig(
        level=log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@cli.command()
@click.option(
    "--file",
    "input_file",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="File with six lines: type, condition, year, amount, tenor, down payment.",
)
@click.pass_context
def schedule(ctx: click.Context, input_file: Path | None) -> None:
    """Print the monthly installment and interest rate for every loan year."""
    try:
        rate_policy = rate_policy_from_env()
        if input_file is not None:
            request = request_from_file(input_file, rate_policy)
        else:
            request = request_from_prompts(rate_policy)
        installments = CalculateInstallmentSchedule(rate_policy=rate_policy).execute(request)
    except DomainError as exc:
        logger.info(
            "Loan input rejected",
            extra={"error_code": exc.error_code, "error_message": exc.message},
        )
        click.echo(f"Error: {exc.message}")
        ctx.exit(1)
    except ValueError as exc:
        logger.info("Loan cannot be scheduled", extra={"error_message": str(exc)})
        click.echo(f"Error: {exc}")
        ctx.exit(1)

    for line in format_schedule(installments):
        click.echo(line)


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
