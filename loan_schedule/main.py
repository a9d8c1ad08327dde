"""Command-line interface for the loan schedule calculator.

This module uses the ``click`` library to implement a multi-command interface.
Users can compute the full payment schedule, view the loan summary or compare
two loan scenarios. Results can be printed to the terminal or exported to
JSON/CSV files.
"""

from __future__ import annotations

import csv
import json
import logging
import shlex
from pathlib import Path
from typing import Any, Dict, Optional, Sequence

import click

from . import config
from .data_models import AmortizationResult, LoanInput, PaymentRecord
from .engine import compute_for
from .formatter import EMPTY_SCHEDULE_MESSAGE, print_comparison, print_schedule, print_summary
from .utils import parse_amount, parse_rate, parse_term, years_label

logger = logging.getLogger(__name__)

CSV_HEADER = [
    "Payment_Number",
    "Payment_Amount",
    "Principal",
    "Interest",
    "Remaining_Balance",
]


def build_input_from_options(principal: str, rate: str, term: str) -> LoanInput:
    """Parse the three text options into a ``LoanInput``.

    Raises ``click.BadParameter`` when a value is not a number.
    """
    try:
        return LoanInput(
            principal=parse_amount(principal),
            annual_rate_percent=parse_rate(rate),
            term_months=parse_term(term),
        )
    except ValueError as exc:
        raise click.BadParameter(str(exc)) from exc


def result_to_dict(loan: LoanInput, result: AmortizationResult) -> Dict[str, Any]:
    """Return a JSON-serialisable view of a calculation."""
    return {
        "input": {
            "principal": loan.principal,
            "annual_rate_percent": loan.annual_rate_percent,
            "term_months": loan.term_months,
        },
        "years": years_label(loan.term_months),
        "summary": result.summary.to_dict() if result.summary else None,
        "schedule": [record.to_dict() for record in result.records],
        "invalid_field": result.invalid_field,
    }


def export_to_json(path: Path, data: Dict[str, Any]) -> None:
    """Export calculation data to a JSON file."""
    with path.open("w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)


def export_to_csv(path: Path, records: Sequence[PaymentRecord]) -> None:
    """Export the payment schedule to a CSV file."""
    with path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(CSV_HEADER)
        for r in records:
            writer.writerow(
                [
                    r.payment_number,
                    r.payment_amount,
                    r.principal_amount,
                    r.interest_amount,
                    r.remaining_balance,
                ]
            )


def _calculate(principal: str, rate: str, term: str) -> tuple[LoanInput, AmortizationResult]:
    loan = build_input_from_options(principal, rate, term)
    result = compute_for(loan)
    if result.is_empty:
        click.echo(EMPTY_SCHEDULE_MESSAGE, err=True)
        raise click.ClickException(f"Invalid loan input: {result.invalid_field}")
    return loan, result


def loan_options(func):
    """Attach the principal, rate and term options shared by the commands."""
    func = click.option(
        "--term", "-t", "term", default=config.DEFAULT_TERM, show_default=True,
        help="Loan term in months (or years with a 'y' suffix, e.g. 30y)",
    )(func)
    func = click.option(
        "--rate", "-r", "rate", default=config.DEFAULT_RATE, show_default=True,
        help="Annual interest rate (percent)",
    )(func)
    func = click.option(
        "--principal", "-p", "principal", default=config.DEFAULT_PRINCIPAL, show_default=True,
        help="Loan amount (e.g. 250000 or 250k)",
    )(func)
    return func


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """A command-line calculator for fixed-rate loan payment schedules."""
    config.configure_logging("DEBUG" if verbose else None)


@cli.command()
@loan_options
@click.option("--output", "output", type=str, help="Output file path (.json or .csv)")
@click.option("--max-rows", "max_rows", type=int, default=None, help="Maximum schedule rows to print")
def schedule(principal: str, rate: str, term: str, output: Optional[str], max_rows: Optional[int]) -> None:
    """Compute and print the full payment schedule."""
    loan, result = _calculate(principal, rate, term)
    if output:
        path = Path(output)
        if path.suffix.lower() == ".json":
            export_to_json(path, result_to_dict(loan, result))
        elif path.suffix.lower() == ".csv":
            export_to_csv(path, result.records)
        else:
            raise click.BadParameter("Unsupported output format; use .json or .csv")
        logger.info("Exported %d payments to %s", len(result.records), path)
        click.echo(f"Schedule exported to {path}")
        return
    print_summary(result.summary)
    print_schedule(result.records, max_rows=max_rows if max_rows is not None else config.get_preview_rows())


@cli.command()
@loan_options
@click.option("--output", "output", type=str, help="Output file path (.json)")
def summary(principal: str, rate: str, term: str, output: Optional[str]) -> None:
    """Compute and print only the loan summary."""
    loan, result = _calculate(principal, rate, term)
    if output:
        path = Path(output)
        if path.suffix.lower() != ".json":
            raise click.BadParameter("Summary export must use .json extension")
        data = result_to_dict(loan, result)
        data.pop("schedule")
        export_to_json(path, data)
        click.echo(f"Summary exported to {path}")
    else:
        print_summary(result.summary)
        click.echo(f"Term            : {loan.term_months} months ({years_label(loan.term_months)})")


def parse_scenario_opts(opts: str) -> Dict[str, str]:
    """Map a quoted option string such as ``"-p 250k -r 4.5 -t 360"`` to option values."""
    tokens = shlex.split(opts)
    params: Dict[str, str] = {
        "principal": config.DEFAULT_PRINCIPAL,
        "rate": config.DEFAULT_RATE,
        "term": config.DEFAULT_TERM,
    }
    names = {
        "-p": "principal",
        "--principal": "principal",
        "-r": "rate",
        "--rate": "rate",
        "-t": "term",
        "--term": "term",
    }
    i = 0
    while i < len(tokens):
        token = tokens[i]
        if token not in names:
            raise click.BadParameter(f"Unknown option in scenario: {token}")
        if i + 1 >= len(tokens):
            raise click.BadParameter(f"Missing value for {token} in scenario")
        params[names[token]] = tokens[i + 1]
        i += 2
    return params


@cli.command()
@click.option("--scenario1", "scenario1", required=True, help="First scenario options quoted string")
@click.option("--scenario2", "scenario2", required=True, help="Second scenario options quoted string")
def compare(scenario1: str, scenario2: str) -> None:
    """Compare two loan scenarios.

    Scenarios are provided as quoted option strings, for example:

        loan-schedule compare --scenario1 "-p 250k -r 4.5 -t 360" --scenario2 "-p 250k -r 4 -t 180"
    """
    _, result1 = _calculate(**parse_scenario_opts(scenario1))
    _, result2 = _calculate(**parse_scenario_opts(scenario2))
    print_comparison(result1.summary, result2.summary)


if __name__ == "__main__":
    cli()
