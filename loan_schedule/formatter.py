"""Output helpers for the loan schedule calculator.

This module renders summaries and payment schedules as plain text tables and
provides the US dollar and thousands formatting used by the CLI and the web
pages. We rely only on built-in printing and string formatting. All rounding
for display happens here; the engine hands over unrounded floats.
"""

from __future__ import annotations

from typing import Dict, Optional, Sequence

from .data_models import LoanSummary, PaymentRecord

EMPTY_SCHEDULE_MESSAGE = "Enter loan details to generate payment schedule"


def format_currency(amount: float) -> str:
    """Format ``amount`` as US dollars, e.g. ``$1,266.71`` or ``-$12.50``."""
    sign = "-" if round(amount, 2) < 0 else ""
    return f"{sign}${abs(amount):,.2f}"


def format_number(value: float) -> str:
    """Format a count with thousands separators, e.g. ``1,234``."""
    if float(value).is_integer():
        return f"{int(value):,}"
    return f"{value:,}"


def payments_label(count: int) -> str:
    if not count:
        return "Enter loan details to see schedule"
    return f"{format_number(count)} payments"


def print_summary(summary: LoanSummary) -> None:
    """Print the loan summary in a human-readable format."""
    print("Loan Summary")
    print("-" * 72)
    print(f"Monthly Payment : {format_currency(summary.monthly_payment):>18s}")
    print(f"Total Interest  : {format_currency(summary.total_interest):>18s}")
    print(f"Total Amount    : {format_currency(summary.total_amount):>18s}")
    print("-" * 72)


def print_schedule(records: Sequence[PaymentRecord], max_rows: Optional[int] = None) -> None:
    """Print the payment schedule as a table.

    Parameters
    ----------
    records: Sequence[PaymentRecord]
        The payment records to print.
    max_rows: Optional[int]
        When given, only the first ``max_rows`` records are printed followed by
        a note with the number of rows left out.
    """
    print("Payment Schedule")
    print(payments_label(len(records)))
    if not records:
        print(EMPTY_SCHEDULE_MESSAGE)
        return
    print(
        f"{'Payment #':>10s} {'Payment Amount':>16s} {'Principal':>16s} "
        f"{'Interest':>16s} {'Balance':>16s}"
    )
    shown = records if max_rows is None else records[:max_rows]
    for record in shown:
        print(
            f"{record.payment_number:>10d} "
            f"{format_currency(record.payment_amount):>16s} "
            f"{format_currency(record.principal_amount):>16s} "
            f"{format_currency(record.interest_amount):>16s} "
            f"{format_currency(record.remaining_balance):>16s}"
        )
    hidden = len(records) - len(shown)
    if hidden > 0:
        print(f"Showing first {len(shown)} rows. {format_number(hidden)} more rows truncated.")


def print_comparison(s1: LoanSummary, s2: LoanSummary) -> None:
    """Print two loan summaries side by side.

    The difference column is scenario2 - scenario1, so a negative value means
    the second scenario is cheaper.
    """
    print("Comparison")
    print("=" * 72)
    rows: Dict[str, tuple] = {
        "monthly_payment": (s1.monthly_payment, s2.monthly_payment),
        "total_interest": (s1.total_interest, s2.total_interest),
        "total_amount": (s1.total_amount, s2.total_amount),
    }
    print(f"{'Metric':20s} {'Scenario1':>15s} {'Scenario2':>15s} {'Difference':>15s}")
    for key, (v1, v2) in rows.items():
        print(f"{key:20s} {v1:15.2f} {v2:15.2f} {v2 - v1:15.2f}")
    print("=" * 72)
