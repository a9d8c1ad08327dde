"""Data models for the loan schedule calculator.

This module defines dataclasses representing the entities passed between the
amortization engine and its callers: the loan inputs, the per-period payment
records, the loan summary and the combined result of one calculation. Records,
summaries and results are frozen so that a computed schedule cannot be mutated
after the fact.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Iterator, Optional, Tuple


@dataclass
class LoanInput:
    """The three numbers a calculation is made from.

    Attributes
    ----------
    principal: float
        The amount borrowed, in currency units.
    annual_rate_percent: float
        The nominal annual interest rate in percent (``4.5`` means 4.5 %).
    term_months: int
        The number of monthly payments.
    """

    principal: float
    annual_rate_percent: float
    term_months: int


@dataclass(frozen=True)
class PaymentRecord:
    """One month of the amortization schedule.

    ``principal_amount + interest_amount`` equals ``payment_amount`` up to
    floating-point rounding. ``remaining_balance`` is the balance after this
    payment has been applied and is never negative.
    """

    payment_number: int
    payment_amount: float
    principal_amount: float
    interest_amount: float
    remaining_balance: float

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class LoanSummary:
    """Aggregate figures for the full contractual term.

    The totals are nominal: they are derived from the monthly payment and the
    term, not from the emitted records, so they still cover the whole term when
    the schedule retires the loan a period early.
    """

    monthly_payment: float
    total_payments: float
    total_interest: float

    @property
    def total_amount(self) -> float:
        """Alias of ``total_payments``."""
        return self.total_payments

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["total_amount"] = self.total_amount
        return data


@dataclass(frozen=True)
class AmortizationResult:
    """Outcome of a single calculation.

    A valid calculation carries a summary and at least one record. Invalid input
    produces the empty result (``summary is None`` and no records); in that case
    ``invalid_field`` names the first input that was rejected.

    The result unpacks as ``summary, records``.
    """

    summary: Optional[LoanSummary] = None
    records: Tuple[PaymentRecord, ...] = field(default_factory=tuple)
    invalid_field: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        return self.summary is None

    def __iter__(self) -> Iterator[Any]:
        yield self.summary
        yield self.records
