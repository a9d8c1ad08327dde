"""Core calculation engine for the loan schedule calculator.

This module implements the amortization of a fixed-rate loan repaid in equal
monthly installments. Given the principal, the annual interest rate in percent
and the term in months it derives the monthly payment (annuity formula, or a
straight-line split when the rate is zero) and the period-by-period breakdown of
principal, interest and remaining balance.

The engine is a pure function of its inputs. Invalid input never raises; it
yields an empty ``AmortizationResult`` tagged with the rejected field, and it is
up to the caller to tell the user.
"""

from __future__ import annotations

import logging
import math
import numbers
from typing import List, Optional

from .data_models import AmortizationResult, LoanInput, LoanSummary, PaymentRecord

logger = logging.getLogger(__name__)


def _is_finite_real(value: object) -> bool:
    if not isinstance(value, numbers.Real) or isinstance(value, bool):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        # ints too large for a float
        return False


def _as_term(value: object) -> Optional[int]:
    """Return ``value`` as a positive int of months, or ``None`` if it is not one."""
    if isinstance(value, bool):
        return None
    if isinstance(value, numbers.Integral):
        term = int(value)
    elif isinstance(value, float) and value.is_integer():
        term = int(value)
    else:
        return None
    return term if term > 0 else None


def validate_input(principal: object, annual_rate_percent: object, term_months: object) -> Optional[str]:
    """Return the name of the first invalid input, or ``None`` if all are valid.

    The principal must be a finite number greater than zero, the rate a finite
    number of at least zero and the term a positive whole number of months.
    """
    if not _is_finite_real(principal) or principal <= 0:
        return "principal"
    if not _is_finite_real(annual_rate_percent) or annual_rate_percent < 0:
        return "annual_rate_percent"
    if _as_term(term_months) is None:
        return "term_months"
    return None


def monthly_payment(principal: float, monthly_rate: float, term_months: int) -> float:
    """Return the fixed monthly payment that retires ``principal`` in ``term_months``.

    The formula is:

        payment = P * (i * (1 + i)^n) / ((1 + i)^n - 1)

    where ``P`` is the principal, ``i`` is the monthly interest rate and
    ``n`` is the number of payments. When the interest rate is zero, the
    payment simplifies to ``P / n``.

    ``(1 + i)^n - 1`` is evaluated with ``expm1``/``log1p`` so that rates too
    small to change ``1 + i`` still give a non-zero denominator, and the
    payment is written as ``P * i * (1 + 1 / ((1 + i)^n - 1))`` so that no
    intermediate product exceeds the result.
    """
    if term_months <= 0:
        raise ValueError("Term must be positive")
    if monthly_rate == 0:
        return principal / term_months
    try:
        growth = math.expm1(term_months * math.log1p(monthly_rate))
    except OverflowError:
        # 1 / ((1 + i)^n - 1) tends to 0 for very long terms at high rates
        return principal * monthly_rate
    if growth == 0:
        return principal / term_months
    return principal * monthly_rate * (1 + 1 / growth)


def compute(principal: float, annual_rate_percent: float, term_months: int) -> AmortizationResult:
    """Compute the loan summary and the payment schedule.

    Parameters
    ----------
    principal: float
        Amount borrowed.
    annual_rate_percent: float
        Nominal annual interest rate in percent.
    term_months: int
        Number of monthly payments.

    Returns
    -------
    AmortizationResult
        The summary and the ordered payment records. The schedule stops as soon
        as the balance reaches exactly zero, so it may hold fewer than
        ``term_months`` records; the summary totals always cover the full term.
        For invalid input the result is empty and ``invalid_field`` is set.
    """
    rejected = validate_input(principal, annual_rate_percent, term_months)
    if rejected is not None:
        logger.debug(
            "Rejected loan input %s (principal=%r, rate=%r, term=%r)",
            rejected,
            principal,
            annual_rate_percent,
            term_months,
        )
        return AmortizationResult(invalid_field=rejected)

    principal = float(principal)
    term = _as_term(term_months)
    rate_per_month = float(annual_rate_percent) / 100 / 12
    payment = monthly_payment(principal, rate_per_month, term)

    records: List[PaymentRecord] = []
    balance = principal
    for number in range(1, term + 1):
        interest_amount = balance * rate_per_month
        principal_amount = payment - interest_amount
        balance = max(0.0, balance - principal_amount)
        records.append(
            PaymentRecord(
                payment_number=number,
                payment_amount=payment,
                principal_amount=principal_amount,
                interest_amount=interest_amount,
                remaining_balance=balance,
            )
        )
        if balance == 0:
            break

    total_payments = payment * term
    summary = LoanSummary(
        monthly_payment=payment,
        total_payments=total_payments,
        total_interest=total_payments - principal,
    )
    logger.debug(
        "Computed %d payments of %.6f for principal=%s rate=%s%% term=%d",
        len(records),
        payment,
        principal,
        annual_rate_percent,
        term,
    )
    return AmortizationResult(summary=summary, records=tuple(records))


def compute_for(loan: LoanInput) -> AmortizationResult:
    """Run :func:`compute` on a ``LoanInput``."""
    return compute(loan.principal, loan.annual_rate_percent, loan.term_months)
