"""Input checks run before any payoff math."""

from __future__ import annotations

import math
from typing import Iterable

from ..errors import InvalidAmount, InvalidRate, PaymentBelowInterest
from ..logging_config import get_logger
from .debts import Debt

logger = get_logger(__name__)


def _is_number(value) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


def require_amount(value, field: str, *, allow_zero: bool = True) -> float:
    """Return ``value`` as float or raise :class:`InvalidAmount`."""

    if not _is_number(value):
        raise InvalidAmount(f"{field} must be a finite number", field=field)
    if value < 0 or (value == 0 and not allow_zero):
        bound = "zero or more" if allow_zero else "greater than zero"
        raise InvalidAmount(f"{field} must be {bound}", field=field)
    return float(value)


def validate_debt(debt: Debt, extra_payment: float = 0.0, *, require_amortizing: bool = True) -> Debt:
    """Reject a debt that the calculator cannot handle.

    Checks run in input-form order so the first failure names the field a
    user should fix first. With ``require_amortizing`` the combined payment
    must also exceed one month of interest on the remaining balance;
    otherwise the balance never shrinks and the amortization formula is
    undefined.
    """

    try:
        require_amount(debt.total_debt, "total_debt", allow_zero=False)
        require_amount(debt.monthly_payment, "monthly_payment", allow_zero=False)
        if not _is_number(debt.interest_rate) or not 0 <= debt.interest_rate <= 100:
            raise InvalidRate("interest_rate must be between 0 and 100", field="interest_rate")
        if debt.hourly_wage is not None:
            require_amount(debt.hourly_wage, "hourly_wage")
        require_amount(debt.amount_paid, "amount_paid")
        if debt.amount_paid > debt.total_debt:
            raise InvalidAmount(
                "amount_paid cannot be negative or exceed total_debt", field="amount_paid"
            )
        require_amount(extra_payment, "extra_payment")

        if require_amortizing:
            payment = debt.monthly_payment + extra_payment
            interest = debt.monthly_interest
            if payment < interest or math.isclose(payment, interest, rel_tol=1e-12, abs_tol=1e-9):
                raise PaymentBelowInterest(
                    "Monthly payment is less than the interest accrued; "
                    "this debt will never be paid off at the current payment",
                    payment=payment,
                    monthly_interest=interest,
                )
    except (InvalidAmount, InvalidRate, PaymentBelowInterest) as exc:
        logger.info(
            "Rejected debt input: %s",
            exc.message,
            extra={"field": exc.field, "debt_name": debt.name or None},
        )
        raise
    return debt


def validate_debts(debts: Iterable[Debt], *, require_amortizing: bool = True) -> list[Debt]:
    """Validate every debt, returning them as a list."""

    return [validate_debt(d, require_amortizing=require_amortizing) for d in debts]


__all__ = ["require_amount", "validate_debt", "validate_debts"]
