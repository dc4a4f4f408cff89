"""Validation errors raised at the calculator and simulator boundary."""

from __future__ import annotations


class DebtValidationError(ValueError):
    """Base class for rejected debt inputs.

    ``field`` names the offending input when one applies so callers can
    re-prompt for it.
    """

    def __init__(self, message: str, *, field: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.field = field


class InvalidAmount(DebtValidationError):
    """Principal, payment, paid amount or wage is not a usable number."""


class InvalidRate(DebtValidationError):
    """Annual interest rate falls outside 0..100 percent."""


class PaymentBelowInterest(DebtValidationError):
    """Monthly payment does not exceed one month of interest."""

    def __init__(self, message: str, *, payment: float, monthly_interest: float) -> None:
        super().__init__(message, field="monthly_payment")
        self.payment = payment
        self.monthly_interest = monthly_interest


class InsufficientDebtsForComparison(DebtValidationError):
    """Strategy comparison needs at least two debts."""

    def __init__(self, count: int) -> None:
        super().__init__(
            f"Comparing payoff strategies requires at least 2 debts (got {count})",
            field="debts",
        )
        self.count = count


class ProfileNotFound(LookupError):
    """No stored debt profile matches the requested id."""

    def __init__(self, profile_id: str) -> None:
        super().__init__(f"Profile not found: {profile_id}")
        self.profile_id = profile_id


__all__ = [
    "DebtValidationError",
    "InsufficientDebtsForComparison",
    "InvalidAmount",
    "InvalidRate",
    "PaymentBelowInterest",
    "ProfileNotFound",
]
