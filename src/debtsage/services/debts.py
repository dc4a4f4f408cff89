"""Debt inputs shared by the payoff calculator and strategy simulator."""

from __future__ import annotations

from dataclasses import dataclass

from ..constants.currencies import DEFAULT_CURRENCY, Currency


@dataclass(frozen=True, slots=True)
class Debt:
    """Immutable snapshot of one debt as entered by the user.

    ``interest_rate`` is an annual percentage (``18.0`` means 18% APR) and
    ``monthly_payment`` doubles as the minimum payment in multi-debt
    simulations.
    """

    total_debt: float
    interest_rate: float
    monthly_payment: float
    amount_paid: float = 0.0
    hourly_wage: float | None = None
    currency: Currency = DEFAULT_CURRENCY
    name: str = ""
    id: str | None = None

    @property
    def remaining(self) -> float:
        """Outstanding balance after payments already made."""
        return self.total_debt - self.amount_paid

    @property
    def monthly_rate(self) -> float:
        """Interest rate applied each month as a fraction."""
        return self.interest_rate / 1200

    @property
    def monthly_interest(self) -> float:
        """Interest charged on the remaining balance over one month."""
        return self.remaining * self.interest_rate / 1200


__all__ = ["Debt"]
