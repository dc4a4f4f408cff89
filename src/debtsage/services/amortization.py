"""Single-debt payoff calculator.

Every public function validates its input first and raises a
:class:`~debtsage.errors.DebtValidationError` before touching the
amortization formula. Month counts and interest totals come from the
closed-form amortization formula, settled against the closed-form balance
after ``n`` months so they agree with the month-by-month series that
``balance_series`` produces.
"""

from __future__ import annotations

import math
from calendar import monthrange
from dataclasses import dataclass, field
from datetime import date

from ..constants.currencies import Currency
from ..errors import PaymentBelowInterest
from ..logging_config import get_logger
from .debts import Debt
from .validation import validate_debt

logger = get_logger(__name__)

_EPS = 1e-6  # residual balances below this count as paid off


def _normalize_currency(amount: float) -> float:
    """Round to cents using half-up friendly rounding."""

    return round(amount + 1e-9, 2)


def closed_form_months(remaining: float, monthly_rate: float, payment: float) -> int:
    """Months to clear ``remaining`` using the standard amortization formula.

    Only meaningful when ``payment`` exceeds ``remaining * monthly_rate``;
    callers validate that first.
    """
    if remaining <= 0:
        return 0
    if monthly_rate == 0:
        return math.ceil(remaining / payment)
    covered = monthly_rate * remaining / payment
    if covered >= 1:
        raise PaymentBelowInterest(
            "Monthly payment does not cover the interest accrued",
            payment=payment,
            monthly_interest=monthly_rate * remaining,
        )
    return math.ceil(-math.log(1 - covered) / math.log(1 + monthly_rate))


def _simulate(debt: Debt, extra_payment: float) -> tuple[list[float], float]:
    """Return (balances, interest charged) for a validated debt."""

    payment = debt.monthly_payment + extra_payment
    rate = debt.monthly_rate
    balance = debt.remaining
    balances = [balance]
    interest_total = 0.0

    while balance > 0:
        interest = balance * rate
        interest_total += interest
        new_balance = balance + interest - payment
        if new_balance < _EPS:
            new_balance = 0.0
        elif new_balance >= balance:
            # Float resolution can swallow a payment that barely beats the interest.
            raise PaymentBelowInterest(
                "Payoff schedule did not converge; payment too low",
                payment=payment,
                monthly_interest=interest,
            )
        balance = new_balance
        balances.append(balance)

    return balances, interest_total


def balance_series(debt: Debt, extra_payment: float = 0.0) -> list[float]:
    """Remaining balance at month 0, 1, ... ending at exactly 0."""

    validate_debt(debt, extra_payment)
    balances, _ = _simulate(debt, extra_payment)
    return balances


def _balance_after(remaining: float, monthly_rate: float, payment: float, months: int) -> float:
    """Closed-form balance after ``months`` payments, before flooring at zero."""

    if monthly_rate == 0:
        return remaining - months * payment
    growth = (1 + monthly_rate) ** months
    return remaining * growth - payment * (growth - 1) / monthly_rate


def _settled_months(debt: Debt, extra_payment: float) -> int:
    """Closed-form month count, adjusted where float rounding disagrees."""

    remaining = debt.remaining
    if remaining <= 0:
        return 0
    rate = debt.monthly_rate
    payment = debt.monthly_payment + extra_payment
    estimate = closed_form_months(remaining, rate, payment)

    months = max(estimate, 1)
    while months > 1 and _balance_after(remaining, rate, payment, months - 1) < _EPS:
        months -= 1
    while _balance_after(remaining, rate, payment, months) >= _EPS:
        months += 1
    if months != estimate:
        logger.debug(
            "Closed-form month count settled by rounding",
            extra={"closed_form": estimate, "settled": months},
        )
    return months


def months_to_payoff(debt: Debt, extra_payment: float = 0.0) -> int:
    """Number of monthly payments needed to clear the remaining balance."""

    validate_debt(debt, extra_payment)
    return _settled_months(debt, extra_payment)


def total_interest_paid(debt: Debt, extra_payment: float = 0.0) -> float:
    """Interest charged over the life of the debt, rounded to cents.

    Equals every payment made minus the starting balance, where the last
    payment only covers what is left after that month's interest.
    """

    validate_debt(debt, extra_payment)
    months = _settled_months(debt, extra_payment)
    rate = debt.monthly_rate
    if months == 0 or rate == 0:
        return 0.0
    payment = debt.monthly_payment + extra_payment
    last_balance = _balance_after(debt.remaining, rate, payment, months - 1)
    paid = payment * (months - 1) + last_balance * (1 + rate)
    return _normalize_currency(paid - debt.remaining)


def add_months(start: date, months: int) -> date:
    """Advance ``start`` by calendar months, clamping to the month's last day."""

    month_index = start.month - 1 + months
    year = start.year + month_index // 12
    month = month_index % 12 + 1
    day = min(start.day, monthrange(year, month)[1])
    return date(year, month, day)


def format_payoff_date(value: date) -> str:
    """Render a date like ``March 5, 2027``."""

    return f"{value:%B} {value.day}, {value.year}"


def format_currency(amount: float, currency: Currency) -> str:
    """Whole-unit amount with the currency symbol (no symbol for ``None``)."""

    rounded = int(round(amount))
    sign = "-" if rounded < 0 else ""
    return f"{sign}{currency.symbol}{abs(rounded):,}"


def max_extra_payment(debt: Debt) -> float:
    """Upper bound for the "what if I pay more" extra payment slider."""

    if not debt.total_debt:
        return 1000.0
    return min(debt.total_debt * 0.5, 2000.0)


def progress_percent(debt: Debt) -> float:
    if debt.total_debt <= 0:
        return 0.0
    return debt.amount_paid / debt.total_debt * 100


def motivational_message(percentage: float) -> str:
    """Encouragement matched to how much of the debt is already paid."""

    if percentage == 0:
        return "Ready to start your debt-free journey!"
    if percentage < 25:
        return "Great start! Keep building momentum!"
    if percentage < 50:
        return "You're making real progress! Keep pushing!"
    if percentage < 75:
        return "You're over halfway there! The finish line is in sight!"
    if percentage < 100:
        return "Almost there! You're so close to freedom!"
    return "Congratulations! You're debt-free!"


def work_hours_to_freedom(debt: Debt) -> int:
    """Hours of work at ``hourly_wage`` needed to cover the remaining balance."""

    if not debt.hourly_wage or debt.hourly_wage <= 0:
        return 0
    return math.ceil(debt.remaining / debt.hourly_wage)


@dataclass(slots=True)
class PayoffSummary:
    """Derived figures shown on the payoff timeline."""

    months: int
    payoff_date: date
    total_interest: float
    work_hours: int
    months_saved: int
    progress_percent: float
    motivational_message: str
    balances: list[float] = field(default_factory=list)

    @property
    def years(self) -> float:
        return self.months / 12

    @property
    def payoff_date_label(self) -> str:
        return format_payoff_date(self.payoff_date)


def payoff_summary(
    debt: Debt, extra_payment: float = 0.0, *, today: date | None = None
) -> PayoffSummary:
    """Compute everything the payoff timeline displays for one debt."""

    validate_debt(debt, extra_payment)
    balances, interest = _simulate(debt, extra_payment)
    months = len(balances) - 1
    base_months = months
    if extra_payment:
        try:
            base_months = _settled_months(debt, 0.0)
        except PaymentBelowInterest:
            # Without the extra payment the debt never amortizes.
            logger.debug("Base payment does not cover interest; months saved not reported")
    progress = progress_percent(debt)

    summary = PayoffSummary(
        months=months,
        payoff_date=add_months(today or date.today(), months),
        total_interest=_normalize_currency(interest),
        work_hours=work_hours_to_freedom(debt),
        months_saved=max(0, base_months - months),
        progress_percent=progress,
        motivational_message=motivational_message(progress),
        balances=balances,
    )
    logger.debug(
        "Computed payoff summary",
        extra={"months": months, "extra_payment": extra_payment, "total_interest": summary.total_interest},
    )
    return summary


__all__ = [
    "PayoffSummary",
    "add_months",
    "balance_series",
    "closed_form_months",
    "format_currency",
    "format_payoff_date",
    "max_extra_payment",
    "months_to_payoff",
    "motivational_message",
    "payoff_summary",
    "progress_percent",
    "total_interest_paid",
    "work_hours_to_freedom",
]
