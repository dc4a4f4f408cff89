"""Multi-debt payoff simulation for the snowball and avalanche strategies."""

# Simulation order each month:
#    - accrue interest on every open balance
#    - pay each open debt its minimum (monthly_payment)
#    - roll whatever is left of the monthly pool into the first open debt
#      in strategy order, then the next, until the pool runs dry
# The strategy order is fixed up front; paid-off debts are skipped, never re-sorted.

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Sequence

from ..constants.currencies import DEFAULT_CURRENCY, Currency
from ..errors import InsufficientDebtsForComparison
from ..logging_config import get_logger
from .amortization import format_currency
from .debts import Debt
from .validation import require_amount, validate_debt, validate_debts

logger = get_logger(__name__)

MAX_MONTHS = 360  # 30-year horizon
RECOMMENDATION_THRESHOLD = 1000


class PayoffStrategy(str, Enum):
    """Which debt receives the freed-up payment capacity first."""

    SNOWBALL = "snowball"  # smallest outstanding balance first
    AVALANCHE = "avalanche"  # highest interest rate first


@dataclass(frozen=True, slots=True)
class PayoffResult:
    """Outcome of one strategy simulation."""

    months: int
    total_interest: int
    monthly_data: list[float]
    payment_schedule: dict[str, list[float]] = field(default_factory=dict)

    @property
    def final_balance(self) -> float:
        return self.monthly_data[-1] if self.monthly_data else 0.0

    @property
    def completed(self) -> bool:
        """False when the horizon cap stopped the run with balance remaining."""
        return self.final_balance <= 0


@dataclass(frozen=True, slots=True)
class Recommendation:
    method: str  # "avalanche", "snowball" or "either"
    title: str
    reason: str
    interest_difference: int
    months_difference: int

    @property
    def strategy(self) -> PayoffStrategy | None:
        if self.method == "either":
            return None
        return PayoffStrategy(self.method)


@dataclass(frozen=True, slots=True)
class StrategyComparison:
    snowball: PayoffResult
    avalanche: PayoffResult
    recommendation: Recommendation
    total_monthly_payment: float


def _debt_key(debt: Debt, index: int) -> str:
    return debt.id or f"debt_{index + 1}"


def _ordered_indices(debts: Sequence[Debt], strategy: PayoffStrategy) -> list[int]:
    positions = range(len(debts))
    if strategy is PayoffStrategy.SNOWBALL:
        return sorted(positions, key=lambda i: debts[i].remaining)
    return sorted(positions, key=lambda i: debts[i].interest_rate, reverse=True)


def order_debts(debts: Iterable[Debt], strategy: PayoffStrategy | str) -> list[Debt]:
    """Return ``debts`` in the strategy's payoff order (stable for ties)."""

    debts = list(debts)
    return [debts[i] for i in _ordered_indices(debts, _coerce_strategy(strategy))]


def _coerce_strategy(strategy: PayoffStrategy | str) -> PayoffStrategy:
    try:
        return PayoffStrategy(strategy)
    except ValueError:
        raise ValueError(f"Invalid debt payoff strategy: {strategy!r}") from None


def simulate_strategy(
    debts: Sequence[Debt],
    total_monthly_payment: float,
    strategy: PayoffStrategy | str,
) -> PayoffResult:
    """Simulate paying ``debts`` month by month with a fixed monthly budget.

    Debts that never amortize are not rejected here; the run simply stops
    at :data:`MAX_MONTHS` and reports ``completed == False``.
    """

    strategy = _coerce_strategy(strategy)
    debts = validate_debts(debts, require_amortizing=False)
    require_amount(total_monthly_payment, "total_monthly_payment")

    order = _ordered_indices(debts, strategy)
    ordered = [debts[i] for i in order]
    keys = [_debt_key(debts[i], i) for i in order]
    rates = [d.monthly_rate for d in ordered]
    minimums = [d.monthly_payment for d in ordered]
    balances = [float(d.remaining) for d in ordered]

    monthly_data = [sum(balances)]
    schedule = {key: [balances[i]] for i, key in enumerate(keys)}
    months = 0
    total_interest = 0.0

    while any(b > 0 for b in balances) and months < MAX_MONTHS:
        for i, balance in enumerate(balances):
            if balance <= 0:
                continue
            interest = balance * rates[i]
            total_interest += interest
            balances[i] = balance + interest

        remaining_payment = total_monthly_payment
        for i, balance in enumerate(balances):
            if balance <= 0:
                continue
            payment = min(minimums[i], balance)
            balances[i] = balance - payment
            remaining_payment -= payment

        if remaining_payment > 0:
            for i, balance in enumerate(balances):
                if balance <= 0:
                    continue
                payment = min(remaining_payment, balance)
                balances[i] = balance - payment
                remaining_payment -= payment
                if remaining_payment <= 0:
                    break

        months += 1
        monthly_data.append(sum(balances))
        for i, key in enumerate(keys):
            schedule[key].append(balances[i])

    result = PayoffResult(
        months=months,
        total_interest=round(total_interest),
        monthly_data=monthly_data,
        payment_schedule=schedule,
    )
    if not result.completed:
        logger.info(
            "Simulation hit the %s-month horizon with balance remaining",
            MAX_MONTHS,
            extra={"strategy": strategy.value, "final_balance": result.final_balance},
        )
    else:
        logger.debug(
            "Simulated %s strategy",
            strategy.value,
            extra={"months": months, "total_interest": result.total_interest},
        )
    return result


def recommend(
    snowball: PayoffResult,
    avalanche: PayoffResult,
    *,
    currency: Currency = DEFAULT_CURRENCY,
) -> Recommendation:
    """Pick a strategy by how much interest separates the two outcomes."""

    interest_diff = snowball.total_interest - avalanche.total_interest
    months_diff = snowball.months - avalanche.months

    if interest_diff > RECOMMENDATION_THRESHOLD:
        return Recommendation(
            method=PayoffStrategy.AVALANCHE.value,
            title="Avalanche Method",
            reason=(
                f"Save {format_currency(interest_diff, currency)} in interest "
                "by targeting high-interest debt first"
            ),
            interest_difference=interest_diff,
            months_difference=months_diff,
        )
    if interest_diff < -RECOMMENDATION_THRESHOLD:
        return Recommendation(
            method=PayoffStrategy.SNOWBALL.value,
            title="Snowball Method",
            reason=(
                "Build momentum with quick wins and only pay "
                f"{format_currency(abs(interest_diff), currency)} more in interest"
            ),
            interest_difference=interest_diff,
            months_difference=months_diff,
        )
    return Recommendation(
        method="either",
        title="Either Method",
        reason="Both methods are equally effective for your situation",
        interest_difference=interest_diff,
        months_difference=months_diff,
    )


def compare_strategies(debts: Sequence[Debt], extra_payment: float = 0.0) -> StrategyComparison:
    """Run snowball and avalanche over the same debts and recommend one.

    The monthly budget is every debt's minimum payment plus ``extra_payment``.
    """

    debts = list(debts)
    if len(debts) < 2:
        logger.info("Strategy comparison skipped", extra={"debt_count": len(debts)})
        raise InsufficientDebtsForComparison(len(debts))
    for debt in debts:
        validate_debt(debt)
    require_amount(extra_payment, "extra_payment")

    total_monthly_payment = sum(d.monthly_payment for d in debts) + extra_payment
    snowball = simulate_strategy(debts, total_monthly_payment, PayoffStrategy.SNOWBALL)
    avalanche = simulate_strategy(debts, total_monthly_payment, PayoffStrategy.AVALANCHE)
    recommendation = recommend(snowball, avalanche, currency=debts[0].currency)

    logger.info(
        "Compared payoff strategies",
        extra={
            "debt_count": len(debts),
            "snowball_interest": snowball.total_interest,
            "avalanche_interest": avalanche.total_interest,
            "recommendation": recommendation.method,
        },
    )
    return StrategyComparison(
        snowball=snowball,
        avalanche=avalanche,
        recommendation=recommendation,
        total_monthly_payment=total_monthly_payment,
    )


__all__ = [
    "MAX_MONTHS",
    "PayoffResult",
    "PayoffStrategy",
    "RECOMMENDATION_THRESHOLD",
    "Recommendation",
    "StrategyComparison",
    "compare_strategies",
    "order_debts",
    "recommend",
    "simulate_strategy",
]
