"""DebtSage: debt payoff calculator and snowball/avalanche simulator."""

from __future__ import annotations

from .config import BaseConfig, DevConfig
from .constants.currencies import CURRENCIES, Currency
from .errors import (
    DebtValidationError,
    InsufficientDebtsForComparison,
    InvalidAmount,
    InvalidRate,
    PaymentBelowInterest,
    ProfileNotFound,
)
from .services.amortization import (
    PayoffSummary,
    balance_series,
    months_to_payoff,
    payoff_summary,
    total_interest_paid,
)
from .services.debts import Debt
from .services.strategies import (
    PayoffResult,
    PayoffStrategy,
    StrategyComparison,
    compare_strategies,
    simulate_strategy,
)

__all__ = [
    "BaseConfig",
    "CURRENCIES",
    "Currency",
    "Debt",
    "DebtValidationError",
    "DevConfig",
    "InsufficientDebtsForComparison",
    "InvalidAmount",
    "InvalidRate",
    "PaymentBelowInterest",
    "PayoffResult",
    "PayoffStrategy",
    "PayoffSummary",
    "ProfileNotFound",
    "StrategyComparison",
    "balance_series",
    "compare_strategies",
    "months_to_payoff",
    "payoff_summary",
    "simulate_strategy",
    "total_interest_paid",
]
