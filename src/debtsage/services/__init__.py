"""Service module exports."""

# profiles is imported directly (debtsage.services.profiles); it depends on
# the models package, which itself imports services.debts.
from . import amortization, debts, strategies, validation

__all__ = [
    "amortization",
    "debts",
    "strategies",
    "validation",
]
