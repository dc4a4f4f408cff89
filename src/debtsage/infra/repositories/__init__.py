"""Concrete repository implementations using SQLModel."""

from .debt_profile import SQLModelDebtProfileRepository
from .settings import SQLModelSettingsRepository

__all__ = [
    "SQLModelDebtProfileRepository",
    "SQLModelSettingsRepository",
]
