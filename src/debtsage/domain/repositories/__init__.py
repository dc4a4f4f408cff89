"""Repository protocol definitions for domain layer."""

from .debt_profile import DebtProfileRepository
from .settings import SettingsRepository

__all__ = [
    "DebtProfileRepository",
    "SettingsRepository",
]
