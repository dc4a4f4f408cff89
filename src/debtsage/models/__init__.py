"""SQLModel table exports."""

from .debt_profile import DebtProfile, new_profile_id
from .settings import AppSetting

__all__ = [
    "AppSetting",
    "DebtProfile",
    "new_profile_id",
]
