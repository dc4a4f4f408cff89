"""Saved debt profiles and the active-profile pointer."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from ..config import BaseConfig
from ..constants.currencies import DEFAULT_CURRENCY, Currency
from ..domain.repositories import DebtProfileRepository, SettingsRepository
from ..errors import ProfileNotFound
from ..logging_config import get_logger
from ..models.debt_profile import DebtProfile
from .validation import validate_debt

logger = get_logger(__name__)

_EDITABLE_FIELDS = {
    "name",
    "description",
    "total_debt",
    "interest_rate",
    "monthly_payment",
    "amount_paid",
    "hourly_wage",
    "currency",
}


@dataclass(slots=True)
class ProfileInput:
    """Fields a user fills in when saving a profile."""

    name: str
    total_debt: float
    monthly_payment: float
    interest_rate: float = 0.0
    amount_paid: float = 0.0
    hourly_wage: float | None = None
    currency: Currency = DEFAULT_CURRENCY
    description: str = ""


class ProfileService:
    """Create, edit and select saved debt profiles.

    The payoff calculators never call this; they only receive
    ``DebtProfile.to_debt()`` snapshots.
    """

    def __init__(
        self,
        profiles: DebtProfileRepository,
        settings: SettingsRepository,
        *,
        active_key: str = BaseConfig.ACTIVE_PROFILE_KEY,
    ) -> None:
        self.profiles = profiles
        self.settings = settings
        self.active_key = active_key

    def list_profiles(self) -> list[DebtProfile]:
        return self.profiles.list_all()

    def get_profile(self, profile_id: str) -> Optional[DebtProfile]:
        return self.profiles.get_by_id(profile_id)

    def save_profile(self, data: ProfileInput) -> DebtProfile:
        """Validate and store a new profile; the first one saved becomes active."""

        is_first = not self.profiles.list_all()
        profile = DebtProfile(
            name=data.name.strip(),
            description=data.description.strip(),
            total_debt=data.total_debt,
            interest_rate=data.interest_rate,
            monthly_payment=data.monthly_payment,
            amount_paid=data.amount_paid,
            hourly_wage=data.hourly_wage,
            currency_code=data.currency.code,
            currency_symbol=data.currency.symbol,
        )
        validate_debt(profile.to_debt())
        profile = self.profiles.create(profile)
        if is_first:
            self.set_active_profile(profile.id)
        return profile

    def update_profile(self, profile_id: str, **changes) -> DebtProfile:
        """Apply a partial update and bump ``updated_at``."""

        unknown = set(changes) - _EDITABLE_FIELDS
        if unknown:
            raise ValueError(f"Unknown profile fields: {', '.join(sorted(unknown))}")

        profile = self.profiles.get_by_id(profile_id)
        if profile is None:
            raise ProfileNotFound(profile_id)

        currency = changes.pop("currency", None)
        if currency is not None:
            profile.currency_code = currency.code
            profile.currency_symbol = currency.symbol
        for key, value in changes.items():
            if key in {"name", "description"} and isinstance(value, str):
                value = value.strip()
            setattr(profile, key, value)

        validate_debt(profile.to_debt())
        profile.updated_at = datetime.now(timezone.utc)
        return self.profiles.update(profile)

    def delete_profile(self, profile_id: str) -> None:
        """Remove a profile, handing the active flag to the oldest survivor."""

        self.profiles.delete(profile_id)
        if self.get_active_profile_id() != profile_id:
            return

        remaining = self.profiles.list_all()
        if remaining:
            self.set_active_profile(remaining[0].id)
        else:
            self.settings.delete(self.active_key)
            logger.info("No profiles left; active profile cleared")

    def get_active_profile_id(self) -> Optional[str]:
        setting = self.settings.get(self.active_key)
        return setting.value if setting else None

    def set_active_profile(self, profile_id: str) -> None:
        if self.profiles.get_by_id(profile_id) is None:
            raise ProfileNotFound(profile_id)
        self.settings.set(self.active_key, profile_id, description="Active debt profile id")
        logger.info("Active profile changed", extra={"profile_id": profile_id})

    def get_active_profile(self) -> Optional[DebtProfile]:
        profile_id = self.get_active_profile_id()
        if profile_id is None:
            return None
        return self.profiles.get_by_id(profile_id)


__all__ = ["ProfileInput", "ProfileService"]
