"""Saved debt profiles."""

from __future__ import annotations

import secrets
import string
from datetime import datetime, timezone
from typing import ClassVar, Optional

from sqlmodel import Field, SQLModel

from ..constants.currencies import Currency
from ..services.debts import Debt

_ID_ALPHABET = string.ascii_lowercase + string.digits
PROFILE_ID_LENGTH = 9


def new_profile_id() -> str:
    """Return a short random base-36 identifier."""

    return "".join(secrets.choice(_ID_ALPHABET) for _ in range(PROFILE_ID_LENGTH))


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class DebtProfile(SQLModel, table=True):
    """A named debt the user saved for later payoff projections."""

    __tablename__: ClassVar[str] = "debt_profile"

    id: str = Field(default_factory=new_profile_id, primary_key=True, max_length=32)
    name: str = Field(nullable=False, max_length=80, index=True)
    description: str = Field(default="", max_length=255)
    total_debt: float = Field(nullable=False)
    interest_rate: float = Field(default=0.0, nullable=False)
    monthly_payment: float = Field(nullable=False)
    amount_paid: float = Field(default=0.0, nullable=False)
    hourly_wage: Optional[float] = Field(default=None)
    currency_code: str = Field(default="USD", max_length=8)
    currency_symbol: str = Field(default="$", max_length=8)
    created_at: datetime = Field(default_factory=_utcnow, nullable=False, index=True)
    updated_at: datetime = Field(default_factory=_utcnow, nullable=False)

    @property
    def currency(self) -> Currency:
        return Currency(self.currency_code, self.currency_symbol)

    def to_debt(self) -> Debt:
        """Snapshot this profile as calculator input."""
        return Debt(
            total_debt=self.total_debt,
            interest_rate=self.interest_rate,
            monthly_payment=self.monthly_payment,
            amount_paid=self.amount_paid,
            hourly_wage=self.hourly_wage,
            currency=self.currency,
            name=self.name,
            id=self.id,
        )
