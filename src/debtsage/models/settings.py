"""Application-level settings stored in the database."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import ClassVar, Optional

from sqlmodel import Field, SQLModel


class AppSetting(SQLModel, table=True):
    """Key-value storage for runtime state such as the active profile id."""

    __tablename__: ClassVar[str] = "app_setting"

    key: str = Field(primary_key=True, max_length=64)
    value: str = Field(nullable=False, max_length=255)
    description: Optional[str] = Field(default=None, max_length=255)
    updated_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc), nullable=False
    )
