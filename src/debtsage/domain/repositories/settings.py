"""Settings repository protocol."""

from __future__ import annotations

from typing import Optional, Protocol

from ...models.settings import AppSetting


class SettingsRepository(Protocol):
    """Key/value store for application state."""

    def get(self, key: str) -> Optional[AppSetting]:
        ...

    def set(self, key: str, value: str, description: str | None = None) -> AppSetting:
        ...

    def delete(self, key: str) -> bool:
        """Remove ``key``; returns whether it existed."""
        ...
