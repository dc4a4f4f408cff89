"""Debt profile repository protocol."""

from __future__ import annotations

from typing import Optional, Protocol

from ...models.debt_profile import DebtProfile


class DebtProfileRepository(Protocol):
    """Repository for managing saved debt profiles."""

    def get_by_id(self, profile_id: str) -> Optional[DebtProfile]:
        """Retrieve a profile by ID."""
        ...

    def list_all(self) -> list[DebtProfile]:
        """List all profiles, oldest first."""
        ...

    def create(self, profile: DebtProfile) -> DebtProfile:
        """Create a new profile."""
        ...

    def update(self, profile: DebtProfile) -> DebtProfile:
        """Update an existing profile."""
        ...

    def delete(self, profile_id: str) -> None:
        """Delete a profile by ID."""
        ...
