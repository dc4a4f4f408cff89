"""SQLModel implementation of the debt profile repository."""

from __future__ import annotations

from typing import Callable, Optional

from sqlmodel import Session, select

from ...logging_config import get_logger
from ...models.debt_profile import DebtProfile

logger = get_logger(__name__)


class SQLModelDebtProfileRepository:
    """SQLModel-based debt profile repository implementation."""

    def __init__(self, session_factory: Callable[[], Session]):
        """Initialize with a session factory."""
        self.session_factory = session_factory

    def get_by_id(self, profile_id: str) -> Optional[DebtProfile]:
        """Retrieve a profile by ID."""
        with self.session_factory() as session:
            return session.get(DebtProfile, profile_id)

    def list_all(self) -> list[DebtProfile]:
        """List all profiles in creation order."""
        with self.session_factory() as session:
            statement = select(DebtProfile).order_by(
                DebtProfile.created_at, DebtProfile.name  # type: ignore[arg-type]
            )
            return list(session.exec(statement).all())

    def create(self, profile: DebtProfile) -> DebtProfile:
        """Create a new profile."""
        with self.session_factory() as session:
            session.add(profile)
            session.commit()
            session.refresh(profile)
            logger.info("Created debt profile", extra={"profile_id": profile.id})
            return profile

    def update(self, profile: DebtProfile) -> DebtProfile:
        """Persist changes to an existing profile."""
        with self.session_factory() as session:
            merged = session.merge(profile)
            session.commit()
            session.refresh(merged)
            logger.info("Updated debt profile", extra={"profile_id": merged.id})
            return merged

    def delete(self, profile_id: str) -> None:
        """Delete a profile by ID; unknown ids are ignored."""
        with self.session_factory() as session:
            profile = session.get(DebtProfile, profile_id)
            if profile:
                session.delete(profile)
                session.commit()
                logger.info("Deleted debt profile", extra={"profile_id": profile_id})
