"""Pytest configuration and shared fixtures for DebtSage tests.

This module provides database fixtures, debt factories, and helper utilities
for testing the payoff calculators and profile storage without touching a
real data directory.
"""

from __future__ import annotations

import logging
import tempfile
from pathlib import Path

import pytest
from sqlmodel import Session, SQLModel, create_engine

# Import all models to ensure they're registered with SQLModel metadata
from debtsage.models import AppSetting, DebtProfile  # noqa: F401
from debtsage.infra.repositories import SQLModelDebtProfileRepository, SQLModelSettingsRepository
from debtsage.services.debts import Debt
from debtsage.services.profiles import ProfileService


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path, monkeypatch):
    """Point config at a throwaway data dir and drop log handlers afterwards."""

    monkeypatch.setenv("DEBTSAGE_DATA_DIR", str(tmp_path / "data"))
    monkeypatch.setenv("DEBTSAGE_DEV_MODE", "false")
    monkeypatch.delenv("DEBTSAGE_DATABASE_URL", raising=False)
    yield
    logger = logging.getLogger("debtsage")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


# =============================================================================
# Database Fixtures
# =============================================================================


@pytest.fixture(scope="function")
def db_engine():
    """Create an isolated SQLite database file for each test.

    Yields:
        Engine: SQLModel engine with all tables created
    """
    with tempfile.NamedTemporaryFile(suffix=".db", delete=False) as f:
        db_path = Path(f.name)

    engine = create_engine(f"sqlite:///{db_path}", echo=False)
    SQLModel.metadata.create_all(engine)

    yield engine

    engine.dispose()
    db_path.unlink(missing_ok=True)


@pytest.fixture(scope="function")
def session_factory(db_engine):
    """Session factory matching the ``Callable[[], Session]`` repositories expect."""

    def factory():
        return Session(db_engine, expire_on_commit=False)

    return factory


@pytest.fixture
def profile_repo(session_factory):
    return SQLModelDebtProfileRepository(session_factory)


@pytest.fixture
def settings_repo(session_factory):
    return SQLModelSettingsRepository(session_factory)


@pytest.fixture
def profile_service(profile_repo, settings_repo):
    return ProfileService(profile_repo, settings_repo)


# =============================================================================
# Test Data Factories
# =============================================================================


@pytest.fixture
def debt_factory():
    """Factory for building debts with sensible defaults.

    Returns:
        Callable: Function that returns Debt instances
    """

    def _create_debt(
        total_debt: float = 1000.00,
        interest_rate: float = 12.0,
        monthly_payment: float = 100.00,
        amount_paid: float = 0.0,
        **kwargs,
    ) -> Debt:
        return Debt(
            total_debt=total_debt,
            interest_rate=interest_rate,
            monthly_payment=monthly_payment,
            amount_paid=amount_paid,
            **kwargs,
        )

    return _create_debt


# =============================================================================
# Helper Utilities
# =============================================================================


def assert_float_equal(actual: float, expected: float, tolerance: float = 0.01):
    """Assert that two floats are equal within a tolerance.

    Args:
        actual: Actual value
        expected: Expected value
        tolerance: Maximum allowed difference (default 0.01 = 1 cent)

    Raises:
        AssertionError: If values differ by more than tolerance
    """
    assert (
        abs(actual - expected) < tolerance
    ), f"Expected {expected}, got {actual} (diff: {abs(actual - expected)})"
