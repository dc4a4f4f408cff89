"""
Currency choices offered by the debt input form.
Currencies only affect display; no conversion is ever performed.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Currency:
    """Display code and symbol for a money amount."""

    code: str
    symbol: str


USD = Currency("USD", "$")
EUR = Currency("EUR", "€")
GBP = Currency("GBP", "£")
JPY = Currency("JPY", "¥")
NO_CURRENCY = Currency("None", "")

CURRENCIES = [USD, EUR, GBP, JPY, NO_CURRENCY]
DEFAULT_CURRENCY = USD


def currency_for_code(code: str | None) -> Currency:
    """Return the supported currency for ``code``; unknown codes get no symbol."""

    if not code:
        return DEFAULT_CURRENCY
    for currency in CURRENCIES:
        if currency.code.lower() == code.strip().lower():
            return currency
    return Currency(code.strip().upper(), "")


__all__ = [
    "CURRENCIES",
    "Currency",
    "DEFAULT_CURRENCY",
    "EUR",
    "GBP",
    "JPY",
    "NO_CURRENCY",
    "USD",
    "currency_for_code",
]
