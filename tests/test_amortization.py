"""Tests for the single-debt payoff calculator.

Covers:
- Closed-form and simulated month counts
- Balance series shape (starts at the remaining balance, ends at zero)
- Interest accumulation
- Derived timeline figures (payoff date, work hours, months saved, progress)
"""

from __future__ import annotations

import math
from datetime import date

import pytest

from debtsage.constants.currencies import EUR, NO_CURRENCY, USD
from debtsage.errors import InvalidAmount, InvalidRate, PaymentBelowInterest
from debtsage.services.amortization import (
    add_months,
    balance_series,
    closed_form_months,
    format_currency,
    format_payoff_date,
    max_extra_payment,
    months_to_payoff,
    motivational_message,
    payoff_summary,
    total_interest_paid,
    work_hours_to_freedom,
)
from tests.conftest import assert_float_equal


class TestMonthsToPayoff:
    """Month counts for single debts."""

    def test_zero_interest_example(self, debt_factory):
        """10,000 at 0% paying 500 a month takes exactly 20 months."""
        debt = debt_factory(total_debt=10000, interest_rate=0, monthly_payment=500)

        assert months_to_payoff(debt, 0) == 20
        assert balance_series(debt, 0)[-1] == 0

    @pytest.mark.parametrize(
        "total, payment, paid",
        [(1000, 300, 0), (999.99, 100, 0), (5000, 450, 1200), (50, 100, 0)],
    )
    def test_zero_interest_matches_ceiling(self, debt_factory, total, payment, paid):
        debt = debt_factory(
            total_debt=total, interest_rate=0, monthly_payment=payment, amount_paid=paid
        )

        assert months_to_payoff(debt) == math.ceil((total - paid) / payment)

    def test_interest_bearing_debt_matches_closed_form(self, debt_factory):
        """1,000 at 12% paying 100 a month needs 11 payments."""
        debt = debt_factory(total_debt=1000, interest_rate=12, monthly_payment=100)

        assert months_to_payoff(debt) == 11
        assert closed_form_months(debt.remaining, debt.monthly_rate, 100) == 11

    def test_amount_paid_reduces_horizon(self, debt_factory):
        fresh = debt_factory(total_debt=5000, interest_rate=18, monthly_payment=200)
        half_paid = debt_factory(
            total_debt=5000, interest_rate=18, monthly_payment=200, amount_paid=2500
        )

        assert months_to_payoff(half_paid) < months_to_payoff(fresh)

    def test_fully_paid_debt_needs_no_months(self, debt_factory):
        debt = debt_factory(total_debt=2000, amount_paid=2000)

        assert months_to_payoff(debt) == 0
        assert balance_series(debt) == [0.0]
        assert total_interest_paid(debt) == 0

    def test_more_extra_payment_never_delays_payoff(self, debt_factory):
        debt = debt_factory(total_debt=25000, interest_rate=22.9, monthly_payment=550)

        months = [months_to_payoff(debt, extra) for extra in range(0, 2001, 50)]

        assert all(later <= earlier for earlier, later in zip(months, months[1:]))
        assert months[-1] < months[0]

    def test_long_horizon_does_not_iterate_every_month(self, debt_factory):
        """200 million months resolves from the closed form."""
        debt = debt_factory(total_debt=100_000_000, interest_rate=0, monthly_payment=0.5)

        assert months_to_payoff(debt) == 200_000_000
        assert total_interest_paid(debt) == 0

    @pytest.mark.parametrize(
        "total, rate, payment, paid, extra",
        [
            (8000, 15, 250, 500, 50),
            (25000, 22.9, 550, 0, 0),
            (3000, 24, 100, 0, 0),
            (1200, 6, 100, 0, 0),
            (7345.67, 9.99, 180, 0, 25),
        ],
    )
    def test_matches_month_by_month_series(self, debt_factory, total, rate, payment, paid, extra):
        debt = debt_factory(
            total_debt=total, interest_rate=rate, monthly_payment=payment, amount_paid=paid
        )

        assert months_to_payoff(debt, extra) == len(balance_series(debt, extra)) - 1

    def test_repeated_calls_are_identical(self, debt_factory):
        debt = debt_factory(total_debt=7345.67, interest_rate=9.99, monthly_payment=180)

        assert months_to_payoff(debt, 25) == months_to_payoff(debt, 25)
        assert balance_series(debt, 25) == balance_series(debt, 25)
        assert total_interest_paid(debt, 25) == total_interest_paid(debt, 25)


class TestBalanceSeries:
    """Month-by-month balances."""

    def test_length_and_endpoints(self, debt_factory):
        debt = debt_factory(total_debt=8000, interest_rate=15, monthly_payment=250, amount_paid=500)

        series = balance_series(debt, 50)

        assert len(series) == months_to_payoff(debt, 50) + 1
        assert series[0] == 7500
        assert series[-1] == 0
        assert all(b > 0 for b in series[:-1])

    def test_zero_interest_steps_down_by_payment(self, debt_factory):
        debt = debt_factory(total_debt=1000, interest_rate=0, monthly_payment=300)

        assert balance_series(debt) == [1000, 700, 400, 100, 0]

    def test_series_strictly_decreases(self, debt_factory):
        debt = debt_factory(total_debt=3000, interest_rate=24, monthly_payment=100)

        series = balance_series(debt)

        assert all(b < a for a, b in zip(series, series[1:]))

    def test_first_month_accrues_interest_before_payment(self, debt_factory):
        debt = debt_factory(total_debt=1000, interest_rate=12, monthly_payment=100)

        # 1000 + 1% interest - 100 payment
        assert_float_equal(balance_series(debt)[1], 910.00)


class TestTotalInterest:
    """Interest accumulated over the payoff horizon."""

    def test_zero_rate_charges_no_interest(self, debt_factory):
        debt = debt_factory(total_debt=10000, interest_rate=0, monthly_payment=500)

        assert total_interest_paid(debt) == 0

    def test_interest_equals_payments_minus_principal(self, debt_factory):
        debt = debt_factory(total_debt=1000, interest_rate=12, monthly_payment=100)
        series = balance_series(debt)
        months = len(series) - 1

        # Final month pays only what is left after that month's interest.
        paid = 100 * (months - 1) + series[-2] * (1 + debt.monthly_rate)

        assert_float_equal(total_interest_paid(debt), paid - debt.remaining)

    def test_bounded_by_flat_payment_estimate(self, debt_factory):
        debt = debt_factory(total_debt=12000, interest_rate=7.5, monthly_payment=400)
        months = months_to_payoff(debt)

        interest = total_interest_paid(debt)

        assert 0 < interest <= months * 400 - debt.remaining

    def test_extra_payment_saves_interest(self, debt_factory):
        debt = debt_factory(total_debt=12000, interest_rate=19, monthly_payment=300)

        assert total_interest_paid(debt, 200) < total_interest_paid(debt, 0)


class TestRejection:
    """Inputs that must be refused before any math runs."""

    def test_payment_equal_to_interest_is_rejected(self, debt_factory):
        """1,000 at 12% accrues exactly 10 a month, so a 10 payment never amortizes."""
        debt = debt_factory(total_debt=1000, interest_rate=12, monthly_payment=10)

        with pytest.raises(PaymentBelowInterest) as excinfo:
            months_to_payoff(debt)

        assert excinfo.value.field == "monthly_payment"
        assert_float_equal(excinfo.value.monthly_interest, 10.0)

    def test_extra_payment_can_cover_interest(self, debt_factory):
        debt = debt_factory(total_debt=1000, interest_rate=12, monthly_payment=10)

        assert months_to_payoff(debt, 40) > 0

    @pytest.mark.parametrize("func", [months_to_payoff, balance_series, total_interest_paid, payoff_summary])
    def test_every_entry_point_validates(self, debt_factory, func):
        debt = debt_factory(total_debt=50000, interest_rate=30, monthly_payment=100)

        with pytest.raises(PaymentBelowInterest):
            func(debt)

    def test_negative_extra_payment_rejected(self, debt_factory):
        with pytest.raises(InvalidAmount):
            months_to_payoff(debt_factory(), -5)

    def test_rate_above_hundred_rejected(self, debt_factory):
        with pytest.raises(InvalidRate):
            balance_series(debt_factory(interest_rate=120))


class TestPayoffSummary:
    """Derived figures for the payoff timeline."""

    def test_summary_for_zero_interest_debt(self, debt_factory):
        debt = debt_factory(
            total_debt=10000, interest_rate=0, monthly_payment=500, amount_paid=2500, hourly_wage=25
        )

        summary = payoff_summary(debt, 250, today=date(2026, 1, 31))

        assert summary.months == 10
        assert summary.years == pytest.approx(10 / 12)
        assert summary.months_saved == 5
        assert summary.total_interest == 0
        assert summary.work_hours == 300
        assert summary.progress_percent == 25.0
        assert summary.motivational_message == "You're making real progress! Keep pushing!"
        assert summary.payoff_date == date(2026, 11, 30)
        assert summary.payoff_date_label == "November 30, 2026"
        assert len(summary.balances) == 11

    def test_no_extra_payment_saves_nothing(self, debt_factory):
        summary = payoff_summary(debt_factory(), today=date(2026, 3, 1))

        assert summary.months_saved == 0
        assert summary.work_hours == 0

    def test_extra_payment_rescues_non_amortizing_debt(self, debt_factory):
        debt = debt_factory(total_debt=1000, interest_rate=12, monthly_payment=10)

        summary = payoff_summary(debt, 90, today=date(2026, 3, 1))

        assert summary.months == 11
        assert summary.months_saved == 0

    def test_defaults_to_today(self, debt_factory):
        summary = payoff_summary(debt_factory(total_debt=600, interest_rate=0, monthly_payment=100))

        assert summary.payoff_date == add_months(date.today(), 6)


class TestHelpers:
    """Date, money and motivation helpers."""

    @pytest.mark.parametrize(
        "start, months, expected",
        [
            (date(2026, 10, 19), 0, date(2026, 10, 19)),
            (date(2026, 10, 19), 3, date(2027, 1, 19)),
            (date(2026, 1, 31), 1, date(2026, 2, 28)),
            (date(2027, 12, 31), 2, date(2028, 2, 29)),
            (date(2026, 5, 15), 120, date(2036, 5, 15)),
        ],
    )
    def test_add_months(self, start, months, expected):
        assert add_months(start, months) == expected

    def test_format_payoff_date(self):
        assert format_payoff_date(date(2027, 3, 5)) == "March 5, 2027"

    def test_format_currency(self):
        assert format_currency(1234.4, USD) == "$1,234"
        assert format_currency(1234.6, EUR) == "€1,235"
        assert format_currency(98765, NO_CURRENCY) == "98,765"

    def test_work_hours_round_up(self, debt_factory):
        assert work_hours_to_freedom(debt_factory(total_debt=1000, hourly_wage=30)) == 34
        assert work_hours_to_freedom(debt_factory(hourly_wage=0)) == 0

    def test_max_extra_payment(self, debt_factory):
        assert max_extra_payment(debt_factory(total_debt=10000)) == 2000
        assert max_extra_payment(debt_factory(total_debt=1000)) == 500

    @pytest.mark.parametrize(
        "percentage, expected",
        [
            (0, "Ready to start your debt-free journey!"),
            (10, "Great start! Keep building momentum!"),
            (49.9, "You're making real progress! Keep pushing!"),
            (50, "You're over halfway there! The finish line is in sight!"),
            (99, "Almost there! You're so close to freedom!"),
            (100, "Congratulations! You're debt-free!"),
        ],
    )
    def test_motivational_message(self, percentage, expected):
        assert motivational_message(percentage) == expected
