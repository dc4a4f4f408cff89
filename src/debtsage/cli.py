"""Command line interface for DebtSage."""

from __future__ import annotations

import click

from .config import BaseConfig
from .constants.currencies import CURRENCIES, currency_for_code
from .errors import DebtValidationError, ProfileNotFound
from .logging_config import setup_logging
from .services.amortization import format_currency, payoff_summary
from .services.debts import Debt
from .services.strategies import PayoffResult, compare_strategies

_CURRENCY_CODES = [c.code for c in CURRENCIES]


class DebtParamType(click.ParamType):
    """Parse ``TOTAL:RATE:PAYMENT[:NAME]`` into a :class:`Debt`."""

    name = "debt"

    def convert(self, value, param, ctx):
        if isinstance(value, Debt):
            return value
        parts = value.split(":", 3)
        if len(parts) < 3:
            self.fail(f"{value!r} is not TOTAL:RATE:PAYMENT[:NAME]", param, ctx)
        try:
            total, rate, payment = (float(p) for p in parts[:3])
        except ValueError:
            self.fail(f"{value!r} contains a non-numeric amount", param, ctx)
        name = parts[3] if len(parts) == 4 else ""
        return Debt(total_debt=total, interest_rate=rate, monthly_payment=payment, name=name)


DEBT = DebtParamType()


def _profile_service(ctx: click.Context):
    """Build the profile service lazily so calculator commands never touch the DB."""

    from .infra.database import bootstrap_database
    from .infra.repositories import SQLModelDebtProfileRepository, SQLModelSettingsRepository
    from .services.profiles import ProfileService

    obj = ctx.ensure_object(dict)
    if "profiles" not in obj:
        _, session_factory = bootstrap_database(obj["config"])
        obj["profiles"] = ProfileService(
            SQLModelDebtProfileRepository(session_factory),
            SQLModelSettingsRepository(session_factory),
            active_key=obj["config"].ACTIVE_PROFILE_KEY,
        )
    return obj["profiles"]


def _echo_summary(debt: Debt, extra: float) -> None:
    summary = payoff_summary(debt, extra)
    money = debt.currency
    click.echo(f"Debt-free by {summary.payoff_date_label}")
    click.echo(f"Months to payoff: {summary.months} ({summary.years:.1f} years)")
    click.echo(f"Total interest: {format_currency(summary.total_interest, money)}")
    click.echo(f"Paid off: {summary.progress_percent:.1f}% - {summary.motivational_message}")
    if summary.months_saved:
        click.echo(f"Be debt-free {summary.months_saved} months sooner!")
    if summary.work_hours:
        click.echo(f"Work hours to freedom: {summary.work_hours}")


def _echo_result(label: str, result: PayoffResult, currency) -> None:
    status = "" if result.completed else " (not paid off within 30 years)"
    click.echo(
        f"{label}: {result.months} months, "
        f"{format_currency(result.total_interest, currency)} interest{status}"
    )


@click.group()
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Debt payoff timelines and snowball/avalanche comparisons."""

    config = BaseConfig()
    setup_logging(config)
    ctx.ensure_object(dict)["config"] = config


@cli.command()
@click.option("--total", "total_debt", type=float, required=True, help="Total debt amount")
@click.option("--rate", "interest_rate", type=float, default=0.0, show_default=True, help="Annual interest rate (%)")
@click.option("--payment", "monthly_payment", type=float, required=True, help="Monthly payment")
@click.option("--paid", "amount_paid", type=float, default=0.0, show_default=True, help="Amount already paid")
@click.option("--wage", "hourly_wage", type=float, default=None, help="Hourly wage for work-hours estimate")
@click.option("--extra", type=float, default=0.0, show_default=True, help="Extra monthly payment")
@click.option("--currency", type=click.Choice(_CURRENCY_CODES), default="USD", show_default=True)
def payoff(total_debt, interest_rate, monthly_payment, amount_paid, hourly_wage, extra, currency) -> None:
    """Show the payoff timeline for a single debt."""

    debt = Debt(
        total_debt=total_debt,
        interest_rate=interest_rate,
        monthly_payment=monthly_payment,
        amount_paid=amount_paid,
        hourly_wage=hourly_wage,
        currency=currency_for_code(currency),
    )
    try:
        _echo_summary(debt, extra)
    except DebtValidationError as exc:
        raise click.ClickException(str(exc)) from exc


@cli.command()
@click.option("--debt", "debts", type=DEBT, multiple=True, required=True, help="TOTAL:RATE:PAYMENT[:NAME]")
@click.option("--extra", type=float, default=0.0, show_default=True, help="Extra monthly payment pool")
def compare(debts, extra) -> None:
    """Compare snowball and avalanche payoff for several debts."""

    debts = list(debts)
    try:
        comparison = compare_strategies(debts, extra)
    except DebtValidationError as exc:
        raise click.ClickException(str(exc)) from exc

    currency = debts[0].currency
    click.echo(f"Monthly budget: {format_currency(comparison.total_monthly_payment, currency)}")
    _echo_result("Snowball", comparison.snowball, currency)
    _echo_result("Avalanche", comparison.avalanche, currency)
    click.echo(f"Recommendation: {comparison.recommendation.title}")
    click.echo(comparison.recommendation.reason)


@cli.group()
def profiles() -> None:
    """Manage saved debt profiles."""


@profiles.command("list")
@click.pass_context
def list_profiles(ctx: click.Context) -> None:
    service = _profile_service(ctx)
    active_id = service.get_active_profile_id()
    rows = service.list_profiles()
    if not rows:
        click.echo("No saved profiles.")
        return
    for profile in rows:
        marker = "*" if profile.id == active_id else " "
        amount = format_currency(profile.total_debt - profile.amount_paid, profile.currency)
        click.echo(f"{marker} {profile.id}  {profile.name}  {amount} @ {profile.interest_rate:g}%")


@profiles.command("add")
@click.option("--name", required=True)
@click.option("--description", default="")
@click.option("--total", "total_debt", type=float, required=True)
@click.option("--rate", "interest_rate", type=float, default=0.0)
@click.option("--payment", "monthly_payment", type=float, required=True)
@click.option("--paid", "amount_paid", type=float, default=0.0)
@click.option("--wage", "hourly_wage", type=float, default=None)
@click.option("--currency", type=click.Choice(_CURRENCY_CODES), default="USD")
@click.pass_context
def add_profile(ctx: click.Context, currency, **fields) -> None:
    """Save a new debt profile."""

    from .services.profiles import ProfileInput

    service = _profile_service(ctx)
    try:
        profile = service.save_profile(ProfileInput(currency=currency_for_code(currency), **fields))
    except DebtValidationError as exc:
        raise click.ClickException(str(exc)) from exc
    click.echo(f"Saved profile {profile.id} ({profile.name})")


@profiles.command("activate")
@click.argument("profile_id")
@click.pass_context
def activate_profile(ctx: click.Context, profile_id: str) -> None:
    service = _profile_service(ctx)
    try:
        service.set_active_profile(profile_id)
    except ProfileNotFound as exc:
        raise click.ClickException(str(exc)) from exc
    click.echo(f"Active profile: {profile_id}")


@profiles.command("delete")
@click.argument("profile_id")
@click.pass_context
def delete_profile(ctx: click.Context, profile_id: str) -> None:
    service = _profile_service(ctx)
    if service.get_profile(profile_id) is None:
        raise click.ClickException(f"Profile not found: {profile_id}")
    service.delete_profile(profile_id)
    click.echo(f"Deleted profile {profile_id}")


@profiles.command("show")
@click.option("--extra", type=float, default=0.0, show_default=True)
@click.pass_context
def show_profile(ctx: click.Context, extra: float) -> None:
    """Show the payoff timeline of the active profile."""

    profile = _profile_service(ctx).get_active_profile()
    if profile is None:
        raise click.ClickException("No active profile. Save one with 'profiles add'.")
    click.echo(f"{profile.name}")
    if profile.description:
        click.echo(profile.description)
    try:
        _echo_summary(profile.to_debt(), extra)
    except DebtValidationError as exc:
        raise click.ClickException(str(exc)) from exc


def main() -> None:  # pragma: no cover - console entry point
    cli(obj={})


if __name__ == "__main__":  # pragma: no cover
    main()
