"""Seed data commands."""

import click

from ..services.seed import (
    DEFAULT_WEEKS,
    MAX_WEEKS,
    MIN_WEEKS,
    delete_seed_data,
    seed_start_date,
    seed_user,
)
from ..utils.date_utils import format_full_date
from .base import async_command, echo_info, echo_success, ensure_initialized, require_user


@click.command()
@click.argument("weeks", type=click.IntRange(MIN_WEEKS, MAX_WEEKS), default=DEFAULT_WEEKS)
@click.option("--email", "-e", envvar="SEED_USER_EMAIL", required=True, help="Email of the user to seed")
@click.pass_context
@async_command
async def seed(ctx: click.Context, weeks: int, email: str):
    """Generate WEEKS weeks (1-18, default 6) of sample workouts and weigh-ins.

    Existing seed data for the user is replaced; real data is untouched.

    Examples:

        ring-tracker seed --email you@example.com       # 6 weeks (1 phase)
        ring-tracker seed 12 --email you@example.com    # 12 weeks (2 phases)
    """
    ensure_initialized(ctx)
    user = await require_user(ctx, email)

    echo_info(f"Seeding {weeks} weeks of data for {user.name} ({user.email})")
    click.echo(f"Generating data from {format_full_date(seed_start_date(weeks))} to today...")
    result = await seed_user(user, weeks)

    click.echo(f"Deleted {result['deletedWorkouts']} existing seed workouts")
    click.echo(f"Deleted {result['deletedMetrics']} existing seed body metrics")

    phases = -(-weeks // 6)
    echo_success("Seed complete!")
    click.echo(
        f"  - {result['workouts']} workouts ({weeks} weeks, {phases} phase{'s' if phases > 1 else ''})"
    )
    click.echo(f"  - {result['metrics']} body weight entries")
    click.echo()
    click.echo("To delete seed data: ring-tracker seed-delete --email " + user.email)


@click.command("seed-delete")
@click.option("--email", "-e", envvar="SEED_USER_EMAIL", required=True, help="Email of the user")
@click.pass_context
@async_command
async def seed_delete(ctx: click.Context, email: str):
    """Delete seed data and reset the user to Phase 1, Week 1."""
    ensure_initialized(ctx)
    user = await require_user(ctx, email)

    result = await delete_seed_data(user.id)

    echo_success("Deleted seed data:")
    click.echo(f"  - {result['workouts']} workouts")
    click.echo(f"  - {result['metrics']} body metrics")
    click.echo("  - Reset user to Phase 1, Week 1")

    if result["workouts"] == 0 and result["metrics"] == 0:
        click.echo()
        click.echo("No seed data found. Run 'ring-tracker seed' first to create some.")
