"""Initialize database command."""

import click

from ..config import get_data_dir
from ..db import get_db_path, init_db
from .base import async_command, echo_info, echo_success


@click.command()
@async_command
async def init():
    """Initialize the ring-tracker data directory and database.

    Safe to run more than once; existing data is kept.
    """
    data_dir = get_data_dir()
    db_path = get_db_path(data_dir)

    echo_info(f"Initializing ring-tracker in {data_dir}")

    await init_db(db_path)
    echo_success("Database initialized")

    click.echo()
    click.echo("ring-tracker is ready to use!")
    click.echo()
    click.echo("Next steps:")
    click.echo("  1. Create your account and get a session token:")
    click.echo("     ring-tracker login you@example.com")
    click.echo()
    click.echo("  2. Log a workout or start the API server:")
    click.echo("     ring-tracker log push-1 --email you@example.com")
    click.echo("     ring-tracker serve")
