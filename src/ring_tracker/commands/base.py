"""Shared CLI utilities."""

import asyncio
import logging
from functools import wraps

import click

from ..config import get_log_level
from ..db import UserRepository, get_db_path
from ..models.user import User


def async_command(f):
    """Decorator to run async Click commands."""

    @wraps(f)
    def wrapper(*args, **kwargs):
        return asyncio.run(f(*args, **kwargs))

    return wrapper


def setup_logging(level: str | None = None) -> None:
    """Configure root logging for CLI and server processes."""
    logging.basicConfig(
        level=level or get_log_level(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def ensure_initialized(ctx: click.Context) -> None:
    """Ensure the database is initialized."""
    db_path = get_db_path()
    if not db_path.exists():
        click.echo(
            click.style("Error: ", fg="red")
            + "Database not initialized. Run 'ring-tracker init' first."
        )
        ctx.exit(1)


async def require_user(ctx: click.Context, email: str) -> User:
    """Look up a user by email or exit with an error."""
    user = await UserRepository().get_by_email(email)
    if user is None:
        echo_error(f'User with email "{email}" not found.')
        click.echo("Run 'ring-tracker login EMAIL' to create the account first.")
        ctx.exit(1)
    return user


def echo_success(message: str) -> None:
    """Print a success message."""
    click.echo(click.style("[OK] ", fg="green") + message)


def echo_error(message: str) -> None:
    """Print an error message."""
    click.echo(click.style("[ERROR] ", fg="red") + message)


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(click.style("[INFO] ", fg="blue") + message)


def echo_warning(message: str) -> None:
    """Print a warning message."""
    click.echo(click.style("[WARN] ", fg="yellow") + message)


def format_table(headers: list[str], rows: list[list[str]], padding: int = 2) -> str:
    """Format data as a simple left-aligned table."""
    if not rows:
        return ""

    widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(str(cell)))

    lines = ["".join(h.ljust(widths[i] + padding) for i, h in enumerate(headers)).rstrip()]
    lines.append("".join("-" * w + " " * padding for w in widths).rstrip())
    for row in rows:
        lines.append(
            "".join(str(cell).ljust(widths[i] + padding) for i, cell in enumerate(row)).rstrip()
        )

    return "\n".join(lines)
