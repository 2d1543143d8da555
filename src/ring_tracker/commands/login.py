"""Sign-in command."""

import click

from ..services.auth import issue_token, sign_in
from .base import async_command, echo_info, echo_success, ensure_initialized


@click.command()
@click.argument("email")
@click.option("--name", default=None, help="Display name (defaults to the part before @)")
@click.option("--image", default=None, help="Avatar URL")
@click.pass_context
@async_command
async def login(ctx: click.Context, email: str, name: str | None, image: str | None):
    """Sign in as EMAIL and print a session token.

    The account is created with default settings on first sign-in. Send the
    token as 'Authorization: Bearer <token>' to the API.
    """
    ensure_initialized(ctx)

    user = await sign_in(email, name or email.split("@")[0], image)
    echo_success(f"Signed in as {user.name} ({user.email})")
    echo_info(
        f"Phase {user.settings.current_phase}, Week {user.settings.current_week}"
    )
    click.echo()
    click.echo(issue_token(user))
