"""Week/phase advancement command."""

import click
import questionary

from ..db.repositories import UserRepository, WorkoutRepository
from ..services.advancement import (
    SESSION_TYPES,
    AdvancementOption,
    CompletionType,
    advancement_options,
    apply_advancement,
    completion_type,
    is_week_complete,
)
from ..utils.date_utils import get_end_of_week, get_start_of_week, utcnow
from .base import (
    async_command,
    echo_info,
    echo_success,
    echo_warning,
    ensure_initialized,
    require_user,
)
from .log import custom_style

_TITLES = {
    CompletionType.WEEK: "Week {week} Complete!",
    CompletionType.PHASE: "Phase {phase} Complete!",
    CompletionType.PROGRAM: "Program Complete!",
}


@click.command()
@click.option("--email", "-e", required=True, help="Email of the user")
@click.option("--force", is_flag=True, help="Offer advancement even if sessions are missing")
@click.pass_context
@async_command
async def advance(ctx: click.Context, email: str, force: bool):
    """Move to the next week or phase once this week's sessions are done."""
    ensure_initialized(ctx)
    user = await require_user(ctx, email)
    settings = user.settings

    now = utcnow()
    this_week = await WorkoutRepository().list_for_user(
        user.id,
        limit=-1,
        start=get_start_of_week(now),
        end=get_end_of_week(now),
    )
    completed = {w.session.value for w in this_week}

    if not is_week_complete(completed):
        missing = [s for s in SESSION_TYPES if s not in completed]
        echo_warning(f"Sessions still to do this week: {', '.join(missing)}")
        if not force:
            return

    kind = completion_type(settings.current_phase, settings.current_week)
    click.echo()
    click.echo(
        click.style(
            _TITLES[kind].format(phase=settings.current_phase, week=settings.current_week),
            bold=True,
        )
    )

    options = advancement_options(settings.current_phase, settings.current_week)
    choice = await questionary.select(
        "What next?",
        choices=[questionary.Choice(o.label, o) for o in options]
        + [questionary.Choice("Not yet", "stay")],
        style=custom_style,
    ).ask_async()

    if not isinstance(choice, AdvancementOption):
        echo_info("Staying at the current week.")
        return

    new_settings = apply_advancement(settings, choice)
    await UserRepository().update_settings(user.id, new_settings)
    echo_success(f"Now at Phase {new_settings.current_phase}, Week {new_settings.current_week}")
