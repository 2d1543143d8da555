"""Program catalog command."""

import click

from ..data.program_data import PROGRAM_PHASES, WEEKLY_SCHEDULE, get_phase
from ..models.program import SessionType
from .base import echo_error, format_table


@click.command()
@click.option("--phase", "-p", type=click.IntRange(1, 3), default=None, help="Show one phase")
@click.option("--deload", is_flag=True, help="Show the deload week sessions")
@click.pass_context
def program(ctx: click.Context, phase: int | None, deload: bool):
    """Show the 18-week program.

    Without --phase, lists the phases and the weekly schedule.
    """
    if phase is None:
        click.echo()
        click.echo(click.style("Phases", bold=True))
        for p in PROGRAM_PHASES:
            click.echo(f"  Phase {p.phase}: {p.name} ({p.weeks} weeks)")
        click.echo()
        click.echo(click.style("Weekly schedule", bold=True))
        for day, session in WEEKLY_SCHEDULE.items():
            click.echo(f"  {day.capitalize():<10} {session}")
        click.echo()
        click.echo("Use --phase N to see the exercises of a phase.")
        return

    phase_data = get_phase(phase)
    if phase_data is None:
        echo_error(f"Phase {phase} not found.")
        ctx.exit(1)

    title = f"Phase {phase_data.phase}: {phase_data.name}"
    if deload:
        title += " (deload)"
    click.echo()
    click.echo(click.style(title, bold=True))
    click.echo("=" * 50)

    for session_type in SessionType:
        session = phase_data.get_session(session_type, deload)
        if session is None:
            continue
        click.echo()
        click.echo(click.style(session.name.value, bold=True))
        rows = [
            [ex.letter, ex.name, ex.target_sets, ex.target_reps, ex.tempo, ex.rest]
            for ex in session.exercises
        ]
        click.echo(format_table(["", "Exercise", "Sets", "Reps", "Tempo", "Rest"], rows))
