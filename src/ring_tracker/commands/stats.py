"""Progress statistics command."""

import click

from ..db.repositories import WorkoutRepository
from ..services import stats as aggregates
from ..utils.date_utils import format_date, format_distance_to_now, parse_datetime
from .base import async_command, echo_info, ensure_initialized, format_table, require_user


@click.command()
@click.option("--email", "-e", required=True, help="Email of the user")
@click.option(
    "--limit",
    "-n",
    type=click.Choice(["5", "10", "50", "100"]),
    default="50",
    help="How many recent workouts to summarize (default: 50)",
)
@click.option("--exercise", "-x", default=None, help="Show history for one exercise")
@click.pass_context
@async_command
async def stats(ctx: click.Context, email: str, limit: str, exercise: str | None):
    """Show weekly and per-exercise summaries of recent workouts.

    Figures only cover the fetched workouts; older ones are not counted.
    """
    ensure_initialized(ctx)
    user = await require_user(ctx, email)

    workouts = await WorkoutRepository().list_for_user(user.id, limit=int(limit))
    settings = user.settings
    progress = aggregates.program_progress(settings.current_phase, settings.current_week)

    click.echo()
    click.echo(click.style(f"Progress for {user.name}", bold=True))
    click.echo("=" * 50)
    click.echo(
        f"Program: Phase {settings.current_phase}, Week {settings.current_week} "
        f"({progress.weeks_completed}/{progress.total_weeks} weeks, {progress.percent}%)"
    )

    if not workouts:
        click.echo()
        echo_info("No workouts logged yet.")
        return

    total_minutes = aggregates.total_duration(workouts)
    click.echo(
        f"Workouts: {len(workouts)}  Sets: {aggregates.total_completed_sets(workouts)}  "
        f"Reps: {aggregates.total_reps(workouts)}  Time: {round(total_minutes / 60)}h"
    )
    click.echo(f"Last workout: {format_distance_to_now(workouts[0].date)}")

    if exercise:
        _show_exercise(workouts, exercise)
        return

    weekly = aggregates.weekly_stats(workouts)
    click.echo()
    click.echo(click.style("Weekly", bold=True))
    click.echo(
        format_table(
            ["Week of", "Workouts", "Sets", "Reps"],
            [
                [format_date(parse_datetime(w.week_start)), w.workouts, w.total_sets, w.total_reps]
                for w in weekly
            ],
        )
    )

    per_exercise = aggregates.exercise_stats(workouts)
    click.echo()
    click.echo(click.style("Exercises", bold=True))
    click.echo(
        format_table(
            ["Exercise", "Sets", "Reps", "Avg/set", "Variant"],
            [
                [s.name, s.total_sets, s.total_reps, s.avg_reps_per_set, s.last_variant]
                for s in per_exercise
            ],
        )
    )


def _show_exercise(workouts, exercise_name: str) -> None:
    history = aggregates.exercise_history(workouts, exercise_name)
    click.echo()
    click.echo(click.style(exercise_name, bold=True))
    if not history:
        echo_info("No completed sets for this exercise.")
        return

    bests = aggregates.personal_bests(history)
    click.echo(
        f"Best set: {bests.max_reps}  Best volume: {bests.max_volume}  Most sets: {bests.max_sets}"
    )
    click.echo(f"Variants: {', '.join(aggregates.unique_variants(history))}")
    click.echo()
    click.echo(
        format_table(
            ["Date", "Phase", "Week", "Variant", "Sets", "Reps", "Best"],
            [
                [format_date(h.date), h.phase, h.week, h.variant, h.sets, h.total_reps, h.best_set]
                for h in history
            ],
        )
    )
