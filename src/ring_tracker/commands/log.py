"""Interactive workout logging command."""

import click
import questionary
from questionary import Style

from ..db.repositories import UserVariantsRepository, WorkoutRepository
from ..models.program import ProgramExercise
from ..models.workout import ExerciseLog, SetLog
from ..services.progress import record_workout_progress
from ..services.recorder import (
    WorkoutRecorder,
    previous_exercise_logs,
    session_from_slug,
    variant_suggestions,
)
from ..utils.formatting import format_time, parse_rest_time
from .base import (
    async_command,
    echo_error,
    echo_info,
    echo_success,
    echo_warning,
    ensure_initialized,
    require_user,
)

custom_style = Style(
    [
        ("qmark", "fg:#673ab7 bold"),
        ("question", "bold"),
        ("answer", "fg:#f44336 bold"),
        ("pointer", "fg:#673ab7 bold"),
        ("highlighted", "fg:#673ab7 bold"),
        ("selected", "fg:#cc5454"),
        ("instruction", ""),
        ("text", ""),
    ]
)


def _parse_count(text: str | None) -> int | None:
    """Blank or invalid input means the set was skipped."""
    if not text or not text.strip():
        return None
    try:
        value = int(text.strip())
    except ValueError:
        return None
    return value if value >= 0 else None


def _describe_set(set_log: SetLog) -> str:
    if set_log.time:
        return format_time(set_log.time)
    if set_log.is_unilateral:
        return f"{set_log.reps_left}L/{set_log.reps_right}R"
    return str(set_log.reps)


async def _ask_set(exercise: ProgramExercise, set_log: SetLog) -> bool:
    """Prompt for one set; returns False if the user skipped it."""
    label = f"  Set {set_log.set_number}"

    if exercise.is_timed:
        seconds = _parse_count(
            await questionary.text(f"{label} - seconds held:", style=custom_style).ask_async()
        )
        if seconds is None:
            return False
        set_log.time = seconds
    elif exercise.is_unilateral:
        left = _parse_count(
            await questionary.text(f"{label} - reps left:", style=custom_style).ask_async()
        )
        if left is None:
            return False
        right = _parse_count(
            await questionary.text(f"{label} - reps right:", style=custom_style).ask_async()
        )
        set_log.reps_left = left
        set_log.reps_right = right if right is not None else left
    else:
        reps = _parse_count(
            await questionary.text(f"{label} - reps:", style=custom_style).ask_async()
        )
        if reps is None:
            return False
        set_log.reps = reps

    set_log.completed = True
    return True


async def _log_exercise(
    exercise: ProgramExercise,
    log: ExerciseLog,
    previous: ExerciseLog | None,
    suggestions: list[str],
) -> None:
    click.echo()
    click.echo(
        click.style(f"{exercise.letter}. {exercise.name}", bold=True)
        + f"  {exercise.target_sets} x {exercise.target_reps}, tempo {exercise.tempo}"
    )
    if previous is not None and previous.completed_sets():
        done = ", ".join(_describe_set(s) for s in previous.completed_sets())
        variant = previous.progression.variant or "no variant"
        click.echo(f"  Last time ({variant}): {done}")

    variant = await questionary.autocomplete(
        "  Variant:",
        choices=suggestions,
        default=previous.progression.variant if previous else "",
        style=custom_style,
    ).ask_async()
    log.progression.variant = (variant or "").strip()

    for set_log in log.sets:
        if not await _ask_set(exercise, set_log):
            echo_info(f"Set {set_log.set_number} skipped")

    rest = parse_rest_time(exercise.rest)
    click.echo(f"  Rest {format_time(rest)} before the next exercise.")


@click.command()
@click.argument("session_slug", metavar="SESSION")
@click.option("--email", "-e", required=True, help="Email of the user to log for")
@click.pass_context
@async_command
async def log(ctx: click.Context, session_slug: str, email: str):
    """Record a workout for SESSION (push-1, pull-1, push-2 or pull-2).

    The session is prescribed by your current phase and week. Progress is
    saved after every exercise; blank answers skip a set.
    """
    ensure_initialized(ctx)
    user = await require_user(ctx, email)

    repo = WorkoutRepository()
    recorder = WorkoutRecorder(repo, user.id, session_from_slug(session_slug), user.settings)

    if recorder.session is None:
        echo_error(
            f"No {recorder.session_type.value} session for phase {recorder.phase}."
        )
        ctx.exit(1)

    title = f"{recorder.session_type.value} - Phase {recorder.phase}, Week {recorder.week}"
    if recorder.is_deload:
        title += " (deload)"
    click.echo()
    click.echo(click.style(title, bold=True))
    click.echo("=" * 50)

    previous = await previous_exercise_logs(repo, user.id, recorder.session_type)
    suggestions = variant_suggestions(recorder.session)
    variants_repo = UserVariantsRepository()

    start = await questionary.confirm(
        "Start workout?", default=True, style=custom_style
    ).ask_async()
    if not start:
        echo_info("Workout not started; nothing saved.")
        return

    recorder.start()

    for exercise, exercise_log in zip(recorder.session.exercises, recorder.exercises):
        used = await variants_repo.get(user.id, exercise.name)
        # The user's own variants first, then the library's examples
        choices = (used.most_used() if used else []) + suggestions.get(exercise.name, [])
        choices = list(dict.fromkeys(choices))
        await _log_exercise(exercise, exercise_log, previous.get(exercise.name), choices)
        await recorder.save()

    notes = await questionary.text(
        "Workout notes (optional):", default="", style=custom_style
    ).ask_async()
    recorder.notes = notes or ""

    workout = await recorder.complete()
    if workout is None:
        echo_warning("Workout could not be saved.")
        ctx.exit(1)

    await record_workout_progress(workout)

    completed = sum(len(e.completed_sets()) for e in workout.exercises)
    echo_success(
        f"Workout saved: {completed} sets in {workout.duration} min (id {workout.id})"
    )
