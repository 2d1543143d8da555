"""Week/phase advancement.

Training weeks 1-5 advance to the next week, the deload week 6 finishes a
phase, and phase 3 week 6 finishes the program. Advancement is only offered
once all four sessions of the week are logged; the chosen position is saved
as an ordinary settings update.
"""

from dataclasses import dataclass
from enum import Enum

from ..data.program_data import get_phase
from ..models.program import SessionType
from ..models.user import DELOAD_WEEK, TOTAL_PHASES, UserSettings

SESSION_TYPES = tuple(s.value for s in SessionType)


class CompletionType(str, Enum):
    """What finishing the current week completes."""

    WEEK = "week"
    PHASE = "phase"
    PROGRAM = "program"


@dataclass(frozen=True)
class AdvancementOption:
    """A position the user may move to."""

    label: str
    phase: int
    week: int

    def to_dict(self) -> dict:
        return {"label": self.label, "phase": self.phase, "week": self.week}


def is_week_complete(completed_sessions) -> bool:
    """True once every session type appears among the completed session names."""
    done = {SessionType(s).value if isinstance(s, SessionType) else s for s in completed_sessions}
    return all(s in done for s in SESSION_TYPES)


def completion_type(phase: int, week: int) -> CompletionType:
    if week == DELOAD_WEEK and phase >= TOTAL_PHASES:
        return CompletionType.PROGRAM
    if week == DELOAD_WEEK:
        return CompletionType.PHASE
    return CompletionType.WEEK


def _phase_label(phase: int) -> str:
    phase_data = get_phase(phase)
    if phase_data is None:
        return f"Phase {phase}"
    return f"Phase {phase}: {phase_data.name}"


def advancement_options(phase: int, week: int) -> list[AdvancementOption]:
    """Options offered after completing ``phase``/``week``, in display order."""
    kind = completion_type(phase, week)

    if kind is CompletionType.WEEK:
        return [AdvancementOption(f"Move to Week {week + 1}", phase, week + 1)]

    if kind is CompletionType.PHASE:
        return [
            AdvancementOption(f"Repeat Phase {phase}", phase, 1),
            AdvancementOption(f"Start {_phase_label(phase + 1)}", phase + 1, 1),
        ]

    return [AdvancementOption("Start Over from Phase 1", 1, 1)]


def apply_advancement(settings: UserSettings, option: AdvancementOption) -> UserSettings:
    """New settings at the option's position; other settings are kept."""
    return settings.merge({"currentPhase": option.phase, "currentWeek": option.week})
