"""User and settings models."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from ..utils.date_utils import parse_datetime, to_iso


class WeightUnit(str, Enum):
    """Unit used to display body weight and added weight."""

    KG = "kg"
    LBS = "lbs"


DELOAD_WEEK = 6
WEEKS_PER_PHASE = 6
TOTAL_PHASES = 3


@dataclass
class UserSettings:
    """Per-user program position and preferences."""

    current_phase: int = 1  # 1-3
    current_week: int = 1  # 1-6, 6 = deload
    start_date: datetime | None = None
    body_weight: float | None = None
    weight_unit: WeightUnit = WeightUnit.KG
    default_rest_time: int | None = 90  # seconds
    dark_mode: bool | None = True

    @property
    def is_deload(self) -> bool:
        return self.current_week == DELOAD_WEEK

    def merge(self, updates: dict) -> "UserSettings":
        """Return new settings with ``updates`` (client keys) applied on top."""
        data = self.to_dict()
        data.update(updates)
        return UserSettings.from_dict(data)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        data = {
            "currentPhase": self.current_phase,
            "currentWeek": self.current_week,
            "weightUnit": self.weight_unit.value,
        }
        if self.start_date is not None:
            data["startDate"] = to_iso(self.start_date)
        if self.body_weight is not None:
            data["bodyWeight"] = self.body_weight
        if self.default_rest_time is not None:
            data["defaultRestTime"] = self.default_rest_time
        if self.dark_mode is not None:
            data["darkMode"] = self.dark_mode
        return data

    @classmethod
    def from_dict(cls, data: dict | None) -> "UserSettings":
        """Create from dictionary."""
        data = data or {}
        start_date = None
        if data.get("startDate"):
            start_date = parse_datetime(data["startDate"])
        return cls(
            current_phase=data.get("currentPhase", 1),
            current_week=data.get("currentWeek", 1),
            start_date=start_date,
            body_weight=data.get("bodyWeight"),
            weight_unit=WeightUnit(data.get("weightUnit", WeightUnit.KG.value)),
            default_rest_time=data.get("defaultRestTime"),
            dark_mode=data.get("darkMode"),
        )


def default_settings() -> UserSettings:
    """Settings given to a user on first sign-in."""
    return UserSettings(
        current_phase=1,
        current_week=1,
        weight_unit=WeightUnit.KG,
        default_rest_time=90,
        dark_mode=True,
    )


@dataclass
class User:
    """An authenticated user."""

    email: str
    name: str
    image: str | None = None
    provider_account_id: str | None = None
    settings: UserSettings = field(default_factory=default_settings)
    created_at: datetime | None = None
    updated_at: datetime | None = None
    id: int | None = None

    def to_client_dict(self) -> dict:
        """Plain-JSON client representation."""
        return {
            "id": str(self.id) if self.id is not None else None,
            "email": self.email,
            "name": self.name,
            "image": self.image,
            "settings": self.settings.to_dict(),
            "createdAt": to_iso(self.created_at),
            "updatedAt": to_iso(self.updated_at),
        }
