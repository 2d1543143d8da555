"""Body metrics models."""

from dataclasses import dataclass, fields
from datetime import datetime

from ..utils.date_utils import to_iso

_MEASUREMENT_KEYS = {
    "chest": "chest",
    "waist": "waist",
    "hips": "hips",
    "bicep_left": "bicepLeft",
    "bicep_right": "bicepRight",
    "thigh_left": "thighLeft",
    "thigh_right": "thighRight",
}


@dataclass
class BodyMeasurements:
    """Circumference measurements, in the user's unit."""

    chest: float | None = None
    waist: float | None = None
    hips: float | None = None
    bicep_left: float | None = None
    bicep_right: float | None = None
    thigh_left: float | None = None
    thigh_right: float | None = None

    def to_dict(self) -> dict:
        """Convert to dictionary, skipping unset measurements."""
        return {
            _MEASUREMENT_KEYS[f.name]: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }

    @classmethod
    def from_dict(cls, data: dict | None) -> "BodyMeasurements | None":
        """Create from dictionary."""
        if data is None:
            return None
        return cls(**{attr: data.get(key) for attr, key in _MEASUREMENT_KEYS.items()})


@dataclass
class BodyMetrics:
    """A dated body-weight/measurement entry."""

    user_id: int
    date: datetime
    weight: float | None = None
    measurements: BodyMeasurements | None = None
    notes: str | None = None
    is_seed: bool = False
    created_at: datetime | None = None
    id: int | None = None

    def to_client_dict(self) -> dict:
        """Plain-JSON client representation."""
        return {
            "id": str(self.id) if self.id is not None else None,
            "date": to_iso(self.date),
            "weight": self.weight,
            "measurements": self.measurements.to_dict() if self.measurements else None,
            "notes": self.notes,
            "createdAt": to_iso(self.created_at),
        }
