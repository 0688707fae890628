"""
Column band configuration: named horizontal intervals that map a fragment's
x position to a schedule field.
"""
import re
from typing import Dict, List, Literal, Optional, Sequence
from pydantic import BaseModel, Field, field_validator, model_validator


# Output order of the schedule fields
SCHEDULE_FIELDS = (
    'activity_id',
    'activity_name',
    'original_duration',
    'remaining_duration',
    'start_date',
    'finish_date',
)

FieldName = Literal[
    'activity_id',
    'activity_name',
    'original_duration',
    'remaining_duration',
    'start_date',
    'finish_date',
]

# Calibrated against the standard landscape schedule layout
DEFAULT_BANDS: Dict[str, Sequence[float]] = {
    'activity_id': (0, 60),
    'activity_name': (60, 300),
    'original_duration': (300, 400),
    'remaining_duration': (400, 500),
    'start_date': (500, 600),
    'finish_date': (600, 800),
}


def to_field_name(name: str) -> str:
    """Convert 'activityId' / 'Activity ID' style names to 'activity_id'."""
    name = re.sub(r'(?<=[a-z0-9])([A-Z])', r'_\1', name.strip())
    name = re.sub(r'[\s\-]+', '_', name)
    return name.lower()


class ColumnBand(BaseModel):
    """Half-open interval [start, end) assigned to one schedule field."""

    name: FieldName = Field(..., description="Schedule field this band feeds")
    start: float = Field(..., ge=0, description="Inclusive left edge")
    end: float = Field(..., description="Exclusive right edge")

    @model_validator(mode='after')
    def check_interval(self):
        if self.end <= self.start:
            raise ValueError(
                f"band '{self.name}' must end after it starts ({self.start} >= {self.end})"
            )
        return self

    def contains(self, x: float) -> bool:
        return self.start <= x < self.end


class ColumnBandConfig(BaseModel):
    """Validated set of column bands used by one engine instance."""

    bands: List[ColumnBand] = Field(..., min_length=1, description="Bands ordered left to right")

    @field_validator('bands')
    @classmethod
    def check_layout(cls, v):
        """Bands must be unique, increasing and non-overlapping."""
        names = [band.name for band in v]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise ValueError(f"duplicate bands: {', '.join(duplicates)}")
        if 'activity_id' not in names:
            raise ValueError("an 'activity_id' band is required")

        for previous, current in zip(v, v[1:]):
            if current.start < previous.start:
                raise ValueError(
                    f"band '{current.name}' starts before '{previous.name}'; "
                    "bands must be listed left to right"
                )
            if current.start < previous.end:
                raise ValueError(
                    f"band '{current.name}' overlaps '{previous.name}' "
                    f"({current.start} < {previous.end})"
                )
        return v

    def locate(self, x: float) -> Optional[str]:
        """Return the field whose band contains x, or None."""
        for band in self.bands:
            if band.contains(x):
                return band.name
        return None

    def as_mapping(self) -> Dict[str, List[float]]:
        return {band.name: [band.start, band.end] for band in self.bands}

    @classmethod
    def from_mapping(cls, mapping: Dict[str, Sequence[float]]) -> 'ColumnBandConfig':
        """
        Build a config from {field: [start, end]}.

        Field names may be snake_case or camelCase. The mapping's order is kept,
        so it must already run left to right.
        """
        bands = []
        for name, interval in mapping.items():
            if not isinstance(interval, (list, tuple)) or len(interval) != 2:
                raise ValueError(f"band '{name}' must be [start, end], got {interval!r}")
            start, end = interval
            bands.append({'name': to_field_name(name), 'start': start, 'end': end})
        return cls(bands=bands)

    @classmethod
    def default(cls) -> 'ColumnBandConfig':
        return cls.from_mapping(DEFAULT_BANDS)
