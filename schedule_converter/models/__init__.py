"""
Data models for schedule conversion.
Imports all models for easy access.
"""
from .base import (
    PositionedFragment,
    Line,
)
from .bands import (
    SCHEDULE_FIELDS,
    DEFAULT_BANDS,
    ColumnBand,
    ColumnBandConfig,
)
from .schedule import (
    REJECTED_ID_MARKERS,
    ScheduleActivity,
    ConversionSummary,
    ScheduleConversionResult,
)

__all__ = [
    # Layout models
    'PositionedFragment',
    'Line',
    # Column bands
    'SCHEDULE_FIELDS',
    'DEFAULT_BANDS',
    'ColumnBand',
    'ColumnBandConfig',
    # Schedule models
    'REJECTED_ID_MARKERS',
    'ScheduleActivity',
    'ConversionSummary',
    'ScheduleConversionResult',
]
