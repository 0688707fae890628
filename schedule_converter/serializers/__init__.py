"""
Output formats for converted schedules.
"""
from .base import ScheduleSerializer
from .delimited import CSV_HEADER, CsvScheduleSerializer
from .json_output import JsonScheduleSerializer

__all__ = [
    'ScheduleSerializer',
    'CSV_HEADER',
    'CsvScheduleSerializer',
    'JsonScheduleSerializer',
]
