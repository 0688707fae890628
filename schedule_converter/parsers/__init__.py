"""
Layout reconstruction: line grouping, classification and row parsing.
"""
from .line_grouper import GroupingPolicy, LineGrouper
from .line_classifier import LineKind, LineClassifier
from .row_parser import RowParser
from .schedule_parser import ParseState, ScheduleParser

__all__ = [
    'GroupingPolicy',
    'LineGrouper',
    'LineKind',
    'LineClassifier',
    'RowParser',
    'ParseState',
    'ScheduleParser',
]
