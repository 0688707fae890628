"""
Schedule Converter Package
==========================

Convert construction-schedule PDF exports into comma-separated text
for spreadsheet import, by rebuilding the schedule table from the
positioned text fragments on each page.

Main Components:
- extractors: Decoded-document access and fragment collection
- parsers: Line grouping, line classification and row parsing
- models: Data models for type safety
- serializers: CSV and JSON output
- services: High-level conversion orchestration
- utils: Helper functions
"""

__version__ = "1.0.0"

# Convenience imports for common use cases
from schedule_converter.exceptions import (
    ScheduleConverterError,
    DocumentReadError,
    ScheduleProcessingError,
)
from schedule_converter.extractors import FragmentCollector, PdfPlumberDocument
from schedule_converter.parsers import ScheduleParser
from schedule_converter.services import ConversionServiceFactory

__all__ = [
    'ScheduleConverterError',
    'DocumentReadError',
    'ScheduleProcessingError',
    'FragmentCollector',
    'PdfPlumberDocument',
    'ScheduleParser',
    'ConversionServiceFactory',
]
