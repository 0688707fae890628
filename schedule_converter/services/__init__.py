"""
Service classes for orchestrating schedule conversion.
"""
from .conversion_service import (
    ScheduleConversionService,
    ConversionServiceFactory,
)

__all__ = [
    'ScheduleConversionService',
    'ConversionServiceFactory',
]
