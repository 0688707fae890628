"""
Serializer interface for rendering schedule activities.
"""
from abc import ABC, abstractmethod
from typing import Iterable

from schedule_converter.models import ScheduleActivity


class ScheduleSerializer(ABC):
    """Abstract base class for output formats."""

    file_suffix: str = ''
    mime_type: str = 'text/plain'

    @abstractmethod
    def render(self, activities: Iterable[ScheduleActivity]) -> str:
        """
        Render activities to text.

        Args:
            activities: Accepted activities in document order

        Returns:
            The complete output document
        """
        pass
