"""
JSON output, including the section of each activity.
"""
import json
from typing import Iterable

from schedule_converter.models import ScheduleActivity

from .base import ScheduleSerializer


class JsonScheduleSerializer(ScheduleSerializer):
    """Render activities as a JSON array."""

    file_suffix = '.json'
    mime_type = 'application/json'

    def __init__(self, indent: int = 2):
        self.indent = indent

    def render(self, activities: Iterable[ScheduleActivity]) -> str:
        data = [activity.model_dump(mode='json') for activity in activities]
        return json.dumps(data, indent=self.indent, ensure_ascii=False)
