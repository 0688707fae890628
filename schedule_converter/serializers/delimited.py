"""
Comma-separated output for spreadsheet import.
"""
from typing import Iterable, List

from schedule_converter.models import ScheduleActivity

from .base import ScheduleSerializer

CSV_HEADER = 'Activity ID,Activity Name,Original Duration,Remaining Duration,Start Date,Finish Date'


class CsvScheduleSerializer(ScheduleSerializer):
    """
    Render activities as CSV text.

    Layout: header line, one blank line, then one row per activity.
    The activity name is wrapped in double quotes; embedded quotes are
    written as-is.
    """

    file_suffix = '.csv'
    mime_type = 'text/csv'

    def __init__(self, include_section: bool = False):
        """
        Args:
            include_section: Prepend a quoted Section column
        """
        self.include_section = include_section

    @property
    def header(self) -> str:
        if self.include_section:
            return 'Section,' + CSV_HEADER
        return CSV_HEADER

    def format_row(self, activity: ScheduleActivity) -> str:
        fields: List[str] = [
            activity.activity_id,
            f'"{activity.activity_name}"',
            activity.original_duration,
            activity.remaining_duration,
            activity.start_date,
            activity.finish_date,
        ]
        if self.include_section:
            fields.insert(0, f'"{activity.section}"')
        return ','.join(fields)

    def render(self, activities: Iterable[ScheduleActivity]) -> str:
        rows = [self.format_row(activity) for activity in activities]
        return self.header + '\n\n' + '\n'.join(rows)
