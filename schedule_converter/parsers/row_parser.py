"""
Map a data line's fragments onto schedule fields and normalize them.
"""
import logging
from typing import Dict, Optional

from schedule_converter.models import (
    REJECTED_ID_MARKERS,
    SCHEDULE_FIELDS,
    ColumnBandConfig,
    Line,
    ScheduleActivity,
)
from schedule_converter.utils.helpers import clean_date_field, normalize_whitespace

logger = logging.getLogger(__name__)

DATE_FIELDS = ('start_date', 'finish_date')


class RowParser:
    """Turn one data line into a ScheduleActivity using column bands."""

    def __init__(self, bands: Optional[ColumnBandConfig] = None):
        """
        Args:
            bands: Column band calibration (defaults to ColumnBandConfig.default())
        """
        self.bands = bands or ColumnBandConfig.default()

    def assign_fields(self, line: Line) -> Dict[str, str]:
        """
        Assign fragments to fields by x position.

        Fragments landing in the same band are joined with a single space;
        fragments outside every band are dropped.
        """
        parts: Dict[str, list] = {name: [] for name in SCHEDULE_FIELDS}
        for fragment in line.fragments:
            name = self.bands.locate(fragment.x)
            if name is None:
                logger.debug("Dropped fragment %r at x=%s (no band)", fragment.text, fragment.x)
                continue
            parts[name].append(fragment.text)
        return {name: ' '.join(texts) for name, texts in parts.items()}

    def clean_fields(self, fields: Dict[str, str]) -> Dict[str, str]:
        cleaned = {}
        for name, value in fields.items():
            if name in DATE_FIELDS:
                cleaned[name] = clean_date_field(value)
            else:
                cleaned[name] = normalize_whitespace(value)
        return cleaned

    def is_rejected(self, activity_id: str) -> bool:
        """Empty IDs and total/page rows are not activities."""
        if not activity_id:
            return True
        return any(marker in activity_id for marker in REJECTED_ID_MARKERS)

    def parse(self, line: Line, section: str = '') -> Optional[ScheduleActivity]:
        """
        Parse a data line.

        Args:
            line: Line classified as a data row
            section: Section title in effect

        Returns:
            ScheduleActivity, or None if the row is rejected
        """
        fields = self.clean_fields(self.assign_fields(line))
        if self.is_rejected(fields['activity_id']):
            logger.debug("Rejected row at y=%s: %r", line.y, line.text)
            return None
        return ScheduleActivity(section=section, **fields)
