"""
Classify reconstructed lines as noise, section headers or data rows.
"""
import logging
import re
from enum import Enum
from typing import Iterable, Optional

from schedule_converter.models import Line

logger = logging.getLogger(__name__)


class LineKind(str, Enum):
    NOISE = 'noise'
    SECTION_HEADER = 'section_header'
    DATA_ROW = 'data_row'


class LineClassifier:
    """Text-only rules for schedule report lines."""

    def __init__(
        self,
        noise_markers: Optional[Iterable[str]] = None,
        section_exclusions: Optional[Iterable[str]] = None,
        min_section_length: int = 3,
    ):
        # Column headings and legend text repeated on every page. Matched as
        # written; all-caps header rows are listed separately.
        if noise_markers is None:
            noise_markers = [
                'Activity ID',
                'Activity Name',
                'Original Duration',
                'Full WBS',
                'Level of Effort',
                'ACTIVITY ID',
                'ACTIVITY NAME',
                'ORIGINAL DURATION',
                'FULL WBS',
                'LEVEL OF EFFORT',
            ]
        self.noise_markers = list(noise_markers)
        self.page_number_pattern = re.compile(r'\bPage\s+\d+\s+of\s+\d+\b', re.IGNORECASE)

        # Section titles are runs of capitals, spaces and hyphens, e.g. "FOUNDATION WORK"
        self.section_pattern = re.compile(r'^[A-Z\s\-]+$')
        # All-caps banners that are not sections
        if section_exclusions is None:
            section_exclusions = ['TOTAL']
        self.section_exclusions = list(section_exclusions)
        self.min_section_length = min_section_length

    def is_noise(self, text: str) -> bool:
        if any(marker in text for marker in self.noise_markers):
            return True
        return bool(self.page_number_pattern.search(text))

    def is_section_header(self, text: str) -> bool:
        text = text.strip()
        if len(text) <= self.min_section_length:
            return False
        if not self.section_pattern.match(text):
            return False
        return not any(excluded in text for excluded in self.section_exclusions)

    def classify(self, line: Line) -> LineKind:
        """
        Label a line. Noise is checked first, then section headers;
        anything else is a data row.
        """
        text = line.text
        if self.is_noise(text):
            logger.debug("Noise line at y=%s: %r", line.y, text)
            return LineKind.NOISE
        if self.is_section_header(text):
            logger.debug("Section header at y=%s: %r", line.y, text.strip())
            return LineKind.SECTION_HEADER
        return LineKind.DATA_ROW
