"""
Fold classified lines into schedule activities.

Section context travels in an immutable ParseState that each step returns
anew, so a run never depends on state outside the fold.
"""
import logging
from dataclasses import dataclass, replace
from functools import reduce
from typing import Iterable, Optional, Tuple

from schedule_converter.models import (
    ConversionSummary,
    Line,
    PositionedFragment,
    ScheduleActivity,
)

from .line_classifier import LineClassifier, LineKind
from .line_grouper import LineGrouper
from .row_parser import RowParser

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ParseState:
    """Accumulator threaded through every line of a document, top to bottom."""

    section: str = ''
    activities: Tuple[ScheduleActivity, ...] = ()
    sections: Tuple[str, ...] = ()
    pages: int = 0
    lines: int = 0
    noise_lines: int = 0
    section_headers: int = 0
    data_rows: int = 0
    rejected_rows: int = 0

    def summary(self) -> ConversionSummary:
        return ConversionSummary(
            pages_processed=self.pages,
            lines_seen=self.lines,
            noise_lines=self.noise_lines,
            section_headers=self.section_headers,
            data_rows=self.data_rows,
            rejected_rows=self.rejected_rows,
            total_activities=len(self.activities),
            sections=list(self.sections),
        )


class ScheduleParser:
    """Group, classify and parse pages of fragments."""

    def __init__(
        self,
        grouper: Optional[LineGrouper] = None,
        classifier: Optional[LineClassifier] = None,
        row_parser: Optional[RowParser] = None,
    ):
        self.grouper = grouper or LineGrouper()
        self.classifier = classifier or LineClassifier()
        self.row_parser = row_parser or RowParser()

    def step(self, state: ParseState, line: Line) -> ParseState:
        """Consume one line and return the next state."""
        state = replace(state, lines=state.lines + 1)
        kind = self.classifier.classify(line)

        if kind is LineKind.NOISE:
            return replace(state, noise_lines=state.noise_lines + 1)

        if kind is LineKind.SECTION_HEADER:
            title = line.text.strip()
            sections = state.sections if title in state.sections else state.sections + (title,)
            return replace(
                state,
                section=title,
                sections=sections,
                section_headers=state.section_headers + 1,
            )

        state = replace(state, data_rows=state.data_rows + 1)
        activity = self.row_parser.parse(line, state.section)
        if activity is None:
            return replace(state, rejected_rows=state.rejected_rows + 1)
        return replace(state, activities=state.activities + (activity,))

    def parse_page(
        self,
        fragments: Iterable[PositionedFragment],
        state: Optional[ParseState] = None
    ) -> ParseState:
        """Fold one page's lines into the state carried over from earlier pages."""
        state = state or ParseState()
        lines = self.grouper.group(fragments)
        state = reduce(self.step, lines, state)
        state = replace(state, pages=state.pages + 1)
        logger.debug(
            "Page %d: %d lines, %d activities so far",
            state.pages, len(lines), len(state.activities)
        )
        return state

    def parse_pages(self, pages: Iterable[Iterable[PositionedFragment]]) -> ParseState:
        """Fold every page in order, starting from an empty state."""
        state = ParseState()
        for fragments in pages:
            state = self.parse_page(fragments, state)
        return state
