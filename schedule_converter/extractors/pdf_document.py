"""
Decoded-document boundary backed by pdfplumber.
"""
import io
import logging
from pathlib import Path
from typing import List, Protocol, runtime_checkable

import pdfplumber

from schedule_converter.exceptions import DocumentReadError
from schedule_converter.models import PositionedFragment

logger = logging.getLogger(__name__)


@runtime_checkable
class ScheduleDocument(Protocol):
    """A decoded document: a page count and per-page positioned fragments."""

    @property
    def page_count(self) -> int:
        ...

    def page_fragments(self, page_number: int) -> List[PositionedFragment]:
        """Return the fragments of a 1-based page, in decoder order."""
        ...


class PdfPlumberDocument:
    """Expose a pdfplumber PDF as a ScheduleDocument."""

    def __init__(self, pdf, source: str = '<bytes>', x_tolerance: float = 3.0):
        """
        Args:
            pdf: An open pdfplumber.PDF
            source: Label used in error messages
            x_tolerance: Horizontal gap (points) below which characters join one run
        """
        self._pdf = pdf
        self.source = source
        self.x_tolerance = x_tolerance

    @classmethod
    def open(cls, source: str | Path | bytes, x_tolerance: float = 3.0) -> 'PdfPlumberDocument':
        """
        Open a PDF from a path or raw bytes.

        Raises:
            DocumentReadError: If the file is missing or cannot be parsed
        """
        if isinstance(source, (bytes, bytearray)):
            label = '<bytes>'
            stream = io.BytesIO(source)
        else:
            label = str(source)
            stream = Path(source)
            if not stream.exists():
                raise DocumentReadError(f"PDF file not found: {label}")

        try:
            pdf = pdfplumber.open(stream)
        except Exception as exc:
            raise DocumentReadError(f"Could not open PDF: {label}") from exc

        try:
            page_count = len(pdf.pages)
        except Exception as exc:
            pdf.close()
            raise DocumentReadError(f"Could not read page tree: {label}") from exc

        logger.debug("Opened %s (%d pages)", label, page_count)
        return cls(pdf, source=label, x_tolerance=x_tolerance)

    @property
    def page_count(self) -> int:
        return len(self._pdf.pages)

    def page_fragments(self, page_number: int) -> List[PositionedFragment]:
        if not 1 <= page_number <= self.page_count:
            raise DocumentReadError(
                f"Page out of range for {self.source} ({self.page_count} pages)",
                page_number=page_number,
            )

        try:
            page = self._pdf.pages[page_number - 1]
            words = page.extract_words(
                keep_blank_chars=True,
                x_tolerance=self.x_tolerance,
                return_chars=True,
            )
        except Exception as exc:
            raise DocumentReadError(
                f"Could not read page content of {self.source}",
                page_number=page_number,
            ) from exc

        fragments = []
        for word in words:
            text = word.get('text', '')
            if not text.strip():
                continue
            fragments.append(PositionedFragment(
                text=text,
                x=float(word['x0']),
                y=self.baseline(word),
            ))
        return fragments

    @staticmethod
    def baseline(word: dict) -> float:
        """
        Baseline y of a word, bottom-left origin.

        The glyph box bottom includes the font's descent, so fonts sharing a
        baseline can disagree there. The text matrix of the first character
        is already relative to the mediabox origin and y increases upward.
        """
        return float(word['chars'][0]['matrix'][5])

    def close(self) -> None:
        self._pdf.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False
