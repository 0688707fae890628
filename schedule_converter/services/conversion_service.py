"""
Conversion service that orchestrates schedule PDF conversion.
"""
import logging
from pathlib import Path
from typing import Callable, Dict, Optional, Type, Union

from schedule_converter.exceptions import ScheduleProcessingError
from schedule_converter.extractors import FragmentCollector, PdfPlumberDocument, ScheduleDocument
from schedule_converter.models import ColumnBandConfig, ScheduleConversionResult
from schedule_converter.parsers import (
    GroupingPolicy,
    LineClassifier,
    LineGrouper,
    RowParser,
    ScheduleParser,
)
from schedule_converter.serializers import (
    CsvScheduleSerializer,
    JsonScheduleSerializer,
    ScheduleSerializer,
)

logger = logging.getLogger(__name__)

DocumentOpener = Callable[[Union[str, Path, bytes]], ScheduleDocument]


class ScheduleConversionService:
    """Service class that runs one PDF through the layout reconstruction engine."""

    def __init__(
        self,
        collector: FragmentCollector,
        parser: ScheduleParser,
        serializer: ScheduleSerializer,
        opener: Optional[DocumentOpener] = None,
    ):
        """
        Initialize conversion service.

        Args:
            collector: FragmentCollector pulling pages in order
            parser: ScheduleParser folding lines into activities
            serializer: Output format
            opener: Callable turning a path or bytes into a ScheduleDocument
                    (defaults to PdfPlumberDocument.open)
        """
        self.collector = collector
        self.parser = parser
        self.serializer = serializer
        self.opener = opener or PdfPlumberDocument.open

    def convert(
        self,
        source: str | Path | bytes,
        show_progress: bool = False
    ) -> ScheduleConversionResult:
        """
        Convert a schedule PDF.

        Args:
            source: Path to the PDF or its raw bytes
            show_progress: Whether to print per-page progress

        Returns:
            ScheduleConversionResult with every accepted activity

        Raises:
            ScheduleProcessingError: On any failure; no partial result is returned
        """
        label = '<bytes>' if isinstance(source, (bytes, bytearray)) else str(source)
        try:
            document = self.opener(source)
            try:
                return self._run(document, label, show_progress)
            finally:
                close = getattr(document, 'close', None)
                if close is not None:
                    close()
        except Exception as exc:
            logger.error("Conversion of %s failed: %s", label, exc)
            raise ScheduleProcessingError() from exc

    def convert_document(
        self,
        document: ScheduleDocument,
        source_pdf: str = '<document>',
        show_progress: bool = False
    ) -> ScheduleConversionResult:
        """Convert an already decoded document."""
        try:
            return self._run(document, source_pdf, show_progress)
        except Exception as exc:
            logger.error("Conversion of %s failed: %s", source_pdf, exc)
            raise ScheduleProcessingError() from exc

    def _run(
        self,
        document: ScheduleDocument,
        source_pdf: str,
        show_progress: bool
    ) -> ScheduleConversionResult:
        pages = (
            fragments
            for _, fragments in self.collector.iter_pages(document, show_progress=show_progress)
        )
        state = self.parser.parse_pages(pages)
        summary = state.summary()
        logger.info(
            "Converted %s: %d activities from %d pages (%d rejected rows)",
            source_pdf, summary.total_activities, summary.pages_processed, summary.rejected_rows
        )
        return ScheduleConversionResult(
            source_pdf=source_pdf,
            activities=list(state.activities),
            summary=summary,
        )

    def render(self, result: ScheduleConversionResult) -> str:
        """Render a result with the configured serializer."""
        return self.serializer.render(result.activities)

    def convert_to_text(self, source: str | Path | bytes, show_progress: bool = False) -> str:
        """Convert a PDF and return the rendered output in one call."""
        return self.render(self.convert(source, show_progress=show_progress))


class ConversionServiceFactory:
    """Factory class for creating conversion services."""

    SERIALIZERS: Dict[str, Type[ScheduleSerializer]] = {
        'csv': CsvScheduleSerializer,
        'json': JsonScheduleSerializer,
    }

    @staticmethod
    def create_schedule_service(
        bands: Optional[ColumnBandConfig] = None,
        grouping: GroupingPolicy | str = GroupingPolicy.ROUND,
        tolerance: float = 5.0,
        output_format: str = 'csv',
        include_section: bool = False,
        opener: Optional[DocumentOpener] = None,
    ) -> ScheduleConversionService:
        """
        Create a conversion service for schedule PDFs.

        Args:
            bands: Column band calibration (defaults to the built-in one)
            grouping: Line grouping policy ('round' or 'delta')
            tolerance: Vertical tolerance for the 'delta' policy
            output_format: 'csv' or 'json'
            include_section: Add a Section column to CSV output
            opener: Override for opening documents

        Returns:
            ScheduleConversionService ready to convert
        """
        parser = ScheduleParser(
            grouper=LineGrouper(policy=grouping, tolerance=tolerance),
            classifier=LineClassifier(),
            row_parser=RowParser(bands or ColumnBandConfig.default()),
        )
        serializer = ConversionServiceFactory.create_serializer(output_format, include_section)
        return ScheduleConversionService(
            collector=FragmentCollector(),
            parser=parser,
            serializer=serializer,
            opener=opener,
        )

    @staticmethod
    def create_serializer(output_format: str = 'csv', include_section: bool = False) -> ScheduleSerializer:
        """Create the serializer for an output format."""
        serializer_class = ConversionServiceFactory.SERIALIZERS.get(output_format)
        if serializer_class is None:
            choices = ', '.join(ConversionServiceFactory.SERIALIZERS)
            raise ValueError(f"Unknown output format '{output_format}' (expected one of: {choices})")
        if serializer_class is CsvScheduleSerializer:
            return CsvScheduleSerializer(include_section=include_section)
        return serializer_class()
