"""
Collect positioned text fragments from a decoded document, page by page.
"""
import logging
from typing import Iterator, List, Optional, Tuple

from schedule_converter.exceptions import DocumentReadError
from schedule_converter.models import PositionedFragment

from .pdf_document import ScheduleDocument

logger = logging.getLogger(__name__)


class FragmentCollector:
    """Pull pages from a document in order and return their fragments."""

    def __init__(self, show_progress: bool = False):
        """
        Initialize the collector.

        Args:
            show_progress: If True, print a line per processed page
        """
        self.show_progress = show_progress

    def iter_pages(
        self,
        document: ScheduleDocument,
        show_progress: Optional[bool] = None
    ) -> Iterator[Tuple[int, List[PositionedFragment]]]:
        """
        Yield (page_number, fragments) for every page, first to last.

        Each page is fully read before it is yielded; nothing is fetched ahead.

        Raises:
            DocumentReadError: If the page count or any page cannot be read
        """
        if show_progress is None:
            show_progress = self.show_progress

        try:
            total_pages = document.page_count
        except DocumentReadError:
            raise
        except Exception as exc:
            raise DocumentReadError("Could not read page count") from exc

        for page_number in range(1, total_pages + 1):
            if show_progress:
                print(f"\r  ⠋ Processing page {page_number}/{total_pages}...", end="", flush=True)

            try:
                fragments = list(document.page_fragments(page_number))
            except DocumentReadError:
                raise
            except Exception as exc:
                raise DocumentReadError("Could not read page content", page_number=page_number) from exc

            logger.debug("Page %d: %d fragments", page_number, len(fragments))
            if show_progress:
                print(f"\r  ✓ Processed page {page_number}/{total_pages}        ", flush=True)

            yield page_number, fragments

    def collect(self, document: ScheduleDocument) -> List[PositionedFragment]:
        """Concatenate every page's fragments in page order."""
        fragments = []
        for _, page_fragments in self.iter_pages(document):
            fragments.extend(page_fragments)
        return fragments
