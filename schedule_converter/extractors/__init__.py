"""
Fragment extraction from decoded PDF documents.
"""
from .pdf_document import ScheduleDocument, PdfPlumberDocument
from .fragment_collector import FragmentCollector

__all__ = [
    'ScheduleDocument',
    'PdfPlumberDocument',
    'FragmentCollector',
]
