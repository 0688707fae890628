"""
Exceptions raised by the schedule conversion engine.
"""


class ScheduleConverterError(Exception):
    """Base class for all schedule converter errors."""


class DocumentReadError(ScheduleConverterError):
    """The PDF (or one of its pages) could not be decoded."""

    def __init__(self, message: str, page_number: int | None = None):
        self.page_number = page_number
        if page_number is not None:
            message = f"{message} (page {page_number})"
        super().__init__(message)


class ScheduleProcessingError(ScheduleConverterError):
    """Single coarse failure surfaced to callers of a conversion run."""

    def __init__(self, message: str = "schedule processing failed"):
        super().__init__(message)
