"""
Models for schedule conversion results.
"""
from typing import List
from pydantic import BaseModel, ConfigDict, Field, field_validator

# Markers identifying subtotal and footer rows; TOTAL covers all-caps
# grand-total banners, which are kept out of section headers
REJECTED_ID_MARKERS = ('Total', 'TOTAL', 'PAGE')


class ScheduleActivity(BaseModel):
    """One normalized schedule line item."""

    model_config = ConfigDict(frozen=True)

    section: str = Field(default="", description="Section title in effect for this row")
    activity_id: str = Field(..., description="Activity identifier (e.g., MILE-100)")
    activity_name: str = Field(default="", description="Activity description")
    original_duration: str = Field(default="", description="Original duration as printed")
    remaining_duration: str = Field(default="", description="Remaining duration as printed")
    start_date: str = Field(default="", description="Start date, markers removed")
    finish_date: str = Field(default="", description="Finish date, markers removed")

    @field_validator('activity_id')
    @classmethod
    def check_activity_id(cls, v):
        """Total and page rows are never activities."""
        if not v.strip():
            raise ValueError("activity_id must not be empty")
        for marker in REJECTED_ID_MARKERS:
            if marker in v:
                raise ValueError(f"activity_id contains '{marker}' marker: {v!r}")
        return v


class ConversionSummary(BaseModel):
    """Counters collected while folding over a document's lines."""

    pages_processed: int = Field(0, ge=0, description="Pages read from the document")
    lines_seen: int = Field(0, ge=0, description="Lines produced by the grouper")
    noise_lines: int = Field(0, ge=0, description="Header/footer lines discarded")
    section_headers: int = Field(0, ge=0, description="Lines that set a section")
    data_rows: int = Field(0, ge=0, description="Lines handed to the row parser")
    rejected_rows: int = Field(0, ge=0, description="Data rows rejected by the row parser")
    total_activities: int = Field(0, ge=0, description="Activities emitted")
    sections: List[str] = Field(
        default_factory=list,
        description="Distinct section titles in order of first appearance"
    )


class ScheduleConversionResult(BaseModel):
    """Complete result of converting one schedule PDF."""

    source_pdf: str = Field(..., description="Path or label of the source PDF")
    extraction_mode: str = Field(default="schedule", description="Extraction mode used")
    activities: List[ScheduleActivity] = Field(
        default_factory=list,
        description="Accepted activities in document order"
    )
    summary: ConversionSummary = Field(
        default_factory=ConversionSummary,
        description="Run counters"
    )
