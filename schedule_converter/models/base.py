"""
Layout models shared by every stage of the engine.
"""
from typing import List
from pydantic import BaseModel, ConfigDict, Field, field_validator


class PositionedFragment(BaseModel):
    """One decoded text run with its placement on the page (origin bottom-left)."""

    model_config = ConfigDict(frozen=True)

    text: str = Field(..., description="Text of the run")
    x: float = Field(..., description="Horizontal baseline origin")
    y: float = Field(..., description="Vertical baseline origin (increases upward)")


class Line(BaseModel):
    """Fragments sharing one vertical position, ordered left to right."""

    model_config = ConfigDict(frozen=True)

    y: float = Field(..., description="Vertical key the fragments were grouped on")
    fragments: List[PositionedFragment] = Field(
        default_factory=list,
        description="Fragments on this line, ascending x"
    )

    @field_validator('fragments')
    @classmethod
    def sort_fragments(cls, v):
        """Keep fragments in reading order."""
        return sorted(v, key=lambda f: (f.x, f.text, f.y))

    @property
    def text(self) -> str:
        """Fragment texts joined by single spaces."""
        return ' '.join(fragment.text for fragment in self.fragments)
