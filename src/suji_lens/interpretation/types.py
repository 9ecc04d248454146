"""Data models for interpretation output."""

from typing import Literal

from pydantic import BaseModel, Field

Method = Literal["literal", "direct", "parsed", "fallback", "unmapped"]


class ExtractionResult(BaseModel):
    """Interpretation of a single transcript fragment."""

    raw: str
    value: str
    number: int | None = None
    method: Method = "unmapped"
    corrected_text: str | None = None
    corrections: list[str] = Field(default_factory=list)


class Candidate(BaseModel):
    """One recognizer alternative ranked by number-likeness."""

    transcript: str
    is_final: bool = False
    score: float = 0.0
