"""Data models for speech recognition events and session state."""

from __future__ import annotations

from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

EventType = Literal["start", "result", "end", "error"]


class RecognitionAlternative(BaseModel):
    """One alternative transcript inside a recognition result."""

    transcript: str = ""


class RecognitionResult(BaseModel):
    """A recognizer result carrying one or more alternative transcripts."""

    model_config = ConfigDict(populate_by_name=True)

    transcript: str = ""
    transcripts: list[RecognitionAlternative] | None = None
    is_final: bool | None = Field(default=False, alias="isFinal")

    @field_validator("transcripts", mode="before")
    @classmethod
    def _wrap_plain_strings(cls, value):
        if isinstance(value, list):
            return [{"transcript": item} if isinstance(item, str) else item for item in value]
        return value

    def alternatives(self) -> list[str]:
        """Return non-empty transcripts; ``transcript`` is used when no list is present."""

        if self.transcripts is not None:
            return [item.transcript for item in self.transcripts if item.transcript]
        return [self.transcript] if self.transcript else []


class RecognitionEvent(BaseModel):
    """Event delivered by a speech engine."""

    type: EventType
    results: list[RecognitionResult] = Field(default_factory=list)
    error: str | None = None


class SessionState(str, Enum):
    IDLE = "idle"
    LISTENING = "listening"
    ENDED = "ended"


class RecognitionSnapshot(BaseModel):
    """Observable state of a recognition session."""

    state: SessionState = SessionState.IDLE
    is_listening: bool = False
    recognized_number: str = ""
    recognized_text: str = ""
    interim_text: str = ""
    error: str = ""
    auto_restart: bool = False
    all_candidate_numbers: list[int] = Field(default_factory=list)
