"""Recognition session adapter for suji-lens."""

from suji_lens.recognition.base import RecognitionSource
from suji_lens.recognition.models import (
    RecognitionAlternative,
    RecognitionEvent,
    RecognitionResult,
    RecognitionSnapshot,
    SessionState,
)
from suji_lens.recognition.options import RecognitionOptions
from suji_lens.recognition.replay import ReplaySource
from suji_lens.recognition.session import (
    RecognitionSession,
    collect_candidate_numbers,
    rank_candidates,
    select_best_candidate,
)

__all__ = [
    "RecognitionAlternative",
    "RecognitionEvent",
    "RecognitionOptions",
    "RecognitionResult",
    "RecognitionSession",
    "RecognitionSnapshot",
    "RecognitionSource",
    "ReplaySource",
    "SessionState",
    "collect_candidate_numbers",
    "rank_candidates",
    "select_best_candidate",
]
