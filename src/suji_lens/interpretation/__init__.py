"""Interpretation of Japanese spoken numerals."""

from suji_lens.interpretation.engine import (
    InterpreterConfig,
    NumberInterpreter,
    extract_number,
    normalize_script,
    score_number_candidate,
)
from suji_lens.interpretation.similarity import similarity
from suji_lens.interpretation.types import Candidate, ExtractionResult

__all__ = [
    "Candidate",
    "ExtractionResult",
    "InterpreterConfig",
    "NumberInterpreter",
    "extract_number",
    "normalize_script",
    "score_number_candidate",
    "similarity",
]
