"""suji-lens: Interpret Japanese spoken numbers from speech recognition output."""

from suji_lens.interpretation import (
    Candidate,
    ExtractionResult,
    InterpreterConfig,
    NumberInterpreter,
    extract_number,
    score_number_candidate,
    similarity,
)
from suji_lens.cards import CardSetDefinition, MathCard, calculate_accuracy, generate_cards
from suji_lens.practice import PracticeRecorder, PracticeRound, answer_matches

__version__ = "0.1.0"

__all__ = [
    "extract_number",
    "score_number_candidate",
    "similarity",
    "answer_matches",
    "calculate_accuracy",
    "generate_cards",
    "Candidate",
    "CardSetDefinition",
    "ExtractionResult",
    "InterpreterConfig",
    "MathCard",
    "NumberInterpreter",
    "PracticeRecorder",
    "PracticeRound",
    "__version__",
]
