"""Answer checking for spoken-number practice rounds."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Sequence

from suji_lens.cards import MathCard
from suji_lens.exceptions import PracticeError

logger = logging.getLogger(__name__)


class PracticeRecorder(ABC):
    """Persistence interface for practice sessions."""

    @abstractmethod
    def start_session(self, *, card_set_id: int | None = None) -> int:
        """Record the start of a practice session.

        Args:
            card_set_id: Card set being practised, if any

        Returns:
            Identifier of the new session

        Raises:
            PracticeError: If the session cannot be recorded
        """
        pass

    @abstractmethod
    def end_session(self, session_id: int, *, is_correct: bool, user_answer: int | None) -> None:
        """Record the outcome of a practice session.

        Raises:
            PracticeError: If the outcome cannot be recorded
        """
        pass


def answer_matches(expected: int, candidates: Sequence[int]) -> bool:
    """Return ``True`` when any recognized candidate equals the expected answer."""

    return expected in candidates


class PracticeRound:
    """One card: start a session, check the spoken answer, record the outcome once."""

    def __init__(
        self,
        expected_answer: int,
        recorder: PracticeRecorder | None = None,
        card_set_id: int | None = None,
        card: MathCard | None = None,
    ):
        self.expected_answer = expected_answer
        self.card = card
        self.recorder = recorder
        self.card_set_id = card_set_id
        self.session_id: int | None = None
        self.is_correct: bool | None = None
        self.user_answer: int | None = None
        self._ended = False

    @classmethod
    def from_card(
        cls,
        card: MathCard,
        recorder: PracticeRecorder | None = None,
        card_set_id: int | None = None,
    ) -> "PracticeRound":
        return cls(card.answer, recorder=recorder, card_set_id=card_set_id, card=card)

    def begin(self) -> int | None:
        if self.recorder is None or self.session_id is not None:
            return self.session_id
        try:
            self.session_id = self.recorder.start_session(card_set_id=self.card_set_id)
        except PracticeError as exc:
            logger.warning("failed to start practice session: %s", exc)
        return self.session_id

    def submit(self, candidate_numbers: Sequence[int]) -> bool:
        self.is_correct = answer_matches(self.expected_answer, candidate_numbers)
        if self.is_correct:
            self.user_answer = self.expected_answer
        else:
            self.user_answer = candidate_numbers[0] if candidate_numbers else None

        self._record_outcome()
        return self.is_correct

    def _record_outcome(self) -> None:
        if self._ended or self.recorder is None or self.session_id is None:
            return
        try:
            self.recorder.end_session(
                self.session_id,
                is_correct=bool(self.is_correct),
                user_answer=self.user_answer,
            )
        except PracticeError as exc:
            logger.warning("failed to record practice session %s: %s", self.session_id, exc)
            return
        self._ended = True
