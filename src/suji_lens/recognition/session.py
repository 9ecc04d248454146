"""Recognition session: turns engine events into numeric candidates."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from suji_lens.exceptions import RecognitionError
from suji_lens.interpretation.engine import NumberInterpreter, get_default_interpreter
from suji_lens.interpretation.types import Candidate
from suji_lens.recognition.base import RecognitionSource
from suji_lens.recognition.models import (
    RecognitionEvent,
    RecognitionResult,
    RecognitionSnapshot,
    SessionState,
)
from suji_lens.recognition.options import RecognitionOptions

logger = logging.getLogger(__name__)

PERMISSION_DENIED_MESSAGE = "Speech recognition permission was not granted"
START_FAILED_MESSAGE = "Failed to start speech recognition"
STOP_FAILED_MESSAGE = "Failed to stop speech recognition"
ENGINE_ERROR_MESSAGE = "Speech recognition failed"


def rank_candidates(
    results: Iterable[RecognitionResult],
    interpreter: NumberInterpreter,
) -> list[Candidate]:
    """Score every alternative of every result, best first."""

    candidates = [
        Candidate(
            transcript=transcript,
            is_final=bool(result.is_final),
            score=interpreter.score(transcript),
        )
        for result in results
        for transcript in result.alternatives()
    ]
    return sorted(candidates, key=lambda candidate: candidate.score, reverse=True)


def select_best_candidate(
    results: Iterable[RecognitionResult],
    interpreter: NumberInterpreter,
) -> Candidate | None:
    """Return the most number-like alternative, or ``None`` for an empty event."""

    ranked = rank_candidates(results, interpreter)
    if not ranked:
        return None
    for position, candidate in enumerate(ranked[:3], start=1):
        logger.debug(
            "candidate %d: %r score=%.2f final=%s",
            position,
            candidate.transcript,
            candidate.score,
            candidate.is_final,
        )
    return ranked[0]


def collect_candidate_numbers(
    results: Iterable[RecognitionResult],
    interpreter: NumberInterpreter,
) -> list[int]:
    """Return the distinct numbers extracted from all alternatives, in arrival order."""

    numbers: list[int] = []
    for result in results:
        for transcript in result.alternatives():
            number = interpreter.interpret(transcript).number
            if number is not None and number not in numbers:
                numbers.append(number)
    return numbers


class RecognitionSession:
    """State machine over a recognition source.

    States move ``IDLE -> LISTENING -> ENDED``; with auto-restart enabled an
    ``end`` event starts the next activation straight away.
    """

    def __init__(
        self,
        source: RecognitionSource,
        *,
        interpreter: NumberInterpreter | None = None,
        options: RecognitionOptions | None = None,
        auto_restart: bool = False,
    ):
        self.source = source
        self.interpreter = interpreter or get_default_interpreter()
        self.options = options or RecognitionOptions()
        self._snapshot = RecognitionSnapshot(auto_restart=auto_restart)

    @property
    def state(self) -> SessionState:
        return self._snapshot.state

    @property
    def snapshot(self) -> RecognitionSnapshot:
        return self._snapshot.model_copy(deep=True)

    def set_auto_restart(self, value: bool) -> None:
        self._snapshot.auto_restart = value

    def start(self) -> bool:
        """Start listening; returns ``False`` when the source refused to start."""

        snapshot = self._snapshot
        snapshot.error = ""
        snapshot.recognized_number = ""
        snapshot.recognized_text = ""
        snapshot.all_candidate_numbers = []

        try:
            if not self.source.request_permissions():
                self._fail(PERMISSION_DENIED_MESSAGE)
                return False
            self.source.start(self.options)
        except RecognitionError as exc:
            self._fail(str(exc) or START_FAILED_MESSAGE)
            return False

        self._enter_listening()
        return True

    def stop(self) -> None:
        self._snapshot.auto_restart = False
        try:
            self.source.stop()
        except RecognitionError as exc:
            logger.warning("recognition stop failed: %s", exc)
            self._snapshot.error = str(exc) or STOP_FAILED_MESSAGE
        self._end()

    def clear_results(self) -> None:
        snapshot = self._snapshot
        snapshot.recognized_number = ""
        snapshot.recognized_text = ""
        snapshot.interim_text = ""
        snapshot.error = ""
        snapshot.all_candidate_numbers = []

    def run(self) -> RecognitionSnapshot:
        """Consume the source's event stream and return the final snapshot."""

        for event in self.source.events():
            self.handle_event(event)
        return self.snapshot

    def handle_event(self, event: RecognitionEvent) -> None:
        if event.type == "start":
            self._enter_listening()
        elif event.type == "result":
            self._on_result(event.results)
        elif event.type == "end":
            self._on_end()
        elif event.type == "error":
            message = f"{ENGINE_ERROR_MESSAGE}: {event.error}" if event.error else ENGINE_ERROR_MESSAGE
            self._fail(message)

    def _on_result(self, results: list[RecognitionResult]) -> None:
        if not results:
            return

        snapshot = self._snapshot
        snapshot.all_candidate_numbers = collect_candidate_numbers(results, self.interpreter)
        logger.debug("candidate numbers: %s", snapshot.all_candidate_numbers)

        best = select_best_candidate(results, self.interpreter)
        if best is None:
            return

        extraction = self.interpreter.interpret(best.transcript)
        if best.is_final:
            snapshot.interim_text = ""
            snapshot.recognized_text = best.transcript
            # Unmapped finals show the transcript itself.
            snapshot.recognized_number = extraction.value
        else:
            snapshot.interim_text = best.transcript
            if extraction.number is not None:
                snapshot.recognized_number = extraction.value

    def _on_end(self) -> None:
        self._end()
        if self._snapshot.auto_restart:
            logger.info("recognition ended, restarting")
            self.start()

    def _enter_listening(self) -> None:
        if self._snapshot.state != SessionState.LISTENING:
            logger.info("recognition started")
        self._snapshot.state = SessionState.LISTENING
        self._snapshot.is_listening = True
        self._snapshot.error = ""

    def _end(self) -> None:
        if self._snapshot.state == SessionState.LISTENING:
            logger.info("recognition ended")
        self._snapshot.state = SessionState.ENDED
        self._snapshot.is_listening = False

    def _fail(self, message: str) -> None:
        logger.warning("recognition failed: %s", message)
        self._snapshot.error = message
        self._end()
