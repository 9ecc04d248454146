"""Tests for the recognition session state machine."""

import pytest

from suji_lens.exceptions import RecognitionBusyError, RecognitionError
from suji_lens.interpretation import NumberInterpreter
from suji_lens.recognition import (
    RecognitionEvent,
    RecognitionResult,
    RecognitionSession,
    ReplaySource,
    SessionState,
    collect_candidate_numbers,
    rank_candidates,
    select_best_candidate,
)
from suji_lens.recognition.session import PERMISSION_DENIED_MESSAGE

ALTERNATIVES = ["にじゅう", "にじゅうさん", "に", "じゅうさん"]


@pytest.fixture(scope="module")
def interpreter():
    return NumberInterpreter()


def result_event(transcripts, is_final):
    return {"type": "result", "results": [{"transcripts": transcripts, "isFinal": is_final}]}


def test_collect_candidate_numbers(interpreter):
    results = [RecognitionResult(transcripts=ALTERNATIVES)]

    assert collect_candidate_numbers(results, interpreter) == [20, 23, 2, 13]


def test_collect_candidate_numbers_skips_unmapped_and_duplicates(interpreter):
    results = [RecognitionResult(transcripts=["abc", "に", "二"])]

    assert collect_candidate_numbers(results, interpreter) == [2]


def test_rank_candidates_orders_by_score(interpreter):
    ranked = rank_candidates([RecognitionResult(transcripts=ALTERNATIVES)], interpreter)
    transcripts = [candidate.transcript for candidate in ranked]

    assert transcripts[0] == "にじゅうさん"
    assert transcripts.index("にじゅうさん") < transcripts.index("に")


def test_select_best_candidate_empty(interpreter):
    assert select_best_candidate([], interpreter) is None


def test_select_best_candidate_uses_interpreter_score(mocker):
    interpreter = mocker.MagicMock()
    interpreter.score.side_effect = lambda text: {"a": 1.0, "b": 3.0}[text]

    best = select_best_candidate([RecognitionResult(transcripts=["a", "b"], is_final=True)], interpreter)

    assert best.transcript == "b"
    assert best.score == 3.0
    assert best.is_final is True


def test_final_result_sets_recognized_number(interpreter):
    source = ReplaySource([{"type": "start"}, result_event(ALTERNATIVES, True), {"type": "end"}])
    session = RecognitionSession(source, interpreter=interpreter)

    assert session.start() is True
    snapshot = session.run()

    assert snapshot.state == SessionState.ENDED
    assert snapshot.is_listening is False
    assert snapshot.recognized_text == "にじゅうさん"
    assert snapshot.recognized_number == "23"
    assert snapshot.interim_text == ""
    assert snapshot.all_candidate_numbers == [20, 23, 2, 13]


def test_interim_then_final(interpreter):
    source = ReplaySource(
        [
            {"type": "start"},
            result_event(["さん"], False),
        ]
    )
    session = RecognitionSession(source, interpreter=interpreter)
    session.start()
    session.run()

    interim = session.snapshot
    assert interim.state == SessionState.LISTENING
    assert interim.interim_text == "さん"
    assert interim.recognized_number == "3"
    assert interim.recognized_text == ""

    session.handle_event(RecognitionEvent.model_validate(result_event(["さんじゅう"], True)))

    final = session.snapshot
    assert final.interim_text == ""
    assert final.recognized_text == "さんじゅう"
    assert final.recognized_number == "30"


def test_result_without_alternatives_is_ignored(interpreter):
    session = RecognitionSession(ReplaySource([]), interpreter=interpreter)
    session.start()

    session.handle_event(RecognitionEvent.model_validate(result_event([], True)))

    snapshot = session.snapshot
    assert snapshot.recognized_text == ""
    assert snapshot.all_candidate_numbers == []


def test_snapshot_is_a_copy(interpreter):
    session = RecognitionSession(ReplaySource([]), interpreter=interpreter)

    snapshot = session.snapshot
    snapshot.all_candidate_numbers.append(1)

    assert session.snapshot.all_candidate_numbers == []


def test_start_passes_options_to_source(interpreter):
    source = ReplaySource([])
    session = RecognitionSession(source, interpreter=interpreter)

    session.start()

    assert source.options is session.options
    assert source.options.lang == "ja-JP"


def test_permission_denied(interpreter):
    source = ReplaySource([], permission_granted=False)
    session = RecognitionSession(source, interpreter=interpreter)

    assert session.start() is False
    assert session.state == SessionState.ENDED
    assert session.snapshot.error == PERMISSION_DENIED_MESSAGE
    assert source.start_count == 0


def test_busy_engine_is_reported(interpreter, mocker):
    source = ReplaySource([])
    mocker.patch.object(source, "start", side_effect=RecognitionBusyError("engine busy"))
    session = RecognitionSession(source, interpreter=interpreter)

    assert session.start() is False
    assert session.state == SessionState.ENDED
    assert session.snapshot.error == "engine busy"


def test_stop_failure_is_recorded(interpreter, mocker):
    source = ReplaySource([])
    mocker.patch.object(source, "stop", side_effect=RecognitionError("stuck"))
    session = RecognitionSession(source, interpreter=interpreter)
    session.start()

    session.stop()

    assert session.state == SessionState.ENDED
    assert session.snapshot.error == "stuck"


def test_error_event_ends_session(interpreter, caplog):
    source = ReplaySource([{"type": "start"}, {"type": "error", "error": "network"}])
    session = RecognitionSession(source, interpreter=interpreter)
    session.start()

    snapshot = session.run()

    assert snapshot.state == SessionState.ENDED
    assert snapshot.error == "Speech recognition failed: network"
    assert "recognition failed" in caplog.text


def test_auto_restart_on_end(interpreter):
    source = ReplaySource([{"type": "start"}, {"type": "end"}])
    session = RecognitionSession(source, interpreter=interpreter, auto_restart=True)
    session.start()

    snapshot = session.run()

    assert snapshot.state == SessionState.LISTENING
    assert snapshot.is_listening is True
    assert source.start_count == 2


def test_stop_disables_auto_restart(interpreter):
    source = ReplaySource([{"type": "end"}])
    session = RecognitionSession(source, interpreter=interpreter, auto_restart=True)
    session.start()

    session.stop()
    session.run()

    assert session.state == SessionState.ENDED
    assert session.snapshot.auto_restart is False
    assert source.start_count == 1
    assert source.stop_count == 1


def test_set_auto_restart(interpreter):
    session = RecognitionSession(ReplaySource([]), interpreter=interpreter)

    session.set_auto_restart(True)

    assert session.snapshot.auto_restart is True


def test_clear_results(interpreter):
    source = ReplaySource([result_event(["に"], True)])
    session = RecognitionSession(source, interpreter=interpreter)
    session.start()
    session.run()

    session.clear_results()

    snapshot = session.snapshot
    assert snapshot.recognized_number == ""
    assert snapshot.recognized_text == ""
    assert snapshot.all_candidate_numbers == []
    assert snapshot.state == SessionState.LISTENING


def test_unmapped_interim_keeps_previous_number(interpreter):
    source = ReplaySource(
        [
            {"type": "start"},
            result_event(["さん"], False),
            result_event(["abc"], False),
        ]
    )
    session = RecognitionSession(source, interpreter=interpreter)
    session.start()

    snapshot = session.run()

    assert snapshot.interim_text == "abc"
    assert snapshot.recognized_number == "3"


def test_unmapped_final_shows_transcript(interpreter):
    source = ReplaySource([result_event(["abc"], True)])
    session = RecognitionSession(source, interpreter=interpreter)
    session.start()

    snapshot = session.run()

    assert snapshot.recognized_text == "abc"
    assert snapshot.recognized_number == "abc"
