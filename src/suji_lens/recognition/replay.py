"""Recognition source replaying recorded engine events."""

from __future__ import annotations

import json
from collections.abc import Iterable, Iterator
from pathlib import Path

from suji_lens.exceptions import RecognitionError
from suji_lens.recognition.base import RecognitionSource
from suji_lens.recognition.models import RecognitionEvent
from suji_lens.recognition.options import RecognitionOptions


class ReplaySource(RecognitionSource):
    """Replays events captured from a speech engine, e.g. for offline evaluation."""

    def __init__(self, events: Iterable[RecognitionEvent | dict], *, permission_granted: bool = True):
        self._events = [
            event if isinstance(event, RecognitionEvent) else RecognitionEvent.model_validate(event)
            for event in events
        ]
        self.permission_granted = permission_granted
        self.options: RecognitionOptions | None = None
        self.start_count = 0
        self.stop_count = 0

    @classmethod
    def from_jsonl(cls, path: str | Path) -> "ReplaySource":
        """Load one JSON event per line; blank lines are skipped."""

        path = Path(path)
        if not path.exists():
            raise RecognitionError(f"Replay file not found: {path}")

        events = []
        for line_no, line in enumerate(path.read_text(encoding="utf-8").splitlines(), start=1):
            if not line.strip():
                continue
            try:
                events.append(json.loads(line))
            except json.JSONDecodeError as exc:
                raise RecognitionError(f"Invalid event at {path}:{line_no}: {exc}") from exc
        return cls(events)

    def request_permissions(self) -> bool:
        return self.permission_granted

    def start(self, options: RecognitionOptions) -> None:
        self.options = options
        self.start_count += 1

    def stop(self) -> None:
        self.stop_count += 1

    def events(self) -> Iterator[RecognitionEvent]:
        yield from self._events
