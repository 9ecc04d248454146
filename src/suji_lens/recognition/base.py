"""Base recognition source interface."""

from abc import ABC, abstractmethod
from collections.abc import Iterator

from suji_lens.recognition.models import RecognitionEvent
from suji_lens.recognition.options import RecognitionOptions


class RecognitionSource(ABC):
    """Abstract base class for speech engines feeding a recognition session."""

    @abstractmethod
    def start(self, options: RecognitionOptions) -> None:
        """Start recognition.

        Args:
            options: Engine options (language, alternatives, contextual strings)

        Raises:
            RecognitionError: If the engine cannot start
        """
        pass

    @abstractmethod
    def stop(self) -> None:
        """Stop recognition; the engine is expected to deliver an ``end`` event."""
        pass

    @abstractmethod
    def events(self) -> Iterator[RecognitionEvent]:
        """Yield engine events in delivery order."""
        pass

    def request_permissions(self) -> bool:
        """Ask for microphone and speech permission; ``False`` blocks start."""
        return True
