"""Custom exceptions for suji-lens."""


class SujiLensError(Exception):
    """Base exception for suji-lens."""

    pass


class LexiconError(SujiLensError):
    """Raised when a lexicon version or corrections file cannot be loaded."""

    pass


class RecognitionError(SujiLensError):
    """Raised by a recognition source when the speech engine fails."""

    pass


class PermissionDeniedError(RecognitionError):
    """Raised when microphone or speech recognition permission is denied."""

    pass


class RecognitionBusyError(RecognitionError):
    """Raised when the speech engine is already running or unavailable."""

    pass


class PracticeError(SujiLensError):
    """Raised when a practice session record cannot be written."""

    pass
