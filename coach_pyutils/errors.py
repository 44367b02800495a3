from collections.abc import Sequence


class CoachError(Exception):
    """Root class for all distinguished errors raised by this library.

    Args:
        msg: Error message
        retryable: Whether the operation that caused this error can be retried
    """

    def __init__(self, *, msg: str, retryable: bool = True) -> None:
        super().__init__(msg)
        self._retryable = retryable

    @property
    def retryable(self) -> bool:
        """Whether this error indicates a retryable operation."""
        return self._retryable


class ConfigurationError(CoachError):
    """Error for configuration values outside their accepted range.

    Args:
        details: Description of the invalid setting
    """

    def __init__(self, *, details: str) -> None:
        super().__init__(msg=f"Invalid configuration: {details}", retryable=False)


# Corpus Errors
class CorpusError(CoachError):
    """Base class for paragraph corpus errors."""


class MissingCorpusError(CorpusError):
    """Error for a corpus file that does not exist.

    Args:
        path: Location that was looked up
    """

    def __init__(self, *, path: str) -> None:
        super().__init__(msg=f"Paragraph corpus not found: {path}", retryable=False)
        self.path = path


class CorpusFormatError(CorpusError):
    """Error for a corpus file whose content cannot be used.

    Args:
        path: Location of the corpus file
        reason: Why the content was rejected
    """

    def __init__(self, *, path: str, reason: str) -> None:
        super().__init__(msg=f"Malformed paragraph corpus {path}: {reason}", retryable=False)
        self.path = path


class UnknownLevelError(CorpusError):
    """Error for a difficulty level that the corpus does not define.

    Args:
        requested_level: The level name that was requested
        supported_levels: Level names that are available
    """

    def __init__(self, *, requested_level: str, supported_levels: Sequence[str]) -> None:
        supported = ", ".join(supported_levels)
        super().__init__(
            msg=f"Unknown difficulty level '{requested_level}'. Supported levels: {supported}",
            retryable=False,
        )
        self.requested_level = requested_level


# Speech Collaborator Errors
class SpeechError(CoachError):
    """Base class for errors raised by speech capture and playback collaborators."""


class CaptureError(SpeechError):
    """Error from a speech capture session.

    Args:
        reason: Collaborator reported reason (e.g. "not-allowed", "no-speech")
    """

    def __init__(self, *, reason: str) -> None:
        super().__init__(msg=f"Speech recognition error: {reason}")
        self.reason = reason


class PlaybackError(SpeechError):
    """Error from the speech synthesis collaborator.

    Args:
        reason: Collaborator reported reason (e.g. "synthesis-unavailable")
    """

    def __init__(self, *, reason: str) -> None:
        super().__init__(msg=f"Speech synthesis error: {reason}")
        self.reason = reason
