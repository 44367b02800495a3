"""Speech collaborator contracts for the pronunciation practice pipeline.

Capture (speech-to-text) and playback (text-to-speech) live outside the
scoring core. This module defines the protocols they implement, the
requests the practice session sends to them, voice selection, and the
playback controller that keeps at most one utterance playing at a time.
"""

import asyncio
import contextlib
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Final, Protocol

from coach_pyutils.errors import PlaybackError
from coach_pyutils.logging import get_logger
from src.practice_pipeline.config import CoachConfig, get_coach_config
from src.practice_pipeline.constants import (
    NORMAL_SPEECH_RATE,
    PREFERRED_VOICE_MARKERS,
    SPANISH_LANG_PREFIX,
    SPEECH_LANG,
)
from src.practice_pipeline.models import Word

logger = get_logger(__name__)

UNSUPPORTED_RECOGNITION_MESSAGE: Final[str] = (
    "Speech recognition is not available on this platform, so spoken attempts "
    "cannot be scored. Listening to the native reading still works if speech "
    "synthesis is available."
)


@dataclass(frozen=True)
class Voice:
    """A synthesis voice offered by the playback collaborator.

    Attributes:
        name: Display name, e.g. "Google español".
        lang: BCP 47 language tag, e.g. "es-MX".
    """

    name: str
    lang: str


@dataclass(frozen=True)
class SpeechCapabilities:
    """Platform speech features, detected by the host and injected here.

    Attributes:
        recognition: Whether a speech-to-text collaborator is available.
        synthesis: Whether a text-to-speech collaborator is available.
    """

    recognition: bool = True
    synthesis: bool = True

    @property
    def unsupported_message(self) -> str | None:
        """Message for the presentation layer when attempts cannot be captured."""
        return None if self.recognition else UNSUPPORTED_RECOGNITION_MESSAGE


@dataclass(frozen=True)
class PlaybackRequest:
    """Text to be spoken by the playback collaborator.

    Attributes:
        text: Text to speak, with its original punctuation.
        voice: Voice to use, or None for the collaborator default.
        rate: Speech rate multiplier.
        lang: Language tag of the utterance.
    """

    text: str
    voice: Voice | None = None
    rate: float = NORMAL_SPEECH_RATE
    lang: str = SPEECH_LANG


class SpeechCapture(Protocol):
    """Protocol for a speech-to-text collaborator."""

    async def capture(self) -> str:
        """Record one attempt and return its final transcript.

        Returns:
            Final recognized segments joined by spaces, possibly with trailing whitespace

        Raises:
            CaptureError: On permission denial, no speech detected, or similar
        """
        ...


class SpeechPlayback(Protocol):
    """Protocol for a text-to-speech collaborator."""

    async def speak(self, request: PlaybackRequest) -> None:
        """Speak the request; cancellation must stop the audio.

        Args:
            request: What to speak and how

        Raises:
            PlaybackError: If synthesis is unavailable
        """
        ...


def pick_spanish_voice(voices: Sequence[Voice]) -> Voice | None:
    """Choose the default voice for Spanish playback.

    Args:
        voices: All voices offered by the platform

    Returns:
        The first Spanish voice whose name mentions a preferred marker, else the
        first Spanish voice, or None when there is no Spanish voice
    """
    spanish = [voice for voice in voices if voice.lang.startswith(SPANISH_LANG_PREFIX)]
    if not spanish:
        return None
    for voice in spanish:
        if any(marker in voice.name for marker in PREFERRED_VOICE_MARKERS):
            return voice
    return spanish[0]


def word_playback(
    word: Word,
    *,
    voice: Voice | None = None,
    slow: bool = False,
    config: CoachConfig | None = None,
) -> PlaybackRequest:
    """Build a playback request for a single target word.

    Args:
        word: Target word; its original text is spoken
        voice: Voice to use, or None for the collaborator default
        slow: Use the slow practice rate instead of the normal one
        config: Rates and language; defaults to the environment configuration

    Returns:
        Playback request for the word
    """
    effective_config = config or get_coach_config()
    rate = effective_config.slow_rate if slow else effective_config.normal_rate
    return PlaybackRequest(
        text=word.original, voice=voice, rate=rate, lang=effective_config.speech_lang
    )


def paragraph_playback(
    paragraph: str, *, voice: Voice | None = None, config: CoachConfig | None = None
) -> PlaybackRequest:
    """Build a playback request for the native reading of a paragraph."""
    effective_config = config or get_coach_config()
    return PlaybackRequest(
        text=paragraph,
        voice=voice,
        rate=effective_config.normal_rate,
        lang=effective_config.speech_lang,
    )


class PlaybackController:
    """Runs playback requests so that a new request interrupts the current one.

    Args:
        playback: Text-to-speech collaborator
    """

    def __init__(self, *, playback: SpeechPlayback) -> None:
        self._playback = playback
        self._current: asyncio.Task[None] | None = None

    @property
    def playing(self) -> bool:
        """Whether an utterance is currently in flight."""
        return self._current is not None and not self._current.done()

    async def play(self, request: PlaybackRequest) -> asyncio.Task[None]:
        """Cancel any in-flight playback and start speaking the request.

        Args:
            request: What to speak

        Returns:
            Task running the new playback; awaiting it never raises PlaybackError
        """
        await self.stop()
        self._current = asyncio.create_task(self._speak(request))
        return self._current

    async def stop(self) -> None:
        """Cancel the in-flight playback, if any, and wait for it to unwind."""
        current = self._current
        self._current = None
        if current is None or current.done():
            return
        current.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await current

    async def _speak(self, request: PlaybackRequest) -> None:
        try:
            await self._playback.speak(request)
        except PlaybackError as e:
            logger.warning(f"Playback failed for '{request.text[:40]}': {e}")
