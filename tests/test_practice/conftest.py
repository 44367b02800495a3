"""Pytest configuration and fixtures for the pronunciation practice tests."""

import asyncio
import random
from collections.abc import Generator
from pathlib import Path

import pytest

from coach_pyutils.errors import CaptureError
from src.practice_pipeline.config import get_coach_config
from src.practice_pipeline.corpus import ParagraphCorpus, load_corpus
from src.practice_pipeline.models import Word, build_targets
from src.practice_pipeline.speech import PlaybackRequest


@pytest.fixture
def casa_targets() -> list[Word]:
    """Targets for the three-word paragraph used by most alignment tests."""
    return build_targets("La casa grande.")


@pytest.fixture
def corpus() -> ParagraphCorpus:
    """The bundled paragraph corpus."""
    return load_corpus()


@pytest.fixture
def small_corpus() -> ParagraphCorpus:
    """A corpus with one short paragraph per level."""
    return ParagraphCorpus.model_validate(
        {
            "paragraphs": {
                "Beginner": ["Hola amigo."],
                "Intermediate": ["Me gusta la casa."],
                "Advanced": ["La economía global cambia."],
            }
        }
    )


@pytest.fixture
def rng() -> random.Random:
    """Seeded random source for reproducible paragraph choice."""
    return random.Random(7)


@pytest.fixture
def corpus_file(tmp_path: Path) -> Path:
    """Write a valid corpus YAML to a temporary file."""
    path = tmp_path / "paragraphs.yaml"
    path.write_text(
        "Beginner:\n"
        "  - 'Hola amigo.'\n"
        "Intermediate:\n"
        "  - 'Me gusta la casa.'\n"
        "Advanced:\n"
        "  - 'La economía global cambia.'\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture(autouse=True)
def clear_config_cache() -> Generator[None, None, None]:
    """Drop the cached configuration around each test."""
    get_coach_config.cache_clear()
    yield
    get_coach_config.cache_clear()


class FakeCapture:
    """Speech capture collaborator returning a canned transcript or error."""

    def __init__(self, *, transcript: str = "", error_reason: str | None = None) -> None:
        self.transcript = transcript
        self.error_reason = error_reason
        self.calls = 0

    async def capture(self) -> str:
        self.calls += 1
        if self.error_reason is not None:
            raise CaptureError(reason=self.error_reason)
        return self.transcript


class FakePlayback:
    """Speech playback collaborator that records requests and can block."""

    def __init__(self, *, delay: float = 0.0) -> None:
        self.delay = delay
        self.started: list[PlaybackRequest] = []
        self.finished: list[PlaybackRequest] = []
        self.cancelled: list[PlaybackRequest] = []

    async def speak(self, request: PlaybackRequest) -> None:
        self.started.append(request)
        try:
            await asyncio.sleep(self.delay)
        except asyncio.CancelledError:
            self.cancelled.append(request)
            raise
        self.finished.append(request)


@pytest.fixture
def make_capture() -> type[FakeCapture]:
    """Factory for fake speech capture collaborators."""
    return FakeCapture


@pytest.fixture
def slow_playback() -> FakePlayback:
    """Playback collaborator that keeps speaking until cancelled."""
    return FakePlayback(delay=30.0)


@pytest.fixture
def instant_playback() -> FakePlayback:
    """Playback collaborator that finishes immediately."""
    return FakePlayback()

