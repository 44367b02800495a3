"""Scoring and playback constants for the pronunciation practice pipeline."""

from pathlib import Path
from typing import Final

# Aligner
LOOKAHEAD_WINDOW: Final[int] = 5
CORRECT_SIMILARITY_THRESHOLD: Final[float] = 0.85
CLOSE_SIMILARITY_THRESHOLD: Final[float] = 0.5

# Score tiers (percent of words judged correct)
EXCELLENT_MIN_SCORE: Final[int] = 90
GOOD_MIN_SCORE: Final[int] = 70
MAX_SCORE: Final[int] = 100

PRACTICE_WORD_LIMIT: Final[int] = 5

# Playback
NORMAL_SPEECH_RATE: Final[float] = 0.9
SLOW_SPEECH_RATE: Final[float] = 0.7
SPEECH_LANG: Final[str] = "es-ES"
SPANISH_LANG_PREFIX: Final[str] = "es"
PREFERRED_VOICE_MARKERS: Final[tuple[str, ...]] = ("Google", "Mexico")

DEFAULT_CORPUS_PATH: Final[Path] = Path(__file__).parent / "data" / "paragraphs.yaml"
