"""Configuration for the pronunciation practice pipeline.

Provides a typed configuration model with environment-backed defaults and
an accessor that caches the loaded configuration for reuse. The ``.env`` file
at the project root is loaded once at import.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Annotated, Final

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator

from coach_pyutils.errors import ConfigurationError
from src.practice_pipeline.constants import (
    CLOSE_SIMILARITY_THRESHOLD,
    CORRECT_SIMILARITY_THRESHOLD,
    DEFAULT_CORPUS_PATH,
    LOOKAHEAD_WINDOW,
    NORMAL_SPEECH_RATE,
    SLOW_SPEECH_RATE,
    SPEECH_LANG,
)

_PROJECT_ROOT: Final[Path] = Path(__file__).parent.parent.parent
_ENV_FILE: Final[Path] = _PROJECT_ROOT / ".env"

load_dotenv(_ENV_FILE)

SpeechRate = Annotated[float, Field(ge=0.1, le=2.0)]


@dataclass(frozen=True)
class AlignmentConfig:
    """Configuration for transcript alignment.

    Attributes:
        window: Number of unconsumed spoken words examined per target word
        correct_threshold: Similarity strictly above which a word is correct
        close_threshold: Similarity strictly above which a word is close
    """

    window: int = LOOKAHEAD_WINDOW
    correct_threshold: float = CORRECT_SIMILARITY_THRESHOLD
    close_threshold: float = CLOSE_SIMILARITY_THRESHOLD

    def __post_init__(self) -> None:
        if self.window < 1:
            raise ConfigurationError(details=f"alignment window must be positive, got {self.window}")
        if not 0.0 <= self.close_threshold <= self.correct_threshold <= 1.0:
            raise ConfigurationError(
                details=(
                    "thresholds must satisfy 0 <= close <= correct <= 1, got "
                    f"close={self.close_threshold}, correct={self.correct_threshold}"
                )
            )


class CoachConfig(BaseModel):
    """Pydantic configuration model for the practice pipeline."""

    log_level: str = "INFO"
    log_json: bool = False
    corpus_path: Path = DEFAULT_CORPUS_PATH
    default_level: str = "Beginner"
    normal_rate: SpeechRate = NORMAL_SPEECH_RATE
    slow_rate: SpeechRate = SLOW_SPEECH_RATE
    speech_lang: str = SPEECH_LANG

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize the log level name to upper case."""
        return v.upper()

    @classmethod
    def from_env(cls) -> CoachConfig:
        """Build the configuration from environment variables.

        Raises:
            ConfigurationError: If a value is outside its accepted range
        """

        def _float(name: str, default: float) -> float:
            try:
                return float(os.getenv(name, str(default)))
            except (ValueError, TypeError):
                return default

        def _bool(name: str, default: bool) -> bool:
            v = os.getenv(name)
            if v is None:
                return default
            return v.lower() in {"1", "true", "yes", "on"}

        try:
            return cls(
                log_level=os.getenv("LOG_LEVEL", "INFO"),
                log_json=_bool("LOG_JSON", False),
                corpus_path=Path(os.getenv("COACH_CORPUS_PATH", str(DEFAULT_CORPUS_PATH))),
                default_level=os.getenv("COACH_DEFAULT_LEVEL", "Beginner"),
                normal_rate=_float("COACH_NORMAL_RATE", NORMAL_SPEECH_RATE),
                slow_rate=_float("COACH_SLOW_RATE", SLOW_SPEECH_RATE),
                speech_lang=os.getenv("COACH_SPEECH_LANG", SPEECH_LANG),
            )
        except ValidationError as e:
            raise ConfigurationError(details=str(e)) from e


@lru_cache(maxsize=1)
def get_coach_config() -> CoachConfig:
    """Load and cache the practice configuration from environment."""
    return CoachConfig.from_env()
