"""Paragraph corpus for the pronunciation practice pipeline.

Practice paragraphs are grouped by difficulty level and stored as YAML. The
corpus is validated on load so that every level offers at least one usable
paragraph.
"""

import random
from pathlib import Path

import yaml
from pydantic import BaseModel, ValidationError, field_validator, model_validator

from coach_pyutils.errors import CorpusFormatError, MissingCorpusError
from coach_pyutils.logging import get_logger
from src.practice_pipeline.constants import DEFAULT_CORPUS_PATH
from src.practice_pipeline.models import DifficultyLevel

logger = get_logger(__name__)


class ParagraphCorpus(BaseModel):
    """Difficulty-tiered practice paragraphs."""

    paragraphs: dict[DifficultyLevel, list[str]]

    @field_validator("paragraphs")
    @classmethod
    def validate_non_blank(
        cls, v: dict[DifficultyLevel, list[str]]
    ) -> dict[DifficultyLevel, list[str]]:
        """Reject blank paragraphs and strip surrounding whitespace."""
        cleaned: dict[DifficultyLevel, list[str]] = {}
        for level, texts in v.items():
            stripped = [text.strip() for text in texts]
            if any(not text for text in stripped):
                raise ValueError(f"level {level.value} contains a blank paragraph")
            cleaned[level] = stripped
        return cleaned

    @model_validator(mode="after")
    def validate_every_level(self) -> "ParagraphCorpus":
        """Ensure each difficulty level has at least one paragraph."""
        missing = [level.value for level in DifficultyLevel if not self.paragraphs.get(level)]
        if missing:
            raise ValueError(f"no paragraphs for level(s): {', '.join(missing)}")
        return self

    def for_level(self, level: DifficultyLevel) -> list[str]:
        """Paragraphs available for a difficulty level."""
        return list(self.paragraphs[level])


def load_corpus(*, path: Path = DEFAULT_CORPUS_PATH) -> ParagraphCorpus:
    """Load and validate a paragraph corpus from YAML.

    Args:
        path: YAML file mapping level names to lists of paragraphs.

    Returns:
        Validated ParagraphCorpus.

    Raises:
        MissingCorpusError: If the file does not exist.
        CorpusFormatError: If the file is not valid YAML or fails validation.
    """
    if not path.exists():
        raise MissingCorpusError(path=str(path))

    try:
        with open(path, encoding="utf-8") as f:
            raw = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise CorpusFormatError(path=str(path), reason=str(e)) from e

    if not isinstance(raw, dict):
        raise CorpusFormatError(path=str(path), reason="top level must map levels to paragraphs")

    try:
        corpus = ParagraphCorpus.model_validate({"paragraphs": raw})
    except ValidationError as e:
        raise CorpusFormatError(path=str(path), reason=str(e)) from e

    logger.debug(
        f"Loaded corpus {path} with "
        + ", ".join(f"{level.value}={len(texts)}" for level, texts in corpus.paragraphs.items())
    )
    return corpus


def choose_paragraph(
    corpus: ParagraphCorpus, *, level: DifficultyLevel, rng: random.Random | None = None
) -> str:
    """Pick a paragraph of the given level uniformly at random.

    Args:
        corpus: Paragraph corpus.
        level: Difficulty level to draw from.
        rng: Optional random source, for reproducible selection.

    Returns:
        Paragraph text.
    """
    chooser = rng or random.Random()
    return chooser.choice(corpus.for_level(level))
