"""Models for the pronunciation practice pipeline.

This module contains the value objects shared by the aligner, the feedback
rules and the practice session: target words, verdicts, alignment results
and learner feedback.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field, replace
from enum import StrEnum
from typing import Any

from coach_fe.phonetic_hints_es import phonetic_hint
from coach_pyutils.errors import UnknownLevelError
from coach_pyutils.text import normalize, split_words


class Verdict(StrEnum):
    """Per-word judgment of a spoken attempt."""

    NEUTRAL = "neutral"
    CORRECT = "correct"
    CLOSE = "close"
    POOR = "poor"


class ScoreTier(StrEnum):
    """Summary band of an attempt score."""

    EXCELLENT = "excellent"
    GOOD = "good"
    NEEDS_WORK = "needs work"


class DifficultyLevel(StrEnum):
    """Difficulty tiers of the paragraph corpus."""

    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"

    @classmethod
    def from_string(cls, *, name: str) -> "DifficultyLevel":
        """Create a DifficultyLevel from its name, ignoring case.

        Args:
            name: Level name such as "beginner" or "Advanced"

        Returns:
            Matching DifficultyLevel

        Raises:
            UnknownLevelError: If the name is not a known level
        """
        normalized_name = name.strip().lower()
        for level in cls:
            if level.value.lower() == normalized_name:
                return level
        raise UnknownLevelError(
            requested_level=name, supported_levels=[level.value for level in cls]
        )


@dataclass(frozen=True)
class Word:
    """A target word of the loaded paragraph.

    Attributes:
        original: Raw token as authored, punctuation included; used for display and playback.
        normalized: Lower-case, punctuation-stripped form; used for scoring.
        hint: Upper-case phonetic hint.
        status: Latest verdict for this word.
    """

    original: str
    normalized: str
    hint: str
    status: Verdict = Verdict.NEUTRAL

    @classmethod
    def from_token(cls, token: str) -> "Word":
        """Build a neutral target word from one whitespace token."""
        normalized = normalize(token)
        return cls(original=token, normalized=normalized, hint=phonetic_hint(normalized))

    def with_status(self, status: Verdict) -> "Word":
        """Return a copy of this word carrying a new verdict."""
        return replace(self, status=status)


def build_targets(paragraph: str) -> list[Word]:
    """Build the target word sequence for a paragraph.

    Args:
        paragraph: Plain paragraph text

    Returns:
        One neutral Word per whitespace-delimited token, in order
    """
    return [Word.from_token(token) for token in split_words(paragraph)]


def reset_statuses(words: Sequence[Word]) -> list[Word]:
    """Return the words with every verdict reset to neutral."""
    return [word.with_status(Verdict.NEUTRAL) for word in words]


@dataclass(frozen=True)
class AlignmentResult:
    """Result of aligning a transcript against the target words.

    Attributes:
        words: Target words carrying their verdicts (unchanged when not evaluated).
        score: Percentage of targets judged correct, or None when not evaluated.
        matched_positions: Spoken-word position consumed by each target, None if unmatched.
        spoken_words: Normalized transcript tokens that were aligned.
    """

    words: list[Word]
    score: int | None
    matched_positions: list[int | None] = field(default_factory=list)
    spoken_words: list[str] = field(default_factory=list)

    @property
    def evaluated(self) -> bool:
        """Whether the attempt was scored (False for an empty transcript)."""
        return self.score is not None

    @property
    def correct_count(self) -> int:
        """Number of target words judged correct."""
        return sum(1 for word in self.words if word.status == Verdict.CORRECT)


@dataclass(frozen=True)
class FeedbackSummary:
    """Learner facing summary of a scored attempt.

    Attributes:
        score: Attempt score in [0, 100].
        tier: Score band.
        message: Encouragement text for the tier.
        practice_words: Words worth replaying slowly, at most a handful.
        all_good: True when no word was judged poor.
        verdict_counts: Number of words per verdict.
    """

    score: int
    tier: ScoreTier
    message: str
    practice_words: list[Word]
    all_good: bool
    verdict_counts: dict[Verdict, int]

    def to_json(self) -> dict[str, Any]:
        """Serialize the summary to JSON compatible data."""
        return {
            "score": self.score,
            "tier": self.tier.value,
            "message": self.message,
            "practice_words": [word.original for word in self.practice_words],
            "all_good": self.all_good,
            "verdict_counts": {verdict.value: n for verdict, n in self.verdict_counts.items()},
        }
