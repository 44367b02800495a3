"""
Attempt feedback rules for the pronunciation practice pipeline.

This module turns a scored attempt into the summary shown to the learner:
the score tier with its message, and the words worth practicing again.
"""

from collections import Counter
from collections.abc import Sequence
from types import MappingProxyType
from typing import Final

from src.practice_pipeline.constants import (
    EXCELLENT_MIN_SCORE,
    GOOD_MIN_SCORE,
    PRACTICE_WORD_LIMIT,
)
from src.practice_pipeline.models import FeedbackSummary, ScoreTier, Verdict, Word

TIER_MESSAGES: Final[MappingProxyType[ScoreTier, str]] = MappingProxyType(
    {
        ScoreTier.EXCELLENT: "¡Excelente! Your pronunciation is very clear.",
        ScoreTier.GOOD: "Very Good! You're getting there, just watch a few specific words.",
        ScoreTier.NEEDS_WORK: "Good effort. Try to slow down and focus on the red words.",
    }
)

PRACTICE_VERDICTS: Final[frozenset[Verdict]] = frozenset([Verdict.POOR, Verdict.CLOSE])


def score_tier(score: int) -> ScoreTier:
    """Band an attempt score.

    Args:
        score: Attempt score in [0, 100]

    Returns:
        EXCELLENT from 90, GOOD from 70, NEEDS_WORK below
    """
    if score >= EXCELLENT_MIN_SCORE:
        return ScoreTier.EXCELLENT
    if score >= GOOD_MIN_SCORE:
        return ScoreTier.GOOD
    return ScoreTier.NEEDS_WORK


def practice_words(words: Sequence[Word], *, limit: int = PRACTICE_WORD_LIMIT) -> list[Word]:
    """Pick the poor or close words to replay, in paragraph order.

    Args:
        words: Judged target words
        limit: Maximum number of words returned

    Returns:
        Up to ``limit`` words judged poor or close
    """
    return [word for word in words if word.status in PRACTICE_VERDICTS][:limit]


def summarize(words: Sequence[Word], score: int) -> FeedbackSummary:
    """Build the learner feedback for a scored attempt.

    Args:
        words: Judged target words
        score: Attempt score

    Returns:
        FeedbackSummary for the presentation layer
    """
    tier = score_tier(score)
    counts = Counter(word.status for word in words)
    return FeedbackSummary(
        score=score,
        tier=tier,
        message=TIER_MESSAGES[tier],
        practice_words=practice_words(words),
        all_good=counts[Verdict.POOR] == 0,
        verdict_counts={verdict: counts[verdict] for verdict in Verdict},
    )
