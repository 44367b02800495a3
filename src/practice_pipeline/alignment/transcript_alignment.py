from collections.abc import Sequence
from typing import Final

from coach_pyutils.logging import get_logger
from coach_pyutils.text import normalize_transcript
from coach_pyutils.word_distance import window_similarities
from src.practice_pipeline.config import AlignmentConfig
from src.practice_pipeline.constants import MAX_SCORE
from src.practice_pipeline.models import AlignmentResult, Verdict, Word

logger = get_logger(__name__)

NO_MATCH: Final[int] = -1


def percent_correct(*, correct_count: int, total: int) -> int:
    """Percentage of correct words, rounded half up to an integer.

    Args:
        correct_count: Number of words judged correct
        total: Number of target words

    Returns:
        Integer score in [0, 100]; 0 for an empty paragraph
    """
    if total <= 0:
        return 0
    return (2 * MAX_SCORE * correct_count + total) // (2 * total)


def _judge_target(
    target: str, *, spoken_words: Sequence[str], start: int, config: AlignmentConfig
) -> tuple[Verdict, int]:
    """Scan the lookahead window for one target word.

    The first candidate above the correct threshold wins immediately. A
    candidate above the close threshold is remembered only if nothing has
    matched yet, and the scan goes on looking for a correct one.

    Args:
        target: Normalized target word
        spoken_words: Normalized transcript tokens
        start: First unconsumed spoken position
        config: Window size and thresholds

    Returns:
        Tuple of (verdict, matched spoken position or NO_MATCH)
    """
    window = spoken_words[start : start + config.window]
    similarities = window_similarities(target, candidates=window)

    verdict = Verdict.POOR
    matched = NO_MATCH
    for offset, score in enumerate(similarities):
        if score > config.correct_threshold:
            return Verdict.CORRECT, start + offset
        if score > config.close_threshold and verdict == Verdict.POOR:
            verdict = Verdict.CLOSE
            matched = start + offset
    return verdict, matched


def align_transcript(
    targets: Sequence[Word], raw_transcript: str, *, config: AlignmentConfig | None = None
) -> AlignmentResult:
    """Judge each target word against a recognized transcript.

    Alignment is greedy and order preserving: a single cursor walks forward
    through the spoken words and a spoken word consumed by one target is
    never offered to a later one. A target without a match leaves the cursor
    where it was.

    Args:
        targets: Target words in paragraph order
        raw_transcript: Final transcript from the speech capture collaborator
        config: Optional window and threshold overrides

    Returns:
        AlignmentResult with one verdict per target and the attempt score. For an
        empty or whitespace-only transcript the targets are returned unchanged
        and the score is None.
    """
    effective_config = config or AlignmentConfig()

    if not raw_transcript.strip():
        logger.debug("Empty transcript, attempt not evaluated")
        return AlignmentResult(words=list(targets), score=None)

    spoken_words = normalize_transcript(raw_transcript)

    judged: list[Word] = []
    matched_positions: list[int | None] = []
    spoken_index = 0

    for target in targets:
        verdict, matched = _judge_target(
            target.normalized,
            spoken_words=spoken_words,
            start=spoken_index,
            config=effective_config,
        )
        if matched != NO_MATCH:
            spoken_index = matched + 1
            matched_positions.append(matched)
        else:
            matched_positions.append(None)
        judged.append(target.with_status(verdict))

    correct_count = sum(1 for word in judged if word.status == Verdict.CORRECT)
    score = percent_correct(correct_count=correct_count, total=len(judged))

    logger.debug(
        f"Aligned {len(judged)} targets against {len(spoken_words)} spoken words: "
        f"{correct_count} correct, score {score}"
    )
    return AlignmentResult(
        words=judged,
        score=score,
        matched_positions=matched_positions,
        spoken_words=spoken_words,
    )
