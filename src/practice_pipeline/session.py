"""Practice session state for the pronunciation practice pipeline.

A PracticeSession is an immutable snapshot of everything the presentation
layer shows: the paragraph and its judged words, the latest score and
feedback, and the interaction state (recording flag, selected voice, hovered
word). Every operation returns a new session, so no state is shared between
callers.
"""

import random
import uuid
from dataclasses import dataclass, field, replace
from typing import Any

from coach_pyutils.errors import CaptureError
from coach_pyutils.logging import get_logger
from src.practice_pipeline.alignment.transcript_alignment import align_transcript
from src.practice_pipeline.config import AlignmentConfig
from src.practice_pipeline.corpus import ParagraphCorpus, choose_paragraph
from src.practice_pipeline.models import (
    DifficultyLevel,
    FeedbackSummary,
    Word,
    build_targets,
    reset_statuses,
)
from src.practice_pipeline.rules.feedback import summarize
from src.practice_pipeline.speech import SpeechCapture, Voice

logger = get_logger(__name__)


@dataclass(frozen=True)
class PracticeSession:
    """State of one learner practicing one paragraph.

    Attributes:
        level: Difficulty level the paragraph was drawn from.
        paragraph: Paragraph text as authored.
        words: Target words with their latest verdicts.
        score: Latest attempt score, None until an attempt is evaluated.
        feedback: Latest attempt feedback, None until an attempt is evaluated.
        recording: Whether a recording is in progress.
        selected_voice: Voice used for playback, None for the platform default.
        hovered_index: Index of the word whose hint is shown, if any.
        session_id: Identifier used for log context.
    """

    level: DifficultyLevel
    paragraph: str
    words: list[Word]
    score: int | None = None
    feedback: FeedbackSummary | None = None
    recording: bool = False
    selected_voice: Voice | None = None
    hovered_index: int | None = None
    session_id: str = field(default_factory=lambda: uuid.uuid4().hex)


def load_paragraph(
    paragraph: str,
    *,
    level: DifficultyLevel = DifficultyLevel.BEGINNER,
    selected_voice: Voice | None = None,
) -> PracticeSession:
    """Start a session on a given paragraph text.

    Args:
        paragraph: Paragraph text
        level: Level the paragraph belongs to
        selected_voice: Voice carried over from a previous session

    Returns:
        Session with neutral words and no score
    """
    return PracticeSession(
        level=level,
        paragraph=paragraph,
        words=build_targets(paragraph),
        selected_voice=selected_voice,
    )


def start_session(
    corpus: ParagraphCorpus,
    *,
    level: DifficultyLevel = DifficultyLevel.BEGINNER,
    rng: random.Random | None = None,
    selected_voice: Voice | None = None,
) -> PracticeSession:
    """Start a session on a random paragraph of the requested level."""
    paragraph = choose_paragraph(corpus, level=level, rng=rng)
    session = load_paragraph(paragraph, level=level, selected_voice=selected_voice)
    logger.info(f"Started session {session.session_id[:8]} at {level.value}, {len(session.words)} words")
    return session


def new_paragraph(
    session: PracticeSession,
    corpus: ParagraphCorpus,
    *,
    level: DifficultyLevel | None = None,
    rng: random.Random | None = None,
) -> PracticeSession:
    """Replace the paragraph, keeping the selected voice.

    Args:
        session: Current session
        corpus: Paragraph corpus
        level: New level, or None to stay on the current one
        rng: Optional random source

    Returns:
        Fresh session; words, score and feedback are replaced wholesale
    """
    return start_session(
        corpus,
        level=level or session.level,
        rng=rng,
        selected_voice=session.selected_voice,
    )


def begin_recording(session: PracticeSession) -> PracticeSession:
    """Enter recording: every verdict goes back to neutral and feedback is cleared."""
    return replace(
        session,
        words=reset_statuses(session.words),
        feedback=None,
        recording=True,
    )


def abort_recording(session: PracticeSession) -> PracticeSession:
    """Leave recording after a capture failure without touching anything else."""
    return replace(session, recording=False)


def finish_recording(
    session: PracticeSession, transcript: str, *, config: AlignmentConfig | None = None
) -> PracticeSession:
    """Leave recording and score the final transcript.

    An empty transcript is not an attempt: the words keep their current
    verdicts and the previous score stays in place.

    Args:
        session: Session in recording state
        transcript: Final transcript from the capture collaborator
        config: Optional alignment overrides

    Returns:
        Session carrying the new verdicts, score and feedback
    """
    with logger.session_context(session_id=session.session_id, level=session.level.value):
        result = align_transcript(session.words, transcript, config=config)
        if result.score is None:
            logger.info("Recording ended without a transcript, keeping previous state")
            return replace(session, recording=False)

        feedback = summarize(result.words, result.score)
        logger.info(
            f"Attempt scored {result.score} ({feedback.tier.value}), "
            f"{len(feedback.practice_words)} practice word(s)"
        )
        return replace(
            session,
            words=result.words,
            score=result.score,
            feedback=feedback,
            recording=False,
        )


async def run_attempt(
    session: PracticeSession,
    capture: SpeechCapture,
    *,
    config: AlignmentConfig | None = None,
) -> PracticeSession:
    """Record and score one attempt through a capture collaborator.

    Args:
        session: Current session
        capture: Speech-to-text collaborator
        config: Optional alignment overrides

    Returns:
        Scored session, or the reset session with recording cleared if capture failed
    """
    recording = begin_recording(session)
    try:
        transcript = await capture.capture()
    except CaptureError as e:
        logger.warning(f"Speech capture failed ({e.reason}), attempt not scored")
        return abort_recording(recording)
    return finish_recording(recording, transcript, config=config)


def hover(session: PracticeSession, index: int | None) -> PracticeSession:
    """Show the hint of a word, or hide it with None. Out of range indices hide it."""
    if index is not None and not 0 <= index < len(session.words):
        index = None
    return replace(session, hovered_index=index)


def select_voice(session: PracticeSession, voice: Voice | None) -> PracticeSession:
    """Choose the playback voice."""
    return replace(session, selected_voice=voice)


def snapshot(session: PracticeSession) -> dict[str, Any]:
    """Serialize the session for the presentation layer.

    Returns:
        JSON compatible mapping of the session state
    """
    return {
        "session_id": session.session_id,
        "level": session.level.value,
        "paragraph": session.paragraph,
        "words": [
            {
                "original": word.original,
                "normalized": word.normalized,
                "hint": word.hint,
                "status": word.status.value,
            }
            for word in session.words
        ],
        "score": session.score,
        "feedback": session.feedback.to_json() if session.feedback else None,
        "recording": session.recording,
        "selected_voice": session.selected_voice.name if session.selected_voice else None,
        "hovered_index": session.hovered_index,
    }
