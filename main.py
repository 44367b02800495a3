"""Pronunciation Practice Runner."""

import random

import orjson
import typer

from coach_fe.phonetic_hints_es import phonetic_hint
from coach_pyutils.errors import CoachError
from coach_pyutils.logging import LogFormat, LoggerConfig, LogLevel, get_logger
from coach_pyutils.text import normalize
from src.practice_pipeline.config import CoachConfig, get_coach_config
from src.practice_pipeline.corpus import load_corpus
from src.practice_pipeline.models import DifficultyLevel, Verdict, Word
from src.practice_pipeline.session import (
    PracticeSession,
    begin_recording,
    finish_recording,
    load_paragraph,
    snapshot,
    start_session,
)

logger = get_logger(__name__, service="cli")

app: typer.Typer = typer.Typer(
    help="Spanish pronunciation practice: hints and transcript scoring", no_args_is_help=True
)

VERDICT_MARKS: dict[Verdict, str] = {
    Verdict.NEUTRAL: " ",
    Verdict.CORRECT: "+",
    Verdict.CLOSE: "~",
    Verdict.POOR: "x",
}


def _setup(*, json_logs: bool) -> CoachConfig:
    """Load configuration and point the log sink at it."""
    config = get_coach_config()
    log_format = LogFormat.JSON if json_logs or config.log_json else LogFormat.STANDARD
    get_logger(
        __name__,
        service="cli",
        config=LoggerConfig(
            level=LogLevel.__members__.get(config.log_level, LogLevel.INFO),
            format_type=log_format,
            service="cli",
        ),
    )
    return config


def _session_for(
    *, config: CoachConfig, text: str | None, level: str | None, seed: int | None
) -> PracticeSession:
    """Build a session from explicit text or from a corpus paragraph."""
    chosen_level = DifficultyLevel.from_string(name=level or config.default_level)
    if text:
        return load_paragraph(text, level=chosen_level)
    corpus = load_corpus(path=config.corpus_path)
    rng = random.Random(seed) if seed is not None else None
    return start_session(corpus, level=chosen_level, rng=rng)


def _echo_words(words: list[Word]) -> None:
    for word in words:
        typer.echo(f"  [{VERDICT_MARKS[word.status]}] {word.original:<20} {word.hint}")


@app.command()
def hint(words: list[str] = typer.Argument(..., help="Spanish words to transliterate")) -> None:
    """Print the pronunciation hint of each word."""
    for word in words:
        typer.echo(f"{word}: {phonetic_hint(normalize(word))}")


@app.command()
def paragraph(
    level: str = typer.Option(None, "--level", help="Beginner, Intermediate or Advanced"),
    seed: int = typer.Option(None, "--seed", help="Random seed for paragraph choice"),
    json_logs: bool = typer.Option(False, "--json-logs", help="Output logs in JSON format"),
) -> None:
    """Print a practice paragraph with the hint of every word."""
    try:
        config = _setup(json_logs=json_logs)
        session = _session_for(config=config, text=None, level=level, seed=seed)
    except CoachError as e:
        logger.error(f"Could not prepare session: {e}")
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"[{session.level.value}] {session.paragraph}\n")
    _echo_words(session.words)


@app.command()
def score(
    transcript: str = typer.Option(..., "--transcript", help="Recognized text of the attempt"),
    text: str = typer.Option(None, "--text", help="Target paragraph; defaults to the corpus"),
    level: str = typer.Option(None, "--level", help="Beginner, Intermediate or Advanced"),
    seed: int = typer.Option(None, "--seed", help="Random seed for paragraph choice"),
    as_json: bool = typer.Option(False, "--json", help="Print the session snapshot as JSON"),
    json_logs: bool = typer.Option(False, "--json-logs", help="Output logs in JSON format"),
) -> None:
    """Score a transcript against a paragraph, word by word."""
    try:
        config = _setup(json_logs=json_logs)
        session = _session_for(config=config, text=text, level=level, seed=seed)
    except CoachError as e:
        logger.error(f"Could not prepare session: {e}")
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    scored = finish_recording(begin_recording(session), transcript)

    if as_json:
        typer.echo(orjson.dumps(snapshot(scored), option=orjson.OPT_INDENT_2).decode("utf-8"))
        return

    typer.echo(f"[{scored.level.value}] {scored.paragraph}\n")
    _echo_words(scored.words)
    if scored.feedback is None:
        typer.echo("\nNo speech in transcript, attempt not evaluated.")
        return

    typer.echo(f"\nScore: {scored.feedback.score}% ({scored.feedback.tier.value})")
    typer.echo(scored.feedback.message)
    if scored.feedback.practice_words:
        typer.echo("Practice: " + ", ".join(w.original for w in scored.feedback.practice_words))


if __name__ == "__main__":
    app()
