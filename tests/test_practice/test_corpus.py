"""Tests for loading and sampling the paragraph corpus."""

import random
from pathlib import Path

import pytest

from coach_pyutils.errors import CorpusFormatError, MissingCorpusError
from src.practice_pipeline.corpus import ParagraphCorpus, choose_paragraph, load_corpus
from src.practice_pipeline.models import DifficultyLevel


@pytest.mark.unit
class TestLoadCorpus:
    """Test cases for load_corpus."""

    def test_bundled_corpus(self) -> None:
        corpus = load_corpus()

        for level in DifficultyLevel:
            assert len(corpus.for_level(level)) == 4
        assert corpus.for_level(DifficultyLevel.BEGINNER)[0].startswith("Hola, me llamo Carlos.")

    def test_custom_file(self, corpus_file: Path) -> None:
        corpus = load_corpus(path=corpus_file)
        assert corpus.for_level(DifficultyLevel.ADVANCED) == ["La economía global cambia."]

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(MissingCorpusError) as exc_info:
            load_corpus(path=tmp_path / "nope.yaml")
        assert "nope.yaml" in str(exc_info.value)

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.yaml"
        path.write_text("Beginner: [unclosed\n", encoding="utf-8")

        with pytest.raises(CorpusFormatError):
            load_corpus(path=path)

    def test_top_level_must_be_mapping(self, tmp_path: Path) -> None:
        path = tmp_path / "list.yaml"
        path.write_text("- Hola amigo.\n", encoding="utf-8")

        with pytest.raises(CorpusFormatError) as exc_info:
            load_corpus(path=path)
        assert "top level" in str(exc_info.value)

    def test_missing_level(self, tmp_path: Path) -> None:
        path = tmp_path / "partial.yaml"
        path.write_text("Beginner:\n  - 'Hola.'\nIntermediate:\n  - 'Me gusta.'\n", encoding="utf-8")

        with pytest.raises(CorpusFormatError) as exc_info:
            load_corpus(path=path)
        assert "Advanced" in str(exc_info.value)

    def test_unknown_level_key(self, corpus_file: Path) -> None:
        corpus_file.write_text(
            corpus_file.read_text(encoding="utf-8") + "Expert:\n  - 'Hola.'\n", encoding="utf-8"
        )

        with pytest.raises(CorpusFormatError):
            load_corpus(path=corpus_file)


@pytest.mark.unit
class TestParagraphCorpus:
    """Test cases for ParagraphCorpus validation."""

    def test_paragraphs_are_stripped(self) -> None:
        corpus = ParagraphCorpus.model_validate(
            {
                "paragraphs": {
                    "Beginner": ["  Hola.  "],
                    "Intermediate": ["Casa."],
                    "Advanced": ["Mundo."],
                }
            }
        )
        assert corpus.for_level(DifficultyLevel.BEGINNER) == ["Hola."]

    def test_blank_paragraph_rejected(self) -> None:
        with pytest.raises(ValueError):
            ParagraphCorpus.model_validate(
                {
                    "paragraphs": {
                        "Beginner": ["   "],
                        "Intermediate": ["Casa."],
                        "Advanced": ["Mundo."],
                    }
                }
            )

    def test_empty_level_rejected(self) -> None:
        with pytest.raises(ValueError):
            ParagraphCorpus.model_validate(
                {"paragraphs": {"Beginner": [], "Intermediate": ["Casa."], "Advanced": ["Mundo."]}}
            )

    def test_for_level_returns_copy(self, small_corpus: ParagraphCorpus) -> None:
        small_corpus.for_level(DifficultyLevel.BEGINNER).append("Otra.")
        assert small_corpus.for_level(DifficultyLevel.BEGINNER) == ["Hola amigo."]


@pytest.mark.unit
class TestChooseParagraph:
    """Test cases for choose_paragraph."""

    def test_draws_from_requested_level(self, corpus: ParagraphCorpus) -> None:
        for level in DifficultyLevel:
            assert choose_paragraph(corpus, level=level) in corpus.for_level(level)

    def test_seeded_choice_is_reproducible(self, corpus: ParagraphCorpus) -> None:
        first = choose_paragraph(corpus, level=DifficultyLevel.ADVANCED, rng=random.Random(3))
        second = choose_paragraph(corpus, level=DifficultyLevel.ADVANCED, rng=random.Random(3))
        assert first == second

    def test_every_paragraph_reachable(self, corpus: ParagraphCorpus, rng: random.Random) -> None:
        seen = {choose_paragraph(corpus, level=DifficultyLevel.BEGINNER, rng=rng) for _ in range(200)}
        assert seen == set(corpus.for_level(DifficultyLevel.BEGINNER))
