"""Tests for word normalization and transcript tokenization."""

import pytest

from coach_pyutils.text import normalize, normalize_transcript, split_words


@pytest.mark.unit
class TestNormalize:
    """Test cases for normalize."""

    def test_lowercases_and_strips_punctuation(self) -> None:
        assert normalize("Hola,") == "hola"
        assert normalize("(Carlos).") == "carlos"

    def test_keeps_accents_and_enye(self) -> None:
        assert normalize("Pequeña") == "pequeña"
        assert normalize("FÚTBOL") == "fútbol"

    def test_spanish_marks_and_apostrophes_survive(self) -> None:
        """Only the listed symbol characters are removed."""
        assert normalize("¿Qué?") == "¿qué?"
        assert normalize("¡Hola!") == "¡hola"
        assert normalize("it's") == "it's"

    def test_equals_sign_is_removed(self) -> None:
        assert normalize("a=b") == "ab"

    def test_every_removable_character(self) -> None:
        assert normalize(".,/#!$%^&*;:{}=-_`~()") == ""

    def test_idempotent(self) -> None:
        for word in ["Hola,", "¿Qué?", "(casa)", "niño-", ""]:
            assert normalize(normalize(word)) == normalize(word)


@pytest.mark.unit
class TestTokenization:
    """Test cases for split_words and normalize_transcript."""

    def test_split_ignores_surrounding_and_repeated_whitespace(self) -> None:
        assert split_words("  la   casa\tgrande \n") == ["la", "casa", "grande"]

    def test_split_empty(self) -> None:
        assert split_words("") == []
        assert split_words("   ") == []

    def test_transcript_keeps_tokens_that_normalize_to_empty(self) -> None:
        assert normalize_transcript("La -- casa") == ["la", "", "casa"]

    def test_transcript_trailing_space(self) -> None:
        assert normalize_transcript("la casa grande ") == ["la", "casa", "grande"]
