"""
Tests for the Spanish pronunciation hint generator.

Hints are coarse cues for English speakers, so these tests pin the output of
the ordered rewrite rules and the syllable marking on representative words.
"""

import pytest

from coach_fe.phonetic_hints_es import apply_rewrite_rules, mark_syllables, phonetic_hint


@pytest.mark.unit
class TestPhoneticHint:
    """Test cases for phonetic_hint."""

    @pytest.mark.parametrize(
        ("word", "expected"),
        [
            ("llama", "YA-MA"),
            ("casa", "CA-SA"),
            ("jugar", "HU-GA-R"),
            ("hola", "O-LA"),
            ("gente", "HE-NTE"),
            ("guitarra", "GI-TA-RRA"),
            ("guerra", "GE-RRA"),
            ("noche", "NO-CHE"),
            ("queso", "KE-SO"),
            ("zapato", "SA-PA-TO"),
            ("vivo", "BI-BO"),
            ("pequeña", "PE-KE-NYA"),
            ("cielo", "SIE-LO"),
            ("ahora", "AO-RA"),
            ("página", "PÁ-HI-NA"),
            ("general", "HE-NE-RA-L"),
        ],
    )
    def test_representative_words(self, word: str, expected: str) -> None:
        assert phonetic_hint(word) == expected

    def test_empty_word(self) -> None:
        assert phonetic_hint("") == ""

    def test_output_is_upper_case(self) -> None:
        hint = phonetic_hint("biblioteca")
        assert hint == hint.upper()

    def test_accepts_unnormalized_case(self) -> None:
        assert phonetic_hint("Llama") == "YA-MA"

    def test_never_starts_with_break(self) -> None:
        for word in ["el", "sol", "amigo", "y", "tres"]:
            assert not phonetic_hint(word).startswith("-")

    def test_single_consonant_word(self) -> None:
        assert phonetic_hint("y") == "Y"


@pytest.mark.unit
class TestRewriteRules:
    """Test cases for the individual rewrite stages."""

    def test_silent_h_is_deleted(self) -> None:
        assert apply_rewrite_rules("hermano") == "ermano"

    def test_ch_keeps_its_h(self) -> None:
        assert apply_rewrite_rules("chico") == "chico"

    def test_j_ge_gi_become_h(self) -> None:
        assert apply_rewrite_rules("jefe") == "hefe"
        assert apply_rewrite_rules("gema") == "hema"
        assert apply_rewrite_rules("gira") == "hira"

    def test_soft_c_becomes_s(self) -> None:
        assert apply_rewrite_rules("cena") == "sena"
        assert apply_rewrite_rules("cine") == "sine"

    def test_hard_g_before_u(self) -> None:
        assert apply_rewrite_rules("guiso") == "giso"
        assert apply_rewrite_rules("guerra") == "gerra"

    def test_order_ll_before_y_sound(self) -> None:
        assert apply_rewrite_rules("calle") == "caye"

    def test_mark_syllables_vowel_then_consonant(self) -> None:
        assert mark_syllables("casa") == "ca-sa"
        assert mark_syllables("aire") == "ai-re"
        assert mark_syllables("") == ""
