"""
Learner-friendly Spanish pronunciation hints.

Turns a normalized Spanish word into a coarse, upper-case cue such as
``"llama" -> "YA-MA"`` for an English-speaking reader. The cue follows
Latin-American pronunciation (seseo, merged b/v, silent h) and marks rough
syllable onsets with hyphens. It is a heuristic, not a phonetic transcription:
the rewrite rules run in a fixed order and later rules see the output of
earlier ones.
"""

import re
from typing import Final

# Stands in for an "h" that must survive silent-h deletion (the h of "ch" and
# the h sounds produced from "j", "ge" and "gi"). Deleting every h instead
# gives "noche" -> NO-CE and "gente" -> EN-TE.
_SOUNDED_H: Final[str] = "\ue000"

_REWRITE_RULES: Final[tuple[tuple[str, str], ...]] = (
    ("ll", "y"),
    ("ñ", "ny"),
    ("ch", "c" + _SOUNDED_H),
    ("j", _SOUNDED_H),
    ("ge", _SOUNDED_H + "e"),
    ("gi", _SOUNDED_H + "i"),
    ("ce", "se"),
    ("ci", "si"),
    ("gui", "gi"),
    ("gue", "ge"),
    ("qu", "k"),
    ("v", "b"),
    ("z", "s"),
    ("h", ""),
)

VOWELS: Final[str] = "aeiouáéíóú"
SYLLABLE_BREAK: Final[str] = "-"
_SYLLABLE_ONSET: Final[re.Pattern[str]] = re.compile(f"([{VOWELS}])([^{VOWELS}\\s])")


def apply_rewrite_rules(word: str) -> str:
    """Apply the ordered letter rewrites, without syllable marks or upper-casing.

    Args:
        word: Lower-case word

    Returns:
        Rewritten lower-case word
    """
    rewritten = word
    for pattern, replacement in _REWRITE_RULES:
        rewritten = rewritten.replace(pattern, replacement)
    return rewritten.replace(_SOUNDED_H, "h")


def mark_syllables(word: str) -> str:
    """Insert a hyphen between each vowel and a directly following consonant.

    Args:
        word: Lower-case rewritten word

    Returns:
        Word with approximate syllable boundaries
    """
    return _SYLLABLE_ONSET.sub(rf"\1{SYLLABLE_BREAK}\2", word)


def phonetic_hint(word: str) -> str:
    """Build the pronunciation hint shown to the learner for one word.

    Args:
        word: Normalized word; any string, including the empty string, is accepted

    Returns:
        Upper-case hint with hyphenated syllable onsets
    """
    return mark_syllables(apply_rewrite_rules(word.lower())).upper()
