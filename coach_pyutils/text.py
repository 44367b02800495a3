import re
from typing import Final

# Characters stripped from every word before comparison.
REMOVABLE_CHARS: Final[str] = ".,/#!$%^&*;:{}=-_`~()"
REMOVABLE_PATTERN: Final[re.Pattern[str]] = re.compile(f"[{re.escape(REMOVABLE_CHARS)}]")


def normalize(word: str) -> str:
    """Fold a word into its canonical comparison form.

    Lower-cases the word and strips the punctuation and symbol characters in
    ``REMOVABLE_CHARS``. Letters (accented vowels and ñ included), digits and
    any other character are kept as they are.

    Args:
        word: Raw word as authored or as recognized

    Returns:
        Normalized word; idempotent, so normalize(normalize(w)) == normalize(w)
    """
    return REMOVABLE_PATTERN.sub("", word.lower())


def split_words(text: str) -> list[str]:
    """Split text on runs of whitespace, ignoring leading and trailing space.

    Args:
        text: Paragraph or transcript text

    Returns:
        Whitespace delimited tokens, unmodified
    """
    return text.split()


def normalize_transcript(text: str) -> list[str]:
    """Tokenize a recognized transcript into normalized spoken words.

    Tokens that normalize to an empty string are kept so that positions in the
    result match positions in the raw transcript.

    Args:
        text: Raw transcript produced by the speech capture collaborator

    Returns:
        Ordered list of normalized tokens
    """
    return [normalize(token) for token in split_words(text)]
