from collections.abc import Sequence
from typing import Any

import numpy as np
from jellyfish import levenshtein_distance


def l_dist(s1: str, *, s2: str) -> int:
    """Calculate the Levenshtein distance between two strings.

    Insertions, deletions and substitutions each cost 1 and characters are
    compared exactly, so the distance is case-sensitive.

    Args:
        s1: First string
        s2: Second string

    Returns:
        Levenshtein distance between the two strings
    """
    return int(levenshtein_distance(s1, s2))


def similarity(s1: str, s2: str) -> float:
    """Calculate the length-normalized similarity of two words.

    Args:
        s1: First normalized word
        s2: Second normalized word

    Returns:
        ``1 - distance / max(len(s1), len(s2))`` in [0, 1]; 1.0 when both are empty
    """
    longest = max(len(s1), len(s2))
    if longest == 0:
        return 1.0
    return 1.0 - l_dist(s1, s2=s2) / longest


_similarity_vec = np.vectorize(similarity, otypes=[np.float64])


def window_similarities(target: str, *, candidates: Sequence[str]) -> np.ndarray[Any, Any]:
    """Score one target word against each candidate of a lookahead window.

    Args:
        target: Normalized target word
        candidates: Normalized spoken words, in transcript order

    Returns:
        Array of similarities aligned with ``candidates``
    """
    if len(candidates) == 0:
        return np.empty(0, dtype=np.float64)
    return _similarity_vec(target, np.asarray(candidates, dtype=object))  # type: ignore[no-any-return]
