"""Key normalisation and pairwise similarity scoring."""

from __future__ import annotations

from catalogmatch.distance import levenshtein
from catalogmatch.exceptions import InvalidKey

EXACT_SCORE = 1.0
CONTAINMENT_SCORE = 0.8


def coerce_key(value: object) -> str:
    """Return *value* as a match key; None becomes the empty string."""
    if value is None:
        return ""
    if not isinstance(value, str):
        raise InvalidKey(value)
    return value


def normalise(raw: str) -> str:
    """Case-fold and strip surrounding whitespace."""
    return raw.casefold().strip()


def similarity(a: str | None, b: str | None) -> float:
    """
    Score how closely *a* matches *b*, from 0.0 to 1.0.

    Checks run in a fixed order on the normalised forms:

    * equal strings score 1.0;
    * if either string contains the other the score is a flat 0.8,
      even where edit distance alone would score higher or lower;
    * otherwise the score is ``1 - distance / longest length``.

    The empty string is contained in every string, so an empty key
    scores 0.8 against any non-empty one.
    """
    s1 = normalise(coerce_key(a))
    s2 = normalise(coerce_key(b))

    if s1 == s2:
        return EXACT_SCORE
    if s1 in s2 or s2 in s1:
        return CONTAINMENT_SCORE

    longest = max(len(s1), len(s2))
    if longest == 0:
        return EXACT_SCORE
    return 1 - levenshtein(s1, s2) / longest
