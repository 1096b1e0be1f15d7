"""catalogmatch — Resolve noisy free-text input to catalog entries by similarity."""

import logging

from catalogmatch.distance import levenshtein
from catalogmatch.exceptions import (
    CatalogMatchError,
    InvalidKey,
    InvalidLimit,
    InvalidThreshold,
    NoMatchFound,
)
from catalogmatch.matcher import (
    Matcher,
    best_match,
    ranked_matches,
    resolve,
)
from catalogmatch.models import Match, MatchConfig
from catalogmatch.similarity import normalise, similarity

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Matcher",
    "Match",
    "MatchConfig",
    "similarity",
    "best_match",
    "ranked_matches",
    "resolve",
    "levenshtein",
    "normalise",
    "CatalogMatchError",
    "InvalidThreshold",
    "InvalidLimit",
    "InvalidKey",
    "NoMatchFound",
]
