"""Typed configuration and result models for catalogmatch."""

from __future__ import annotations

import math
import numbers
import os
from dataclasses import dataclass
from decimal import Decimal
from typing import Generic, Iterator, Mapping, Optional, TypeVar

from catalogmatch.exceptions import InvalidLimit, InvalidThreshold

T = TypeVar("T")

DEFAULT_THRESHOLD = 0.5
DEFAULT_LIMIT = 5

THRESHOLD_ENV = "CATALOGMATCH_THRESHOLD"
LIMIT_ENV = "CATALOGMATCH_LIMIT"


def validate_threshold(threshold: object) -> float:
    """Return *threshold* as a float, or raise InvalidThreshold."""
    if isinstance(threshold, bool) or not isinstance(
        threshold, (numbers.Real, Decimal)
    ):
        raise InvalidThreshold(threshold)
    if math.isnan(threshold) or not 0.0 <= threshold <= 1.0:
        raise InvalidThreshold(threshold)
    return float(threshold)


def validate_limit(limit: object) -> int:
    """Return *limit* unchanged if it is a positive int, else raise."""
    if isinstance(limit, bool) or not isinstance(limit, int) or limit <= 0:
        raise InvalidLimit(limit)
    return limit


@dataclass(frozen=True)
class MatchConfig:
    """
    Tuning knobs shared by best-match and ranked retrieval.

    threshold: minimum acceptable score. Best-match requires a score
        strictly above it; ranked retrieval keeps scores equal to it.
    limit: maximum number of results ranked retrieval returns.
    """

    threshold: float = DEFAULT_THRESHOLD
    limit: int = DEFAULT_LIMIT

    def __post_init__(self) -> None:
        object.__setattr__(self, "threshold", validate_threshold(self.threshold))
        validate_limit(self.limit)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> MatchConfig:
        """
        Build a config from CATALOGMATCH_THRESHOLD and CATALOGMATCH_LIMIT.

        Unset or blank variables fall back to the defaults.
        """
        env = os.environ if environ is None else environ

        threshold: object = DEFAULT_THRESHOLD
        raw = env.get(THRESHOLD_ENV, "").strip()
        if raw:
            try:
                threshold = float(raw)
            except ValueError:
                raise InvalidThreshold(raw) from None

        limit: object = DEFAULT_LIMIT
        raw = env.get(LIMIT_ENV, "").strip()
        if raw:
            try:
                limit = int(raw)
            except ValueError:
                raise InvalidLimit(raw) from None

        return cls(threshold=threshold, limit=limit)


@dataclass(frozen=True)
class Match(Generic[T]):
    """A candidate paired with its similarity to the query."""

    candidate: T
    key: str
    score: float        # 0.0-1.0

    def __iter__(self) -> Iterator:
        # Unpacks as (candidate, score).
        yield self.candidate
        yield self.score

    def to_dict(self) -> dict:
        """Convert to a plain dictionary (useful for JSON serialisation)."""
        return {
            "key": self.key,
            "score": round(self.score, 3),
        }
