"""Matcher — resolve free-text queries against caller-owned candidates."""

from __future__ import annotations

import dataclasses
import logging
from typing import Callable, Generic, Iterable, Optional, TypeVar

from catalogmatch.exceptions import InvalidKey, NoMatchFound
from catalogmatch.models import (
    DEFAULT_LIMIT,
    DEFAULT_THRESHOLD,
    Match,
    MatchConfig,
    validate_limit,
)
from catalogmatch.similarity import coerce_key, similarity

logger = logging.getLogger(__name__)

T = TypeVar("T")

KeyFunc = Callable[[T], Optional[str]]


class Matcher(Generic[T]):
    """
    Similarity matcher bound to a key projection and a MatchConfig.

    *key* extracts the comparable string from a candidate; a None key is
    scored as the empty string. Keyword overrides for *threshold* and
    *limit* replace the corresponding fields of *config*.

    Holds no mutable state, so one instance can be shared freely.
    """

    def __init__(
        self,
        key: KeyFunc[T],
        config: Optional[MatchConfig] = None,
        *,
        threshold: Optional[float] = None,
        limit: Optional[int] = None,
    ):
        config = config or MatchConfig()
        overrides = {}
        if threshold is not None:
            overrides["threshold"] = threshold
        if limit is not None:
            overrides["limit"] = limit
        if overrides:
            config = dataclasses.replace(config, **overrides)
        self._key = key
        self.config = config

    @property
    def threshold(self) -> float:
        return self.config.threshold

    @property
    def limit(self) -> int:
        return self.config.limit

    # ── Public API ────────────────────────────────────────────────

    def similarity(self, a: Optional[str], b: Optional[str]) -> float:
        return similarity(a, b)

    def best_match(self, query: str, candidates: Iterable[T]) -> Optional[T]:
        """
        Return the highest-scoring candidate, or None.

        A candidate wins only with a score strictly above the threshold
        and strictly above every earlier candidate, so ties go to the
        first one seen.
        """
        best = self._best(query, candidates)
        return best.candidate if best is not None else None

    def resolve(self, query: str, candidates: Iterable[T]) -> Match[T]:
        """
        Like best_match, but return the full Match.

        Raises NoMatchFound if no candidate beats the threshold.
        """
        best = self._best(query, candidates)
        if best is None:
            raise NoMatchFound(query, self.threshold)
        return best

    def ranked_matches(
        self,
        query: str,
        candidates: Iterable[T],
        limit: Optional[int] = None,
    ) -> list[Match[T]]:
        """
        Return up to *limit* matches scoring at least the threshold.

        Sorted by descending score; equal scores keep their input order.
        An empty list means nothing qualified.
        """
        limit = self.limit if limit is None else validate_limit(limit)
        scored = [
            m for m in self._score_all(query, candidates)
            if m.score >= self.threshold
        ]
        # list.sort is stable, reverse=True included
        scored.sort(key=lambda m: m.score, reverse=True)
        ranked = scored[:limit]
        logger.debug(
            "ranked %d of %d qualifying matches for %r",
            len(ranked), len(scored), query,
        )
        return ranked

    # ── Private helpers ───────────────────────────────────────────

    def _score_all(self, query: str, candidates: Iterable[T]):
        if not isinstance(query, str):
            raise InvalidKey(query)
        for candidate in candidates:
            key = coerce_key(self._key(candidate))
            yield Match(candidate, key, similarity(query, key))

    def _best(self, query: str, candidates: Iterable[T]) -> Optional[Match[T]]:
        best: Optional[Match[T]] = None
        best_score = self.threshold

        for match in self._score_all(query, candidates):
            if match.score > best_score:
                best = match
                best_score = match.score

        if best is None:
            logger.debug(
                "no match for %r above threshold %s", query, self.threshold
            )
        else:
            logger.debug(
                "best match for %r is %r (score %.3f)",
                query, best.key, best.score,
            )
        return best


# ── Module-level shortcuts ────────────────────────────────────────


def best_match(
    query: str,
    candidates: Iterable[T],
    key: KeyFunc[T],
    threshold: float = DEFAULT_THRESHOLD,
) -> Optional[T]:
    """Return the best candidate scoring strictly above *threshold*."""
    return Matcher(key, threshold=threshold).best_match(query, candidates)


def resolve(
    query: str,
    candidates: Iterable[T],
    key: KeyFunc[T],
    threshold: float = DEFAULT_THRESHOLD,
) -> Match[T]:
    """Return the best Match or raise NoMatchFound."""
    return Matcher(key, threshold=threshold).resolve(query, candidates)


def ranked_matches(
    query: str,
    candidates: Iterable[T],
    key: KeyFunc[T],
    threshold: float = DEFAULT_THRESHOLD,
    limit: int = DEFAULT_LIMIT,
) -> list[Match[T]]:
    """Return up to *limit* matches scoring at least *threshold*, best first."""
    return Matcher(key, threshold=threshold, limit=limit).ranked_matches(
        query, candidates
    )
