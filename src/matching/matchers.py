# src/matching/matchers.py
from __future__ import annotations
from typing import Iterable, List, Protocol, Tuple

from rapidfuzz import fuzz

from config.settings import FUZZY_MIN_TERM_LENGTH, FUZZY_THRESHOLD, MATCH_STRATEGY
from src.models.player import Player


class NameMatcher(Protocol):
    """Anything that can rank players against a lower-cased search term."""

    def match(self, players: Iterable[Player], term: str) -> List[Player]:
        ...


class SubstringMatcher:
    """Case-insensitive containment; results keep first-seen order."""

    name = "substring"

    def match(self, players: Iterable[Player], term: str) -> List[Player]:
        t = term.lower()
        return [p for p in players if t in p.name.lower()]


class FuzzyMatcher:
    """
    RapidFuzz partial-ratio matcher with a substring floor:
    - a name containing the term always matches (score 100)
    - otherwise partial_ratio(term, name) must reach `threshold`, and only for
      terms of at least `min_term_length` characters
    Sorted by score, best first; ties keep first-seen order.
    """

    name = "fuzzy"

    def __init__(self, threshold: int = FUZZY_THRESHOLD, min_term_length: int = FUZZY_MIN_TERM_LENGTH):
        self.threshold = threshold
        self.min_term_length = min_term_length

    def score(self, term: str, name: str) -> float:
        t, n = term.lower(), name.lower()
        if t in n:
            return 100.0
        if len(t) < self.min_term_length:
            return 0.0
        return fuzz.partial_ratio(t, n)

    def match(self, players: Iterable[Player], term: str) -> List[Player]:
        scored: List[Tuple[float, int, Player]] = []
        for p in players:
            s = self.score(term, p.name)
            if s >= 100.0 or (s and s >= self.threshold):
                scored.append((s, p.order, p))
        scored.sort(key=lambda x: (-x[0], x[1]))
        return [p for _, _, p in scored]


MATCHERS = {
    SubstringMatcher.name: SubstringMatcher,
    FuzzyMatcher.name: FuzzyMatcher,
}


def get_matcher(strategy: str = MATCH_STRATEGY) -> NameMatcher:
    key = (strategy or "").strip().lower()
    if key not in MATCHERS:
        raise ValueError(f"Unknown match strategy '{strategy}' (expected one of {sorted(MATCHERS)})")
    return MATCHERS[key]()
