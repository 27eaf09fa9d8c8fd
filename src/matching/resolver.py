# src/matching/resolver.py
from __future__ import annotations
from typing import List, Optional

from src.matching.matchers import NameMatcher, get_matcher
from src.models.player import Player, PlayerSet


def resolve_players(players: PlayerSet, search_term: str, matcher: Optional[NameMatcher] = None) -> List[Player]:
    """
    Candidate players for `search_term`, best match first.
    Callers must reject an empty term before getting here.
    """
    term = (search_term or "").strip().lower()
    if not term:
        raise ValueError("search_term must not be empty")
    return (matcher or get_matcher()).match(players, term)
