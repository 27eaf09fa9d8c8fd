# src/classify/categories.py
from __future__ import annotations
from typing import Dict, FrozenSet, Iterable, List, Sequence

from src.models.category import ALL_CATEGORIES, Category
from src.models.player import Player

SHOW_ALL_KEYWORD = "all"


def categories_for(player: Player) -> FrozenSet[Category]:
    """A player is in a category when its signature column is non-empty."""
    return frozenset(c for c in Category if player.has(c.signature_field))


def select_categories(keywords: Sequence[str]) -> FrozenSet[Category]:
    """
    Categories the caller asked to see.
    No keywords, or the literal `all`, selects everything; otherwise a category
    is picked when any keyword contains its trigger word.
    """
    kws = [k.lower() for k in keywords]
    if not kws or SHOW_ALL_KEYWORD in kws:
        return ALL_CATEGORIES
    return frozenset(c for c in Category if any(c.trigger in k for k in kws))


def group_by_category(players: Iterable[Player], selected: Iterable[Category]) -> Dict[Category, List[Player]]:
    """Selected categories (render order) -> member players in first-seen order. Empty groups dropped."""
    ordered = sorted(players, key=lambda p: p.order)
    wanted = set(selected)
    groups: Dict[Category, List[Player]] = {}
    for c in Category:
        if c not in wanted:
            continue
        members = [p for p in ordered if c in categories_for(p)]
        if members:
            groups[c] = members
    return groups
