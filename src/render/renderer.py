# src/render/renderer.py
from __future__ import annotations
from typing import Dict, List

from src.models.category import Category
from src.models.player import IDENTITY_FIELDS, Player

PLACEHOLDER = "N/A"

# ---------- Fixed user-facing messages ----------
EMPTY_QUERY_MESSAGE = "Please provide a player name."
NO_CATEGORY_MESSAGE = "Please specify a valid category (offense, defense, special, penalties, or all)."
EMPTY_CATEGORY_MESSAGE = "No players found in the specified category."


def no_match_message(search_term: str) -> str:
    return f'I couldn\'t find any players with "{search_term}" in their name. Try another name!'


# ---------- Section rendering ----------
def _identity_line(p: Player) -> str:
    return f"- {p.name} ({p.team or PLACEHOLDER}, #{p.number or PLACEHOLDER}, {p.position or PLACEHOLDER}):"


def _render_player(p: Player, category: Category) -> List[str]:
    lines = [_identity_line(p), f"  {category.grade_label}: {p.get(category.signature_field)}"]
    skip = set(IDENTITY_FIELDS) | {category.signature_field}
    for field, value in p.columns.items():
        if field in skip or not value:
            continue
        lines.append(f"  {field}: {value}")
    return lines


def render_section(category: Category, players: List[Player]) -> str:
    lines = [f"{category.title} ({len(players)}):"]
    for p in players:
        lines.extend(_render_player(p, category))
    return "\n".join(lines)


def render_response(groups: Dict[Category, List[Player]]) -> str:
    """
    One text block, sections in offense -> defense -> special teams -> penalties
    order, separated by a blank line. Empty groups are not rendered.
    """
    sections = [render_section(c, groups[c]) for c in Category if groups.get(c)]
    return "\n\n".join(sections)
