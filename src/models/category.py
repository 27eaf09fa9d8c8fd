# src/models/category.py
from __future__ import annotations
from enum import Enum


class Category(Enum):
    """
    Statistical categories a player can belong to.
    Declaration order is the order sections are rendered in.
    Value tuple: (signature field, trigger word, section title, grade label)
    """

    OFFENSE = ("OFF GRD", "offense", "Offense Players", "Overall Grade")
    DEFENSE = ("DEF GRD", "defense", "Defense Players", "Overall Grade")
    SPECIAL_TEAMS = ("ST GRD", "special", "Special Teams Players", "Overall Grade")
    PENALTIES = ("PEN", "penalties", "Players with Penalties", "Penalties")

    @property
    def signature_field(self) -> str:
        return self.value[0]

    @property
    def trigger(self) -> str:
        return self.value[1]

    @property
    def title(self) -> str:
        return self.value[2]

    @property
    def grade_label(self) -> str:
        return self.value[3]


ALL_CATEGORIES = frozenset(Category)
