# src/models/player.py
from __future__ import annotations
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

# Identity columns rendered on the player's header line
NAME_FIELD = "Name"
TEAM_FIELD = "Team"
NUMBER_FIELD = "#"
POSITION_FIELD = "POS"
IDENTITY_FIELDS = (NAME_FIELD, TEAM_FIELD, NUMBER_FIELD, POSITION_FIELD)


class Player(BaseModel):
    """
    One merged player profile.
    - key: lower-cased Name, the join key across sources
    - order: first-seen ordinal in the PlayerSet
    - columns: every column observed for this player, in first-merged order (read-only)
    """

    model_config = ConfigDict(frozen=True)

    key: str
    order: int = Field(ge=0)
    columns: Mapping[str, str] = Field(default_factory=dict, validate_default=True)

    @field_validator("columns", mode="after")
    @classmethod
    def _read_only_columns(cls, v):
        return MappingProxyType(dict(v))

    @field_serializer("columns")
    def _dump_columns(self, v: Mapping[str, str]) -> Dict[str, str]:
        return dict(v)

    @property
    def name(self) -> str:
        return self.columns.get(NAME_FIELD, "")

    @property
    def team(self) -> str:
        return self.columns.get(TEAM_FIELD, "")

    @property
    def number(self) -> str:
        return self.columns.get(NUMBER_FIELD, "")

    @property
    def position(self) -> str:
        return self.columns.get(POSITION_FIELD, "")

    def get(self, field: str, default: str = "") -> str:
        return self.columns.get(field, default)

    def has(self, field: str) -> bool:
        """True when the field is present with a non-empty value."""
        return bool(self.columns.get(field))


class PlayerSet:
    """Immutable, ordered collection of merged players (first-seen order)."""

    __slots__ = ("_players", "_by_key")

    def __init__(self, players: Iterable[Player] = ()):
        self._players: Tuple[Player, ...] = tuple(sorted(players, key=lambda p: p.order))
        self._by_key: Dict[str, Player] = {p.key: p for p in self._players}

    def __len__(self) -> int:
        return len(self._players)

    def __iter__(self) -> Iterator[Player]:
        return iter(self._players)

    def __getitem__(self, idx: int) -> Player:
        return self._players[idx]

    def get(self, name: str) -> Optional[Player]:
        return self._by_key.get(name.strip().lower())

    @property
    def players(self) -> Tuple[Player, ...]:
        return self._players

    @classmethod
    def from_rows(cls, rows: Iterable[Dict[str, str]]) -> "PlayerSet":
        """Build a set straight from already-merged mappings (tests, fixtures)."""
        out = []
        for i, row in enumerate(rows):
            out.append(Player(key=row[NAME_FIELD].lower(), order=i, columns=dict(row)))
        return cls(out)
