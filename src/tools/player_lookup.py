# src/tools/player_lookup.py
from __future__ import annotations
from typing import Optional

from pydantic import BaseModel, Field, field_validator
from langchain_core.tools import StructuredTool

from src.engine.lifecycle import LoadingState, ReadyState
from src.engine.pipeline import answer_query

# --- Loaded state cache (built on first call) ---
_state: Optional[ReadyState] = None
def _ready() -> ReadyState:
    global _state
    if _state is None:
        _state = LoadingState().load()
    return _state


def use_state(state: Optional[ReadyState]) -> None:
    """Swap the cached state (tests, or an adapter that already loaded one)."""
    global _state
    _state = state


# --- Args schema for StructuredTool ---
class PlayerLookupArgs(BaseModel):
    name: str = Field(description="Single word from the player's name, e.g. 'smith'")
    categories: Optional[str] = Field(
        default=None,
        description="Space separated: offense, defense, special, penalties or all. Omit for all.",
    )

    @field_validator("categories", mode="before")
    @classmethod
    def _coerce_categories(cls, v):
        if isinstance(v, list):
            return " ".join(str(x) for x in v)
        return v


def run_player_lookup(name: str, categories: Optional[str] = None) -> str:
    text = f"{name} {categories or ''}".strip()
    return answer_query(_ready(), text).text


# --- Structured Tool ---
player_lookup_tool = StructuredTool.from_function(
    name="player_lookup_tool",
    description=(
        "Look up college football player grades merged from the Power 5 / Group 5 CSVs. "
        "Args: name (one word of the player's name), categories (offense|defense|special|penalties|all)."
    ),
    func=run_player_lookup,
    args_schema=PlayerLookupArgs,
)

if __name__ == "__main__":
    """
    Run:
        PYTHONPATH=. python src/tools/player_lookup.py smith offense
    """
    import sys

    args = sys.argv[1:] or ["smith"]
    print(player_lookup_tool.invoke({"name": args[0], "categories": " ".join(args[1:]) or None}))
