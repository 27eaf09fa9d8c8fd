# src/engine/pipeline.py
from __future__ import annotations
import logging
from typing import TYPE_CHECKING, Literal

from pydantic import BaseModel

from src.classify.categories import group_by_category, select_categories
from src.matching.resolver import resolve_players
from src.models.query import Query
from src.render.renderer import (
    EMPTY_CATEGORY_MESSAGE,
    EMPTY_QUERY_MESSAGE,
    NO_CATEGORY_MESSAGE,
    no_match_message,
    render_response,
)

if TYPE_CHECKING:
    from src.engine.lifecycle import ReadyState

logger = logging.getLogger(__name__)

AnswerStatus = Literal["ok", "empty_query", "no_match", "no_category", "empty_category"]


class AnswerResult(BaseModel):
    status: AnswerStatus
    text: str
    search_term: str = ""
    matched: int = 0


def answer_query(state: "ReadyState", text: str) -> AnswerResult:
    """
    Query text -> rendered answer.
    Query -> name resolution -> category selection -> render.
    Every outcome is a normal result; nothing here raises for bad input.
    """
    query = Query.parse(text)
    if query.is_empty:
        return AnswerResult(status="empty_query", text=EMPTY_QUERY_MESSAGE)

    found = resolve_players(state.players, query.search_term, state.matcher)
    logger.debug("'%s' matched %d players", query.search_term, len(found))
    if not found:
        return AnswerResult(
            status="no_match",
            text=no_match_message(query.search_term),
            search_term=query.search_term,
        )

    selected = select_categories(query.keywords)
    if not selected:
        return AnswerResult(
            status="no_category",
            text=NO_CATEGORY_MESSAGE,
            search_term=query.search_term,
            matched=len(found),
        )

    groups = group_by_category(found, selected)
    if not groups:
        return AnswerResult(
            status="empty_category",
            text=EMPTY_CATEGORY_MESSAGE,
            search_term=query.search_term,
            matched=len(found),
        )

    return AnswerResult(
        status="ok",
        text=render_response(groups),
        search_term=query.search_term,
        matched=len(found),
    )


def interactive(state: "ReadyState") -> None:
    print("Gridiron Scout (name [offense|defense|special|penalties|all])")
    while True:
        try:
            q = input("\n🏈 Player (or 'quit'): ").strip()
            if q.lower() in {"quit", "exit"}:
                break
            print(state.answer(q))
        except (KeyboardInterrupt, EOFError):
            print("\nExiting.")
            break


if __name__ == "__main__":
    """
    Run:
        PYTHONPATH=. python -m src.engine.pipeline
    """
    from src.engine.lifecycle import LoadingState
    from src.utils.logging_setup import configure_logging

    configure_logging()
    interactive(LoadingState().load())
