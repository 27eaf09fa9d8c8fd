# src/engine/lifecycle.py
from __future__ import annotations
import logging
from pathlib import Path
from typing import List, Optional, Sequence

from config.settings import DATA_DIR, MATCH_STRATEGY, SOURCE_FILES
from src.engine.pipeline import answer_query
from src.loaders.records import SourceReport, load_records
from src.matching.matchers import NameMatcher, get_matcher
from src.merge.players import merge_records
from src.models.player import PlayerSet

logger = logging.getLogger(__name__)


class ReadyState:
    """
    Loaded, read-only engine state: the merged players plus the matcher used
    to resolve names. Safe to share across concurrent requests.
    Tests can build one directly from a PlayerSet.
    """

    def __init__(
        self,
        players: PlayerSet,
        matcher: Optional[NameMatcher] = None,
        reports: Optional[List[SourceReport]] = None,
    ):
        self.players = players
        self.matcher = matcher or get_matcher()
        self.reports: List[SourceReport] = list(reports or [])

    def answer(self, text: str) -> str:
        return answer_query(self, text).text


class LoadingState:
    """Startup phase: knows where the data lives, produces a ReadyState once."""

    def __init__(
        self,
        sources: Sequence[str] = SOURCE_FILES,
        data_dir: str | Path = DATA_DIR,
        match_strategy: str = MATCH_STRATEGY,
    ):
        self.sources = list(sources)
        self.data_dir = Path(data_dir)
        self.match_strategy = match_strategy

    def load(self) -> ReadyState:
        matcher = get_matcher(self.match_strategy)
        records, reports = load_records(self.sources, self.data_dir)
        players = merge_records(records)
        loaded = sum(1 for r in reports if r.status == "loaded")
        if not loaded:
            logger.warning("No source files loaded from %s; every query will report no matches", self.data_dir)
        logger.info("Loaded %d unique players from CSV files", len(players))
        return ReadyState(players, matcher=matcher, reports=reports)
