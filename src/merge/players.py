# src/merge/players.py
from __future__ import annotations
import logging
from typing import Dict, Iterable, List, Tuple

from src.models.player import NAME_FIELD, Player, PlayerSet

logger = logging.getLogger(__name__)


def merge_records(records: Iterable[Tuple[str, Dict[str, str]]]) -> PlayerSet:
    """
    Fold (source, record) pairs into one player per lower-cased Name.

    Records must arrive in load order: a later record overwrites any field it
    shares with an earlier one (last write wins, empty values included).
    Rows without a Name are skipped.
    """
    merged: Dict[str, Dict[str, str]] = {}
    skipped = 0

    for _source, record in records:
        raw_name = (record.get(NAME_FIELD) or "").strip()
        if not raw_name:
            skipped += 1
            continue
        key = raw_name.lower()
        if key not in merged:
            merged[key] = {NAME_FIELD: raw_name}
        merged[key].update(record)

    if skipped:
        logger.debug("Skipped %d rows with no %s", skipped, NAME_FIELD)

    players: List[Player] = [
        Player(key=key, order=i, columns=columns)
        for i, (key, columns) in enumerate(merged.items())
    ]
    return PlayerSet(players)
