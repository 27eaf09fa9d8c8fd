# src/tests/conftest.py
from pathlib import Path
from typing import Callable, Dict

import pytest

from src.engine.lifecycle import ReadyState
from src.matching.matchers import SubstringMatcher
from src.models.player import PlayerSet


@pytest.fixture
def players() -> PlayerSet:
    return PlayerSet.from_rows([
        {"Name": "John Smith", "Team": "ABC", "#": "12", "POS": "QB", "OFF GRD": "85.2", "Pass": "410", "Run": ""},
        {"Name": "Jake Smithers", "Team": "XYZ", "#": "", "POS": "LB", "DEF GRD": "71.0", "TKL": "44", "PEN": "3"},
        {"Name": "Tom Brown", "Team": "", "#": "7", "POS": "", "ST GRD": "60.4", "KRET": "12"},
        {"Name": "Sam Jones", "Team": "QRS", "#": "99", "POS": "DT", "DEF GRD": "80.1", "OFF GRD": "55.0"},
    ])


@pytest.fixture
def ready(players) -> ReadyState:
    return ReadyState(players, matcher=SubstringMatcher())


@pytest.fixture
def write_csv(tmp_path: Path) -> Callable[[str, str], Path]:
    def _write(name: str, text: str, encoding: str = "utf-8") -> Path:
        p = tmp_path / name
        p.write_bytes(text.encode(encoding))
        return p
    return _write
