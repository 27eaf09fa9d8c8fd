# src/tests/merge/test_players.py
import pytest
from pydantic import ValidationError

from src.merge.players import merge_records


def test_later_source_wins_on_shared_field():
    ps = merge_records([
        ("Power 5 Offense Grades.csv", {"Name": "John Smith", "Team": "ABC", "OFF GRD": "70.0"}),
        ("pff-data.csv", {"Name": "John Smith", "OFF GRD": "85.2", "PEN": "2"}),
    ])
    assert len(ps) == 1
    p = ps[0]
    assert p.get("OFF GRD") == "85.2"
    assert p.team == "ABC"
    assert p.get("PEN") == "2"


def test_empty_later_value_still_overwrites():
    ps = merge_records([
        ("a.csv", {"Name": "John Smith", "Team": "ABC"}),
        ("b.csv", {"Name": "John Smith", "Team": ""}),
    ])
    assert ps[0].team == ""


def test_join_key_is_case_insensitive_and_name_casing_follows_last_record():
    ps = merge_records([
        ("a.csv", {"Name": "John Smith", "OFF GRD": "80"}),
        ("b.csv", {"Name": "john smith", "DEF GRD": "60"}),
    ])
    assert len(ps) == 1
    p = ps.get("JOHN SMITH")
    assert p is not None
    assert p.key == "john smith"
    assert p.name == "john smith"
    assert p.has("OFF GRD") and p.has("DEF GRD")


def test_rows_without_name_are_skipped():
    ps = merge_records([
        ("a.csv", {"Name": "", "OFF GRD": "80"}),
        ("a.csv", {"Team": "ABC"}),
        ("a.csv", {"Name": "Tom Brown"}),
    ])
    assert [p.name for p in ps] == ["Tom Brown"]


def test_first_seen_order_and_field_order_are_stable():
    records = [
        ("a.csv", {"Name": "B Player", "X": "1"}),
        ("a.csv", {"Name": "A Player", "Y": "2"}),
        ("b.csv", {"Name": "b player", "Z": "3", "X": "9"}),
    ]
    first = merge_records(records)
    second = merge_records(records)
    assert [p.key for p in first] == ["b player", "a player"]
    assert [p.order for p in first] == [0, 1]
    assert list(first[0].columns) == ["Name", "X", "Z"]
    assert [p.model_dump() for p in first] == [p.model_dump() for p in second]


def test_merged_columns_are_read_only():
    records = [("a.csv", {"Name": "John Smith", "OFF GRD": "80"})]
    p = merge_records(records)[0]
    with pytest.raises(TypeError):
        p.columns["OFF GRD"] = "99"
    with pytest.raises(ValidationError):
        p.key = "someone else"
    assert p.get("OFF GRD") == "80"
    assert p.model_dump()["columns"] == {"Name": "John Smith", "OFF GRD": "80"}
