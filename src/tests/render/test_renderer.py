# src/tests/render/test_renderer.py
from src.classify.categories import group_by_category
from src.models.category import ALL_CATEGORIES, Category
from src.models.player import PlayerSet
from src.render.renderer import no_match_message, render_response, render_section


def test_offense_section_matches_expected_layout():
    ps = PlayerSet.from_rows([
        {"Name": "John Smith", "OFF GRD": "85.2", "Team": "ABC", "#": "12", "POS": "QB"},
    ])
    out = render_response(group_by_category(ps, ALL_CATEGORIES))
    assert out == (
        "Offense Players (1):\n"
        "- John Smith (ABC, #12, QB):\n"
        "  Overall Grade: 85.2"
    )


def test_missing_identity_fields_use_placeholder(players):
    brown = players.get("tom brown")
    out = render_section(Category.SPECIAL_TEAMS, [brown])
    assert out.splitlines()[:3] == [
        "Special Teams Players (1):",
        "- Tom Brown (N/A, #7, N/A):",
        "  Overall Grade: 60.4",
    ]
    assert "  KRET: 12" in out


def test_empty_fields_are_never_printed(players):
    smith = players.get("john smith")
    out = render_section(Category.OFFENSE, [smith])
    assert "Run" not in out
    assert "  Pass: 410" in out


def test_other_fields_follow_merge_order_and_skip_shown_grade(players):
    jones = players.get("sam jones")
    lines = render_section(Category.DEFENSE, [jones]).splitlines()
    assert lines == [
        "Defense Players (1):",
        "- Sam Jones (QRS, #99, DT):",
        "  Overall Grade: 80.1",
        "  OFF GRD: 55.0",
    ]


def test_penalties_section_uses_penalties_label(players):
    out = render_section(Category.PENALTIES, [players.get("jake smithers")])
    assert out.splitlines()[0] == "Players with Penalties (1):"
    assert out.splitlines()[1] == "- Jake Smithers (XYZ, #N/A, LB):"
    assert out.splitlines()[2] == "  Penalties: 3"


def test_sections_are_blank_line_separated_in_fixed_order(players):
    out = render_response(group_by_category(players, ALL_CATEGORIES))
    headers = [line for line in out.splitlines() if line and not line.startswith((" ", "-"))]
    assert headers == [
        "Offense Players (2):",
        "Defense Players (2):",
        "Special Teams Players (1):",
        "Players with Penalties (1):",
    ]
    assert "\n\nDefense Players (2):" in out


def test_no_match_message_names_the_term():
    assert no_match_message("zzqq") == 'I couldn\'t find any players with "zzqq" in their name. Try another name!'
