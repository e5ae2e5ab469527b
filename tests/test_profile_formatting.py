from __future__ import annotations

from src.features import format_matches, format_profile, matches_frame, profile_view
from src.profiles.model import Profile


def _alice() -> Profile:
    p = Profile("alice")
    p.add_item("Chess", 90)
    p.add_item("Go", 60)
    p.add_hourly_minutes(19, 60)
    p.add_hourly_minutes(18, 30)
    p.add_hourly_minutes(3, 0)
    return p


def test_format_profile_shows_whole_hours_and_peak_hours() -> None:
    text = format_profile(_alice())

    assert "User Profile: alice" in text
    assert "Total Playtime: 2 hours" in text
    assert "Games (2):" in text
    assert "  - Chess                (1 hrs)" in text
    assert "Peak Play Hours: 18:00 (30 mins), 19:00 (60 mins)" in text
    assert "3:00" not in text


def test_format_matches_uses_two_decimal_percentages() -> None:
    alice = _alice()
    text = format_matches([("alice", 0.8), ("ghost", 0.12346)], {"alice": alice})

    assert text.startswith("=== TOP 2 SIMILAR USERS ===")
    assert "Similarity Score: 80.00%" in text
    assert "Similarity Score: 12.35%" in text
    assert "User Profile: alice" in text


def test_matches_frame_columns() -> None:
    df = matches_frame([("x", 0.8), ("y", 0.0)])

    assert list(df.columns) == ["name", "similarity", "similarity_pct"]
    assert df["name"].tolist() == ["x", "y"]
    assert df["similarity_pct"].tolist() == [80.0, 0.0]
    assert matches_frame([]).empty


def test_profile_view_is_json_ready() -> None:
    view = profile_view(_alice())

    assert view["name"] == "alice"
    assert view["total_minutes"] == 150
    assert view["total_hours"] == 2
    assert view["items"] == [{"name": "Chess", "minutes": 90}, {"name": "Go", "minutes": 60}]
    assert view["hourly"][0] == {"hour": 3, "minutes": 0}
    assert view["peak_hours"] == [18, 19]
