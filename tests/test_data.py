from __future__ import annotations

from pathlib import Path

import pytest

from src.data import build_profiles, load_profiles, load_raw_data


def _write(path: Path, text: str) -> None:
    path.write_text(text.strip() + "\n")


@pytest.fixture
def raw_dir(tmp_path: Path) -> Path:
    _write(
        tmp_path / "items.csv",
        """
user,item,hours
alice,Chess,1
alice,Go,1
bob,Chess,2
alice,Chess,3
""",
    )
    _write(
        tmp_path / "hourly.csv",
        """
user,hour,minutes
alice,18,60
alice,18,15
carol,0,5
""",
    )
    return tmp_path


def test_load_profiles_builds_in_first_appearance_order(raw_dir: Path) -> None:
    profiles = load_profiles(raw_dir)

    assert [p.name for p in profiles] == ["alice", "bob", "carol"]

    alice = profiles[0]
    assert [(i.name, i.minutes) for i in alice.items] == [("Chess", 60), ("Go", 60), ("Chess", 180)]
    assert alice.total_minutes == 300
    assert dict(alice.hourly_minutes) == {18: 75}

    carol = profiles[2]
    assert carol.items == ()
    assert carol.total_minutes == 0
    assert dict(carol.hourly_minutes) == {0: 5}


def test_hourly_csv_is_optional(tmp_path: Path) -> None:
    _write(tmp_path / "items.csv", "user,item,hours\nbob,Go,2")

    profiles = load_profiles(tmp_path)

    assert len(profiles) == 1
    assert dict(profiles[0].hourly_minutes) == {}


def test_missing_items_csv_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_raw_data(tmp_path)


def test_missing_columns_raise(tmp_path: Path) -> None:
    _write(tmp_path / "items.csv", "user,item\nbob,Go")
    with pytest.raises(ValueError, match="items.csv missing columns"):
        load_raw_data(tmp_path)


@pytest.mark.parametrize(
    "hourly_text, message",
    [
        ("user,hour,minutes\nbob,24,5", "hours outside"),
        ("user,hour,minutes\nbob,-1,5", "hours outside"),
        ("user,hour,minutes\nbob,3,-5", "negative minutes"),
    ],
)
def test_invalid_hourly_rows_raise(tmp_path: Path, hourly_text: str, message: str) -> None:
    _write(tmp_path / "items.csv", "user,item,hours\nbob,Go,2")
    _write(tmp_path / "hourly.csv", hourly_text)
    with pytest.raises(ValueError, match=message):
        load_raw_data(tmp_path)


def test_negative_hours_in_items_raise(tmp_path: Path) -> None:
    _write(tmp_path / "items.csv", "user,item,hours\nbob,Go,-2")
    with pytest.raises(ValueError, match="negative hours"):
        load_raw_data(tmp_path)


def test_build_profiles_total_matches_items(raw_dir: Path) -> None:
    for p in build_profiles(load_raw_data(raw_dir)):
        assert p.total_minutes == sum(i.minutes for i in p.items)


@pytest.mark.parametrize(
    "items_text, hourly_text, column",
    [
        ("user,item,hours\nbob,Go,1.5", "user,hour,minutes\nbob,3,5", "hours"),
        ("user,item,hours\nbob,Go,1", "user,hour,minutes\nbob,3,1.5", "minutes"),
        ("user,item,hours\nbob,Go,1", "user,hour,minutes\nbob,3.5,10", "hour"),
        ("user,item,hours\nbob,Go,one", "user,hour,minutes\nbob,3,5", "hours"),
    ],
)
def test_non_integer_values_are_rejected(tmp_path: Path, items_text: str, hourly_text: str, column: str) -> None:
    _write(tmp_path / "items.csv", items_text)
    _write(tmp_path / "hourly.csv", hourly_text)
    with pytest.raises(ValueError, match=f"column '{column}' must contain integers"):
        load_profiles(tmp_path)


def test_integral_decimal_values_are_accepted(tmp_path: Path) -> None:
    _write(tmp_path / "items.csv", "user,item,hours\nbob,Go,2.0")

    profiles = load_profiles(tmp_path)

    assert profiles[0].total_minutes == 120
