from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Tuple

import pandas as pd

from .profiles.model import HOURS_PER_DAY, Profile


logger = logging.getLogger(__name__)

MINUTES_PER_HOUR = 60


@dataclass(frozen=True)
class RawProfileData:
    items: pd.DataFrame
    hourly: pd.DataFrame


REQUIRED_COLUMNS: Dict[str, Tuple[str, ...]] = {
    "items": ("user", "item", "hours"),
    "hourly": ("user", "hour", "minutes"),
}


def _empty_hourly() -> pd.DataFrame:
    return pd.DataFrame(
        {
            "user": pd.Series([], dtype="string"),
            "hour": pd.Series([], dtype="int64"),
            "minutes": pd.Series([], dtype="int64"),
        }
    )


def _read_csv(path: Path, name: str, *, int_columns: Tuple[str, ...]) -> pd.DataFrame:
    """Read every column as string, check required columns, then cast the numeric ones."""
    df = pd.read_csv(path, dtype="string", keep_default_na=False)
    missing = [c for c in REQUIRED_COLUMNS[name] if c not in df.columns]
    if missing:
        raise ValueError(f"{name}.csv missing columns: {missing}")

    for col in int_columns:
        try:
            values = pd.to_numeric(df[col].str.strip(), errors="raise")
        except (ValueError, TypeError) as exc:
            raise ValueError(f"{name}.csv column {col!r} must contain integers: {exc}") from exc
        # Reject 1.5 rather than truncating it to 1.
        if values.isna().any() or (values != values.round()).any():
            raise ValueError(f"{name}.csv column {col!r} must contain integers")
        df[col] = values.astype("int64")
    return df


def load_raw_data(raw_dir: Path) -> RawProfileData:
    """Load `items.csv` (required) and `hourly.csv` (optional) from a directory.

    Notes
    -----
    Playtime per item is recorded in whole hours; hourly activity in minutes.
    """
    raw_dir = Path(raw_dir)
    items_path = raw_dir / "items.csv"
    if not items_path.exists():
        raise FileNotFoundError(f"items.csv not found in {raw_dir}")

    items = _read_csv(items_path, "items", int_columns=("hours",))

    hourly_path = raw_dir / "hourly.csv"
    if hourly_path.exists():
        hourly = _read_csv(hourly_path, "hourly", int_columns=("hour", "minutes"))
    else:
        logger.info("hourly.csv not found in %s; profiles will have no hourly data", raw_dir)
        hourly = _empty_hourly()

    data = RawProfileData(items=items, hourly=hourly)
    validate_schema(data)
    return data


def validate_schema(data: RawProfileData) -> None:
    """Validate that all required columns exist and basic constraints hold."""
    for name, cols in REQUIRED_COLUMNS.items():
        df = getattr(data, name)
        missing = [c for c in cols if c not in df.columns]
        if missing:
            raise ValueError(f"{name}.csv missing columns: {missing}")

    items = data.items
    if (items["user"].astype("string").str.strip() == "").any():
        raise ValueError("items.csv contains empty user names")
    if (items["item"].astype("string").str.strip() == "").any():
        raise ValueError("items.csv contains empty item names")
    if (items["hours"] < 0).any():
        raise ValueError("items.csv contains negative hours")

    hourly = data.hourly
    if (hourly["user"].astype("string").str.strip() == "").any():
        raise ValueError("hourly.csv contains empty user names")
    bad_hours = ~hourly["hour"].between(0, HOURS_PER_DAY - 1)
    if bad_hours.any():
        bad_values = sorted(set(hourly.loc[bad_hours, "hour"].tolist()))
        raise ValueError(f"hourly.csv has hours outside 0..{HOURS_PER_DAY - 1}: {bad_values}")
    if (hourly["minutes"] < 0).any():
        raise ValueError("hourly.csv contains negative minutes")


def build_profiles(data: RawProfileData) -> list[Profile]:
    """Build one Profile per user, ordered by first appearance (items.csv, then hourly.csv)."""
    profiles: dict[str, Profile] = {}

    def _profile(user: str) -> Profile:
        p = profiles.get(user)
        if p is None:
            p = Profile(user)
            profiles[user] = p
        return p

    for row in data.items.itertuples(index=False):
        _profile(str(row.user)).add_item(str(row.item), int(row.hours) * MINUTES_PER_HOUR)

    for row in data.hourly.itertuples(index=False):
        _profile(str(row.user)).add_hourly_minutes(int(row.hour), int(row.minutes))

    return list(profiles.values())


def load_profiles(raw_dir: Path) -> list[Profile]:
    data = load_raw_data(raw_dir)
    profiles = build_profiles(data)
    logger.info(
        "Loaded profiles=%d items=%d hourly_rows=%d from %s",
        len(profiles),
        len(data.items),
        len(data.hourly),
        raw_dir,
    )
    return profiles
