"""Display helpers for profiles and ranked matches (text, tables, JSON-ready dicts)."""

from __future__ import annotations

from typing import Any, Iterable, Mapping, Sequence

import pandas as pd

from .data import MINUTES_PER_HOUR
from .profiles.model import Profile
from .utils import to_percentage


def _hours(minutes: int) -> int:
    return int(minutes) // MINUTES_PER_HOUR


def format_profile(profile: Profile, *, item_width: int = 20) -> str:
    """Multi-line summary of a profile; playtime is shown in whole hours."""
    lines = [
        f"User Profile: {profile.name}",
        f"Total Playtime: {_hours(profile.total_minutes)} hours",
        f"Games ({len(profile.items)}):",
    ]
    for item in profile.items:
        lines.append(f"  - {item.name:<{item_width}} ({_hours(item.minutes)} hrs)")

    peaks = ", ".join(f"{hour}:00 ({minutes} mins)" for hour, minutes in profile.peak_hours())
    lines.append(f"Peak Play Hours: {peaks}")
    return "\n".join(lines)


def format_matches(matches: Sequence[tuple[str, float]], profiles: Mapping[str, Profile]) -> str:
    lines = [f"=== TOP {len(matches)} SIMILAR USERS ==="]
    for name, score in matches:
        lines.append("")
        lines.append(f"User: {name}")
        lines.append(f"Similarity Score: {to_percentage(score):.2f}%")
        profile = profiles.get(name)
        if profile is not None:
            lines.append(format_profile(profile))
    return "\n".join(lines)


def matches_frame(matches: Iterable[tuple[str, float]]) -> pd.DataFrame:
    rows = [{"name": name, "similarity": float(score), "similarity_pct": to_percentage(score)} for name, score in matches]
    return pd.DataFrame(rows, columns=["name", "similarity", "similarity_pct"])


def profile_view(profile: Profile) -> dict[str, Any]:
    return {
        "name": profile.name,
        "total_minutes": int(profile.total_minutes),
        "total_hours": _hours(profile.total_minutes),
        "items": [{"name": item.name, "minutes": int(item.minutes)} for item in profile.items],
        "hourly": [{"hour": int(h), "minutes": int(m)} for h, m in sorted(profile.hourly_minutes.items())],
        "peak_hours": [int(h) for h, _ in profile.peak_hours()],
    }
