from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

import numpy as np


HOURS_PER_DAY = 24


@dataclass(frozen=True)
class CatalogItem:
    name: str
    minutes: int


class Profile:
    """A user's recorded catalog items, total playtime and hourly histogram.

    Grows only through `add_item` / `add_hourly_minutes`; the public views are
    read-only. `total_minutes` is a running sum kept by `add_item`, never
    recomputed from `items`.
    """

    _READ_ONLY = frozenset({"name", "items", "hourly_minutes", "total_minutes"})

    def __init__(self, name: str) -> None:
        if name is None or str(name).strip() == "":
            raise ValueError("profile name must be non-empty")
        object.__setattr__(self, "_name", str(name))
        self._items: list[CatalogItem] = []
        self._hourly: dict[int, int] = {}
        self._total = 0

    def __setattr__(self, key: str, value: object) -> None:
        if key in self._READ_ONLY or key == "_name":
            raise AttributeError(f"profile {key.lstrip('_')} is read-only; use the add_* methods")
        super().__setattr__(key, value)

    def __repr__(self) -> str:
        return f"Profile(name={self._name!r}, items={len(self._items)}, total_minutes={self._total})"

    @property
    def name(self) -> str:
        return self._name

    @property
    def items(self) -> tuple[CatalogItem, ...]:
        return tuple(self._items)

    @property
    def hourly_minutes(self) -> Mapping[int, int]:
        return MappingProxyType(self._hourly)

    @property
    def total_minutes(self) -> int:
        return self._total

    def add_item(self, name: str, minutes: int) -> int:
        """Append a catalog item and return the updated total playtime (minutes)."""
        if name is None or str(name).strip() == "":
            raise ValueError("item name must be non-empty")
        minutes = int(minutes)
        if minutes < 0:
            raise ValueError(f"item minutes must be >= 0, got {minutes}")

        self._items.append(CatalogItem(name=str(name), minutes=minutes))
        self._total += minutes
        return self._total

    def add_hourly_minutes(self, hour: int, minutes: int) -> int:
        """Add minutes played at `hour` (0..23); returns the accumulated minutes for that hour."""
        hour = int(hour)
        minutes = int(minutes)
        if not 0 <= hour < HOURS_PER_DAY:
            raise ValueError(f"hour must be in 0..{HOURS_PER_DAY - 1}, got {hour}")
        if minutes < 0:
            raise ValueError(f"hourly minutes must be >= 0, got {minutes}")

        self._hourly[hour] = self._hourly.get(hour, 0) + minutes
        return self._hourly[hour]

    def item_names(self) -> set[str]:
        return {item.name for item in self._items}

    def hourly_vector(self) -> np.ndarray:
        """24-dim float vector of minutes per hour, 0 for hours never recorded."""
        vec = np.zeros(HOURS_PER_DAY, dtype=np.float64)
        for hour, minutes in self._hourly.items():
            vec[hour] = float(minutes)
        return vec

    def peak_hours(self) -> list[tuple[int, int]]:
        """(hour, minutes) pairs with minutes > 0, ascending by hour."""
        return [(h, m) for h, m in sorted(self._hourly.items()) if m > 0]
