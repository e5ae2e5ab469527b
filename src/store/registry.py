"""Caller-owned collection of profiles plus the current matching target."""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, Optional

from ..exceptions import DuplicateProfileError, ProfileNotFoundError
from ..profiles.model import Profile
from ..ranking.top_k import top_k


logger = logging.getLogger(__name__)


class ProfileRegistry:
    """In-memory view of all known profiles with a name lookup map.

    Insertion order is preserved. Names are unique within a registry.
    """

    def __init__(self, profiles: Iterable[Profile] = ()) -> None:
        self._profiles: list[Profile] = []
        self._by_name: dict[str, int] = {}
        self._target_name: Optional[str] = None
        for p in profiles:
            self.add(p)

    def __len__(self) -> int:
        return len(self._profiles)

    def __iter__(self) -> Iterator[Profile]:
        return iter(self._profiles)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    @property
    def profiles(self) -> list[Profile]:
        return list(self._profiles)

    @property
    def target(self) -> Optional[Profile]:
        if self._target_name is None:
            return None
        return self.get(self._target_name)

    def add(self, profile: Profile, *, as_target: bool = False) -> Profile:
        if profile.name in self._by_name:
            raise DuplicateProfileError(f"Profile already exists: {profile.name!r}")
        self._by_name[profile.name] = len(self._profiles)
        self._profiles.append(profile)
        if as_target:
            self._target_name = profile.name
        logger.info("Added profile %s (target=%s, total=%d)", profile.name, bool(as_target), len(self._profiles))
        return profile

    def get(self, name: str) -> Profile:
        idx = self._by_name.get(name)
        if idx is None:
            raise ProfileNotFoundError(f"Unknown profile: {name!r}")
        return self._profiles[idx]

    def set_target(self, name: str) -> Profile:
        profile = self.get(name)
        self._target_name = profile.name
        return profile

    def can_match(self) -> bool:
        """True when a target is set and at least one other profile exists."""
        return self._target_name is not None and len(self._profiles) >= 2

    def similar_to_target(self, k: int) -> list[tuple[str, float]]:
        target = self.target
        if target is None:
            raise ValueError("No target profile selected")
        return top_k(target, self._profiles, k)
