"""Bounded top-k selection of the profiles most similar to a target."""

from __future__ import annotations

import heapq
import logging
import numbers
from dataclasses import dataclass
from typing import Iterable

from ..exceptions import InvalidArgumentError
from ..profiles.model import Profile
from ..scoring.similarity import score


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _Ranked:
    """Heap entry; `a < b` means `a` ranks below `b` (lower score, or same score and later name)."""

    score: float
    name: str

    def __lt__(self, other: "_Ranked") -> bool:
        if self.score != other.score:
            return self.score < other.score
        return self.name > other.name


def top_k(target: Profile, candidates: Iterable[Profile], k: int) -> list[tuple[str, float]]:
    """Return the `k` candidates most similar to `target` as (name, score), best first.

    Candidates named like the target are skipped. Ties on score are broken by
    name ascending, both for ordering and for which entries survive eviction.
    A single pass keeps at most `k` entries in a min-heap: O(n log k).
    """
    if isinstance(k, bool) or not isinstance(k, numbers.Integral):
        if not (isinstance(k, float) and k.is_integer()):
            raise InvalidArgumentError(f"k must be an integer, got {k!r}")
    k = int(k)
    if k < 0:
        raise InvalidArgumentError(f"k must be >= 0, got {k}")
    if k == 0:
        return []

    heap: list[_Ranked] = []
    scanned = 0
    for candidate in candidates:
        if candidate.name == target.name:
            continue
        scanned += 1
        entry = _Ranked(score=score(target, candidate), name=candidate.name)
        if len(heap) < k:
            heapq.heappush(heap, entry)
        elif heap[0] < entry:
            heapq.heapreplace(heap, entry)

    ranked = sorted(heap, key=lambda e: (-e.score, e.name))
    logger.debug("top_k target=%s scanned=%d k=%d returned=%d", target.name, scanned, k, len(ranked))
    return [(e.name, e.score) for e in ranked]
