"""Behavioral similarity between two player profiles.

Three sub-scores, each in [0, 1], combined with fixed convex weights:
- catalog overlap: Jaccard index over the sets of item names
- engagement magnitude: 1 - |ta - tb| / max(ta, tb) over total playtime
- temporal pattern: cosine similarity of the 24-hour playtime histograms
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from ..profiles.model import Profile


CATALOG_WEIGHT = 0.4
MAGNITUDE_WEIGHT = 0.3
TEMPORAL_WEIGHT = 0.3


@dataclass(frozen=True)
class SimilarityBreakdown:
    catalog: float
    magnitude: float
    temporal: float
    score: float


def catalog_overlap(a: Profile, b: Profile) -> float:
    names_a = a.item_names()
    names_b = b.item_names()
    common = names_a & names_b
    if not common:
        return 0.0
    return len(common) / len(names_a | names_b)


def engagement_magnitude(a: Profile, b: Profile) -> float:
    total_a = int(a.total_minutes)
    total_b = int(b.total_minutes)
    largest = max(total_a, total_b)
    # Two profiles with no playtime at all are identical on this axis.
    if largest == 0:
        return 1.0
    return 1.0 - abs(total_a - total_b) / largest


def temporal_pattern(a: Profile, b: Profile) -> float:
    vec_a = a.hourly_vector()
    vec_b = b.hourly_vector()
    norm_a = float(np.linalg.norm(vec_a))
    norm_b = float(np.linalg.norm(vec_b))
    if norm_a == 0.0 or norm_b == 0.0:
        return 0.0
    # Cosine of parallel vectors can land a few ulps above 1.0.
    return min(1.0, float(np.dot(vec_a, vec_b)) / (norm_a * norm_b))


def score_breakdown(a: Profile, b: Profile) -> SimilarityBreakdown:
    catalog = catalog_overlap(a, b)
    magnitude = engagement_magnitude(a, b)
    temporal = temporal_pattern(a, b)

    composite = CATALOG_WEIGHT * catalog + MAGNITUDE_WEIGHT * magnitude + TEMPORAL_WEIGHT * temporal
    composite = min(1.0, max(0.0, composite))
    return SimilarityBreakdown(catalog=catalog, magnitude=magnitude, temporal=temporal, score=composite)


def score(a: Profile, b: Profile) -> float:
    """Composite similarity in [0, 1]. Symmetric; does not special-case a is b."""
    return score_breakdown(a, b).score
