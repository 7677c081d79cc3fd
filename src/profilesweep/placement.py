"""Place a sequence of circumferences as points of a 2D profile.

Each magnitude is read as the circumference of a cross-section, so its
radius becomes the ``y`` coordinate of a profile point. Consecutive points
are kept a fixed distance apart, ``base_radius * spacing_factor``, where the
base radius is the radius of the first magnitude; ``x`` is whatever
horizontal step satisfies that distance. The profile always advances to the
right. When the change in radius is larger than the spacing no horizontal
step can satisfy the distance; the point is then stacked vertically above
(or below) its predecessor and a warning is logged.
"""

from __future__ import annotations

import logging
import math
from typing import Iterable, List, Optional, Sequence, Tuple

from profilesweep.model import ProfilePoint, ProfileStats

logger = logging.getLogger(__name__)

pi2 = 2.0 * math.pi

SPACING_FACTOR = 1.3


def circumference_to_radius(circumference: float) -> float:
    return circumference / pi2


def radius_to_circumference(radius: float) -> float:
    return radius * pi2


def radii(magnitudes: Iterable[float]) -> List[float]:
    return [circumference_to_radius(m) for m in magnitudes]


def next_point(prev: ProfilePoint, target_y: float, base_radius: float,
               spacing_factor: float = SPACING_FACTOR) -> Tuple[float, float, bool]:
    """Solve for the point following ``prev`` at height ``target_y``.

    Returns ``(x, y, stacked)``. ``stacked`` is ``True`` when the spacing
    could not be met and ``x`` was left at ``prev.x``.
    """

    spacing = base_radius * spacing_factor
    dy = target_y - prev.y
    discriminant = spacing * spacing - dy * dy
    if discriminant >= 0:
        return prev.x + math.sqrt(discriminant), target_y, False
    return prev.x, target_y, True


def place_points(magnitudes: Sequence[float],
                 spacing_factor: float = SPACING_FACTOR) -> List[ProfilePoint]:
    """Turn circumference magnitudes into an ordered list of profile points."""

    if not magnitudes:
        return []

    rr = radii(magnitudes)
    base_radius = rr[0]
    points = [ProfilePoint(0.0, rr[0], 1)]
    for i in range(1, len(rr)):
        prev = points[-1]
        x, y, stacked = next_point(prev, rr[i], base_radius, spacing_factor)
        if stacked:
            logger.warning(
                "point %d cannot keep distance %.2f from point %d (dy=%.2f); "
                "stacking at x=%.4f",
                i + 1, base_radius * spacing_factor, prev.index, rr[i] - prev.y, x)
        points.append(ProfilePoint(x, y, i + 1))
    return points


def profile_stats(profile: Sequence[ProfilePoint]) -> Optional[ProfileStats]:
    """Point count, base radius and extents of ``profile``, or ``None``."""

    if not profile:
        return None
    xs = [p.x for p in profile]
    ys = [p.y for p in profile]
    return ProfileStats(point_count=len(profile),
                        base_radius=profile[0].y,
                        x_min=min(xs), x_max=max(xs),
                        y_min=min(ys), y_max=max(ys))


__all__ = [
    "circumference_to_radius",
    "radius_to_circumference",
    "radii",
    "next_point",
    "place_points",
    "profile_stats",
]
