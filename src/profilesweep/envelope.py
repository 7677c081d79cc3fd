"""Coarse contour around a profile, used as the sweep input.

This is not an alpha shape or a hull. The profile is subsampled to about
eight points, every sample is pushed outward by scaling its ``y`` by the
alpha radius, and the result gets one pass of a three-point weighted
average. The mesh relies on exactly this coarse, over-inclusive outline.
"""

from __future__ import annotations

from typing import List, Sequence

from profilesweep.model import EnvelopePoint

TARGET_SAMPLES = 8
ALPHA_RADIUS = 1.5
SMOOTHING = 0.3


def sample_stride(count: int) -> int:
    return max(1, count // TARGET_SAMPLES)


def sample_indices(count: int) -> List[int]:
    """Indices kept by subsampling; the last index is always included."""

    if count <= 0:
        return []
    stride = sample_stride(count)
    indices = list(range(0, count, stride))
    if (count - 1) % stride != 0:
        indices.append(count - 1)
    return indices


def smooth_envelope(envelope: Sequence, weight: float = SMOOTHING) -> List[EnvelopePoint]:
    """One pass of ``curr*(1-w) + (prev+next)*w/2``, clamped at both ends."""

    if len(envelope) < 3:
        return list(envelope)

    last = len(envelope) - 1
    smoothed = []
    for i, curr in enumerate(envelope):
        prev = envelope[max(0, i - 1)]
        nxt = envelope[min(last, i + 1)]
        smoothed.append(EnvelopePoint(
            curr.x * (1 - weight) + (prev.x + nxt.x) * weight / 2,
            curr.y * (1 - weight) + (prev.y + nxt.y) * weight / 2))
    return smoothed


def build_envelope(profile: Sequence, alpha_radius: float = ALPHA_RADIUS,
                   smoothing: float = SMOOTHING) -> list:
    """Subsample, expand and smooth ``profile`` into an envelope.

    ``profile`` holds anything with ``x`` and ``y`` attributes. Profiles
    of fewer than two points are returned unchanged.
    """

    if len(profile) < 2:
        return list(profile)

    envelope = [EnvelopePoint(profile[i].x, profile[i].y * alpha_radius)
                for i in sample_indices(len(profile))]
    if smoothing > 0:
        envelope = smooth_envelope(envelope, smoothing)
    return envelope


def _catmullrom(p0: float, p1: float, p2: float, p3: float, t: float) -> float:
    t2 = t * t
    t3 = t2 * t
    return 0.5 * ((2 * p1)
                  + (-p0 + p2) * t
                  + (2 * p0 - 5 * p1 + 4 * p2 - p3) * t2
                  + (-p0 + 3 * p1 - 3 * p2 + p3) * t3)


def interpolate_profile(points: Sequence, steps: int) -> list:
    """Insert ``steps`` Catmull-Rom samples between consecutive points.

    The original points are kept in place; inserted samples are
    :class:`EnvelopePoint` values. End spans reuse the end point as the
    missing neighbour.
    """

    if steps < 0:
        raise ValueError(f"steps must be >= 0, got {steps}")
    if steps == 0 or len(points) < 2:
        return list(points)

    count = len(points)
    result = []
    for i in range(count):
        p1 = points[i]
        result.append(p1)
        if i == count - 1:
            break
        p2 = points[i + 1]
        p0 = points[i - 1] if i > 0 else p1
        p3 = points[i + 2] if i < count - 2 else p2
        for j in range(1, steps + 1):
            t = j / (steps + 1)
            result.append(EnvelopePoint(_catmullrom(p0.x, p1.x, p2.x, p3.x, t),
                                        _catmullrom(p0.y, p1.y, p2.y, p3.y, t)))
    return result


__all__ = [
    "sample_stride",
    "sample_indices",
    "smooth_envelope",
    "build_envelope",
    "interpolate_profile",
]
