import logging
import math

import pytest

from profilesweep.model import ProfilePoint
from profilesweep.placement import (
    circumference_to_radius,
    next_point,
    place_points,
    profile_stats,
    radii,
    radius_to_circumference,
)

pi2 = 2.0 * math.pi


def _dist(a, b):
    return math.hypot(b.x - a.x, b.y - a.y)


class TestRadius:
    """circumference <-> radius conversion"""

    @pytest.mark.parametrize("m", [0.001, 1.0, pi2, 12.5, 1e6])
    def test_circumference_to_radius(self, m):
        assert circumference_to_radius(m) == m / pi2
        assert math.isclose(radius_to_circumference(circumference_to_radius(m)), m,
                            rel_tol=1e-12)

    def test_radii(self):
        assert radii([pi2, 2 * pi2]) == [1.0, 2.0]


def test_place_points_scenario():
    pts = place_points([pi2, 2 * pi2, pi2])
    dx = math.sqrt(1.3 ** 2 - 1.0)
    assert [p.index for p in pts] == [1, 2, 3]
    assert pts[0].x == 0.0 and pts[0].y == pytest.approx(1.0)
    assert pts[1].x == pytest.approx(0.8307, abs=1e-3)
    assert pts[1].y == pytest.approx(2.0, abs=1e-3)
    assert pts[2].x == pytest.approx(1.6614, abs=1e-3)
    assert pts[2].y == pytest.approx(1.0, abs=1e-3)
    assert pts[2].x == pytest.approx(2 * dx)


def test_place_points_empty():
    assert place_points([]) == []


def test_place_points_single():
    assert place_points([pi2]) == [ProfilePoint(0.0, 1.0, 1)]


def test_place_points_keeps_spacing_and_order():
    mags = [10.0, 11.0, 12.0, 11.5, 9.0, 9.5, 10.2]
    pts = place_points(mags)
    base = circumference_to_radius(mags[0])
    assert len(pts) == len(mags)
    for a, b in zip(pts, pts[1:]):
        assert b.x >= a.x
        assert math.isclose(_dist(a, b), base * 1.3, rel_tol=1e-9)
    for p, m in zip(pts, mags):
        assert p.y == circumference_to_radius(m)


def test_place_points_custom_spacing():
    pts = place_points([pi2, pi2], spacing_factor=2.0)
    assert pts[1].x == pytest.approx(2.0)


def test_fallback_stacks_vertically(caplog):
    with caplog.at_level(logging.WARNING, logger="profilesweep.placement"):
        pts = place_points([pi2, pi2 * 10])
    assert pts[1].x == pts[0].x == 0.0
    assert pts[1].y == pytest.approx(10.0)
    records = [r for r in caplog.records if r.name == "profilesweep.placement"]
    assert len(records) == 1
    assert records[0].levelno == logging.WARNING


def test_fallback_then_continues(caplog):
    with caplog.at_level(logging.WARNING, logger="profilesweep.placement"):
        pts = place_points([pi2, pi2 * 10, pi2 * 10])
    # the third point sits level with the second and steps a full spacing right
    assert pts[2].x == pytest.approx(1.3)
    assert len(caplog.records) == 1


def test_next_point():
    prev = ProfilePoint(2.0, 1.0, 1)
    x, y, stacked = next_point(prev, 1.0, 1.0)
    assert (x, y, stacked) == (pytest.approx(3.3), 1.0, False)
    x, y, stacked = next_point(prev, 5.0, 1.0)
    assert (x, y, stacked) == (2.0, 5.0, True)


def test_next_point_exact_spacing_is_not_a_fallback():
    # discriminant of exactly zero still steps (by zero) without stacking
    prev = ProfilePoint(0.0, 0.0, 1)
    x, y, stacked = next_point(prev, 2.0, 1.0, spacing_factor=2.0)
    assert stacked is False
    assert x == 0.0


def test_profile_stats():
    pts = place_points([pi2, 2 * pi2, pi2])
    stats = profile_stats(pts)
    assert stats.point_count == 3
    assert stats.base_radius == pytest.approx(1.0)
    assert stats.x_min == 0.0
    assert stats.x_max == pytest.approx(pts[2].x)
    assert stats.y_min == pytest.approx(1.0)
    assert stats.y_max == pytest.approx(2.0)


def test_profile_stats_empty():
    assert profile_stats([]) is None
