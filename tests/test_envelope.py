import math

import pytest

from profilesweep.envelope import (
    build_envelope,
    interpolate_profile,
    sample_indices,
    sample_stride,
    smooth_envelope,
)
from profilesweep.model import EnvelopePoint, ProfilePoint


def _profile(n):
    return [ProfilePoint(float(i), 1.0 + 0.1 * i, i + 1) for i in range(n)]


def test_sample_stride():
    assert sample_stride(1) == 1
    assert sample_stride(8) == 1
    assert sample_stride(15) == 1
    assert sample_stride(16) == 2
    assert sample_stride(40) == 5


def test_sixteen_points_subsample_to_eight_plus_last():
    idx = sample_indices(16)
    assert idx[:8] == [0, 2, 4, 6, 8, 10, 12, 14]
    assert idx[-1] == 15
    assert len(idx) == 9

    prof = _profile(16)
    env = build_envelope(prof, smoothing=0)
    assert len(env) == 9
    assert env[-1].x == prof[-1].x
    assert env[-1].y == pytest.approx(prof[-1].y * 1.5)


def test_last_point_not_duplicated():
    # stride 1 visits the last index already
    assert sample_indices(8) == list(range(8))
    # stride 2 with an odd count ends on the last index too
    assert sample_indices(17) == list(range(0, 17, 2))
    assert len(build_envelope(_profile(8), smoothing=0)) == 8


def test_short_profiles_returned_unchanged():
    assert build_envelope([]) == []
    one = _profile(1)
    env = build_envelope(one)
    assert env == one
    assert env is not one


def test_expansion_scales_y_only():
    prof = _profile(4)
    env = build_envelope(prof, alpha_radius=2.0, smoothing=0)
    assert [e.x for e in env] == [p.x for p in prof]
    assert [e.y for e in env] == [p.y * 2.0 for p in prof]


def test_smoothing_weights():
    env = [EnvelopePoint(0.0, 0.0), EnvelopePoint(1.0, 1.0), EnvelopePoint(2.0, 0.0)]
    sm = smooth_envelope(env, 0.3)
    assert sm[0].x == pytest.approx(0.15)
    assert sm[0].y == pytest.approx(0.15)
    assert sm[1].x == pytest.approx(1.0)
    assert sm[1].y == pytest.approx(0.7)
    assert sm[2].x == pytest.approx(1.85)
    assert sm[2].y == pytest.approx(0.15)


def test_two_point_envelope_is_not_smoothed():
    prof = _profile(2)
    env = build_envelope(prof, alpha_radius=1.0, smoothing=0.3)
    assert [(e.x, e.y) for e in env] == [(p.x, p.y) for p in prof]


def test_build_envelope_default_smoothing_applied():
    prof = _profile(3)
    env = build_envelope(prof)
    raw = [EnvelopePoint(p.x, p.y * 1.5) for p in prof]
    assert env == smooth_envelope(raw, 0.3)
    # first point is pulled toward its neighbour, so it leaves x == 0
    assert env[0].x > 0


@pytest.mark.parametrize("n", range(2, 41))
def test_envelope_length_bound(n):
    stride = sample_stride(n)
    env = build_envelope(_profile(n))
    assert len(env) <= math.ceil(n / stride) + 1


def test_interpolate_zero_steps():
    prof = _profile(3)
    assert interpolate_profile(prof, 0) == prof


def test_interpolate_linear_points():
    pts = [EnvelopePoint(float(i), 0.0) for i in range(4)]
    out = interpolate_profile(pts, 2)
    assert len(out) == 4 + 3 * 2
    assert out[0] is pts[0]
    assert out[3] is pts[1]
    assert out[9] is pts[3]
    assert out[4].x == pytest.approx(4.0 / 3.0)
    assert out[5].x == pytest.approx(5.0 / 3.0)
    assert all(p.y == pytest.approx(0.0) for p in out)


def test_interpolate_rejects_negative_steps():
    with pytest.raises(ValueError):
        interpolate_profile(_profile(3), -1)
