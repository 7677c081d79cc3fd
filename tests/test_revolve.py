import math

import pytest

from profilesweep.model import Centroid, EnvelopePoint, Face, Mesh
from profilesweep.revolve import (
    build_mesh,
    calculate_centroid,
    cap_faces,
    face_color,
    revolve_points,
    side_faces,
)


def _env(*pts):
    return [EnvelopePoint(float(x), float(y)) for x, y in pts]


def test_face_color():
    assert face_color(0, 0) == "hsl(0, 70%, 60%)"
    assert face_color(1, 2) == "hsl(40, 70%, 60%)"
    assert face_color(12, 0) == "hsl(0, 70%, 60%)"
    assert face_color(11, 7) == "hsl(5, 70%, 60%)"


def test_revolve_points_layout():
    env = _env((1, 2), (3, 4))
    verts = revolve_points(env, 4)
    assert len(verts) == 8
    v = verts[1]
    assert (v.original_index, v.rotation_index) == (0, 1)
    assert v.x == 1.0
    assert v.y == pytest.approx(0.0, abs=1e-12)
    assert v.z == pytest.approx(2.0)
    v = verts[4 + 2]
    assert (v.original_index, v.rotation_index) == (1, 2)
    assert v.x == 3.0
    assert v.y == pytest.approx(-4.0)
    assert v.z == pytest.approx(0.0, abs=1e-12)
    # the seam ring lies exactly on the xy plane
    assert verts[0].z == 0.0 and verts[0].y == 2.0


def test_revolve_points_keep_radius():
    env = _env((0.5, 1.5))
    for v in revolve_points(env, 7):
        assert math.hypot(v.y, v.z) == pytest.approx(1.5)


def test_side_faces_topology():
    faces = side_faces(2, 4)
    assert len(faces) == 8
    assert faces[0] == Face((0, 1, 5), face_color(0, 0))
    assert faces[1] == Face((0, 5, 4), face_color(0, 0))
    # wrap-around segment
    assert faces[6].indices == (3, 0, 4)
    assert faces[7].indices == (3, 4, 7)
    assert faces[6].color == faces[7].color == face_color(0, 3)


def test_cap_faces():
    faces = cap_faces(12, 3, "#666666")
    assert [f.indices for f in faces] == [(12, 1, 0), (12, 2, 1), (12, 0, 2)]
    assert all(f.color == "#666666" for f in faces)


@pytest.mark.parametrize("length", [1, 2, 5, 9])
@pytest.mark.parametrize("divisions", [3, 4, 16, 31])
def test_counts_with_cap(length, divisions):
    env = _env(*[(1 + i, 1 + 0.5 * i) for i in range(length)])
    mesh = build_mesh(env, divisions)
    assert len(mesh.vertices) == length * divisions + 1
    assert len(mesh.faces) == 2 * divisions * (length - 1) + divisions
    center = mesh.vertices[-1]
    assert (center.x, center.y, center.z) == (1.0, 0.0, 0.0)
    assert center.original_index is None and center.rotation_index is None


@pytest.mark.parametrize("length", [1, 2, 6])
@pytest.mark.parametrize("divisions", [3, 16])
def test_counts_without_cap(length, divisions):
    env = _env(*[(i, 1 + i) for i in range(length)])
    mesh = build_mesh(env, divisions)
    assert len(mesh.vertices) == length * divisions
    assert len(mesh.faces) == 2 * divisions * (length - 1)


def test_face_indices_are_valid():
    env = _env((0.2, 1), (1, 2), (2, 2.5), (3, 1))
    mesh = build_mesh(env, 16)
    n = len(mesh.vertices)
    for face in mesh.faces:
        assert len(face.indices) == 3
        assert all(0 <= i < n for i in face.indices)


def test_cap_uses_cap_color():
    mesh = build_mesh(_env((1, 1), (2, 1)), 5, cap_color="#123456")
    assert [f.color for f in mesh.faces[-5:]] == ["#123456"] * 5
    assert all(f.color.startswith("hsl(") for f in mesh.faces[:-5])


def test_centroid_is_vertex_mean():
    env = _env((0.3, 1), (1.7, 2.2), (2.5, 0.4))
    mesh = build_mesh(env, 8)
    n = len(mesh.vertices)
    assert mesh.centroid.x == pytest.approx(sum(v.x for v in mesh.vertices) / n)
    assert mesh.centroid.y == pytest.approx(sum(v.y for v in mesh.vertices) / n)
    assert mesh.centroid.z == pytest.approx(sum(v.z for v in mesh.vertices) / n)
    # full turns cancel out in y and z
    assert mesh.centroid.y == pytest.approx(0.0, abs=1e-12)
    assert mesh.centroid.z == pytest.approx(0.0, abs=1e-12)


def test_calculate_centroid_empty():
    assert calculate_centroid([]) == Centroid(0.0, 0.0, 0.0)


def test_empty_envelope():
    mesh = build_mesh([], 16)
    assert mesh == Mesh.empty()
    assert not mesh
    assert mesh.faces == ()


def test_bad_divisions():
    with pytest.raises(ValueError):
        build_mesh(_env((0, 1), (1, 1)), 2)


def test_build_is_idempotent():
    env = _env((0.1, 1), (1, 1.5), (2, 1.2))
    assert build_mesh(env, 12) == build_mesh(env, 12)
