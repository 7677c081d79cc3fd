"""Surface of revolution swept from an envelope around the x axis."""

from __future__ import annotations

import logging
import math
from typing import List, Sequence, Tuple

from profilesweep.model import Centroid, Face, Mesh, Vertex

logger = logging.getLogger(__name__)

pi2 = 2.0 * math.pi

DIVISIONS = 16
CAP_COLOR = "#666666"


def face_color(ring: int, segment: int) -> str:
    hue = (ring * 30 + segment * 5) % 360
    return f"hsl({hue}, 70%, 60%)"


def _angle_table(divisions: int) -> Tuple[List[float], List[float]]:
    # index 0 is exact so the seam ring lies on the xy plane
    cos_t = [1.0]
    sin_t = [0.0]
    for j in range(1, divisions):
        angle = pi2 * j / divisions
        cos_t.append(math.cos(angle))
        sin_t.append(math.sin(angle))
    return cos_t, sin_t


def revolve_points(envelope: Sequence, divisions: int = DIVISIONS) -> List[Vertex]:
    """Rotate every envelope point about the x axis ``divisions`` times.

    Vertices are laid out ring by ring: vertex ``k*divisions + j`` is
    envelope point ``k`` at angular step ``j``.
    """

    cos_t, sin_t = _angle_table(divisions)
    verts = []
    for k, p in enumerate(envelope):
        for j in range(divisions):
            verts.append(Vertex(p.x, p.y * cos_t[j], p.y * sin_t[j], k, j))
    return verts


def side_faces(count: int, divisions: int = DIVISIONS) -> List[Face]:
    """Two triangles per quad between consecutive rings, same diagonal throughout."""

    faces = []
    for i in range(count - 1):
        for j in range(divisions):
            nj = (j + 1) % divisions
            a = i * divisions + j
            b = i * divisions + nj
            c = (i + 1) * divisions + nj
            d = (i + 1) * divisions + j
            color = face_color(i, j)
            faces.append(Face((a, b, c), color))
            faces.append(Face((a, c, d), color))
    return faces


def cap_faces(center: int, divisions: int = DIVISIONS,
              color: str = CAP_COLOR) -> List[Face]:
    """Triangle fan from ``center`` to the first ring."""

    return [Face((center, (j + 1) % divisions, j), color)
            for j in range(divisions)]


def calculate_centroid(vertices: Sequence[Vertex]) -> Centroid:
    if not vertices:
        return Centroid()
    n = len(vertices)
    return Centroid(sum(v.x for v in vertices) / n,
                    sum(v.y for v in vertices) / n,
                    sum(v.z for v in vertices) / n)


def build_mesh(envelope: Sequence, divisions: int = DIVISIONS,
               cap_color: str = CAP_COLOR) -> Mesh:
    """Sweep ``envelope`` into vertices, faces and a centroid.

    When the first envelope point is off the origin (``x != 0``) the base
    end is closed by a centre vertex at ``(x0, 0, 0)`` and a triangle fan.
    """

    if divisions < 3:
        raise ValueError(f"divisions must be >= 3, got {divisions}")
    if not envelope:
        return Mesh.empty()

    verts = revolve_points(envelope, divisions)
    faces = side_faces(len(envelope), divisions)

    if envelope[0].x != 0:
        center = len(verts)
        verts.append(Vertex(envelope[0].x, 0.0, 0.0))
        faces.extend(cap_faces(center, divisions, cap_color))

    centroid = calculate_centroid(verts)
    logger.debug("swept %d envelope points: %d vertices, %d faces, centroid %s",
                 len(envelope), len(verts), len(faces), centroid)
    return Mesh(tuple(verts), tuple(faces), centroid)


__all__ = [
    "face_color",
    "revolve_points",
    "side_faces",
    "cap_faces",
    "calculate_centroid",
    "build_mesh",
]
