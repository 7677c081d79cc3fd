"""View state, rotation about the centroid and perspective projection.

Projection is a pure function of the vertex, the view state, the centroid
and the viewport size. Faces are ordered for a painter's algorithm by the
mean depth of their vertices; there is no depth buffer, so faces of equal
depth keep their input order.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Sequence, Tuple

from profilesweep.model import Centroid, Face, Mesh, Projection

PERSPECTIVE = 500.0
UNIT_SCALE = 50.0
ZOOM_MIN = 0.1
ZOOM_MAX = 5.0

# smallest distance allowed between the focal point and a projected vertex
_MIN_DEPTH = 1e-6


@dataclass
class ViewState:
    """Interactive rotation (radians) and zoom.

    ``rotation_z`` is carried along but not applied by :func:`project`.
    """

    rotation_x: float = 0.0
    rotation_y: float = 0.0
    rotation_z: float = 0.0
    zoom: float = 1.0

    def rotate(self, dx: float, dy: float) -> None:
        """Apply a drag: horizontal motion turns about Y, vertical about X."""
        self.rotation_y += dx
        self.rotation_x += dy

    def zoom_by(self, factor: float, minimum: float = ZOOM_MIN,
                maximum: float = ZOOM_MAX) -> None:
        self.zoom = max(minimum, min(maximum, self.zoom * factor))

    def advance(self, step: float) -> None:
        self.rotation_y += step

    def reset(self) -> None:
        self.rotation_x = self.rotation_y = self.rotation_z = 0.0
        self.zoom = 1.0


def _relative_rotation(p, view: ViewState,
                       centroid: Centroid) -> Tuple[float, float, float]:
    x = p.x - centroid.x
    y = p.y - centroid.y
    z = p.z - centroid.z

    cx = math.cos(view.rotation_x)
    sx = math.sin(view.rotation_x)
    y1 = y * cx - z * sx
    z1 = y * sx + z * cx

    cy = math.cos(view.rotation_y)
    sy = math.sin(view.rotation_y)
    x2 = x * cy + z1 * sy
    z2 = -x * sy + z1 * cy
    return x2, y1, z2


def rotate_point(p, view: ViewState, centroid: Centroid) -> Tuple[float, float, float]:
    """Rotate ``p`` about ``centroid`` by ``rotation_x`` and then ``rotation_y``."""

    x, y, z = _relative_rotation(p, view, centroid)
    return x + centroid.x, y + centroid.y, z + centroid.z


def project(p, view: ViewState, centroid: Centroid, viewport: Tuple[float, float],
            perspective: float = PERSPECTIVE,
            unit_scale: float = UNIT_SCALE) -> Projection:
    """Project ``p`` onto a ``viewport = (width, height)`` pixel surface.

    The centroid lands on the viewport centre and screen ``y`` grows
    downward.
    """

    width, height = viewport
    rx, ry, rz = _relative_rotation(p, view, centroid)
    scale = perspective / max(perspective + rz, _MIN_DEPTH) * view.zoom * unit_scale
    return Projection(width / 2 + rx * scale, height / 2 - ry * scale, rz)


def project_mesh(mesh: Mesh, view: ViewState, viewport: Tuple[float, float],
                 perspective: float = PERSPECTIVE,
                 unit_scale: float = UNIT_SCALE) -> List[Projection]:
    return [project(v, view, mesh.centroid, viewport, perspective, unit_scale)
            for v in mesh.vertices]


def face_depth(face: Face, projections: Sequence[Projection]) -> float:
    return sum(projections[i].depth for i in face.indices) / len(face.indices)


def depth_order(faces: Sequence[Face], projections: Sequence[Projection]) -> List[Face]:
    """Faces sorted by ascending depth, the drawing order of the painter's algorithm."""

    return sorted(faces, key=lambda f: face_depth(f, projections))


__all__ = [
    "ViewState",
    "rotate_point",
    "project",
    "project_mesh",
    "face_depth",
    "depth_order",
]
