"""Immutable records passed between the profilesweep pipeline stages."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple


@dataclass(frozen=True)
class ProfilePoint:
    """A placed 2D profile point; ``index`` is the 1-based sequence index."""

    x: float
    y: float
    index: int


@dataclass(frozen=True)
class EnvelopePoint:
    """A point of the coarsened contour that is swept into the mesh."""

    x: float
    y: float


@dataclass(frozen=True)
class Vertex:
    """Swept vertex.

    ``original_index`` is the envelope point the vertex came from and
    ``rotation_index`` its angular step. The cap centre vertex has neither.
    """

    x: float
    y: float
    z: float
    original_index: Optional[int] = None
    rotation_index: Optional[int] = None


@dataclass(frozen=True)
class Face:
    """Triangle referencing three vertex indices of its mesh."""

    indices: Tuple[int, int, int]
    color: str


@dataclass(frozen=True)
class Centroid:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


@dataclass(frozen=True)
class Mesh:
    """Result of a revolution sweep."""

    vertices: Tuple[Vertex, ...] = ()
    faces: Tuple[Face, ...] = ()
    centroid: Centroid = field(default_factory=Centroid)

    @classmethod
    def empty(cls) -> "Mesh":
        return cls()

    def __bool__(self) -> bool:
        return len(self.vertices) > 0


@dataclass(frozen=True)
class Projection:
    """Screen-space position of a vertex; ``depth`` is only used for sorting."""

    screen_x: float
    screen_y: float
    depth: float


@dataclass(frozen=True)
class ProfileStats:
    point_count: int
    base_radius: float
    x_min: float
    x_max: float
    y_min: float
    y_max: float


__all__ = [
    "ProfilePoint",
    "EnvelopePoint",
    "Vertex",
    "Face",
    "Centroid",
    "Mesh",
    "Projection",
    "ProfileStats",
]
