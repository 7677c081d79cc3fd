"""End-to-end pipeline: magnitudes -> profile -> envelope -> mesh.

The functions here are pure; :class:`Scene` is the state an interactive
front end owns between frames (last profile and mesh, view state, auto
rotation) and replaces wholesale whenever new magnitudes arrive.
"""

from __future__ import annotations

import logging
import math
import numbers
from typing import Any, Dict, Iterable, List, Optional

from profilesweep.config import DEFAULT_CONFIG, SweepConfig
from profilesweep.envelope import build_envelope, interpolate_profile
from profilesweep.errors import InvalidMagnitudeError
from profilesweep.model import EnvelopePoint, Mesh, ProfilePoint, ProfileStats
from profilesweep.placement import place_points, profile_stats
from profilesweep.projection import ViewState
from profilesweep.revolve import build_mesh

logger = logging.getLogger(__name__)


def validate_magnitudes(values: Optional[Iterable[Any]]) -> List[float]:
    """Return ``values`` as floats, rejecting anything that is not a positive real.

    ``None`` and empty input are accepted and give an empty list.
    """

    if values is None:
        return []
    result = []
    for i, v in enumerate(values):
        if isinstance(v, bool) or not isinstance(v, numbers.Real):
            raise InvalidMagnitudeError(i, v, "not a number")
        f = float(v)
        if not math.isfinite(f):
            raise InvalidMagnitudeError(i, v, "not finite")
        if f <= 0:
            raise InvalidMagnitudeError(i, v, "must be greater than zero")
        result.append(f)
    return result


def compute_profile(magnitudes: Optional[Iterable[Any]],
                    config: SweepConfig = DEFAULT_CONFIG) -> List[ProfilePoint]:
    return place_points(validate_magnitudes(magnitudes), config.spacing_factor)


def compute_envelope(profile, config: SweepConfig = DEFAULT_CONFIG) -> list:
    points = interpolate_profile(profile, config.interpolation_steps)
    return build_envelope(points, config.alpha_radius, config.envelope_smoothing)


def compute_mesh(profile, config: SweepConfig = DEFAULT_CONFIG) -> Mesh:
    envelope = compute_envelope(profile, config)
    logger.debug("envelope of %d profile points has %d points",
                 len(profile), len(envelope))
    return build_mesh(envelope, config.rotation_divisions, config.cap_color)


def compute_shape(magnitudes: Optional[Iterable[Any]],
                  config: SweepConfig = DEFAULT_CONFIG) -> Mesh:
    return compute_mesh(compute_profile(magnitudes, config), config)


class Scene:
    """Last computed profile and mesh together with the interactive view."""

    def __init__(self, config: SweepConfig = DEFAULT_CONFIG):
        self.config = config
        self.magnitudes: List[float] = []
        self.profile: List[ProfilePoint] = []
        self.envelope: List[EnvelopePoint] = []
        self.mesh: Mesh = Mesh.empty()
        self.view = ViewState()
        self.auto_rotate = False

    def update(self, magnitudes: Optional[Iterable[Any]]) -> Mesh:
        """Recompute everything from ``magnitudes``.

        Input is validated before any state changes, so a rejected
        sequence leaves the previous profile and mesh in place.
        """
        values = validate_magnitudes(magnitudes)
        profile = place_points(values, self.config.spacing_factor)
        envelope = compute_envelope(profile, self.config)
        mesh = build_mesh(envelope, self.config.rotation_divisions, self.config.cap_color)
        self.magnitudes, self.profile, self.envelope, self.mesh = \
            values, profile, envelope, mesh
        logger.debug("scene updated: %d magnitudes, %d vertices, %d faces",
                     len(values), len(mesh.vertices), len(mesh.faces))
        return mesh

    @property
    def stats(self) -> Optional[ProfileStats]:
        return profile_stats(self.profile)

    def info(self) -> Dict[str, Any]:
        """Summary of the current scene; empty when nothing has been computed."""
        stats = self.stats
        if stats is None:
            return {}
        return {
            'points_2d': stats.point_count,
            'points_3d': len(self.mesh.vertices),
            'faces': len(self.mesh.faces),
            'base_radius': stats.base_radius,
            'x_range': (stats.x_min, stats.x_max),
            'y_range': (stats.y_min, stats.y_max),
        }

    def rotate(self, dx: float, dy: float) -> None:
        """Rotate by a pointer drag of ``dx``/``dy`` pixels (screen y down)."""
        s = self.config.drag_sensitivity
        self.view.rotate(dx * s, dy * s)

    def zoom(self, factor: float) -> None:
        self.view.zoom_by(factor, self.config.zoom_min, self.config.zoom_max)

    def toggle_auto_rotate(self) -> bool:
        self.auto_rotate = not self.auto_rotate
        return self.auto_rotate

    def tick(self) -> None:
        """Advance one frame."""
        if self.auto_rotate:
            self.view.advance(self.config.auto_rotate_step)

    def reset_view(self) -> None:
        self.view.reset()


__all__ = [
    "validate_magnitudes",
    "compute_profile",
    "compute_envelope",
    "compute_mesh",
    "compute_shape",
    "Scene",
]
