"""Thin renderers drawing a profile or a swept mesh onto a :class:`Drawable`."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from profilesweep.config import DEFAULT_CONFIG, SweepConfig
from profilesweep.model import Mesh
from profilesweep.projection import ViewState, depth_order, project_mesh

PALETTE = ['#FF6B6B', '#4ECDC4', '#45B7D1', '#FFA07A', '#98D8C8',
           '#F7DC6F', '#BB8FCE', '#85C1E2', '#F8B195', '#C06C84']

PROFILE_BACKGROUND = 'white'
PROFILE_LINE_COLOR = '#4ECDC4'
PROFILE_LINE_WIDTH = 2
SHAPE_BACKGROUND = 'black'

# fraction of the data extent left free around the profile
_MARGIN = 1.2


@dataclass(frozen=True)
class Viewport:
    """Uniform data-to-screen mapping with a flipped y axis."""

    scale: float
    offset_x: float
    offset_y: float

    def to_screen(self, x: float, y: float) -> Tuple[float, float]:
        return self.offset_x + x * self.scale, self.offset_y - y * self.scale


def fit_viewport(profile: Sequence, width: int, height: int,
                 padding: int = 50) -> Viewport:
    """Scale and centre ``profile`` (plus the origin) inside the padded surface."""

    xs = [p.x for p in profile]
    ys = [p.y for p in profile]
    x_min = min(xs + [0.0])
    x_max = max(xs)
    y_min = min(ys + [0.0])
    y_max = max(ys)
    data_w = x_max - x_min
    data_h = y_max - y_min

    # a surface smaller than the padding still gets a positive scale
    avail_w = max(1, width - 2 * padding)
    avail_h = max(1, height - 2 * padding)
    scale = min(avail_w / (data_w * _MARGIN or 1),
                avail_h / (data_h * _MARGIN or 1))

    offset_x = padding + (avail_w - data_w * scale) / 2 - x_min * scale
    offset_y = height - padding - (avail_h - data_h * scale) / 2 + y_min * scale
    return Viewport(scale, offset_x, offset_y)


def draw_message(surface, message: str, color: str) -> None:
    surface.alpha = 1.0
    surface.linecolor = color
    surface.draw_text(message, (surface.width / 2, surface.height / 2),
                      align='center', attr={'size': 20})


class ProfileView:
    """2D view of the placed profile points.

    The fitted viewport is cached until the profile or the surface size
    changes, or :meth:`resize` is called.
    """

    def __init__(self, config: SweepConfig = DEFAULT_CONFIG):
        self.config = config
        self._viewport: Optional[Viewport] = None
        self._key = None

    @property
    def viewport(self) -> Optional[Viewport]:
        return self._viewport

    def resize(self, width: int, height: int) -> None:
        self._viewport = None
        self._key = None

    def _fit(self, surface, profile) -> Viewport:
        key = (surface.width, surface.height, tuple(profile))
        if self._viewport is None or key != self._key:
            self._viewport = fit_viewport(profile, surface.width, surface.height,
                                          self.config.padding)
            self._key = key
        return self._viewport

    def render(self, surface, profile: Sequence) -> None:
        surface.clear(PROFILE_BACKGROUND)
        if not profile:
            draw_message(surface, 'No profile data', '#999999')
            return

        vp = self._fit(surface, profile)
        screen = [vp.to_screen(p.x, p.y) for p in profile]

        surface.alpha = 1.0
        if len(screen) > 1:
            surface.linecolor = PROFILE_LINE_COLOR
            surface.linewidth = PROFILE_LINE_WIDTH
            surface.draw_polyline(screen)

        surface.linecolor = 'black'
        surface.linewidth = 2
        for i, p in enumerate(screen):
            surface.fillcolor = PALETTE[i % len(PALETTE)]
            surface.draw_circle(p, self.config.point_radius)


class ShapeView:
    """Painter's-algorithm view of a swept mesh.

    Faces are filled far to near with their own colour at partial opacity,
    then every outline is stroked in mesh order on top.
    """

    def __init__(self, config: SweepConfig = DEFAULT_CONFIG):
        self.config = config

    def render(self, surface, mesh: Mesh, view: ViewState) -> None:
        surface.clear(SHAPE_BACKGROUND)
        if not mesh:
            draw_message(surface, 'No shape data', '#666666')
            return

        cfg = self.config
        projections = project_mesh(mesh, view, surface.size,
                                   cfg.perspective, cfg.unit_scale)
        screen = [(p.screen_x, p.screen_y) for p in projections]

        surface.alpha = cfg.face_alpha
        for face in depth_order(mesh.faces, projections):
            surface.fillcolor = face.color
            surface.draw_polygon([screen[i] for i in face.indices])

        surface.alpha = cfg.wire_alpha
        surface.linecolor = cfg.wire_color
        surface.linewidth = cfg.wire_width
        for face in mesh.faces:
            surface.draw_outline([screen[i] for i in face.indices])
        surface.alpha = 1.0


__all__ = ["Viewport", "fit_viewport", "ProfileView", "ShapeView", "PALETTE"]
