"""Interactive pyglet window for a swept profile."""

from __future__ import annotations

import logging
from typing import Iterable, Optional

import pyglet
from pyglet.window import key

from profilesweep.config import DEFAULT_CONFIG, SweepConfig
from profilesweep.pipeline import Scene
from profilesweep.pyglet_drawable import PygletDraw
from profilesweep.render import ProfileView, ShapeView

logger = logging.getLogger(__name__)

FRAME_INTERVAL = 1 / 60.0

HELP_TEXT = ("drag: rotate   scroll: zoom   A: auto-rotate   "
             "TAB: 2D/3D   RETURN: reset view   ESC: exit")


class SweepWindow(pyglet.window.Window):
    """Resizable window showing the 3D shape or the 2D profile of a scene.

    Every frame re-projects and re-draws the whole scene; the mesh itself
    only changes through :meth:`Scene.update`.
    """

    def __init__(self, scene: Scene, width: int = 900, height: int = 700):
        super().__init__(width=width, height=height, resizable=True,
                         caption="profilesweep")
        self.scene = scene
        self.show_profile = False
        self.shape_view = ShapeView(scene.config)
        self.profile_view = ProfileView(scene.config)
        self.surface = PygletDraw(width, height)
        pyglet.clock.schedule_interval(self._tick, FRAME_INTERVAL)
        logger.info("viewer opened (%dx%d)", width, height)

    def _tick(self, dt):
        self.scene.tick()

    def on_resize(self, width, height):
        super().on_resize(width, height)
        if width > 0 and height > 0:
            self.surface.resize(width, height)
            self.profile_view.resize(width, height)

    def on_draw(self):
        surface = self.surface
        if self.show_profile:
            self.profile_view.render(surface, self.scene.profile)
        else:
            self.shape_view.render(surface, self.scene.mesh, self.scene.view)
        surface.alpha = 1.0
        surface.draw_text(HELP_TEXT, (10, surface.height - 14),
                          attr={'size': 10, 'color': 'gray'})
        r, g, b = (c / 255.0 for c in surface.background)
        pyglet.gl.glClearColor(r, g, b, 1.0)
        self.clear()
        surface.display()

    def on_mouse_drag(self, x, y, dx, dy, buttons, modifiers):
        if buttons & pyglet.window.mouse.LEFT:
            # pyglet reports dy upward; the scene expects screen y down
            self.scene.rotate(dx, -dy)
            return pyglet.event.EVENT_HANDLED

    def on_mouse_scroll(self, x, y, scroll_x, scroll_y):
        step = self.scene.config.wheel_zoom_step
        self.scene.zoom(1 + scroll_y * step)
        return pyglet.event.EVENT_HANDLED

    def on_key_press(self, symbol, modifiers):
        if symbol == key.ESCAPE:
            self.close()
        elif symbol == key.A:
            self.scene.toggle_auto_rotate()
        elif symbol == key.TAB:
            self.show_profile = not self.show_profile
        elif symbol == key.RETURN:
            self.scene.reset_view()
        else:
            return
        return pyglet.event.EVENT_HANDLED

    def on_close(self):
        pyglet.clock.unschedule(self._tick)
        logger.info("viewer closed")
        super().on_close()


def view_shape(magnitudes: Optional[Iterable[float]],
               config: SweepConfig = DEFAULT_CONFIG,
               scene: Optional[Scene] = None) -> Scene:
    """Compute ``magnitudes`` (unless a ready ``scene`` is given) and run the viewer."""

    if scene is None:
        scene = Scene(config)
        scene.update(magnitudes)
    SweepWindow(scene)
    pyglet.app.run()
    return scene


__all__ = ["SweepWindow", "view_shape"]
