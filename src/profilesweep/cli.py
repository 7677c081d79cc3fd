"""Command-line front end: compute a profile and shape, print a summary, render."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from profilesweep.config import DEFAULT_CONFIG, load_config
from profilesweep.errors import ProfileSweepError
from profilesweep.pipeline import Scene
from profilesweep.render import ProfileView, ShapeView


def _size(text: str):
    try:
        w, h = (int(v) for v in text.lower().split("x"))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected WIDTHxHEIGHT, got {text!r}") from None
    if w < 1 or h < 1:
        raise argparse.ArgumentTypeError(f"size must be positive, got {text!r}")
    return w, h


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="profilesweep",
        description="Place circumference values as a 2D profile and sweep it into a 3D shape.")
    parser.add_argument("magnitudes", nargs="*", type=float,
                        help="Circumference values, base first.")
    parser.add_argument("--config", type=Path, help="YAML file with SweepConfig values.")
    parser.add_argument("--profile-png", type=Path, help="Write the 2D profile view to this PNG.")
    parser.add_argument("--shape-png", type=Path, help="Write the 3D shape view to this PNG.")
    parser.add_argument("--size", type=_size, default=(800, 600),
                        help="Image size as WIDTHxHEIGHT (default 800x600).")
    parser.add_argument("--rotate-x", type=float, default=0.0, help="View rotation about X (radians).")
    parser.add_argument("--rotate-y", type=float, default=0.0, help="View rotation about Y (radians).")
    parser.add_argument("--zoom", type=float, default=1.0, help="View zoom factor.")
    parser.add_argument("--view", action="store_true", help="Open the interactive viewer.")
    parser.add_argument("-v", "--verbose", action="count", default=0,
                        help="More log output (-vv for debug).")
    return parser


def format_info(info) -> str:
    if not info:
        return "no data"
    return "\n".join([
        f"2D points:   {info['points_2d']}",
        f"3D points:   {info['points_3d']}",
        f"faces:       {info['faces']}",
        f"base radius: {info['base_radius']:.2f}",
        f"x range:     {info['x_range'][0]:.2f} .. {info['x_range'][1]:.2f}",
        f"y range:     {info['y_range'][0]:.2f} .. {info['y_range'][1]:.2f}",
    ])


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    level = logging.WARNING
    if args.verbose == 1:
        level = logging.INFO
    elif args.verbose > 1:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    try:
        config = load_config(args.config) if args.config else DEFAULT_CONFIG
        scene = Scene(config)
        scene.update(args.magnitudes)
    except (ProfileSweepError, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    print(format_info(scene.info()))

    scene.view.rotate(args.rotate_y, args.rotate_x)
    scene.zoom(args.zoom)

    if args.profile_png or args.shape_png:
        from profilesweep.pil_drawable import PilDraw

        width, height = args.size
        if args.profile_png:
            surface = PilDraw(width, height)
            ProfileView(config).render(surface, scene.profile)
            surface.save(args.profile_png)
        if args.shape_png:
            surface = PilDraw(width, height)
            ShapeView(config).render(surface, scene.mesh, scene.view)
            surface.save(args.shape_png)

    if args.view:
        from profilesweep.viewer import view_shape

        view_shape(None, config, scene=scene)
    return 0


if __name__ == "__main__":
    sys.exit(main())
