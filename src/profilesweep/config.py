"""Tunable constants for profile placement, sweeping and rendering.

A :class:`SweepConfig` can be built from keyword arguments, from a plain
mapping, or loaded from a YAML file::

    spacing_factor: 1.3
    rotation_divisions: 24
    face_alpha: 0.5
"""

from __future__ import annotations

import math
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Mapping

from PIL import ImageColor

from profilesweep.errors import ConfigError


@dataclass(frozen=True)
class SweepConfig:
    # placement
    spacing_factor: float = 1.3
    # envelope
    alpha_radius: float = 1.5
    envelope_smoothing: float = 0.3
    interpolation_steps: int = 0
    # mesh
    rotation_divisions: int = 16
    cap_color: str = "#666666"
    # projection
    perspective: float = 500.0
    unit_scale: float = 50.0
    # 3D rendering
    face_alpha: float = 0.7
    wire_color: str = "#333333"
    wire_alpha: float = 0.3
    wire_width: float = 0.5
    # interaction
    drag_sensitivity: float = 0.01
    zoom_min: float = 0.1
    zoom_max: float = 5.0
    wheel_zoom_step: float = 0.1
    auto_rotate_step: float = 0.01
    # 2D rendering
    padding: int = 50
    point_radius: int = 6

    def __post_init__(self):
        self._check()

    def _check(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, float) and not math.isfinite(value):
                raise ConfigError(f"{f.name} must be finite, got {value!r}")
        for name in ("cap_color", "wire_color"):
            try:
                ImageColor.getrgb(getattr(self, name))
            except (TypeError, ValueError):
                raise ConfigError(f"{name} is not a colour: {getattr(self, name)!r}") from None
        positive = ("spacing_factor", "alpha_radius", "perspective",
                    "unit_scale", "wire_width", "zoom_min", "point_radius")
        for name in positive:
            if getattr(self, name) <= 0:
                raise ConfigError(f"{name} must be > 0, got {getattr(self, name)!r}")
        for name in ("envelope_smoothing", "face_alpha", "wire_alpha"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ConfigError(f"{name} must lie in [0, 1], got {value!r}")
        if self.rotation_divisions < 3:
            raise ConfigError(
                f"rotation_divisions must be >= 3, got {self.rotation_divisions!r}")
        if self.interpolation_steps < 0:
            raise ConfigError(
                f"interpolation_steps must be >= 0, got {self.interpolation_steps!r}")
        if self.padding < 0:
            raise ConfigError(f"padding must be >= 0, got {self.padding!r}")
        if self.zoom_max < self.zoom_min:
            raise ConfigError("zoom_max must not be smaller than zoom_min")

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "SweepConfig":
        known = {f.name: f for f in fields(cls)}
        unknown = sorted(set(mapping) - set(known))
        if unknown:
            raise ConfigError(f"unknown configuration keys: {', '.join(unknown)}")
        values = {}
        for key, value in mapping.items():
            values[key] = _coerce(key, value, known[key].type)
        return cls(**values)


def _coerce(key: str, value: Any, type_name: str) -> Any:
    # field types are strings because of ``from __future__ import annotations``
    if isinstance(value, bool):
        raise ConfigError(f"bad value for {key}: {value!r}")
    try:
        if type_name == "int":
            if isinstance(value, float) and not value.is_integer():
                raise ValueError(value)
            return int(value)
        if type_name == "float":
            return float(value)
    except (TypeError, ValueError):
        raise ConfigError(f"bad value for {key}: {value!r}") from None
    if not isinstance(value, str):
        raise ConfigError(f"bad value for {key}: {value!r}")
    return value


def load_config(path) -> SweepConfig:
    """Read a YAML configuration file; an empty file yields the defaults."""
    import yaml

    path = Path(path)
    try:
        with path.open("r", encoding="utf-8") as fp:
            data = yaml.safe_load(fp) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"{path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: top level must be a mapping")
    return SweepConfig.from_mapping(data)


DEFAULT_CONFIG = SweepConfig()

__all__ = ["SweepConfig", "DEFAULT_CONFIG", "load_config"]
