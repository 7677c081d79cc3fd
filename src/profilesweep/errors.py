"""Exception types raised at the profilesweep input and configuration boundary."""

from __future__ import annotations

from typing import Any


class ProfileSweepError(Exception):
    """Base class for profilesweep errors."""


class InvalidMagnitudeError(ProfileSweepError, ValueError):
    """A magnitude value cannot be turned into a radius."""

    def __init__(self, index: int, value: Any, reason: str):
        self.index = index
        self.value = value
        self.reason = reason
        super().__init__(f"magnitude {index + 1} ({value!r}): {reason}")


class ConfigError(ProfileSweepError, ValueError):
    """A configuration key or value is not acceptable."""


__all__ = ["ProfileSweepError", "InvalidMagnitudeError", "ConfigError"]
