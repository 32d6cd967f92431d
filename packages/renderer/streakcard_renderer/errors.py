"""Exception hierarchy shared by the renderer and the wrapper layer."""

from __future__ import annotations


class StreakCardError(Exception):
    """Base class for every error raised by streakcard packages."""


class ThemeRegistryError(StreakCardError):
    """The built-in theme table is missing an entry the renderer relies on."""
