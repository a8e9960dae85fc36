"""
Theme Catalog

The fixed set of site themes and the selection state for one visitor.

Selection state lives in a ThemeContext that owns its storage mapping
(the site persists it in localStorage); nothing here is module-global.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import MutableMapping, Optional

logger = logging.getLogger(__name__)

THEME_ASSETS_URL = "/assets/themes"
DEFAULT_STORAGE_KEY = "mat-and-mind-theme"


class Theme(Enum):
    """Site background themes: (asset id, display label, kind)."""

    FOREST = ("forrest", "Forest", "nature")
    OCEAN = ("ocean", "Ocean", "nature")
    BEACH = ("beach", "Beach", "nature")
    WATER = ("water", "Water", "elemental")
    LIGHTS = ("lights", "Lights", "elemental")
    MOUNTAIN = ("mountain", "Mountain", "elemental")

    def __init__(self, theme_id: str, label: str, kind: str):
        self.theme_id = theme_id
        self.label = label
        self.kind = kind

    @property
    def thumbnail_url(self) -> str:
        return f"{THEME_ASSETS_URL}/thumbnails/{self.theme_id}-thumb.jpg"

    @property
    def image_url(self) -> str:
        return f"{THEME_ASSETS_URL}/optimized/{self.theme_id}.jpg"

    @classmethod
    def from_id(cls, theme_id: Optional[str]) -> Optional["Theme"]:
        """Look up a theme by asset id; None when unknown."""
        for theme in cls:
            if theme.theme_id == theme_id:
                return theme
        return None


DEFAULT_THEME = Theme.FOREST


class ThemeContext:
    """
    Theme selection for one visitor.

    Usage:
        context = ThemeContext(storage={})
        context.apply("ocean")
        context.current  # Theme.OCEAN
    """

    def __init__(
        self,
        storage: Optional[MutableMapping[str, str]] = None,
        storage_key: str = DEFAULT_STORAGE_KEY,
        default_theme: Theme = DEFAULT_THEME,
    ):
        self.storage = storage if storage is not None else {}
        self.storage_key = storage_key
        self.default_theme = default_theme

    @property
    def current(self) -> Theme:
        """Stored theme, or the default when nothing valid is stored."""
        return Theme.from_id(self.storage.get(self.storage_key)) or self.default_theme

    def apply(self, theme_id: str) -> Theme:
        """
        Select a theme and persist the choice.

        Unknown ids fall back to the default theme.
        """
        theme = Theme.from_id(theme_id)
        if theme is None:
            logger.warning("Unknown theme '%s', using %s", theme_id, self.default_theme.theme_id)
            theme = self.default_theme

        self.storage[self.storage_key] = theme.theme_id
        return theme

    @classmethod
    def from_settings(cls, settings: dict, storage: Optional[MutableMapping[str, str]] = None) -> "ThemeContext":
        """Build a context from config/themes.yaml settings."""
        default = Theme.from_id(settings.get('default_theme'))
        if default is None:
            logger.warning("Configured default theme '%s' is not in the catalog, using %s",
                           settings.get('default_theme'), DEFAULT_THEME.theme_id)
            default = DEFAULT_THEME
        return cls(
            storage=storage,
            storage_key=settings.get('storage_key', DEFAULT_STORAGE_KEY),
            default_theme=default,
        )
