"""Color theme registry.

Themes are independent of design systems: any palette can be applied to any
design system and layout combination.
"""

from __future__ import annotations

from typing import Optional

from firebase_architect.registry import Registry

from .models import ColorTheme

DEFAULT_THEME_ID = "blue"

_LIGHT_BASE = {
    "success": "#10b981",
    "warning": "#f59e0b",
    "error": "#ef4444",
    "info": "#06b6d4",
    "background": "#ffffff",
    "surface": "#f9fafb",
    "text": "#111827",
}

COLOR_THEMES: Registry[ColorTheme] = Registry(
    [
        ColorTheme(
            id="blue",
            name="Ocean Blue",
            colors={"primary": "#3b82f6", "secondary": "#8b5cf6", **_LIGHT_BASE},
        ),
        ColorTheme(
            id="purple",
            name="Royal Purple",
            colors={"primary": "#8b5cf6", "secondary": "#ec4899", **_LIGHT_BASE},
        ),
        ColorTheme(
            id="green",
            name="Forest Green",
            colors={
                "primary": "#10b981",
                "secondary": "#14b8a6",
                **_LIGHT_BASE,
                "success": "#22c55e",
            },
        ),
        ColorTheme(
            id="orange",
            name="Sunset Orange",
            colors={
                "primary": "#f97316",
                "secondary": "#fb923c",
                **_LIGHT_BASE,
                "warning": "#fbbf24",
            },
        ),
        ColorTheme(
            id="dark",
            name="Dark Mode",
            colors={
                "primary": "#3b82f6",
                "secondary": "#8b5cf6",
                **_LIGHT_BASE,
                "background": "#0f172a",
                "surface": "#1e293b",
                "text": "#f1f5f9",
            },
        ),
    ],
    default_id=DEFAULT_THEME_ID,
    kind="color theme",
)


def get_color_theme(theme_id: Optional[str]) -> ColorTheme:
    """Return the color theme for *theme_id* (``blue`` if unknown)."""
    return COLOR_THEMES.get(theme_id)


def list_color_themes() -> list[ColorTheme]:
    return COLOR_THEMES.list()
