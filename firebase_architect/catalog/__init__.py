"""Selectable catalog: color themes, typography, layouts and presets.

Quick usage::

    from firebase_architect.catalog import build_template_config, get_preset

    preset = get_preset("material-dashboard")
    selection = build_template_config(
        design_system_id="shadcn",
        layout_id="kanban",
        theme_id="dark",
        typography_id="inter",
        navigation_style="side",
    )
"""

from firebase_architect.catalog.layouts import (
    DEFAULT_LAYOUT_ID,
    LAYOUTS,
    get_layout,
    list_layouts,
)
from firebase_architect.catalog.models import (
    COLOR_ROLES,
    ColorTheme,
    Layout,
    NavigationStyle,
    Preset,
    TemplateSelection,
    TypographyPreset,
)
from firebase_architect.catalog.presets import (
    TEMPLATE_PRESETS,
    build_template_config,
    get_preset,
    list_presets,
    resolve_preset,
)
from firebase_architect.catalog.themes import (
    COLOR_THEMES,
    DEFAULT_THEME_ID,
    get_color_theme,
    list_color_themes,
)
from firebase_architect.catalog.typography import (
    DEFAULT_TYPOGRAPHY_ID,
    TYPOGRAPHY_PRESETS,
    get_typography,
    list_typography,
)

__all__ = [
    "COLOR_ROLES",
    "COLOR_THEMES",
    "DEFAULT_LAYOUT_ID",
    "DEFAULT_THEME_ID",
    "DEFAULT_TYPOGRAPHY_ID",
    "LAYOUTS",
    "TEMPLATE_PRESETS",
    "TYPOGRAPHY_PRESETS",
    "ColorTheme",
    "Layout",
    "NavigationStyle",
    "Preset",
    "TemplateSelection",
    "TypographyPreset",
    "build_template_config",
    "get_color_theme",
    "get_layout",
    "get_preset",
    "get_typography",
    "list_color_themes",
    "list_layouts",
    "list_presets",
    "list_typography",
    "resolve_preset",
]
