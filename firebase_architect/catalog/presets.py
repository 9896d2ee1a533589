"""Preset registry and selection resolution.

A preset pins one id from each catalog.  Resolution goes through each
registry's fallback, so a preset with a stale id still resolves to a usable
selection instead of failing the browsing UI.
"""

from __future__ import annotations

from typing import Optional

from firebase_architect.design_systems import DEFAULT_DESIGN_SYSTEM_ID, get_design_system

from .layouts import DEFAULT_LAYOUT_ID, get_layout
from .models import NavigationStyle, Preset, TemplateSelection
from .themes import DEFAULT_THEME_ID, get_color_theme
from .typography import DEFAULT_TYPOGRAPHY_ID, get_typography

TEMPLATE_PRESETS: tuple[Preset, ...] = (
    Preset(
        id="material-dashboard",
        name="Material Dashboard",
        description="Google Material Design with dashboard grid layout",
        design_system="material",
        layout="dashboardGrid",
        theme="blue",
        typography="roboto",
        navigation_style=NavigationStyle.SIDE,
    ),
    Preset(
        id="shadcn-dashboard",
        name="Shadcn Dashboard",
        description="Minimalist Shadcn design with dashboard layout",
        design_system="shadcn",
        layout="dashboardGrid",
        theme="purple",
        typography="inter",
        navigation_style=NavigationStyle.SIDE,
    ),
    Preset(
        id="linear-dashboard",
        name="Linear Dashboard",
        description="Ultra-minimal Linear design with flat aesthetics",
        design_system="linear",
        layout="dashboardGrid",
        theme="blue",
        typography="sfPro",
        navigation_style=NavigationStyle.COMPACT,
    ),
    Preset(
        id="material-spreadsheet",
        name="Material Spreadsheet",
        description="Data-dense table view with Material Design",
        design_system="material",
        layout="spreadsheet",
        theme="green",
        typography="roboto",
        navigation_style=NavigationStyle.COMPACT,
    ),
    Preset(
        id="linear-kanban",
        name="Linear Kanban",
        description="Project board with Linear minimalist design",
        design_system="linear",
        layout="kanban",
        theme="blue",
        typography="sfPro",
        navigation_style=NavigationStyle.SIDE,
    ),
)


def get_preset(preset_id: str) -> Optional[Preset]:
    """Return the first preset whose id matches, or ``None``."""
    for preset in TEMPLATE_PRESETS:
        if preset.id == preset_id:
            return preset
    return None


def list_presets() -> list[Preset]:
    return list(TEMPLATE_PRESETS)


def build_template_config(
    design_system_id: Optional[str] = DEFAULT_DESIGN_SYSTEM_ID,
    layout_id: Optional[str] = DEFAULT_LAYOUT_ID,
    theme_id: Optional[str] = DEFAULT_THEME_ID,
    typography_id: Optional[str] = DEFAULT_TYPOGRAPHY_ID,
    navigation_style: str = NavigationStyle.SIDE.value,
) -> TemplateSelection:
    """Resolve each id through its registry and bundle the results.

    Every id falls back independently to its registry default; the
    navigation style is passed through unchanged.
    """
    return TemplateSelection(
        design_system=get_design_system(design_system_id),
        layout=get_layout(layout_id),
        theme=get_color_theme(theme_id),
        typography=get_typography(typography_id),
        navigation_style=navigation_style,
    )


def resolve_preset(preset: Preset) -> TemplateSelection:
    """Resolve a preset's pinned ids into a ``TemplateSelection``."""
    return build_template_config(
        design_system_id=preset.design_system,
        layout_id=preset.layout,
        theme_id=preset.theme,
        typography_id=preset.typography,
        navigation_style=preset.navigation_style.value,
    )
