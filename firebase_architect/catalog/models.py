"""Pydantic v2 models for the selectable catalog entries.

Color themes, typography presets, layouts and presets are cosmetic choices a
user combines with a design system.  Like design systems they are frozen and
built once at import time.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field

from firebase_architect.design_systems import DesignSystem
from firebase_architect.registry import ReadOnlyDict


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------


class NavigationStyle(str, Enum):
    """Which navigation chrome a layout shows."""

    SIDE = "side"
    TOP = "top"
    SIDE_TOP = "side-top"
    COMPACT = "compact"
    NONE = "none"

    @property
    def label(self) -> str:
        return _NAVIGATION_LABELS[self][0]

    @property
    def description(self) -> str:
        return _NAVIGATION_LABELS[self][1]


_NAVIGATION_LABELS: dict[NavigationStyle, tuple[str, str]] = {
    NavigationStyle.SIDE: ("Side Navigation", "Vertical sidebar navigation"),
    NavigationStyle.TOP: ("Top Navigation", "Horizontal top navigation bar"),
    NavigationStyle.SIDE_TOP: ("Side + Top", "Combined sidebar and top bar"),
    NavigationStyle.COMPACT: ("Compact Side", "Collapsed sidebar with icons"),
    NavigationStyle.NONE: ("No Navigation", "Content only, no navigation"),
}

# Semantic roles every complete color theme defines.
COLOR_ROLES: tuple[str, ...] = (
    "primary",
    "secondary",
    "success",
    "warning",
    "error",
    "info",
    "background",
    "surface",
    "text",
)


# ---------------------------------------------------------------------------
# Color themes & typography
# ---------------------------------------------------------------------------


class ColorTheme(BaseModel):
    """A named palette of semantic colors."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    colors: ReadOnlyDict[str, str] = Field(default_factory=dict, validate_default=True)

    def color(self, role: str, fallback: str = "") -> str:
        """Return the color for *role*, or *fallback* when the role is unset."""
        value = self.colors.get(role)
        return value if value else fallback

    def missing_roles(self) -> list[str]:
        """Semantic roles this theme leaves unset."""
        return [role for role in COLOR_ROLES if not self.colors.get(role)]

    @property
    def is_complete(self) -> bool:
        return not self.missing_roles()


class TypographyPreset(BaseModel):
    """A font stack and base size."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    font_family: str = Field(..., description="Ordered CSS font-family fallback list")
    font_size: int = Field(default=14, description="Base size in px")


# ---------------------------------------------------------------------------
# Layouts
# ---------------------------------------------------------------------------


class Layout(BaseModel):
    """A structural page arrangement with named content slots.

    Layouts carry no styling.  ``render`` fills the layout's Jinja2 skeleton
    with caller-supplied markup per slot; the navigation style decides
    whether the ``navigation`` slot appears and where ``header`` goes.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    description: str = ""
    category: str = ""
    preview: str = ""
    slots: tuple[str, ...] = ()
    template: str = Field(..., description="Skeleton path relative to the template root")
    default_navigation_style: NavigationStyle = NavigationStyle.SIDE
    side_navigation_styles: frozenset[NavigationStyle] = frozenset(
        {NavigationStyle.SIDE, NavigationStyle.COMPACT}
    )
    top_navigation_styles: frozenset[NavigationStyle] = frozenset()

    def _coerce_style(self, navigation_style: Optional[str]) -> Optional[NavigationStyle]:
        if navigation_style is None:
            return self.default_navigation_style
        try:
            return NavigationStyle(navigation_style)
        except ValueError:
            return None

    def shows_side_navigation(self, navigation_style: Optional[str] = None) -> bool:
        """Whether the side navigation column renders for *navigation_style*."""
        return self._coerce_style(navigation_style) in self.side_navigation_styles

    def shows_top_navigation(self, navigation_style: Optional[str] = None) -> bool:
        """Whether the header renders as a top navigation bar."""
        return self._coerce_style(navigation_style) in self.top_navigation_styles

    def visible_slots(
        self,
        navigation_style: Optional[str] = None,
        provided: Optional[Mapping[str, Any]] = None,
    ) -> list[str]:
        """Slots that render, in layout order.

        A slot renders only when content was provided for it (all slots are
        assumed provided when *provided* is ``None``).  The ``navigation``
        slot additionally requires a side-navigation style.
        """
        result: list[str] = []
        for slot in self.slots:
            if provided is not None and not provided.get(slot):
                continue
            if slot == "navigation" and not self.shows_side_navigation(navigation_style):
                continue
            result.append(slot)
        return result

    def render(
        self,
        slots: Mapping[str, str],
        navigation_style: Optional[str] = None,
        renderer: Any = None,
    ) -> str:
        """Render the layout skeleton as HTML with *slots* filled in.

        Unknown slot names are ignored; an unknown navigation style hides
        all navigation chrome.
        """
        from firebase_architect.scaffolder.templates import TemplateRenderer

        renderer = renderer or TemplateRenderer()
        visible = self.visible_slots(navigation_style, slots)
        context = {
            "layout": self,
            "slots": {name: slots[name] for name in visible},
            "show_side_nav": self.shows_side_navigation(navigation_style),
            "show_top_nav": self.shows_top_navigation(navigation_style),
        }
        return renderer.render(self.template, context)


# ---------------------------------------------------------------------------
# Presets & resolved selections
# ---------------------------------------------------------------------------


class Preset(BaseModel):
    """A named one-click combination of catalog ids."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    description: str = ""
    design_system: str
    layout: str
    theme: str
    typography: str
    navigation_style: NavigationStyle = NavigationStyle.SIDE


class TemplateSelection(BaseModel):
    """The resolved entries for one (design system, layout, theme, typography) choice."""

    model_config = ConfigDict(frozen=True)

    design_system: DesignSystem
    layout: Layout
    theme: ColorTheme
    typography: TypographyPreset
    navigation_style: str

    def to_customization(
        self,
        custom_colors: Optional[Mapping[str, str]] = None,
        custom_typography: Optional[Mapping[str, Any]] = None,
        density: str = "normal",
    ) -> dict[str, Any]:
        """Build the ``uiTemplate`` JSON a user pastes into the generator input.

        Colors and typography default to the selected theme and typography
        preset; explicit overrides are shallow-merged on top.
        """
        colors = {**self.theme.colors, **(custom_colors or {})}
        typography = {
            "fontFamily": self.typography.font_family,
            "fontSize": self.typography.font_size,
            **(custom_typography or {}),
        }
        return {
            "uiTemplate": {
                "designSystem": self.design_system.id,
                "layout": self.layout.id,
                "theme": self.theme.id,
                "typography": self.typography.id,
                "navigationStyle": self.navigation_style,
                "customColors": colors,
                "customTypography": typography,
                "density": density,
            }
        }
