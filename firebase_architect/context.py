"""Design system resolution context.

Preview code asks a ``DesignSystemContext`` for concrete CSS values instead of
walking foundation tables itself.  Every accessor is total: an unknown token
name resolves to a fixed fallback (``0px``, ``none``, ``400``...) so a preview
degrades visually instead of failing on partial, hand-edited data.

Quick usage::

    from firebase_architect.context import create_context

    ctx = create_context("material", "dark")
    ctx.get_spacing(4)                 # "16px"
    ctx.get_border("strong")           # "1px solid rgba(0, 0, 0, 0.2)"
    ctx.get_transition("box-shadow")   # "box-shadow 250ms cubic-bezier(0.4, 0.0, 0.2, 1)"
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Optional

from firebase_architect.catalog import ColorTheme, TemplateSelection, get_color_theme
from firebase_architect.design_systems import DesignSystem, Foundations, get_design_system
from firebase_architect.registry import thaw

DEFAULT_FONT_WEIGHT = 400
DEFAULT_LINE_HEIGHT = 1.5
DEFAULT_DURATION = "200ms"


class DesignSystemContext:
    """Token accessors bound to one design system and one color theme.

    Attributes:
        system: The captured design system.
        theme: The captured color theme.
    """

    def __init__(self, system: DesignSystem, theme: ColorTheme) -> None:
        self.system = system
        self.theme = theme

    @classmethod
    def from_selection(cls, selection: TemplateSelection) -> "DesignSystemContext":
        """Build a context from a resolved catalog selection."""
        return cls(selection.design_system, selection.theme)

    # -- Metadata ----------------------------------------------------------

    @property
    def id(self) -> str:
        return self.system.id

    @property
    def name(self) -> str:
        return self.system.name

    @property
    def foundations(self) -> Foundations:
        return self.system.foundations

    @property
    def patterns(self) -> Mapping[str, Mapping[str, Any]]:
        return self.system.patterns

    @property
    def colors(self) -> Mapping[str, str]:
        return self.theme.colors

    @property
    def font_family(self) -> str:
        return self.system.foundations.typography.font_family

    # -- Token accessors ---------------------------------------------------

    def get_spacing(self, step: int) -> str:
        """Pixel value of spacing *step*, ``"0px"`` when the step is unknown."""
        value = self.foundations.spacing.scale.get(step)
        return f"{value}px" if value is not None else "0px"

    def get_border_radius(self, size: str) -> str:
        """Pixel value of radius *size*, ``"0px"`` when unknown."""
        value = self.foundations.border_radius.get(size)
        return f"{value}px" if value is not None else "0px"

    def get_shadow(self, size: str) -> str:
        """CSS box-shadow for *size*, ``"none"`` when unknown."""
        return self.foundations.shadows.get(size) or "none"

    def get_border(self, strength: str = "default") -> str:
        """CSS border shorthand using the thin width and *strength*'s color.

        Unknown strengths use the ``default`` color.  A system that declares
        no borders yields ``"none"``.
        """
        borders = self.foundations.borders
        if borders is None:
            return "none"
        width = borders.width.get("thin") or 1
        color = borders.colors.get(strength) or borders.colors.get("default")
        return f"{width}px solid {color}"

    def get_component_pattern(self, component: str) -> dict[str, Any]:
        """Pattern descriptor for *component*, or ``{}`` when unknown.

        The descriptor is a copy; mutating it does not touch the registry.
        """
        return thaw(self.patterns.get(component, {}))

    def get_font_weight(self, weight: str) -> int:
        """Numeric weight for *weight*, ``400`` when unknown."""
        return self.foundations.typography.font_weights.get(weight) or DEFAULT_FONT_WEIGHT

    def get_line_height(self, name: str = "normal") -> float:
        """Line-height multiplier for *name*, ``1.5`` when unknown."""
        return self.foundations.typography.line_heights.get(name) or DEFAULT_LINE_HEIGHT

    def get_transition(self, properties: str = "all", duration: str = "normal") -> str:
        """CSS transition shorthand using the system's standard easing.

        Unknown durations fall back to the ``normal`` duration.
        """
        durations = self.foundations.transitions.duration
        value = durations.get(duration) or durations.get("normal") or DEFAULT_DURATION
        easing = self.foundations.transitions.easing.get("standard", "ease")
        return f"{properties} {value} {easing}"

    def get_color(self, role: str, fallback: str = "") -> str:
        """Theme color for *role*, or *fallback* if the theme leaves it unset."""
        return self.theme.color(role, fallback)

    # -- Pattern resolution ------------------------------------------------

    def _padding(self, value: Any) -> str:
        if isinstance(value, Mapping):
            return f"{self.get_spacing(value.get('y', 0))} {self.get_spacing(value.get('x', 0))}"
        return self.get_spacing(value)

    def _border_for(self, width_name: Optional[str]) -> str:
        borders = self.foundations.borders
        if borders is None or width_name in (None, "none"):
            return "none"
        width = borders.width.get(width_name)
        if not width:
            return "none"
        return f"{width}px {borders.style} {borders.colors.get('default', 'currentColor')}"

    def resolve_pattern(self, component: str) -> dict[str, str]:
        """Turn a component pattern's token names into concrete CSS values.

        Returns a mapping of CSS property names (kebab-case) to values.
        Fields the pattern does not declare are omitted; an unknown component
        yields ``{}``.
        """
        pattern = self.patterns.get(component)
        if not pattern:
            return {}

        css: dict[str, str] = {}
        for field in ("padding", "itemPadding"):
            if field in pattern:
                css["padding"] = self._padding(pattern[field])
                break
        if "rowPadding" in pattern:
            css["padding"] = f"{self.get_spacing(pattern['rowPadding'])} 0"

        radius = pattern.get("borderRadius", pattern.get("itemBorderRadius"))
        if radius is not None:
            css["border-radius"] = self.get_border_radius(radius)
        if "shadow" in pattern:
            css["box-shadow"] = self.get_shadow(pattern["shadow"])
        if "border" in pattern:
            css["border"] = self._border_for(pattern["border"])
        if "fontWeight" in pattern:
            css["font-weight"] = str(self.get_font_weight(pattern["fontWeight"]))
        if pattern.get("textTransform"):
            css["text-transform"] = pattern["textTransform"]
        if pattern.get("letterSpacing"):
            css["letter-spacing"] = pattern["letterSpacing"]
        if "hover" in pattern:
            css["transition"] = self.get_transition("all")
        return css

    def __repr__(self) -> str:
        return f"DesignSystemContext(system={self.system.id!r}, theme={self.theme.id!r})"


def create_context(
    design_system_id: Optional[str] = None, theme_id: Optional[str] = None
) -> DesignSystemContext:
    """Resolve both ids through their registries and bind a context."""
    return DesignSystemContext(get_design_system(design_system_id), get_color_theme(theme_id))
