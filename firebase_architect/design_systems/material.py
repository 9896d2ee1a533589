"""Material 3 (Material You) design system.

Reference: https://m3.material.io/
"""

from __future__ import annotations

from .models import DesignSystem

_ELEVATION_1 = "0px 1px 2px 0px rgba(0, 0, 0, 0.3), 0px 1px 3px 1px rgba(0, 0, 0, 0.15)"
_ELEVATION_2 = "0px 1px 2px 0px rgba(0, 0, 0, 0.3), 0px 2px 6px 2px rgba(0, 0, 0, 0.15)"
_ELEVATION_3 = "0px 1px 3px 0px rgba(0, 0, 0, 0.3), 0px 4px 8px 3px rgba(0, 0, 0, 0.15)"

MATERIAL = DesignSystem.model_validate(
    {
        "id": "material",
        "name": "Material 3",
        "description": (
            "Google's modern design system with elevation, adaptive colors, "
            "and expressive motion"
        ),
        "vendor": "Google",
        "used_by": ["Android", "Google Workspace", "Gmail", "Google Cloud"],
        "foundations": {
            # 4dp base grid, 48dp is the minimum touch target
            "spacing": {
                "unit": 4,
                "scale": {0: 0, 1: 4, 2: 8, 3: 12, 4: 16, 5: 20, 6: 24, 7: 32, 8: 48},
            },
            # M3 shape scale
            "border_radius": {
                "none": 0,
                "xs": 4,
                "sm": 8,
                "md": 12,
                "lg": 16,
                "xl": 24,
                "full": 9999,
            },
            "shadows": {
                "none": "none",
                "elevation1": _ELEVATION_1,
                "elevation2": _ELEVATION_2,
                "elevation3": _ELEVATION_3,
                "sm": _ELEVATION_1,
                "md": _ELEVATION_2,
                "lg": _ELEVATION_3,
                "elevated": _ELEVATION_2,
            },
            "typography": {
                "font_family": (
                    "'Roboto', 'Google Sans', -apple-system, BlinkMacSystemFont, "
                    "'Segoe UI', sans-serif"
                ),
                "font_weights": {
                    "light": 300,
                    "regular": 400,
                    "medium": 500,
                    "semibold": 600,
                    "bold": 700,
                },
                "line_heights": {"tight": 1.2, "normal": 1.5, "relaxed": 1.75},
            },
            "transitions": {
                "duration": {"fast": "150ms", "normal": "250ms", "slow": "350ms"},
                "easing": {
                    "standard": "cubic-bezier(0.4, 0.0, 0.2, 1)",
                    "accelerate": "cubic-bezier(0.4, 0.0, 1, 1)",
                    "decelerate": "cubic-bezier(0.0, 0.0, 0.2, 1)",
                },
            },
            "borders": {
                "width": {"none": 0, "thin": 1, "medium": 2},
                "style": "solid",
                "colors": {
                    "subtle": "rgba(0, 0, 0, 0.08)",
                    "default": "rgba(0, 0, 0, 0.12)",
                    "strong": "rgba(0, 0, 0, 0.2)",
                },
            },
        },
        "patterns": {
            "button": {
                "variant": "elevated",
                "padding": {"x": 4, "y": 2},
                "borderRadius": "md",
                "shadow": "md",
                "hover": {"shadow": "lg", "translate": "none"},
                "fontWeight": "medium",
                "textTransform": "uppercase",
                "letterSpacing": "0.5px",
            },
            "card": {
                "variant": "elevated",
                "padding": 5,
                "borderRadius": "lg",
                "shadow": "elevated",
                "hover": {"shadow": "lg", "translate": "-2px"},
                "border": "none",
            },
            "input": {
                "variant": "filled",
                "padding": {"x": 4, "y": 3},
                "borderRadius": "sm",
                "border": "none",
                "background": "filled",
                "focusStyle": "underline",
            },
            "table": {
                "variant": "simple",
                "rowPadding": 4,
                "borderStyle": "divider",
                "headerStyle": "elevated",
                "headerBackground": "subtle",
            },
            "nav": {
                "variant": "elevated",
                "itemPadding": {"x": 4, "y": 3},
                "itemBorderRadius": "lg",
                "activeStyle": "elevated",
                "hoverStyle": "background",
            },
        },
        "semantics": {
            "elevation": {"flat": 0, "raised": 1, "overlay": 2, "modal": 3},
        },
    }
)
