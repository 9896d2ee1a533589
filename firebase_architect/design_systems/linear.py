"""Linear design system: minimal, flat, keyboard-first."""

from __future__ import annotations

from .models import DesignSystem

LINEAR = DesignSystem.model_validate(
    {
        "id": "linear",
        "name": "Linear",
        "description": (
            "Ultra-minimal design system with speed, clarity, and keyboard-first "
            "interactions"
        ),
        "vendor": "Linear",
        "used_by": [
            "Linear App",
            "Modern Productivity Tools",
            "Developer-focused Products",
        ],
        "foundations": {
            "spacing": {
                "unit": 4,
                "scale": {0: 0, 1: 2, 2: 4, 3: 8, 4: 12, 5: 16, 6: 24, 7: 32, 8: 48},
            },
            "border_radius": {"none": 0, "sm": 4, "md": 6, "lg": 8, "xl": 12, "full": 9999},
            # only two strengths; "strong" requests fall back to "default"
            "borders": {
                "width": {"none": 0, "thin": 1},
                "style": "solid",
                "colors": {
                    "subtle": "rgba(0, 0, 0, 0.06)",
                    "default": "rgba(0, 0, 0, 0.08)",
                },
            },
            "shadows": {
                "none": "none",
                "sm": "0 1px 2px rgba(0,0,0,0.02)",
                "md": "0 1px 3px rgba(0,0,0,0.04)",
                "lg": "0 2px 4px rgba(0,0,0,0.06)",
                "xl": "0 4px 8px rgba(0,0,0,0.08)",
                "minimal": "0 1px 2px rgba(0,0,0,0.01)",
            },
            "typography": {
                "font_family": (
                    "'SF Pro Display', -apple-system, BlinkMacSystemFont, "
                    "'Segoe UI', sans-serif"
                ),
                "font_weights": {
                    "light": 300,
                    "regular": 400,
                    "medium": 500,
                    "semibold": 600,
                    "bold": 700,
                },
                "line_heights": {"tight": 1.2, "normal": 1.4, "relaxed": 1.6},
            },
            "transitions": {
                "duration": {"fast": "100ms", "normal": "150ms", "slow": "200ms"},
                "easing": {
                    "standard": "cubic-bezier(0.4, 0, 0.2, 1)",
                    "out": "cubic-bezier(0, 0, 0.2, 1)",
                    "in": "cubic-bezier(0.4, 0, 1, 1)",
                },
            },
        },
        "patterns": {
            "button": {
                "variant": "ghost",
                "padding": {"x": 3, "y": 2},
                "borderRadius": "sm",
                "border": "none",
                "shadow": "none",
                "hover": {"background": "subtle", "opacity": 0.8, "translate": "none"},
                "fontWeight": "medium",
                "textTransform": "none",
                "letterSpacing": "normal",
            },
            "card": {
                "variant": "flat",
                "padding": 5,
                "borderRadius": "md",
                "border": "none",
                "shadow": "none",
                "hover": {"background": "subtle", "translate": "none"},
                "background": "transparent",
            },
            "input": {
                "variant": "ghost",
                "padding": {"x": 3, "y": 2},
                "borderRadius": "sm",
                "border": "none",
                "background": "transparent",
                "focusStyle": "subtle-background",
            },
            "table": {
                "variant": "minimal",
                "rowPadding": 2,
                "borderStyle": "divider-subtle",
                "headerStyle": "flat",
                "headerBackground": "none",
            },
            "nav": {
                "variant": "flat",
                "itemPadding": {"x": 3, "y": 2},
                "itemBorderRadius": "sm",
                "activeStyle": "text-color",
                "hoverStyle": "opacity",
            },
        },
        "semantics": {
            "emphasis": {"minimal": "ghost", "subtle": "flat", "default": "minimal"},
        },
    }
)
