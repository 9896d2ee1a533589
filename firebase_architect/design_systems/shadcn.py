"""Shadcn/UI design system (Radix UI primitives styled with Tailwind)."""

from __future__ import annotations

from .models import DesignSystem

SHADCN = DesignSystem.model_validate(
    {
        "id": "shadcn",
        "name": "Shadcn/UI",
        "description": (
            "Modern component system with clean borders, accessible patterns, "
            "and minimal aesthetics"
        ),
        "vendor": "shadcn",
        "used_by": ["Modern SaaS", "Developer Tools", "Startups", "AI Applications"],
        "foundations": {
            "spacing": {
                "unit": 4,
                "scale": {0: 0, 1: 4, 2: 8, 3: 12, 4: 16, 5: 20, 6: 24, 7: 32, 8: 40},
            },
            "border_radius": {"none": 0, "sm": 6, "md": 8, "lg": 12, "xl": 16, "full": 9999},
            "borders": {
                "width": {"none": 0, "thin": 1, "medium": 2, "thick": 3},
                "style": "solid",
                "colors": {
                    "subtle": "rgba(0, 0, 0, 0.1)",
                    "default": "rgba(0, 0, 0, 0.15)",
                    "strong": "rgba(0, 0, 0, 0.25)",
                },
            },
            "shadows": {
                "none": "none",
                "sm": "0 1px 2px rgba(0,0,0,0.05)",
                "md": "0 1px 3px rgba(0,0,0,0.08)",
                "lg": "0 2px 4px rgba(0,0,0,0.1)",
                "xl": "0 4px 8px rgba(0,0,0,0.12)",
                "subtle": "0 1px 2px rgba(0,0,0,0.04)",
            },
            "typography": {
                "font_family": (
                    "'Inter', -apple-system, BlinkMacSystemFont, 'Segoe UI', sans-serif"
                ),
                "font_weights": {
                    "light": 300,
                    "regular": 400,
                    "medium": 500,
                    "semibold": 600,
                    "bold": 700,
                },
                "line_heights": {"tight": 1.25, "normal": 1.5, "relaxed": 1.625},
            },
            "transitions": {
                "duration": {"fast": "100ms", "normal": "200ms", "slow": "300ms"},
                "easing": {
                    "standard": "cubic-bezier(0.4, 0, 0.2, 1)",
                    "out": "cubic-bezier(0, 0, 0.2, 1)",
                    "in": "cubic-bezier(0.4, 0, 1, 1)",
                },
            },
        },
        "patterns": {
            "button": {
                "variant": "outlined",
                "padding": {"x": 4, "y": 2},
                "borderRadius": "md",
                "border": "thin",
                "shadow": "none",
                "hover": {"background": "subtle", "borderColor": "strong", "translate": "none"},
                "fontWeight": "medium",
                "textTransform": "none",
                "letterSpacing": "normal",
            },
            "card": {
                "variant": "outlined",
                "padding": 6,
                "borderRadius": "lg",
                "border": "thin",
                "shadow": "none",
                "hover": {"shadow": "sm", "borderColor": "default", "translate": "none"},
            },
            "input": {
                "variant": "outlined",
                "padding": {"x": 3, "y": 2},
                "borderRadius": "md",
                "border": "thin",
                "background": "transparent",
                "focusStyle": "ring",
            },
            "table": {
                "variant": "bordered",
                "rowPadding": 3,
                "borderStyle": "full",
                "headerStyle": "bordered",
                "headerBackground": "subtle",
            },
            "nav": {
                "variant": "ghost",
                "itemPadding": {"x": 3, "y": 2},
                "itemBorderRadius": "md",
                "activeStyle": "subtle-background",
                "hoverStyle": "background",
            },
        },
        "semantics": {
            "borderStrength": {"subtle": "subtle", "default": "default", "strong": "strong"},
        },
    }
)
