"""Typography preset registry."""

from __future__ import annotations

from typing import Optional

from firebase_architect.registry import Registry

from .models import TypographyPreset

DEFAULT_TYPOGRAPHY_ID = "system"

_SYSTEM_STACK = "-apple-system, BlinkMacSystemFont, 'Segoe UI'"

TYPOGRAPHY_PRESETS: Registry[TypographyPreset] = Registry(
    [
        TypographyPreset(
            id="system",
            name="System Default",
            font_family=f"{_SYSTEM_STACK}, 'Roboto', sans-serif",
            font_size=14,
        ),
        TypographyPreset(
            id="roboto",
            name="Roboto",
            font_family=f"'Roboto', {_SYSTEM_STACK}, sans-serif",
            font_size=14,
        ),
        TypographyPreset(
            id="inter",
            name="Inter",
            font_family=f"'Inter', {_SYSTEM_STACK}, sans-serif",
            font_size=14,
        ),
        TypographyPreset(
            id="sfPro",
            name="SF Pro",
            font_family=f"'SF Pro Display', {_SYSTEM_STACK}, sans-serif",
            font_size=14,
        ),
    ],
    default_id=DEFAULT_TYPOGRAPHY_ID,
    kind="typography preset",
)


def get_typography(typography_id: Optional[str]) -> TypographyPreset:
    """Return the typography preset for *typography_id* (``system`` if unknown)."""
    return TYPOGRAPHY_PRESETS.get(typography_id)


def list_typography() -> list[TypographyPreset]:
    return TYPOGRAPHY_PRESETS.list()
