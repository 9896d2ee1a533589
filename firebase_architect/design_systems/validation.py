"""Static consistency checks for design system definitions.

Patterns refer to foundation tokens by name (``borderRadius: 'md'``,
``shadow: 'elevated'``).  These helpers walk every pattern and report names
that do not exist in the same system's foundations.  Resolution at render time
never fails on a missing name, so this check is the only place a dangling
reference surfaces.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from .models import DesignSystem

# Pattern field -> foundation table it resolves against.
_NAMED_REFERENCES: dict[str, str] = {
    "borderRadius": "border_radius",
    "itemBorderRadius": "border_radius",
    "shadow": "shadows",
    "border": "border_widths",
    "fontWeight": "font_weights",
}
_HOVER_REFERENCES: dict[str, str] = {
    "shadow": "shadows",
    "borderColor": "border_colors",
}
_SPACING_REFERENCES = ("padding", "itemPadding", "rowPadding")


class DesignSystemValidationError(ValueError):
    """Raised when a design system's patterns reference unknown tokens."""

    def __init__(self, system_id: str, errors: list[str]) -> None:
        self.system_id = system_id
        self.errors = errors
        message = f"Design system '{system_id}' has unresolved references:\n" + "\n".join(
            f"  - {e}" for e in errors
        )
        super().__init__(message)


def _token_tables(system: DesignSystem) -> dict[str, set[Any]]:
    f = system.foundations
    borders = f.borders
    return {
        "border_radius": set(f.border_radius),
        "shadows": set(f.shadows),
        "border_widths": set(borders.width) if borders else set(),
        "border_colors": set(borders.colors) if borders else set(),
        "font_weights": set(f.typography.font_weights),
        "spacing": set(f.spacing.scale),
    }


def _spacing_steps(value: Any) -> Iterable[Any]:
    if isinstance(value, Mapping):
        return value.values()
    return (value,)


def find_unresolved_references(system: DesignSystem) -> list[str]:
    """Return one message per pattern reference missing from the foundations.

    An empty list means the system is consistent.
    """
    tables = _token_tables(system)
    errors: list[str] = []

    for kind, pattern in system.patterns.items():
        for field, table in _NAMED_REFERENCES.items():
            if field in pattern and pattern[field] not in tables[table]:
                errors.append(f"{kind}.{field}: '{pattern[field]}' not in {table}")

        hover = pattern.get("hover") or {}
        for field, table in _HOVER_REFERENCES.items():
            if field in hover and hover[field] not in tables[table]:
                errors.append(f"{kind}.hover.{field}: '{hover[field]}' not in {table}")

        for field in _SPACING_REFERENCES:
            if field not in pattern:
                continue
            for step in _spacing_steps(pattern[field]):
                if step not in tables["spacing"]:
                    errors.append(f"{kind}.{field}: step {step!r} not in spacing scale")

    return errors


def validate_design_system(system: DesignSystem) -> DesignSystem:
    """Return *system* unchanged, or raise if any reference is unresolved.

    Raises:
        DesignSystemValidationError: Listing every unresolved reference.
    """
    errors = find_unresolved_references(system)
    if errors:
        raise DesignSystemValidationError(system.id, errors)
    return system
