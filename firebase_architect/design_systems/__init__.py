"""Design system catalog.

Each design system pairs immutable foundation tokens (spacing, radius,
shadows, borders, typography, transitions) with component patterns that
reference those tokens by name.

Quick usage::

    from firebase_architect.design_systems import get_design_system

    material = get_design_system("material")
    material.foundations.border_radius["md"]   # 12
    get_design_system("bogus").id              # "material"
"""

from __future__ import annotations

from typing import Optional

from firebase_architect.registry import Registry

from .antd import ANTD
from .atlassian import ATLASSIAN
from .carbon import CARBON
from .chakra import CHAKRA
from .fluent import FLUENT
from .linear import LINEAR
from .material import MATERIAL
from .models import (
    Borders,
    DesignSystem,
    Foundations,
    SpacingScale,
    Transitions,
    TypographyTokens,
)
from .polaris import POLARIS
from .shadcn import SHADCN
from .validation import (
    DesignSystemValidationError,
    find_unresolved_references,
    validate_design_system,
)

DEFAULT_DESIGN_SYSTEM_ID = "material"

DESIGN_SYSTEMS: Registry[DesignSystem] = Registry(
    [MATERIAL, FLUENT, CARBON, ANTD, SHADCN, CHAKRA, POLARIS, ATLASSIAN, LINEAR],
    default_id=DEFAULT_DESIGN_SYSTEM_ID,
    kind="design system",
)


def get_design_system(design_system_id: Optional[str]) -> DesignSystem:
    """Return the design system for *design_system_id* (``material`` if unknown)."""
    return DESIGN_SYSTEMS.get(design_system_id)


def list_design_systems() -> list[DesignSystem]:
    """All design systems in declaration order."""
    return DESIGN_SYSTEMS.list()


__all__ = [
    "DEFAULT_DESIGN_SYSTEM_ID",
    "DESIGN_SYSTEMS",
    "Borders",
    "DesignSystem",
    "DesignSystemValidationError",
    "Foundations",
    "SpacingScale",
    "Transitions",
    "TypographyTokens",
    "find_unresolved_references",
    "get_design_system",
    "list_design_systems",
    "validate_design_system",
]
