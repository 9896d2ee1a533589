"""Pydantic v2 models for design system definitions.

A design system is split into *foundations* (numeric and string scales that
never change for the lifetime of the process) and *patterns* (per-component
descriptors that reference foundation keys by name, e.g. ``borderRadius:
'md'``).  Every model is frozen and every mapping field is a read-only
view: definitions are built once at import time and shared by every caller.
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from firebase_architect.registry import ReadOnlyDict


# ---------------------------------------------------------------------------
# Foundations
# ---------------------------------------------------------------------------


class SpacingScale(BaseModel):
    """Spacing grid: a base unit plus numbered steps in pixels."""

    model_config = ConfigDict(frozen=True, validate_default=True)

    unit: int = Field(default=4, ge=0, description="Base grid unit in px")
    scale: ReadOnlyDict[int, int] = Field(
        default_factory=dict, description="Step number -> pixel value"
    )


class Borders(BaseModel):
    """Border widths, style and strength colors."""

    model_config = ConfigDict(frozen=True, validate_default=True)

    width: ReadOnlyDict[str, int] = Field(default_factory=dict)
    style: str = Field(default="solid")
    colors: ReadOnlyDict[str, str] = Field(
        default_factory=dict, description="Strength name -> CSS color"
    )


class TypographyTokens(BaseModel):
    """Font family plus named weight and line-height scales."""

    model_config = ConfigDict(frozen=True, validate_default=True)

    font_family: str
    font_weights: ReadOnlyDict[str, int] = Field(default_factory=dict)
    line_heights: ReadOnlyDict[str, float] = Field(default_factory=dict)


class Transitions(BaseModel):
    """Named durations (``'150ms'``) and easing curves."""

    model_config = ConfigDict(frozen=True, validate_default=True)

    duration: ReadOnlyDict[str, str] = Field(default_factory=dict)
    easing: ReadOnlyDict[str, str] = Field(default_factory=dict)


class Foundations(BaseModel):
    """The immutable token tables of one design system."""

    model_config = ConfigDict(frozen=True, validate_default=True)

    spacing: SpacingScale
    border_radius: ReadOnlyDict[str, int] = Field(default_factory=dict)
    shadows: ReadOnlyDict[str, str] = Field(default_factory=dict)
    borders: Optional[Borders] = None
    typography: TypographyTokens
    transitions: Transitions = Field(default_factory=Transitions)


# ---------------------------------------------------------------------------
# Design system
# ---------------------------------------------------------------------------


class DesignSystem(BaseModel):
    """A named set of foundations and component patterns."""

    model_config = ConfigDict(frozen=True, validate_default=True)

    id: str = Field(..., description="Unique registry key, e.g. 'material'")
    name: str
    description: str = ""
    vendor: str = ""
    used_by: tuple[str, ...] = ()
    foundations: Foundations
    patterns: ReadOnlyDict[str, dict[str, Any]] = Field(
        default_factory=dict,
        description="Component kind (button, card, input, table, nav) -> descriptor",
    )
    semantics: ReadOnlyDict[str, dict[str, Any]] = Field(default_factory=dict)

    @property
    def component_kinds(self) -> list[str]:
        """Component kinds that have a pattern, in declaration order."""
        return list(self.patterns)
