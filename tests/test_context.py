"""Unit tests for DesignSystemContext (firebase_architect.context).

Tests cover:
- Token accessors and their fixed fallbacks
- Border strength fallback and systems without borders
- Component pattern copies
- Transition composition
- Pattern resolution to CSS values
"""

from __future__ import annotations

import pytest

from firebase_architect.catalog import build_template_config, get_color_theme
from firebase_architect.context import DesignSystemContext, create_context
from firebase_architect.design_systems import DesignSystem, get_design_system

pytestmark = pytest.mark.unit


class TestMetadata:
    def test_create_context_resolves_ids(self):
        ctx = create_context("shadcn", "purple")
        assert ctx.id == "shadcn"
        assert ctx.colors["primary"] == "#8b5cf6"

    def test_create_context_falls_back(self):
        ctx = create_context("bogus", "bogus")
        assert ctx.id == "material"
        assert ctx.theme.id == "blue"

    def test_from_selection(self):
        ctx = DesignSystemContext.from_selection(
            build_template_config(design_system_id="carbon", theme_id="dark")
        )
        assert ctx.name == get_design_system("carbon").name
        assert ctx.get_color("background") == "#0f172a"

    def test_font_family(self, material_context):
        assert material_context.font_family.startswith("'Roboto'")


class TestSpacingAndRadius:
    def test_known_step(self, material_context):
        assert material_context.get_spacing(4) == "16px"

    def test_zero_step(self, material_context):
        assert material_context.get_spacing(0) == "0px"

    def test_out_of_range_step(self, material_context):
        assert material_context.get_spacing(99) == "0px"

    def test_known_radius(self, material_context):
        assert material_context.get_border_radius("md") == "12px"

    def test_unknown_radius(self, material_context):
        assert material_context.get_border_radius("gigantic") == "0px"


class TestShadowAndBorder:
    def test_known_shadow(self, material_context):
        assert material_context.get_shadow("none") == "none"
        assert material_context.get_shadow("md").startswith("0px 1px 2px")

    def test_unknown_shadow(self, material_context):
        assert material_context.get_shadow("dramatic") == "none"

    def test_default_border(self, material_context):
        assert material_context.get_border() == "1px solid rgba(0, 0, 0, 0.12)"

    def test_strong_border(self, material_context):
        assert material_context.get_border("strong") == "1px solid rgba(0, 0, 0, 0.2)"

    @pytest.mark.parametrize("system_id", ["material", "linear", "carbon", "shadcn"])
    def test_unknown_strength_matches_default(self, system_id):
        ctx = create_context(system_id)
        assert ctx.get_border("doesNotExist") == ctx.get_border("default")

    def test_linear_strong_falls_back_to_default(self, linear_context):
        assert linear_context.get_border("strong") == linear_context.get_border("default")

    def test_system_without_borders(self):
        bare = get_design_system("material").model_copy(
            update={
                "foundations": get_design_system("material").foundations.model_copy(
                    update={"borders": None}
                )
            }
        )
        ctx = DesignSystemContext(bare, get_color_theme("blue"))
        assert ctx.get_border() == "none"
        assert ctx.get_border("strong") == "none"


class TestTypographyAndTransitions:
    def test_font_weight(self, material_context):
        assert material_context.get_font_weight("medium") == 500

    def test_unknown_font_weight(self, material_context):
        assert material_context.get_font_weight("ultra") == 400

    def test_line_height(self, linear_context):
        assert linear_context.get_line_height("normal") == 1.4
        assert linear_context.get_line_height("airy") == 1.5

    def test_transition_defaults(self, material_context):
        assert material_context.get_transition() == "all 250ms cubic-bezier(0.4, 0.0, 0.2, 1)"

    def test_transition_named_duration(self, linear_context):
        assert linear_context.get_transition("opacity", "fast") == (
            "opacity 100ms cubic-bezier(0.4, 0, 0.2, 1)"
        )

    def test_unknown_duration_uses_normal(self, material_context):
        assert material_context.get_transition("color", "glacial") == (
            material_context.get_transition("color", "normal")
        )

    def test_missing_normal_duration_uses_fixed_default(self):
        material = get_design_system("material")
        foundations = material.foundations.model_copy(
            update={
                "transitions": material.foundations.transitions.model_copy(
                    update={"duration": {"fast": "100ms"}}
                )
            }
        )
        system = material.model_copy(update={"foundations": foundations})
        ctx = DesignSystemContext(system, get_color_theme("blue"))
        assert ctx.get_transition("all", "slow").startswith("all 200ms ")


class TestComponentPatterns:
    def test_known_pattern(self, material_context):
        card = material_context.get_component_pattern("card")
        assert card["borderRadius"] == "lg"
        assert card["shadow"] == "elevated"

    def test_unknown_pattern(self, material_context):
        assert material_context.get_component_pattern("carousel") == {}

    def test_pattern_is_a_copy(self, material_context):
        card = material_context.get_component_pattern("card")
        card["hover"]["shadow"] = "none"
        assert material_context.get_component_pattern("card")["hover"]["shadow"] == "lg"


class TestResolvePattern:
    def test_material_button(self, material_context):
        css = material_context.resolve_pattern("button")
        assert css["padding"] == "8px 16px"
        assert css["border-radius"] == "12px"
        assert css["font-weight"] == "500"
        assert css["text-transform"] == "uppercase"
        assert css["letter-spacing"] == "0.5px"
        assert css["transition"].startswith("all 250ms")

    def test_material_card_uses_elevated_shadow(self, material_context):
        css = material_context.resolve_pattern("card")
        assert css["padding"] == "20px"
        assert css["box-shadow"] == material_context.get_shadow("elevation2")
        assert css["border"] == "none"

    def test_thin_border_uses_default_color(self):
        ctx = create_context("fluent")
        width = ctx.foundations.borders.width["thin"]
        color = ctx.foundations.borders.colors["default"]
        assert ctx.resolve_pattern("card")["border"] == f"{width}px solid {color}"

    def test_table_row_padding(self, linear_context):
        assert linear_context.resolve_pattern("table")["padding"] == "4px 0"

    def test_nav_item_padding_and_radius(self, linear_context):
        css = linear_context.resolve_pattern("nav")
        assert css["padding"] == "4px 8px"
        assert css["border-radius"] == "4px"

    def test_unknown_component(self, material_context):
        assert material_context.resolve_pattern("carousel") == {}

    def test_repr(self, material_context):
        assert repr(material_context) == "DesignSystemContext(system='material', theme='blue')"


def test_context_accepts_any_system_instance():
    system = DesignSystem.model_validate(
        {
            "id": "inline",
            "name": "Inline",
            "foundations": {
                "spacing": {"unit": 4, "scale": {1: 4}},
                "typography": {"font_family": "serif"},
            },
        }
    )
    ctx = DesignSystemContext(system, get_color_theme("green"))
    assert ctx.get_spacing(1) == "4px"
    assert ctx.get_border() == "none"
    assert ctx.get_transition() == "all 200ms ease"
    assert ctx.patterns == {}


class TestSharedEntriesStayUnchanged:
    def test_colors_are_read_only(self):
        ctx = create_context("material", "blue")
        with pytest.raises(TypeError):
            ctx.colors["primary"] = "#000000"
        assert get_color_theme("blue").colors["primary"] == "#3b82f6"

    def test_foundation_tables_are_read_only(self, material_context):
        with pytest.raises(TypeError):
            material_context.foundations.border_radius["md"] = 0
        with pytest.raises(TypeError):
            material_context.foundations.spacing.scale[4] = 0
        assert get_design_system("material").foundations.border_radius["md"] == 12
        assert create_context("material").get_spacing(4) == "16px"

    def test_patterns_are_read_only(self, material_context):
        with pytest.raises(TypeError):
            material_context.patterns["card"]["shadow"] = "none"
        with pytest.raises(TypeError):
            material_context.patterns["carousel"] = {}
        assert create_context("material").get_component_pattern("card")["shadow"] == "elevated"
