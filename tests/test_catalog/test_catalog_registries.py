"""Tests for the color theme and typography registries."""

from __future__ import annotations

import pytest

from firebase_architect.catalog import (
    COLOR_ROLES,
    ColorTheme,
    NavigationStyle,
    get_color_theme,
    get_typography,
    list_color_themes,
    list_typography,
)

pytestmark = pytest.mark.unit


class TestColorThemes:
    def test_declaration_order(self):
        assert [t.id for t in list_color_themes()] == ["blue", "purple", "green", "orange", "dark"]

    def test_unknown_theme_falls_back_to_blue(self):
        assert get_color_theme("bogus").id == "blue"

    def test_blue_primary(self):
        assert get_color_theme("blue").color("primary") == "#3b82f6"

    @pytest.mark.parametrize("theme", list_color_themes(), ids=lambda t: t.id)
    def test_shipped_themes_are_complete(self, theme):
        assert theme.is_complete, theme.missing_roles()

    def test_missing_role_uses_fallback(self):
        partial = ColorTheme(id="mono", name="Mono", colors={"primary": "#000"})
        assert partial.color("accent", "#fff") == "#fff"
        assert partial.color("primary", "#fff") == "#000"

    def test_missing_roles_listed_in_role_order(self):
        partial = ColorTheme(id="mono", name="Mono", colors={"primary": "#000", "text": "#111"})
        missing = partial.missing_roles()
        assert "primary" not in missing
        assert missing == [r for r in COLOR_ROLES if r not in ("primary", "text")]
        assert not partial.is_complete


class TestTypography:
    def test_declaration_order(self):
        assert [t.id for t in list_typography()] == ["system", "roboto", "inter", "sfPro"]

    def test_unknown_falls_back_to_system(self):
        assert get_typography("comic-sans").id == "system"

    def test_roboto_stack_leads_with_roboto(self):
        assert get_typography("roboto").font_family.startswith("'Roboto'")

    def test_base_size(self):
        assert get_typography("inter").font_size == 14


class TestNavigationStyle:
    def test_values(self):
        assert [s.value for s in NavigationStyle] == ["side", "top", "side-top", "compact", "none"]

    def test_labels(self):
        assert NavigationStyle.SIDE_TOP.label == "Side + Top"
        assert NavigationStyle.COMPACT.description == "Collapsed sidebar with icons"

    def test_string_comparison(self):
        assert NavigationStyle("side") == "side"
