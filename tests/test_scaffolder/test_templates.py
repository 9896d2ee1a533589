"""Unit tests for the Jinja2 TemplateRenderer and its filters."""

from __future__ import annotations

from pathlib import Path

import pytest

from firebase_architect.scaffolder.templates import TemplateRenderer


def _render_inline(tmp_path: Path, source: str, **context) -> str:
    (tmp_path / "inline.j2").write_text(source, encoding="utf-8")
    return TemplateRenderer(tmp_path).render("inline.j2", context)


class TestFilters:
    @pytest.mark.unit
    @pytest.mark.parametrize(
        "source, expected",
        [
            ("{{ 'say \"hi\"' | js_string }}", '"say \\"hi\\""'),
            ("{{ 12 | js_string }}", '"12"'),
            ("{{ {'a': [1, 2]} | tojson_js }}", '{"a": [1, 2]}'),
            ("{{ 8 | scale(0.5) }}", "4"),
            ("{{ 5 | scale(0.5) }}", "2.5"),
            ("{{ 7 | scale }}", "7"),
            ("{{ '8' | scale(2) }}", "16"),
            ("{{ '8px' | scale(2) }}", "8px"),
            ("{{ 'nan' | scale(2) }}", "nan"),
        ],
    )
    def test_filter_output(self, tmp_path: Path, source, expected):
        assert _render_inline(tmp_path, source) == expected

    @pytest.mark.unit
    def test_scale_passes_none_through(self, tmp_path: Path):
        assert _render_inline(tmp_path, "[{{ v | scale(2) }}]", v=None) == "[None]"

    @pytest.mark.unit
    def test_font_list(self, tmp_path: Path):
        out = _render_inline(
            tmp_path,
            "{{ fonts | font_list | tojson_js }}",
            fonts="'Satoshi', \"Inter\", sans-serif",
        )
        assert out == '["Satoshi", "Inter", "sans-serif"]'

    @pytest.mark.unit
    def test_font_list_of_non_string(self, tmp_path: Path):
        assert _render_inline(tmp_path, "{{ 14 | font_list | tojson_js }}") == '["14"]'

    @pytest.mark.unit
    def test_tojson_js_indent(self, tmp_path: Path):
        out = _render_inline(tmp_path, "{{ v | tojson_js(2) }}", v={"a": 1})
        assert out == '{\n  "a": 1\n}'

    @pytest.mark.unit
    def test_no_html_escaping(self, tmp_path: Path):
        assert _render_inline(tmp_path, "{{ v }}", v="<b>&</b>") == "<b>&</b>"


class TestRendering:
    @pytest.mark.unit
    def test_keeps_trailing_newline(self, tmp_path: Path):
        assert _render_inline(tmp_path, "{{ name }}\n", name="x") == "x\n"

    @pytest.mark.unit
    def test_missing_variable_renders_empty(self, tmp_path: Path):
        assert _render_inline(tmp_path, "[{{ missing }}]") == "[]"

    @pytest.mark.unit
    def test_render_to_file_creates_parents(self, tmp_path: Path):
        out = TemplateRenderer().render_to_file(
            "themes/generic.ts.j2", tmp_path / "a" / "b" / "theme.ts", {"config": {"x": 1}}
        )
        assert out == tmp_path / "a" / "b" / "theme.ts"
        assert out.read_text() == 'export const theme = {\n  "x": 1\n};\n\nexport default theme;\n'

    @pytest.mark.unit
    def test_default_template_dir(self):
        renderer = TemplateRenderer()
        assert (renderer.template_dir / "themes" / "mui.ts.j2").is_file()
        assert (renderer.template_dir / "ui" / "ui-setup.tsx.j2").is_file()
