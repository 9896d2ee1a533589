"""Unit tests for firebase_architect.utils."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from firebase_architect.scaffolder.ui_generator import UITemplateResult
from firebase_architect.utils import (
    load_json,
    load_structured,
    print_error,
    print_listing,
    print_success,
    print_summary_table,
    print_template_info,
    print_warning,
    save_json,
)

pytestmark = pytest.mark.unit


class TestJsonIO:
    def test_save_creates_parents(self, tmp_path: Path):
        path = save_json({"a": 1}, tmp_path / "x" / "y" / "data.json")
        assert path.exists()
        assert json.loads(path.read_text()) == {"a": 1}

    def test_save_is_indented(self, tmp_path: Path):
        path = save_json({"a": {"b": 1}}, tmp_path / "data.json")
        assert path.read_text() == '{\n  "a": {\n    "b": 1\n  }\n}'

    def test_load_round_trip(self, tmp_path: Path):
        path = save_json({"name": "Café"}, tmp_path / "data.json")
        assert load_json(path) == {"name": "Café"}

    def test_load_wraps_non_object(self, tmp_path: Path):
        path = tmp_path / "list.json"
        path.write_text("[1, 2]")
        assert load_json(path) == {"_root": [1, 2]}

    def test_load_missing_file(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            load_json(tmp_path / "missing.json")

    def test_load_invalid_json(self, tmp_path: Path):
        path = tmp_path / "bad.json"
        path.write_text("{not json")
        with pytest.raises(json.JSONDecodeError):
            load_json(path)


class TestLoadStructured:
    def test_json(self, tmp_path: Path):
        path = tmp_path / "arch.json"
        path.write_text('{"uiTemplate": {"templateId": "shadcn-modern"}}')
        assert load_structured(path)["uiTemplate"]["templateId"] == "shadcn-modern"

    @pytest.mark.parametrize("suffix", [".yaml", ".yml", ".YAML"])
    def test_yaml(self, tmp_path: Path, suffix: str):
        path = tmp_path / f"arch{suffix}"
        path.write_text("uiTemplate:\n  templateId: ant-design-pro\n  customization:\n    spacing: 6\n")
        data = load_structured(path)
        assert data == {
            "uiTemplate": {"templateId": "ant-design-pro", "customization": {"spacing": 6}}
        }

    def test_empty_yaml_is_empty_mapping(self, tmp_path: Path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_structured(path) == {}

    def test_yaml_list_rejected(self, tmp_path: Path):
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ValueError, match="mapping"):
            load_structured(path)

    def test_unsupported_extension(self, tmp_path: Path):
        path = tmp_path / "arch.toml"
        path.write_text("x = 1")
        with pytest.raises(ValueError, match="Unsupported file type"):
            load_structured(path)


class TestConsoleHelpers:
    def test_summary_table(self, capsys):
        print_summary_table({"Template": "Material Modern"}, title="Check")
        out = capsys.readouterr().out
        assert "Check" in out
        assert "Material Modern" in out

    def test_listing(self, capsys):
        print_listing("Themes", ["ID", "Name"], [("blue", "Professional Blue")])
        out = capsys.readouterr().out
        assert "Themes" in out
        assert "blue" in out
        assert "Professional Blue" in out

    def test_template_info(self, capsys):
        result = UITemplateResult(
            template_id="shadcn-modern",
            template_name="shadcn/ui Modern",
            framework="shadcn/ui",
            theme_path="apps/web/src/theme/globals.css",
            components=["Button", "Card"],
            layouts=["dashboard"],
        )
        print_template_info(result)
        out = capsys.readouterr().out
        assert "UI Template" in out
        assert "2 available" in out

    def test_template_info_none_prints_nothing(self, capsys):
        print_template_info(None)
        assert capsys.readouterr().out == ""

    @pytest.mark.parametrize("helper", [print_success, print_error, print_warning])
    def test_message_helpers(self, capsys, helper):
        helper("all done")
        assert "all done" in capsys.readouterr().out
