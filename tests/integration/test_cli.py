"""Integration tests for the firebase-architect command line.

Each test drives ``main()`` with an argv list and inspects the captured
console output or the files written to a temporary project.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from firebase_architect import utils
from firebase_architect.cli import build_parser, main

pytestmark = pytest.mark.integration


@pytest.fixture(autouse=True)
def wide_console(monkeypatch):
    """Keep table cells on one line so substring checks are stable."""
    monkeypatch.setattr(utils.console, "width", 200)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in (
        "FA_OUTPUT_DIR",
        "FA_METADATA_DIR",
        "FA_WEB_APP_DIR",
        "FA_DEFAULT_DESIGN_SYSTEM",
        "FA_DEFAULT_LAYOUT",
        "FA_DEFAULT_THEME",
        "FA_DEFAULT_TYPOGRAPHY",
        "FA_DEFAULT_NAVIGATION",
    ):
        monkeypatch.delenv(name, raising=False)


class TestParser:
    def test_command_required(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args([])

    def test_unknown_list_kind(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["list", "widgets"])

    def test_generate_requires_project(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["generate", "arch.json"])


class TestList:
    @pytest.mark.parametrize(
        "kind, expected",
        [
            ("design-systems", ["material", "linear", "shadcn"]),
            ("layouts", ["dashboardGrid", "spreadsheet", "kanban"]),
            ("themes", ["blue", "dark", "#0f172a"]),
            ("typography", ["roboto", "sfPro"]),
            ("presets", ["material-dashboard", "linear-kanban"]),
            ("templates", ["material-modern", "med-refills-healthcare", "healthcare"]),
        ],
    )
    def test_lists_entries(self, capsys, kind, expected):
        main(["list", kind])
        out = capsys.readouterr().out
        for text in expected:
            assert text in out


class TestResolve:
    def test_preset(self, capsys):
        main(["resolve", "--preset", "linear-kanban"])
        out = capsys.readouterr().out
        assert "Resolved Selection" in out
        assert '"layout": "kanban"' in out
        assert '"designSystem": "linear"' in out

    def test_unknown_preset(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["resolve", "--preset", "nope"])
        assert exc_info.value.code == 1
        assert "Preset 'nope' not found" in capsys.readouterr().out

    def test_ids_with_fallbacks(self, capsys):
        main(["resolve", "--design-system", "carbon", "--theme", "bogus"])
        out = capsys.readouterr().out
        assert '"designSystem": "carbon"' in out
        assert '"theme": "blue"' in out
        assert '"navigationStyle": "side"' in out

    def test_env_defaults(self, capsys, monkeypatch):
        monkeypatch.setenv("FA_DEFAULT_THEME", "dark")
        main(["resolve"])
        assert '"theme": "dark"' in capsys.readouterr().out


class TestTheme:
    def test_prints_theme(self, capsys):
        main(["theme", "ant-design-pro"])
        out = capsys.readouterr().out
        assert "import type { ThemeConfig } from 'antd';" in out
        assert "export default antdTheme;" in out

    def test_customization_file(self, capsys, tmp_path: Path):
        custom = tmp_path / "custom.yaml"
        custom.write_text("customization:\n  colors:\n    primary: '#123456'\n  spacing: 6\n")
        main(["theme", "material-modern", "-c", str(custom)])
        out = capsys.readouterr().out
        assert 'main: "#123456"' in out
        assert "spacing: 6," in out

    def test_bare_customization_file(self, capsys, tmp_path: Path):
        custom = tmp_path / "custom.json"
        custom.write_text(json.dumps({"borderRadius": 10}))
        main(["theme", "shadcn-modern", "--customization", str(custom)])
        assert "--radius: 10px;" in capsys.readouterr().out

    def test_output_file(self, capsys, tmp_path: Path):
        out_file = tmp_path / "theme" / "_variables.scss"
        main(["theme", "coreui-enterprise", "-o", str(out_file)])
        assert "$primary: #321fdb;" in out_file.read_text()
        assert "Wrote _variables.scss theme" in capsys.readouterr().out

    def test_unknown_template(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["theme", "retro"])
        assert exc_info.value.code == 1
        assert "Template 'retro' not found" in capsys.readouterr().out

    def test_bad_customization_file(self, capsys, tmp_path: Path):
        custom = tmp_path / "custom.toml"
        custom.write_text("x = 1")
        with pytest.raises(SystemExit):
            main(["theme", "material-modern", "-c", str(custom)])
        assert "Could not read customization" in capsys.readouterr().out

    def test_unit_string_radius_renders(self, capsys, tmp_path: Path):
        custom = tmp_path / "custom.json"
        custom.write_text(json.dumps({"borderRadius": "8px"}))
        main(["theme", "coreui-enterprise", "-c", str(custom)])
        assert "$border-radius: 8pxpx;" in capsys.readouterr().out

    def test_malformed_customization_reported(self, capsys, tmp_path: Path):
        custom = tmp_path / "custom.json"
        custom.write_text(json.dumps({"colors": "red"}))
        with pytest.raises(SystemExit) as exc_info:
            main(["theme", "material-modern", "-c", str(custom)])
        assert exc_info.value.code == 1
        assert "Could not render material-modern theme" in capsys.readouterr().out


class TestGenerate:
    def test_json_architecture(self, capsys, tmp_project_dir, sample_architecture, tmp_path):
        arch = tmp_path / "architecture.json"
        arch.write_text(json.dumps(sample_architecture))
        main(["generate", str(arch), "--project", str(tmp_project_dir)])
        assert (tmp_project_dir / "apps/web/src/theme/theme.ts").exists()
        assert (tmp_project_dir / ".firebase-architect/ui-template.json").exists()
        out = capsys.readouterr().out
        assert "UI template configured: Material Modern" in out
        assert "apps/web/src/theme/theme.ts" in out

    def test_yaml_architecture(self, tmp_project_dir, tmp_path):
        arch = tmp_path / "architecture.yml"
        arch.write_text("uiTemplate:\n  templateId: tailadmin-modern\n")
        main(["generate", str(arch), "-p", str(tmp_project_dir)])
        assert (tmp_project_dir / "apps/web/src/theme/tailwind.config.js").exists()

    def test_without_ui_template(self, capsys, tmp_project_dir, tmp_path):
        arch = tmp_path / "architecture.json"
        arch.write_text(json.dumps({"projectName": "x"}))
        main(["generate", str(arch), "-p", str(tmp_project_dir)])
        assert "No UI template specified" in capsys.readouterr().out
        assert not (tmp_project_dir / "apps").exists()

    def test_unknown_template(self, capsys, tmp_project_dir, tmp_path):
        arch = tmp_path / "architecture.json"
        arch.write_text(json.dumps({"uiTemplate": {"templateId": "retro"}}))
        with pytest.raises(SystemExit) as exc_info:
            main(["generate", str(arch), "-p", str(tmp_project_dir)])
        assert exc_info.value.code == 1
        assert "Template 'retro' not found" in capsys.readouterr().out

    def test_invalid_block(self, capsys, tmp_project_dir, tmp_path):
        arch = tmp_path / "architecture.json"
        arch.write_text(json.dumps({"uiTemplate": {"customization": {}}}))
        with pytest.raises(SystemExit):
            main(["generate", str(arch), "-p", str(tmp_project_dir)])
        assert "Invalid uiTemplate block" in capsys.readouterr().out

    def test_missing_architecture_file(self, capsys, tmp_project_dir, tmp_path):
        with pytest.raises(SystemExit):
            main(["generate", str(tmp_path / "missing.json"), "-p", str(tmp_project_dir)])
        assert "Could not read architecture file" in capsys.readouterr().out


class TestConfigCommand:
    def test_shows_effective_config(self, capsys):
        main(["config"])
        out = capsys.readouterr().out
        assert '"web_app_dir": "apps/web"' in out
        assert '"metadata_dir": ".firebase-architect"' in out

    def test_env_reflected(self, capsys, monkeypatch):
        monkeypatch.setenv("FA_WEB_APP_DIR", "frontend")
        main(["config"])
        assert '"web_app_dir": "frontend"' in capsys.readouterr().out

    def test_save_to_file(self, capsys, tmp_path: Path):
        target = tmp_path / "fa.json"
        main(["config", "--save", str(target)])
        assert json.loads(target.read_text())["web_app_dir"] == "apps/web"
        assert "Saved configuration to" in capsys.readouterr().out

    def test_save_default_location(self, monkeypatch, tmp_path: Path):
        monkeypatch.setenv("FA_OUTPUT_DIR", str(tmp_path))
        main(["config", "--save"])
        assert (tmp_path / ".firebase-architect" / "config.json").is_file()

    def test_saved_config_drives_generate(
        self, monkeypatch, tmp_project_dir, tmp_path: Path
    ):
        saved = tmp_path / "fa.json"
        monkeypatch.setenv("FA_WEB_APP_DIR", "frontend")
        main(["config", "--save", str(saved)])
        monkeypatch.delenv("FA_WEB_APP_DIR")

        arch = tmp_path / "architecture.json"
        arch.write_text(json.dumps({"uiTemplate": {"templateId": "shadcn-modern"}}))
        main(["--config", str(saved), "generate", str(arch), "-p", str(tmp_project_dir)])
        assert (tmp_project_dir / "frontend/src/theme/globals.css").exists()
        assert not (tmp_project_dir / "apps").exists()

    def test_missing_config_file(self, capsys, tmp_path: Path):
        with pytest.raises(SystemExit) as exc_info:
            main(["--config", str(tmp_path / "missing.json"), "config"])
        assert exc_info.value.code == 1
        assert "Could not load configuration" in capsys.readouterr().out

    def test_invalid_config_file(self, capsys, tmp_path: Path):
        bad = tmp_path / "fa.json"
        bad.write_text('{"web_app_dir": ["not", "a", "path"]}')
        with pytest.raises(SystemExit):
            main(["--config", str(bad), "config"])
        assert "Could not load configuration" in capsys.readouterr().out
