"""Command-line interface for browsing the catalog and generating UI templates.

Examples::

    firebase-architect list design-systems
    firebase-architect resolve --preset linear-kanban
    firebase-architect theme material-modern --customization custom.json
    firebase-architect generate architecture.yaml --project ./my-app
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Callable, Optional, Sequence

from jinja2 import TemplateError
from pydantic import ValidationError
from rich.markup import escape

from firebase_architect.catalog import (
    NavigationStyle,
    build_template_config,
    get_preset,
    list_color_themes,
    list_layouts,
    list_presets,
    list_typography,
    resolve_preset,
)
from firebase_architect.config import Config
from firebase_architect.configurator import TemplateConfigurator, UnknownTemplateError
from firebase_architect.design_systems import list_design_systems
from firebase_architect.scaffolder.ui_generator import UITemplateError, UITemplateGenerator
from firebase_architect.template_library import get_all_templates
from firebase_architect.utils import (
    console,
    load_structured,
    print_error,
    print_listing,
    print_success,
    print_summary_table,
    print_template_info,
)


# ---------------------------------------------------------------------------
# list
# ---------------------------------------------------------------------------


def _list_design_systems() -> None:
    print_listing(
        "Design Systems",
        ("ID", "Name", "Vendor", "Description"),
        ((s.id, s.name, s.vendor, s.description) for s in list_design_systems()),
    )


def _list_layouts() -> None:
    print_listing(
        "Layouts",
        ("ID", "Name", "Category", "Slots"),
        ((lay.id, lay.name, lay.category, ", ".join(lay.slots)) for lay in list_layouts()),
    )


def _list_themes() -> None:
    print_listing(
        "Color Themes",
        ("ID", "Name", "Primary", "Background"),
        ((t.id, t.name, t.color("primary"), t.color("background")) for t in list_color_themes()),
    )


def _list_typography() -> None:
    print_listing(
        "Typography",
        ("ID", "Name", "Font Family", "Size"),
        ((t.id, t.name, t.font_family, f"{t.font_size}px") for t in list_typography()),
    )


def _list_presets() -> None:
    print_listing(
        "Presets",
        ("ID", "Design System", "Layout", "Theme", "Typography", "Navigation"),
        (
            (p.id, p.design_system, p.layout, p.theme, p.typography, p.navigation_style.value)
            for p in list_presets()
        ),
    )


def _list_templates() -> None:
    print_listing(
        "UI Templates",
        ("ID", "Name", "Framework", "Category"),
        ((t.id, t.name, t.framework, t.category) for t in get_all_templates()),
    )


_LISTINGS: dict[str, Callable[[], None]] = {
    "design-systems": _list_design_systems,
    "layouts": _list_layouts,
    "themes": _list_themes,
    "typography": _list_typography,
    "presets": _list_presets,
    "templates": _list_templates,
}


def _cmd_list(args: argparse.Namespace, config: Config) -> int:
    _LISTINGS[args.kind]()
    return 0


# ---------------------------------------------------------------------------
# resolve / theme / generate
# ---------------------------------------------------------------------------


def _cmd_resolve(args: argparse.Namespace, config: Config) -> int:
    if args.preset:
        preset = get_preset(args.preset)
        if preset is None:
            print_error(f"Error: Preset '{args.preset}' not found")
            return 1
        selection = resolve_preset(preset)
    else:
        defaults = config.defaults
        selection = build_template_config(
            design_system_id=args.design_system or defaults.design_system,
            layout_id=args.layout or defaults.layout,
            theme_id=args.theme or defaults.theme,
            typography_id=args.typography or defaults.typography,
            navigation_style=args.navigation or defaults.navigation_style,
        )

    print_summary_table(
        {
            "Design system": f"{selection.design_system.name} ({selection.design_system.id})",
            "Layout": f"{selection.layout.name} ({selection.layout.id})",
            "Theme": f"{selection.theme.name} ({selection.theme.id})",
            "Typography": f"{selection.typography.name} ({selection.typography.id})",
            "Navigation": selection.navigation_style,
        },
        title="Resolved Selection",
    )
    console.print_json(json.dumps(selection.to_customization()))
    return 0


def _load_customization(path: Optional[str]) -> Optional[dict[str, Any]]:
    if not path:
        return None
    data = load_structured(path)
    # accept either a bare customization or a full uiTemplate block
    return data.get("customization", data)


def _cmd_theme(args: argparse.Namespace, config: Config) -> int:
    try:
        configurator = TemplateConfigurator(args.template_id)
    except UnknownTemplateError as exc:
        print_error(f"Error: {escape(str(exc))}")
        return 1

    try:
        customization = _load_customization(args.customization)
    except (OSError, ValueError) as exc:
        print_error(f"Error: Could not read customization: {escape(str(exc))}")
        return 1

    try:
        content = configurator.apply_customization(customization).generate_theme_file()
    except (TemplateError, TypeError, AttributeError) as exc:
        print_error(f"Error: Could not render {args.template_id} theme: {escape(str(exc))}")
        return 1

    if args.output:
        out = Path(args.output)
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text(content, encoding="utf-8")
        print_success(f"Wrote {configurator.theme_file_name()} theme to {out}")
    else:
        console.print(content, markup=False, highlight=False, soft_wrap=True, end="")
    return 0


def _cmd_generate(args: argparse.Namespace, config: Config) -> int:
    try:
        architecture = load_structured(args.architecture)
    except (OSError, ValueError) as exc:
        print_error(f"Error: Could not read architecture file: {escape(str(exc))}")
        return 1

    generator = UITemplateGenerator(config.for_project(args.project))
    try:
        result = generator.generate(architecture, args.project)
    except ValidationError as exc:
        print_error(f"Error: Invalid uiTemplate block:\n{escape(str(exc))}")
        return 1
    except UITemplateError as exc:
        print_error(f"Error: {escape(str(exc))}")
        return 1

    print_template_info(result)
    return 0


def _cmd_config(args: argparse.Namespace, config: Config) -> int:
    if args.save is not None:
        path = config.save(Path(args.save) if args.save else None)
        print_success(f"Saved configuration to {escape(str(path))}")
    else:
        console.print_json(config.model_dump_json())
    return 0


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="firebase-architect",
        description="Firebase Architect UI templates -- catalog browser and theme generator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  firebase-architect list presets\n"
            "  firebase-architect resolve --design-system shadcn --theme dark\n"
            "  firebase-architect theme ant-design-pro -o src/theme/antd-theme.ts\n"
            "  firebase-architect generate architecture.json --project ./my-app\n"
            "  firebase-architect --config fa.json config --save fa.json\n"
        ),
    )
    parser.add_argument(
        "--config",
        default=None,
        help="JSON configuration file (default: read FA_* environment variables)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    list_parser = sub.add_parser("list", help="List catalog entries")
    list_parser.add_argument("kind", choices=sorted(_LISTINGS))
    list_parser.set_defaults(handler=_cmd_list)

    resolve_parser = sub.add_parser("resolve", help="Resolve a preset or a set of catalog ids")
    resolve_parser.add_argument("--preset", default=None, help="Preset id")
    resolve_parser.add_argument("--design-system", default=None, help="Design system id")
    resolve_parser.add_argument("--layout", default=None, help="Layout id")
    resolve_parser.add_argument("--theme", default=None, help="Color theme id")
    resolve_parser.add_argument("--typography", default=None, help="Typography preset id")
    resolve_parser.add_argument(
        "--navigation",
        default=None,
        help="Navigation style (%s)" % ", ".join(style.value for style in NavigationStyle),
    )
    resolve_parser.set_defaults(handler=_cmd_resolve)

    theme_parser = sub.add_parser("theme", help="Render a UI template's theme file")
    theme_parser.add_argument("template_id", help="UI template id, e.g. material-modern")
    theme_parser.add_argument(
        "--customization", "-c",
        default=None,
        help="JSON/YAML file with colors, typography, spacing, borderRadius overrides",
    )
    theme_parser.add_argument(
        "--output", "-o",
        default=None,
        help="Write the theme to this file instead of stdout",
    )
    theme_parser.set_defaults(handler=_cmd_theme)

    generate_parser = sub.add_parser(
        "generate", help="Write UI template files for an architecture document"
    )
    generate_parser.add_argument(
        "architecture", help="Architecture file (.json, .yaml or .yml) with a uiTemplate block"
    )
    generate_parser.add_argument(
        "--project", "-p",
        required=True,
        help="Project root that receives the generated files",
    )
    generate_parser.set_defaults(handler=_cmd_generate)

    config_parser = sub.add_parser("config", help="Show or save the effective configuration")
    config_parser.add_argument(
        "--save",
        nargs="?",
        const="",
        default=None,
        metavar="FILE",
        help="Write the configuration as JSON (default: <output>/.firebase-architect/config.json)",
    )
    config_parser.set_defaults(handler=_cmd_config)

    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    """CLI entry point for ``python -m firebase_architect``."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.config:
        try:
            config = Config.load(args.config)
        except (OSError, ValidationError) as exc:
            print_error(f"Error: Could not load configuration: {escape(str(exc))}")
            sys.exit(1)
    else:
        config = Config.from_env()

    exit_code = args.handler(args, config)
    if exit_code:
        sys.exit(exit_code)


if __name__ == "__main__":
    main()
