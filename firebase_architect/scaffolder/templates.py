"""Jinja2 template rendering for theme and UI scaffolding.

Provides the TemplateRenderer class which loads Jinja2 templates from the
``firebase_architect/scaffolder/templates/`` directory and renders them with
theme configuration or layout slot content.  Output is JavaScript,
TypeScript, SCSS, CSS or HTML, so autoescaping is disabled; values that land
inside JS literals go through the ``js_string`` / ``tojson_js`` filters.
"""

from __future__ import annotations

import json
import math
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, select_autoescape


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders Jinja2 templates for theme files, UI setup files and layouts.

    The renderer discovers ``.j2`` template files under a configurable
    template directory.  Templates are rendered with a context dictionary
    that typically holds the working theme config or layout slot markup.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape([]),
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        # Register custom filters
        self.env.filters["js_string"] = _js_string_filter
        self.env.filters["tojson_js"] = _tojson_js_filter
        self.env.filters["font_list"] = _font_list_filter
        self.env.filters["scale"] = _scale_filter

    # -- Single template rendering -----------------------------------------

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render a single template with the provided context.

        Args:
            template_path: Path relative to the template directory (e.g.
                ``"themes/mui.ts.j2"``).
            context: Dictionary of variables available inside the template.

        Returns:
            The rendered template content as a string.
        """
        template = self.env.get_template(template_path)
        return template.render(**context)

    # -- File-based rendering ----------------------------------------------

    def render_to_file(
        self,
        template_path: str,
        output_path: str | Path,
        context: dict[str, Any],
    ) -> Path:
        """Render a template and write the result to *output_path*.

        Parent directories are created automatically.  Returns the output
        path.
        """
        content = self.render(template_path, context)
        out = Path(output_path)
        write_text(out, content)
        return out


# ---------------------------------------------------------------------------
# Jinja2 custom filters
# ---------------------------------------------------------------------------

def _js_string_filter(value: Any) -> str:
    """Quote *value* as a JavaScript string literal."""
    return json.dumps(str(value))


def _tojson_js_filter(value: Any, indent: int | None = None) -> str:
    """Serialize *value* as a JSON literal usable in JS/TS source."""
    return json.dumps(value, indent=indent)


def _font_list_filter(value: str) -> list[str]:
    """Split a CSS font-family stack into bare family names."""
    return [part.strip().strip("'\"") for part in str(value).split(",") if part.strip()]


def _scale_filter(value: Any, factor: float = 1) -> Any:
    """Multiply a numeric token by *factor* and format it the way JS prints it.

    ``8 | scale(0.5)`` gives ``4`` and ``"8" | scale(2)`` gives ``16``.
    Values that are not numbers (``"8px"``, ``None``) are returned unchanged
    so hand-edited customizations still render.
    """
    if isinstance(value, bool):
        return value
    try:
        number = float(value) * factor
    except (TypeError, ValueError):
        return value
    if not math.isfinite(number):
        return value
    if number.is_integer():
        return str(int(number))
    return repr(number)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def write_text(path: Path, content: str) -> None:
    """Create parent dirs and write *content*."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
