"""Template configurator.

Wraps one ``UITemplate`` with a private working copy of its default style
configuration, applies user overrides, and renders the framework-specific
theme file.

Overrides are shallow-merged per section: ``set_colors({"primary": ...})``
replaces ``colors.primary`` and leaves the other colors alone, while a nested
value such as ``colors.text`` is replaced wholesale.
"""

from __future__ import annotations

import colorsys
import copy
import re
from enum import Enum
from pathlib import Path
from typing import Any, Mapping, Optional

from firebase_architect.registry import thaw
from firebase_architect.scaffolder.templates import TemplateRenderer
from firebase_architect.template_library import UITemplate, get_template
from firebase_architect.utils import save_json

METADATA_DIR = ".firebase-architect"
CONFIG_FILE_NAME = "ui-template.json"

_HEX_COLOR = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


class UnknownTemplateError(LookupError):
    """Raised when a configurator is created for an unregistered template id."""

    def __init__(self, template_id: str):
        self.template_id = template_id
        super().__init__(f"Template '{template_id}' not found")


class Framework(str, Enum):
    """Component frameworks a theme file can be rendered for."""

    MATERIAL = "Material-UI (MUI)"
    ANT_DESIGN = "Ant Design"
    TAILWIND = "Tailwind CSS"
    BOOTSTRAP = "CoreUI (Bootstrap)"
    SHADCN = "Shadcn/ui"
    HEALTHCARE = "Custom Healthcare UI"
    GENERIC = "generic"

    @classmethod
    def parse(cls, label: str) -> "Framework":
        """Map a template's framework label, unknown labels to ``GENERIC``."""
        try:
            return cls(label)
        except ValueError:
            return cls.GENERIC

    @property
    def slug(self) -> str:
        return self.name.lower().replace("_", "-")

    @property
    def theme_template(self) -> str:
        return _THEME_TEMPLATES[self]

    @property
    def theme_file_name(self) -> str:
        return _THEME_FILE_NAMES[self]


_THEME_TEMPLATES: dict[Framework, str] = {
    Framework.MATERIAL: "themes/mui.ts.j2",
    Framework.ANT_DESIGN: "themes/antd.ts.j2",
    Framework.TAILWIND: "themes/tailwind.config.js.j2",
    Framework.BOOTSTRAP: "themes/bootstrap.scss.j2",
    Framework.SHADCN: "themes/shadcn.css.j2",
    Framework.HEALTHCARE: "themes/healthcare.ts.j2",
    Framework.GENERIC: "themes/generic.ts.j2",
}

_THEME_FILE_NAMES: dict[Framework, str] = {
    Framework.MATERIAL: "theme.ts",
    Framework.ANT_DESIGN: "antd-theme.ts",
    Framework.TAILWIND: "tailwind.config.js",
    Framework.BOOTSTRAP: "_variables.scss",
    Framework.SHADCN: "globals.css",
    Framework.HEALTHCARE: "healthcare-theme.ts",
    Framework.GENERIC: "theme.ts",
}


# ---------------------------------------------------------------------------
# Color helpers
# ---------------------------------------------------------------------------


def _parse_hex(color: str) -> Optional[tuple[float, float, float]]:
    if not isinstance(color, str) or not _HEX_COLOR.match(color):
        return None
    digits = color[1:]
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    return tuple(int(digits[i : i + 2], 16) / 255 for i in (0, 2, 4))  # type: ignore[return-value]


def _shift_lightness(color: str, amount: float) -> str:
    rgb = _parse_hex(color)
    if rgb is None:
        return color
    hue, lightness, saturation = colorsys.rgb_to_hls(*rgb)
    lightness = min(1.0, max(0.0, lightness + amount))
    red, green, blue = colorsys.hls_to_rgb(hue, lightness, saturation)
    return "#" + "".join(f"{round(channel * 255):02x}" for channel in (red, green, blue))


def lighten(color: str, percent: float) -> str:
    """Raise the HSL lightness of a hex color by *percent* points.

    Anything that is not ``#rgb`` / ``#rrggbb`` is returned unchanged.
    """
    return _shift_lightness(color, percent / 100)


def darken(color: str, percent: float) -> str:
    """Lower the HSL lightness of a hex color by *percent* points."""
    return _shift_lightness(color, -percent / 100)


# ---------------------------------------------------------------------------
# TemplateConfigurator
# ---------------------------------------------------------------------------


class TemplateConfigurator:
    """Working configuration for one UI template.

    Every setter returns ``self`` so overrides can be chained::

        config = (
            TemplateConfigurator("material-modern")
            .set_primary_color("#6c63ff")
            .set_border_radius(12)
            .get_config()
        )
    """

    def __init__(
        self,
        template: str | UITemplate,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        if isinstance(template, UITemplate):
            resolved: Optional[UITemplate] = template
        else:
            resolved = get_template(template)
            if resolved is None:
                raise UnknownTemplateError(template)
        self.template: UITemplate = resolved
        self.framework = Framework.parse(resolved.framework)
        self.config: dict[str, Any] = thaw(resolved.default_config)
        self.renderer = renderer or TemplateRenderer()

    # -- Overrides ---------------------------------------------------------

    def set_colors(self, colors: Mapping[str, Any]) -> "TemplateConfigurator":
        self.config["colors"] = {**self.config.get("colors", {}), **colors}
        return self

    def set_primary_color(self, color: str) -> "TemplateConfigurator":
        """Set ``primary`` and derive ``primaryLight`` / ``primaryDark`` from it."""
        return self.set_colors(
            {
                "primary": color,
                "primaryLight": lighten(color, 20),
                "primaryDark": darken(color, 20),
            }
        )

    def set_typography(self, typography: Mapping[str, Any]) -> "TemplateConfigurator":
        self.config["typography"] = {**self.config.get("typography", {}), **typography}
        return self

    def set_font_family(self, font_family: str) -> "TemplateConfigurator":
        return self.set_typography({"fontFamily": font_family})

    def set_spacing(self, spacing: int) -> "TemplateConfigurator":
        self.config["spacing"] = spacing
        return self

    def set_border_radius(self, radius: int) -> "TemplateConfigurator":
        self.config["borderRadius"] = radius
        return self

    def apply_customization(
        self, customization: Optional[Mapping[str, Any]]
    ) -> "TemplateConfigurator":
        """Apply a pasted ``customization`` object.

        Recognised keys are ``colors``, ``typography``, ``spacing`` and
        ``borderRadius``.  Empty ``colors``/``typography`` and ``None``
        spacing or radius are skipped; ``0`` is a valid spacing or radius.
        """
        if not customization:
            return self
        if customization.get("colors"):
            self.set_colors(customization["colors"])
        if customization.get("typography"):
            self.set_typography(customization["typography"])
        if customization.get("spacing") is not None:
            self.set_spacing(customization["spacing"])
        if customization.get("borderRadius") is not None:
            self.set_border_radius(customization["borderRadius"])
        return self

    # -- Output ------------------------------------------------------------

    def get_config(self) -> dict[str, Any]:
        """Snapshot of the template metadata and the working configuration."""
        return {
            "templateId": self.template.id,
            "templateName": self.template.name,
            "framework": self.template.framework,
            "config": copy.deepcopy(self.config),
            "components": list(self.template.components),
            "layouts": list(self.template.layouts),
            "dependencies": dict(self.template.dependencies),
            "assets": thaw(self.template.assets),
        }

    def theme_file_name(self) -> str:
        return self.framework.theme_file_name

    def _theme_context(self) -> dict[str, Any]:
        colors = self.config.get("colors", {})
        text = colors.get("text", {})
        if not isinstance(text, dict):
            text = {"primary": text, "secondary": text}
        return {
            "template": self.template,
            "config": self.config,
            "colors": colors,
            "text": text,
            "typography": self.config.get("typography", {}),
            "spacing": self.config.get("spacing", 0),
            "border_radius": self.config.get("borderRadius", 0),
        }

    def generate_theme_file(self) -> str:
        """Render the theme source for this template's framework."""
        return self.renderer.render(self.framework.theme_template, self._theme_context())

    def save_configuration(
        self, output_dir: str | Path, metadata_dir: str = METADATA_DIR
    ) -> Path:
        """Write ``get_config()`` to ``<output_dir>/.firebase-architect/ui-template.json``.

        Existing files are overwritten.  Returns the written path.
        """
        return save_json(self.get_config(), Path(output_dir) / metadata_dir / CONFIG_FILE_NAME)

    def __repr__(self) -> str:
        return f"TemplateConfigurator(template={self.template.id!r}, framework={self.framework.name})"
