"""UI template generation for a scaffolded project.

Reads the ``uiTemplate`` block of an architecture document and writes the
selected template's theme file, UI provider setup, starter components and
npm dependencies into the project's web app.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

from jinja2 import TemplateError
from pydantic import BaseModel, ConfigDict, Field
from rich.markup import escape

from firebase_architect.config import Config
from firebase_architect.configurator import TemplateConfigurator, UnknownTemplateError
from firebase_architect.template_library import UITemplate
from firebase_architect.utils import console, load_json, print_success, print_warning, save_json

from .templates import TemplateRenderer, write_text


class UITemplateError(Exception):
    """Raised when the UI template step cannot complete."""

    def __init__(self, message: str, template_id: str = ""):
        self.template_id = template_id
        super().__init__(message)


# ---------------------------------------------------------------------------
# Input / output models
# ---------------------------------------------------------------------------


class UITemplateSpec(BaseModel):
    """The ``uiTemplate`` block of an architecture document."""

    model_config = ConfigDict(populate_by_name=True)

    template_id: str = Field(..., alias="templateId", min_length=1)
    customization: Optional[dict[str, Any]] = Field(default=None)


class UITemplateResult(BaseModel):
    """Summary of a completed generation."""

    template_id: str
    template_name: str
    framework: str
    theme_path: str = Field(..., description="Theme file path relative to the project root")
    components: list[str] = Field(default_factory=list)
    layouts: list[str] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------


class UITemplateGenerator:
    """Writes the UI template files for one project."""

    def __init__(self, config: Config | None = None) -> None:
        self.config = config or Config()
        self.renderer = TemplateRenderer()

    def generate(
        self, architecture: dict[str, Any], project_path: str | Path
    ) -> Optional[UITemplateResult]:
        """Generate UI template files under *project_path*.

        Returns ``None`` when the architecture selects no UI template.

        Raises:
            pydantic.ValidationError: If ``uiTemplate`` is malformed.
            UITemplateError: If the template is unknown or a file cannot be
                rendered or written.
        """
        raw = architecture.get("uiTemplate")
        if not raw:
            console.print("[dim]No UI template specified, using default Material-UI setup[/dim]")
            return None

        spec = UITemplateSpec.model_validate(raw)
        project = Path(project_path)
        paths = self.config.for_project(project)

        with console.status("Setting up UI template...") as status:
            try:
                configurator = TemplateConfigurator(spec.template_id, renderer=self.renderer)
            except UnknownTemplateError as exc:
                raise UITemplateError(str(exc), spec.template_id) from exc

            template = configurator.template
            status.update(f"Setting up {template.name}...")

            try:
                configurator.apply_customization(spec.customization)
                theme_path = paths.theme_dir / configurator.theme_file_name()
                write_text(theme_path, configurator.generate_theme_file())
                configurator.save_configuration(project, paths.metadata_dir)

                context = {"template": template, "framework": configurator.framework.slug}
                self.renderer.render_to_file(
                    "ui/ui-setup.tsx.j2", paths.lib_dir / "ui-setup.tsx", context
                )
                self._generate_example_components(paths, context)
                self._add_template_dependencies(template, paths.package_json_path)
            except (OSError, TemplateError, TypeError, AttributeError, ValueError) as exc:
                raise UITemplateError(
                    f"Failed to set up UI template '{template.id}': {exc}", template.id
                ) from exc

        print_success(f"UI template configured: {template.name}")

        return UITemplateResult(
            template_id=template.id,
            template_name=template.name,
            framework=template.framework,
            theme_path=theme_path.relative_to(project).as_posix(),
            components=list(template.components),
            layouts=list(template.layouts),
        )

    # -- Steps -------------------------------------------------------------

    def _generate_example_components(self, paths: Config, context: dict[str, Any]) -> None:
        for name in ("Dashboard", "Layout"):
            self.renderer.render_to_file(
                f"ui/{name}.tsx.j2", paths.components_dir / f"{name}.tsx", context
            )

    @staticmethod
    def _add_template_dependencies(template: UITemplate, package_json_path: Path) -> None:
        """Merge the template's npm dependencies into an existing package.json."""
        if not package_json_path.exists():
            print_warning(
                f"No package.json at {escape(str(package_json_path))}, "
                "add these dependencies manually: "
                + ", ".join(template.dependencies)
            )
            return
        package = load_json(package_json_path)
        package["dependencies"] = {**package.get("dependencies", {}), **template.dependencies}
        save_json(package, package_json_path)
