"""Firebase Architect UI configuration.

Centralised, typed configuration for the UI template tooling. All settings use
Pydantic v2 models so they can be validated at construction time and serialised
to/from JSON or environment variables without boiler-plate.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field


class SelectionDefaults(BaseModel):
    """Catalog ids used when a selection leaves a choice open."""

    design_system: str = Field(default="material")
    layout: str = Field(default="dashboardGrid")
    theme: str = Field(default="blue")
    typography: str = Field(default="system")
    navigation_style: str = Field(default="side")


class Config(BaseModel):
    """Global Firebase Architect UI configuration.

    ``output_dir`` is the project root that generated files are written
    into.  Every derived path hangs off it, so the same config can be pointed
    at another project with ``for_project``.
    """

    output_dir: Path = Field(default=Path("./output"))
    metadata_dir: str = Field(default=".firebase-architect")
    web_app_dir: str = Field(default="apps/web")
    defaults: SelectionDefaults = Field(default_factory=SelectionDefaults)

    def for_project(self, project_path: str | Path) -> "Config":
        """Return a copy of this config rooted at *project_path*."""
        return self.model_copy(update={"output_dir": Path(project_path)})

    # ------------------------------------------------------------------
    # Derived paths (read-only properties)
    # ------------------------------------------------------------------

    @property
    def metadata_path(self) -> Path:
        """Root of the ``.firebase-architect/`` metadata directory."""
        return self.output_dir / self.metadata_dir

    @property
    def ui_template_path(self) -> Path:
        """Path to the persisted ``ui-template.json``."""
        return self.metadata_path / "ui-template.json"

    @property
    def web_app_path(self) -> Path:
        return self.output_dir / self.web_app_dir

    @property
    def theme_dir(self) -> Path:
        """Directory that receives the framework theme file."""
        return self.web_app_path / "src" / "theme"

    @property
    def lib_dir(self) -> Path:
        """Directory that receives ``ui-setup.tsx``."""
        return self.web_app_path / "src" / "lib"

    @property
    def components_dir(self) -> Path:
        """Directory for the generated example components."""
        return self.web_app_path / "src" / "components"

    @property
    def package_json_path(self) -> Path:
        return self.web_app_path / "package.json"

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path | None = None) -> Path:
        """Persist the configuration to a JSON file.

        Args:
            path: Destination file. Defaults to ``<metadata_path>/config.json``.

        Returns:
            The path where the file was written.
        """
        target = path or (self.metadata_path / "config.json")
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "Config":
        """Load a previously-saved configuration from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            FA_OUTPUT_DIR, FA_METADATA_DIR, FA_WEB_APP_DIR,
            FA_DEFAULT_DESIGN_SYSTEM, FA_DEFAULT_LAYOUT, FA_DEFAULT_THEME,
            FA_DEFAULT_TYPOGRAPHY, FA_DEFAULT_NAVIGATION.
        """
        defaults_kwargs: dict[str, Any] = {}
        for field_name, env_name in (
            ("design_system", "FA_DEFAULT_DESIGN_SYSTEM"),
            ("layout", "FA_DEFAULT_LAYOUT"),
            ("theme", "FA_DEFAULT_THEME"),
            ("typography", "FA_DEFAULT_TYPOGRAPHY"),
            ("navigation_style", "FA_DEFAULT_NAVIGATION"),
        ):
            if os.environ.get(env_name):
                defaults_kwargs[field_name] = os.environ[env_name]

        return cls(
            output_dir=Path(os.environ.get("FA_OUTPUT_DIR", "./output")),
            metadata_dir=os.environ.get("FA_METADATA_DIR", ".firebase-architect"),
            web_app_dir=os.environ.get("FA_WEB_APP_DIR", "apps/web"),
            defaults=SelectionDefaults(**defaults_kwargs),
        )
