"""Firebase Architect UI templates.

Design system registry, selectable catalog (color themes, typography,
layouts, presets), token resolution context, and the UI template
configurator that renders framework theme files.

Quick usage::

    from firebase_architect import TemplateConfigurator, create_context

    theme_ts = TemplateConfigurator("material-modern").set_border_radius(12).generate_theme_file()
    create_context("linear").get_border("doesNotExist")
"""

from firebase_architect.catalog import build_template_config, get_preset
from firebase_architect.configurator import Framework, TemplateConfigurator, UnknownTemplateError
from firebase_architect.context import DesignSystemContext, create_context
from firebase_architect.design_systems import get_design_system, list_design_systems

__version__ = "0.1.0"

__all__ = [
    "DesignSystemContext",
    "Framework",
    "TemplateConfigurator",
    "UnknownTemplateError",
    "__version__",
    "build_template_config",
    "create_context",
    "get_design_system",
    "get_preset",
    "list_design_systems",
]
