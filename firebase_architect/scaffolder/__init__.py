"""Firebase Architect scaffolder -- writes UI template files into a project.

The package root only exposes the renderer, which the configurator and the
layout catalog depend on; the generator lives in ``ui_generator``.

Quick usage::

    from firebase_architect.scaffolder.ui_generator import UITemplateGenerator

    architecture = {"uiTemplate": {"templateId": "material-modern"}}
    result = UITemplateGenerator().generate(architecture, "/tmp/my-app")
"""

from firebase_architect.scaffolder.templates import TemplateRenderer

__all__ = [
    "TemplateRenderer",
]
