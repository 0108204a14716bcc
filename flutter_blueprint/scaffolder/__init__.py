"""Flutter Blueprint scaffolder -- renders complete Flutter project trees.

This package turns a ``BlueprintConfig`` into a ``path -> content`` map.
Shape bundles (mobile, web, desktop, universal) are selected from a registry
keyed by shape and state-management idiom, then layered with feature
modules, CI configuration, and the ``blueprint.yaml`` manifest.

Quick usage::

    from flutter_blueprint.config import BlueprintConfig
    from flutter_blueprint.scaffolder import ProjectGenerator

    config = BlueprintConfig(app_name="my_app", platforms="mobile,web")
    generator = ProjectGenerator()
    result = generator.generate(config)
    await generator.write(result, "/tmp/output")
"""

from flutter_blueprint.scaffolder.bundle import Shape, TemplateBundle, TemplateFile
from flutter_blueprint.scaffolder.generator import (
    GenerationError,
    GenerationResult,
    ProjectGenerator,
    generate,
)
from flutter_blueprint.scaffolder.registry import TemplateRegistry, default_registry
from flutter_blueprint.scaffolder.templates import TemplateRenderer

__all__ = [
    "GenerationError",
    "GenerationResult",
    "ProjectGenerator",
    "Shape",
    "TemplateBundle",
    "TemplateFile",
    "TemplateRegistry",
    "TemplateRenderer",
    "default_registry",
    "generate",
]
