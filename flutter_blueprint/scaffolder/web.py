"""Web bundle builders.

Only the bloc variant is implemented.  The provider and riverpod builders
return the bloc bundle, and its dependencies are resolved for bloc so the
manifest matches the code that ships.
"""

from __future__ import annotations

from flutter_blueprint.config import BlueprintConfig, StateManagement

from .bundle import Shape, TemplateBundle
from .dependencies import shape_dependencies, shape_dev_dependencies
from .shared import common_files, shaped_file


def build_bloc_bundle(config: BlueprintConfig) -> TemplateBundle:
    """Browser app: HTML shell, web manifest, URL strategy and breakpoints."""
    state = StateManagement.BLOC
    files = [
        shaped_file("lib/main.dart", "web/main.dart.j2", Shape.WEB, state),
        *common_files(Shape.WEB, state),
        shaped_file("lib/core/utils/breakpoints.dart", "web/breakpoints.dart.j2", Shape.WEB, state),
        shaped_file("lib/core/widgets/web_layout.dart", "web/web_layout.dart.j2", Shape.WEB, state),
        shaped_file("web/index.html", "web/index.html.j2", Shape.WEB, state),
        shaped_file("web/manifest.json", "web/manifest.json.j2", Shape.WEB, state),
    ]
    return TemplateBundle(
        files=tuple(files),
        additional_dependencies=shape_dependencies(Shape.WEB, state, config),
        additional_dev_dependencies=shape_dev_dependencies(Shape.WEB, state, config),
        required_features=("home",),
    )


# Delegating variants.
build_provider_bundle = build_bloc_bundle
build_riverpod_bundle = build_bloc_bundle
