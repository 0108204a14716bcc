"""Desktop (Windows/macOS/Linux) bundle builders.

Only the bloc variant is implemented.  The provider and riverpod builders
return the bloc bundle.
"""

from __future__ import annotations

from flutter_blueprint.config import BlueprintConfig, StateManagement

from .bundle import Shape, TemplateBundle
from .dependencies import shape_dependencies, shape_dev_dependencies
from .shared import common_files, shaped_file


def build_bloc_bundle(config: BlueprintConfig) -> TemplateBundle:
    """Desktop app: window manager setup, title bar, layout and helpers."""
    state = StateManagement.BLOC
    files = [
        shaped_file("lib/main.dart", "desktop/main.dart.j2", Shape.DESKTOP, state),
        *common_files(Shape.DESKTOP, state),
        shaped_file("lib/core/desktop/window_config.dart", "desktop/window_config.dart.j2", Shape.DESKTOP, state),
        shaped_file("lib/core/desktop/desktop_helper.dart", "desktop/desktop_helper.dart.j2", Shape.DESKTOP, state),
        shaped_file("lib/core/desktop/title_bar.dart", "desktop/title_bar.dart.j2", Shape.DESKTOP, state),
        shaped_file("lib/core/desktop/desktop_layout.dart", "desktop/desktop_layout.dart.j2", Shape.DESKTOP, state),
    ]
    return TemplateBundle(
        files=tuple(files),
        additional_dependencies=shape_dependencies(Shape.DESKTOP, state, config),
        additional_dev_dependencies=shape_dev_dependencies(Shape.DESKTOP, state, config),
        required_features=("home",),
    )


# Delegating variants.
build_provider_bundle = build_bloc_bundle
build_riverpod_bundle = build_bloc_bundle
