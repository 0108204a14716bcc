"""Template files shared by every shape bundle.

Each shape builder assembles its bundle from the lists returned here plus a
handful of shape-specific files.  Builders are parameterised by the *shape*
and by the state-management idiom the bundle actually emits, which is not
always ``config.state_management`` (web and desktop delegate to bloc).
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from flutter_blueprint.config import BlueprintConfig, StateManagement, TargetPlatform

from .bundle import ContentBuilder, ContextBuilder, Shape, TemplateFile, from_template
from .dependencies import merge_dependencies, shape_dependencies, shape_dev_dependencies
from .library import feature_modules, get_template


# ---------------------------------------------------------------------------
# Shape / state selection
# ---------------------------------------------------------------------------

# Shapes whose provider and riverpod variants reuse the bloc variant.
DELEGATED_SHAPES = frozenset({Shape.WEB, Shape.DESKTOP})

_PLATFORM_SHAPES: dict[TargetPlatform, Shape] = {
    TargetPlatform.MOBILE: Shape.MOBILE,
    TargetPlatform.WEB: Shape.WEB,
    TargetPlatform.DESKTOP: Shape.DESKTOP,
}


def shape_for(config: BlueprintConfig) -> Shape:
    """Multi-platform configs are universal; otherwise the single platform."""
    if config.is_multi_platform:
        return Shape.UNIVERSAL
    return _PLATFORM_SHAPES[config.platforms[0]]


def effective_state(shape: Shape, state: StateManagement) -> StateManagement:
    """The state idiom a *shape* bundle emits when *state* is requested."""
    if shape in DELEGATED_SHAPES:
        return StateManagement.BLOC
    return state


# ---------------------------------------------------------------------------
# Inclusion predicates
# ---------------------------------------------------------------------------


def wants_env(config: BlueprintConfig) -> bool:
    return config.include_env


def wants_api(config: BlueprintConfig) -> bool:
    return config.include_api


def wants_localization(config: BlueprintConfig) -> bool:
    return config.include_localization


def wants_theme(config: BlueprintConfig) -> bool:
    return config.include_theme


def wants_tests(config: BlueprintConfig) -> bool:
    return config.include_tests


def wants_hive(config: BlueprintConfig) -> bool:
    return config.include_hive


# ---------------------------------------------------------------------------
# Builder helpers
# ---------------------------------------------------------------------------


def shaped(
    name: str,
    shape: Shape,
    state: StateManagement,
    context: ContextBuilder | None = None,
) -> ContentBuilder:
    """Render *name* with ``shape``, ``state`` and ``features`` in context.

    ``state`` overrides the config's own value so delegating shapes render
    the idiom they actually ship.
    """
    def extra(config: BlueprintConfig) -> dict[str, Any]:
        values: dict[str, Any] = {
            "shape": shape.value,
            "state": state.value,
            "features": feature_modules(config),
        }
        if context is not None:
            values.update(context(config))
        return values

    return from_template(name, context=extra)


def pubspec_context(shape: Shape, state: StateManagement) -> ContextBuilder:
    """Context for ``pubspec.yaml``: shape deps merged with the library's."""
    def build(config: BlueprintConfig) -> dict[str, Any]:
        library = get_template(config.project_template, config)
        return {
            "description": f"{config.project_template.label} built with {state.value}.",
            "dependencies": merge_dependencies(
                shape_dependencies(shape, state, config),
                library.additional_dependencies,
            ),
            "dev_dependencies": merge_dependencies(
                shape_dev_dependencies(shape, state, config),
                library.additional_dev_dependencies,
            ),
        }

    return build


def shaped_file(
    path: str,
    template: str,
    shape: Shape,
    state: StateManagement,
    when: Callable[[BlueprintConfig], bool] | None = None,
) -> TemplateFile:
    return TemplateFile(path=path, build=shaped(template, shape, state), should_generate=when)


# ---------------------------------------------------------------------------
# File lists
# ---------------------------------------------------------------------------


def project_files(shape: Shape, state: StateManagement) -> list[TemplateFile]:
    """Root-level project files: manifest, lints, ignore list and README."""
    return [
        TemplateFile(
            path="pubspec.yaml",
            build=shaped("shared/pubspec.yaml.j2", shape, state, pubspec_context(shape, state)),
        ),
        shaped_file("analysis_options.yaml", "shared/analysis_options.yaml.j2", shape, state),
        shaped_file(".gitignore", "shared/gitignore.j2", shape, state),
        shaped_file("README.md", "shared/README.md.j2", shape, state),
    ]


def core_files(shape: Shape, state: StateManagement) -> list[TemplateFile]:
    """``lib/app`` shell and ``lib/core`` utilities."""
    files = [
        shaped_file("lib/app/bootstrap.dart", "shared/bootstrap.dart.j2", shape, state),
        shaped_file("lib/app/app_view.dart", "shared/app_view.dart.j2", shape, state),
        shaped_file("lib/core/config/app_config.dart", "shared/app_config.dart.j2", shape, state),
        shaped_file("lib/core/config/env_loader.dart", "shared/env_loader.dart.j2", shape, state, wants_env),
        shaped_file("lib/core/constants/app_constants.dart", "shared/app_constants.dart.j2", shape, state),
        shaped_file("lib/core/constants/api_endpoints.dart", "shared/api_endpoints.dart.j2", shape, state, wants_api),
        shaped_file("lib/core/errors/exceptions.dart", "shared/exceptions.dart.j2", shape, state),
        shaped_file("lib/core/errors/failures.dart", "shared/failures.dart.j2", shape, state),
        shaped_file("lib/core/network/network_info.dart", "shared/network_info.dart.j2", shape, state, wants_api),
        shaped_file("lib/core/api/api_client.dart", "shared/api_client.dart.j2", shape, state, wants_api),
        shaped_file("lib/core/api/api_interceptors.dart", "shared/api_interceptors.dart.j2", shape, state, wants_api),
        shaped_file("lib/core/utils/logger.dart", "shared/logger.dart.j2", shape, state),
        shaped_file("lib/core/utils/validators.dart", "shared/validators.dart.j2", shape, state),
        shaped_file("lib/core/utils/extensions.dart", "shared/extensions.dart.j2", shape, state),
        shaped_file("lib/core/routing/route_names.dart", "shared/route_names.dart.j2", shape, state),
        shaped_file("lib/core/routing/app_router.dart", "shared/app_router.dart.j2", shape, state),
        shaped_file("lib/core/theme/app_theme.dart", "shared/app_theme.dart.j2", shape, state, wants_theme),
        shaped_file("lib/core/theme/app_colors.dart", "shared/app_colors.dart.j2", shape, state, wants_theme),
        shaped_file("lib/core/theme/typography.dart", "shared/typography.dart.j2", shape, state, wants_theme),
        shaped_file("lib/core/widgets/loading_indicator.dart", "shared/loading_indicator.dart.j2", shape, state),
        shaped_file("lib/core/widgets/error_view.dart", "shared/error_view.dart.j2", shape, state),
        shaped_file("lib/core/storage/local_storage.dart", "shared/local_storage.dart.j2", shape, state),
    ]
    if shape in (Shape.MOBILE, Shape.UNIVERSAL):
        files.append(
            shaped_file("lib/core/storage/secure_storage.dart", "shared/secure_storage.dart.j2", shape, state)
        )
    files.append(
        shaped_file("lib/core/database/hive_database.dart", "shared/hive_database.dart.j2", shape, state, wants_hive)
    )
    return files


def asset_files(shape: Shape, state: StateManagement) -> list[TemplateFile]:
    """Localization resources and the ``.env`` template."""
    return [
        shaped_file("l10n.yaml", "shared/l10n.yaml.j2", shape, state, wants_localization),
        shaped_file("assets/l10n/app_en.arb", "shared/app_en.arb.j2", shape, state, wants_localization),
        shaped_file("assets/l10n/app_hi.arb", "shared/app_hi.arb.j2", shape, state, wants_localization),
        shaped_file(".env.example", "shared/env.example.j2", shape, state, wants_env),
    ]


_HOME = "lib/features/home"

_STATE_HOLDERS: dict[StateManagement, list[tuple[str, str]]] = {
    StateManagement.PROVIDER: [
        (f"{_HOME}/presentation/providers/home_provider.dart", "state/provider/home_state_holder.dart.j2"),
    ],
    StateManagement.RIVERPOD: [
        (f"{_HOME}/presentation/providers/home_notifier.dart", "state/riverpod/home_state_holder.dart.j2"),
    ],
    StateManagement.BLOC: [
        (f"{_HOME}/presentation/bloc/home_bloc.dart", "state/bloc/home_bloc.dart.j2"),
        (f"{_HOME}/presentation/bloc/home_event.dart", "state/bloc/home_event.dart.j2"),
        (f"{_HOME}/presentation/bloc/home_state.dart", "state/bloc/home_state.dart.j2"),
    ],
}

_HOLDER_TESTS: dict[StateManagement, str] = {
    StateManagement.PROVIDER: "test/features/home/home_provider_test.dart",
    StateManagement.RIVERPOD: "test/features/home/home_notifier_test.dart",
    StateManagement.BLOC: "test/features/home/home_bloc_test.dart",
}


def home_feature_files(shape: Shape, state: StateManagement) -> list[TemplateFile]:
    """The root widget and the ``home`` feature wired through *state*."""
    files = [
        shaped_file("lib/app/app.dart", f"state/{state.value}/app.dart.j2", shape, state),
        shaped_file(f"{_HOME}/domain/entities/home_item.dart", "shared/home_item.dart.j2", shape, state),
        shaped_file(
            f"{_HOME}/data/repositories/home_repository.dart",
            "shared/home_repository.dart.j2", shape, state,
        ),
    ]
    files.extend(shaped_file(path, template, shape, state) for path, template in _STATE_HOLDERS[state])
    files.append(
        shaped_file(f"{_HOME}/presentation/pages/home_page.dart", f"state/{state.value}/home_page.dart.j2", shape, state)
    )
    files.append(
        shaped_file(
            f"{_HOME}/presentation/widgets/home_item_tile.dart",
            "shared/home_item_tile.dart.j2", shape, state,
        )
    )
    return files


def unit_test_files(shape: Shape, state: StateManagement) -> list[TemplateFile]:
    """Widget, state-holder and validator tests, gated on ``include_tests``."""
    return [
        shaped_file("test/widget_test.dart", f"state/{state.value}/widget_test.dart.j2", shape, state, wants_tests),
        shaped_file(_HOLDER_TESTS[state], f"state/{state.value}/home_state_holder_test.dart.j2", shape, state, wants_tests),
        shaped_file("test/core/utils/validators_test.dart", "shared/validators_test.dart.j2", shape, state, wants_tests),
    ]


def common_files(shape: Shape, state: StateManagement) -> list[TemplateFile]:
    """Every shared file for a shape bundle, entry point excluded."""
    return [
        *project_files(shape, state),
        *core_files(shape, state),
        *home_feature_files(shape, state),
        *asset_files(shape, state),
        *unit_test_files(shape, state),
    ]
