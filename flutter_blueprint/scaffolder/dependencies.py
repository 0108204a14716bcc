"""Pub dependency resolution for generated projects.

Each shape bundle declares the packages its templates import.  The maps
returned here feed both ``TemplateBundle.additional_dependencies`` and the
rendered ``pubspec.yaml``, so the manifest and the bundle metadata can never
disagree.
"""

from __future__ import annotations

from collections.abc import Mapping

from flutter_blueprint.config import BlueprintConfig, StateManagement, TargetPlatform

from .bundle import Shape


# ---------------------------------------------------------------------------
# Version constraints
# ---------------------------------------------------------------------------

PUB_VERSIONS: dict[str, str] = {
    # State management
    "provider": "^6.1.2",
    "flutter_riverpod": "^2.6.1",
    "riverpod_annotation": "^2.6.1",
    "flutter_bloc": "^8.1.6",
    "bloc": "^8.1.4",
    "equatable": "^2.0.5",
    # Routing
    "go_router": "^14.6.2",
    # Storage
    "shared_preferences": "^2.2.3",
    "flutter_secure_storage": "^9.2.2",
    "hive": "^2.2.3",
    "hive_flutter": "^1.1.0",
    "path_provider": "^2.1.5",
    # Optional features
    "flutter_dotenv": "^5.1.0",
    "dio": "^5.5.0",
    "connectivity_plus": "^6.0.5",
    "pretty_dio_logger": "^1.4.0",
    "intl": "^0.20.2",
    # Platform specific
    "url_strategy": "^0.3.0",
    "window_manager": "^0.4.3",
    "flutter_screenutil": "^5.9.3",
    # Dev
    "flutter_lints": "^5.0.0",
    "mocktail": "^1.0.3",
    "bloc_test": "^9.1.7",
    "build_runner": "^2.4.15",
    "riverpod_generator": "^2.6.5",
    "riverpod_lint": "^2.6.5",
    "custom_lint": "^0.7.5",
}

_STATE_PACKAGES: dict[StateManagement, tuple[str, ...]] = {
    StateManagement.PROVIDER: ("provider", "equatable"),
    StateManagement.RIVERPOD: ("flutter_riverpod", "riverpod_annotation", "equatable"),
    StateManagement.BLOC: ("flutter_bloc", "bloc", "equatable"),
}


def _pinned(*names: str) -> dict[str, str]:
    return {name: PUB_VERSIONS[name] for name in names}


# ---------------------------------------------------------------------------
# Resolution
# ---------------------------------------------------------------------------


def state_dependencies(state: StateManagement) -> dict[str, str]:
    """Packages required by a state-management idiom."""
    return _pinned(*_STATE_PACKAGES[state])


def shape_dependencies(
    shape: Shape, state: StateManagement, config: BlueprintConfig
) -> dict[str, str]:
    """Runtime dependencies of a shape bundle wired for *state*.

    *state* is the idiom the bundle actually emits, which differs from
    ``config.state_management`` for shapes that delegate to another variant.
    """
    deps = state_dependencies(state)
    deps.update(_pinned("go_router", "shared_preferences"))
    if shape in (Shape.MOBILE, Shape.UNIVERSAL):
        deps.update(_pinned("flutter_secure_storage"))

    if config.include_localization:
        deps.update(_pinned("intl"))
    if config.include_env:
        deps.update(_pinned("flutter_dotenv"))
    if config.include_api:
        deps.update(_pinned("dio", "connectivity_plus", "pretty_dio_logger"))
    if config.include_hive:
        deps.update(_pinned("hive", "hive_flutter", "path_provider"))

    if shape is Shape.WEB:
        deps.update(_pinned("url_strategy"))
    elif shape is Shape.DESKTOP:
        deps.update(_pinned("window_manager", "path_provider"))
    elif shape is Shape.UNIVERSAL:
        deps.update(_pinned("flutter_screenutil"))
        if config.has_platform(TargetPlatform.WEB):
            deps.update(_pinned("url_strategy"))
        if config.has_platform(TargetPlatform.DESKTOP):
            deps.update(_pinned("window_manager", "path_provider"))
    return deps


def shape_dev_dependencies(
    shape: Shape, state: StateManagement, config: BlueprintConfig
) -> dict[str, str]:
    """Dev dependencies of a shape bundle wired for *state*."""
    deps = _pinned("flutter_lints")
    if state is StateManagement.RIVERPOD and shape in (Shape.MOBILE, Shape.UNIVERSAL):
        deps.update(_pinned("build_runner", "riverpod_generator", "riverpod_lint", "custom_lint"))
    if config.include_tests:
        deps.update(_pinned("mocktail"))
        if state is StateManagement.BLOC:
            deps.update(_pinned("bloc_test"))
    return deps


def merge_dependencies(*maps: Mapping[str, str]) -> dict[str, str]:
    """Merge dependency maps; a later constraint for the same name wins.

    No range intersection is attempted.
    """
    merged: dict[str, str] = {}
    for deps in maps:
        merged.update(deps)
    return merged
