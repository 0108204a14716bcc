"""Clean-architecture feature modules.

``build_feature_bundle`` emits one feature under ``lib/features/<name>/``
split into domain, data and presentation layers.  The presentation layer
follows the state idiom of the project the feature is added to.
"""

from __future__ import annotations

from typing import Any

from flutter_blueprint.config import BlueprintConfig, ConfigurationError, StateManagement
from flutter_blueprint.utils import pascal_case, title_case, validate_package_name

from .bundle import TemplateBundle, TemplateFile
from .shared import effective_state, shape_for, shaped, wants_api

_HOLDERS: dict[StateManagement, tuple[str, str]] = {
    StateManagement.PROVIDER: ("presentation/providers/{name}_provider.dart", "features/provider.dart.j2"),
    StateManagement.RIVERPOD: ("presentation/providers/{name}_notifier.dart", "features/notifier.dart.j2"),
    StateManagement.BLOC: ("presentation/bloc/{name}_bloc.dart", "features/bloc.dart.j2"),
}


def feature_root(name: str) -> str:
    return f"lib/features/{name}"


def build_feature_bundle(
    name: str,
    config: BlueprintConfig,
    state: StateManagement | None = None,
) -> TemplateBundle:
    """Bundle for the feature *name*.

    Args:
        name: Feature name; must be a valid Dart package-style identifier.
        config: Project config the feature is added to.
        state: State idiom for the presentation layer.  Defaults to the
            idiom the project's shape actually emits.

    Raises:
        ConfigurationError: If *name* is not a valid identifier.
    """
    try:
        validate_package_name(name, field_name="Feature name")
    except ValueError as exc:
        raise ConfigurationError(str(exc)) from exc

    shape = shape_for(config)
    if state is None:
        state = effective_state(shape, config.state_management)

    values: dict[str, Any] = {
        "feature": name,
        "feature_class": pascal_case(name),
        "feature_title": title_case(name),
    }

    def file(relative: str, template: str, when=None) -> TemplateFile:
        return TemplateFile(
            path=f"{feature_root(name)}/{relative.format(name=name)}",
            build=shaped(template, shape, state, context=lambda _config: values),
            should_generate=when,
        )

    holder_path, holder_template = _HOLDERS[state]
    files = (
        file("domain/entities/{name}_entity.dart", "features/entity.dart.j2"),
        file("domain/repositories/{name}_repository.dart", "features/repository.dart.j2"),
        file("data/models/{name}_model.dart", "features/model.dart.j2"),
        file("data/datasources/{name}_remote_data_source.dart", "features/remote_data_source.dart.j2", wants_api),
        file("data/repositories/{name}_repository_impl.dart", "features/repository_impl.dart.j2"),
        file(holder_path, holder_template),
        file("presentation/pages/{name}_page.dart", "features/page.dart.j2"),
    )
    return TemplateBundle(files=files, required_features=(name,))


def build_feature_bundles(config: BlueprintConfig, names: list[str]) -> list[TemplateBundle]:
    """One bundle per name, skipping ``home`` which every shape already ships."""
    return [build_feature_bundle(name, config) for name in names if name != "home"]
