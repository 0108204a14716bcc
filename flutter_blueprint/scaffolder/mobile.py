"""Mobile (Android/iOS) bundle builders.

Three independent variants, one per state-management idiom.  They share the
core files from :mod:`.shared` and differ in the root widget, the ``home``
feature's state holder, and its tests.
"""

from __future__ import annotations

from flutter_blueprint.config import BlueprintConfig, StateManagement

from .bundle import Shape, TemplateBundle
from .dependencies import shape_dependencies, shape_dev_dependencies
from .shared import common_files, shaped_file


def _mobile_bundle(config: BlueprintConfig, state: StateManagement) -> TemplateBundle:
    files = [
        shaped_file("lib/main.dart", "shared/main.dart.j2", Shape.MOBILE, state),
        *common_files(Shape.MOBILE, state),
    ]
    return TemplateBundle(
        files=tuple(files),
        additional_dependencies=shape_dependencies(Shape.MOBILE, state, config),
        additional_dev_dependencies=shape_dev_dependencies(Shape.MOBILE, state, config),
        required_features=("home",),
    )


def build_provider_bundle(config: BlueprintConfig) -> TemplateBundle:
    """Mobile app using ``ChangeNotifier`` + ``ChangeNotifierProvider``."""
    return _mobile_bundle(config, StateManagement.PROVIDER)


def build_riverpod_bundle(config: BlueprintConfig) -> TemplateBundle:
    """Mobile app using ``Notifier`` + ``NotifierProvider`` under a ``ProviderScope``."""
    return _mobile_bundle(config, StateManagement.RIVERPOD)


def build_bloc_bundle(config: BlueprintConfig) -> TemplateBundle:
    """Mobile app using events, states and a ``Bloc`` per feature."""
    return _mobile_bundle(config, StateManagement.BLOC)


MOBILE_BUILDERS = {
    StateManagement.PROVIDER: build_provider_bundle,
    StateManagement.RIVERPOD: build_riverpod_bundle,
    StateManagement.BLOC: build_bloc_bundle,
}


def build_mobile_bundle(config: BlueprintConfig) -> TemplateBundle:
    """Mobile bundle for ``config.state_management``."""
    return MOBILE_BUILDERS[config.state_management](config)
