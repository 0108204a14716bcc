"""Bundle-builder registry keyed by ``(Shape, StateManagement)``.

The default registry is built from an exhaustive table: every shape has a
builder for every state idiom, and a gap is reported when the registry is
constructed rather than when a user happens to request the missing pair.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from functools import lru_cache
from itertools import product

from flutter_blueprint.config import BlueprintConfig, ConfigurationError, StateManagement

from . import desktop, mobile, web
from .bundle import Shape, TemplateBundle
from .shared import effective_state, shape_for
from .universal import build_universal_bundle

BundleBuilder = Callable[[BlueprintConfig], TemplateBundle]
BuilderKey = tuple[Shape, StateManagement]


class TemplateRegistry:
    """Catalog of bundle builders.

    Args:
        builders: Initial ``(shape, state) -> builder`` entries.
        require_complete: Raise if any ``Shape x StateManagement`` pair is
            missing from *builders*.
    """

    def __init__(
        self,
        builders: Mapping[BuilderKey, BundleBuilder] | None = None,
        *,
        require_complete: bool = False,
    ) -> None:
        self._builders: dict[BuilderKey, BundleBuilder] = dict(builders or {})
        if require_complete:
            missing = [key for key in product(Shape, StateManagement) if key not in self._builders]
            if missing:
                names = ", ".join(f"{s.value}/{m.value}" for s, m in missing)
                raise ConfigurationError(f"No bundle builder registered for: {names}")

    def register(self, shape: Shape, state: StateManagement, builder: BundleBuilder) -> None:
        self._builders[(shape, state)] = builder

    def get(self, shape: Shape, state: StateManagement) -> BundleBuilder:
        try:
            return self._builders[(shape, state)]
        except KeyError:
            raise ConfigurationError(
                f"No bundle builder registered for {shape.value}/{state.value}"
            ) from None

    def names(self) -> list[str]:
        """Registered keys as ``shape/state`` strings, sorted."""
        return sorted(f"{s.value}/{m.value}" for s, m in self._builders)

    def select_for(self, config: BlueprintConfig) -> BundleBuilder:
        """Builder for *config*: universal when multi-platform, else by shape."""
        return self.get(shape_for(config), config.state_management)

    def build(self, config: BlueprintConfig) -> TemplateBundle:
        return self.select_for(config)(config)

    @staticmethod
    def template_name(config: BlueprintConfig) -> str:
        """``shape/state`` label of the bundle that ships for *config*."""
        shape = shape_for(config)
        state = effective_state(shape, config.state_management)
        return f"{shape.value}/{state.value}"


DEFAULT_BUILDERS: dict[BuilderKey, BundleBuilder] = {
    (Shape.MOBILE, StateManagement.PROVIDER): mobile.build_provider_bundle,
    (Shape.MOBILE, StateManagement.RIVERPOD): mobile.build_riverpod_bundle,
    (Shape.MOBILE, StateManagement.BLOC): mobile.build_bloc_bundle,
    (Shape.WEB, StateManagement.PROVIDER): web.build_provider_bundle,
    (Shape.WEB, StateManagement.RIVERPOD): web.build_riverpod_bundle,
    (Shape.WEB, StateManagement.BLOC): web.build_bloc_bundle,
    (Shape.DESKTOP, StateManagement.PROVIDER): desktop.build_provider_bundle,
    (Shape.DESKTOP, StateManagement.RIVERPOD): desktop.build_riverpod_bundle,
    (Shape.DESKTOP, StateManagement.BLOC): desktop.build_bloc_bundle,
    (Shape.UNIVERSAL, StateManagement.PROVIDER): build_universal_bundle,
    (Shape.UNIVERSAL, StateManagement.RIVERPOD): build_universal_bundle,
    (Shape.UNIVERSAL, StateManagement.BLOC): build_universal_bundle,
}


@lru_cache(maxsize=1)
def default_registry() -> TemplateRegistry:
    return TemplateRegistry(DEFAULT_BUILDERS, require_complete=True)
