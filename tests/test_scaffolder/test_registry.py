"""Tests for the bundle-builder registry.

Covers:
- Exhaustive default table
- Completeness check on construction
- Shape selection (single platform vs universal)
- Template names for delegating shapes
"""

from __future__ import annotations

from itertools import product

import pytest

from flutter_blueprint.config import ConfigurationError, StateManagement
from flutter_blueprint.scaffolder import desktop, mobile, web
from flutter_blueprint.scaffolder.bundle import Shape, TemplateBundle
from flutter_blueprint.scaffolder.registry import DEFAULT_BUILDERS, TemplateRegistry, default_registry
from flutter_blueprint.scaffolder.shared import effective_state, shape_for
from flutter_blueprint.scaffolder.universal import build_universal_bundle


pytestmark = pytest.mark.unit


def _empty_builder(config):
    return TemplateBundle()


class TestDefaultRegistry:
    def test_every_pair_registered(self) -> None:
        assert set(DEFAULT_BUILDERS) == set(product(Shape, StateManagement))
        assert len(default_registry().names()) == 12

    def test_cached(self) -> None:
        assert default_registry() is default_registry()

    def test_names_sorted(self) -> None:
        names = default_registry().names()
        assert names == sorted(names)
        assert "universal/bloc" in names


class TestCompleteness:
    def test_incomplete_table_rejected(self) -> None:
        builders = dict(DEFAULT_BUILDERS)
        del builders[(Shape.DESKTOP, StateManagement.RIVERPOD)]
        with pytest.raises(ConfigurationError, match="desktop/riverpod"):
            TemplateRegistry(builders, require_complete=True)

    def test_incomplete_table_allowed_by_default(self) -> None:
        registry = TemplateRegistry({(Shape.MOBILE, StateManagement.BLOC): _empty_builder})
        assert registry.names() == ["mobile/bloc"]

    def test_missing_builder_raises_on_get(self) -> None:
        with pytest.raises(ConfigurationError, match="web/provider"):
            TemplateRegistry().get(Shape.WEB, StateManagement.PROVIDER)

    def test_register_overrides(self) -> None:
        registry = TemplateRegistry(DEFAULT_BUILDERS)
        registry.register(Shape.MOBILE, StateManagement.PROVIDER, _empty_builder)
        assert registry.get(Shape.MOBILE, StateManagement.PROVIDER) is _empty_builder


class TestSelection:
    def test_single_platform_shapes(self, mobile_config, web_config, desktop_config) -> None:
        assert shape_for(mobile_config) is Shape.MOBILE
        assert shape_for(web_config) is Shape.WEB
        assert shape_for(desktop_config) is Shape.DESKTOP

    def test_multi_platform_is_universal(self, universal_config, full_config) -> None:
        assert shape_for(universal_config) is Shape.UNIVERSAL
        assert shape_for(full_config) is Shape.UNIVERSAL

    def test_select_for(self, mobile_config, web_config, universal_config, make_config) -> None:
        registry = default_registry()
        assert registry.select_for(mobile_config) is mobile.build_provider_bundle
        assert registry.select_for(web_config) is web.build_bloc_bundle
        assert registry.select_for(universal_config) is build_universal_bundle

        config = make_config(platforms="desktop", state_management=StateManagement.BLOC)
        assert registry.select_for(config) is desktop.build_bloc_bundle

    def test_effective_state(self) -> None:
        assert effective_state(Shape.WEB, StateManagement.RIVERPOD) is StateManagement.BLOC
        assert effective_state(Shape.DESKTOP, StateManagement.PROVIDER) is StateManagement.BLOC
        assert effective_state(Shape.MOBILE, StateManagement.RIVERPOD) is StateManagement.RIVERPOD
        assert effective_state(Shape.UNIVERSAL, StateManagement.PROVIDER) is StateManagement.PROVIDER

    def test_template_names(self, mobile_config, web_config, desktop_config, universal_config) -> None:
        assert TemplateRegistry.template_name(mobile_config) == "mobile/provider"
        assert TemplateRegistry.template_name(web_config) == "web/bloc"
        assert TemplateRegistry.template_name(desktop_config) == "desktop/bloc"
        assert TemplateRegistry.template_name(universal_config) == "universal/riverpod"

    def test_build(self, web_config) -> None:
        bundle = default_registry().build(web_config)
        assert "web/index.html" in bundle.paths
