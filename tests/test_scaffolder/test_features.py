"""Tests for clean-architecture feature modules."""

from __future__ import annotations

import pytest

from flutter_blueprint.config import ConfigurationError, StateManagement
from flutter_blueprint.scaffolder.bundle import render_bundle
from flutter_blueprint.scaffolder.features import (
    build_feature_bundle,
    build_feature_bundles,
    feature_root,
)


pytestmark = pytest.mark.unit


class TestFeatureBundle:
    def test_layers(self, mobile_config) -> None:
        files = render_bundle(build_feature_bundle("cart", mobile_config), mobile_config).files
        root = feature_root("cart")
        for relative in (
            "domain/entities/cart_entity.dart",
            "domain/repositories/cart_repository.dart",
            "data/models/cart_model.dart",
            "data/datasources/cart_remote_data_source.dart",
            "data/repositories/cart_repository_impl.dart",
            "presentation/providers/cart_provider.dart",
            "presentation/pages/cart_page.dart",
        ):
            assert f"{root}/{relative}" in files, relative

    def test_class_names(self, mobile_config) -> None:
        files = render_bundle(build_feature_bundle("order_history", mobile_config), mobile_config).files
        entity = files["lib/features/order_history/domain/entities/order_history_entity.dart"]
        assert "class OrderHistoryEntity" in entity

    def test_remote_source_requires_api(self, make_config) -> None:
        config = make_config(include_api=False)
        files = render_bundle(build_feature_bundle("cart", config), config).files
        assert not any("remote_data_source" in path for path in files)
        assert all(content.strip() for content in files.values())

    @pytest.mark.parametrize(
        ("state", "holder"),
        [
            (StateManagement.PROVIDER, "presentation/providers/cart_provider.dart"),
            (StateManagement.RIVERPOD, "presentation/providers/cart_notifier.dart"),
            (StateManagement.BLOC, "presentation/bloc/cart_bloc.dart"),
        ],
    )
    def test_holder_follows_state(self, make_config, state, holder) -> None:
        config = make_config(state_management=state)
        assert f"lib/features/cart/{holder}" in build_feature_bundle("cart", config).paths

    def test_delegating_shape_uses_bloc(self, web_config) -> None:
        paths = build_feature_bundle("cart", web_config).paths
        assert "lib/features/cart/presentation/bloc/cart_bloc.dart" in paths

    def test_explicit_state_wins(self, mobile_config) -> None:
        paths = build_feature_bundle("cart", mobile_config, StateManagement.RIVERPOD).paths
        assert "lib/features/cart/presentation/providers/cart_notifier.dart" in paths

    def test_required_features(self, mobile_config) -> None:
        assert build_feature_bundle("cart", mobile_config).required_features == ("cart",)

    @pytest.mark.parametrize("name", ["", "Cart", "my-cart", "class"])
    def test_invalid_name(self, mobile_config, name: str) -> None:
        with pytest.raises(ConfigurationError):
            build_feature_bundle(name, mobile_config)


class TestFeatureBundles:
    def test_home_skipped(self, mobile_config) -> None:
        bundles = build_feature_bundles(mobile_config, ["home", "cart", "search"])
        assert [b.required_features for b in bundles] == [("cart",), ("search",)]
