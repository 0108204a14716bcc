"""Tests for pub dependency resolution.

Covers:
- State-management packages per idiom
- Flag-driven packages (env, api, localization, hive)
- Shape-specific packages (web, desktop, universal)
- Dev dependencies and merge semantics
"""

from __future__ import annotations

import pytest

from flutter_blueprint.config import StateManagement
from flutter_blueprint.scaffolder.bundle import Shape
from flutter_blueprint.scaffolder.dependencies import (
    PUB_VERSIONS,
    merge_dependencies,
    shape_dependencies,
    shape_dev_dependencies,
    state_dependencies,
)


pytestmark = pytest.mark.unit


class TestStateDependencies:
    @pytest.mark.parametrize(
        ("state", "package"),
        [
            (StateManagement.PROVIDER, "provider"),
            (StateManagement.RIVERPOD, "flutter_riverpod"),
            (StateManagement.BLOC, "flutter_bloc"),
        ],
    )
    def test_state_package_present(self, state: StateManagement, package: str) -> None:
        deps = state_dependencies(state)
        assert deps[package] == PUB_VERSIONS[package]
        assert "equatable" in deps


class TestShapeDependencies:
    def test_defaults(self, mobile_config) -> None:
        deps = shape_dependencies(Shape.MOBILE, StateManagement.PROVIDER, mobile_config)
        for name in ("provider", "go_router", "shared_preferences", "flutter_secure_storage",
                     "flutter_dotenv", "dio", "connectivity_plus", "pretty_dio_logger"):
            assert name in deps
        assert "intl" not in deps
        assert "hive" not in deps

    def test_flags_remove_packages(self, make_config) -> None:
        config = make_config(include_env=False, include_api=False)
        deps = shape_dependencies(Shape.MOBILE, StateManagement.PROVIDER, config)
        assert "flutter_dotenv" not in deps
        assert "dio" not in deps

    def test_flags_add_packages(self, make_config) -> None:
        config = make_config(include_localization=True, include_hive=True)
        deps = shape_dependencies(Shape.MOBILE, StateManagement.BLOC, config)
        assert {"intl", "hive", "hive_flutter", "path_provider"} <= set(deps)

    def test_web_and_desktop(self, web_config, desktop_config) -> None:
        web = shape_dependencies(Shape.WEB, StateManagement.BLOC, web_config)
        assert "url_strategy" in web
        assert "flutter_secure_storage" not in web

        desktop = shape_dependencies(Shape.DESKTOP, StateManagement.BLOC, desktop_config)
        assert {"window_manager", "path_provider"} <= set(desktop)

    def test_universal_follows_platforms(self, universal_config, full_config) -> None:
        pair = shape_dependencies(Shape.UNIVERSAL, StateManagement.RIVERPOD, universal_config)
        assert "flutter_screenutil" in pair
        assert "url_strategy" in pair
        assert "window_manager" not in pair

        every = shape_dependencies(Shape.UNIVERSAL, StateManagement.BLOC, full_config)
        assert {"url_strategy", "window_manager"} <= set(every)

    def test_constraints_non_empty(self, full_config) -> None:
        deps = shape_dependencies(Shape.UNIVERSAL, StateManagement.BLOC, full_config)
        assert all(constraint for constraint in deps.values())


class TestDevDependencies:
    def test_riverpod_tooling_on_mobile_only(self, mobile_config) -> None:
        mobile = shape_dev_dependencies(Shape.MOBILE, StateManagement.RIVERPOD, mobile_config)
        assert "riverpod_generator" in mobile
        web = shape_dev_dependencies(Shape.WEB, StateManagement.RIVERPOD, mobile_config)
        assert "riverpod_generator" not in web

    def test_bloc_test_with_tests(self, make_config) -> None:
        deps = shape_dev_dependencies(Shape.MOBILE, StateManagement.BLOC, make_config())
        assert {"flutter_lints", "mocktail", "bloc_test"} <= set(deps)

    def test_no_test_packages_without_tests(self, make_config) -> None:
        deps = shape_dev_dependencies(
            Shape.MOBILE, StateManagement.BLOC, make_config(include_tests=False)
        )
        assert "mocktail" not in deps
        assert "bloc_test" not in deps


class TestMergeDependencies:
    def test_later_constraint_wins(self) -> None:
        merged = merge_dependencies({"intl": "^0.19.0", "dio": "^5.0.0"}, {"intl": "^0.20.2"})
        assert merged == {"intl": "^0.20.2", "dio": "^5.0.0"}

    def test_empty(self) -> None:
        assert merge_dependencies() == {}
