"""Shared pytest fixtures for the Flutter Blueprint test suite.

Provides reusable fixtures for:
- Temporary output directories
- Configs for each project shape
- A config factory for flag/platform permutations
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from flutter_blueprint.config import BlueprintConfig, StateManagement, TargetPlatform


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------

@pytest.fixture
def tmp_output_dir(tmp_path: Path) -> Path:
    """Temporary parent directory for generated projects (auto-cleanup)."""
    output_dir = tmp_path / "output"
    output_dir.mkdir()
    yield output_dir


# ---------------------------------------------------------------------------
# Configs
# ---------------------------------------------------------------------------

@pytest.fixture
def make_config() -> Callable[..., BlueprintConfig]:
    """Factory building a ``BlueprintConfig`` with overridable defaults."""

    def _make(**overrides: Any) -> BlueprintConfig:
        values: dict[str, Any] = {"app_name": "sample_app"}
        values.update(overrides)
        return BlueprintConfig(**values)

    return _make


@pytest.fixture
def mobile_config() -> BlueprintConfig:
    """Mobile-only provider project with default feature flags."""
    return BlueprintConfig(app_name="sample_app")


@pytest.fixture
def web_config() -> BlueprintConfig:
    return BlueprintConfig(
        app_name="sample_web",
        platforms=(TargetPlatform.WEB,),
        state_management=StateManagement.PROVIDER,
    )


@pytest.fixture
def desktop_config() -> BlueprintConfig:
    return BlueprintConfig(
        app_name="sample_desktop",
        platforms=(TargetPlatform.DESKTOP,),
        state_management=StateManagement.RIVERPOD,
    )


@pytest.fixture
def universal_config() -> BlueprintConfig:
    """Mobile + web riverpod project (universal shape, no desktop)."""
    return BlueprintConfig(
        app_name="sample_universal",
        platforms=(TargetPlatform.MOBILE, TargetPlatform.WEB),
        state_management=StateManagement.RIVERPOD,
    )


@pytest.fixture
def full_config() -> BlueprintConfig:
    """Every platform and every optional feature enabled."""
    return BlueprintConfig(
        app_name="everything_app",
        platforms="all",
        state_management=StateManagement.BLOC,
        include_localization=True,
        include_hive=True,
    )
