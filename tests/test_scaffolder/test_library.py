"""Tests for the project-template library."""

from __future__ import annotations

import pytest

from flutter_blueprint.config import ProjectTemplate
from flutter_blueprint.scaffolder.library import TEMPLATE_FEATURES, feature_modules, get_template


pytestmark = pytest.mark.unit


class TestGetTemplate:
    @pytest.mark.parametrize("template", list(ProjectTemplate))
    def test_every_template_resolves(self, make_config, template: ProjectTemplate) -> None:
        bundle = get_template(template, make_config(project_template=template))
        assert bundle.files == ()
        assert bundle.required_features
        assert TEMPLATE_FEATURES[template]

    def test_blank_only_needs_home(self, mobile_config) -> None:
        bundle = get_template(ProjectTemplate.BLANK, mobile_config)
        assert bundle.required_features == ("home",)
        assert dict(bundle.additional_dependencies) == {}

    def test_ecommerce(self, mobile_config) -> None:
        bundle = get_template(ProjectTemplate.ECOMMERCE, mobile_config)
        assert "cart" in bundle.required_features
        assert "cached_network_image" in bundle.additional_dependencies

    def test_fitness_tracker_charts(self, mobile_config) -> None:
        bundle = get_template(ProjectTemplate.FITNESS_TRACKER, mobile_config)
        assert {"fl_chart", "table_calendar"} <= set(bundle.additional_dependencies)


class TestFeatureModules:
    def test_blank_has_none(self, mobile_config) -> None:
        assert feature_modules(mobile_config) == []

    def test_chat_app(self, make_config) -> None:
        config = make_config(project_template=ProjectTemplate.CHAT_APP)
        assert feature_modules(config) == [
            "auth", "chats", "messages", "contacts", "media", "notifications",
        ]

    def test_names_are_valid_identifiers(self, make_config) -> None:
        for template in ProjectTemplate:
            for name in feature_modules(make_config(project_template=template)):
                assert name.isidentifier() and name.islower()
