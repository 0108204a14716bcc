"""Tests for template files, bundles and emission.

Covers:
- TemplateFile inclusion predicates
- TemplateBundle immutability and from_files
- render_bundle ordering, collisions, error isolation and strict mode
"""

from __future__ import annotations

import pytest

from flutter_blueprint.config import BlueprintConfig
from flutter_blueprint.scaffolder.bundle import (
    RenderedFiles,
    TemplateBuildError,
    TemplateBundle,
    TemplateFile,
    from_template,
    literal,
    render_bundle,
)


pytestmark = pytest.mark.unit


def _boom(config: BlueprintConfig) -> str:
    raise RuntimeError("builder exploded")


# ---------------------------------------------------------------------------
# TemplateFile
# ---------------------------------------------------------------------------


class TestTemplateFile:
    def test_included_without_predicate(self, mobile_config: BlueprintConfig) -> None:
        assert TemplateFile("a.txt", literal("a")).should_include(mobile_config)

    def test_predicate_controls_inclusion(self, make_config) -> None:
        tf = TemplateFile("env", literal("x"), should_generate=lambda c: c.include_env)
        assert tf.should_include(make_config(include_env=True))
        assert not tf.should_include(make_config(include_env=False))

    def test_render_passes_config(self, mobile_config: BlueprintConfig) -> None:
        tf = TemplateFile("name.txt", lambda c: c.app_name)
        assert tf.render(mobile_config) == "sample_app"

    def test_from_template_renders_jinja(self, mobile_config: BlueprintConfig) -> None:
        build = from_template("shared/app_constants.dart.j2")
        assert "static const String appName = 'Sample App';" in build(mobile_config)


# ---------------------------------------------------------------------------
# TemplateBundle
# ---------------------------------------------------------------------------


class TestTemplateBundle:
    def test_defaults_are_empty(self) -> None:
        bundle = TemplateBundle()
        assert bundle.files == ()
        assert dict(bundle.additional_dependencies) == {}
        assert bundle.required_features == ()

    def test_dependency_maps_are_read_only(self) -> None:
        deps = {"dio": "^5.0.0"}
        bundle = TemplateBundle(additional_dependencies=deps)
        deps["http"] = "^1.0.0"
        assert "http" not in bundle.additional_dependencies
        with pytest.raises(TypeError):
            bundle.additional_dependencies["http"] = "^1.0.0"  # type: ignore[index]

    def test_from_files_keeps_order_and_content(self, mobile_config: BlueprintConfig) -> None:
        bundle = TemplateBundle.from_files(
            {"b.txt": "B", "a.txt": "A"}, required_features=["home"]
        )
        assert bundle.paths == ["b.txt", "a.txt"]
        assert bundle.required_features == ("home",)
        assert render_bundle(bundle, mobile_config).files == {"b.txt": "B", "a.txt": "A"}


# ---------------------------------------------------------------------------
# render_bundle
# ---------------------------------------------------------------------------


class TestRenderBundle:
    def test_skips_excluded_files(self, make_config) -> None:
        bundle = TemplateBundle(files=(
            TemplateFile("always.txt", literal("1")),
            TemplateFile("hive.txt", literal("2"), should_generate=lambda c: c.include_hive),
        ))
        rendered = render_bundle(bundle, make_config(include_hive=False))
        assert list(rendered.files) == ["always.txt"]

    def test_builder_not_called_when_excluded(self, make_config) -> None:
        bundle = TemplateBundle(files=(
            TemplateFile("never.txt", _boom, should_generate=lambda c: False),
        ))
        rendered = render_bundle(bundle, make_config())
        assert rendered.files == {}
        assert rendered.errors == []

    def test_last_write_wins_and_collision_recorded(self, mobile_config: BlueprintConfig) -> None:
        bundle = TemplateBundle(files=(
            TemplateFile("dup.txt", literal("first")),
            TemplateFile("dup.txt", literal("second")),
        ))
        rendered = render_bundle(bundle, mobile_config)
        assert rendered.files == {"dup.txt": "second"}
        assert rendered.collisions == ["dup.txt"]

    def test_failing_builder_is_isolated(self, mobile_config: BlueprintConfig) -> None:
        bundle = TemplateBundle(files=(
            TemplateFile("ok_1.txt", literal("1")),
            TemplateFile("bad.txt", _boom),
            TemplateFile("ok_2.txt", literal("2")),
        ))
        rendered = render_bundle(bundle, mobile_config)
        assert set(rendered.files) == {"ok_1.txt", "ok_2.txt"}
        assert len(rendered.errors) == 1
        error = rendered.errors[0]
        assert error.path == "bad.txt"
        assert isinstance(error.cause, RuntimeError)

    def test_failing_predicate_is_isolated(self, mobile_config: BlueprintConfig) -> None:
        def bad_predicate(config: BlueprintConfig) -> bool:
            raise KeyError("flag")

        bundle = TemplateBundle(files=(
            TemplateFile("gated.txt", literal("x"), should_generate=bad_predicate),
            TemplateFile("ok.txt", literal("y")),
        ))
        rendered = render_bundle(bundle, mobile_config)
        assert list(rendered.files) == ["ok.txt"]
        assert rendered.errors[0].path == "gated.txt"

    def test_strict_raises_first_error(self, mobile_config: BlueprintConfig) -> None:
        bundle = TemplateBundle(files=(
            TemplateFile("bad.txt", _boom),
            TemplateFile("ok.txt", literal("y")),
        ))
        with pytest.raises(TemplateBuildError, match="bad.txt: RuntimeError: builder exploded"):
            render_bundle(bundle, mobile_config, strict=True)

    def test_into_accumulates_across_bundles(self, mobile_config: BlueprintConfig) -> None:
        result = RenderedFiles()
        render_bundle(TemplateBundle.from_files({"a.txt": "1"}), mobile_config, into=result)
        render_bundle(TemplateBundle.from_files({"a.txt": "2", "b.txt": "3"}), mobile_config, into=result)
        assert result.files == {"a.txt": "2", "b.txt": "3"}
        assert result.collisions == ["a.txt"]
