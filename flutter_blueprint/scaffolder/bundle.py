"""Template files, bundles, and emission.

A ``TemplateFile`` binds a relative output path to a content builder
``(BlueprintConfig) -> str`` and an optional inclusion predicate.  A
``TemplateBundle`` is an ordered collection of template files plus the pub
dependencies and feature modules the bundle needs.  ``render_bundle`` walks a
bundle in order and materialises it into a ``path -> content`` map.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any

from flutter_blueprint.config import BlueprintConfig

from .templates import get_renderer, template_context

ContentBuilder = Callable[[BlueprintConfig], str]
GenerationPredicate = Callable[[BlueprintConfig], bool]
ContextBuilder = Callable[[BlueprintConfig], dict[str, Any]]


class Shape(str, Enum):
    """Project shape a bundle builder targets."""
    MOBILE = "mobile"
    WEB = "web"
    DESKTOP = "desktop"
    UNIVERSAL = "universal"


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


class TemplateBuildError(Exception):
    """A single template failed to evaluate its predicate or content."""

    def __init__(self, path: str, cause: Exception) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"{path}: {type(cause).__name__}: {cause}")


# ---------------------------------------------------------------------------
# TemplateFile / TemplateBundle
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class TemplateFile:
    """One generated file: a target path, a builder, and an optional predicate."""

    path: str
    build: ContentBuilder
    should_generate: GenerationPredicate | None = None

    def should_include(self, config: BlueprintConfig) -> bool:
        return self.should_generate is None or bool(self.should_generate(config))

    def render(self, config: BlueprintConfig) -> str:
        return self.build(config)


@dataclass(frozen=True)
class TemplateBundle:
    """Ordered template files plus dependency and feature metadata.

    ``additional_dependencies`` and ``additional_dev_dependencies`` map pub
    package names to version constraints.  ``required_features`` names the
    feature modules that must be scaffolded alongside the bundle.
    """

    files: tuple[TemplateFile, ...] = ()
    additional_dependencies: Mapping[str, str] = field(default_factory=dict)
    additional_dev_dependencies: Mapping[str, str] = field(default_factory=dict)
    required_features: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "files", tuple(self.files))
        object.__setattr__(
            self, "additional_dependencies",
            MappingProxyType(dict(self.additional_dependencies)),
        )
        object.__setattr__(
            self, "additional_dev_dependencies",
            MappingProxyType(dict(self.additional_dev_dependencies)),
        )
        object.__setattr__(self, "required_features", tuple(self.required_features))

    @property
    def paths(self) -> list[str]:
        """Every declared path, in bundle order, regardless of predicates."""
        return [f.path for f in self.files]

    @classmethod
    def from_files(
        cls,
        files: Mapping[str, str],
        *,
        additional_dependencies: Mapping[str, str] | None = None,
        additional_dev_dependencies: Mapping[str, str] | None = None,
        required_features: Iterable[str] = (),
    ) -> "TemplateBundle":
        """Wrap an already-materialised ``path -> content`` map as a bundle."""
        return cls(
            files=tuple(TemplateFile(path=p, build=literal(c)) for p, c in files.items()),
            additional_dependencies=additional_dependencies or {},
            additional_dev_dependencies=additional_dev_dependencies or {},
            required_features=tuple(required_features),
        )


# ---------------------------------------------------------------------------
# Builder helpers
# ---------------------------------------------------------------------------


def from_template(name: str, context: ContextBuilder | None = None) -> ContentBuilder:
    """Return a builder that renders the Jinja2 template *name*.

    Args:
        name: Template path relative to the template directory.
        context: Optional callable adding config-dependent variables on top
            of the base template context.
    """
    def build(config: BlueprintConfig) -> str:
        extra = context(config) if context is not None else {}
        return get_renderer().render(name, template_context(config, **extra))

    return build


def literal(content: str) -> ContentBuilder:
    """Return a builder that ignores the config and yields *content*."""
    def build(_config: BlueprintConfig) -> str:
        return content

    return build


# ---------------------------------------------------------------------------
# Emission
# ---------------------------------------------------------------------------


@dataclass
class RenderedFiles:
    """Result of materialising one or more bundles."""

    files: dict[str, str] = field(default_factory=dict)
    errors: list[TemplateBuildError] = field(default_factory=list)
    collisions: list[str] = field(default_factory=list)


def render_bundle(
    bundle: TemplateBundle,
    config: BlueprintConfig,
    *,
    strict: bool = False,
    into: RenderedFiles | None = None,
) -> RenderedFiles:
    """Materialise *bundle* for *config*.

    Files are evaluated in bundle order: predicate first, then builder.  A
    path written twice keeps the last content and is recorded in
    ``collisions``.  A failing predicate or builder is recorded in
    ``errors`` and the remaining files still render, unless *strict* is set,
    in which case the first ``TemplateBuildError`` is raised.

    Args:
        bundle: The bundle to render.
        config: Generation config passed to every predicate and builder.
        strict: Raise on the first failing file instead of collecting.
        into: Existing result to append to, so several bundles can be
            layered into one map.
    """
    result = into if into is not None else RenderedFiles()

    for template_file in bundle.files:
        try:
            if not template_file.should_include(config):
                continue
            content = template_file.render(config)
        except Exception as exc:
            error = TemplateBuildError(template_file.path, exc)
            if strict:
                raise error from exc
            result.errors.append(error)
            continue

        if template_file.path in result.files:
            result.collisions.append(template_file.path)
        result.files[template_file.path] = content

    return result
