"""Main scaffolding orchestrator.

Takes a ``BlueprintConfig`` and produces the complete file map of a Flutter
starter project: the shape bundle selected from the registry, one module per
feature required by the project template, the CI pipeline, and the
``blueprint.yaml`` manifest.  Generation is pure; writing the map to disk is
a separate async step.  ``add_feature`` extends a written project, reading
its settings back from ``blueprint.yaml``.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

from flutter_blueprint.config import MANIFEST_FILENAME, BlueprintConfig, ConfigurationError
from flutter_blueprint.utils import write_text

from .bundle import RenderedFiles, TemplateBuildError, TemplateBundle, TemplateFile, render_bundle
from .ci import build_ci_bundle
from .dependencies import merge_dependencies
from .features import build_feature_bundle, build_feature_bundles, feature_root
from .library import get_template
from .registry import TemplateRegistry, default_registry


class GenerationError(Exception):
    """Raised when generation or writing cannot complete."""

    def __init__(self, message: str, errors: list["FileError"] | None = None) -> None:
        super().__init__(message)
        self.errors = errors or []


# ---------------------------------------------------------------------------
# Result models
# ---------------------------------------------------------------------------


class FileError(BaseModel):
    """A file whose predicate or builder raised."""

    path: str
    error_type: str
    message: str

    @classmethod
    def from_build_error(cls, error: TemplateBuildError) -> "FileError":
        return cls(
            path=error.path,
            error_type=type(error.cause).__name__,
            message=str(error.cause),
        )


class GenerationResult(BaseModel):
    """Everything produced by one generation run."""

    config: BlueprintConfig
    template_name: str
    files: dict[str, str] = Field(default_factory=dict)
    dependencies: dict[str, str] = Field(default_factory=dict)
    dev_dependencies: dict[str, str] = Field(default_factory=dict)
    required_features: list[str] = Field(default_factory=list)
    errors: list[FileError] = Field(default_factory=list)
    collisions: list[str] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors

    @property
    def file_count(self) -> int:
        return len(self.files)


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------


def manifest_bundle() -> TemplateBundle:
    """Bundle emitting ``blueprint.yaml`` for the config being generated."""
    return TemplateBundle(
        files=(TemplateFile(path=MANIFEST_FILENAME, build=lambda config: config.to_manifest()),)
    )


class ProjectGenerator:
    """Scaffolding orchestrator.

    Bundles are rendered in this order, later files winning on a shared
    path:

    - the shape bundle chosen by the registry (mobile, web, desktop or
      universal)
    - one feature module per required feature of the project template
    - the CI pipeline for ``config.ci_provider``
    - the ``blueprint.yaml`` manifest
    """

    def __init__(self, registry: TemplateRegistry | None = None) -> None:
        self.registry = registry or default_registry()

    # -- Public API --------------------------------------------------------

    def bundles_for(self, config: BlueprintConfig) -> list[TemplateBundle]:
        """Every bundle rendered for *config*, in render order."""
        library = get_template(config.project_template, config)
        return [
            self.registry.build(config),
            *build_feature_bundles(config, list(library.required_features)),
            build_ci_bundle(config),
            manifest_bundle(),
        ]

    def generate(self, config: BlueprintConfig, *, strict: bool = False) -> GenerationResult:
        """Render the complete project for *config*.

        Args:
            config: What to generate.
            strict: Stop at the first failing file instead of recording it
                in ``GenerationResult.errors``.

        Raises:
            GenerationError: In strict mode, when any file fails to render.
        """
        library = get_template(config.project_template, config)
        bundles = self.bundles_for(config)

        rendered = RenderedFiles()
        try:
            for bundle in bundles:
                render_bundle(bundle, config, strict=strict, into=rendered)
        except TemplateBuildError as exc:
            error = FileError.from_build_error(exc)
            raise GenerationError(f"Failed to render {exc.path}: {error.message}", [error]) from exc

        required: list[str] = []
        for bundle in [*bundles, library]:
            for name in bundle.required_features:
                if name not in required:
                    required.append(name)

        return GenerationResult(
            config=config,
            template_name=self.registry.template_name(config),
            files=rendered.files,
            dependencies=merge_dependencies(
                *(b.additional_dependencies for b in bundles),
                library.additional_dependencies,
            ),
            dev_dependencies=merge_dependencies(
                *(b.additional_dev_dependencies for b in bundles),
                library.additional_dev_dependencies,
            ),
            required_features=required,
            errors=[FileError.from_build_error(e) for e in rendered.errors],
            collisions=rendered.collisions,
        )

    async def write(
        self,
        result: GenerationResult,
        output_dir: str | Path,
        *,
        overwrite: bool = False,
    ) -> list[Path]:
        """Write *result* under ``output_dir / app_name``.

        Args:
            result: A generation result.
            output_dir: Parent directory.  A subdirectory named after the app
                is created inside it.
            overwrite: Write into an existing, non-empty project directory.

        Returns:
            Paths of the written files, in sorted path order.

        Raises:
            GenerationError: If the project directory exists and is not
                empty and *overwrite* is false.
        """
        project_root = Path(output_dir) / result.config.app_name
        if not overwrite and project_root.exists() and any(project_root.iterdir()):
            raise GenerationError(f"Directory already exists and is not empty: {project_root}")

        await asyncio.to_thread(project_root.mkdir, parents=True, exist_ok=True)
        return list(
            await asyncio.gather(*[
                write_text(project_root / rel_path, content)
                for rel_path, content in sorted(result.files.items())
            ])
        )

    async def add_feature(
        self,
        project_dir: str | Path,
        name: str,
        *,
        overwrite: bool = False,
    ) -> list[Path]:
        """Scaffold the feature *name* into an already generated project.

        The project's ``blueprint.yaml`` decides the state idiom, platforms
        and flags the feature is rendered for.

        Args:
            project_dir: Root of a project written by :meth:`write`.
            name: Feature name; must be a valid Dart package-style identifier.
            overwrite: Write into an existing, non-empty feature directory.

        Returns:
            Paths of the written files, in sorted path order.

        Raises:
            ConfigurationError: If the manifest is missing or *name* is
                invalid.
            GenerationError: If the feature directory already has files and
                *overwrite* is false, or a feature file fails to render.
        """
        project_root = Path(project_dir)
        manifest = project_root / MANIFEST_FILENAME
        if not manifest.is_file():
            raise ConfigurationError(
                f"No {MANIFEST_FILENAME} found in {project_root}; "
                "run this inside a project generated by flutter-blueprint"
            )
        try:
            config = BlueprintConfig.load(manifest)
        except ValidationError as exc:
            raise ConfigurationError(f"Invalid {manifest}: {exc.errors()[0]['msg']}") from exc
        bundle = build_feature_bundle(name, config)

        feature_dir = project_root / feature_root(name)
        if not overwrite and feature_dir.exists() and any(feature_dir.iterdir()):
            raise GenerationError(f"Feature already exists: {feature_dir}")

        try:
            rendered = render_bundle(bundle, config, strict=True)
        except TemplateBuildError as exc:
            error = FileError.from_build_error(exc)
            raise GenerationError(f"Failed to render {exc.path}: {error.message}", [error]) from exc

        return list(
            await asyncio.gather(*[
                write_text(project_root / rel_path, content)
                for rel_path, content in sorted(rendered.files.items())
            ])
        )


def generate(config: BlueprintConfig) -> dict[str, str]:
    """Return the ``path -> content`` map for *config*."""
    return ProjectGenerator().generate(config).files
