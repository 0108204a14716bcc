"""CI/CD pipeline configuration.

One pipeline file per provider.  Every pipeline analyzes the project, runs
the test suite when tests are generated, and builds each requested
platform.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any

from flutter_blueprint.config import BlueprintConfig, CIProvider, TargetPlatform

from .bundle import TemplateBundle, TemplateFile, from_template


@dataclass(frozen=True)
class BuildJob:
    """A platform build step shared by all CI templates."""

    name: str
    label: str
    command: str
    artifact: str
    github_runner: str
    azure_image: str


_BUILD_JOBS: dict[TargetPlatform, tuple[BuildJob, ...]] = {
    TargetPlatform.MOBILE: (
        BuildJob(
            name="android",
            label="Android",
            command="flutter build apk --release",
            artifact="build/app/outputs/flutter-apk/app-release.apk",
            github_runner="ubuntu-latest",
            azure_image="ubuntu-latest",
        ),
        BuildJob(
            name="ios",
            label="iOS",
            command="flutter build ios --release --no-codesign",
            artifact="build/ios/iphoneos",
            github_runner="macos-latest",
            azure_image="macOS-latest",
        ),
    ),
    TargetPlatform.WEB: (
        BuildJob(
            name="web",
            label="Web",
            command="flutter build web --release",
            artifact="build/web",
            github_runner="ubuntu-latest",
            azure_image="ubuntu-latest",
        ),
    ),
    TargetPlatform.DESKTOP: (
        BuildJob(
            name="linux",
            label="Linux",
            command="flutter build linux --release",
            artifact="build/linux/x64/release/bundle",
            github_runner="ubuntu-latest",
            azure_image="ubuntu-latest",
        ),
    ),
}

CI_FILES: dict[CIProvider, tuple[str, str]] = {
    CIProvider.GITHUB: (".github/workflows/ci.yml", "ci/github_actions.yml.j2"),
    CIProvider.GITLAB: (".gitlab-ci.yml", "ci/gitlab_ci.yml.j2"),
    CIProvider.AZURE: ("azure-pipelines.yml", "ci/azure_pipelines.yml.j2"),
}


def build_jobs(config: BlueprintConfig) -> list[BuildJob]:
    """Build jobs for the requested platforms, in canonical platform order."""
    return [job for platform in config.platforms for job in _BUILD_JOBS[platform]]


def _ci_context(config: BlueprintConfig) -> dict[str, Any]:
    return {"build_jobs": [asdict(job) for job in build_jobs(config)]}


def build_ci_bundle(config: BlueprintConfig) -> TemplateBundle:
    """Bundle holding the pipeline file for ``config.ci_provider``.

    Empty when the provider is ``none``.
    """
    if config.ci_provider is CIProvider.NONE:
        return TemplateBundle()
    path, template = CI_FILES[config.ci_provider]
    return TemplateBundle(
        files=(TemplateFile(path=path, build=from_template(template, context=_ci_context)),)
    )
