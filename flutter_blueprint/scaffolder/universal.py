"""Universal (multi-platform) bundle composition.

A universal project is the mobile bundle for the requested state idiom,
reshaped by path: later steps replace earlier files at the same path.  The
steps run in a fixed order:

1. Start from the mobile bundle, keyed by path.
2. Drop ``lib/main.dart``.
3. Add the responsive and platform-detection utilities.
4. Add a dispatching ``lib/main.dart`` and one ``lib/main_<shape>.dart`` per
   requested platform.
5. Add ``web/`` assets and desktop runner placeholders when requested.
6. Replace ``pubspec.yaml`` and ``README.md`` with universal versions.
"""

from __future__ import annotations

from flutter_blueprint.config import BlueprintConfig, TargetPlatform

from .bundle import Shape, TemplateBundle, TemplateFile
from .dependencies import merge_dependencies, shape_dependencies, shape_dev_dependencies
from .mobile import build_mobile_bundle
from .shared import pubspec_context, shaped, shaped_file


ENTRY_POINT = "lib/main.dart"

RESPONSIVE_FILES: tuple[tuple[str, str], ...] = (
    ("lib/core/responsive/screen_util_config.dart", "universal/screen_util_config.dart.j2"),
    ("lib/core/responsive/responsive_layout.dart", "universal/responsive_layout.dart.j2"),
    ("lib/core/responsive/adaptive_scaffold.dart", "universal/adaptive_scaffold.dart.j2"),
    ("lib/core/responsive/app_spacing.dart", "universal/app_spacing.dart.j2"),
    ("lib/core/utils/platform_info.dart", "universal/platform_info.dart.j2"),
)

WEB_FILES: tuple[tuple[str, str], ...] = (
    ("web/index.html", "web/index.html.j2"),
    ("web/manifest.json", "web/manifest.json.j2"),
)

DESKTOP_RUNNER_FILES: tuple[tuple[str, str], ...] = (
    ("windows/runner/main.cpp", "universal/windows_main.cpp.j2"),
    ("macos/Runner/MainFlutterWindow.swift", "universal/macos_window.swift.j2"),
    ("linux/my_application.cc", "universal/linux_application.cc.j2"),
)


def entry_point_path(platform: TargetPlatform) -> str:
    return f"lib/main_{platform.value}.dart"


def _entry_point(platform: TargetPlatform, config: BlueprintConfig) -> TemplateFile:
    state = config.state_management
    return TemplateFile(
        path=entry_point_path(platform),
        build=shaped(
            "universal/main_entry.dart.j2", Shape.UNIVERSAL, state,
            context=lambda _config: {"target": platform.value},
        ),
    )


def build_universal_bundle(
    config: BlueprintConfig, base: TemplateBundle | None = None
) -> TemplateBundle:
    """Compose the universal bundle for *config*.

    Args:
        config: Generation config; its platforms decide which entry points,
            web assets and desktop runners are added.
        base: Bundle to start from instead of the mobile bundle for
            ``config.state_management``.

    Returns:
        A bundle whose paths are unique; a path written by a later step
        replaces the earlier file.
    """
    state = config.state_management
    if base is None:
        base = build_mobile_bundle(config)
    shape = Shape.UNIVERSAL

    files: dict[str, TemplateFile] = {}
    for template_file in base.files:
        files[template_file.path] = template_file

    files.pop(ENTRY_POINT, None)

    for path, template in RESPONSIVE_FILES:
        files[path] = shaped_file(path, template, shape, state)

    files[ENTRY_POINT] = shaped_file(ENTRY_POINT, "universal/main.dart.j2", shape, state)
    for platform in config.platforms:
        files[entry_point_path(platform)] = _entry_point(platform, config)

    if config.has_platform(TargetPlatform.WEB):
        for path, template in WEB_FILES:
            files[path] = shaped_file(path, template, shape, state)
    if config.has_platform(TargetPlatform.DESKTOP):
        for path, template in DESKTOP_RUNNER_FILES:
            files[path] = shaped_file(path, template, shape, state)

    files["pubspec.yaml"] = TemplateFile(
        path="pubspec.yaml",
        build=shaped("shared/pubspec.yaml.j2", shape, state, pubspec_context(shape, state)),
    )
    files["README.md"] = shaped_file("README.md", "universal/README.md.j2", shape, state)

    return TemplateBundle(
        files=tuple(files.values()),
        additional_dependencies=merge_dependencies(
            base.additional_dependencies,
            shape_dependencies(shape, state, config),
        ),
        additional_dev_dependencies=merge_dependencies(
            base.additional_dev_dependencies,
            shape_dev_dependencies(shape, state, config),
        ),
        required_features=base.required_features,
    )
