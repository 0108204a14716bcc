"""Command-line interface for Flutter Blueprint.

``flutter-blueprint init <app_name>`` generates a project on disk;
``flutter-blueprint preview <app_name>`` lists the files that would be
generated without writing anything; ``flutter-blueprint add-feature <name>``
adds a feature module to a project generated earlier.
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

from pydantic import ValidationError

from flutter_blueprint import __version__
from flutter_blueprint.config import (
    BlueprintConfig,
    CIProvider,
    ConfigurationError,
    ProjectTemplate,
    StateManagement,
    TargetPlatform,
)
from flutter_blueprint.scaffolder.generator import GenerationError, GenerationResult, ProjectGenerator
from flutter_blueprint.scaffolder.library import TEMPLATE_FEATURES
from flutter_blueprint.utils import (
    console,
    print_error,
    print_file_table,
    print_header,
    print_info,
    print_success,
    print_summary_table,
    print_warning,
)


# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------


def _add_project_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("app_name", help="Dart package name of the app (e.g. my_app)")
    parser.add_argument(
        "--platforms", "-p",
        default="mobile",
        help="Comma-separated platforms: mobile, web, desktop, or all (default: mobile)",
    )
    parser.add_argument(
        "--state", "-s",
        default=StateManagement.PROVIDER.value,
        help="State management: provider, riverpod, bloc (default: provider)",
    )
    parser.add_argument(
        "--template", "-t",
        default=ProjectTemplate.BLANK.value,
        help="Project template: " + ", ".join(t.value for t in ProjectTemplate),
    )
    parser.add_argument(
        "--ci",
        default=CIProvider.NONE.value,
        help="CI provider: none, github, gitlab, azure (default: none)",
    )
    parser.add_argument("--no-theme", action="store_true", help="Skip light/dark theme files")
    parser.add_argument("--localization", action="store_true", help="Add ARB localization")
    parser.add_argument("--no-env", action="store_true", help="Skip .env support")
    parser.add_argument("--no-api", action="store_true", help="Skip the Dio API layer")
    parser.add_argument("--no-tests", action="store_true", help="Skip test scaffolding")
    parser.add_argument("--hive", action="store_true", help="Add a Hive offline cache")
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Abort on the first file that fails to render",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="flutter-blueprint",
        description="Flutter Blueprint -- scaffold production-ready Flutter apps",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  flutter-blueprint init my_app\n"
            "  flutter-blueprint init shop --platforms mobile,web --state riverpod\n"
            "  flutter-blueprint init tracker --template fitness-tracker --ci github\n"
            "  flutter-blueprint preview my_app --platforms all --state bloc\n"
            "  flutter-blueprint add-feature wishlist --project ./shop\n"
        ),
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    commands = parser.add_subparsers(dest="command", required=True)

    init = commands.add_parser("init", help="Generate a new Flutter project")
    _add_project_options(init)
    init.add_argument(
        "--output", "-o",
        default=".",
        help="Parent directory for the project (default: current directory)",
    )
    init.add_argument(
        "--dry-run",
        action="store_true",
        help="Show what would be generated without writing files",
    )
    init.add_argument(
        "--force",
        action="store_true",
        help="Write into an existing, non-empty project directory",
    )

    preview = commands.add_parser("preview", help="List the files a project would contain")
    _add_project_options(preview)

    add_feature = commands.add_parser(
        "add-feature", help="Add a feature module to an existing project"
    )
    add_feature.add_argument("name", help="Feature name (e.g. wishlist)")
    add_feature.add_argument(
        "--project", "-p",
        default=".",
        help="Project root containing blueprint.yaml (default: current directory)",
    )
    add_feature.add_argument(
        "--force",
        action="store_true",
        help="Overwrite an existing feature directory",
    )
    return parser


def config_from_args(args: argparse.Namespace) -> BlueprintConfig:
    """Build a ``BlueprintConfig`` from parsed CLI arguments.

    Raises:
        ConfigurationError: For any unsupported option value.
    """
    try:
        return BlueprintConfig(
            app_name=args.app_name,
            platforms=TargetPlatform.parse_multiple(args.platforms),
            state_management=StateManagement.parse(args.state),
            project_template=ProjectTemplate.parse(args.template),
            ci_provider=CIProvider.parse(args.ci),
            include_theme=not args.no_theme,
            include_localization=args.localization,
            include_env=not args.no_env,
            include_api=not args.no_api,
            include_tests=not args.no_tests,
            include_hive=args.hive,
        )
    except ValidationError as exc:
        first = exc.errors()[0]
        message = str(first.get("msg", exc)).removeprefix("Value error, ")
        raise ConfigurationError(message) from exc


# ---------------------------------------------------------------------------
# Reporting
# ---------------------------------------------------------------------------


def _print_config(config: BlueprintConfig, template_name: str) -> None:
    features = [
        name for name, enabled in (
            ("theme", config.include_theme),
            ("localization", config.include_localization),
            ("env", config.include_env),
            ("api", config.include_api),
            ("tests", config.include_tests),
            ("hive", config.include_hive),
        ) if enabled
    ]
    print_summary_table(
        {
            "App name": config.app_name,
            "Platforms": ", ".join(p.label for p in config.platforms),
            "State management": config.state_management.label,
            "Bundle": template_name,
            "Template": config.project_template.label,
            "Includes": ", ".join(TEMPLATE_FEATURES[config.project_template]),
            "CI": config.ci_provider.label,
            "Features": ", ".join(features) or "none",
        },
        title="Blueprint",
    )


def _report_problems(result: GenerationResult) -> None:
    for path in result.collisions:
        print_warning(f"  Path generated more than once, last version kept: {path}")
    for error in result.errors:
        print_error(f"  {error.path}: {error.error_type}: {error.message}")


def _print_next_steps(project_root: Path, config: BlueprintConfig) -> None:
    console.print("[bold]Next steps:[/bold]")
    console.print(f"  cd {project_root}")
    console.print("  flutter pub get")
    if config.include_env:
        console.print("  cp .env.example .env")
    console.print("  flutter run")


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


def run_preview(args: argparse.Namespace) -> int:
    config = config_from_args(args)
    result = ProjectGenerator().generate(config, strict=args.strict)
    _print_config(config, result.template_name)
    print_file_table(list(result.files), title=f"{result.file_count} files")
    _report_problems(result)
    return 0 if result.ok else 1


def run_init(args: argparse.Namespace) -> int:
    config = config_from_args(args)
    generator = ProjectGenerator()

    print_header(f"Generating {config.app_name}")
    result = generator.generate(config, strict=args.strict)
    _print_config(config, result.template_name)
    _report_problems(result)

    if args.dry_run:
        print_file_table(list(result.files), title=f"{result.file_count} files (dry run)")
        return 0 if result.ok else 1

    written = asyncio.run(generator.write(result, args.output, overwrite=args.force))
    project_root = Path(args.output) / config.app_name

    if result.ok:
        print_success(f"Generated {len(written)} files in {project_root}")
    else:
        print_warning(
            f"Generated {len(written)} files in {project_root}; "
            f"{len(result.errors)} file(s) failed to render"
        )
    _print_next_steps(project_root, config)
    return 0 if result.ok else 1


def run_add_feature(args: argparse.Namespace) -> int:
    project_root = Path(args.project)
    written = asyncio.run(
        ProjectGenerator().add_feature(project_root, args.name, overwrite=args.force)
    )
    print_file_table(
        [path.relative_to(project_root).as_posix() for path in written],
        title=f"Feature {args.name}",
    )
    print_success(f"Added feature {args.name} ({len(written)} files)")
    print_info(f"Register {args.name}_page.dart in lib/core/routing/app_router.dart")
    return 0


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``flutter-blueprint``."""
    parser = build_parser()
    args = parser.parse_args(argv)

    handlers = {"init": run_init, "preview": run_preview, "add-feature": run_add_feature}
    try:
        status = handlers[args.command](args)
    except ConfigurationError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        sys.exit(1)
    except GenerationError as exc:
        console.print(f"[bold red]Generation failed:[/bold red] {exc}")
        sys.exit(1)

    if status:
        sys.exit(status)


if __name__ == "__main__":
    main()
