"""Jinja2 template rendering for project scaffolding.

Provides the TemplateRenderer class which loads Jinja2 templates from the
``flutter_blueprint/scaffolder/templates/`` directory and renders them with a
context derived from a ``BlueprintConfig``.  Rendering is pure: the same
template and context always produce the same text, and nothing touches the
file system except the template loader.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

from flutter_blueprint.config import BlueprintConfig, TargetPlatform
from flutter_blueprint.utils import camel_case, pascal_case, slugify, snake_case, title_case


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders Jinja2 templates for project scaffolding.

    The renderer discovers ``.j2`` template files under a configurable
    template directory.  Undefined variables raise instead of rendering as
    empty strings so that a broken template surfaces as a per-file build
    error rather than as a silently truncated file.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape([]),
            undefined=StrictUndefined,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        # Register custom filters
        self.env.filters["slugify"] = slugify
        self.env.filters["pascal_case"] = pascal_case
        self.env.filters["snake_case"] = snake_case
        self.env.filters["camel_case"] = camel_case
        self.env.filters["title_case"] = title_case

    # -- Rendering -----------------------------------------------------------

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render a single template with the provided context.

        Args:
            template_path: Path relative to the template directory (e.g.
                ``"shared/logger.dart.j2"``).
            context: Dictionary of variables available inside the template.

        Returns:
            The rendered template content as a string.
        """
        template = self.env.get_template(template_path)
        return template.render(**context)

    def render_string(self, template_string: str, context: dict[str, Any]) -> str:
        """Render an inline template string with the provided context."""
        template = self.env.from_string(template_string)
        return template.render(**context)

    # -- Utility -----------------------------------------------------------

    def list_templates(self, prefix: str = "") -> list[str]:
        """Return a sorted list of all ``.j2`` template paths under *prefix*.

        Paths are relative to the template root directory.
        """
        search_dir = self.template_dir / prefix if prefix else self.template_dir
        if not search_dir.is_dir():
            return []
        return sorted(
            p.relative_to(self.template_dir).as_posix()
            for p in search_dir.rglob("*.j2")
        )


@lru_cache(maxsize=1)
def get_renderer() -> TemplateRenderer:
    """Return the process-wide renderer for the bundled templates."""
    return TemplateRenderer()


# ---------------------------------------------------------------------------
# Context building
# ---------------------------------------------------------------------------


def template_context(config: BlueprintConfig, **extra: Any) -> dict[str, Any]:
    """Build the Jinja2 template context for *config*.

    Every template receives the same base variables; callers add
    template-specific values (dependency maps, feature names) via *extra*.
    """
    context: dict[str, Any] = {
        "config": config,
        "app_name": config.app_name,
        "app_title": title_case(config.app_name),
        "app_class": pascal_case(config.app_name),
        "state": config.state_management.value,
        "platforms": [p.value for p in config.platforms],
        "has_mobile": config.has_platform(TargetPlatform.MOBILE),
        "has_web": config.has_platform(TargetPlatform.WEB),
        "has_desktop": config.has_platform(TargetPlatform.DESKTOP),
        "include_theme": config.include_theme,
        "include_localization": config.include_localization,
        "include_env": config.include_env,
        "include_api": config.include_api,
        "include_tests": config.include_tests,
        "include_hive": config.include_hive,
    }
    context.update(extra)
    return context
