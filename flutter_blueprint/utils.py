"""Shared utility functions for Flutter Blueprint.

Provides name/case helpers used by the Jinja2 filters and template context,
Dart package-name validation, async file writing, and Rich-based console
reporting.
"""

from __future__ import annotations

import asyncio
import re
from pathlib import Path

from rich.console import Console
from rich.rule import Rule
from rich.table import Table

console = Console()

# ---------------------------------------------------------------------------
# String / name helpers
# ---------------------------------------------------------------------------


def slugify(value: str) -> str:
    """Convert a string to a URL/filename-safe slug (hyphenated)."""
    slug = re.sub(r"[^a-z0-9]+", "-", value.lower().strip())
    return slug.strip("-")


def pascal_case(value: str) -> str:
    """Convert ``some-thing`` or ``some_thing`` to ``SomeThing``."""
    parts = re.split(r"[-_\s]+", value)
    return "".join(word[:1].upper() + word[1:] for word in parts if word)


def camel_case(value: str) -> str:
    """Convert ``some-thing`` or ``some_thing`` to ``someThing``."""
    pascal = pascal_case(value)
    if pascal:
        return pascal[0].lower() + pascal[1:]
    return ""


def snake_case(value: str) -> str:
    """Convert ``SomeThing`` or ``some-thing`` to ``some_thing``."""
    s1 = re.sub(r"(.)([A-Z][a-z]+)", r"\1_\2", value)
    s2 = re.sub(r"([a-z0-9])([A-Z])", r"\1_\2", s1)
    return re.sub(r"[-\s]+", "_", s2).lower()


def title_case(value: str) -> str:
    """Convert ``my_cool_app`` to ``My Cool App``.

    Examples::

        title_case("my_app")    -> "My App"
        title_case("shop-2go")  -> "Shop 2go"
    """
    words = [w for w in re.split(r"[-_\s]+", value) if w]
    return " ".join(w[:1].upper() + w[1:] for w in words)


# ---------------------------------------------------------------------------
# Dart package-name validation
# ---------------------------------------------------------------------------

MAX_PACKAGE_NAME_LENGTH = 64

DART_RESERVED_WORDS: frozenset[str] = frozenset({
    "abstract", "as", "assert", "async", "await", "break", "case", "catch",
    "class", "const", "continue", "covariant", "default", "deferred", "do",
    "dynamic", "else", "enum", "export", "extends", "extension", "external",
    "factory", "false", "final", "finally", "for", "function", "get", "hide",
    "if", "implements", "import", "in", "interface", "is", "late", "library",
    "mixin", "new", "null", "on", "operator", "part", "required", "rethrow",
    "return", "set", "show", "static", "super", "switch", "sync", "this",
    "throw", "true", "try", "typedef", "var", "void", "while", "with", "yield",
})

DART_BUILT_IN_TYPES: frozenset[str] = frozenset({
    "int", "double", "num", "bool", "string", "list", "map", "set", "object",
    "dynamic", "void", "null", "never", "future", "stream",
})


def validate_package_name(
    name: str,
    *,
    field_name: str = "name",
    max_length: int = MAX_PACKAGE_NAME_LENGTH,
) -> str:
    """Validate a Dart package name (app or feature name).

    Rules:
        * 1 to *max_length* characters.
        * Starts with a lowercase letter; only ``[a-z0-9_]`` afterwards.
        * Not a Dart reserved word or built-in type name.
        * No trailing underscore and no consecutive underscores.

    Returns:
        The unchanged *name* when valid.

    Raises:
        ValueError: With a message naming the first rule that failed.
    """
    if not name:
        raise ValueError(f"{field_name} cannot be empty")
    if len(name) > max_length:
        raise ValueError(
            f"{field_name} must be {max_length} characters or less (got {len(name)})"
        )

    lower = name.lower()
    if lower in DART_RESERVED_WORDS:
        raise ValueError(f'"{name}" is a Dart reserved word and cannot be used as {field_name}')
    if lower in DART_BUILT_IN_TYPES:
        raise ValueError(f'"{name}" is a Dart built-in type and cannot be used as {field_name}')
    if not re.match(r"^[a-z]", name):
        raise ValueError(f"{field_name} must start with a lowercase letter (a-z)")
    if not re.fullmatch(r"[a-z][a-z0-9_]*", name):
        raise ValueError(
            f"{field_name} can only contain lowercase letters, numbers, and underscores"
        )
    if name.endswith("_"):
        raise ValueError(f"{field_name} cannot end with an underscore")
    if "__" in name:
        raise ValueError(f"{field_name} cannot contain consecutive underscores")
    return name


# ---------------------------------------------------------------------------
# File-system helpers
# ---------------------------------------------------------------------------


def _write_file(path: Path, content: str) -> None:
    """Synchronous helper: create parent dirs and write content."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


async def write_text(path: str | Path, content: str) -> Path:
    """Write *content* to *path* off the event loop and return the path."""
    out = Path(path)
    await asyncio.to_thread(_write_file, out, content)
    return out


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_header(title: str, color: str = "cyan") -> None:
    """Print a full-width rule announcing a CLI step."""
    console.print()
    console.print(Rule(f"[bold {color}] {title} [/bold {color}]", style=color))
    console.print()


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print a two-column key/value summary table.

    Args:
        data: Mapping of label -> value.
        title: Table title.
    """
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(key, str(value))

    console.print(table)
    console.print()


def print_file_table(paths: list[str], title: str = "Files") -> None:
    """Print generated paths grouped by their top-level directory."""
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Directory", style="dim", no_wrap=True)
    table.add_column("Path")

    for path in sorted(paths):
        top = path.split("/", 1)[0] if "/" in path else "."
        table.add_row(top, path)

    console.print(table)
    console.print()


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{message}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{message}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{message}[/bold yellow]")


def print_info(message: str) -> None:
    console.print(message)
