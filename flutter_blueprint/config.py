"""Flutter Blueprint configuration.

Typed, immutable description of the project to scaffold.  ``BlueprintConfig``
is a Pydantic v2 model so it is validated once at construction time and then
passed read-only to every template builder.  It also round-trips through the
``blueprint.yaml`` manifest written next to the generated project.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

from flutter_blueprint.utils import validate_package_name


MANIFEST_FILENAME = "blueprint.yaml"
MANIFEST_VERSION = 1


class ConfigurationError(ValueError):
    """Raised when an unsupported option or combination is requested."""


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class StateManagement(str, Enum):
    """Supported state-management idioms for generated feature code."""
    PROVIDER = "provider"
    RIVERPOD = "riverpod"
    BLOC = "bloc"

    @property
    def label(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: str) -> "StateManagement":
        normalized = value.strip().lower()
        for candidate in cls:
            if candidate.value == normalized:
                return candidate
        raise ConfigurationError(f"Unsupported state management option: {value}")


class TargetPlatform(str, Enum):
    """Platform families a generated project can target."""
    MOBILE = "mobile"
    WEB = "web"
    DESKTOP = "desktop"

    @property
    def label(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: str) -> "TargetPlatform":
        """Parse a platform name, accepting OS names as aliases.

        ``android``/``ios`` map to mobile and ``windows``/``macos``/``linux``
        map to desktop.
        """
        normalized = value.strip().lower()
        for candidate in cls:
            if candidate.value == normalized:
                return candidate
        if normalized in _MOBILE_ALIASES:
            return cls.MOBILE
        if normalized in _DESKTOP_ALIASES:
            return cls.DESKTOP
        raise ConfigurationError(
            f"Unsupported platform: {value}. Use: mobile, web, desktop "
            "(or android, ios, windows, macos, linux)"
        )

    @classmethod
    def parse_multiple(cls, value: str) -> tuple["TargetPlatform", ...]:
        """Parse a comma-separated platform list (or ``all``).

        Duplicates collapse and the result is in canonical enum order.
        """
        normalized = value.strip().lower()
        if normalized == "all":
            return tuple(cls)
        parts = [p.strip() for p in normalized.split(",") if p.strip()]
        if not parts:
            raise ConfigurationError("At least one platform must be specified")
        return _canonical_platforms(cls.parse(p) for p in parts)


_MOBILE_ALIASES = frozenset({"android", "ios"})
_DESKTOP_ALIASES = frozenset({"windows", "macos", "linux"})


class CIProvider(str, Enum):
    """CI/CD systems a pipeline file can be generated for."""
    NONE = "none"
    GITHUB = "github"
    GITLAB = "gitlab"
    AZURE = "azure"

    @property
    def label(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: str) -> "CIProvider":
        normalized = value.strip().lower()
        for candidate in cls:
            if candidate.value == normalized:
                return candidate
        raise ConfigurationError(f"Unsupported CI provider: {value}")


class ProjectTemplate(str, Enum):
    """Pre-built project templates layered on top of the base architecture."""
    BLANK = "blank"
    ECOMMERCE = "ecommerce"
    SOCIAL_MEDIA = "social_media"
    FITNESS_TRACKER = "fitness_tracker"
    FINANCE_APP = "finance_app"
    FOOD_DELIVERY = "food_delivery"
    CHAT_APP = "chat_app"

    @property
    def label(self) -> str:
        return _TEMPLATE_LABELS[self]

    @property
    def description(self) -> str:
        return _TEMPLATE_DESCRIPTIONS[self]

    @classmethod
    def parse(cls, value: str) -> "ProjectTemplate":
        """Parse a template by value, hyphen-free name, or space-free label.

        ``"social-media"``, ``"socialmedia"``, ``"social_media"`` and
        ``"Social Media App"`` all resolve to ``SOCIAL_MEDIA``.
        """
        normalized = _squash(value)
        for candidate in cls:
            if normalized in (_squash(candidate.value), _squash(candidate.label)):
                return candidate
        raise ConfigurationError(f"Unknown template: {value}")


def _squash(value: str) -> str:
    return "".join(ch for ch in value.strip().lower() if ch.isalnum())


_TEMPLATE_LABELS: dict[ProjectTemplate, str] = {
    ProjectTemplate.BLANK: "Blank Project",
    ProjectTemplate.ECOMMERCE: "E-Commerce App",
    ProjectTemplate.SOCIAL_MEDIA: "Social Media App",
    ProjectTemplate.FITNESS_TRACKER: "Fitness Tracker",
    ProjectTemplate.FINANCE_APP: "Finance App",
    ProjectTemplate.FOOD_DELIVERY: "Food Delivery App",
    ProjectTemplate.CHAT_APP: "Chat App",
}

_TEMPLATE_DESCRIPTIONS: dict[ProjectTemplate, str] = {
    ProjectTemplate.BLANK: "Basic architecture with a single home feature",
    ProjectTemplate.ECOMMERCE: (
        "Product catalog, shopping cart, checkout, and payment integration"
    ),
    ProjectTemplate.SOCIAL_MEDIA: (
        "User profiles, posts feed, comments, likes, and social interactions"
    ),
    ProjectTemplate.FITNESS_TRACKER: (
        "Workout tracking, progress charts, goal setting, and statistics"
    ),
    ProjectTemplate.FINANCE_APP: (
        "Transaction management, budgets, spending analytics, and reports"
    ),
    ProjectTemplate.FOOD_DELIVERY: (
        "Restaurant browsing, menu ordering, cart, and delivery tracking"
    ),
    ProjectTemplate.CHAT_APP: (
        "Real-time messaging, user presence, media sharing, and notifications"
    ),
}


def _canonical_platforms(platforms: Any) -> tuple[TargetPlatform, ...]:
    selected = set(platforms)
    return tuple(p for p in TargetPlatform if p in selected)


# ---------------------------------------------------------------------------
# BlueprintConfig
# ---------------------------------------------------------------------------


class BlueprintConfig(BaseModel):
    """Everything a generation run needs to know about the target project.

    Instances are frozen: they are created once per run (by the CLI or by
    :meth:`from_map`) and then shared read-only by all template builders, so
    rendering the same config twice always yields the same files.
    """

    model_config = ConfigDict(frozen=True)

    app_name: str = Field(..., description="Dart package name of the generated app")
    platforms: tuple[TargetPlatform, ...] = Field(
        default=(TargetPlatform.MOBILE,),
        description="Target platforms in canonical order",
    )
    state_management: StateManagement = Field(default=StateManagement.PROVIDER)
    include_theme: bool = Field(default=True, description="Light/dark theme scaffolding")
    include_localization: bool = Field(default=False, description="ARB localization assets")
    include_env: bool = Field(default=True, description=".env loading support")
    include_api: bool = Field(default=True, description="Dio API client layer")
    include_tests: bool = Field(default=True, description="Test scaffolding")
    include_hive: bool = Field(default=False, description="Hive offline cache")
    ci_provider: CIProvider = Field(default=CIProvider.NONE)
    project_template: ProjectTemplate = Field(default=ProjectTemplate.BLANK)

    @field_validator("app_name")
    @classmethod
    def _check_app_name(cls, value: str) -> str:
        try:
            return validate_package_name(value, field_name="App name")
        except ValueError as exc:
            raise ConfigurationError(str(exc)) from exc

    @field_validator("platforms", mode="before")
    @classmethod
    def _normalise_platforms(cls, value: Any) -> tuple[TargetPlatform, ...]:
        if isinstance(value, str):
            return TargetPlatform.parse_multiple(value)
        if any(isinstance(p, str) and p.strip().lower() == "all" for p in value):
            return tuple(TargetPlatform)
        items = [
            p if isinstance(p, TargetPlatform) else TargetPlatform.parse(str(p))
            for p in value
        ]
        if not items:
            raise ConfigurationError("At least one platform must be specified")
        return _canonical_platforms(items)

    # ------------------------------------------------------------------
    # Derived properties
    # ------------------------------------------------------------------

    @property
    def is_multi_platform(self) -> bool:
        """True when more than one platform family is targeted."""
        return len(self.platforms) > 1

    @property
    def is_universal(self) -> bool:
        """True when every platform family is targeted."""
        return len(self.platforms) == len(TargetPlatform)

    def has_platform(self, platform: TargetPlatform) -> bool:
        return platform in self.platforms

    # ------------------------------------------------------------------
    # Manifest serialisation
    # ------------------------------------------------------------------

    def to_map(self) -> dict[str, Any]:
        """Return the ``blueprint.yaml`` representation of this config."""
        return {
            "app_name": self.app_name,
            "platforms": [p.label for p in self.platforms],
            "state_management": self.state_management.label,
            "ci_provider": self.ci_provider.label,
            "template": self.project_template.value,
            "features": {
                "api": self.include_api,
                "env": self.include_env,
                "hive": self.include_hive,
                "localization": self.include_localization,
                "tests": self.include_tests,
                "theme": self.include_theme,
            },
        }

    @classmethod
    def from_map(cls, data: dict[str, Any]) -> "BlueprintConfig":
        """Build a config from a manifest mapping.

        Accepts both the multi-platform ``platforms:`` list and the legacy
        single ``platform:`` key.  Missing feature flags fall back to the
        model defaults.
        """
        features = data.get("features") or {}

        if "platforms" in data:
            raw = data["platforms"]
            platforms: Any = raw if isinstance(raw, list) else str(raw)
        elif "platform" in data:
            platforms = [str(data.get("platform") or "mobile")]
        else:
            platforms = [TargetPlatform.MOBILE]

        return cls(
            app_name=str(data.get("app_name", "")),
            platforms=platforms,
            state_management=StateManagement.parse(
                str(data.get("state_management") or "provider")
            ),
            ci_provider=CIProvider.parse(str(data.get("ci_provider") or "none")),
            project_template=ProjectTemplate.parse(str(data.get("template") or "blank")),
            include_theme=_read_bool(features.get("theme"), fallback=True),
            include_localization=_read_bool(features.get("localization"), fallback=False),
            include_env=_read_bool(features.get("env"), fallback=True),
            include_api=_read_bool(features.get("api"), fallback=True),
            include_tests=_read_bool(features.get("tests"), fallback=True),
            include_hive=_read_bool(features.get("hive"), fallback=False),
        )

    def to_manifest(self) -> str:
        """Serialise to the YAML text stored in ``blueprint.yaml``."""
        payload = {"version": MANIFEST_VERSION, **self.to_map()}
        return yaml.safe_dump(payload, sort_keys=False, default_flow_style=False)

    @classmethod
    def from_manifest(cls, text: str) -> "BlueprintConfig":
        """Parse ``blueprint.yaml`` text.

        Raises:
            ConfigurationError: If the document is not a mapping.
        """
        data = yaml.safe_load(text)
        if not isinstance(data, dict):
            raise ConfigurationError("Invalid blueprint.yaml structure")
        return cls.from_map(data)

    def save(self, path: Path) -> Path:
        """Persist the manifest to *path*, creating parent directories."""
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.to_manifest(), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "BlueprintConfig":
        """Load a previously saved ``blueprint.yaml``."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.from_manifest(raw)


def _read_bool(value: Any, *, fallback: bool) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value:
        return value.lower() == "true"
    return fallback
