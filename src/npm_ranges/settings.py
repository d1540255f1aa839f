"""Settings loader for comparison mode and pre-release matching.

Reads an optional JSON settings file and validates it against the packaged
``data/settings.schema.json`` with ``jsonschema``. Example::

    {
        "comparison": ["include-build-metadata", "differentiate-wildcards"],
        "includePreReleases": false
    }

Without a file the defaults are used: default comparison semantics and no
pre-release matching.
"""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from jsonschema import Draft202012Validator

from .comparison import SemverComparer, SemverComparison

logger = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).resolve().parent / "data" / "settings.schema.json"
CONFIG_PATH_ENV_VAR = "NPM_RANGES_SETTINGS"
INCLUDE_PRERELEASES_ENV_VAR = "NPM_RANGES_INCLUDE_PRERELEASES"

_TRUTHY = {"1", "true", "yes", "y"}

COMPARISON_FLAGS: dict[str, SemverComparison] = {
    "default": SemverComparison.DEFAULT,
    "include-build-metadata": SemverComparison.INCLUDE_BUILD_METADATA,
    "differentiate-wildcards": SemverComparison.DIFFERENTIATE_WILDCARDS,
    "differentiate-equality": SemverComparison.DIFFERENTIATE_EQUALITY,
    "exact": SemverComparison.EXACT,
}


class ConfigError(RuntimeError):
    """Raised when the settings file cannot be loaded or is invalid."""


@dataclass(slots=True, frozen=True)
class Settings:
    """Top-level settings container."""

    comparison: SemverComparison = SemverComparison.DEFAULT
    include_pre_releases: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Settings:
        return cls(
            comparison=combine_flags(data.get("comparison", ())),
            include_pre_releases=data.get("includePreReleases", False),
        )

    def comparer(self) -> SemverComparer:
        return SemverComparer.from_comparison(self.comparison)

    def to_dict(self) -> dict[str, object]:
        names = [
            name
            for name, flag in COMPARISON_FLAGS.items()
            if flag and name != "exact" and flag & self.comparison
        ]
        return {
            "comparison": names or ["default"],
            "includePreReleases": self.include_pre_releases,
        }


def combine_flags(names: Iterable[str]) -> SemverComparison:
    comparison = SemverComparison.DEFAULT
    for name in names:
        try:
            comparison |= COMPARISON_FLAGS[name]
        except KeyError as exc:
            raise ConfigError(f"Unknown comparison flag: '{name}'") from exc
    return comparison


def _load_json(path: Path) -> Any:
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Failed to read settings file: {exc}") from exc
    try:
        return json.loads(content)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid JSON in settings file: {exc}") from exc


def _format_errors(errors: Iterable) -> str:
    messages = []
    for error in errors:
        pointer = "/".join(str(p) for p in error.path)
        messages.append(f"- {pointer or '<root>'}: {error.message}")
    return "\n".join(messages)


def validate_settings_document(document: Any) -> None:
    """Validate a parsed settings document against the packaged schema.

    Raises:
        ConfigError: listing every schema violation.
    """
    validator = Draft202012Validator(_load_json(SCHEMA_PATH))
    errors = sorted(validator.iter_errors(document), key=lambda e: list(e.path))
    if errors:
        raise ConfigError("Invalid settings:\n" + _format_errors(errors))


def _resolve_config_path(path: Path | str | None = None) -> Path | None:
    """Resolve the settings file path.

    Priority:
    1. Explicit path argument
    2. NPM_RANGES_SETTINGS environment variable
    3. None (built-in defaults)
    """
    if path is not None:
        return Path(path)

    env_path = os.environ.get(CONFIG_PATH_ENV_VAR)
    if env_path:
        return Path(env_path)

    return None


def load_settings(path: Path | str | None = None) -> Settings:
    """Load and validate settings.

    Args:
        path: Optional path to the settings file. If not provided, uses the
            NPM_RANGES_SETTINGS env var or falls back to the defaults.

    Returns:
        A Settings object. NPM_RANGES_INCLUDE_PRERELEASES, when set, overrides
        the ``includePreReleases`` value.

    Raises:
        ConfigError: If the file cannot be read or contains invalid data.
    """
    config_path = _resolve_config_path(path)

    if config_path is None:
        settings = Settings()
    else:
        if not config_path.exists():
            raise ConfigError(f"Settings file not found: {config_path}")
        document = _load_json(config_path)
        validate_settings_document(document)
        settings = Settings.from_dict(document)
        logger.info("Loaded settings from %s", config_path)

    env_flag = os.environ.get(INCLUDE_PRERELEASES_ENV_VAR)
    if env_flag is not None and env_flag.strip():
        settings = Settings(
            comparison=settings.comparison,
            include_pre_releases=env_flag.strip().lower() in _TRUTHY,
        )
    return settings
