"""Configuration loading for vibecheck.

Configuration lives in a JSON file (``.vibecheck.json`` by default)::

    {
      "rules": {
        "prop-drilling-depth": 3,
        "max-component-lines": 150,
        "require-memo": true
      },
      "ignore": ["**/*.test.tsx"],
      "severity": {"large-component": "error"}
    }

User values are merged over the defaults: ``rules`` and ``severity`` key by
key, ``ignore`` as a whole. A file that cannot be parsed is reported and the
defaults are used instead.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .exceptions import ConfigParseError
from .models import Severity

logger = logging.getLogger(__name__)

CONFIG_FILE_NAMES = (".vibecheck.json", "vibecheck.config.json")

DEFAULT_IGNORE = (
    "**/*.test.tsx",
    "**/*.test.ts",
    "**/*.stories.tsx",
    "**/node_modules/**",
)

DEFAULT_SEVERITY: dict[str, Severity] = {
    "large-component": Severity.ERROR,
    "unused-props": Severity.WARNING,
    "prop-drilling": Severity.ERROR,
    "missing-memo": Severity.WARNING,
    "context-overuse": Severity.WARNING,
    "state-chaos": Severity.WARNING,
    "magic-values": Severity.WARNING,
    "messy-structure": Severity.WARNING,
}


class RulesConfig(BaseModel):
    """Rule thresholds. Field aliases match the keys used in the JSON file."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    prop_drilling_depth: int = Field(default=3, alias="prop-drilling-depth", ge=1)
    max_component_lines: int = Field(default=150, alias="max-component-lines", ge=1)
    require_memo: bool = Field(default=True, alias="require-memo")


class VibeCheckConfig(BaseModel):
    """Top-level configuration."""

    model_config = ConfigDict(extra="ignore")

    rules: RulesConfig = Field(default_factory=RulesConfig)
    ignore: list[str] = Field(default_factory=lambda: list(DEFAULT_IGNORE))
    severity: dict[str, Severity] = Field(
        default_factory=lambda: dict(DEFAULT_SEVERITY)
    )

    @field_validator("severity")
    @classmethod
    def _merge_severity_defaults(
        cls, value: dict[str, Severity]
    ) -> dict[str, Severity]:
        return {**DEFAULT_SEVERITY, **value}

    def severity_for(
        self, rule: str, default: Severity = Severity.WARNING
    ) -> Severity:
        """Return the configured severity for *rule*."""
        return self.severity.get(rule, default)

    def to_json_dict(self) -> dict[str, Any]:
        """Serialize using the JSON file's key names."""
        return self.model_dump(mode="json", by_alias=True)


def parse_config(text: str, source: str = "<string>") -> VibeCheckConfig:
    """Parse configuration JSON text.

    Args:
        text: The raw file contents.
        source: Where the text came from, for error messages.

    Raises:
        ConfigParseError: If the text is not valid JSON or fails validation.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ConfigParseError(f"Invalid JSON in {source}: {e}", source) from e

    if not isinstance(data, dict):
        raise ConfigParseError(
            f"Config in {source} must be a JSON object", source
        )

    try:
        return VibeCheckConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigParseError(f"Invalid config in {source}: {e}", source) from e


def load_config(
    config_path: str | Path | None = None,
    search_dir: str | Path | None = None,
) -> VibeCheckConfig:
    """Load configuration from the first existing candidate file.

    Candidates are *config_path* (if given) followed by the default file
    names, resolved against *search_dir* (the current directory by default).

    Returns:
        The parsed configuration, or the defaults when no file exists or
        the file found cannot be parsed.
    """
    base = Path(search_dir) if search_dir is not None else Path.cwd()
    candidates: list[Path] = []
    if config_path is not None:
        candidates.append(Path(config_path))
    candidates.extend(Path(name) for name in CONFIG_FILE_NAMES)

    for candidate in candidates:
        path = candidate if candidate.is_absolute() else base / candidate
        if not path.is_file():
            continue
        try:
            config = parse_config(path.read_text(encoding="utf-8"), str(path))
        except (ConfigParseError, OSError) as e:
            logger.warning(f"Could not parse config file {path}, using defaults: {e}")
            return VibeCheckConfig()
        logger.debug(f"Loaded config from {path}")
        return config

    return VibeCheckConfig()


def should_ignore_file(file_path: str, ignore_patterns: list[str]) -> bool:
    """Return ``True`` if *file_path* matches any ignore pattern.

    Matching is a plain substring test after stripping ``*`` wildcards
    from the pattern, so ``**/node_modules/**`` matches any path
    containing ``/node_modules/``.
    """
    for pattern in ignore_patterns:
        clean_pattern = pattern.replace("*", "")
        if clean_pattern in file_path:
            return True
    return False


def write_default_config(path: str | Path) -> bool:
    """Write the default configuration to *path*.

    Returns:
        ``False`` if the file already exists (it is left untouched),
        ``True`` once written.
    """
    target = Path(path)
    if target.exists():
        return False
    target.write_text(
        json.dumps(VibeCheckConfig().to_json_dict(), indent=2) + "\n",
        encoding="utf-8",
    )
    return True
