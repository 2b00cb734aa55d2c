"""Configuration loading for poststub.

Settings are read from an optional poststub.yaml in the project root and
merged over DEFAULT_CONFIG. Command-line options override both.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from .writer import ExistsPolicy

CONFIG_FILENAME = "poststub.yaml"

DEFAULT_CONFIG = {
    "content_dir": "content/post",
    "on_exists": ExistsPolicy.FAIL.value,
    "git_remote": None,
    "git_branch": None,
}


class ConfigError(Exception):
    """Invalid value in poststub.yaml."""


def load_config(project_root: Path) -> dict[str, Any]:
    """Load configuration from poststub.yaml.

    Args:
        project_root: Root directory of the project.

    Returns:
        Dictionary containing configuration values, with defaults applied.

    Raises:
        ConfigError: If the file is not valid UTF-8 YAML or holds an unknown
            on_exists value.
    """
    config_path = project_root / CONFIG_FILENAME
    config = DEFAULT_CONFIG.copy()
    if config_path.exists():
        try:
            with open(config_path, encoding="utf-8") as f:
                loaded = yaml.safe_load(f) or {}
        except (yaml.YAMLError, UnicodeDecodeError) as exc:
            raise ConfigError(f"{config_path}: {exc}") from exc
        if isinstance(loaded, dict):
            config.update(loaded)
    config["on_exists"] = parse_policy(
        config.get("on_exists") or DEFAULT_CONFIG["on_exists"]
    )
    return config


def parse_policy(value: Any) -> ExistsPolicy:
    """Convert a config or CLI value to an ExistsPolicy."""
    if isinstance(value, ExistsPolicy):
        return value
    try:
        return ExistsPolicy(str(value).strip().lower())
    except ValueError:
        raise ConfigError(
            f"Invalid on_exists value {value!r}; expected one of: "
            + ", ".join(ExistsPolicy.choices())
        ) from None


def content_dir(project_root: Path, config: dict[str, Any]) -> Path:
    """Resolve the configured content directory against the project root."""
    configured = Path(str(config.get("content_dir") or DEFAULT_CONFIG["content_dir"]))
    if configured.is_absolute():
        return configured
    return project_root / configured
