"""Configuration management for dotcraft projects."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

DOTCRAFT_DIR = ".dotcraft"
CONFIG_FILE = "config.json"


class ConfigError(ValueError):
    """Raised when .dotcraft/config.json cannot be parsed."""


@dataclass
class ProjectConfig:
    """Settings read from .dotcraft/config.json."""

    version: str = "0.1.0"
    validate: bool = True
    log_level: str = "WARNING"
    default_directed: bool = True


def _config_path(project_root: Path) -> Path:
    return project_root / DOTCRAFT_DIR / CONFIG_FILE


def save_config(config: ProjectConfig, project_root: Path) -> Path:
    """Save project config to .dotcraft/config.json. Returns the config path."""
    dotcraft_dir = project_root / DOTCRAFT_DIR
    dotcraft_dir.mkdir(parents=True, exist_ok=True)
    path = _config_path(project_root)
    data = {
        "version": config.version,
        "validate": config.validate,
        "log_level": config.log_level,
        "default_directed": config.default_directed,
    }
    path.write_text(json.dumps(data, indent=2) + "\n")
    return path


def load_config(project_root: Path) -> ProjectConfig:
    """Load project config from .dotcraft/config.json."""
    path = _config_path(project_root)
    if not path.exists():
        raise FileNotFoundError(f"No config found at {path}")
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Invalid config at {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"Invalid config at {path}: expected a JSON object")
    return ProjectConfig(
        version=data.get("version", "0.1.0"),
        validate=bool(data.get("validate", True)),
        log_level=str(data.get("log_level", "WARNING")).upper(),
        default_directed=bool(data.get("default_directed", True)),
    )


def load_config_or_default(project_root: Path) -> ProjectConfig:
    """Like ``load_config``, but fall back to defaults when no file exists."""
    if not is_initialized(project_root):
        return ProjectConfig()
    return load_config(project_root)


def is_initialized(project_root: Path) -> bool:
    """Check if the project has a dotcraft config."""
    return _config_path(project_root).exists()
