"""Load and merge configuration from .gitpane.toml and env vars."""

from __future__ import annotations

import dataclasses
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from gitpane.config.schema import (
    OUTPUT_FORMATS,
    GitConfig,
    GitPaneConfig,
    LoggingConfig,
    OutputConfig,
)
from gitpane.log import LOG_LEVELS

CONFIG_FILENAME = ".gitpane.toml"


class ConfigError(Exception):
    """Raised when config is malformed or unreadable."""


def find_config_file(repo_root: Path, override: Optional[str] = None) -> Optional[Path]:
    """Locate the config file. *override* takes precedence."""
    if override:
        p = Path(override)
        if not p.is_file():
            raise ConfigError(f"Config file not found: {override}")
        return p
    candidate = repo_root / CONFIG_FILENAME
    return candidate if candidate.is_file() else None


def _parse_toml(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"Failed to parse {path}: {exc}") from exc


def _merge_env_overrides(cfg: GitPaneConfig) -> None:
    """Apply GITPANE_* environment variable overrides."""
    if val := os.environ.get("GITPANE_FORMAT"):
        if val in OUTPUT_FORMATS:
            cfg.output.format = val  # type: ignore[assignment]
    if val := os.environ.get("GITPANE_LOG_LEVEL"):
        if val.lower() in LOG_LEVELS:
            cfg.logging.level = val.lower()  # type: ignore[assignment]
    if val := os.environ.get("GITPANE_GIT_TIMEOUT"):
        try:
            timeout = int(val)
        except ValueError:
            timeout = 0
        if timeout > 0:
            cfg.git.timeout = timeout


def _build_section(data: Dict[str, Any], cls: type, section: str):
    """Build a dataclass from a TOML section dict, ignoring unknown keys."""
    section_data = data.get(section, {})
    if not isinstance(section_data, dict):
        raise ConfigError(f"section {section!r} must be a table, got {type(section_data).__name__}")
    valid_fields = {f.name for f in dataclasses.fields(cls)}
    filtered = {k: v for k, v in section_data.items() if k in valid_fields}
    return cls(**filtered)


def load_config(
    repo_root: Path,
    config_override: Optional[str] = None,
) -> GitPaneConfig:
    """Load, validate, and return a GitPaneConfig."""
    config_path = find_config_file(repo_root, config_override)

    if config_path is None:
        cfg = GitPaneConfig()
    else:
        raw = _parse_toml(config_path)
        cfg = GitPaneConfig(
            version=raw.get("version", "1.0"),
            git=_build_section(raw, GitConfig, "git"),
            output=_build_section(raw, OutputConfig, "output"),
            logging=_build_section(raw, LoggingConfig, "logging"),
        )
        _validate(cfg, config_path)

    _merge_env_overrides(cfg)
    return cfg


def _validate(cfg: GitPaneConfig, path: Path) -> None:
    if cfg.output.format not in OUTPUT_FORMATS:
        raise ConfigError(f"{path}: unknown output format {cfg.output.format!r}")
    if cfg.logging.level not in LOG_LEVELS:
        raise ConfigError(f"{path}: unknown log level {cfg.logging.level!r}")
    if not isinstance(cfg.git.timeout, int) or cfg.git.timeout <= 0:
        raise ConfigError(f"{path}: git.timeout must be a positive integer")
