"""Configuration schema — dataclasses for every config section."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

OutputFormat = Literal["terminal", "json", "yaml"]
LogLevel = Literal["debug", "info", "warning", "error"]

OUTPUT_FORMATS = ("terminal", "json", "yaml")


@dataclass
class GitConfig:
    binary: str = "git"
    timeout: int = 30  # seconds per git invocation


@dataclass
class OutputConfig:
    format: OutputFormat = "terminal"
    show_summary: bool = True


@dataclass
class LoggingConfig:
    level: LogLevel = "warning"


@dataclass
class GitPaneConfig:
    version: str = "1.0"
    git: GitConfig = field(default_factory=GitConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
