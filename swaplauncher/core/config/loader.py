"""
Configuration loader — reads launcher.yml into a typed config.

The file is optional.  Without one, the built-in defaults describe a
Cargo project installed through rustup or pacman.  With one, it is read
as YAML, validated against the Pydantic schema below, and its directory
becomes the project root the test runner is started in.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError

logger = logging.getLogger(__name__)

# Default config filename
LAUNCHER_CONFIG_FILE = "launcher.yml"


class ConfigError(Exception):
    """Raised when launcher configuration is invalid or unreadable."""


class ToolchainConfig(BaseModel):
    """The build toolchain and how to install it."""

    command: str = Field(default="cargo", min_length=1)
    package: str = "rust"                       # pacman package name
    installer_url: str = "https://sh.rustup.rs"  # remote install script


class RunnerConfig(BaseModel):
    """How to invoke the test runner."""

    command: list[str] = Field(default_factory=lambda: ["cargo", "test"], min_length=1)
    # Appended after ``--`` for the named scenarios only
    flags: list[str] = Field(
        default_factory=lambda: ["--nocapture", "--include-ignored"],
    )


class LauncherConfig(BaseModel):
    """Root configuration — loaded from launcher.yml or defaulted."""

    toolchain: ToolchainConfig = Field(default_factory=ToolchainConfig)
    runner: RunnerConfig = Field(default_factory=RunnerConfig)

    # Not part of the file; set by the loader
    project_root: Path = Field(default_factory=Path.cwd, exclude=True)


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Search for launcher.yml starting from the given directory, walking up.

    Args:
        start_dir: Directory to start searching from (default: cwd).

    Returns:
        Path to launcher.yml, or None if not found.
    """
    current = (start_dir or Path.cwd()).resolve()

    for _ in range(20):  # safety limit
        candidate = current / LAUNCHER_CONFIG_FILE
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break  # filesystem root
        current = parent

    return None


def load_config(path: Path | None = None) -> LauncherConfig:
    """Load and validate launcher configuration.

    Args:
        path: Explicit path to launcher.yml. If None, searches upward
            and falls back to defaults when nothing is found.

    Returns:
        Validated LauncherConfig.

    Raises:
        ConfigError: If an explicit file is missing, or any file is invalid.
    """
    if path is None:
        path = find_config_file()

    if path is None:
        logger.debug("No %s found, using defaults", LAUNCHER_CONFIG_FILE)
        return LauncherConfig(project_root=Path.cwd())

    if not path.is_file():
        raise ConfigError(f"Config file not found: {path}")

    logger.debug("Loading launcher config from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    try:
        config = LauncherConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid launcher configuration: {e}") from e

    config.project_root = path.parent.resolve()
    logger.info("Loaded launcher config from %s", path)
    return config
