"""Launcher configuration (launcher.yml)."""

from swaplauncher.core.config.loader import (
    LAUNCHER_CONFIG_FILE,
    ConfigError,
    LauncherConfig,
    RunnerConfig,
    ToolchainConfig,
    find_config_file,
    load_config,
)

__all__ = [
    "LAUNCHER_CONFIG_FILE",
    "ConfigError",
    "LauncherConfig",
    "RunnerConfig",
    "ToolchainConfig",
    "find_config_file",
    "load_config",
]
