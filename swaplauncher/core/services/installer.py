"""
Toolchain installer — map a platform to an install action and run it.

Two installer families:

    RemoteScriptInstaller    debian, ubuntu, darwin
        Fetches the rustup script over HTTPS (TLS 1.2+, https-only
        redirects) and pipes it to ``sh``.

    PackageManagerInstaller  arch, manjaro
        ``sudo pacman -S --noconfirm <package>``.

Any other platform has no installer and the session ends as
unsupported.  Install failures are not retried or verified: the return
code is logged and the launcher moves on to the menu.
"""

from __future__ import annotations

import logging
import shlex
from abc import ABC, abstractmethod

import click

from swaplauncher.adapters.base import Adapter, ExecutionContext
from swaplauncher.core.config.loader import LauncherConfig
from swaplauncher.core.models.action import Action, Receipt
from swaplauncher.core.models.outcome import Outcome
from swaplauncher.core.models.platform import Platform, PlatformId

logger = logging.getLogger(__name__)

INSTALL_ACTION_ID = "install-toolchain"


class Installer(ABC):
    """An OS-specific way of installing the toolchain."""

    family: str = ""

    @abstractmethod
    def command(self) -> list[str]:
        """The argv that performs the install."""

    def action(self) -> Action:
        return Action(
            id=INSTALL_ACTION_ID,
            name=f"Install toolchain ({self.family})",
            argv=self.command(),
        )

    def install(self, runner: Adapter, project_root: str = ".") -> Receipt:
        """Run the install command through ``runner`` and wait for it."""
        action = self.action()
        logger.info("Installing toolchain: %s", action.command_line)
        return runner.run(ExecutionContext(action=action, project_root=project_root))

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} family={self.family!r}>"


class RemoteScriptInstaller(Installer):
    """Fetch an install script with curl and execute it with sh."""

    family = "remote-script"

    def __init__(self, url: str):
        self.url = url

    def command(self) -> list[str]:
        fetch = f"curl --proto '=https' --tlsv1.2 -sSf {shlex.quote(self.url)}"
        return ["sh", "-c", f"{fetch} | sh"]


class PackageManagerInstaller(Installer):
    """Install the toolchain package with pacman, non-interactively."""

    family = "pacman"

    def __init__(self, package: str):
        self.package = package

    def command(self) -> list[str]:
        return ["sudo", "pacman", "-S", "--noconfirm", self.package]


_REMOTE_SCRIPT_PLATFORMS = frozenset({
    PlatformId.DEBIAN, PlatformId.UBUNTU, PlatformId.DARWIN,
})
_PACMAN_PLATFORMS = frozenset({PlatformId.ARCH, PlatformId.MANJARO})


def resolve_installer(platform: Platform, config: LauncherConfig) -> Installer | None:
    """Pick the installer for ``platform``, or None if there is none."""
    kind = platform.kind
    if kind in _REMOTE_SCRIPT_PLATFORMS:
        return RemoteScriptInstaller(config.toolchain.installer_url)
    if kind in _PACMAN_PLATFORMS:
        return PackageManagerInstaller(config.toolchain.package)
    return None


def install_toolchain(
    platform: Platform,
    runner: Adapter,
    config: LauncherConfig,
) -> Outcome | None:
    """Install the toolchain for ``platform``.

    Returns:
        None once the install command has run, whatever its result.
        An ``unsupported`` Outcome when the platform has no installer;
        nothing is executed in that case.
    """
    installer = resolve_installer(platform, config)
    if installer is None:
        logger.warning("No installer for platform %r", platform.raw_id)
        return Outcome.unsupported()

    click.echo(f"Installing {config.toolchain.command} for {platform.raw_id}...")
    receipt = installer.install(runner, project_root=str(config.project_root))
    if receipt.failed:
        logger.warning(
            "Toolchain install exited with code %s: %s",
            receipt.return_code, receipt.error,
        )
    return None
