"""
swaplauncher — CLI entrypoint.

Usage:
    swaplauncher
    python -m swaplauncher --verbose

There are no subcommands: the launcher checks for the toolchain, offers
to install it, then asks which test scenario to run.
"""

from __future__ import annotations

import sys
from pathlib import Path

import click

from swaplauncher import __version__
from swaplauncher.core.observability.logging_config import (
    resolve_level,
    setup_logging_from_env,
)


@click.command()
@click.version_option(version=__version__, prog_name="swaplauncher")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential log output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False),
    default=None,
    help="Path to launcher.yml (default: auto-detect).",
)
def cli(
    verbose: bool,
    quiet: bool,
    debug: bool,
    config_path: str | None,
) -> None:
    """Install the toolchain if needed, then run a swap test scenario."""
    # ── Logging setup (once, at process start) ──────────────────
    setup_logging_from_env(resolve_level(debug=debug, verbose=verbose, quiet=quiet))

    from swaplauncher.adapters.shell.command import ShellCommandAdapter
    from swaplauncher.core.config.loader import ConfigError, load_config
    from swaplauncher.core.services.launcher import run_launcher
    from swaplauncher.core.services.os_detect import detect_platform

    try:
        config = load_config(Path(config_path) if config_path else None)
    except ConfigError as e:
        click.secho(f"❌ {e}", fg="red")
        sys.exit(1)

    platform = detect_platform()
    outcome = run_launcher(platform, runner=ShellCommandAdapter(), config=config)

    if outcome.message:
        if outcome.is_error:
            click.secho(outcome.message, fg="red")
        else:
            click.echo(outcome.message)
    sys.exit(outcome.exit_code)


if __name__ == "__main__":
    cli()
