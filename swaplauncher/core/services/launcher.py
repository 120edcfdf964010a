"""
Launcher flow — the whole interactive session, start to finish.

    check toolchain ──present──────────────────────┐
         │ absent                                  │
    confirm install ──no──▶ cancelled (exit 1)     │
         │ yes                                     │
    install ──no installer──▶ unsupported (exit 1) │
         │                                         │
    menu ◀─────────────────────────────────────────┘
      ├─ 1..4 ─▶ notice ──not "yes"──▶ cancelled (exit 1)
      │             └─ "yes" ─▶ flagged test run ─▶ completed
      ├─ 5 ────▶ plain test run ─▶ completed
      └─ other ─▶ noop (exit 0)

Every branch returns an Outcome.  Nothing here calls ``sys.exit``.
"""

from __future__ import annotations

import logging
from typing import Callable

import click

from swaplauncher.adapters.base import Adapter
from swaplauncher.core.config.loader import LauncherConfig
from swaplauncher.core.models.outcome import Outcome
from swaplauncher.core.models.platform import Platform
from swaplauncher.core.services.installer import install_toolchain
from swaplauncher.core.services.invocation import run_scenario
from swaplauncher.core.services.menu import render_menu, resolve_choice
from swaplauncher.core.services.prompts import Ask, click_ask, confirm, notice_gate
from swaplauncher.core.services.toolchain import toolchain_present

logger = logging.getLogger(__name__)


def run_launcher(
    platform: Platform,
    *,
    runner: Adapter,
    config: LauncherConfig | None = None,
    ask: Ask = click_ask,
    which: Callable[[str], str | None] | None = None,
) -> Outcome:
    """Run one interactive session and report how it ended."""
    config = config or LauncherConfig()
    toolchain = config.toolchain.command

    if not toolchain_present(toolchain, which=which):
        if not confirm(f"Do you want to install {toolchain}?", ask=ask):
            return Outcome.cancelled("Installation aborted.")
        refused = install_toolchain(platform, runner, config)
        if refused is not None:
            return refused

    click.echo()
    click.echo(render_menu())
    scenario = resolve_choice(ask("Enter your choice (1-5):"))
    if scenario is None:
        logger.debug("Menu input did not match any choice")
        return Outcome.noop("Invalid choice")

    if scenario.requires_notice and not notice_gate(scenario, ask=ask):
        return Outcome.cancelled("Exiting...")

    receipt = run_scenario(scenario, runner, config)
    return Outcome.completed(receipt)
