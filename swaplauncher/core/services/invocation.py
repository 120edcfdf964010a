"""
Test invocation — build and run the test-runner command.

Named scenarios run filtered, with output capture disabled and ignored
tests included::

    cargo test liquid_submarine -- --nocapture --include-ignored

The unit-test entry runs the default set with default flags::

    cargo test

The runner's output streams straight to the terminal; its return code
comes back in the receipt untouched.
"""

from __future__ import annotations

import logging

import click

from swaplauncher.adapters.base import Adapter, ExecutionContext
from swaplauncher.core.config.loader import LauncherConfig
from swaplauncher.core.models.action import Action, Receipt
from swaplauncher.core.models.scenario import Scenario

logger = logging.getLogger(__name__)

TEST_ACTION_ID = "run-tests"


def build_test_command(scenario: Scenario, config: LauncherConfig) -> list[str]:
    """Return the runner argv for ``scenario``."""
    argv = list(config.runner.command)
    if scenario.is_unit_tests:
        return argv
    argv.append(scenario.name)
    if config.runner.flags:
        argv.append("--")
        argv.extend(config.runner.flags)
    return argv


def run_scenario(scenario: Scenario, runner: Adapter, config: LauncherConfig) -> Receipt:
    """Announce and run ``scenario``, returning the runner's receipt."""
    if scenario.is_unit_tests:
        click.echo("Running all unit tests...")
    else:
        click.echo(f"Running test: {scenario.name}")

    action = Action(
        id=TEST_ACTION_ID,
        name=scenario.label,
        argv=build_test_command(scenario, config),
    )
    logger.info("Test command: %s", action.command_line)
    return runner.run(ExecutionContext(action=action, project_root=str(config.project_root)))
