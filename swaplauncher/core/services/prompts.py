"""
Interactive gates — blocking questions on stdin.

Two flavours:

- :func:`confirm` — a yes/no question.  The first character decides
  (``y``/``n``, any case); anything else asks again.  There is no
  default, so an empty line asks again too.
- :func:`notice_gate` — the manual-configuration warning shown before a
  named scenario.  Only the exact string ``yes`` lets the run proceed.

Neither gate exits the process.  They return a bool and the launcher
decides what a refusal means.

Both take an ``ask`` callable (question in, raw answer out) so tests can
script the answers.  The default reads through click.
"""

from __future__ import annotations

from typing import Callable

import click

from swaplauncher.core.models.scenario import Scenario

Ask = Callable[[str], str]

NOTICE_CONFIRMATION = "yes"


def click_ask(question: str) -> str:
    """Read one raw line from the user.  An empty line is ``""``."""
    return click.prompt(question, default="", show_default=False, prompt_suffix=" ")


def confirm(question: str, ask: Ask = click_ask) -> bool:
    """Ask a yes/no question until the answer is recognisable."""
    while True:
        answer = ask(f"{question} (y/n)")
        first = answer.strip()[:1].lower()
        if first == "y":
            return True
        if first == "n":
            return False
        click.echo("Please answer yes or no.")


def notice_gate(scenario: Scenario, ask: Ask = click_ask) -> bool:
    """Warn that ``scenario`` needs hand-edited test variables.

    Returns True only if the user types exactly ``yes``.
    """
    click.echo()
    click.echo(f"The {scenario.label.lower()} test lives in {scenario.path}.")
    click.secho(
        f"WARNING: update the variables in {scenario.path} by hand "
        "before running this test, or its results are meaningless.",
        bold=True,
    )
    answer = ask(f"Type '{NOTICE_CONFIRMATION}' once {scenario.path} is updated:")
    return answer == NOTICE_CONFIRMATION
