"""Toolchain presence check."""

from __future__ import annotations

import logging
import shutil
from typing import Callable

import click

logger = logging.getLogger(__name__)


def toolchain_present(
    command: str = "cargo",
    which: Callable[[str], str | None] | None = None,
) -> bool:
    """Report whether ``command`` resolves on PATH.

    Echoes a one-line status either way.  Absence is not an error.
    """
    which = which or shutil.which
    path = which(command)
    if path:
        logger.debug("%s found at %s", command, path)
        click.echo(f"{command} is installed.")
        return True

    click.echo(f"{command} is not installed.")
    return False
