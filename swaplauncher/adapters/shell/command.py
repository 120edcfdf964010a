"""
Shell command adapter — run a child process in the foreground.

Unlike a capture-and-report runner, this one hands the terminal to the
child: rustup asks its own questions, sudo asks for a password, and
cargo streams test output as it goes.  Only the return code comes back.
"""

from __future__ import annotations

import logging
import subprocess
import time
from pathlib import Path

from swaplauncher.adapters.base import Adapter, ExecutionContext
from swaplauncher.core.models.action import Receipt

logger = logging.getLogger(__name__)

# Conventional shell status for "command not found"
_NOT_FOUND_CODE = 127


class ShellCommandAdapter(Adapter):
    """Execute an Action's argv in the project root and wait for it."""

    @property
    def name(self) -> str:
        return "shell"

    def validate(self, context: ExecutionContext) -> tuple[bool, str]:
        if not context.action.argv:
            return False, "Action has an empty argv"

        cwd = context.working_dir
        if cwd and not Path(cwd).is_dir():
            return False, f"Working directory does not exist: {cwd}"

        return True, ""

    def execute(self, context: ExecutionContext) -> Receipt:
        action = context.action
        cwd = context.working_dir

        logger.debug("Executing: %s (cwd=%s)", action.command_line, cwd)
        start = time.monotonic()

        try:
            result = subprocess.run(action.argv, cwd=cwd)
        except FileNotFoundError:
            return Receipt.failure(
                adapter=self.name,
                action_id=action.id,
                error=f"Command not found: {action.argv[0]}",
                return_code=_NOT_FOUND_CODE,
            )
        except OSError as e:
            return Receipt.failure(
                adapter=self.name,
                action_id=action.id,
                error=f"Command execution error: {e}",
                return_code=1,
            )

        elapsed_ms = int((time.monotonic() - start) * 1000)
        logger.debug("Exit %d after %dms: %s", result.returncode, elapsed_ms, action.command_line)

        if result.returncode == 0:
            return Receipt.success(
                adapter=self.name,
                action_id=action.id,
                duration_ms=elapsed_ms,
            )
        return Receipt.failure(
            adapter=self.name,
            action_id=action.id,
            error=f"{action.argv[0]} exited with code {result.returncode}",
            return_code=result.returncode,
            duration_ms=elapsed_ms,
            launched=True,
        )
