"""
Outcome model — how a launcher run ended.

The flow never exits the process itself. It returns an Outcome and the
CLI entrypoint turns that into a message and an exit code.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel

from swaplauncher.core.models.action import Receipt


class Outcome(BaseModel):
    """Terminal state of one interactive session."""

    status: Literal["completed", "cancelled", "unsupported", "noop"]
    exit_code: int = 0
    message: str = ""
    receipt: Receipt | None = None   # the test run, when one happened

    @property
    def is_error(self) -> bool:
        """Whether the session ended on a refusal or a failure."""
        return self.exit_code != 0

    @classmethod
    def completed(cls, receipt: Receipt) -> Outcome:
        """A test run happened; its return code is passed through.

        A test binary that ran and failed has already printed its own
        report, so only failures to start it carry a message.
        """
        code = receipt.return_code
        if code is None:
            code = 0 if receipt.ok else 1
        return cls(
            status="completed",
            exit_code=code,
            message=receipt.user_error,
            receipt=receipt,
        )

    @classmethod
    def cancelled(cls, message: str) -> Outcome:
        """The user declined a confirmation."""
        return cls(status="cancelled", exit_code=1, message=message)

    @classmethod
    def unsupported(cls, message: str = "Unsupported operating system") -> Outcome:
        """The host cannot be bootstrapped."""
        return cls(status="unsupported", exit_code=1, message=message)

    @classmethod
    def noop(cls, message: str = "") -> Outcome:
        """Nothing to do; a clean exit."""
        return cls(status="noop", exit_code=0, message=message)
