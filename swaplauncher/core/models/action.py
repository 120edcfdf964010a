"""
Action and Receipt models — the command contract.

Actions describe a child process to run. Receipts describe how it ended.
Services hand Actions to an adapter and get Receipts back, never
exceptions: a failing installer or test run is data, not control flow.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field


class Action(BaseModel):
    """A child process the launcher wants to run.

    The argv is run as-is (no shell) in the foreground, inheriting the
    terminal so the user sees the command's own output and prompts.
    """

    id: str                         # e.g. "install-toolchain", "run-tests"
    name: str = ""                  # human-readable name
    argv: list[str] = Field(default_factory=list)

    @property
    def command_line(self) -> str:
        """The argv joined for display and logging."""
        return " ".join(self.argv)


class Receipt(BaseModel):
    """Result of running an Action.

    ``return_code`` is the child's exit status, passed through untouched.
    It is ``None`` only when the adapter never got to start a process
    and had no better code to report.

    ``launched`` is True when the child actually ran.  A failure of a
    launched child has already spoken for itself on the terminal; only
    failures the adapter produced (bad argv, command not found) carry
    an ``error`` worth showing the user.
    """

    adapter: str
    action_id: str
    status: Literal["ok", "failed"] = "ok"
    duration_ms: int = 0

    launched: bool = False
    return_code: int | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        """Whether the action succeeded."""
        return self.status == "ok"

    @property
    def failed(self) -> bool:
        """Whether the action failed."""
        return self.status == "failed"

    @property
    def user_error(self) -> str:
        """The error to surface to the user, empty for child failures."""
        if self.failed and not self.launched:
            return self.error or ""
        return ""

    @classmethod
    def success(
        cls,
        adapter: str,
        action_id: str,
        **kwargs: Any,
    ) -> Receipt:
        """Create a success receipt."""
        kwargs.setdefault("return_code", 0)
        kwargs.setdefault("launched", True)
        return cls(
            adapter=adapter,
            action_id=action_id,
            status="ok",
            **kwargs,
        )

    @classmethod
    def failure(
        cls,
        adapter: str,
        action_id: str,
        error: str,
        **kwargs: Any,
    ) -> Receipt:
        """Create a failure receipt."""
        return cls(
            adapter=adapter,
            action_id=action_id,
            status="failed",
            error=error,
            **kwargs,
        )
