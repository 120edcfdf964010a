"""
Adapter base — the protocol contract between services and child processes.

Services never call subprocess directly.  They describe what to run as
an Action, hand it to an adapter, and read the Receipt.  That keeps the
installer and the test runner swappable for a MockAdapter in tests, so
nothing under test touches the network or a package manager.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from pydantic import BaseModel

from swaplauncher.core.models.action import Action, Receipt


class ExecutionContext(BaseModel):
    """Everything an adapter needs to execute an action."""

    action: Action
    project_root: str = "."

    @property
    def working_dir(self) -> str:
        """Directory the action runs in."""
        return self.project_root


class Adapter(ABC):
    """Abstract base class for all adapters.

    Adapters perform external side effects and return receipts.
    They NEVER raise exceptions — failures are captured in the Receipt.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """The adapter identifier (e.g., 'shell', 'mock')."""

    @abstractmethod
    def validate(self, context: ExecutionContext) -> tuple[bool, str]:
        """Validate that the action can be executed.

        Returns:
            (is_valid, error_message). error_message is empty if valid.
        """

    @abstractmethod
    def execute(self, context: ExecutionContext) -> Receipt:
        """Execute the action and return a receipt.

        MUST never raise exceptions. All failures are captured
        in the Receipt with status='failed'.
        """

    def run(self, context: ExecutionContext) -> Receipt:
        """Validate, then execute.  An invalid action is a failed receipt."""
        valid, error = self.validate(context)
        if not valid:
            return Receipt.failure(
                adapter=self.name,
                action_id=context.action.id,
                error=error,
            )
        return self.execute(context)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.name!r}>"
