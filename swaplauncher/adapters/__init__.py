"""Adapters — the launcher's only way to start child processes.

Public re-exports for convenient access.
"""

from swaplauncher.adapters.base import Adapter, ExecutionContext
from swaplauncher.adapters.mock import MockAdapter
from swaplauncher.adapters.shell.command import ShellCommandAdapter

__all__ = [
    "Adapter",
    "ExecutionContext",
    "MockAdapter",
    "ShellCommandAdapter",
]
