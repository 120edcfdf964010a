"""
Shared test fixtures and configuration.
"""

from pathlib import Path

import pytest

from swaplauncher.adapters.mock import MockAdapter
from swaplauncher.core.config.loader import LauncherConfig


class ScriptedAnswers:
    """Stand-in for the interactive ``ask`` callable.

    Returns the given answers in order and records every question.
    Running out of answers fails the test instead of blocking.
    """

    def __init__(self, *answers: str):
        self._answers = list(answers)
        self.questions: list[str] = []

    def __call__(self, question: str) -> str:
        self.questions.append(question)
        if not self._answers:
            raise AssertionError(f"Unexpected prompt: {question!r}")
        return self._answers.pop(0)

    @property
    def remaining(self) -> int:
        return len(self._answers)


@pytest.fixture
def answers():
    """Factory: ``answers("y", "3", "yes")``."""
    return ScriptedAnswers


@pytest.fixture
def mock_runner() -> MockAdapter:
    """A command adapter that records actions and runs nothing."""
    return MockAdapter()


@pytest.fixture
def config(tmp_path: Path) -> LauncherConfig:
    """Default launcher config rooted in a temporary directory."""
    return LauncherConfig(project_root=tmp_path)


@pytest.fixture
def os_release(tmp_path: Path):
    """Factory: write an os-release file and return its path."""

    def _write(content: str) -> Path:
        path = tmp_path / "os-release"
        path.write_text(content)
        return path

    return _write
