"""Shared pytest fixtures for the gostarter test suite.

Provides reusable fixtures for:
- Sample project configurations (the end-to-end scenarios included)
- A mocked ``run_command`` so no real ``go`` or ``git`` is needed
- A scripted prompt driver for the interactive wizard
"""

from __future__ import annotations

from typing import Any, Callable
from unittest.mock import AsyncMock, patch

import pytest

from gostarter.scaffolder.models import Database, Framework, ProjectConfig


# ---------------------------------------------------------------------------
# Project configurations
# ---------------------------------------------------------------------------

@pytest.fixture
def gin_sqlite_config() -> ProjectConfig:
    """alice/demo1: Gin + SQLite, no logging."""
    return ProjectConfig(
        github_user_id="alice",
        project_name="demo1",
        framework=Framework.GIN,
        database=Database.SQLITE,
        logging=False,
    )


@pytest.fixture
def echo_mongo_logging_config() -> ProjectConfig:
    """bob/demo2: Echo + MongoDB with the logging middleware."""
    return ProjectConfig(
        github_user_id="bob",
        project_name="demo2",
        framework=Framework.ECHO,
        database=Database.MONGODB,
        logging=True,
    )



# ---------------------------------------------------------------------------
# Subprocess mocking
# ---------------------------------------------------------------------------

@pytest.fixture
def mock_run_command():
    """Patch ``run_command`` in the materializer to succeed without spawning."""
    mock = AsyncMock(return_value=(0, "", ""))
    with patch("gostarter.scaffolder.materializer.run_command", new=mock):
        yield mock


# ---------------------------------------------------------------------------
# Prompt scripting
# ---------------------------------------------------------------------------

class ScriptedPrompt:
    """Callable that replays answers in order and records the questions."""

    def __init__(self, answers: list[Any]) -> None:
        self.answers = list(answers)
        self.questions: list[str] = []
        self.kwargs: list[dict[str, Any]] = []

    def __call__(self, prompt: str, **kwargs: Any) -> Any:
        self.questions.append(prompt)
        self.kwargs.append(kwargs)
        if not self.answers:
            raise AssertionError(f"unexpected prompt: {prompt!r}")
        return self.answers.pop(0)


@pytest.fixture
def scripted() -> Callable[[list[Any]], ScriptedPrompt]:
    """Factory for ``ScriptedPrompt`` instances."""
    return ScriptedPrompt
