"""Pytest fixtures and plugins."""

from __future__ import annotations

import io
from typing import TYPE_CHECKING, Callable

import pytest

from iackit.agents import GitHubActionsAgent

from ..factories import MockAgent

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture()
def mock_agent() -> Callable[..., MockAgent]:
    """Create a :class:`~tests.factories.MockAgent`."""
    return MockAgent


@pytest.fixture()
def github_environ(tmp_path: Path) -> dict[str, str]:
    """Environment of a GitHub Actions step."""
    (tmp_path / "github_output").touch()
    (tmp_path / "github_path").touch()
    return {
        "GITHUB_OUTPUT": str(tmp_path / "github_output"),
        "GITHUB_PATH": str(tmp_path / "github_path"),
        "PATH": "/usr/bin",
    }


@pytest.fixture()
def github_agent(github_environ: dict[str, str]) -> GitHubActionsAgent:
    """GitHub Actions agent writing workflow commands to a buffer."""
    return GitHubActionsAgent(environ=github_environ, stream=io.StringIO())
