"""Test classes."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING, Any, Optional, Union, cast

from click.testing import CliRunner

from iackit.agents import ExecResult
from iackit.exceptions import InvalidInputError, RequiredInputError

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    import pytest

    from iackit.agents import OutputValue
    from iackit.version_manager import VersionSpec


def cli_runner_factory(request: pytest.FixtureRequest) -> CliRunner:
    """Initialize instance of `click.testing.CliRunner`."""
    kwargs: dict[str, Any] = {"env": {"IACKIT_NO_COLOR": "1", **os.environ}}
    mark = cast("pytest.Function | pytest.Item", request.node).get_closest_marker("cli_runner")
    if mark:
        kwargs.update(cast("dict[str, Any]", mark.kwargs))
    return CliRunner(**kwargs)


class MockAgent:
    """Agent that records every interaction.

    Inputs are looked up by their exact name. Calls to :meth:`exec` return the
    queued results in order, then a successful empty result.

    """

    def __init__(
        self,
        inputs: Optional[Mapping[str, str]] = None,
        exec_results: Optional[Sequence[ExecResult]] = None,
    ) -> None:
        """Instantiate class."""
        self.exec_calls: list[dict[str, Any]] = []
        self.exec_results = list(exec_results or [])
        self.failed: Optional[str] = None
        self.groups: list[str] = []
        self.inputs = dict(inputs or {})
        self.messages: dict[str, list[str]] = {
            "debug": [],
            "error": [],
            "info": [],
            "warning": [],
        }
        self.outputs: dict[str, OutputValue] = {}
        self.paths: list[str] = []

    def get_input(self, name: str, required: bool = False) -> str:
        """Get an input."""
        value = self.inputs.get(name, "").strip()
        if required and not value:
            raise RequiredInputError(name)
        return value

    def get_boolean_input(self, name: str, required: bool = False) -> bool:
        """Get a boolean input."""
        value = self.get_input(name, required)
        if value in ("", "false", "False", "FALSE"):
            return False
        if value in ("true", "True", "TRUE"):
            return True
        raise InvalidInputError(name, value, "must be a boolean")

    def get_multiline_input(self, name: str, required: bool = False) -> list[str]:
        """Get a multiline input."""
        return [i for i in self.get_input(name, required).splitlines() if i.strip()]

    def set_output(self, name: str, value: OutputValue) -> None:
        """Record an output."""
        self.outputs[name] = value

    def add_path(self, input_path: str) -> None:
        """Record a path."""
        self.paths.append(input_path)

    def debug(self, message: str) -> None:
        """Record a debug message."""
        self.messages["debug"].append(message)

    def info(self, message: str) -> None:
        """Record an info message."""
        self.messages["info"].append(message)

    def warning(self, message: str) -> None:
        """Record a warning."""
        self.messages["warning"].append(message)

    def error(self, message: Union[str, Exception]) -> None:
        """Record an error."""
        self.messages["error"].append(str(message))

    def set_failed(self, message: Union[str, Exception]) -> None:
        """Record a failure."""
        self.failed = str(message)

    def start_group(self, name: str) -> None:
        """Record the start of a group."""
        self.groups.append(name)

    def end_group(self) -> None:
        """Record the end of a group."""
        self.groups.append("endgroup")

    def exec(
        self,
        command: str,
        args: Optional[Sequence[str]] = None,
        *,
        cwd: Optional[str] = None,
        env: Optional[Mapping[str, str]] = None,
        silent: bool = False,
        ignore_return_code: bool = False,
    ) -> ExecResult:
        """Record a call and return the next queued result."""
        self.exec_calls.append(
            {
                "command": command,
                "args": list(args or []),
                "cwd": cwd,
                "env": dict(env) if env is not None else None,
                "silent": silent,
                "ignore_return_code": ignore_return_code,
            }
        )
        if self.exec_results:
            return self.exec_results.pop(0)
        return ExecResult(exit_code=0)


class MockResolver:
    """Version resolver returning a fixed result."""

    def __init__(self, spec: Optional[VersionSpec] = None) -> None:
        """Instantiate class."""
        self.calls: list[tuple[str, str, str]] = []
        self.spec = spec

    def resolve(
        self, version: str, version_file: str, working_directory: str
    ) -> Optional[VersionSpec]:
        """Record a call and return the fixed result."""
        self.calls.append((version, version_file, working_directory))
        return self.spec


class MockInstaller:
    """Version installer that installs nothing."""

    def __init__(self, root: str = "/opt/tools") -> None:
        """Instantiate class."""
        self.installed: list[str] = []
        self.root = root

    def install(self, version: str, agent: Any) -> str:
        """Record a version and return the directory it would be installed to."""
        self.installed.append(version)
        return f"{self.root}/{version}"
