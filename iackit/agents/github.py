"""GitHub Actions agent."""

from __future__ import annotations

import logging
import os
import shlex
import subprocess
import sys
import uuid
from pathlib import Path
from typing import TYPE_CHECKING, Optional, TextIO, Union, cast

from ..exceptions import InvalidInputError, RequiredInputError
from .models import ExecResult

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from .._logging import IacKitLogger
    from .protocols import OutputValue

LOGGER = cast("IacKitLogger", logging.getLogger(__name__))

TRUE_VALUES = ("true", "True", "TRUE")
FALSE_VALUES = ("false", "False", "FALSE")


def escape_data(value: str) -> str:
    """Escape the message part of a workflow command."""
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


class GitHubActionsAgent:
    """Run inside a GitHub Actions step.

    Inputs are read from ``INPUT_<NAME>`` environment variables. Outputs and
    path changes are written to the files GitHub provides through
    ``GITHUB_OUTPUT`` and ``GITHUB_PATH``. Annotations and groups are written
    to ``stream`` as workflow commands.

    """

    def __init__(
        self,
        *,
        environ: Optional[dict[str, str]] = None,
        stream: Optional[TextIO] = None,
    ) -> None:
        """Instantiate class.

        Args:
            environ: Environment to read inputs from and update. Defaults to
                :data:`os.environ`.
            stream: Where workflow commands are written. Defaults to
                :data:`sys.stdout`.

        """
        self.environ = os.environ if environ is None else environ
        self.failed = False
        self.stream = stream or sys.stdout

    def _issue(self, command: str, message: str = "") -> None:
        self.stream.write(f"::{command}::{escape_data(message)}\n")
        self.stream.flush()

    def get_input(self, name: str, required: bool = False) -> str:
        """Get the value of an input.

        Args:
            name: Name of the input as defined in ``action.yml``.
            required: Raise if the input is empty.

        Raises:
            RequiredInputError: ``required`` is set and the input is empty.

        """
        value = self.environ.get(f"INPUT_{name.replace(' ', '_').upper()}", "").strip()
        if required and not value:
            raise RequiredInputError(name)
        LOGGER.debug("input %s=%s", name, value)
        return value

    def get_boolean_input(self, name: str, required: bool = False) -> bool:
        """Get the value of an input as a boolean.

        Values follow the YAML 1.2 core schema. An empty optional input is
        ``False``.

        Raises:
            InvalidInputError: The value is not a recognized boolean.
            RequiredInputError: ``required`` is set and the input is empty.

        """
        value = self.get_input(name, required)
        if not value:
            return False
        if value in TRUE_VALUES:
            return True
        if value in FALSE_VALUES:
            return False
        raise InvalidInputError(
            name, value, "must be one of: " + " | ".join(TRUE_VALUES + FALSE_VALUES)
        )

    def get_multiline_input(self, name: str, required: bool = False) -> list[str]:
        """Get the non-empty lines of an input."""
        return [line for line in self.get_input(name, required).splitlines() if line.strip()]

    def set_output(self, name: str, value: OutputValue) -> None:
        """Set the value of an output.

        Uses the ``GITHUB_OUTPUT`` file when available and falls back to the
        ``set-output`` workflow command.

        """
        text = str(value).lower() if isinstance(value, bool) else str(value)
        output_file = self.environ.get("GITHUB_OUTPUT")
        if not output_file:
            self.stream.write("\n")
            self._issue(f"set-output name={name}", text)
            return
        delimiter = f"ghadelimiter_{uuid.uuid4()}"
        with Path(output_file).open("a", encoding="utf-8") as handle:
            handle.write(f"{name}<<{delimiter}\n{text}\n{delimiter}\n")

    def add_path(self, input_path: str) -> None:
        """Prepend a directory to ``PATH`` for this and later steps."""
        path_file = self.environ.get("GITHUB_PATH")
        if path_file:
            with Path(path_file).open("a", encoding="utf-8") as handle:
                handle.write(f"{input_path}\n")
        else:
            self._issue("add-path", input_path)
        current = self.environ.get("PATH")
        self.environ["PATH"] = f"{input_path}{os.pathsep}{current}" if current else input_path

    def debug(self, message: str) -> None:
        """Write a debug message (only shown when step debugging is enabled)."""
        self._issue("debug", message)

    def info(self, message: str) -> None:
        """Write an informational message."""
        LOGGER.info(message)

    def warning(self, message: str) -> None:
        """Write a warning annotation."""
        self._issue("warning", message)

    def error(self, message: Union[str, Exception]) -> None:
        """Write an error annotation."""
        self._issue("error", str(message))

    def set_failed(self, message: Union[str, Exception]) -> None:
        """Write an error annotation and mark the step as failed."""
        self.failed = True
        self.error(message)

    def start_group(self, name: str) -> None:
        """Start a collapsible group of log lines."""
        self._issue("group", name)

    def end_group(self) -> None:
        """End the current group of log lines."""
        self._issue("endgroup")

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
        """Execute a command and capture its output.

        The command is never passed through a shell so values containing shell
        metacharacters are delivered to the process unchanged.

        Args:
            command: Executable to run.
            args: Arguments passed to the executable.
            cwd: Working directory of the process.
            env: Variables added to the environment of the process.
            silent: Do not echo the output of the process to ``stream``.
            ignore_return_code: Return a non-zero exit code instead of raising.

        Raises:
            subprocess.CalledProcessError: The process exited non-zero and
                ``ignore_return_code`` is not set.

        """
        cmd_list = [command, *(args or [])]
        LOGGER.verbose("running command: %s", shlex.join(cmd_list))
        proc = subprocess.run(  # noqa: S603
            cmd_list,
            capture_output=True,
            check=False,
            cwd=cwd,
            env={**self.environ, **env} if env else dict(self.environ),
            text=True,
        )
        if not silent:
            if proc.stdout:
                self.stream.write(proc.stdout)
            if proc.stderr:
                self.stream.write(proc.stderr)
            self.stream.flush()
        if proc.returncode and not ignore_return_code:
            raise subprocess.CalledProcessError(
                proc.returncode, cmd_list, output=proc.stdout, stderr=proc.stderr
            )
        return ExecResult(exit_code=proc.returncode, stdout=proc.stdout, stderr=proc.stderr)
