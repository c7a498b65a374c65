"""Protocols for structural typing of CI agents.

For more information on protocols, refer to
`PEP 544 <https://www.python.org/dev/peps/pep-0544/>`__.

"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Optional, Union

from typing_extensions import Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from .models import ExecResult

OutputValue = Union[str, int, bool]


@runtime_checkable
class ToolAgentProtocol(Protocol):
    """The subset of an agent needed to detect and install tool versions."""

    @abstractmethod
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
        """Execute a command without a shell and capture its output.

        Args:
            command: Executable to run.
            args: Arguments passed to the executable.
            cwd: Working directory of the process.
            env: Variables added to the environment of the process.
            silent: Do not echo the output of the process.
            ignore_return_code: Return a non-zero exit code instead of raising.

        """
        raise NotImplementedError

    @abstractmethod
    def add_path(self, input_path: str) -> None:
        """Prepend a directory to ``PATH`` for this and later steps."""
        raise NotImplementedError

    @abstractmethod
    def info(self, message: str) -> None:  # noqa: D102
        raise NotImplementedError

    @abstractmethod
    def warning(self, message: str) -> None:  # noqa: D102
        raise NotImplementedError

    @abstractmethod
    def debug(self, message: str) -> None:  # noqa: D102
        raise NotImplementedError


@runtime_checkable
class AgentProtocol(ToolAgentProtocol, Protocol):
    """Adapter for a CI system (GitHub Actions, GitLab CI, etc.)."""

    @abstractmethod
    def get_input(self, name: str, required: bool = False) -> str:
        """Get the value of an input.

        Raises:
            RequiredInputError: ``required`` is set and the input is empty.

        """
        raise NotImplementedError

    @abstractmethod
    def get_boolean_input(self, name: str, required: bool = False) -> bool:
        """Get the value of an input as a boolean."""
        raise NotImplementedError

    @abstractmethod
    def get_multiline_input(self, name: str, required: bool = False) -> list[str]:
        """Get the non-empty lines of an input."""
        raise NotImplementedError

    @abstractmethod
    def set_output(self, name: str, value: OutputValue) -> None:
        """Set the value of an output."""
        raise NotImplementedError

    @abstractmethod
    def error(self, message: Union[str, Exception]) -> None:  # noqa: D102
        raise NotImplementedError

    @abstractmethod
    def set_failed(self, message: Union[str, Exception]) -> None:
        """Mark the step as failed."""
        raise NotImplementedError

    @abstractmethod
    def start_group(self, name: str) -> None:
        """Start a collapsible group of log lines."""
        raise NotImplementedError

    @abstractmethod
    def end_group(self) -> None:
        """End the current group of log lines."""
        raise NotImplementedError
