"""iackit exceptions."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Iterable


class IacKitError(Exception):
    """Base class for custom exceptions raised by iackit."""

    message: str = ""
    """Error message."""

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        """Instantiate class."""
        if self.message:
            super().__init__(self.message, *args, **kwargs)
        else:
            super().__init__(*args, **kwargs)


class InvalidConfigurationError(IacKitError):
    """A builder received a value it cannot accept."""

    field_name: str
    value: Any

    def __init__(
        self, field_name: str, value: Any, reason: str, *, message: str | None = None
    ) -> None:
        """Instantiate class.

        Args:
            field_name: Name of the configuration field being set.
            value: The rejected value.
            reason: Why the value was rejected.
            message: Used in place of the generated error message.

        """
        self.field_name = field_name
        self.value = value
        self.message = message or f"{field_name} {reason}; got {value!r}"
        super().__init__()


class InvalidCommandError(InvalidConfigurationError):
    """Command is not a member of the tool's command enumeration."""

    command: str
    tool: str
    valid_commands: list[str]

    def __init__(self, command: Any, valid_commands: Iterable[str], tool: str) -> None:
        """Instantiate class.

        Args:
            command: The rejected command.
            valid_commands: Every command the tool accepts.
            tool: Name of the tool (e.g. ``terraform``).

        """
        self.command = str(command)
        self.tool = tool
        self.valid_commands = list(valid_commands)
        super().__init__(
            "command",
            command,
            "is invalid",
            message=f"Invalid {tool.capitalize()} command: {command}. "
            f"Valid commands are: {', '.join(self.valid_commands)}",
        )


class MissingCommandError(IacKitError):
    """``build()`` was called before a command was set."""

    tool: str

    def __init__(self, tool: str) -> None:
        """Instantiate class.

        Args:
            tool: Name of the tool whose builder is missing a command.

        """
        self.tool = tool
        self.message = (
            f"{tool.capitalize()} command is required. "
            "Use with_command() or a factory method."
        )
        super().__init__()


class UnknownFlagKeyError(IacKitError):
    """A semantic flag key is missing from the flag mapping table."""

    flag_key: str

    def __init__(self, flag_key: str) -> None:
        """Instantiate class.

        Args:
            flag_key: The semantic flag key that could not be found.

        """
        self.flag_key = flag_key
        self.message = f"Unknown Terragrunt flag key: {flag_key}"
        super().__init__()


class UnsupportedCommandError(IacKitError):
    """Command does not exist in the detected major version of the tool."""

    command: str
    major_version: int

    def __init__(self, command: str, major_version: int) -> None:
        """Instantiate class.

        Args:
            command: The command that was removed.
            major_version: Detected major version of the tool.

        """
        self.command = command
        self.major_version = major_version
        self.message = (
            f"Terragrunt command '{command}' was removed in v1.x and has no "
            f"equivalent (detected major version {major_version})"
        )
        super().__init__()


class RequiredInputError(IacKitError):
    """An input marked as required was not supplied."""

    name: str

    def __init__(self, name: str) -> None:
        """Instantiate class.

        Args:
            name: Name of the input.

        """
        self.name = name
        self.message = f"Input required and not supplied: {name}"
        super().__init__()


class InvalidInputError(IacKitError):
    """An input was supplied but could not be parsed."""

    name: str
    value: str

    def __init__(self, name: str, value: str, reason: str) -> None:
        """Instantiate class.

        Args:
            name: Name of the input.
            value: Raw value of the input.
            reason: Why the value could not be used.

        """
        self.name = name
        self.value = value
        self.message = f"Input {name} {reason}; got {value!r}"
        super().__init__()


class UnknownStepError(IacKitError):
    """A runner was asked to run a step it does not have."""

    available: list[str]
    runner: str
    step: str

    def __init__(self, runner: str, step: str, available: Iterable[str]) -> None:
        """Instantiate class.

        Args:
            runner: Name of the runner.
            step: The requested step.
            available: Steps the runner provides.

        """
        self.runner = runner
        self.step = step
        self.available = list(available)
        self.message = (
            f"Unknown step '{step}' for runner '{runner}'. "
            f"Available steps: {', '.join(self.available)}"
        )
        super().__init__()


class VersionDetectionError(IacKitError):
    """The installed version of a tool could not be determined."""

    tool: str

    def __init__(self, tool: str, reason: str) -> None:
        """Instantiate class.

        Args:
            tool: Name of the tool.
            reason: What went wrong.

        """
        self.tool = tool
        self.message = f"unable to detect {tool} version: {reason}"
        super().__init__()
