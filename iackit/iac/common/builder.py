"""Fluent builder shared by every IaC tool."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import TYPE_CHECKING, Any, ClassVar, Generic, Optional, TypeVar, cast

from ...exceptions import InvalidCommandError, MissingCommandError
from ...utils import add_unique, validate_positive_int, validate_string_input
from .commands import command_name

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from ...compat import Self

CommandTypeVar = TypeVar("CommandTypeVar", bound=Enum)
ServiceTypeVar = TypeVar("ServiceTypeVar")


class BaseIacBuilder(ABC, Generic[CommandTypeVar, ServiceTypeVar]):
    """Accumulate and validate IaC configuration, then build a service.

    Every ``with_*`` method validates its argument when it is called and
    returns the builder so calls can be chained. The command is the only
    required value and is checked by :meth:`build`.

    """

    COMMAND_TYPE: ClassVar[type[Enum]]
    """Enumeration of the commands the tool supports."""

    TOOL: ClassVar[str]
    """Name of the tool, used in error messages."""

    _command: Optional[CommandTypeVar]
    _working_directory: str
    _environment: dict[str, str]
    _variables: dict[str, str]
    _var_files: list[str]
    _backend_config: dict[str, str]
    _targets: list[str]
    _auto_approve: bool
    _dry_run: bool
    _no_color: bool
    _compact_warnings: bool
    _refresh: bool
    _reconfigure: bool
    _migrate_state: bool
    _plan_file: Optional[str]
    _out_file: Optional[str]
    _parallelism: Optional[int]
    _lock_timeout: Optional[str]

    def __init__(self) -> None:
        """Instantiate class.

        Use :meth:`create` or one of the ``for_*`` factories.

        """
        self.reset()

    @classmethod
    def create(cls, command: Optional[CommandTypeVar | str] = None) -> Self:
        """Create a builder, optionally setting the command.

        Args:
            command: Command to execute.

        """
        builder = cls()
        if command is not None:
            builder.with_command(command)
        return builder

    @abstractmethod
    def build(self) -> ServiceTypeVar:
        """Build a service from the accumulated configuration."""
        raise NotImplementedError

    @abstractmethod
    def _reset_specific(self) -> None:
        """Reset configuration that only exists for one tool."""
        raise NotImplementedError

    def _require_command(self) -> CommandTypeVar:
        """Return the command or raise if it was never set."""
        if self._command is None:
            raise MissingCommandError(self.TOOL)
        return self._command

    def with_command(self, command: CommandTypeVar | str) -> Self:
        """Set the command to execute.

        Raises:
            InvalidCommandError: The command is not supported by the tool.

        """
        try:
            self._command = cast("CommandTypeVar", self.COMMAND_TYPE(command_name(command)))
        except ValueError:
            raise InvalidCommandError(
                command, (i.value for i in self.COMMAND_TYPE), self.TOOL
            ) from None
        return self

    def with_working_directory(self, directory: str) -> Self:
        """Set the working directory of the process."""
        self._working_directory = validate_string_input(directory, "working directory")
        return self

    def with_environment_variable(self, key: str, value: str) -> Self:
        """Set one environment variable for the process."""
        validate_string_input(key, "environment variable key")
        self._environment[key] = value
        return self

    def with_environment_variables(self, variables: Mapping[str, str]) -> Self:
        """Set environment variables for the process."""
        for key, value in variables.items():
            self.with_environment_variable(key, value)
        return self

    def with_variable(self, key: str, value: str) -> Self:
        """Set one ``-var``; a repeated key replaces the previous value."""
        validate_string_input(key, "variable key")
        self._variables[key] = value
        return self

    def with_variables(self, variables: Mapping[str, str]) -> Self:
        """Set several ``-var`` values."""
        for key, value in variables.items():
            self.with_variable(key, value)
        return self

    def with_var_file(self, file_path: str) -> Self:
        """Add a ``-var-file``; adding the same file twice has no effect."""
        add_unique(self._var_files, validate_string_input(file_path, "var file path"))
        return self

    def with_var_files(self, file_paths: Iterable[str]) -> Self:
        """Add several ``-var-file`` entries."""
        for file_path in file_paths:
            self.with_var_file(file_path)
        return self

    def with_backend_config(self, key: str, value: str) -> Self:
        """Set one ``-backend-config`` value for ``init``."""
        validate_string_input(key, "backend config key")
        self._backend_config[key] = value
        return self

    def with_backend_configs(self, config: Mapping[str, str]) -> Self:
        """Set several ``-backend-config`` values."""
        for key, value in config.items():
            self.with_backend_config(key, value)
        return self

    def with_target(self, target: str) -> Self:
        """Add a ``-target``; adding the same target twice has no effect."""
        add_unique(self._targets, validate_string_input(target, "target"))
        return self

    def with_targets(self, targets: Iterable[str]) -> Self:
        """Add several ``-target`` entries."""
        for target in targets:
            self.with_target(target)
        return self

    def with_auto_approve(self) -> Self:
        """Skip interactive approval of ``apply`` and ``destroy``."""
        self._auto_approve = True
        return self

    def with_dry_run(self) -> Self:
        """Only display the command."""
        self._dry_run = True
        return self

    def with_plan_file(self, file_path: str) -> Self:
        """Set the plan file ``apply`` executes."""
        self._plan_file = validate_string_input(file_path, "plan file path")
        return self

    def with_out_file(self, file_path: str) -> Self:
        """Set the file ``plan`` writes to."""
        self._out_file = validate_string_input(file_path, "output file path")
        return self

    def with_no_color(self) -> Self:
        """Disable color output."""
        self._no_color = True
        return self

    def with_compact_warnings(self) -> Self:
        """Show warnings in a compact form."""
        self._compact_warnings = True
        return self

    def with_parallelism(self, level: int) -> Self:
        """Limit the number of concurrent operations.

        Raises:
            InvalidConfigurationError: ``level`` is not an integer of at least 1.

        """
        self._parallelism = validate_positive_int(level, "parallelism")
        return self

    def with_lock_timeout(self, timeout: str) -> Self:
        """Set how long to wait for a state lock (e.g. ``30s``)."""
        self._lock_timeout = validate_string_input(timeout, "lock timeout")
        return self

    def with_refresh(self) -> Self:
        """Refresh resources before planning (the default)."""
        self._refresh = True
        return self

    def without_refresh(self) -> Self:
        """Skip refreshing resources."""
        self._refresh = False
        return self

    def with_reconfigure(self) -> Self:
        """Ignore any saved backend configuration during ``init``."""
        self._reconfigure = True
        return self

    def with_migrate_state(self) -> Self:
        """Migrate state to a new backend during ``init``."""
        self._migrate_state = True
        return self

    def reset(self) -> Self:
        """Return the builder to its just-created state."""
        self._command = None
        self._working_directory = "."
        self._environment = {}
        self._variables = {}
        self._var_files = []
        self._backend_config = {}
        self._targets = []
        self._auto_approve = False
        self._dry_run = False
        self._no_color = False
        self._compact_warnings = False
        self._refresh = True
        self._reconfigure = False
        self._migrate_state = False
        self._plan_file = None
        self._out_file = None
        self._parallelism = None
        self._lock_timeout = None
        self._reset_specific()
        return self


def transfer_shared_state(builder: BaseIacBuilder[Any, Any]) -> dict[str, Any]:
    """Copy the shared configuration of a builder into provider keyword arguments.

    Collections are copied so the resulting provider shares no mutable state
    with the builder.

    """
    # pylint: disable=protected-access
    return {
        "working_directory": builder._working_directory,
        "environment": dict(builder._environment),
        "variables": dict(builder._variables),
        "var_files": tuple(builder._var_files),
        "backend_config": dict(builder._backend_config),
        "targets": tuple(builder._targets),
        "auto_approve": builder._auto_approve,
        "dry_run": builder._dry_run,
        "no_color": builder._no_color,
        "compact_warnings": builder._compact_warnings,
        "refresh": builder._refresh,
        "reconfigure": builder._reconfigure,
        "migrate_state": builder._migrate_state,
        "plan_file": builder._plan_file,
        "out_file": builder._out_file,
        "parallelism": builder._parallelism,
        "lock_timeout": builder._lock_timeout,
    }
