"""Service shared by every IaC tool."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Generic, Optional, TypeVar

from .commands import command_name
from .formatter import IacStringFormatter
from .provider import IacProvider

if TYPE_CHECKING:
    from ...compat import Self
    from .arguments import CommandBuilder

ProviderTypeVar = TypeVar("ProviderTypeVar", bound=IacProvider)


class BaseIacService(ABC, Generic[ProviderTypeVar]):
    """Built, read-only view of an IaC command configuration.

    The service owns a frozen provider snapshot, one argument builder and one
    string formatter. Collection accessors return copies so callers can not
    change the configuration through them.

    """

    _argument_builder: CommandBuilder
    _formatter: IacStringFormatter
    _provider: ProviderTypeVar

    def __init__(self, provider: ProviderTypeVar) -> None:
        """Instantiate class.

        Args:
            provider: Configuration snapshot to render.

        """
        self._set_provider(provider)

    @abstractmethod
    def _create_argument_builder(self, provider: ProviderTypeVar) -> CommandBuilder:
        """Create the argument builder for this tool."""
        raise NotImplementedError

    @abstractmethod
    def _create_default_provider(self) -> ProviderTypeVar:
        """Create a provider holding only the current command and defaults."""
        raise NotImplementedError

    def _set_provider(self, provider: ProviderTypeVar) -> None:
        self._provider = provider
        self._argument_builder = self._create_argument_builder(provider)
        self._formatter = IacStringFormatter(self._argument_builder)

    @property
    def provider(self) -> ProviderTypeVar:
        """Copy of the configuration snapshot; changing it does not affect the service."""
        return self._provider.model_copy(deep=True)

    @property
    def command(self) -> str:
        """Name of the command to execute."""
        return command_name(self._provider.command)

    @property
    def executor(self) -> str:
        """Name of the binary that is invoked."""
        return self._provider.executor

    @property
    def working_directory(self) -> str:
        """Working directory for the process."""
        return self._provider.working_directory

    @property
    def environment(self) -> dict[str, str]:
        """Environment variables for the process."""
        return dict(self._provider.environment)

    @property
    def variables(self) -> dict[str, str]:
        """Values rendered as ``-var``."""
        return dict(self._provider.variables)

    @property
    def var_files(self) -> list[str]:
        """Files rendered as ``-var-file``."""
        return list(self._provider.var_files)

    @property
    def backend_config(self) -> dict[str, str]:
        """Values rendered as ``-backend-config``."""
        return dict(self._provider.backend_config)

    @property
    def targets(self) -> list[str]:
        """Resource addresses rendered as ``-target``."""
        return list(self._provider.targets)

    @property
    def auto_approve(self) -> bool:
        """Whether ``-auto-approve`` is set."""
        return self._provider.auto_approve

    @property
    def dry_run(self) -> bool:
        """Whether the command should only be displayed."""
        return self._provider.dry_run

    @property
    def plan_file(self) -> Optional[str]:
        """Plan file passed to ``apply``."""
        return self._provider.plan_file

    @property
    def out_file(self) -> Optional[str]:
        """File ``plan`` writes to."""
        return self._provider.out_file

    @property
    def no_color(self) -> bool:
        """Whether ``-no-color`` is set."""
        return self._provider.no_color

    @property
    def compact_warnings(self) -> bool:
        """Whether ``-compact-warnings`` is set."""
        return self._provider.compact_warnings

    @property
    def parallelism(self) -> Optional[int]:
        """Value of ``-parallelism``."""
        return self._provider.parallelism

    @property
    def lock_timeout(self) -> Optional[str]:
        """Value of ``-lock-timeout``."""
        return self._provider.lock_timeout

    @property
    def refresh(self) -> bool:
        """Whether resources are refreshed."""
        return self._provider.refresh

    @property
    def reconfigure(self) -> bool:
        """Whether ``-reconfigure`` is set."""
        return self._provider.reconfigure

    @property
    def migrate_state(self) -> bool:
        """Whether ``-migrate-state`` is set."""
        return self._provider.migrate_state

    def build_command(self) -> list[str]:
        """Return the full command including the executor and command."""
        return self._argument_builder.build_command()

    def to_command_args(self) -> list[str]:
        """Return only the arguments that follow the command."""
        return self._argument_builder.to_command_args()

    def to_string(self) -> str:
        """Return the command as a single shell-safe line."""
        return self._formatter.to_string()

    def to_string_multi_line_command(self) -> str:
        """Return the command as a backslash-continued block."""
        return self._formatter.to_string_multi_line_command()

    def to_string_list(self) -> list[str]:
        """Return the command as a list of tokens."""
        return self._formatter.to_string_list()

    def reset(self) -> Self:
        """Return every field except the command to its default value."""
        self._set_provider(self._create_default_provider())
        return self

    def clone(self) -> Self:
        """Create an independent service with the same configuration."""
        return self.__class__(self._provider.model_copy(deep=True))

    def __str__(self) -> str:
        """Return the command as a single shell-safe line."""
        return self.to_string()
