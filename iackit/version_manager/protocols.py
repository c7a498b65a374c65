"""Version management protocols."""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Optional

from typing_extensions import Protocol, runtime_checkable

if TYPE_CHECKING:
    from ..agents import ToolAgentProtocol
    from .models import VersionSpec


@runtime_checkable
class VersionResolver(Protocol):
    """Turns a requested version into an exact version."""

    @abstractmethod
    def resolve(
        self, version: str, version_file: str, working_directory: str
    ) -> Optional[VersionSpec]:
        """Resolve a requested version.

        Args:
            version: Explicit version (``1.9.8``, ``latest``, ``skip``) or an
                empty string.
            version_file: Name of a version file (e.g. ``.terraform-version``)
                consulted when no explicit version was given.
            working_directory: Directory where the search for the version file
                starts.

        Returns:
            The resolved version or ``None`` to use the binary already on
            ``PATH``.

        """
        raise NotImplementedError


@runtime_checkable
class VersionInstaller(Protocol):
    """Installs an exact version of a tool."""

    @abstractmethod
    def install(self, version: str, agent: ToolAgentProtocol) -> str:
        """Install a version of the tool.

        Args:
            version: Exact version to install.
            agent: Agent used to report progress.

        Returns:
            Directory containing the installed binary.

        """
        raise NotImplementedError
