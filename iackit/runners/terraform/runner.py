"""Terraform runner."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, ClassVar, Optional

from ...iac.terraform import TerraformBuilder
from ..base import RunnerBase
from ..helpers import configure_shared_iac_builder, execute_iac_command, setup_tool_version
from .settings import get_settings

if TYPE_CHECKING:
    from collections.abc import Mapping

    from ...agents import AgentProtocol
    from ...version_manager import VersionInstaller, VersionResolver
    from ..base import RunnerResult


class TerraformRunner(RunnerBase):
    """Build and run Terraform commands."""

    name: ClassVar[str] = "terraform"

    def __init__(
        self,
        *,
        resolver: Optional[VersionResolver] = None,
        installer: Optional[VersionInstaller] = None,
    ) -> None:
        """Instantiate class.

        Args:
            resolver: Resolves the requested Terraform version. Without one,
                the binary on ``PATH`` is used.
            installer: Installs the resolved Terraform version.

        """
        super().__init__()
        self.installer = installer
        self.resolver = resolver

    @property
    def steps(self) -> Mapping[str, Callable[[AgentProtocol], RunnerResult]]:
        """Steps provided by the runner."""
        return {"execute": self.execute}

    def execute(self, agent: AgentProtocol) -> RunnerResult:
        """Build the Terraform command and run it."""
        settings = get_settings(agent)
        agent.info(f"Starting Terraform {settings.command} action...")
        setup_tool_version(
            agent,
            "Terraform",
            settings.terraform_version,
            settings.terraform_version_file,
            settings.working_directory,
            self.resolver,
            self.installer,
        )
        service = configure_shared_iac_builder(
            TerraformBuilder.create(settings.command), settings
        ).build()
        self.logger.verbose("built service: %s", service)
        return execute_iac_command(
            agent, f"Terraform {settings.command}", service, self.success, self.failure
        )
