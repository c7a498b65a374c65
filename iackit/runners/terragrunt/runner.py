"""Terragrunt runner."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, ClassVar, Optional

from ...iac.terragrunt import TerragruntBuilder
from ...version_manager import is_v1_or_later
from ..base import RunnerBase
from ..helpers import configure_shared_iac_builder, execute_iac_command, setup_tool_version
from .settings import get_settings

if TYPE_CHECKING:
    from collections.abc import Mapping

    from ...agents import AgentProtocol
    from ...iac.terragrunt import TerragruntService
    from ...version_manager import VersionDetector, VersionInstaller, VersionResolver
    from ..base import RunnerResult
    from .settings import TerragruntSettings


class TerragruntRunner(RunnerBase):
    """Build and run Terragrunt commands.

    Terragrunt wraps Terraform so both tools are set up before the command is
    built. The installed Terragrunt major version selects the v0.x or v1.x
    spelling of flags and commands.

    """

    name: ClassVar[str] = "terragrunt"

    def __init__(
        self,
        *,
        terraform_resolver: Optional[VersionResolver] = None,
        terraform_installer: Optional[VersionInstaller] = None,
        terragrunt_resolver: Optional[VersionResolver] = None,
        terragrunt_installer: Optional[VersionInstaller] = None,
        detector: Optional[VersionDetector] = None,
        terragrunt_major_version: Optional[int] = None,
    ) -> None:
        """Instantiate class.

        Args:
            terraform_resolver: Resolves the requested Terraform version.
            terraform_installer: Installs the resolved Terraform version.
            terragrunt_resolver: Resolves the requested Terragrunt version.
            terragrunt_installer: Installs the resolved Terragrunt version.
            detector: Detects the installed Terragrunt version.
            terragrunt_major_version: Use this major version instead of
                detecting it. Without this or a detector, ``0`` is used.

        """
        super().__init__()
        self.detector = detector
        self.terraform_installer = terraform_installer
        self.terraform_resolver = terraform_resolver
        self.terragrunt_installer = terragrunt_installer
        self.terragrunt_major_version = terragrunt_major_version
        self.terragrunt_resolver = terragrunt_resolver

    @property
    def steps(self) -> Mapping[str, Callable[[AgentProtocol], RunnerResult]]:
        """Steps provided by the runner."""
        return {"execute": self.execute}

    def detect_major_version(self, agent: AgentProtocol) -> int:
        """Determine the major version of the installed Terragrunt."""
        if self.terragrunt_major_version is not None:
            return self.terragrunt_major_version
        if not self.detector:
            self.logger.verbose("no version detector; assuming v0.x")
            return 0
        detected = self.detector.detect(agent)
        label = "v1.x+ (new CLI)" if is_v1_or_later(detected) else "v0.x (classic CLI)"
        agent.info(f"Detected Terragrunt {detected.raw}: {label}")
        return detected.major

    def build_service(
        self, settings: TerragruntSettings, terragrunt_major_version: int
    ) -> TerragruntService:
        """Build the Terragrunt service from settings."""
        builder = configure_shared_iac_builder(
            TerragruntBuilder.create(settings.command), settings
        ).with_terragrunt_major_version(terragrunt_major_version)
        if settings.run_all:
            builder.with_run_all()
        if settings.terragrunt_config:
            builder.with_terragrunt_config(settings.terragrunt_config)
        if settings.terragrunt_working_dir:
            builder.with_terragrunt_working_dir(settings.terragrunt_working_dir)
        if settings.non_interactive:
            builder.with_non_interactive()
        if settings.no_auto_init:
            builder.with_no_auto_init()
        if settings.no_auto_retry:
            builder.with_no_auto_retry()
        if settings.terragrunt_parallelism is not None:
            builder.with_terragrunt_parallelism(settings.terragrunt_parallelism)
        if settings.include_dirs:
            builder.with_include_dirs(settings.include_dirs)
        if settings.exclude_dirs:
            builder.with_exclude_dirs(settings.exclude_dirs)
        if settings.ignore_dependency_errors:
            builder.with_ignore_dependency_errors()
        if settings.ignore_external_dependencies:
            builder.with_ignore_external_dependencies()
        if settings.include_external_dependencies:
            builder.with_include_external_dependencies()
        if settings.terragrunt_source:
            builder.with_terragrunt_source(settings.terragrunt_source)
        if settings.source_map:
            builder.with_source_maps(settings.source_map)
        if settings.download_dir:
            builder.with_download_dir(settings.download_dir)
        if settings.iam_role:
            if settings.iam_role_session_name:
                builder.with_iam_role_and_session(
                    settings.iam_role, settings.iam_role_session_name
                )
            else:
                builder.with_iam_role(settings.iam_role)
        if settings.strict_include:
            builder.with_strict_include()
        return builder.build()

    def execute(self, agent: AgentProtocol) -> RunnerResult:
        """Build the Terragrunt command and run it."""
        settings = get_settings(agent)
        label = f"Terragrunt {'run-all ' if settings.run_all else ''}{settings.command}"
        agent.info(f"Starting {label} action...")
        setup_tool_version(
            agent,
            "Terraform",
            settings.terraform_version,
            settings.terraform_version_file,
            settings.working_directory,
            self.terraform_resolver,
            self.terraform_installer,
        )
        setup_tool_version(
            agent,
            "Terragrunt",
            settings.terragrunt_version,
            settings.terragrunt_version_file,
            settings.working_directory,
            self.terragrunt_resolver,
            self.terragrunt_installer,
        )
        service = self.build_service(settings, self.detect_major_version(agent))
        self.logger.verbose("built service: %s", service)
        return execute_iac_command(agent, label, service, self.success, self.failure)
